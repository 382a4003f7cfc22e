from . import log
from .constants import FrameworkIdentifiers, portable_profile_number
from .framework import NuGetFramework, parse
from .mappings import DefaultFrameworkMappings, PortableFrameworkMappings
from .objutils import memoize, memoize_method
from .versioning import parse_version, version_string

__all__ = ['default_provider', 'FrameworkNameProvider']

logger = log.getLogger(__name__)


def _fold(s):
    return s.casefold()


def _sort_key(fw):
    return (_fold(fw.framework), fw.version, _fold(fw.profile))


def _merge_classes(pairs, key=lambda x: x):
    # Group items connected by `pairs` into equivalence classes, returning a
    # dict from each item's key to its (frozen) class.
    classes = {}
    for a, b in pairs:
        merged = (classes.get(key(a), {a}) | classes.get(key(b), {b}))
        for i in merged:
            classes[key(i)] = merged
    return {k: frozenset(v) for k, v in classes.items()}


class FrameworkNameProvider:
    """Resolve the parts of a folder name using a set of mapping tables.

    All the lookup tables derived from the mappings are built lazily the first
    time they're needed, and are safe to build from several threads at once.
    """

    def __init__(self, mappings, portable_mappings=None):
        self.mappings = mappings
        if portable_mappings is None and isinstance(
                mappings, PortableFrameworkMappings):
            portable_mappings = mappings
        self.portable_mappings = portable_mappings

    @memoize_method
    def _identifiers(self):
        synonyms = {}
        for synonym, identifier in self.mappings.identifier_synonyms:
            synonyms[_fold(synonym)] = identifier

        short_names = {}
        to_short = {}
        for identifier, short in self.mappings.identifier_short_names:
            short_names.setdefault(_fold(short), identifier)
            to_short.setdefault(_fold(identifier), short)

        canonical = {}
        for identifier in (list(synonyms.values()) +
                           list(short_names.values())):
            canonical.setdefault(_fold(identifier), identifier)

        return synonyms, short_names, canonical, to_short

    @memoize_method
    def _single_digit_identifiers(self):
        return frozenset(_fold(i) for i in
                         self.mappings.single_digit_version_frameworks)

    @memoize_method
    def _profiles(self):
        from_short = {}
        to_short = {}
        for profile, short in self.mappings.profile_short_names:
            from_short.setdefault(_fold(short), profile)
            to_short.setdefault(_fold(profile), short)

        def key(x):
            return (_fold(x[0]), _fold(x[1]))

        pairs = (((identifier, a), (identifier, b)) for identifier, a, b in
                 self.mappings.equivalent_profiles)
        return from_short, to_short, _merge_classes(pairs, key)

    @memoize_method
    def _equivalent_frameworks(self):
        return _merge_classes(self.mappings.equivalent_frameworks)

    @memoize_method
    def _optional_identifiers(self):
        if self.portable_mappings is None:
            return frozenset()
        return frozenset(_fold(i.framework) for i in
                         self.portable_mappings.optional_frameworks)

    @memoize_method
    def _portable_profiles(self):
        by_number = {}
        by_key = {}
        if self.portable_mappings is None:
            return by_number, by_key

        for number, frameworks in sorted(
                self.portable_mappings.profile_frameworks):
            by_number[number] = tuple(frameworks)
            key = self._profile_key(frameworks)
            if key in by_key:
                logger.debug('portable profile {} duplicates profile {}'
                             .format(number, by_key[key]))
                continue
            by_key[key] = number
        return by_number, by_key

    def _canonical_framework(self, framework):
        equivalents = self._equivalent_frameworks().get(framework)
        if not equivalents:
            return framework
        return min(equivalents, key=_sort_key)

    def _is_optional(self, framework):
        return _fold(framework.framework) in self._optional_identifiers()

    def _profile_key(self, frameworks):
        return frozenset(self._canonical_framework(i) for i in frameworks
                         if not self._is_optional(i))

    def get_identifier(self, token):
        """Return the canonical identifier for `token` (a synonym, short name,
        or identifier), or None if it's unknown."""
        if not token:
            return None
        key = _fold(token)
        synonyms, short_names, canonical, _ = self._identifiers()
        for table in (synonyms, short_names, canonical):
            if key in table:
                return table[key]
        return None

    def get_short_identifier(self, identifier):
        return self._identifiers()[3].get(_fold(identifier))

    def get_version(self, token):
        return parse_version(token)

    def get_version_string(self, version, identifier=None):
        single_digit = (identifier is not None and
                        _fold(identifier) in self._single_digit_identifiers())
        return version_string(version, single_digit)

    def get_profile(self, token):
        return self._profiles()[0].get(_fold(token), token)

    def get_short_profile(self, profile):
        return self._profiles()[1].get(_fold(profile), profile)

    def get_portable_frameworks(self, code):
        """Return the frameworks making up the portable profile `code`, either
        "ProfileN" or a "+"-separated list of short folder names like
        "net45+win8". Returns None if `code` can't be resolved."""

        if not code:
            return None

        number = portable_profile_number(code)
        if number is not None:
            frameworks = self._portable_profiles()[0].get(number)
            if frameworks is None:
                logger.debug('unknown portable profile {}'.format(number))
                return None
            return list(frameworks)

        result = []
        for name in code.split('+'):
            fw = parse(name, self)
            if ( not fw.is_specific_framework or
                 _fold(fw.framework) == _fold(FrameworkIdentifiers.PORTABLE) ):
                logger.debug('invalid portable constituent {!r}'.format(name))
                return None
            if fw not in result:
                result.append(fw)
        return result

    def get_portable_profile(self, frameworks):
        """Return the number of the portable profile consisting of exactly
        `frameworks`, or None."""
        key = self._profile_key(frameworks)
        if not key:
            return None
        return self._portable_profiles()[1].get(key)

    def get_equivalent_frameworks(self, framework):
        equivalents = self._equivalent_frameworks().get(framework, ())
        return {i for i in equivalents if i != framework}

    def get_equivalent_profiles(self, framework):
        key = (_fold(framework.framework), _fold(framework.profile))
        profiles = self._profiles()[2].get(key, ())
        return {NuGetFramework(framework.framework, framework.version, p)
                for _, p in profiles if _fold(p) != key[1]}


@memoize
def default_provider():
    return FrameworkNameProvider(DefaultFrameworkMappings())
