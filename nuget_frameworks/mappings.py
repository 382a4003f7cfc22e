import importlib_metadata as metadata
import importlib_resources
import os
import yaml

from .exceptions import MappingError, UnknownMappingsError
from .framework import parse_framework_name
from .objutils import memoize

__all__ = ['DefaultFrameworkMappings', 'FrameworkMappings', 'get_mappings',
           'list_mappings', 'PortableFrameworkMappings',
           'YamlFrameworkMappings']


class FrameworkMappings:
    """The raw mapping tables used to resolve framework names.

    Only one direction of each mapping needs to be supplied; the name provider
    builds the reverse lookups itself."""

    @property
    def identifier_synonyms(self):
        """(synonym, identifier) pairs, e.g. ("NETFramework",
        ".NETFramework")."""
        raise NotImplementedError()

    @property
    def identifier_short_names(self):
        """(identifier, short name) pairs, e.g. (".NETFramework", "net")."""
        raise NotImplementedError()

    @property
    def profile_short_names(self):
        """(profile, short name) pairs, e.g. ("WindowsPhone", "wp")."""
        raise NotImplementedError()

    @property
    def equivalent_frameworks(self):
        """Pairs of interchangeable frameworks, e.g. Windows 8.0 and .NETCore
        4.5."""
        raise NotImplementedError()

    @property
    def equivalent_profiles(self):
        """(identifier, profile, profile) triples, e.g. ("Silverlight",
        "WindowsPhone71", "WindowsPhone")."""
        raise NotImplementedError()

    @property
    def single_digit_version_frameworks(self):
        """Identifiers whose short folder names drop a trailing ".0" from the
        version, e.g. "win8" rather than "win80"."""
        return ()


class PortableFrameworkMappings:
    @property
    def profile_frameworks(self):
        """(profile number, frameworks) pairs."""
        raise NotImplementedError()

    @property
    def optional_frameworks(self):
        """Frameworks that can be named in a portable folder without affecting
        its profile. These match any version."""
        raise NotImplementedError()


def _check_type(value, kind, section, what):
    if not isinstance(value, kind):
        raise MappingError('{}: expected {}; but got {}'.format(
            section, what, type(value).__name__
        ))
    return value


def _string_pairs(data, section):
    values = _check_type(data.get(section) or {}, dict, section, 'a mapping')
    return tuple((_check_type(k, str, section, 'a string'),
                  _check_type(v, str, section, 'a string'))
                 for k, v in values.items())


def _framework(value, section):
    _check_type(value, str, section, 'a framework name')
    try:
        return parse_framework_name(value)
    except ValueError as e:
        raise MappingError('{}: {}'.format(section, e))


def _framework_list(value, section):
    return tuple(_framework(i, section) for i in
                 _check_type(value, list, section, 'a list'))


class YamlFrameworkMappings(FrameworkMappings, PortableFrameworkMappings):
    """Mapping tables read from a YAML document. See `data/mappings.yaml` for
    the layout."""

    def __init__(self, data, filename=None):
        self.filename = filename
        data = _check_type(data or {}, dict, filename or '<mappings>',
                           'a mapping')

        self._identifier_synonyms = _string_pairs(data, 'identifier_synonyms')
        self._identifier_short_names = _string_pairs(
            data, 'identifier_short_names'
        )
        self._profile_short_names = _string_pairs(data, 'profile_short_names')

        section = 'single_digit_version_frameworks'
        self._single_digit_version_frameworks = tuple(
            _check_type(i, str, section, 'a string') for i in
            _check_type(data.get(section) or [], list, section, 'a list')
        )

        section = 'equivalent_frameworks'
        self._equivalent_frameworks = []
        for i in _check_type(data.get(section) or [], list, section, 'a list'):
            pair = _framework_list(i, section)
            if len(pair) != 2:
                raise MappingError('{}: expected a pair of frameworks'
                                   .format(section))
            self._equivalent_frameworks.append(pair)

        section = 'equivalent_profiles'
        self._equivalent_profiles = []
        for i in _check_type(data.get(section) or [], list, section, 'a list'):
            if ( not isinstance(i, list) or len(i) != 3 or
                 not all(isinstance(j, str) for j in i) ):
                raise MappingError('{}: expected [identifier, profile, '
                                   'profile]'.format(section))
            self._equivalent_profiles.append(tuple(i))

        section = 'optional_frameworks'
        self._optional_frameworks = _framework_list(
            data.get(section) or [], section
        )

        section = 'portable_profiles'
        self._profile_frameworks = []
        profiles = _check_type(data.get(section) or {}, dict, section,
                               'a mapping')
        for number, frameworks in profiles.items():
            _check_type(number, int, section, 'a profile number')
            self._profile_frameworks.append(
                (number, _framework_list(frameworks, section))
            )

    @classmethod
    def load(cls, filename):
        with open(filename) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise MappingError('{}: {}'.format(filename, e))
        return cls(data, filename)

    @property
    def identifier_synonyms(self):
        return self._identifier_synonyms

    @property
    def identifier_short_names(self):
        return self._identifier_short_names

    @property
    def profile_short_names(self):
        return self._profile_short_names

    @property
    def single_digit_version_frameworks(self):
        return self._single_digit_version_frameworks

    @property
    def equivalent_frameworks(self):
        return tuple(self._equivalent_frameworks)

    @property
    def equivalent_profiles(self):
        return tuple(self._equivalent_profiles)

    @property
    def profile_frameworks(self):
        return tuple(self._profile_frameworks)

    @property
    def optional_frameworks(self):
        return self._optional_frameworks


class DefaultFrameworkMappings(YamlFrameworkMappings):
    resource = 'mappings.yaml'

    def __init__(self):
        source = (importlib_resources.files('nuget_frameworks') / 'data' /
                  self.resource)
        super().__init__(yaml.safe_load(source.read_text()), str(source))


@memoize
def list_mappings():
    return {i.name: i for i in
            metadata.entry_points(group='nuget_frameworks.mappings')}


def get_mappings(name):
    """Return the mappings registered as `name`, or those in the YAML file
    `name` refers to."""

    entry = list_mappings().get(name)
    if entry is not None:
        return entry.load()()
    if os.path.isfile(name):
        return YamlFrameworkMappings.load(name)
    raise UnknownMappingsError('unknown mappings {!r}'.format(name))
