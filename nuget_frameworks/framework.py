import re

from . import log
from .comparers import FullComparer, NameComparer, ProfileComparer
from .constants import (FRAMEWORK_REGEX, FrameworkIdentifiers,
                        portable_profile_string)
from .versioning import normalize_version

__all__ = ['ANY_FRAMEWORK', 'EMPTY_FRAMEWORK', 'NuGetFramework', 'parse',
           'parse_framework_name', 'UNSUPPORTED_FRAMEWORK']

logger = log.getLogger(__name__)

_full_name_ex = re.compile(
    r'(?P<framework>[^,]*?)\s*,\s*Version=v?(?P<version>\d+(?:\.\d+){0,3})'
    r'(?:\s*,\s*Profile=(?P<profile>[^,]*?))?\s*'
)


def _is_portable(identifier):
    return identifier.casefold() == FrameworkIdentifiers.PORTABLE.casefold()


def _get_provider(provider):
    if provider is None:
        from .provider import default_provider
        return default_provider()
    return provider


class NuGetFramework:
    """A target framework: an identifier, a four-part version, and a profile.

    Instances are immutable. Equality and hashing use the full comparer, so
    identifiers and profiles are compared case-insensitively."""

    __slots__ = ('_framework', '_version', '_profile')

    comparer = FullComparer()
    framework_name_comparer = NameComparer()
    framework_profile_comparer = ProfileComparer()

    def __init__(self, framework, version=None, profile=None):
        self._framework = framework
        self._version = normalize_version(version)
        self._profile = profile or ''

    @property
    def framework(self):
        return self._framework

    @property
    def version(self):
        return self._version

    @property
    def profile(self):
        return self._profile

    @property
    def full_framework_name(self):
        v = self.version
        version = 'Version=v{}.{}'.format(v.major, v.minor)
        if v.build > 0 or v.revision > 0:
            version += '.{}'.format(v.build)
            if v.revision > 0:
                version += '.{}'.format(v.revision)

        parts = [self.framework, version]
        if self.profile:
            parts.append('Profile={}'.format(self.profile))
        return ', '.join(parts)

    @property
    def is_pcl(self):
        return self.version.major == 0 and _is_portable(self.framework)

    @property
    def all_versions(self):
        # An all-zero version means "any version of this framework" (e.g. a
        # bare "net" folder).
        return not any(self.version)

    @property
    def is_unsupported(self):
        return self == UNSUPPORTED_FRAMEWORK

    @property
    def is_empty(self):
        return self == EMPTY_FRAMEWORK

    @property
    def is_any(self):
        return self == ANY_FRAMEWORK

    @property
    def is_specific_framework(self):
        return not (self.is_empty or self.is_any or self.is_unsupported)

    def get_short_folder_name(self, provider=None):
        provider = _get_provider(provider)

        identifier = (provider.get_short_identifier(self.framework) or
                      self.framework.lower())
        version = provider.get_version_string(self.version, self.framework)

        if _is_portable(self.framework):
            frameworks = provider.get_portable_frameworks(self.profile)
            if frameworks:
                names = sorted(i.get_short_folder_name(provider)
                               for i in frameworks)
                return '{}{}-{}'.format(identifier, version, '+'.join(names))

        result = identifier + version
        if self.profile:
            result += '-' + provider.get_short_profile(self.profile)
        return result

    def __eq__(self, rhs):
        if not isinstance(rhs, NuGetFramework):
            return NotImplemented
        return self.comparer.equals(self, rhs)

    def __hash__(self):
        return self.comparer.hash(self)

    def __str__(self):
        return self.full_framework_name

    def __repr__(self):
        return '<NuGetFramework({!r})>'.format(self.full_framework_name)

    @staticmethod
    def parse(folder_name, provider=None):
        return parse(folder_name, provider)

    @staticmethod
    def parse_framework_name(full_name):
        return parse_framework_name(full_name)


UNSUPPORTED_FRAMEWORK = NuGetFramework(FrameworkIdentifiers.UNSUPPORTED)
EMPTY_FRAMEWORK = NuGetFramework('')
ANY_FRAMEWORK = NuGetFramework(FrameworkIdentifiers.ANY)

NuGetFramework.UnsupportedFramework = UNSUPPORTED_FRAMEWORK
NuGetFramework.EmptyFramework = EMPTY_FRAMEWORK
NuGetFramework.AnyFramework = ANY_FRAMEWORK


def parse(folder_name, provider=None):
    """Create a framework from a folder name like "net45" or "net40-client".

    Folder names that aren't frameworks produce `UNSUPPORTED_FRAMEWORK`
    rather than raising, so callers can scan arbitrary directories."""

    if folder_name is None:
        raise TypeError('folder_name must be a string, not None')
    provider = _get_provider(provider)

    m = FRAMEWORK_REGEX.fullmatch(folder_name)
    if not m:
        logger.debug('not a framework folder: {!r}'.format(folder_name))
        return UNSUPPORTED_FRAMEWORK

    identifier = provider.get_identifier(m.group('framework'))
    if not identifier:
        logger.debug('unknown framework identifier {!r} in {!r}'
                     .format(m.group('framework'), folder_name))
        return UNSUPPORTED_FRAMEWORK

    version = provider.get_version(m.group('version') or '')
    if version is None:
        logger.debug('invalid version {!r} in {!r}'
                     .format(m.group('version'), folder_name))
        return UNSUPPORTED_FRAMEWORK

    short_profile = (m.group('profile') or '').lstrip('-')
    if not _is_portable(identifier):
        return NuGetFramework(identifier, version,
                              provider.get_profile(short_profile))

    frameworks = provider.get_portable_frameworks(short_profile)
    number = (provider.get_portable_profile(frameworks) if frameworks
              else None)
    if number is None:
        logger.debug('unknown portable profile {!r} in {!r}'
                     .format(short_profile, folder_name))
        return UNSUPPORTED_FRAMEWORK
    return NuGetFramework(identifier, version, portable_profile_string(number))


def parse_framework_name(full_name):
    """Create a framework from its full name, as produced by
    `NuGetFramework.full_framework_name`."""

    m = _full_name_ex.fullmatch(full_name)
    if not m:
        raise ValueError('invalid framework name {!r}'.format(full_name))
    return NuGetFramework(m.group('framework'), m.group('version'),
                          m.group('profile'))
