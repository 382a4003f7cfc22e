import re

__all__ = ['FRAMEWORK_REGEX', 'FrameworkIdentifiers',
           'PORTABLE_PROFILE_PREFIX', 'portable_profile_number',
           'portable_profile_string']


class FrameworkIdentifiers:
    PORTABLE = 'Portable'
    ANY = 'Any'
    UNSUPPORTED = 'Unsupported'


# A folder name is an identifier made of letters, an optional version made of
# digits and dots, and an optional "-"-prefixed profile. Portable profiles
# join several short folder names with "+".
FRAMEWORK_REGEX = re.compile(
    r'(?P<framework>[A-Za-z]+)'
    r'(?P<version>[0-9]+(?:\.[0-9]+)*)?'
    r'(?P<profile>-[A-Za-z0-9]+(?:[+.][A-Za-z0-9]+)*)?'
)

PORTABLE_PROFILE_PREFIX = 'Profile'
_portable_profile_ex = re.compile(PORTABLE_PROFILE_PREFIX + r'(\d+)', re.I)


def portable_profile_string(number):
    return '{}{}'.format(PORTABLE_PROFILE_PREFIX, number)


def portable_profile_number(profile):
    """Return the number in a profile like "Profile7", or None."""
    m = _portable_profile_ex.fullmatch(profile or '')
    return int(m.group(1)) if m else None
