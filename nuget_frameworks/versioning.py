import re
from collections import namedtuple
from packaging.version import InvalidVersion, Version as PythonVersion

__all__ = ['EMPTY_VERSION', 'normalize_version', 'parse_version',
           'Version4', 'version_string']

_digits_ex = re.compile(r'\d{1,4}')
_dotted_ex = re.compile(r'\d+(\.\d+){0,3}')


class Version4(namedtuple('Version4', ['major', 'minor', 'build',
                                       'revision'])):
    __slots__ = ()

    def __str__(self):
        return '.'.join(str(i) for i in self)


EMPTY_VERSION = Version4(0, 0, 0, 0)


def _coerce(component):
    try:
        return max(int(component), 0)
    except (TypeError, ValueError):
        return 0


def normalize_version(version):
    """Coerce `version` into a `Version4` with no negative components.

    `version` may be None, a `Version4` (or any other sequence of integers), a
    `packaging.version.Version`, or a dotted version string. Only the first
    four components are kept. Components that are missing, negative, or not
    integers become 0, and a string that isn't a version becomes 0.0.0.0."""

    if version is None:
        return EMPTY_VERSION
    if isinstance(version, str):
        try:
            version = PythonVersion(version)
        except InvalidVersion:
            return EMPTY_VERSION
    if isinstance(version, PythonVersion):
        version = version.release

    try:
        parts = list(version)[:4]
    except TypeError:
        return EMPTY_VERSION
    parts += [0] * (4 - len(parts))
    return Version4(*(_coerce(i) for i in parts))


def parse_version(token):
    """Resolve the version part of a folder name, like "45" or "4.5.1".

    Returns None if the token can't be understood; an empty token means "no
    version" and produces all zeroes."""

    if not token:
        return EMPTY_VERSION

    if '.' not in token:
        # Each digit is its own component: "451" is 4.5.1.
        if not _digits_ex.fullmatch(token):
            return None
        return normalize_version(int(i) for i in token)

    if not _dotted_ex.fullmatch(token):
        return None
    return normalize_version(PythonVersion(token))


def version_string(version, single_digit=False):
    """Render `version` in its short folder-name form (4.5.1 -> "451").

    Trailing zeroes are dropped down to `major.minor`, or down to just `major`
    if `single_digit` is true and the major version is a single digit (8.0 ->
    "8"). Versions with a component over 9 are dotted (10.0 -> "10.0")."""

    version = normalize_version(version)
    if version == EMPTY_VERSION:
        return ''

    parts = list(version)
    while len(parts) > 2 and parts[-1] == 0:
        parts.pop()

    if all(i < 10 for i in parts):
        if single_digit and len(parts) == 2 and parts[1] == 0:
            parts.pop()
        return ''.join(str(i) for i in parts)
    return '.'.join(str(i) for i in parts)
