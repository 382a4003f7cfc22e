import unittest

from nuget_frameworks.mappings import YamlFrameworkMappings
from nuget_frameworks.provider import FrameworkNameProvider

__all__ = ['make_provider', 'TestCase']


def make_provider(**data):
    return FrameworkNameProvider(YamlFrameworkMappings(data))


class TestCase(unittest.TestCase):
    def assertFrameworkEqual(self, fw, framework, version=(0, 0, 0, 0),
                             profile='', msg=None):
        self.assertEqual((fw.framework, tuple(fw.version), fw.profile),
                         (framework, tuple(version), profile), msg)
