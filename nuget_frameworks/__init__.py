from .app_version import version as __version__  # noqa: F401
from .comparers import (ComparerKey, FullComparer, NameComparer,  # noqa: F401
                        ProfileComparer)
from .framework import (ANY_FRAMEWORK, EMPTY_FRAMEWORK,  # noqa: F401
                        NuGetFramework, UNSUPPORTED_FRAMEWORK, parse,
                        parse_framework_name)
from .provider import FrameworkNameProvider, default_provider  # noqa: F401
from .versioning import Version4, normalize_version  # noqa: F401
