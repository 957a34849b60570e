from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pybuildzig")
except PackageNotFoundError:
    __version__ = "0.0.0"

from pybuildzig.build import Build, ResolvedBuild
from pybuildzig.context import HostContext
from pybuildzig.errors import BuildError
from pybuildzig.types import LibType, Opt

__all__ = [
    "Build",
    "BuildError",
    "HostContext",
    "LibType",
    "Opt",
    "ResolvedBuild",
    "__version__",
]
