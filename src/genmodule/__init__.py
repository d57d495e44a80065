"""genmodule: VIPER module skeleton generator for Swift projects."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("genmodule")
except PackageNotFoundError:
    __version__ = "0.0.0"
