"""Your gitignore templates - save and reuse user-defined .gitignore files."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("your-gitignore-template")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"
