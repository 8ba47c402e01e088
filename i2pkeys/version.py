"""Version resolution from the installed distribution metadata."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _package_version

DISTRIBUTION_NAME = "i2pkeys-converter"


def _resolve_version(distribution: str = DISTRIBUTION_NAME) -> str:
    try:
        return _package_version(distribution)
    except PackageNotFoundError:
        # running from a source checkout that was never installed
        return "0.0.0"


__version__ = _resolve_version()


__all__ = ["__version__"]
