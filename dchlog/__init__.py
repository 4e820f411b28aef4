"""Debian changelog entry generator for git history."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("dchlog")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
