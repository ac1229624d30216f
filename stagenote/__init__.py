"""Staged change analysis for commit message generation."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("stagenote")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
