"""Filesystem operations for assetscout."""

from assetscout.files.discover import discover_files
from assetscout.files.discover import match_files

__all__ = [
    "discover_files",
    "match_files",
]
