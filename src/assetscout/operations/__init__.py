"""High-level operations for assetscout."""

from assetscout.operations.build import EntryBuilder
from assetscout.operations.build import build_entries
from assetscout.operations.paths import PathResolver

__all__ = [
    "EntryBuilder",
    "PathResolver",
    "build_entries",
]
