"""Entry mapping merge operations."""

from collections.abc import Iterable

from assetscout.models import Entries


def merge_entries(first: Entries, second: Entries) -> Entries:
    """Merge two entry mappings into a new one.

    Args:
        first: Accumulated entries
        second: Entries to add

    Returns:
        New mapping with every key from both. For keys in both, the source
        lists are concatenated with first's paths before second's. Neither
        input is modified.
    """
    merged = {chunk: list(paths) for chunk, paths in first.items()}
    for chunk, paths in second.items():
        merged.setdefault(chunk, []).extend(paths)
    return merged


def merge_all(mappings: Iterable[Entries]) -> Entries:
    """Fold any number of entry mappings left to right."""
    merged: Entries = {}
    for entries in mappings:
        merged = merge_entries(merged, entries)
    return merged
