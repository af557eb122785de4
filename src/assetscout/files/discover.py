"""Asset file discovery and chunk key computation."""

from pathlib import Path

from assetscout.models import Entries

MINIFIED_SUFFIX = ".min.js"
PRIVATE_PREFIX = "_"


def discover_files(directory: Path, extension: str) -> list[Path]:
    """Discover all files ending with extension below directory.

    Args:
        directory: Directory to scan recursively (may not exist)
        extension: Required file name ending, including the leading dot

    Returns:
        Sorted list of paths relative to directory. Symlinked directories are
        listed by walk() but never traversed, so link cycles cannot loop.
    """
    files = []
    for dirpath, dirnames, filenames in directory.walk():
        for filename in filenames:
            full_path = dirpath / filename
            # walk() lists symlinked directories as files
            if filename.endswith(extension) and full_path.is_file():
                files.append(full_path.relative_to(directory))

    return sorted(files)


def is_eligible(filename: str, skip_underscore_files: bool) -> bool:
    """Check whether a matched file should become an entry.

    Already-built .min.js files are always rejected. Files starting with an
    underscore are partials and are rejected when skip_underscore_files is set.
    """
    if filename.endswith(MINIFIED_SUFFIX):
        return False
    if skip_underscore_files and filename.startswith(PRIVATE_PREFIX):
        return False
    return True


def as_entry_path(path: Path) -> str:
    """Format a source path so a bundler treats it as relative, not a package."""
    if path.is_absolute():
        return path.as_posix()
    return f"./{path.as_posix()}"


def match_files(
    package_dir: Path,
    source: str,
    destination: str,
    extension: str,
    skip_underscore_files: bool = True,
    base_dir: Path | None = None,
) -> Entries:
    """Build entries for one asset category of a package.

    Args:
        package_dir: Package directory (as it should appear in the output)
        source: Sub-path of package_dir to scan
        destination: Sub-path of package_dir the chunk keys point at
        extension: File extension to match, including the leading dot
        skip_underscore_files: Ignore files whose name starts with "_"
        base_dir: Directory a relative package_dir is relative to. Defaults
            to the current working directory.

    Returns:
        Mapping of chunk key to source paths. A chunk key is the file's path
        relative to package_dir/source, extension stripped, placed under
        package_dir/destination. Empty when nothing matches or the source
        directory does not exist.
    """
    source_dir = package_dir / source
    destination_dir = package_dir / destination

    entries: Entries = {}
    scan_dir = base_dir / source_dir if base_dir is not None else source_dir
    for rel_path in discover_files(scan_dir, extension):
        if not is_eligible(rel_path.name, skip_underscore_files):
            continue

        rel_posix = rel_path.as_posix()
        stem = rel_posix[: len(rel_posix) - len(extension)]
        chunk = (destination_dir / stem).as_posix()
        entries.setdefault(chunk, []).append(as_entry_path(source_dir / rel_path))

    return entries
