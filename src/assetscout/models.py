"""Data models for assetscout."""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Self

# chunk key -> ordered source paths ("./web/modules/custom/foo/js/a.js")
Entries = dict[str, list[str]]

WILDCARD = "*"


@dataclass(frozen=True)
class AssetCategory:
    """One class of files to discover inside a package."""

    source: str  # Sub-path inside the package to scan
    destination: str  # Sub-path inside the package the chunk keys point at
    extension: str  # File extension including the leading dot


@dataclass(frozen=True)
class PackagePlan:
    """How to discover assets for one package type."""

    categories: tuple[AssetCategory, ...]
    nested_dir: str | None = None  # Sub-package directory to recurse into


@dataclass(frozen=True)
class PackageRef:
    """A (type, name) pair, optionally pinned to a known path."""

    type: str
    name: str
    path: Path | None = None  # Set during recursion, never re-derived


@dataclass(frozen=True)
class Selection:
    """What to build for one invocation.

    Precedence: a name (with its type) builds one package; a type alone builds
    that type's configured packages; nothing builds every configured type.
    discover_all replaces the configured policy with everything on disk.
    """

    package_name: str | None = None
    package_type: str | None = None
    discover_all: bool = False

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> Self:
        """Create from a raw option mapping.

        Args:
            options: Mapping with any of module, theme, modules, themes, all,
                packageName, packageType

        Returns:
            Selection following the type-specific flags first, then the
            generic packageName/packageType pair
        """
        if options.get("module"):
            return cls(package_name=options["module"], package_type="module")
        if options.get("theme"):
            return cls(package_name=options["theme"], package_type="theme")
        if options.get("modules"):
            return cls(package_type="module", discover_all=True)
        if options.get("themes"):
            return cls(package_type="theme", discover_all=True)
        if options.get("all"):
            return cls(discover_all=True)
        return cls(
            package_name=options.get("packageName"),
            package_type=options.get("packageType"),
        )
