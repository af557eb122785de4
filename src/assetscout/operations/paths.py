"""Package path resolution."""

import os
from pathlib import Path

from assetscout.config import Config
from assetscout.config import plural
from assetscout.exceptions import ConfigError

CUSTOM_DIR = "custom"


class PathResolver:
    """Resolve package names to directories under the configured root."""

    def __init__(self, config: Config, base_dir: Path | None = None):
        """Create a resolver.

        Args:
            config: Loaded configuration
            base_dir: Directory the build runs from. Defaults to the current
                working directory. Output paths are relative to it.
        """
        self.config = config
        if base_dir is None:
            base_dir = Path.cwd()
        # Absolute but unresolved, so symlinked roots keep their own names
        self.base_dir = Path(os.path.abspath(base_dir))

    def resolve_root(self) -> Path:
        """Get the absolute path of the configured root.

        Raises:
            ConfigError: If the root does not exist or is not a directory
        """
        # Normalised only; symlinks are kept
        root = Path(os.path.abspath(self.base_dir / self.config.root))
        if not root.is_dir():
            raise ConfigError(f"Drupal root not detected at: {self.config.root}")
        return root

    def custom_packages_dir(self, package_type: str) -> Path:
        """Get <root>/<type>s/custom, relative to base_dir."""
        custom_dir = self.resolve_root() / plural(package_type) / CUSTOM_DIR
        return self.relative(custom_dir)

    def package_path(self, package_type: str, name: str) -> Path:
        """Get the directory of a custom package, relative to base_dir.

        The path is not checked for existence.
        """
        return self.custom_packages_dir(package_type) / name

    def list_packages(self, package_type: str) -> list[str]:
        """List package names found on disk for a type.

        Returns:
            Sorted directory names, or an empty list if the custom packages
            directory does not exist
        """
        custom_dir = self.base_dir / self.custom_packages_dir(package_type)
        if not custom_dir.is_dir():
            return []
        return sorted(child.name for child in custom_dir.iterdir() if child.is_dir())

    def relative(self, path: Path) -> Path:
        """Express path relative to base_dir, walking up if needed."""
        return path.relative_to(self.base_dir, walk_up=True)
