"""Entry construction for packages and package selections."""

from difflib import get_close_matches
from pathlib import Path

from assetscout.config import Config
from assetscout.entries import merge_all
from assetscout.entries import merge_entries
from assetscout.exceptions import AssetScoutError
from assetscout.exceptions import MissingPackageWarning
from assetscout.files import match_files
from assetscout.models import WILDCARD
from assetscout.models import Entries
from assetscout.models import PackageRef
from assetscout.models import Selection
from assetscout.operations.paths import PathResolver
from assetscout.output import ConsoleReporter
from assetscout.output import Reporter


class EntryBuilder:
    """Build bundler entry mappings from custom packages."""

    def __init__(
        self,
        config: Config,
        reporter: Reporter | None = None,
        base_dir: Path | None = None,
    ):
        """Create a builder.

        Args:
            config: Loaded configuration
            reporter: Where warnings go. Defaults to the console.
            base_dir: Directory the build runs from. Defaults to the current
                working directory.
        """
        self.config = config
        self.reporter = reporter if reporter is not None else ConsoleReporter()
        self.paths = PathResolver(config, base_dir)

    def build_package_entries(
        self, name: str, package_type: str, path: Path | None = None
    ) -> Entries:
        """Build entries for one package and its nested sub-packages.

        Args:
            name: Package machine name
            package_type: Package type, e.g. "module" or "theme"
            path: Package directory, if already known. Skips name resolution.

        Returns:
            Entries for every asset category of the package type. Empty if the
            package does not exist (a warning is reported instead).

        Raises:
            ConfigError: If package_type has no plan or the root is missing
        """
        return self._build(PackageRef(package_type, name, path), visited=set())

    def build_entry_set(self, selection: Selection) -> Entries:
        """Build entries for a selection.

        Args:
            selection: What to build. A name with a type builds one package,
                a type alone builds that type's configured packages, and an
                empty selection builds every type with a plan, each following
                its policy (no policy means everything on disk).

        Returns:
            Merged entries for all selected packages

        Raises:
            ConfigError: If the configuration cannot serve the selection
            AssetScoutError: If a package name is given without a type
        """
        self.paths.resolve_root()

        if selection.package_name is not None:
            if selection.package_type is None:
                raise AssetScoutError(
                    f"Package '{selection.package_name}' needs a package type"
                )
            return self.build_package_entries(
                selection.package_name, selection.package_type
            )

        if selection.package_type is not None:
            return self.build_type_entries(
                selection.package_type, discover_all=selection.discover_all
            )

        return merge_all(
            self.build_type_entries(package_type, selection.discover_all)
            for package_type in self.config.plans
        )

    def build_type_entries(
        self, package_type: str, discover_all: bool = False
    ) -> Entries:
        """Build entries for every selected package of one type.

        Args:
            package_type: Package type to build
            discover_all: Ignore the configured policy and build every package
                found on disk

        Returns:
            Merged entries, in policy order (or sorted directory order)
        """
        # Unknown types fail before any discovery
        self.config.plan_for(package_type)

        policy = self.config.policy_for(package_type)
        if discover_all or policy == WILDCARD:
            names = self.paths.list_packages(package_type)
            if not names:
                custom_dir = self.paths.custom_packages_dir(package_type)
                self.reporter.warn(
                    f"No custom {package_type}s found in {custom_dir}."
                )
        else:
            names = list(policy)

        return merge_all(
            self.build_package_entries(name, package_type) for name in names
        )

    def _build(self, ref: PackageRef, visited: set[Path]) -> Entries:
        plan = self.config.plan_for(ref.type)
        package_dir = ref.path
        if package_dir is None:
            package_dir = self.paths.package_path(ref.type, ref.name)

        absolute_dir = (self.paths.base_dir / package_dir).resolve()
        if absolute_dir in visited:
            self.reporter.warn(f"Skipping {package_dir}: already visited (link cycle).")
            return {}
        visited.add(absolute_dir)

        if not absolute_dir.exists():
            self._warn_missing(ref)

        entries = merge_all(
            match_files(
                package_dir,
                category.source,
                category.destination,
                category.extension,
                skip_underscore_files=self.config.skip_underscore_files,
                base_dir=self.paths.base_dir,
            )
            for category in plan.categories
        )

        if plan.nested_dir is None:
            return entries

        nested_dir = absolute_dir / plan.nested_dir
        if not nested_dir.is_dir():
            return entries

        children = sorted(
            child.name for child in nested_dir.iterdir() if child.is_dir()
        )
        for child in children:
            child_path = package_dir / plan.nested_dir / child
            child_ref = PackageRef(ref.type, child, child_path)
            entries = merge_entries(entries, self._build(child_ref, visited))
        return entries

    def _warn_missing(self, ref: PackageRef) -> None:
        suggestion = None
        if ref.path is None:
            matches = get_close_matches(
                ref.name, self.paths.list_packages(ref.type), n=1
            )
            suggestion = matches[0] if matches else None
        warning = MissingPackageWarning(ref.type, ref.name, suggestion)
        self.reporter.warn(str(warning))


def build_entries(
    config: Config,
    selection: Selection,
    reporter: Reporter | None = None,
    base_dir: Path | None = None,
) -> Entries:
    """Build the entry mapping for a selection.

    Args:
        config: Loaded configuration
        selection: What to build
        reporter: Where warnings go. Defaults to the console.
        base_dir: Directory the build runs from. Defaults to the current
            working directory.

    Returns:
        Entry mapping ready for the bundler's entry option

    Raises:
        ConfigError: If the root is missing or a package type is unknown
    """
    return EntryBuilder(config, reporter, base_dir).build_entry_set(selection)
