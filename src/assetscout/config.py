"""Configuration loading and validation."""

from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Any
from typing import Self

import yaml

from assetscout.exceptions import ConfigError
from assetscout.models import WILDCARD
from assetscout.models import AssetCategory
from assetscout.models import PackagePlan

DEFAULT_CONFIG_PATH = Path(".webpack") / "config.yml"

BUILTIN_TYPES = ("module", "theme")
DEFAULT_NESTED_DIRS = {"module": "modules"}
NESTED_KEY = "nested"

EXAMPLE_CONFIG = """\
# Path to the Drupal root, relative to the directory the build runs from.
root: web

# File extensions to look for.
extensions:
  scripts: .js
  styles: .scss

# Files starting with "_" are includes and are not built on their own.
skipUnderscoreFiles: true

# Where assets live inside custom modules, and where they are built to.
modules:
  scripts:
    source: js
    destination: dist/js
  styles:
    source: scss
    destination: dist/css

# Where assets live inside custom themes. Components are built in place.
themes:
  scripts:
    source: js
    destination: dist/js
  styles:
    source: scss
    destination: dist/css
  components: components

# Packages built when no selection is given: "*" for all of them on disk,
# or a list of machine names.
packages:
  module: "*"
  theme: []
"""


def plural(package_type: str) -> str:
    """Directory and section name for a package type ("module" -> "modules")."""
    return f"{package_type}s"


@dataclass(frozen=True)
class Config:
    """Immutable build configuration, loaded once per process."""

    root: str
    script_extension: str
    style_extension: str
    plans: Mapping[str, PackagePlan] = field(default_factory=dict)
    # type -> WILDCARD or ordered package names
    packages: Mapping[str, str | tuple[str, ...]] = field(default_factory=dict)
    skip_underscore_files: bool = True

    @classmethod
    def default_path(cls) -> Path:
        """Get default config location, relative to the working directory."""
        return DEFAULT_CONFIG_PATH

    def plan_for(self, package_type: str) -> PackagePlan:
        """Get the discovery plan for a package type.

        Raises:
            ConfigError: If no plan is configured for package_type
        """
        try:
            return self.plans[package_type]
        except KeyError:
            known = ", ".join(sorted(self.plans)) or "none"
            raise ConfigError(
                f"Unknown package type '{package_type}' (configured types: {known})"
            ) from None

    def policy_for(self, package_type: str) -> str | tuple[str, ...]:
        """Get the selection policy for a package type.

        Types with a plan but no policy select everything on disk.
        """
        return self.packages.get(package_type, WILDCARD)

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        """Create from a dict loaded from YAML.

        Raises:
            ConfigError: If required keys are missing or malformed
        """
        if not isinstance(data, Mapping):
            raise ConfigError("Configuration must be a mapping")

        root = data.get("root")
        if not isinstance(root, str) or not root:
            raise ConfigError("Missing configuration: [root]")

        extensions = data.get("extensions")
        if not isinstance(extensions, Mapping):
            extensions = {}
        script_extension = _require_extension(extensions, "scripts")
        style_extension = _require_extension(extensions, "styles")

        packages = _parse_packages(data)

        plans = {}
        for package_type in dict.fromkeys([*BUILTIN_TYPES, *packages]):
            section = data.get(plural(package_type))
            if section is None:
                if package_type in packages:
                    raise ConfigError(
                        f"Missing configuration: [{plural(package_type)}] "
                        f"for package type '{package_type}'"
                    )
                continue
            plans[package_type] = _parse_plan(
                package_type, section, script_extension, style_extension
            )

        skip = data.get("skipUnderscoreFiles", True)
        if not isinstance(skip, bool):
            raise ConfigError("[skipUnderscoreFiles] must be true or false")

        return cls(
            root=root,
            script_extension=script_extension,
            style_extension=style_extension,
            plans=plans,
            packages=packages,
            skip_underscore_files=skip,
        )

    @classmethod
    def load(cls, path: Path | None = None) -> Self:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file. If None, uses default location.

        Raises:
            ConfigError: If the file is missing, unreadable, or invalid
        """
        if path is None:
            path = cls.default_path()

        try:
            data = yaml.safe_load(path.read_text())
        except FileNotFoundError:
            raise ConfigError(f"Configuration file not found: {path}") from None
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in configuration {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Could not read configuration {path}: {e}") from e

        return cls.from_dict(data)


def _require_extension(extensions: Mapping, kind: str) -> str:
    value = extensions.get(kind)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"Missing configuration: [extensions.{kind}]")
    return value


def _parse_packages(data: Mapping) -> dict[str, str | tuple[str, ...]]:
    packages = data.get("packages")
    if packages is None:
        # Older configs only name a single default theme
        default_theme = data.get("defaultTheme")
        if default_theme is None:
            return {}
        if not isinstance(default_theme, str) or not default_theme:
            raise ConfigError("[defaultTheme] must be a theme machine name")
        return {"theme": (default_theme,)}

    if not isinstance(packages, Mapping):
        raise ConfigError("[packages] must map package types to names or '*'")

    parsed: dict[str, str | tuple[str, ...]] = {}
    for package_type, policy in packages.items():
        if policy == WILDCARD:
            parsed[package_type] = WILDCARD
        elif policy is None:
            parsed[package_type] = ()
        elif isinstance(policy, list) and all(isinstance(n, str) for n in policy):
            parsed[package_type] = tuple(policy)
        else:
            raise ConfigError(
                f"[packages.{package_type}] must be '{WILDCARD}' or a list of names"
            )
    return parsed


def _parse_plan(
    package_type: str, section: Any, script_extension: str, style_extension: str
) -> PackagePlan:
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{plural(package_type)}] must be a mapping")

    nested_dir = section.get(NESTED_KEY, DEFAULT_NESTED_DIRS.get(package_type))
    if nested_dir is not None and not isinstance(nested_dir, str):
        raise ConfigError(f"[{plural(package_type)}.{NESTED_KEY}] must be a string")

    categories = []
    for name, value in section.items():
        if name == NESTED_KEY:
            continue
        key = f"{plural(package_type)}.{name}"

        if name == "scripts":
            extensions = [script_extension]
        elif name == "styles":
            extensions = [style_extension]
        else:
            extensions = [script_extension, style_extension]

        # A bare string means assets are built in place
        if isinstance(value, str) and name not in ("scripts", "styles"):
            source = destination = value
        elif isinstance(value, Mapping):
            source = value.get("source")
            destination = value.get("destination")
            if not isinstance(source, str) or not isinstance(destination, str):
                raise ConfigError(
                    f"Missing configuration: [{key}.source] or [{key}.destination]"
                )
        else:
            raise ConfigError(f"[{key}] must be a path or a source/destination pair")

        for extension in extensions:
            categories.append(AssetCategory(source, destination, extension))

    return PackagePlan(categories=tuple(categories), nested_dir=nested_dir)
