"""Shared fixtures for assetscout tests."""

from pathlib import Path

import pytest

from assetscout.config import Config

CONFIG_DATA = {
    "root": "web",
    "extensions": {"scripts": ".js", "styles": ".scss"},
    "skipUnderscoreFiles": True,
    "modules": {
        "scripts": {"source": "js", "destination": "dist/js"},
        "styles": {"source": "scss", "destination": "dist/css"},
    },
    "themes": {
        "scripts": {"source": "js", "destination": "dist/js"},
        "styles": {"source": "scss", "destination": "dist/css"},
        "components": "components",
    },
    "packages": {"module": "*", "theme": ["olivero_child"]},
}


class CollectingReporter:
    """Reporter that keeps warnings in memory."""

    def __init__(self) -> None:
        self.warnings: list[str] = []

    def warn(self, message: str) -> None:
        self.warnings.append(message)


def touch(path: Path) -> Path:
    """Create an empty file and any missing parents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    return path


@pytest.fixture
def config_data():
    """Fresh copy of a typical configuration document."""
    return {
        key: (dict(value) if isinstance(value, dict) else value)
        for key, value in CONFIG_DATA.items()
    }


@pytest.fixture
def config(config_data):
    """Configuration built from config_data."""
    return Config.from_dict(config_data)


@pytest.fixture
def drupal_root(tmp_path):
    """Empty Drupal root with custom module and theme directories."""
    root = tmp_path / "web"
    (root / "modules" / "custom").mkdir(parents=True)
    (root / "themes" / "custom").mkdir(parents=True)
    return root


@pytest.fixture
def reporter():
    """Reporter that records warnings."""
    return CollectingReporter()
