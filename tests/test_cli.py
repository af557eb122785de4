"""Tests for the command-line interface."""

import json

import pytest
import yaml
from typer.testing import CliRunner

from assetscout import __version__
from assetscout.cli import app
from assetscout.config import EXAMPLE_CONFIG
from tests.conftest import touch

runner = CliRunner()


@pytest.fixture
def project(tmp_path, config_data, drupal_root, monkeypatch):
    """Project directory with a config file, used as working directory."""
    config_path = tmp_path / ".webpack" / "config.yml"
    config_path.parent.mkdir()
    config_path.write_text(yaml.safe_dump(config_data))
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestEntries:
    """Tests for the entries command."""

    def test_prints_entries_as_json(self, project, drupal_root):
        """Test that the entry mapping is printed on stdout."""
        touch(drupal_root / "modules" / "custom" / "foo" / "js" / "app.js")

        result = runner.invoke(app, ["entries", "--module", "foo"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "web/modules/custom/foo/dist/js/app": [
                "./web/modules/custom/foo/js/app.js"
            ],
        }
        assert "Found 1 file in 1 chunk" in result.stderr

    def test_compact_output(self, project, drupal_root):
        """Test that --compact prints a single line."""
        touch(drupal_root / "themes" / "custom" / "olivero_child" / "js" / "a.js")

        result = runner.invoke(app, ["entries", "--compact"])

        assert result.exit_code == 0
        assert result.stdout.count("\n") == 1
        assert list(json.loads(result.stdout)) == [
            "web/themes/custom/olivero_child/dist/js/a"
        ]

    def test_missing_package_warns(self, project):
        """Test that a missing package is a warning, not a failure."""
        result = runner.invoke(app, ["entries", "--theme", "nope"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {}
        assert "The nope theme does not exist" in result.stderr

    def test_type_option(self, project, drupal_root):
        """Test that --type builds the configured packages of a type."""
        touch(drupal_root / "modules" / "custom" / "a" / "js" / "a.js")
        touch(drupal_root / "modules" / "custom" / "b" / "js" / "b.js")

        result = runner.invoke(app, ["entries", "--type", "module"])

        assert result.exit_code == 0
        assert sorted(json.loads(result.stdout)) == [
            "web/modules/custom/a/dist/js/a",
            "web/modules/custom/b/dist/js/b",
        ]

    def test_explicit_config_path(self, tmp_path, config_data, drupal_root):
        """Test that --config points at another file."""
        config_data["root"] = str(drupal_root)
        config_path = tmp_path / "assets.yml"
        config_path.write_text(yaml.safe_dump(config_data))

        result = runner.invoke(
            app, ["entries", "--config", str(config_path), "--modules"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {}

    def test_missing_config(self, tmp_path, monkeypatch):
        """Test that a missing config file exits with an error."""
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["entries"])

        assert result.exit_code == 1
        assert "Config error" in result.stderr
        assert result.stdout == ""

    def test_missing_root(self, tmp_path, config_data, monkeypatch):
        """Test that a missing Drupal root exits with an error."""
        config_path = tmp_path / ".webpack" / "config.yml"
        config_path.parent.mkdir()
        config_path.write_text(yaml.safe_dump(config_data))
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["entries"])

        assert result.exit_code == 1
        assert "Drupal root not detected" in result.stderr

    def test_unknown_type(self, project):
        """Test that an unknown package type exits with an error."""
        result = runner.invoke(app, ["entries", "--type", "profile"])

        assert result.exit_code == 1
        assert "Unknown package type 'profile'" in result.stderr


class TestInit:
    """Tests for the init command."""

    def test_writes_example_config(self, tmp_path, monkeypatch):
        """Test that init creates the default config file."""
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert (tmp_path / ".webpack" / "config.yml").read_text() == EXAMPLE_CONFIG

    def test_asks_before_replacing(self, tmp_path):
        """Test that declining the prompt keeps the existing file."""
        config_path = tmp_path / "config.yml"
        config_path.write_text("root: web\n")

        result = runner.invoke(
            app, ["init", "--config", str(config_path)], input="n\n"
        )

        assert result.exit_code == 0
        assert "Canceled." in result.stdout
        assert config_path.read_text() == "root: web\n"

    def test_replaces_after_confirmation(self, tmp_path):
        """Test that confirming the prompt replaces the file."""
        config_path = tmp_path / "config.yml"
        config_path.write_text("root: web\n")

        result = runner.invoke(
            app, ["init", "--config", str(config_path)], input="y\n"
        )

        assert result.exit_code == 0
        assert config_path.read_text() == EXAMPLE_CONFIG

    def test_force_skips_prompt(self, tmp_path):
        """Test that --force replaces without asking."""
        config_path = tmp_path / "config.yml"
        config_path.write_text("root: web\n")

        result = runner.invoke(
            app, ["init", "--config", str(config_path), "--force"]
        )

        assert result.exit_code == 0
        assert "Proceed?" not in result.stdout
        assert config_path.read_text() == EXAMPLE_CONFIG


def test_version():
    """Test that --version prints the version."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout
