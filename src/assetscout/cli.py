"""Command-line interface for assetscout."""

from pathlib import Path
from typing import Annotated

import typer

from assetscout import __version__
from assetscout.config import EXAMPLE_CONFIG
from assetscout.config import Config
from assetscout.exceptions import AssetScoutError
from assetscout.exceptions import ConfigError
from assetscout.models import Selection
from assetscout.operations import build_entries
from assetscout.output import ConsoleReporter
from assetscout.output import print_entries
from assetscout.output import print_summary

app = typer.Typer(help="Drupal asset discovery for bundler entries")

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to config file (default: .webpack/config.yml)",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"assetscout {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
) -> None:
    """Drupal asset discovery for bundler entries."""
    pass


@app.command()
def entries(
    module: Annotated[
        str | None, typer.Option(help="Build a single custom module")
    ] = None,
    theme: Annotated[
        str | None, typer.Option(help="Build a single custom theme")
    ] = None,
    modules: Annotated[
        bool, typer.Option("--modules", help="Build every custom module on disk")
    ] = False,
    themes: Annotated[
        bool, typer.Option("--themes", help="Build every custom theme on disk")
    ] = False,
    all_packages: Annotated[
        bool, typer.Option("--all", help="Build every package of every type")
    ] = False,
    package_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Build the configured packages of a type"),
    ] = None,
    config_path: ConfigOption = None,
    compact: Annotated[
        bool, typer.Option("--compact", help="Print JSON on a single line")
    ] = False,
) -> None:
    """Print the bundler entry mapping as JSON."""
    selection = Selection.from_options(
        {
            "module": module,
            "theme": theme,
            "modules": modules,
            "themes": themes,
            "all": all_packages,
            "packageType": package_type,
        }
    )

    try:
        config = Config.load(config_path)
        result = build_entries(config, selection, reporter=ConsoleReporter())
    except ConfigError as e:
        typer.secho(f"✗ Config error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except PermissionError as e:
        typer.secho(
            f"✗ Permission denied: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None
    except OSError as e:
        typer.secho(
            f"✗ Filesystem error: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None
    except AssetScoutError as e:
        typer.secho(f"✗ Error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None

    print_entries(result, compact=compact)
    print_summary(result)


@app.command()
def init(
    config_path: ConfigOption = None,
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Replace without asking")
    ] = False,
) -> None:
    """Write an example configuration file."""
    if config_path is None:
        config_path = Config.default_path()

    if config_path.exists() and not force:
        replace = typer.confirm(
            f"CAUTION: {config_path} already exists and will be replaced. Proceed?"
        )
        if not replace:
            typer.secho("Canceled.", fg=typer.colors.CYAN)
            raise typer.Exit()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(EXAMPLE_CONFIG)
    except OSError as e:
        typer.secho(
            f"✗ Filesystem error: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None

    typer.secho(
        f"✓ Configuration written to {config_path}. "
        "Be sure to check this file before building.",
        fg=typer.colors.GREEN,
        bold=True,
    )


def main() -> None:
    """Main entry point for the assetscout CLI."""
    app()


if __name__ == "__main__":
    main()
