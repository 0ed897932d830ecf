"""CLI interface for Docnav.

Command-line tool for building and serving documentation navigation trees.
"""

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from docnav.config import Config
from docnav.core.loader import SiteLoader
from docnav.core.navigation import Navigation, UnmatchedRuleError

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docnav.toml)",
)
source_dir_option = click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)


@click.group()
def cli() -> None:
    """Docnav - navigation trees for documentation sites."""


@cli.command()
@config_option
@source_dir_option
@click.option(
    "--indent",
    type=int,
    default=2,
    show_default=True,
    help="JSON indentation",
)
@verbose_option
def nav(
    config_path: Path | None,
    source_dir: Path | None,
    indent: int,
    verbose: bool,
) -> None:
    """Print the navigation tree as JSON."""
    _configure_logging(verbose)

    config = _load_config(config_path, source_dir=source_dir)
    site = SiteLoader(config.docs.source_dir).load()

    try:
        links = Navigation.from_config(config).build_for(site)
    except UnmatchedRuleError as e:
        _fail(f"{e}\nCheck the [[navigation]] entries in {config.config_path or 'your config'}")

    click.echo(json.dumps({"items": [link.to_dict() for link in links]}, indent=indent))


@cli.command()
@config_option
@source_dir_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@verbose_option
def serve(
    config_path: Path | None,
    source_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the navigation API server."""
    from docnav.server import run_server

    _configure_logging(verbose)

    config = _load_config(config_path, source_dir=source_dir, host=host, port=port)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {config.docs.source_dir}")
    if config.navigation is None:
        click.echo("Navigation: default")
    else:
        click.echo(f"Navigation: {len(config.navigation)} configured rules")

    run_server(config)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_config(
    config_path: Path | None,
    *,
    source_dir: Path | None = None,
    host: str | None = None,
    port: int | None = None,
) -> Config:
    """Load configuration and apply CLI overrides, exiting on invalid config."""
    try:
        config = Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))
    return config.with_overrides(host=host, port=port, source_dir=source_dir)


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)
