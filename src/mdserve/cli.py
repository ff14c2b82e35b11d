"""CLI interface for mdserve.

Command-line tool for serving a directory of markdown documents.
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from jinja2 import TemplateError

from mdserve.config import Config


@click.group()
def cli() -> None:
    """mdserve - Markdown documents served as HTML pages."""


_config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Path to configuration file (default: auto-discover mdserve.toml)",
)
_root_option = click.option(
    "--root",
    "-r",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Base directory where the site is located (overrides config)",
)
_hostname_option = click.option(
    "--hostname",
    default=None,
    help="Public base URL used in sitemap.xml (overrides config)",
)


@cli.command()
@_config_option
@_root_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=click.IntRange(1, 65535),
    default=None,
    help="Port to bind to (overrides config)",
)
@_hostname_option
@click.option(
    "--site-name",
    default=None,
    help="Name of the website, shown in page titles (overrides config)",
)
@click.option(
    "--lang",
    default=None,
    help="Language code for the html lang attribute (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def serve(
    config_path: Path | None,
    root: Path | None,
    host: str | None,
    port: int | None,
    hostname: str | None,
    site_name: str | None,
    lang: str | None,
    verbose: bool,
) -> None:
    """Start the content server."""
    from mdserve.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        root=root,
        hostname=hostname,
        site_name=site_name,
        lang=lang,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Site root: {config.site.root}")
    click.echo(f"Site name: {config.site.name}")
    click.echo(f"Public hostname: {config.site.hostname}")

    try:
        run_server(config)
    except TemplateError as e:
        _fail(f"Invalid page template: {e}")
    except FileNotFoundError as e:
        _fail(str(e))


@cli.command()
@_config_option
@_root_option
@_hostname_option
def sitemap(
    config_path: Path | None,
    root: Path | None,
    hostname: str | None,
) -> None:
    """Write sitemap.xml for the site root to stdout."""
    from mdserve.core.sitemap import build_sitemap, find_sitemap_entries

    config = _load_config(config_path).with_overrides(root=root, hostname=hostname)

    entries = find_sitemap_entries(config.site.root)
    click.echo(build_sitemap(entries, config.site.hostname).decode("utf-8"))


def _load_config(config_path: Path | None) -> Config:
    """Load configuration or exit with error.

    Args:
        config_path: Explicit config file, or None to auto-discover

    Returns:
        Loaded configuration

    Raises:
        SystemExit: If the configuration is missing or invalid
    """
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)


if __name__ == "__main__":
    cli()
