"""
Valet for Linux — CLI entrypoint.

Usage:
    valet --help
    valet -v install nginx
    valet dnsmasq setup
"""

from __future__ import annotations

from pathlib import Path

import click

from valet import __version__
from valet.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="valet")
@click.option("-v", "--verbose", count=True, help="Log more; repeat (-vv) for debug output.")
@click.option("-q", "--quiet", is_flag=True, help="Only log errors.")
@click.option("--debug", is_flag=True, help="Same as -vv.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.yml (default: ~/.config/valet/config.yml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: bool,
    debug: bool,
    config_path: Path | None,
) -> None:
    """Valet for Linux — packages and dnsmasq for local development."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    verbosity = 2 if debug else verbose
    if quiet and not verbosity:
        verbosity = -1
    setup_logging(verbosity)


from valet.ui.cli.dnsmasq import dnsmasq  # noqa: E402
from valet.ui.cli.packages import (  # noqa: E402
    available,
    install,
    installed,
    list_packages,
    php_version,
)

cli.add_command(available)
cli.add_command(list_packages)
cli.add_command(installed)
cli.add_command(install)
cli.add_command(php_version)
cli.add_command(dnsmasq)


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
