"""CLI commands for dnsmasq."""

from __future__ import annotations

import sys

import click

from valet.package_managers.base import InstallationError
from valet.ui.cli.helpers import resolve_package_manager, resolve_service_manager


@click.group()
def dnsmasq() -> None:
    """dnsmasq — setup, restart, config path."""


@dnsmasq.command()
@click.pass_context
def setup(ctx: click.Context) -> None:
    """Install dnsmasq and take it over from NetworkManager."""
    pm = resolve_package_manager(ctx)
    sm = resolve_service_manager(pm)

    click.secho("🌐 Setting up dnsmasq...", fg="cyan")
    try:
        pm.dnsmasq_setup(sm)
    except InstallationError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    click.secho("✅ dnsmasq is ready", fg="green", bold=True)


@dnsmasq.command()
@click.pass_context
def restart(ctx: click.Context) -> None:
    """Restart dnsmasq."""
    pm = resolve_package_manager(ctx)
    pm.dnsmasq_restart(resolve_service_manager(pm))
    click.secho("✅ dnsmasq restarted", fg="green")


@dnsmasq.command("config-path")
@click.pass_context
def config_path(ctx: click.Context) -> None:
    """Print the path of Valet's dnsmasq config file."""
    pm = resolve_package_manager(ctx)
    click.echo(pm.dnsmasq_config_path())
