"""
CLI commands for package queries and installation.

Thin wrappers over ``valet.package_managers.apt.Apt``.
"""

from __future__ import annotations

import json
import sys

import click

from valet.package_managers.base import InstallationError, MissingDataError
from valet.ui.cli.helpers import resolve_package_manager


@click.command()
@click.pass_context
def available(ctx: click.Context) -> None:
    """Check whether the package manager exists on this system."""
    pm = resolve_package_manager(ctx)

    if pm.is_available():
        click.secho(f"✅ {pm.label} is available", fg="green")
        return

    click.secho(f"❌ {pm.label} is not available", fg="red")
    sys.exit(1)


@click.command("packages")
@click.argument("pattern")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_packages(ctx: click.Context, pattern: str, as_json: bool) -> None:
    """List installed packages matching PATTERN."""
    pm = resolve_package_manager(ctx)
    names = pm.packages(pattern)

    if as_json:
        click.echo(json.dumps({"pattern": pattern, "packages": names}, indent=2))
        return

    if not names:
        click.secho(f"⚠️  No installed packages match {pattern}", fg="yellow")
        return

    click.secho(f"📦 Installed ({len(names)}, {pm.name}):", fg="cyan", bold=True)
    for name in names:
        click.echo(f"   {name}")


@click.command()
@click.argument("package")
@click.pass_context
def installed(ctx: click.Context, package: str) -> None:
    """Exit 0 if PACKAGE is installed, 1 otherwise."""
    pm = resolve_package_manager(ctx)

    if pm.installed(package):
        click.secho(f"✅ {package} is installed", fg="green")
        return

    click.secho(f"❌ {package} is not installed", fg="red")
    sys.exit(1)


@click.command()
@click.argument("package")
@click.pass_context
def install(ctx: click.Context, package: str) -> None:
    """Install PACKAGE unless it is already installed."""
    pm = resolve_package_manager(ctx)

    try:
        pm.ensure_installed(package)
    except InstallationError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    click.secho(f"✅ {pm.resolve_package(package)} is installed", fg="green", bold=True)


@click.command("php-version")
@click.pass_context
def php_version(ctx: click.Context) -> None:
    """Print the version of the installed PHP CLI."""
    pm = resolve_package_manager(ctx)

    try:
        version = pm.get_php_version()
    except MissingDataError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    click.echo(version)
