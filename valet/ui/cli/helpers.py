"""Shared helpers for CLI commands."""

from __future__ import annotations

import sys

import click

from valet.adapters.services.base import ServiceManager
from valet.adapters.services.systemd import Systemd
from valet.adapters.shell.command import CommandLine
from valet.core.config.loader import ConfigError, load_config
from valet.core.models.settings import ValetConfig
from valet.package_managers.apt import Apt
from valet.package_managers.base import PackageManager


def resolve_config(ctx: click.Context) -> ValetConfig:
    """Load config for this invocation, exiting 1 if it is invalid."""
    try:
        return load_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


def resolve_package_manager(ctx: click.Context) -> PackageManager:
    """Build the package manager from config."""
    config = resolve_config(ctx)
    return Apt(CommandLine(timeout=config.command_timeout), config.apt)


def resolve_service_manager(pm: PackageManager) -> ServiceManager:
    """Service manager sharing the package manager's command runner."""
    return Systemd(pm.cli)
