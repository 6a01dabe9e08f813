"""
Apt package manager — Debian, Ubuntu and derivatives.

Queries go through ``dpkg -l``, installs through ``apt-get``. On
Ubuntu desktops NetworkManager may run its own dnsmasq instance;
``dnsmasq_setup`` turns that off so the system dnsmasq (and Valet's
config for it) is the only one answering.
"""

from __future__ import annotations

import logging
import shlex

import click

from valet.adapters.services.base import ServiceManager
from valet.adapters.shell.command import CommandFailed, CommandLine
from valet.core.models.settings import AptSettings
from valet.package_managers.base import (
    InstallationError,
    MissingDataError,
    PackageManager,
)

logger = logging.getLogger(__name__)


class Apt(PackageManager):
    """Package manager backed by dpkg/apt-get."""

    name = "apt"
    label = "Apt"

    def __init__(self, cli: CommandLine, settings: AptSettings | None = None):
        super().__init__(cli)
        self.settings = settings or AptSettings()

    # ── Query ───────────────────────────────────────────────────

    def packages(self, package: str) -> list[str]:
        """Names of installed packages matching ``package`` (a dpkg pattern)."""
        query = f"dpkg -l {shlex.quote(package)} | grep '^ii' | sed 's_  _\\t_g' | cut -f 2"
        output = self.cli.run(query).stdout
        return [line for line in output.split("\n") if line]

    def installed(self, package: str) -> bool:
        return package in self.packages(package)

    def get_php_version(self) -> str:
        pattern = self.settings.php_cli_pattern
        found = self.packages(pattern)
        if not found:
            raise MissingDataError(f"No installed package matches [{pattern}].")

        # php8.1-cli → php8.1 → 8.1
        head = found[0].split("-", 1)[0]
        prefix, sep, version = head.partition("php")
        if not sep or prefix or not version:
            raise MissingDataError(f"Cannot read a PHP version from [{found[0]}].")
        return version

    # ── Install ─────────────────────────────────────────────────

    def resolve_package(self, package: str) -> str:
        return self.settings.resolve_package(package)

    def ensure_installed(self, package: str) -> None:
        package = self.resolve_package(package)

        if not self.installed(package):
            self.install_or_fail(package)
        else:
            logger.debug("%s already installed", package)

    def install_or_fail(self, package: str) -> None:
        click.echo(
            click.style(f"[{package}] is not installed, installing it now via {self.label}...", fg="green")
            + " 🍻"
        )

        result = self.cli.run(f"apt-get install -y {shlex.quote(package)}")
        if result.failed:
            click.echo(result.stderr)
            logger.error("apt-get install %s exited %d", package, result.exit_code)
            raise InstallationError(package, manager=self.label)

        logger.info("Installed %s", package)

    def setup(self) -> None:
        # Nothing to configure for apt
        pass

    # ── dnsmasq ─────────────────────────────────────────────────

    def dnsmasq_setup(self, sm: ServiceManager) -> None:
        self.ensure_installed("dnsmasq")

        conf = shlex.quote(self.settings.network_manager_conf)
        in_control_of_network_manager = bool(
            self.cli.run(f"grep '^dns=dnsmasq' {conf}").stdout
        )

        if in_control_of_network_manager:
            logger.info("Taking dnsmasq away from NetworkManager (%s)", self.settings.network_manager_conf)
            self.cli.run(f"sudo sed -i 's/^dns=/#dns=/g' {conf}")

            sm.stop(self.settings.network_manager_service)
            self.cli.run("sudo pkill dnsmasq")
            sm.start(self.settings.network_manager_service)

        self.dnsmasq_restart(sm)

    def dnsmasq_restart(self, sm: ServiceManager) -> None:
        sm.restart(self.settings.dnsmasq_service)

    def dnsmasq_config_path(self) -> str:
        return self.settings.dnsmasq_config_path

    # ── Detection ───────────────────────────────────────────────

    def is_available(self) -> bool:
        try:
            output = self.cli.run_or_fail("which apt-get")
        except CommandFailed as e:
            logger.debug("apt-get not available: %s", e)
            return False
        return output != ""
