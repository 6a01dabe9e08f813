"""
Package manager base — the contract every distro package manager meets.

The rest of Valet only talks to package managers through this
interface: query what is installed, install what is missing, and
take over dnsmasq from the distribution's network stack.

To add a package manager:
    1. Subclass PackageManager
    2. Implement every abstract method
    3. Make is_available() a quick check that never raises
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from valet.adapters.services.base import ServiceManager
from valet.adapters.shell.command import CommandLine


class PackageManagerError(Exception):
    """Base class for package manager failures."""


class InstallationError(PackageManagerError):
    """Raised when a package could not be installed."""

    def __init__(self, package: str, manager: str = ""):
        self.package = package
        self.manager = manager
        super().__init__(f"{manager or 'Package manager'} was unable to install [{package}].")


class MissingDataError(PackageManagerError):
    """Raised when a query expected output and got none."""


class PackageManager(ABC):
    """Abstract base class for package managers."""

    name: ClassVar[str]  # e.g. "apt"
    label: ClassVar[str]  # human-readable, e.g. "Apt"

    def __init__(self, cli: CommandLine):
        self.cli = cli

    @abstractmethod
    def packages(self, package: str) -> list[str]:
        """List installed packages matching ``package``."""

    @abstractmethod
    def installed(self, package: str) -> bool:
        """Whether ``package`` is installed."""

    def resolve_package(self, package: str) -> str:
        """Distribution package name for a logical name (e.g. nginx → nginx-core)."""
        return package

    @abstractmethod
    def ensure_installed(self, package: str) -> None:
        """Install ``package`` unless it is already installed."""

    @abstractmethod
    def install_or_fail(self, package: str) -> None:
        """Install ``package``.

        Raises:
            InstallationError: If the install command fails.
        """

    @abstractmethod
    def setup(self) -> None:
        """One-time configuration performed when Valet is installed."""

    @abstractmethod
    def get_php_version(self) -> str:
        """Version of the installed PHP CLI package (e.g. ``"8.1"``).

        Raises:
            MissingDataError: If no PHP CLI package is installed.
        """

    @abstractmethod
    def dnsmasq_setup(self, sm: ServiceManager) -> None:
        """Install dnsmasq and put Valet in control of it."""

    @abstractmethod
    def dnsmasq_restart(self, sm: ServiceManager) -> None:
        """Restart dnsmasq."""

    @abstractmethod
    def dnsmasq_config_path(self) -> str:
        """Path of the dnsmasq config file Valet writes."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether this package manager exists on the system.

        Must be fast and never raise.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
