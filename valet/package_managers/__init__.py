"""Package managers — distro-specific install and dnsmasq plumbing."""

from valet.package_managers.apt import Apt
from valet.package_managers.base import (
    InstallationError,
    MissingDataError,
    PackageManager,
    PackageManagerError,
)

__all__ = [
    "Apt",
    "InstallationError",
    "MissingDataError",
    "PackageManager",
    "PackageManagerError",
]
