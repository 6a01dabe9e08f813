"""
Settings models — tunables for package managers and the command runner.

Defaults match a stock Ubuntu install. A config file only needs to
carry the keys it wants to change.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


def _default_aliases() -> dict[str, str]:
    # Logical name → distribution package name
    return {"nginx": "nginx-core"}


class AptSettings(BaseModel):
    """Names and paths used by the Apt package manager."""

    model_config = ConfigDict(extra="forbid")

    package_aliases: dict[str, str] = Field(default_factory=_default_aliases)
    php_cli_pattern: str = "php*cli"
    network_manager_conf: str = "/etc/NetworkManager/NetworkManager.conf"
    network_manager_service: str = "network-manager"
    dnsmasq_service: str = "dnsmasq"
    dnsmasq_config_path: str = "/etc/dnsmasq.d/valet"

    def resolve_package(self, package: str) -> str:
        """Map a logical package name to its distribution name."""
        return self.package_aliases.get(package, package)


class ValetConfig(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="forbid")

    command_timeout: int = Field(default=600, gt=0)  # seconds, apt-get can be slow
    apt: AptSettings = Field(default_factory=AptSettings)
