"""Systemd service manager — drives services through ``systemctl``."""

from __future__ import annotations

import logging

from valet.adapters.services.base import ServiceManager
from valet.adapters.shell.command import CommandLine

logger = logging.getLogger(__name__)


class Systemd(ServiceManager):
    """Start, stop and restart services with ``sudo systemctl``."""

    def __init__(self, cli: CommandLine):
        self.cli = cli

    def start(self, service: str) -> None:
        self._systemctl("start", service)

    def stop(self, service: str) -> None:
        self._systemctl("stop", service)

    def restart(self, service: str) -> None:
        self._systemctl("restart", service)

    def _systemctl(self, verb: str, service: str) -> None:
        logger.info("systemctl %s %s", verb, service)
        result = self.cli.run(f"sudo systemctl {verb} {service}")
        if result.failed:
            logger.warning(
                "systemctl %s %s failed (exit %d): %s",
                verb, service, result.exit_code, result.stderr,
            )
