"""Adapters — bindings to the shell and OS service managers.

Public re-exports for convenient access.
"""

from valet.adapters.mock import MockCommandLine, MockServiceManager
from valet.adapters.services.base import ServiceManager
from valet.adapters.services.systemd import Systemd
from valet.adapters.shell.command import CommandLine

__all__ = [
    "CommandLine",
    "MockCommandLine",
    "MockServiceManager",
    "ServiceManager",
    "Systemd",
]
