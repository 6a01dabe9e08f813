"""Core models — re-exported for convenience."""

from valet.core.models.command import CommandFailed, CommandResult
from valet.core.models.settings import AptSettings, ValetConfig

__all__ = [
    "AptSettings",
    "CommandFailed",
    "CommandResult",
    "ValetConfig",
]
