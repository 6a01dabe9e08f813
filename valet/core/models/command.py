"""
CommandResult model — the outcome of one shell invocation.

The runner never raises for a non-zero exit. It hands back a
CommandResult and the caller decides: inspect ``ok``/``failed``,
or call ``check()`` to turn a failure into ``CommandFailed``.
"""

from __future__ import annotations

from pydantic import BaseModel


class CommandFailed(Exception):
    """A shell command exited with a non-zero status."""

    def __init__(self, command: str, exit_code: int, stderr: str = ""):
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(f"Command failed (exit {exit_code}): {command}")


class CommandResult(BaseModel):
    """Captured output of a finished command."""

    command: str
    exit_code: int = 0
    stdout: str = ""
    stderr: str = ""
    duration_ms: int = 0

    @property
    def ok(self) -> bool:
        """Whether the command exited with status 0."""
        return self.exit_code == 0

    @property
    def failed(self) -> bool:
        """Whether the command exited with a non-zero status."""
        return self.exit_code != 0

    def check(self) -> CommandResult:
        """Return self, or raise CommandFailed if the command failed."""
        if self.failed:
            raise CommandFailed(self.command, self.exit_code, self.stderr)
        return self
