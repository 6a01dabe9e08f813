"""
Shell command runner — execute shell commands and capture their output.

Every package manager and service manager talks to the OS through
this class. It is synchronous: one process per call, output captured
as text, nothing streamed.
"""

from __future__ import annotations

import logging
import subprocess
import time

from valet.core.models.command import CommandFailed, CommandResult

logger = logging.getLogger(__name__)

# Exit codes used when the process never produced one
EXIT_TIMEOUT = 124
EXIT_OS_ERROR = 127


class CommandLine:
    """Run shell commands and return CommandResults.

    Args:
        timeout: Seconds before a command is abandoned (default: 600).
    """

    def __init__(self, timeout: int = 600):
        self.timeout = timeout

    def run(self, command: str) -> CommandResult:
        """Run a command through the shell.

        Never raises for a failing command: non-zero exits, timeouts
        and OS errors are all reported as a failed CommandResult.
        """
        logger.debug("Executing: %s", command)
        start = time.monotonic()

        try:
            proc = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            logger.warning("Command timed out after %ss: %s", self.timeout, command)
            return CommandResult(
                command=command,
                exit_code=EXIT_TIMEOUT,
                stderr=f"Command timed out after {self.timeout}s",
                duration_ms=int((time.monotonic() - start) * 1000),
            )
        except OSError as e:
            logger.warning("Command could not be started: %s (%s)", command, e)
            return CommandResult(
                command=command,
                exit_code=EXIT_OS_ERROR,
                stderr=f"Command execution error: {e}",
                duration_ms=int((time.monotonic() - start) * 1000),
            )

        result = CommandResult(
            command=command,
            exit_code=proc.returncode,
            stdout=proc.stdout.strip(),
            stderr=proc.stderr.strip(),
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        if result.failed:
            logger.debug("Command exited %d: %s", result.exit_code, command)
        return result

    def run_or_fail(self, command: str) -> str:
        """Run a command and return its stdout.

        Raises:
            CommandFailed: If the command exits non-zero.
        """
        return self.run(command).check().stdout


__all__ = ["CommandFailed", "CommandLine", "CommandResult"]
