"""
Mock adapters — test doubles for the command runner and service manager.

Both record every call. Pass the same ``journal`` list to both to
capture the interleaving of shell commands and service operations.
"""

from __future__ import annotations

from valet.adapters.services.base import ServiceManager
from valet.adapters.shell.command import CommandLine
from valet.core.models.command import CommandResult


class MockCommandLine(CommandLine):
    """CommandLine that never spawns a process.

    By default every command succeeds with ``default_output``.
    Responses are matched by substring, first registered wins.
    """

    def __init__(self, default_output: str = "", journal: list[tuple[str, str]] | None = None):
        super().__init__()
        self._default_output = default_output
        self._responses: list[tuple[str, int, str, str]] = []
        self._call_log: list[str] = []
        self._journal = journal

    @property
    def call_log(self) -> list[str]:
        """Every command this mock has received, in order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def set_output(self, pattern: str, stdout: str) -> None:
        """Succeed with ``stdout`` for commands containing ``pattern``."""
        self._responses.append((pattern, 0, stdout, ""))

    def set_failure(self, pattern: str, exit_code: int = 1, stderr: str = "Mock failure") -> None:
        """Fail commands containing ``pattern``."""
        self._responses.append((pattern, exit_code, "", stderr))

    def ran(self, pattern: str) -> bool:
        """Whether any received command contains ``pattern``."""
        return any(pattern in command for command in self._call_log)

    def run(self, command: str) -> CommandResult:
        self._call_log.append(command)
        if self._journal is not None:
            self._journal.append(("run", command))

        for pattern, exit_code, stdout, stderr in self._responses:
            if pattern in command:
                return CommandResult(
                    command=command, exit_code=exit_code, stdout=stdout, stderr=stderr
                )

        return CommandResult(command=command, stdout=self._default_output)

    def reset(self) -> None:
        """Clear call log and custom responses."""
        self._call_log.clear()
        self._responses.clear()


class MockServiceManager(ServiceManager):
    """ServiceManager that records (verb, service) pairs."""

    def __init__(self, journal: list[tuple[str, str]] | None = None):
        self._call_log: list[tuple[str, str]] = []
        self._journal = journal

    @property
    def call_log(self) -> list[tuple[str, str]]:
        return self._call_log

    def start(self, service: str) -> None:
        self._record("start", service)

    def stop(self, service: str) -> None:
        self._record("stop", service)

    def restart(self, service: str) -> None:
        self._record("restart", service)

    def _record(self, verb: str, service: str) -> None:
        self._call_log.append((verb, service))
        if self._journal is not None:
            self._journal.append((verb, service))
