"""
Service manager base — start/stop/restart OS services.

Package managers receive a ServiceManager when they need to cycle a
daemon. They do not inspect the outcome.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ServiceManager(ABC):
    """Abstract base class for OS service managers."""

    @abstractmethod
    def start(self, service: str) -> None:
        """Start a service."""

    @abstractmethod
    def stop(self, service: str) -> None:
        """Stop a service."""

    @abstractmethod
    def restart(self, service: str) -> None:
        """Restart a service."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"
