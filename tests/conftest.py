"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from valet.adapters.mock import MockCommandLine, MockServiceManager
from valet.package_managers.apt import Apt


@pytest.fixture
def journal() -> list[tuple[str, str]]:
    """Shared, ordered record of shell commands and service operations."""
    return []


@pytest.fixture
def cli(journal) -> MockCommandLine:
    return MockCommandLine(journal=journal)


@pytest.fixture
def sm(journal) -> MockServiceManager:
    return MockServiceManager(journal=journal)


@pytest.fixture
def apt(cli) -> Apt:
    return Apt(cli)


@pytest.fixture
def no_user_config(tmp_path: Path, monkeypatch) -> Path:
    """Point HOME at an empty directory so no user config is found."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("VALET_CONFIG", raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging() calls made by a test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
