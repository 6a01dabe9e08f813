"""
Tests for logging setup.
"""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from valet.core.observability.logging_config import _parse_level, resolve_level, setup_logging
from valet.main import cli


class TestParseLevel:
    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("ERROR") == logging.ERROR

    def test_fallback(self):
        assert _parse_level(None) == logging.WARNING
        assert _parse_level("loud") == logging.WARNING
        assert _parse_level("", default=logging.INFO) == logging.INFO


class TestResolveLevel:
    @pytest.mark.parametrize(
        "verbosity, expected",
        [(-1, logging.ERROR), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_flags(self, verbosity, expected):
        assert resolve_level(verbosity, {}) == expected

    def test_flag_beats_env(self):
        assert resolve_level(1, {"VALET_LOG_LEVEL": "ERROR"}) == logging.INFO

    def test_env(self):
        assert resolve_level(0, {"VALET_LOG_LEVEL": "info"}) == logging.INFO

    def test_default(self):
        assert resolve_level(0, {}) == logging.WARNING


class TestSetupLogging:
    def test_console_only(self):
        assert setup_logging(1, {}) == logging.INFO
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "valet.log"
        setup_logging(0, {"VALET_LOG_FILE": str(log_file), "VALET_LOG_FILE_LEVEL": "DEBUG"})
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert root.handlers[0].level == logging.WARNING

        logging.getLogger("valet.test").debug("written to file")
        for handler in root.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text()

    def test_file_level_follows_console(self, tmp_path: Path):
        setup_logging(-1, {"VALET_LOG_FILE": str(tmp_path / "valet.log")})
        root = logging.getLogger()
        assert [h.level for h in root.handlers] == [logging.ERROR, logging.ERROR]


class TestCliFlags:
    @pytest.mark.parametrize(
        "args, expected",
        [
            ([], logging.WARNING),
            (["-q"], logging.ERROR),
            (["-v"], logging.INFO),
            (["-vv"], logging.DEBUG),
            (["--debug"], logging.DEBUG),
            (["-q", "-v"], logging.INFO),
        ],
    )
    def test_root_level(self, no_user_config, monkeypatch, args, expected):
        monkeypatch.delenv("VALET_LOG_LEVEL", raising=False)
        monkeypatch.delenv("VALET_LOG_FILE", raising=False)
        result = CliRunner().invoke(cli, [*args, "dnsmasq", "config-path"])
        assert result.exit_code == 0
        assert logging.getLogger().level == expected

    def test_env_level(self, no_user_config, monkeypatch):
        monkeypatch.setenv("VALET_LOG_LEVEL", "INFO")
        monkeypatch.delenv("VALET_LOG_FILE", raising=False)
        CliRunner().invoke(cli, ["dnsmasq", "config-path"])
        assert logging.getLogger().level == logging.INFO
