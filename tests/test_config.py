"""
Tests for configuration loading — config.yml parsing and validation.
"""

import textwrap
from pathlib import Path

import pytest

from valet.core.config.loader import ConfigError, default_config_path, load_config
from valet.core.models.settings import AptSettings, ValetConfig


class TestDefaults:
    def test_settings_defaults(self):
        settings = AptSettings()
        assert settings.package_aliases == {"nginx": "nginx-core"}
        assert settings.php_cli_pattern == "php*cli"
        assert settings.network_manager_conf == "/etc/NetworkManager/NetworkManager.conf"
        assert settings.dnsmasq_config_path == "/etc/dnsmasq.d/valet"

    def test_resolve_package(self):
        settings = AptSettings()
        assert settings.resolve_package("nginx") == "nginx-core"
        assert settings.resolve_package("dnsmasq") == "dnsmasq"

    def test_alias_tables_are_independent(self):
        a, b = AptSettings(), AptSettings()
        a.package_aliases["redis"] = "redis-server"
        assert "redis" not in b.package_aliases


class TestDefaultConfigPath:
    def test_home(self, no_user_config):
        assert default_config_path() == no_user_config / ".config" / "valet" / "config.yml"

    def test_env_var(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VALET_CONFIG", str(tmp_path / "custom.yml"))
        assert default_config_path() == tmp_path / "custom.yml"


class TestLoadConfig:
    def test_missing_default_file(self, no_user_config):
        assert load_config() == ValetConfig()

    def test_missing_explicit_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yml")

    def test_missing_env_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VALET_CONFIG", str(tmp_path / "nope.yml"))
        with pytest.raises(ConfigError, match="not found"):
            load_config()

    def test_default_file_is_read(self, no_user_config):
        path = no_user_config / ".config" / "valet" / "config.yml"
        path.parent.mkdir(parents=True)
        path.write_text("command_timeout: 30\n")
        assert load_config().command_timeout == 30

    def test_full_file(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text(textwrap.dedent("""\
            command_timeout: 120
            apt:
              package_aliases:
                nginx: nginx-full
              dnsmasq_config_path: /etc/dnsmasq.d/dev
        """))
        config = load_config(path)
        assert config.command_timeout == 120
        assert config.apt.package_aliases == {"nginx": "nginx-full"}
        assert config.apt.dnsmasq_config_path == "/etc/dnsmasq.d/dev"
        assert config.apt.php_cli_pattern == "php*cli"

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("")
        assert load_config(path) == ValetConfig()

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("apt: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_config(path)

    def test_unknown_key(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("apt:\n  mirror: http://example.com\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_bad_timeout(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("command_timeout: 0\n")
        with pytest.raises(ConfigError):
            load_config(path)
