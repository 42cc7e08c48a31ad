"""Tests for environment settings and Config."""

from pathlib import Path

import pytest

from remote_oss.config import Config, HostsConfigSource, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove REMOTE_OSS_* variables from the environment."""
    for key in [
        "REMOTE_OSS_HOSTS_FILE",
        "REMOTE_OSS_WATCH_INTERVAL",
        "REMOTE_OSS_PING_TIMEOUT",
        "REMOTE_OSS_TRANSPORT",
        "REMOTE_OSS_HTTP_HOST",
        "REMOTE_OSS_HTTP_PORT",
        "REMOTE_OSS_LOG_LEVEL",
        "REMOTE_OSS_LOG_COLORS",
        "REMOTE_OSS_LOG_PAYLOADS",
        "REMOTE_OSS_SLOW_THRESHOLD_MS",
        "REMOTE_OSS_INCLUDE_TRACEBACK",
    ]:
        monkeypatch.delenv(key, raising=False)


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Defaults apply when nothing is set."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    settings = Settings.from_env()

    assert settings.hosts_file == tmp_path / "remote-oss" / "settings.json"
    assert settings.transport == "stdio"
    assert settings.http_port == 8000
    assert settings.watch_interval == 2.0
    assert settings.log_level == "INFO"
    assert settings.include_traceback is False


def test_values_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """REMOTE_OSS_* variables override defaults."""
    monkeypatch.setenv("REMOTE_OSS_HOSTS_FILE", str(tmp_path / "hosts.json"))
    monkeypatch.setenv("REMOTE_OSS_TRANSPORT", "HTTP")
    monkeypatch.setenv("REMOTE_OSS_HTTP_PORT", "9000")
    monkeypatch.setenv("REMOTE_OSS_WATCH_INTERVAL", "0")
    monkeypatch.setenv("REMOTE_OSS_LOG_LEVEL", "debug")
    monkeypatch.setenv("REMOTE_OSS_LOG_PAYLOADS", "yes")

    settings = Settings.from_env()

    assert settings.hosts_file == tmp_path / "hosts.json"
    assert settings.transport == "http"
    assert settings.http_port == 9000
    assert settings.watch_interval == 0.0
    assert settings.log_level == "DEBUG"
    assert settings.log_payloads is True


def test_invalid_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    """Bad numbers and transports use the defaults."""
    monkeypatch.setenv("REMOTE_OSS_HTTP_PORT", "eighty")
    monkeypatch.setenv("REMOTE_OSS_PING_TIMEOUT", "soon")
    monkeypatch.setenv("REMOTE_OSS_TRANSPORT", "carrier-pigeon")

    settings = Settings.from_env()

    assert settings.http_port == 8000
    assert settings.ping_timeout == 2.0
    assert settings.transport == "stdio"


def test_config_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Config wires the hosts source to the settings path."""
    monkeypatch.setenv("REMOTE_OSS_HOSTS_FILE", str(tmp_path / "hosts.json"))

    config = Config.from_env()

    assert isinstance(config.source, HostsConfigSource)
    assert config.hosts_file == tmp_path / "hosts.json"


def test_config_from_hosts_file(tmp_path: Path) -> None:
    """from_hosts_file points source and settings at the given file."""
    config = Config.from_hosts_file(tmp_path / "custom.json")

    assert config.hosts_file == tmp_path / "custom.json"
    assert config.settings.hosts_file == tmp_path / "custom.json"
    assert config.transport == "stdio"
