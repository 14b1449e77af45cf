"""Tests for environment Settings."""

import pytest

from sshnode.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "SSHNODE_LOG_LEVEL",
        "SSHNODE_LOG_COLORS",
        "SSHNODE_FRAMEWORK_DIR",
        "SSHNODE_SSH_CONFIG",
        "SSHNODE_KNOWN_HOSTS",
        "SSHNODE_STRICT_HOST_KEY_CHECKING",
        "SSHNODE_MAX_PARALLEL",
    ):
        monkeypatch.delenv(key, raising=False)

    settings = Settings.from_env()

    assert settings.log_level == "INFO"
    assert settings.log_colors is True
    assert settings.framework_dir == "~/.sshnode"
    assert settings.ssh_config is None
    assert settings.known_hosts is None
    assert settings.strict_host_key_checking is True
    assert settings.max_parallel == 10


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SSHNODE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SSHNODE_LOG_COLORS", "false")
    monkeypatch.setenv("SSHNODE_FRAMEWORK_DIR", "/etc/sshnode")
    monkeypatch.setenv("SSHNODE_KNOWN_HOSTS", "none")
    monkeypatch.setenv("SSHNODE_STRICT_HOST_KEY_CHECKING", "no")
    monkeypatch.setenv("SSHNODE_MAX_PARALLEL", "4")

    settings = Settings.from_env()

    assert settings.log_level == "DEBUG"
    assert settings.log_colors is False
    assert settings.framework_dir == "/etc/sshnode"
    assert settings.known_hosts == "none"
    assert settings.strict_host_key_checking is False
    assert settings.max_parallel == 4


def test_invalid_int_uses_default(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("SSHNODE_MAX_PARALLEL", "lots")

    settings = Settings.from_env()

    assert settings.max_parallel == 10
    assert "Invalid int for SSHNODE_MAX_PARALLEL" in caplog.text
