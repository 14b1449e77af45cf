"""Tests for the command line entry point."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from sshnode.__main__ import main, parse_args, resolve_node, run_nodes
from sshnode.config import Settings
from sshnode.models import ExecutionResult, NodeEntry
from sshnode.services import MissingUsernameError


@pytest.fixture
def deps() -> MagicMock:
    """Mock dependency container."""
    deps = MagicMock()
    deps.settings = Settings(max_parallel=2)
    deps.inventory.parse.return_value = {
        "web1": NodeEntry("web1", "10.0.0.1", "deploy"),
    }
    deps.executor.execute_command = AsyncMock(
        return_value=ExecutionResult(result_code=0, success=True)
    )
    return deps


class TestParseArgs:
    """Argument parsing."""

    def test_nodes_and_command(self) -> None:
        args = parse_args(["web1", "web2", "--project", "ops", "--", "ls", "-la"])

        assert args.nodes == ["web1", "web2"]
        assert args.project == "ops"
        assert args.command == ["ls", "-la"]

    def test_defaults(self) -> None:
        args = parse_args(["web1", "--", "uptime"])

        assert args.project == "default"
        assert args.framework_dir is None
        assert args.ssh_config is None

    def test_requires_separator(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["web1", "uptime"])

    def test_requires_command(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["web1", "--"])


def test_resolve_node_from_inventory() -> None:
    node = NodeEntry("web1", "10.0.0.1", "deploy")

    assert resolve_node("web1", {"web1": node}) is node


def test_resolve_node_literal() -> None:
    node = resolve_node("admin@db:2222", {})

    assert node.nodename == "admin@db:2222"
    assert node.extract_hostname() == "db"
    assert node.extract_username() == "admin"
    assert node.extract_port() == 2222


@pytest.mark.asyncio
async def test_run_nodes_collects_config_errors(deps: MagicMock) -> None:
    """Configuration errors are returned per node, not raised."""
    error = MissingUsernameError("db")
    ok = ExecutionResult(result_code=0, success=True)
    deps.executor.execute_command = AsyncMock(side_effect=[ok, error])

    results = await run_nodes(
        deps, "ops", ["true"], [NodeEntry("web1", "h", "u"), NodeEntry("db", "h")]
    )

    assert results == [ok, error]


class TestMain:
    """End-to-end CLI runs with mocked dependencies."""

    def test_success_exit_code(
        self, deps: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch("sshnode.__main__.Dependencies.from_settings", return_value=deps), \
             patch("sshnode.__main__.configure_logging"):
            exit_code = main(["web1", "--", "uptime"])

        assert exit_code == 0
        assert "web1: [sshnode] result was success, resultcode: 0" in capsys.readouterr().out
        context, command, node = deps.executor.execute_command.call_args.args
        assert context.project == "default"
        assert command == ["uptime"]
        assert node.hostname == "10.0.0.1"

    def test_failure_exit_code(self, deps: MagicMock) -> None:
        deps.executor.execute_command = AsyncMock(
            return_value=ExecutionResult(result_code=-1, success=False, message="nope")
        )
        with patch("sshnode.__main__.Dependencies.from_settings", return_value=deps), \
             patch("sshnode.__main__.configure_logging"):
            exit_code = main(["web1", "--", "uptime"])

        assert exit_code == 1

    def test_config_error_exit_code(self, deps: MagicMock) -> None:
        deps.executor.execute_command = AsyncMock(side_effect=MissingUsernameError("x"))
        with patch("sshnode.__main__.Dependencies.from_settings", return_value=deps), \
             patch("sshnode.__main__.configure_logging"):
            exit_code = main(["x", "--", "uptime"])

        assert exit_code == 2

    def test_missing_known_hosts(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch(
            "sshnode.__main__.Dependencies.from_settings",
            side_effect=FileNotFoundError("known_hosts file not found: /x"),
        ), patch("sshnode.__main__.configure_logging"):
            exit_code = main(["web1", "--", "uptime"])

        assert exit_code == 2
        assert "known_hosts file not found" in capsys.readouterr().err

    def test_cli_options_override_settings(self, deps: MagicMock) -> None:
        with patch(
            "sshnode.__main__.Dependencies.from_settings", return_value=deps
        ) as from_settings, patch("sshnode.__main__.configure_logging"):
            main(["web1", "--framework-dir", "/etc/fw", "--ssh-config", "/etc/ssh", "--", "id"])

        settings = from_settings.call_args.args[0]
        assert settings.framework_dir == "/etc/fw"
        assert settings.ssh_config == "/etc/ssh"
