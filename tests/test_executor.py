"""Tests for SSHNodeExecutor."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from sshnode import (
    ExecutionContext,
    Framework,
    MissingHostnameError,
    MissingUsernameError,
    NodeEntry,
    Properties,
    SSHNodeExecutor,
)
from sshnode.models import SessionDescriptor
from sshnode.services.transport import AuthRejected


@pytest.fixture
def framework() -> Framework:
    return Framework(
        properties=Properties(
            {"framework.ssh.timeout": "2000", "framework.ssh.keypath": "/system/key"}
        ),
        projects={"ops": Properties({"project.ssh-keypath": "/ops/key"})},
    )


@pytest.fixture
def transport() -> MagicMock:
    transport = MagicMock()
    transport.run = AsyncMock(return_value=0)
    return transport


@pytest.fixture
def context() -> ExecutionContext:
    return ExecutionContext(project="ops", listener=MagicMock())


def test_description() -> None:
    """Executor describes itself with static metadata."""
    desc = SSHNodeExecutor.DESCRIPTION

    assert desc.name == "sshnode"
    assert desc.title == "SSH"
    assert desc.description == "Executes a command on a remote node via SSH."
    assert desc.properties == ()
    assert dict(desc.properties_mapping) == {"keypath": "project.ssh-keypath"}


def test_description_property(framework: Framework, transport: MagicMock) -> None:
    executor = SSHNodeExecutor(framework, transport=transport)

    assert executor.description is SSHNodeExecutor.DESCRIPTION


@pytest.mark.asyncio
async def test_execute_command_success(
    framework: Framework, transport: MagicMock, context: ExecutionContext
) -> None:
    executor = SSHNodeExecutor(framework, transport=transport)
    node = NodeEntry("web1", "web1.example.com", "deploy")

    result = await executor.execute_command(context, ["uptime"], node)

    assert result.success is True
    assert result.result_code == 0
    session: SessionDescriptor = transport.run.call_args.args[0]
    assert session.hostname == "web1.example.com"
    assert session.username == "deploy"
    assert session.keyfile_path == "/ops/key"
    assert session.timeout_ms == 2000
    assert session.command == ("uptime",)
    assert session.listener is context.listener


@pytest.mark.asyncio
async def test_missing_hostname_never_connects(
    framework: Framework, transport: MagicMock, context: ExecutionContext
) -> None:
    executor = SSHNodeExecutor(framework, transport=transport)

    with pytest.raises(MissingHostnameError):
        await executor.execute_command(context, ["uptime"], NodeEntry("web1", None, "u"))

    transport.run.assert_not_called()


@pytest.mark.asyncio
async def test_missing_username_never_connects(
    framework: Framework, transport: MagicMock, context: ExecutionContext
) -> None:
    executor = SSHNodeExecutor(framework, transport=transport)

    with pytest.raises(MissingUsernameError):
        await executor.execute_command(context, ["uptime"], NodeEntry("web1", "web1"))

    transport.run.assert_not_called()


@pytest.mark.asyncio
async def test_auth_failure_uses_configured_template(
    transport: MagicMock, context: ExecutionContext
) -> None:
    framework = Framework(
        properties=Properties(
            {"framework.messages.error.ssh.authcancel": "Cannot log in to {0}"}
        )
    )
    transport.run = AsyncMock(side_effect=AuthRejected("Permission denied"))
    executor = SSHNodeExecutor(framework, transport=transport)

    result = await executor.execute_command(
        context, ["uptime"], NodeEntry("web1", "web1", "deploy")
    )

    assert result.success is False
    assert result.message == "Cannot log in to web1"
    context.listener.log.assert_called_once_with(0, "Cannot log in to web1")


@pytest.mark.asyncio
async def test_custom_keyfile_finder(
    framework: Framework, transport: MagicMock, context: ExecutionContext
) -> None:
    executor = SSHNodeExecutor(
        framework, transport=transport, keyfile_finder=lambda n, f, p: "/vault/key"
    )

    await executor.execute_command(context, ["true"], NodeEntry("web1", "web1", "u"))

    assert transport.run.call_args.args[0].keyfile_path == "/vault/key"


@pytest.mark.asyncio
async def test_concurrent_invocations_are_independent(framework: Framework) -> None:
    """Invocations on different nodes run side by side without sharing state."""
    seen: list[str] = []

    async def run(session: SessionDescriptor, on_phase: object) -> int:
        seen.append(session.node_name)
        await asyncio.sleep(0)
        return len(session.node_name)

    transport = MagicMock()
    transport.run = run
    executor = SSHNodeExecutor(framework, transport=transport)
    nodes = [NodeEntry(f"node{'x' * i}", "h", "u") for i in range(3)]

    results = await asyncio.gather(
        *(
            executor.execute_command(
                ExecutionContext(project="ops", listener=MagicMock()), ["true"], node
            )
            for node in nodes
        )
    )

    assert sorted(seen) == sorted(n.nodename for n in nodes)
    assert [r.result_code for r in results] == [4, 5, 6]
