"""Command line entry point: run one command on one or more nodes."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from sshnode.config import Settings
from sshnode.dependencies import Dependencies
from sshnode.models import ExecutionContext, ExecutionResult, NodeEntry
from sshnode.services import ConfigurationError
from sshnode.utils.console import ColorfulFormatter
from sshnode.utils.listener import LoggingListener

logger = logging.getLogger("sshnode")

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


def configure_logging(settings: Settings) -> None:
    """Install the console formatter on the sshnode logger."""
    use_colors = settings.log_colors and sys.stderr.isatty()

    logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        logger.addHandler(handler)
        logger.propagate = False

    logging.getLogger("asyncssh").setLevel(logging.WARNING)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse ``NODE [NODE ...] [options] -- COMMAND [ARG ...]``."""
    parser = argparse.ArgumentParser(
        prog="sshnode",
        description="Run a command on remote nodes over SSH",
    )
    parser.add_argument(
        "nodes",
        nargs="+",
        help="Node names from the SSH config, or user@host[:port]",
    )
    parser.add_argument("--project", default="default", help="Project name")
    parser.add_argument("--framework-dir", help="Framework configuration directory")
    parser.add_argument("--ssh-config", help="SSH config file to read nodes from")
    argv = list(sys.argv[1:] if argv is None else argv)
    if "--" not in argv:
        parser.error("a command is required after --")
    split = argv.index("--")

    args = parser.parse_args(argv[:split])
    args.command = argv[split + 1 :]
    if not args.command:
        parser.error("a command is required after --")
    return args


def resolve_node(name: str, inventory: dict[str, NodeEntry]) -> NodeEntry:
    """Look a node up in the inventory, or treat it as ``user@host[:port]``."""
    node = inventory.get(name)
    if node is not None:
        return node
    return NodeEntry(nodename=name, hostname=name)


async def run_nodes(
    deps: Dependencies,
    project: str,
    command: Sequence[str],
    nodes: Sequence[NodeEntry],
) -> list[ExecutionResult | ConfigurationError]:
    """Run the command on every node concurrently, bounded by max_parallel."""
    semaphore = asyncio.Semaphore(max(1, deps.settings.max_parallel))

    async def run_one(node: NodeEntry) -> ExecutionResult | ConfigurationError:
        context = ExecutionContext(project=project, listener=LoggingListener(node.nodename))
        async with semaphore:
            try:
                return await deps.executor.execute_command(context, command, node)
            except ConfigurationError as e:
                logger.error("%s", e)
                return e

    return await asyncio.gather(*(run_one(node) for node in nodes))


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = Settings.from_env()
    if args.framework_dir:
        settings.framework_dir = args.framework_dir
    if args.ssh_config:
        settings.ssh_config = args.ssh_config
    configure_logging(settings)

    try:
        deps = Dependencies.from_settings(settings)
    except (FileNotFoundError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    inventory = deps.inventory.parse()
    nodes = [resolve_node(name, inventory) for name in args.nodes]
    results = asyncio.run(run_nodes(deps, args.project, args.command, nodes))

    exit_code = EXIT_OK
    for node, result in zip(nodes, results):
        print(f"{node.nodename}: {result}")
        if isinstance(result, ConfigurationError):
            exit_code = EXIT_CONFIG
        elif not result.success and exit_code == EXIT_OK:
            exit_code = EXIT_FAILED
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
