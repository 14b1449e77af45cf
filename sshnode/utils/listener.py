"""ExecutionListener that writes to the standard logging module."""

import logging

from sshnode.models import LogLevel

LEVEL_MAP = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.VERBOSE: logging.DEBUG,
    LogLevel.DEBUG: logging.DEBUG,
}


class LoggingListener:
    """Routes listener messages to a logger, prefixed with the node name."""

    def __init__(self, node_name: str, logger: logging.Logger | None = None) -> None:
        self.node_name = node_name
        self.logger = logger or logging.getLogger("sshnode.output")

    def log(self, level: int, message: str) -> None:
        try:
            py_level = LEVEL_MAP[LogLevel(level)]
        except ValueError:
            py_level = logging.DEBUG
        self.logger.log(py_level, "[%s] %s", self.node_name, message)
