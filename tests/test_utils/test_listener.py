"""Tests for LoggingListener."""

import logging

import pytest

from sshnode.models import LogLevel
from sshnode.utils.listener import LoggingListener


def test_maps_levels(caplog: pytest.LogCaptureFixture) -> None:
    listener = LoggingListener("web1", logging.getLogger("test.listener"))

    with caplog.at_level(logging.DEBUG, logger="test.listener"):
        listener.log(LogLevel.ERROR, "bad")
        listener.log(LogLevel.WARN, "careful")
        listener.log(LogLevel.INFO, "hello")
        listener.log(LogLevel.DEBUG, "detail")

    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.ERROR, "[web1] bad"),
        (logging.WARNING, "[web1] careful"),
        (logging.INFO, "[web1] hello"),
        (logging.DEBUG, "[web1] detail"),
    ]


def test_unknown_level_logs_debug(caplog: pytest.LogCaptureFixture) -> None:
    listener = LoggingListener("web1", logging.getLogger("test.listener"))

    with caplog.at_level(logging.DEBUG, logger="test.listener"):
        listener.log(99, "odd")

    assert caplog.records[0].levelno == logging.DEBUG
