"""Tests for logging setup and structured launch lines."""

import logging
from unittest.mock import patch

import pytest

from britto.core.logging_utils import configure_logging, log_launch_command


@pytest.mark.parametrize(
    "verbose,debug,level",
    [(False, False, logging.WARNING), (True, False, logging.INFO), (False, True, logging.DEBUG), (True, True, logging.DEBUG)],
)
def test_configure_logging_levels(verbose, debug, level):
    with patch("britto.core.logging_utils.logging.basicConfig") as basic:
        configure_logging(verbose=verbose, debug=debug)
    assert basic.call_args[1]["level"] == level


def test_log_launch_command_is_key_value(caplog):
    with caplog.at_level(logging.DEBUG, logger="britto.core.logging_utils"):
        log_launch_command("/opt/jdk/bin/java", ["-cp", "lib/*", "Main"], "replace", extra={"pid": 42})
    lines = [r.getMessage() for r in caplog.records]
    assert "launch_command argc=3 command=/opt/jdk/bin/java mode=replace pid=42" in lines
    assert "launch_argv /opt/jdk/bin/java -cp 'lib/*' Main" in lines
