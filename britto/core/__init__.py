"""Logging helpers shared by the launcher and the status server."""

from britto.core.logging_utils import configure_logging, log_launch_command

__all__ = ["configure_logging", "log_launch_command"]
