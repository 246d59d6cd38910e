"""JVM server launcher: options file + CLI flags + environment -> java command line."""

from britto.launcher.command import build_command, launch
from britto.launcher.memory import memory_plan
from britto.launcher.options import LaunchConfig, parse_args, tokenize_options_file
from britto.launcher.runner import exec_runner

__all__ = [
    "LaunchConfig",
    "build_command",
    "exec_runner",
    "launch",
    "memory_plan",
    "parse_args",
    "tokenize_options_file",
]
