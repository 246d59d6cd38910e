"""Echo the final command line, then replace the current process or spawn and wait."""

import logging
import os
import shlex
import subprocess
import sys
from typing import List, Mapping, Optional, TextIO

from britto.core.logging_utils import log_launch_command
from britto.errors import LaunchTargetNotFound

logger = logging.getLogger(__name__)

EXEC_MODES = ("auto", "replace", "spawn")


def resolve_exec_mode(mode: str = "auto", platform: Optional[str] = None) -> str:
    """Return 'replace' or 'spawn'. auto spawns on Windows and Cygwin."""
    if mode not in EXEC_MODES:
        raise ValueError(f"exec_mode must be one of {EXEC_MODES}, got {mode!r}")
    if mode != "auto":
        return mode
    platform = platform or sys.platform
    if platform.startswith("win") or platform == "cygwin":
        return "spawn"
    return "replace"


def format_command(command: str, args: List[str], verbose: bool = False) -> str:
    """One shell-quoted line, or one argument per line under a header when verbose."""
    argv = [command, *args]
    if not verbose:
        return shlex.join(argv)
    lines = ["# Executing command line:"]
    lines.extend(shlex.quote(a) for a in argv)
    return "\n".join(lines) + "\n"


def echo_command(command: str, args: List[str], verbose: bool = False, stream: Optional[TextIO] = None) -> None:
    print(format_command(command, args, verbose=verbose), file=stream or sys.stdout, flush=True)


def restore_terminal(fd: Optional[int] = None) -> None:
    """Turn canonical mode and echo back on for the controlling terminal. Best effort."""
    try:
        import termios
    except ImportError:
        return
    try:
        fd = sys.stdin.fileno() if fd is None else fd
        if not os.isatty(fd):
            return
        attrs = termios.tcgetattr(fd)
        attrs[3] |= termios.ICANON | termios.ECHO
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
    except (OSError, ValueError, termios.error) as e:
        logger.debug("terminal restore skipped: %s", e)


def shell_exit_code(returncode: int) -> int:
    """subprocess reports death by signal N as -N; shells report 128+N."""
    if returncode < 0:
        return 128 + -returncode
    return returncode


def exec_runner(
    command: str,
    args: List[str],
    env: Mapping[str, str],
    mode: str = "auto",
    platform: Optional[str] = None,
) -> int:
    """Run command with args.

    replace: os.execvpe, does not return on success. spawn: wait for the child and return its exit
    code (128+N when killed by signal N); on Cygwin the terminal is put back into canonical echo mode afterwards.
    """
    platform = platform or sys.platform
    resolved = resolve_exec_mode(mode, platform)
    log_launch_command(command, args, resolved)
    if resolved == "replace":
        # Flush before exec so buffered output is not lost with the old process image.
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            os.execvpe(command, [command, *args], dict(env))
        except OSError as e:
            raise LaunchTargetNotFound(command, reason=f"could not be executed: {e}") from e

    try:
        result = subprocess.run([command, *args], env=dict(env), check=False)
    except OSError as e:
        raise LaunchTargetNotFound(command, reason=f"could not be executed: {e}") from e
    finally:
        if platform == "cygwin":
            restore_terminal()
    logger.info("child exited with %s", result.returncode)
    return shell_exit_code(result.returncode)
