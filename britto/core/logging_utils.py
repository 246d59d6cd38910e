"""Logging setup and structured key=value lines for launch events."""

import logging
import shlex
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    """basicConfig for entry points: -d gives DEBUG, -v gives INFO, otherwise WARNING."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT, level=level, force=True)


def log_launch_command(
    command: str,
    args: List[str],
    mode: str,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Log the resolved launch as structured key-value."""
    extra = dict(extra or {})
    extra["command"] = command
    extra["mode"] = mode
    extra["argc"] = len(args)
    msg = "launch_command " + " ".join(f"{k}={v}" for k, v in sorted(extra.items()))
    logger.info(msg)
    logger.debug("launch_argv %s", shlex.join([command, *args]))
