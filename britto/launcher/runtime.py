"""Java runtime resolution: -java-home, then $JAVA_HOME, then PATH."""

import logging
import os
import shutil
from typing import Mapping, Optional

from britto.errors import LaunchTargetNotFound

logger = logging.getLogger(__name__)


def _java_binary_name() -> str:
    return "java.exe" if os.name == "nt" else "java"


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def java_from_home(home: str) -> str:
    """Return <home>/bin/java."""
    return os.path.join(home, "bin", _java_binary_name())


def resolve_java_cmd(
    java_home_override: Optional[str],
    env: Mapping[str, str],
    java_home_env: str = "JAVA_HOME",
    search_path: Optional[str] = None,
) -> str:
    """Return the java executable to run.

    An explicit override must point at an executable. $JAVA_HOME is used only when its bin/java
    is executable; otherwise java is looked up on search_path (defaults to env PATH).
    Raises LaunchTargetNotFound when nothing runnable is found.
    """
    if java_home_override:
        java_cmd = java_from_home(java_home_override)
        if not _is_executable(java_cmd):
            raise LaunchTargetNotFound(java_cmd)
        logger.debug("java from -java-home: %s", java_cmd)
        return java_cmd

    env_home = (env.get(java_home_env) or "").strip()
    if env_home:
        java_cmd = java_from_home(env_home)
        if _is_executable(java_cmd):
            logger.debug("java from %s: %s", java_home_env, java_cmd)
            return java_cmd
        logger.info("%s=%s has no executable bin/java, falling back to PATH", java_home_env, env_home)

    path = search_path if search_path is not None else env.get("PATH")
    found = shutil.which(_java_binary_name(), path=path)
    if not found:
        raise LaunchTargetNotFound(_java_binary_name(), reason="not found on PATH")
    logger.debug("java from PATH: %s", found)
    return found
