"""Heap/perm/code-cache flags derived from -mem and the detected java version."""

import logging
import re
import subprocess
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

# Any of these in the runtime args means the caller already sized memory; add nothing.
HEAP_MARKERS = (
    "-Xmx",
    "-Xms",
    "-XX:MaxPermSize",
    "-XX:MaxMetaspaceSize",
    "-XX:ReservedCodeCacheSize",
    "-XX:+UseCGroupMemoryLimitForHeap",
    "-XX:MaxRAM",
    "-XX:InitialRAMPercentage",
    "-XX:MaxRAMPercentage",
    "-XX:MinRAMPercentage",
)

PERM_MIN_MB = 256
PERM_MAX_MB = 1024

# Runtimes newer than this have no permanent generation.
PERMGEN_REMOVED_AFTER = (1, 8)

_VERSION_RE = re.compile(r'(?:java|openjdk) version "([^"]+)"')
_VERSION_TIMEOUT_SEC = 10


def perm_size_mb(memory_mb: int) -> int:
    """memory/4 clamped to [256, 1024]."""
    return max(PERM_MIN_MB, min(PERM_MAX_MB, memory_mb // 4))


def code_cache_size_mb(memory_mb: int) -> int:
    return perm_size_mb(memory_mb) // 2


def has_heap_marker(args: Iterable[str]) -> bool:
    """True when any arg already sets a heap or cache size."""
    for arg in args:
        if any(marker in arg for marker in HEAP_MARKERS):
            return True
    return False


def parse_java_version(output: str) -> Optional[Tuple[int, ...]]:
    """Parse `java -version` output into a tuple, e.g. '1.8.0_292' -> (1, 8, 0, 292), '17.0.2' -> (17, 0, 2)."""
    match = _VERSION_RE.search(output or "")
    if not match:
        return None
    parts = re.split(r"[._+-]", match.group(1))
    numbers: List[int] = []
    for part in parts:
        if not part.isdigit():
            break
        numbers.append(int(part))
    return tuple(numbers) if numbers else None


def detect_java_version(java_cmd: str) -> Optional[Tuple[int, ...]]:
    """Run `<java_cmd> -version` and parse it. None when the runtime cannot be queried."""
    try:
        result = subprocess.run(
            [java_cmd, "-version"],
            capture_output=True,
            text=True,
            timeout=_VERSION_TIMEOUT_SEC,
            check=False,
        )
    except (subprocess.TimeoutExpired, OSError) as e:
        logger.debug("%s -version failed: %s", java_cmd, e)
        return None
    # java prints its version banner on stderr
    version = parse_java_version(result.stderr or result.stdout)
    logger.debug("detected java version %s from %s", version, java_cmd)
    return version


def memory_plan(
    memory_mb: int,
    existing_args: Iterable[str],
    java_version: Optional[Tuple[int, ...]] = None,
    version_check: bool = True,
) -> List[str]:
    """
    Return memory flags for the JVM.

    Empty when existing_args already carry a heap marker. Newer runtimes (version check enabled and
    java_version > 1.8) get heap + code cache; everything else gets the legacy form with MaxPermSize.
    """
    if has_heap_marker(existing_args):
        logger.debug("memory flags already present, skipping -mem %s", memory_mb)
        return []
    codecache = code_cache_size_mb(memory_mb)
    heap = [f"-Xms{memory_mb}m", f"-Xmx{memory_mb}m"]
    if version_check and java_version is not None and java_version > PERMGEN_REMOVED_AFTER:
        return heap + [f"-XX:ReservedCodeCacheSize={codecache}m"]
    return heap + [
        f"-XX:MaxPermSize={perm_size_mb(memory_mb)}m",
        f"-XX:ReservedCodeCacheSize={codecache}m",
    ]
