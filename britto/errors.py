"""Error taxonomy: fatal launcher errors and the cache boundary error."""

from typing import Optional


class BrittoError(Exception):
    """Base class for all britto errors."""


class LauncherError(BrittoError):
    """Fatal at startup. The launcher exits with exit_code after printing the message."""

    exit_code = 1


class ArgumentError(LauncherError):
    """An option is missing its value or the value is malformed."""

    def __init__(self, option: str, kind: str, value: Optional[str] = None) -> None:
        self.option = option
        self.kind = kind
        self.value = value
        if value is None:
            msg = f"{option} requires <{kind}> argument"
        else:
            msg = f"{option} requires <{kind}> argument, got {value!r}"
        super().__init__(msg)


class LaunchTargetNotFound(LauncherError):
    """Resolved runtime binary is missing or not executable."""

    def __init__(self, path: str, reason: str = "not found or not executable") -> None:
        self.path = path
        super().__init__(f"Java runtime {path!r} {reason}. Set JAVA_HOME or pass -java-home <path>.")


class HelpRequested(LauncherError):
    """-h/-help was given; usage is printed and the launcher exits non-zero."""


class CacheUnavailable(BrittoError):
    """The external cache store is unreachable or returned an error."""
