"""Argument scanning for the launcher: options file tokens, CLI flags, residual args."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from britto.errors import ArgumentError

logger = logging.getLogger(__name__)

DEFAULT_MEM_MB = 1024

USAGE = """\
Usage: britto-launch [options] [--] [args...]

  -h | -help         print this message
  -v | -verbose      this runner is chattier
  -d | -debug        enable debug output for the launcher
  -no-version-check  don't run the java version check
  -main <classname>  define a custom main class
  -jvm-debug <port>  turn on JVM debugging, open at the given port
  -java-home <path>  alternate JAVA_HOME
  -mem <integer>     set memory options in MB (default: 1024)

  # java options, passed to the JVM (-J is stripped)
  -Dkey=val          pass -Dkey=val directly to the java runtime
  -J-X               pass option -X directly to the java runtime
  -agentlib...       pass the agent option directly to the java runtime

  --                 stop option parsing; everything after is passed to the program
"""

ResidualHook = Callable[[List[str]], List[str]]


@dataclass
class LaunchConfig:
    """Everything one parsing pass collects. Consumed once to build the command."""

    java_home: Optional[str] = None
    java_args: List[str] = field(default_factory=list)
    memory_mb: int = DEFAULT_MEM_MB
    debug_port: Optional[int] = None
    main_class: Optional[str] = None
    no_version_check: bool = False
    verbose: bool = False
    debug: bool = False
    help_requested: bool = False
    residual_args: List[str] = field(default_factory=list)


def tokenize_options_file(contents: str) -> List[str]:
    """Split options-file text into tokens: drop '#' lines, split the rest on whitespace (no quoting)."""
    tokens: List[str] = []
    for line in contents.split("\n"):
        line = line.rstrip("\r")
        if line.startswith("#"):
            continue
        tokens.extend(line.split())
    return tokens


def _require_arg(option: str, kind: str, tokens: List[str], i: int) -> str:
    """Return the value after tokens[i]; missing or '-'-prefixed values are an ArgumentError."""
    if i + 1 >= len(tokens):
        raise ArgumentError(option, kind)
    value = tokens[i + 1]
    if not value or value.startswith("-"):
        raise ArgumentError(option, kind)
    return value


def _positive_int(option: str, kind: str, value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ArgumentError(option, kind, value) from None
    if number <= 0:
        raise ArgumentError(option, kind, value)
    return number


def parse_args(
    argv: Iterable[str],
    default_mem_mb: int = DEFAULT_MEM_MB,
    postprocess: Optional[ResidualHook] = None,
) -> LaunchConfig:
    """Scan argv left to right and return a populated LaunchConfig.

    -h/-help stops the scan immediately. A literal '--' sends every later token to
    residual_args. postprocess, when given, replaces residual_args with its result.
    """
    tokens = list(argv)
    config = LaunchConfig(memory_mb=default_mem_mb)
    i = 0
    while i < len(tokens):
        arg = tokens[i]
        if arg == "--":
            config.residual_args.extend(tokens[i + 1:])
            break
        if arg in ("-h", "-help"):
            config.help_requested = True
            return config
        if arg in ("-v", "-verbose"):
            config.verbose = True
        elif arg in ("-d", "-debug"):
            config.debug = True
        elif arg == "-no-version-check":
            config.no_version_check = True
        elif arg == "-mem":
            config.memory_mb = _positive_int(arg, "integer", _require_arg(arg, "integer", tokens, i))
            i += 1
        elif arg == "-jvm-debug":
            port = _positive_int(arg, "port", _require_arg(arg, "port", tokens, i))
            config.debug_port = port
            config.java_args.append("-Xdebug")
            config.java_args.append(f"-Xrunjdwp:transport=dt_socket,server=y,suspend=n,address={port}")
            i += 1
        elif arg == "-main":
            config.main_class = _require_arg(arg, "class", tokens, i)
            i += 1
        elif arg == "-java-home":
            config.java_home = _require_arg(arg, "path", tokens, i)
            i += 1
        elif arg.startswith("-D") or arg.startswith("-agentlib"):
            config.java_args.append(arg)
        elif arg.startswith("-J"):
            if arg[2:]:
                config.java_args.append(arg[2:])
        else:
            config.residual_args.append(arg)
        i += 1

    if postprocess is not None:
        config.residual_args = list(postprocess(list(config.residual_args)))
    logger.debug(
        "parsed mem=%s java_args=%s main=%s residual=%s",
        config.memory_mb,
        config.java_args,
        config.main_class,
        config.residual_args,
    )
    return config
