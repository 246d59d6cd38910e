"""Build the final java command line from argv, environment and the options file."""

import logging
import os
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from britto.errors import HelpRequested
from britto.launcher.memory import detect_java_version, has_heap_marker, memory_plan
from britto.launcher.options import DEFAULT_MEM_MB, LaunchConfig, ResidualHook, parse_args, tokenize_options_file
from britto.launcher.runtime import resolve_java_cmd

logger = logging.getLogger(__name__)

VersionProbe = Callable[[str], Optional[Tuple[int, ...]]]


def read_options_file(path: Optional[str]) -> Optional[str]:
    """Return the options file contents, or None when no file is configured or it does not exist."""
    if not path or not os.path.isfile(path):
        return None
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def merge_options_file(argv: List[str], config_file_contents: Optional[str]) -> List[str]:
    """Options-file tokens first so the real command line can override them."""
    if not config_file_contents:
        return list(argv)
    return tokenize_options_file(config_file_contents) + list(argv)


def _env_args(env: Mapping[str, str], name: Optional[str]) -> List[str]:
    if not name:
        return []
    return (env.get(name) or "").split()


def build_command(
    config: LaunchConfig,
    env: Mapping[str, str],
    settings: Dict[str, Any],
    version_probe: Optional[VersionProbe] = None,
) -> Tuple[str, List[str]]:
    """
    Resolve the runtime and assemble (command, args).

    Runtime flags, lowest to highest precedence: $JAVA_OPTS, memory plan, extra runtime args.
    Then -cp <classpath>, main class (-main beats the configured default), app args, residual args.
    """
    java_cmd = resolve_java_cmd(config.java_home, env, settings.get("java_home_env") or "JAVA_HOME")

    java_opts = _env_args(env, settings.get("java_opts_env"))
    tool_opts = _env_args(env, settings.get("java_tool_options_env"))

    version = None
    if not config.no_version_check and not has_heap_marker(java_opts + tool_opts + config.java_args):
        version = (version_probe or detect_java_version)(java_cmd)
    mem_opts = memory_plan(
        config.memory_mb,
        java_opts + tool_opts + config.java_args,
        java_version=version,
        version_check=not config.no_version_check,
    )

    args: List[str] = [*java_opts, *mem_opts, *config.java_args]
    classpath = settings.get("classpath")
    if classpath:
        args += ["-cp", classpath]
    main_class = config.main_class or settings.get("main_class")
    if main_class:
        args.append(main_class)
    args += list(settings.get("app_args") or [])
    args += config.residual_args
    return java_cmd, args


def launch(
    argv: List[str],
    env: Mapping[str, str],
    config_file_contents: Optional[str] = None,
    *,
    settings: Dict[str, Any],
    postprocess: Optional[ResidualHook] = None,
    version_probe: Optional[VersionProbe] = None,
    on_parsed: Optional[Callable[[LaunchConfig], None]] = None,
) -> Tuple[str, List[str]]:
    """Options file + argv + env -> (command, args). Raises HelpRequested for -h/-help.

    on_parsed sees the LaunchConfig before the runtime is resolved (the CLI uses it for -v/-d).
    """
    tokens = merge_options_file(argv, config_file_contents)
    config = parse_args(tokens, default_mem_mb=settings.get("default_mem_mb") or DEFAULT_MEM_MB, postprocess=postprocess)
    if config.help_requested:
        raise HelpRequested("help requested")
    if on_parsed is not None:
        on_parsed(config)
    return build_command(config, env, settings, version_probe=version_probe)
