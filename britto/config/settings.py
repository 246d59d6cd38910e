"""Unified config: launcher, status_server and cache sections.

Defaults: loaded from config.yaml.example shipped next to this module (single source of truth, no code-level
defaults). User config ($BRITTO_CONFIG, else config/config.yaml under the working directory) is deep-merged
over the defaults.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

EXAMPLE_CONFIG_PATH = Path(__file__).resolve().parent / "config.yaml.example"
USER_CONFIG_PATH = Path("config") / "config.yaml"

# Lazy-loaded example config (single source of truth for defaults)
_EXAMPLE_CONFIG: Optional[Dict[str, Any]] = None


def _load_example_config() -> Dict[str, Any]:
    """Load config.yaml.example as defaults. No code-level defaults."""
    global _EXAMPLE_CONFIG
    if _EXAMPLE_CONFIG is None:
        with open(EXAMPLE_CONFIG_PATH, encoding="utf-8") as f:
            _EXAMPLE_CONFIG = yaml.safe_load(f) or {}
    return _EXAMPLE_CONFIG


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge override into base. Override values take precedence."""
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _merged_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Merge config with example so missing keys come from the example file."""
    return _deep_merge(_load_example_config(), cfg)


def read_config(config_path: Optional[str] = None) -> Tuple[dict, str]:
    """Load YAML config. Returns (config, resolved_path); falls back to the example file."""
    config_path = config_path or os.environ.get("BRITTO_CONFIG", str(USER_CONFIG_PATH))
    if not Path(config_path).exists():
        config_path = str(EXAMPLE_CONFIG_PATH)
    config_path = str(Path(config_path).resolve())
    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}
    return config, config_path


def get_launcher_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Return launcher settings as a flat dict.

    classpath is joined with os.pathsep; options_file is resolved against the working
    directory when relative. Missing values come from config.yaml.example.
    """
    merged = _merged_config(config or {})
    launcher = merged.get("launcher") or {}

    classpath = launcher.get("classpath") or []
    if isinstance(classpath, str):
        classpath = [classpath]

    options_file = launcher.get("options_file")
    if options_file and not os.path.isabs(options_file):
        options_file = os.path.abspath(options_file)

    return {
        "options_file": options_file,
        "java_home_env": launcher.get("java_home_env"),
        "java_opts_env": launcher.get("java_opts_env"),
        "java_tool_options_env": launcher.get("java_tool_options_env"),
        "classpath": os.pathsep.join(str(p) for p in classpath),
        "main_class": launcher.get("main_class"),
        "app_args": [str(a) for a in (launcher.get("app_args") or [])],
        "default_mem_mb": int(launcher.get("default_mem_mb")),
        "log_on_launch": bool(launcher.get("log_on_launch")),
        "exec_mode": launcher.get("exec_mode") or "auto",
    }


def get_status_server_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return status server host/port."""
    merged = _merged_config(config or {})
    server = merged.get("status_server") or {}
    return {"host": server.get("host"), "port": int(server.get("port"))}


def get_cache_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return cache connection settings (url, socket_timeout)."""
    merged = _merged_config(config or {})
    cache = merged.get("cache") or {}
    timeout = cache.get("socket_timeout")
    return {
        "url": cache.get("url"),
        "socket_timeout": float(timeout) if timeout is not None else None,
    }
