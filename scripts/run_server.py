#!/usr/bin/env python3
"""Standalone status server: GET / (welcome page), GET /status (cache round-trip).

Reads status_server.host/port and cache.url from config (default config/config.yaml, falling back to
config/config.yaml.example), then serves with uvicorn."""

import argparse
import logging
import os
import sys

# Project root: same layout as the package
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _PROJECT_ROOT)
os.chdir(_PROJECT_ROOT)

logging.basicConfig(
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    level=logging.INFO,
)


def main() -> None:
    from britto.config.settings import read_config
    from britto.status_server.app import run_server

    parser = argparse.ArgumentParser(description="Run the britto status server")
    parser.add_argument("config", nargs="?", default=None, help="Path to config YAML")
    args = parser.parse_args()

    config_path = args.config
    if config_path and not os.path.isabs(config_path):
        config_path = os.path.join(_PROJECT_ROOT, config_path)
    config, resolved = read_config(config_path)
    logging.getLogger(__name__).info("Using config %s", resolved)
    run_server(config)


if __name__ == "__main__":
    main()
