"""britto-launch: build the java command line for the server and hand control to it."""

import logging
import os
import sys
from typing import List, Mapping, Optional

import yaml

from britto.config.settings import get_launcher_config, read_config
from britto.core.logging_utils import configure_logging
from britto.errors import HelpRequested, LauncherError
from britto.launcher.command import launch, read_options_file
from britto.launcher.options import USAGE, LaunchConfig, ResidualHook
from britto.launcher.runner import echo_command, exec_runner

logger = logging.getLogger(__name__)


def main(
    argv: Optional[List[str]] = None,
    env: Optional[Mapping[str, str]] = None,
    postprocess: Optional[ResidualHook] = None,
) -> int:
    """Parse, resolve, echo and execute. Returns the child's exit code on the spawn path."""
    args = list(sys.argv[1:] if argv is None else argv)
    env = dict(os.environ if env is None else env)
    flags = LaunchConfig()

    def _on_parsed(parsed: LaunchConfig) -> None:
        flags.verbose = parsed.verbose
        flags.debug = parsed.debug
        configure_logging(verbose=parsed.verbose, debug=parsed.debug)

    try:
        config_dict, config_path = read_config()
        settings = get_launcher_config(config_dict)
        logger.debug("config=%s options_file=%s", config_path, settings["options_file"])
        command, command_args = launch(
            args,
            env,
            read_options_file(settings["options_file"]),
            settings=settings,
            postprocess=postprocess,
            on_parsed=_on_parsed,
        )
        if settings["log_on_launch"]:
            echo_command(command, command_args, verbose=flags.verbose or flags.debug)
        return exec_runner(command, command_args, env, mode=settings["exec_mode"])
    except HelpRequested as e:
        print(USAGE)
        return e.exit_code
    except LauncherError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    except (yaml.YAMLError, ValueError, OSError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
