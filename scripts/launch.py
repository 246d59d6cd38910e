#!/usr/bin/env python3
"""Launch the JVM server: options file + command line + JAVA_HOME/JAVA_OPTS -> java command, then exec.

Same as the britto-launch console script; usable from a checkout without installing."""

import os
import sys

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _PROJECT_ROOT)

from britto.launcher.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
