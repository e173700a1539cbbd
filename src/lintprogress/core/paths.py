"""Location of the lintprogress home directory."""

from __future__ import annotations

import os
from pathlib import Path

# Default directory name under user home
DEFAULT_HOME_DIR_NAME = ".lintprogress"

# Environment variable to override home directory
LINTPROGRESS_HOME_ENV = "LINTPROGRESS_HOME"


def get_lintprogress_home() -> Path:
    """Get the lintprogress home directory path.

    Resolution order:
    1. LINTPROGRESS_HOME environment variable (if set)
    2. ~/.lintprogress (default)
    """
    env_home = os.environ.get(LINTPROGRESS_HOME_ENV)
    if env_home:
        return Path(env_home)
    return Path.home() / DEFAULT_HOME_DIR_NAME
