"""Configuration path handling for the SCIM core.

This module implements path resolution for the operator configuration file
following the XDG Base Directory Specification for user-specific
configuration files.
"""

import os
from pathlib import Path
from typing import Dict, Optional

import platformdirs

# Application name used for directory paths
APP_NAME = "scim-core"

# Environment variable names
ENV_CONFIG_PATH = "SCIM_CORE_CONFIG_PATH"

# Default filenames
CONFIG_FILENAME = "scim-core.yml"


def get_user_config_dir() -> Path:
    """Get the path to the user's config directory for this application."""
    return Path(platformdirs.user_config_dir(APP_NAME))


def get_user_config_path() -> Path:
    """Get the path the user configuration file would live at."""
    return get_user_config_dir() / CONFIG_FILENAME


def get_config_path() -> Optional[str]:
    """Get the path to the configuration file, respecting XDG specification.

    Returns:
        Path to the configuration file, or None if no file is found
    """
    # 1. Check environment variable
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path and Path(env_path).is_file():
        return env_path

    # 2. Check user config directory
    user_path = get_user_config_path()
    if user_path.is_file():
        return str(user_path)

    # 3. No configuration; built-in defaults apply
    return None


def describe_config_sources() -> Dict[str, Optional[str]]:
    """Describe each configuration source and whether it is in effect.

    Returns:
        Mapping with the environment override, the user path and the
        resolved path (None when defaults apply)
    """
    return {
        "env_var": ENV_CONFIG_PATH,
        "env_value": os.environ.get(ENV_CONFIG_PATH),
        "user_path": str(get_user_config_path()),
        "resolved": get_config_path(),
    }
