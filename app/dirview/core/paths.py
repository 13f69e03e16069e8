"""XDG-compliant path management for dirview.

Configuration lives in ~/.config/dirview/ unless XDG_CONFIG_HOME
points somewhere else.
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "dirview"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/dirview/ (or XDG_CONFIG_HOME/dirview/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/dirview/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/dirview/theme.toml.
    """
    return get_config_dir() / "theme.toml"

