"""XDG-compliant path management for finderveil.

Configuration lives under the XDG config directory. The report artifact
is written to the system temporary directory under a fixed name.
"""

import os
import tempfile
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "finderveil"

# Default report file name inside the temporary directory
DEFAULT_REPORT_NAME = "output.out"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/finderveil/ (or XDG_CONFIG_HOME/finderveil/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/finderveil/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/finderveil/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_report_path(name: str = DEFAULT_REPORT_NAME) -> Path:
    """Get the report artifact path in the system temporary directory.

    Args:
        name: File name of the report.

    Returns:
        Path to <tempdir>/<name>.
    """
    return Path(tempfile.gettempdir()) / name
