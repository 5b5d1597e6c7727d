"""Default configuration settings for the mpvex editor.

This module provides default settings and paths used throughout the application.
"""

import os
from ..utils.constants import DEFAULT_CONFIG_FILE, DEFAULT_CONFIG_DIR

def default_config() -> dict:
    """Get default configuration settings.

    Returns:
        dict: Default configuration dictionary
    """

    return {
        "theme": "dark",
        "editorSettings": {
            "lineNumbers": True,
            "wordWrap": False,
            "completeWhileTyping": True,
            "mouseSupport": False,
            "autoIndent": True,
            "autoClosePairs": True,
            "tabWidth": 4
        },
        "paletteOverrides": {}  # Palette role -> "#rrggbb"
    }

def get_config_path(config_name: str = "default") -> str:
    """Get the path to a specific configuration file.

    Args:
        config_name: Name of the configuration (default: "default")

    Returns:
        str: Path to the configuration file
    """
    # Sanitize the config name
    config_name = ''.join(c for c in config_name if c.isalnum() or c in ['-', '_']).lower() or "default"

    if config_name == "default":
        return os.path.join(DEFAULT_CONFIG_DIR, DEFAULT_CONFIG_FILE)
    else:
        return os.path.join(DEFAULT_CONFIG_DIR, f"{config_name}.json")
