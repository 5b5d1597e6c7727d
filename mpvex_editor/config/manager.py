"""Configuration management for the mpvex editor.

This module handles loading, saving, and validating editor settings such as
the color theme, palette overrides and buffer behaviour.
"""

import json
import os
from typing import Dict, Any, Optional
from rich.console import Console
from rich.panel import Panel
from ..highlighting.theme import PALETTES
from .defaults import default_config, get_config_path

BOOL_EDITOR_SETTINGS = (
    "lineNumbers", "wordWrap", "completeWhileTyping", "mouseSupport", "autoIndent", "autoClosePairs",
)

class ConfigManager:
    """Manages configuration for the mpvex editor.

    This class handles loading, saving, and validating configuration settings,
    including the theme, palette overrides and editor behaviour flags.
    """

    def __init__(self, console: Optional[Console] = None, config_dir: Optional[str] = None):
        """Initialize the ConfigManager.

        Args:
            console: Rich console for output (optional)
            config_dir: Directory holding the config files (defaults to ~/.config/mpvex-editor)
        """
        self.console = console or Console()
        self.config_dir = config_dir

    def load_configuration(self, config_name: Optional[str] = None, quiet: bool = False) -> Dict[str, Any]:
        """Load editor settings from a file.

        Args:
            config_name: Optional name of the config to load (defaults to 'default')
            quiet: Skip the success panel

        Returns:
            Dict containing the configuration settings
        """
        config_name = self._sanitize_config_name(config_name or "default")
        config_path = self._get_config_path(config_name)

        # A missing default config is normal on first start
        if not os.path.exists(config_path):
            if config_name != "default":
                self.console.print(Panel(
                    f"[yellow]Configuration file not found:[/yellow]\n"
                    f"[blue]{config_path}[/blue]",
                    title="Config Not Found", border_style="yellow", expand=False
                ))
            return default_config()

        try:
            with open(config_path, 'r') as f:
                config_data = json.load(f)

            # Validate loaded configuration and provide defaults for missing fields
            validated_config = self._validate_config(config_data)

            if not quiet:
                self.console.print(Panel(
                    f"[green]Configuration loaded successfully from:[/green]\n"
                    f"[blue]{config_path}[/blue]",
                    title="Config Loaded", border_style="green", expand=False
                ))
            return validated_config

        except Exception as e:
            self.console.print(Panel(
                f"[red]Error loading configuration:[/red]\n"
                f"{str(e)}",
                title="Error", border_style="red", expand=False
            ))
            return default_config()

    def save_configuration(self, config_data: Dict[str, Any], config_name: Optional[str] = None) -> bool:
        """Save editor settings to a file.

        Args:
            config_data: Dictionary containing the configuration to save
            config_name: Optional name for the config (defaults to 'default')

        Returns:
            bool: True if saved successfully, False otherwise
        """
        config_path = self._get_config_path(self._sanitize_config_name(config_name or "default"))

        try:
            os.makedirs(os.path.dirname(config_path), exist_ok=True)
            with open(config_path, 'w') as f:
                json.dump(config_data, f, indent=2)

            self.console.print(Panel(
                f"[green]Configuration saved successfully to:[/green]\n"
                f"[blue]{config_path}[/blue]",
                title="Config Saved", border_style="green", expand=False
            ))
            return True

        except Exception as e:
            self.console.print(Panel(
                f"[red]Error saving configuration:[/red]\n"
                f"{str(e)}",
                title="Error", border_style="red", expand=False
            ))
            return False

    def reset_configuration(self) -> Dict[str, Any]:
        """Reset editor settings to their defaults.

        Returns:
            Dict containing the default configuration
        """
        config = default_config()

        self.console.print(Panel(
            "[green]Configuration reset to defaults![/green]\n"
            "• Dark theme, no palette overrides\n"
            "• Line numbers on, word wrap off\n"
            "• Completion while typing enabled",
            title="Config Reset", border_style="green", expand=False
        ))

        return config

    def _sanitize_config_name(self, config_name: str) -> str:
        """Sanitize configuration name for use in filenames.

        Args:
            config_name: Name to sanitize

        Returns:
            str: Sanitized name safe for use in filenames
        """
        sanitized = ''.join(c for c in config_name if c.isalnum() or c in ['-', '_']).lower()
        return sanitized or "default"

    def _get_config_path(self, config_name: str) -> str:
        """Get the full path to a configuration file.

        Args:
            config_name: Name of the configuration

        Returns:
            str: Full path to the configuration file
        """
        path = get_config_path(config_name)
        if self.config_dir is None:
            return path
        return os.path.join(self.config_dir, os.path.basename(path))

    def _validate_config(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate configuration data and provide defaults for missing fields.

        Args:
            config_data: Configuration data to validate

        Returns:
            Dict: Validated configuration with defaults applied where needed
        """
        # Start with default configuration
        validated = default_config()

        if config_data.get("theme") in PALETTES:
            validated["theme"] = config_data["theme"]

        editor_settings = config_data.get("editorSettings")
        if isinstance(editor_settings, dict):
            for key in BOOL_EDITOR_SETTINGS:
                if key in editor_settings:
                    validated["editorSettings"][key] = bool(editor_settings[key])
            tab_width = editor_settings.get("tabWidth")
            if isinstance(tab_width, int) and not isinstance(tab_width, bool) and 1 <= tab_width <= 16:
                validated["editorSettings"]["tabWidth"] = tab_width

        overrides = config_data.get("paletteOverrides")
        if isinstance(overrides, dict):
            validated["paletteOverrides"] = {
                str(role): value for role, value in overrides.items() if isinstance(value, str)
            }

        return validated
