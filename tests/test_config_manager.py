"""Test loading, saving and validating editor settings."""

import io
import json

from rich.console import Console

from mpvex_editor.config.defaults import default_config, get_config_path
from mpvex_editor.config.manager import ConfigManager


def make_manager(tmp_path):
    output = io.StringIO()
    return ConfigManager(Console(file=output, width=120), config_dir=str(tmp_path)), output


def test_missing_default_config_is_silent(tmp_path):
    """Test that a first start without a config file yields the defaults."""
    manager, output = make_manager(tmp_path)
    assert manager.load_configuration() == default_config()
    assert output.getvalue() == ""


def test_missing_named_config_warns(tmp_path):
    """Test that asking for an unknown named config prints a notice."""
    manager, output = make_manager(tmp_path)
    assert manager.load_configuration("work") == default_config()
    assert "Configuration file not found" in output.getvalue()


def test_save_and_load(tmp_path):
    """Test that saved settings are loaded back."""
    manager, output = make_manager(tmp_path)
    config = default_config()
    config["theme"] = "light"
    config["editorSettings"]["tabWidth"] = 2
    config["paletteOverrides"] = {"primary": "#ff0000"}

    assert manager.save_configuration(config, "Work Profile")
    assert (tmp_path / "workprofile.json").exists()

    loaded = manager.load_configuration("Work Profile", quiet=True)
    assert loaded == config
    assert "Configuration saved successfully" in output.getvalue()
    assert "Configuration loaded successfully" not in output.getvalue()


def test_default_config_file_name(tmp_path):
    """Test that the default config is stored as config.json."""
    manager, _ = make_manager(tmp_path)
    manager.save_configuration(default_config())
    assert (tmp_path / "config.json").exists()
    assert get_config_path().endswith("config.json")
    assert get_config_path("My-Setup").endswith("my-setup.json")


def test_invalid_values_fall_back_to_defaults(tmp_path):
    """Test that invalid fields are replaced by their defaults."""
    (tmp_path / "config.json").write_text(json.dumps({
        "theme": "neon",
        "editorSettings": {"lineNumbers": 0, "tabWidth": 40, "wordWrap": "yes"},
        "paletteOverrides": {"surface": "#000000", "primary": 12},
    }))
    manager, _ = make_manager(tmp_path)

    config = manager.load_configuration(quiet=True)

    assert config["theme"] == "dark"
    assert config["editorSettings"]["lineNumbers"] is False
    assert config["editorSettings"]["wordWrap"] is True
    assert config["editorSettings"]["tabWidth"] == 4
    assert config["editorSettings"]["completeWhileTyping"] is True
    assert config["paletteOverrides"] == {"surface": "#000000"}


def test_boolean_tab_width_is_rejected(tmp_path):
    """Test that a boolean is not accepted as a tab width."""
    (tmp_path / "config.json").write_text(json.dumps({"editorSettings": {"tabWidth": True}}))
    manager, _ = make_manager(tmp_path)
    assert manager.load_configuration(quiet=True)["editorSettings"]["tabWidth"] == 4


def test_corrupt_config_reports_error(tmp_path):
    """Test that an unreadable config file falls back to defaults."""
    (tmp_path / "config.json").write_text("{broken")
    manager, output = make_manager(tmp_path)

    assert manager.load_configuration() == default_config()
    assert "Error loading configuration" in output.getvalue()


def test_reset_configuration(tmp_path):
    """Test resetting to defaults."""
    manager, output = make_manager(tmp_path)
    assert manager.reset_configuration() == default_config()
    assert "Configuration reset to defaults" in output.getvalue()
