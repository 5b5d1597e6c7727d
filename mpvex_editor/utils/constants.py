"""Constants used throughout the mpvex editor."""

import os

# Default config directory and filename for editor settings
DEFAULT_CONFIG_DIR = os.path.expanduser("~/.config/mpvex-editor")

DEFAULT_CONFIG_FILE = "config.json"

# Bundled grammar/theme definitions
ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "assets")
LANGUAGES_FILE = "languages.json"

# File kinds. Only the config kind selects the option catalog; anything else is a script.
CONF_FILE_KIND = "conf"
LUA_FILE_KIND = "lua"
CONF_FILE_KINDS = ("conf", "config")

# Grammar scope per file kind
CONF_SCOPE = "source.conf"
LUA_SCOPE = "source.lua"

# Themes loaded at registry start-up, in load order. The first one is the default.
LUA_THEME = "lua_theme"
CONF_THEME = "conf_theme"
BUNDLED_THEMES = {
    LUA_THEME: "themes/lua_theme.json",
    CONF_THEME: "themes/conf_theme.json",
}
DEFAULT_THEME = LUA_THEME

# Characters that may appear in a completion prefix besides letters and digits
PREFIX_EXTRA_CHARS = "-_."

# Observable property names are only offered for prefixes at least this long
MIN_PROPERTY_PREFIX = 2

OBSERVABLE_PROPERTY_DESCRIPTION = "MPV observable property"

# Characters closed automatically when typed, and their closing counterpart
AUTO_CLOSE_PAIRS = {
    '(': ')',
    '[': ']',
    '{': '}',
    '"': '"',
    "'": "'",
}

# Editor commands and their descriptions, shown in the help panel
EDITOR_KEYS = {
    'Esc Enter': 'Save and exit',
    'Ctrl-C': 'Exit without saving',
    'Tab': 'Open completion menu',
    'Ctrl-T': 'Insert indentation',
}
