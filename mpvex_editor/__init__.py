"""MPV config and Lua script editor with MPV-aware autocompletion."""

__version__ = "0.1.0"
