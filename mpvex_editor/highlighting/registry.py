"""Syntax highlighting registry.

Themes and grammar definitions ship as JSON assets. They are loaded once per
registry, on first use, behind a lock so that concurrent callers never load
twice. A failed load is logged and leaves the registry usable: lexers fall back
to plain text and styles to the editor chrome only.
"""

import asyncio
import json
import logging
import os
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from prompt_toolkit.lexers import Lexer, PygmentsLexer, SimpleLexer
from prompt_toolkit.styles import Style
from prompt_toolkit.styles.pygments import style_from_pygments_dict
from pygments.lexers import find_lexer_class_by_name
from pygments.token import string_to_tokentype
from pygments.util import ClassNotFound

from ..completions.dispatcher import is_config_kind
from ..utils.constants import (
    ASSETS_DIR,
    BUNDLED_THEMES,
    CONF_SCOPE,
    CONF_THEME,
    DEFAULT_THEME,
    LANGUAGES_FILE,
    LUA_SCOPE,
    LUA_THEME,
)
from ..utils.lazy import Lazy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThemeModel:
    """Token styles of one theme, keyed by Pygments token name."""
    name: str
    token_colors: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_source(cls, source: Dict[str, Any], name: Optional[str] = None) -> "ThemeModel":
        token_colors = source.get("tokenColors", {})
        if not isinstance(token_colors, dict):
            raise ValueError("tokenColors must be an object")
        return cls(name=name or source["name"], token_colors=dict(token_colors))


@dataclass(frozen=True)
class GrammarDefinition:
    """Maps a grammar scope onto a Pygments lexer."""
    name: str
    scope_name: str
    lexer: str
    extensions: Tuple[str, ...] = ()


def _token_type(name: str):
    # string_to_tokentype() expects the path below Token, e.g. "Keyword.Constant"
    if name == "Token":
        return string_to_tokentype("")
    if name.startswith("Token."):
        name = name[len("Token."):]
    return string_to_tokentype(name)


def scope_for_kind(file_kind: str) -> str:
    """Grammar scope for a file kind: config files use the conf grammar, all else Lua."""
    return CONF_SCOPE if is_config_kind(file_kind) else LUA_SCOPE


class SyntaxRegistry:
    """Holds the loaded themes and grammars for the editor."""

    def __init__(self, assets_dir: str = ASSETS_DIR):
        self.assets_dir = assets_dir
        self._lock = threading.Lock()
        self._ready = False
        self._themes: Dict[str, ThemeModel] = {}
        self._grammars: Dict[str, GrammarDefinition] = {}
        self._current_theme: Optional[str] = None

    @property
    def ready(self) -> bool:
        return self._ready

    def ensure_ready(self) -> None:
        """Load the bundled themes and grammars once.

        Errors are logged, never raised; the registry is marked ready either way.
        """
        if self._ready:
            return
        with self._lock:
            if self._ready:
                return
            try:
                self._initialize()
            except Exception:
                logger.exception("Syntax highlighting setup failed, continuing without it")
            self._ready = True

    async def ensure_ready_async(self) -> None:
        """Run :meth:`ensure_ready` on a worker thread."""
        if not self._ready:
            await asyncio.to_thread(self.ensure_ready)

    def _initialize(self) -> None:
        for name, relative_path in BUNDLED_THEMES.items():
            self.load_theme(self.read_asset(relative_path), name)

        # Default to the Lua theme; the editor switches per file kind
        self.set_theme(DEFAULT_THEME)

        self.load_grammars(LANGUAGES_FILE)
        logger.debug("Loaded %d themes and %d grammars from %s",
                     len(self._themes), len(self._grammars), self.assets_dir)

    def read_asset(self, relative_path: str) -> Dict[str, Any]:
        """Read a JSON asset relative to the assets directory."""
        path = os.path.join(self.assets_dir, relative_path)
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    # Themes

    def load_theme(self, source: Dict[str, Any], name: Optional[str] = None) -> ThemeModel:
        theme = ThemeModel.from_source(source, name)
        self._themes[theme.name] = theme
        return theme

    def set_theme(self, name: str) -> None:
        if name not in self._themes:
            raise KeyError(f"Unknown theme: {name}")
        self._current_theme = name

    @property
    def current_theme(self) -> Optional[str]:
        return self._current_theme

    @property
    def theme_names(self) -> List[str]:
        return list(self._themes)

    def theme(self, name: Optional[str] = None) -> Optional[ThemeModel]:
        return self._themes.get(name or self._current_theme or "")

    def theme_for_kind(self, file_kind: str) -> Optional[ThemeModel]:
        theme_name = CONF_THEME if scope_for_kind(file_kind) == CONF_SCOPE else LUA_THEME
        return self.theme(theme_name) or self.theme()

    def token_style(self, theme: Optional[ThemeModel] = None) -> Style:
        """Build a prompt_toolkit style for the token colors of a theme.

        Args:
            theme: Theme to convert (defaults to the current theme)

        Returns:
            Style: Token style; empty if no theme is loaded
        """
        theme = theme or self.theme()
        if theme is None:
            return Style([])

        styles = {}
        for token_name, style in theme.token_colors.items():
            styles[_token_type(token_name)] = style
        return style_from_pygments_dict(styles)

    # Grammars

    def load_grammars(self, relative_path: str) -> None:
        data = self.read_asset(relative_path)
        for entry in data.get("languages", []):
            grammar = GrammarDefinition(
                name=entry["name"],
                scope_name=entry["scopeName"],
                lexer=entry["lexer"],
                extensions=tuple(entry.get("extensions", ())),
            )
            self._grammars[grammar.scope_name] = grammar

    def grammar(self, scope_name: str) -> Optional[GrammarDefinition]:
        return self._grammars.get(scope_name)

    def create_lexer(self, scope_name: str) -> Lexer:
        """Create a lexer for a grammar scope, falling back to plain text."""
        grammar = self.grammar(scope_name)
        if grammar is None:
            logger.warning("No grammar registered for %s, using plain text", scope_name)
            return SimpleLexer()

        try:
            lexer_class = find_lexer_class_by_name(grammar.lexer)
        except ClassNotFound:
            logger.warning("Pygments has no lexer named %r (scope %s)", grammar.lexer, scope_name)
            return SimpleLexer()
        return PygmentsLexer(lexer_class)


DEFAULT_REGISTRY = Lazy(SyntaxRegistry)
