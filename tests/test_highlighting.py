"""Test the syntax registry and palette-derived editor colors."""

import asyncio
import logging
import threading
import time

import pytest
from prompt_toolkit.lexers import PygmentsLexer, SimpleLexer

from mpvex_editor.highlighting.registry import SyntaxRegistry, scope_for_kind
from mpvex_editor.highlighting.theme import (
    DARK_PALETTE,
    LIGHT_PALETTE,
    EditorColors,
    build_colors,
    build_style,
    color_slots,
    get_palette,
    parse_color,
    with_alpha,
)
from mpvex_editor.utils.constants import BUNDLED_THEMES, CONF_THEME, LUA_THEME


class CountingRegistry(SyntaxRegistry):
    """Registry that records how often initialization ran."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.init_calls = 0

    def _initialize(self):
        self.init_calls += 1
        time.sleep(0.05)
        super()._initialize()


def test_registry_loads_bundled_assets():
    """Test that themes and grammars are loaded on first use."""
    registry = SyntaxRegistry()
    assert not registry.ready

    registry.ensure_ready()

    assert registry.ready
    assert set(registry.theme_names) == {"lua_theme", "conf_theme"}
    assert registry.current_theme == "lua_theme"
    assert registry.grammar("source.lua").lexer == "lua"
    assert registry.grammar("source.conf").lexer == "ini"
    assert registry.grammar("source.conf").extensions == (".conf",)


def test_registry_initializes_once_under_concurrency():
    """Test that concurrent callers trigger a single initialization."""
    registry = CountingRegistry()
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        registry.ensure_ready()

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert registry.init_calls == 1
    registry.ensure_ready()
    assert registry.init_calls == 1


def test_registry_async_initialization():
    """Test that initialization can be awaited from an event loop."""
    registry = CountingRegistry()
    asyncio.run(registry.ensure_ready_async())
    asyncio.run(registry.ensure_ready_async())
    assert registry.ready
    assert registry.init_calls == 1


def test_registry_survives_missing_assets(tmp_path, caplog):
    """Test that a broken asset directory is logged and tolerated."""
    registry = SyntaxRegistry(assets_dir=str(tmp_path))

    with caplog.at_level(logging.ERROR):
        registry.ensure_ready()

    assert registry.ready
    assert registry.theme_names == []
    assert "Syntax highlighting setup failed" in caplog.text
    assert isinstance(registry.create_lexer("source.lua"), SimpleLexer)
    assert registry.theme() is None
    assert registry.theme_for_kind("lua") is None
    # An empty token style still combines with the chrome
    build_style(build_colors(DARK_PALETTE), registry.token_style())


def test_registry_rejects_bad_theme_json(tmp_path, caplog):
    """Test that malformed theme data does not propagate."""
    (tmp_path / "themes").mkdir()
    (tmp_path / "themes" / "lua_theme.json").write_text("{not json")
    registry = SyntaxRegistry(assets_dir=str(tmp_path))

    with caplog.at_level(logging.ERROR):
        registry.ensure_ready()

    assert registry.ready
    assert "Syntax highlighting setup failed" in caplog.text


def test_lexers_per_scope():
    """Test lexer creation for known and unknown grammar scopes."""
    registry = SyntaxRegistry()
    registry.ensure_ready()

    assert isinstance(registry.create_lexer("source.lua"), PygmentsLexer)
    assert isinstance(registry.create_lexer("source.conf"), PygmentsLexer)
    assert isinstance(registry.create_lexer("source.unknown"), SimpleLexer)


def test_scope_and_theme_per_kind():
    """Test that config files use the conf grammar and theme, all else Lua."""
    assert scope_for_kind("conf") == "source.conf"
    assert scope_for_kind("lua") == "source.lua"
    assert scope_for_kind("anything") == "source.lua"

    registry = SyntaxRegistry()
    registry.ensure_ready()
    assert registry.theme_for_kind("conf").name == CONF_THEME
    assert registry.theme_for_kind("lua").name == LUA_THEME
    assert set(registry.theme_names) == set(BUNDLED_THEMES)


def test_set_unknown_theme():
    """Test that selecting an unknown theme is an error."""
    registry = SyntaxRegistry()
    registry.ensure_ready()
    with pytest.raises(KeyError):
        registry.set_theme("missing")
    registry.set_theme("conf_theme")
    assert registry.theme().name == "conf_theme"


def test_token_style_colors():
    """Test that theme token colors end up in the prompt_toolkit style."""
    registry = SyntaxRegistry()
    registry.ensure_ready()

    style = build_style(build_colors(DARK_PALETTE), registry.token_style(registry.theme("lua_theme")))
    keyword = style.get_attrs_for_style_str("class:pygments.keyword")
    assert keyword.color == "c678dd"
    assert keyword.bold

    comment = style.get_attrs_for_style_str("class:pygments.comment")
    assert comment.italic


def test_alpha_composition():
    """Test compositing translucent colors onto a background."""
    assert with_alpha("#ffffff", 0.5, "#000000") == "#808080"
    assert with_alpha("#123456", 1.0, "#000000") == "#123456"
    assert with_alpha("#123456", 0.0, "#abcdef") == "#abcdef"
    assert with_alpha("#ffffff", 2.0, "#000000") == "#ffffff"


def test_parse_color():
    """Test color parsing."""
    assert parse_color("#ff8000") == (255, 128, 0)
    with pytest.raises(ValueError):
        parse_color("#fff")
    with pytest.raises(ValueError):
        parse_color("#gggggg")


def test_build_colors_are_opaque():
    """Test that every derived color is an opaque hex color."""
    for palette in (DARK_PALETTE, LIGHT_PALETTE):
        colors = build_colors(palette)
        for value in vars(colors).values():
            assert value.startswith("#")
            assert len(value) == 7
            parse_color(value)

    colors = build_colors(DARK_PALETTE)
    assert colors.background == DARK_PALETTE.surface
    assert colors.line_number_active == DARK_PALETTE.primary


def test_color_slots_cover_editor_chrome():
    """Test that the chrome style classes are all populated."""
    colors = build_colors(LIGHT_PALETTE)
    slots = color_slots(colors)
    for name in [
        "", "line-number", "line-number.current", "selected",
        "scrollbar.background", "scrollbar.button", "completion-menu",
        "completion-menu.completion.current", "completion-menu.meta.completion",
        "matching-bracket.cursor", "matching-bracket.other", "bottom-toolbar",
    ]:
        assert slots[name]
    # The prompt session has no current-line highlight to color
    assert "cursor-line" not in slots

    style = build_style(colors)
    gutter = style.get_attrs_for_style_str("class:line-number")
    assert gutter.bgcolor == colors.gutter_bg.lstrip("#")
    assert gutter.color == colors.line_number.lstrip("#")


def test_palette_overrides():
    """Test palette lookup with overrides and fallbacks."""
    palette = get_palette("dark", {"primary": "#ff0000", "bogus": "#000000", "surface": "nope"})
    assert palette.primary == "#ff0000"
    assert palette.surface == DARK_PALETTE.surface

    assert get_palette("light") is LIGHT_PALETTE
    assert get_palette("unknown") is DARK_PALETTE
    assert isinstance(build_colors(palette), EditorColors)
