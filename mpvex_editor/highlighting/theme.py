"""Editor colors derived from a design-system palette.

The palette carries the color roles of the application theme. Translucent
roles are composited onto the surface color, since terminal cells have no
alpha channel, and the results are assigned to the editor's style classes.
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Dict, Optional, Tuple

from prompt_toolkit.styles import BaseStyle, Style, merge_styles

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


def parse_color(value: str) -> RGB:
    """Parse a ``#rrggbb`` color.

    Raises:
        ValueError: If the value is not a six digit hex color
    """
    text = value.strip().lstrip('#')
    if len(text) != 6:
        raise ValueError(f"Expected a #rrggbb color, got {value!r}")
    return int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16)


def format_color(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def with_alpha(color: str, alpha: float, background: str) -> str:
    """Composite a color with the given opacity onto an opaque background.

    Args:
        color: Foreground ``#rrggbb`` color
        alpha: Opacity between 0.0 and 1.0
        background: Opaque ``#rrggbb`` color underneath

    Returns:
        str: The resulting opaque color
    """
    alpha = min(max(alpha, 0.0), 1.0)
    fg = parse_color(color)
    bg = parse_color(background)
    return format_color(tuple(round(f * alpha + b * (1 - alpha)) for f, b in zip(fg, bg)))


@dataclass(frozen=True)
class Palette:
    """Design-system color roles the editor colors are built from."""
    surface: str
    surface_container_highest: str
    surface_variant: str
    on_surface: str
    on_surface_variant: str
    primary: str
    primary_container: str
    outline_variant: str


# Material 3 baseline schemes
DARK_PALETTE = Palette(
    surface="#141218",
    surface_container_highest="#36343b",
    surface_variant="#49454f",
    on_surface="#e6e0e9",
    on_surface_variant="#cac4d0",
    primary="#d0bcff",
    primary_container="#4f378b",
    outline_variant="#49454f",
)

LIGHT_PALETTE = Palette(
    surface="#fef7ff",
    surface_container_highest="#e6e0e9",
    surface_variant="#e7e0ec",
    on_surface="#1d1b20",
    on_surface_variant="#49454f",
    primary="#6750a4",
    primary_container="#eaddff",
    outline_variant="#cac4d0",
)

PALETTES = {
    "dark": DARK_PALETTE,
    "light": LIGHT_PALETTE,
}


def get_palette(name: str, overrides: Optional[Dict[str, str]] = None) -> Palette:
    """Look up a palette by name and apply per-role overrides.

    Unknown palette names fall back to dark. Overrides naming an unknown role or
    holding an invalid color are skipped with a warning.
    """
    palette = PALETTES.get(name)
    if palette is None:
        logger.warning("Unknown theme %r, using dark", name)
        palette = DARK_PALETTE

    if not overrides:
        return palette

    roles = {f.name for f in fields(Palette)}
    valid = {}
    for role, value in overrides.items():
        if role not in roles:
            logger.warning("Ignoring unknown palette role %r", role)
            continue
        try:
            parse_color(value)
        except (ValueError, AttributeError):
            logger.warning("Ignoring invalid color %r for palette role %r", value, role)
            continue
        valid[role] = value
    return replace(palette, **valid)


@dataclass(frozen=True)
class EditorColors:
    background: str
    gutter_bg: str
    line_number: str
    line_number_active: str
    text: str
    selection: str
    divider: str
    scroll_thumb: str
    scroll_thumb_down: str
    scroll_track: str
    completion_bg: str
    completion_corner: str
    symbol_bar_bg: str
    symbol_bar_text: str
    bracket_highlight: str
    bracket_underline: str


def build_colors(palette: Palette) -> EditorColors:
    """Derive every editor color from the palette."""
    bg = palette.surface
    return EditorColors(
        background=palette.surface,
        gutter_bg=palette.surface_container_highest,
        line_number=with_alpha(palette.on_surface_variant, 0.55, palette.surface_container_highest),
        line_number_active=palette.primary,
        text=palette.on_surface,
        selection=with_alpha(palette.primary_container, 0.45, bg),
        divider=with_alpha(palette.outline_variant, 0.35, bg),
        scroll_thumb=with_alpha(palette.primary, 0.38, bg),
        scroll_thumb_down=with_alpha(palette.primary, 0.85, bg),
        scroll_track=with_alpha(palette.surface_variant, 0.20, bg),
        completion_bg=palette.surface_container_highest,
        completion_corner=with_alpha(palette.primary, 0.5, palette.surface_container_highest),
        symbol_bar_bg=palette.surface_container_highest,
        symbol_bar_text=palette.on_surface,
        bracket_highlight=with_alpha(palette.primary_container, 0.35, bg),
        bracket_underline=palette.primary,
    )


def color_slots(colors: EditorColors) -> Dict[str, str]:
    """Assign editor colors to prompt_toolkit style classes."""
    popup_current = with_alpha(colors.text, 0.08, colors.completion_bg)
    return {
        # Editor chrome
        '': f'bg:{colors.background} {colors.text}',
        'line-number': f'bg:{colors.gutter_bg} {colors.line_number}',
        'line-number.current': f'bg:{colors.gutter_bg} {colors.line_number_active} bold',
        'selected': f'bg:{colors.selection}',
        'line-divider': colors.divider,
        # Scrollbars
        'scrollbar.background': f'bg:{colors.scroll_track}',
        'scrollbar.button': f'bg:{colors.scroll_thumb}',
        'scrollbar.arrow': f'{colors.scroll_thumb_down}',
        # Autocomplete popup
        'completion-menu': f'bg:{colors.completion_bg} {colors.text}',
        'completion-menu.completion': f'bg:{colors.completion_bg} {colors.text}',
        'completion-menu.completion.current': f'bg:{popup_current} {colors.text} bold',
        'completion-menu.meta.completion': f'bg:{colors.completion_bg} {colors.line_number}',
        'completion-menu.meta.completion.current': f'bg:{popup_current} {colors.line_number}',
        'completion-menu.border': colors.completion_corner,
        # Bracket matching
        'matching-bracket.cursor': f'bg:{colors.bracket_highlight} {colors.text}',
        'matching-bracket.other': f'bg:{colors.bracket_highlight} {colors.bracket_underline} underline',
        # Toolbar below the editor
        'bottom-toolbar': f'noreverse bg:{colors.symbol_bar_bg} {colors.symbol_bar_text}',
    }


def build_style(colors: EditorColors, token_style: Optional[BaseStyle] = None) -> BaseStyle:
    """Combine a syntax token style with the palette-derived chrome.

    Args:
        colors: Editor colors from :func:`build_colors`
        token_style: Token style from the syntax registry (optional)

    Returns:
        BaseStyle: The merged style; token colors are applied over the chrome defaults
    """
    chrome = Style.from_dict(color_slots(colors))
    if token_style is None:
        return chrome
    return merge_styles([chrome, token_style])
