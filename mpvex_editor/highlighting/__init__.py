"""Syntax highlighting and editor color themes."""

from .registry import DEFAULT_REGISTRY, SyntaxRegistry, scope_for_kind
from .theme import EditorColors, Palette, build_colors, build_style, get_palette

__all__ = [
    "DEFAULT_REGISTRY",
    "EditorColors",
    "Palette",
    "SyntaxRegistry",
    "build_colors",
    "build_style",
    "get_palette",
    "scope_for_kind",
]
