"""Renderer — plan de rendu → HTML des wrappers + CSS de layout."""
from .css import generate_layout_css, compile_layout_scss
from .html import render_section, render_entry, style_to_css

__all__ = [
    "generate_layout_css", "compile_layout_scss",
    "render_section", "render_entry", "style_to_css",
]
