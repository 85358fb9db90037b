"""Thèmes — tokens, merge générique, résolution et helpers."""
from .tokens import Theme, DEFAULT_THEME_TOKENS, THEME_PRESETS, REQUIRED_GROUPS
from .merge import merge_tokens, normalize_keys
from .resolver import ThemeResolver
from .helpers import get_theme_color, get_social_color, get_card_styles, generate_css_variables

__all__ = [
    "Theme", "DEFAULT_THEME_TOKENS", "THEME_PRESETS", "REQUIRED_GROUPS",
    "merge_tokens", "normalize_keys",
    "ThemeResolver",
    "get_theme_color", "get_social_color", "get_card_styles", "generate_css_variables",
]
