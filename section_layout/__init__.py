"""
Section Layout — moteur de disposition de blocs de contenu + résolution de thèmes.

Usage (manifest):
    >>> from section_layout import SectionBuilder, BlockRegistry
    >>> registry = BlockRegistry({"shared": {"Quote": lambda props, theme: f"<q>{props['text']}</q>"}})
    >>> html = SectionBuilder(registry=registry).render({
    ...     "layout": "two-column",
    ...     "contentBlocks": [{"id": "b1", "category": "shared", "type": "Quote", "props": {"text": "Hi"}}],
    ... })

Usage (moteur seul):
    >>> from section_layout import assemble, ThemeResolver
    >>> plan = assemble(blocks, {"layout": "grid", "gridFlow": "dense"})
    >>> theme = ThemeResolver().resolve("midnight")
"""

__version__ = "0.1.0"

# ── Modèle ──────────────────────────────────────────────────────────────────
from .core import (
    BREAKPOINTS,
    ResponsiveRule,
    BackgroundSpec,
    ContentBlock,
    LayoutConfig,
    Placement,
    RenderPlanEntry,
    RenderPlan,
    LAYOUTS,
)

# ── Thèmes ──────────────────────────────────────────────────────────────────
from .theme import (
    Theme,
    ThemeResolver,
    merge_tokens,
    get_theme_color,
    get_social_color,
    get_card_styles,
    generate_css_variables,
)

# ── Layout ──────────────────────────────────────────────────────────────────
from .layout import (
    classify,
    strategy_for,
    visibility_for,
    place_block,
    assemble,
)
from .registry import BlockRegistry
from .manifest import SectionManifest, parse_manifest
from .renderer import render_section, generate_layout_css
from .builder import SectionBuilder
from .config import configure_logging

__all__ = [
    "__version__",
    "BREAKPOINTS", "ResponsiveRule", "BackgroundSpec", "ContentBlock", "LayoutConfig",
    "Placement", "RenderPlanEntry", "RenderPlan", "LAYOUTS",
    "Theme", "ThemeResolver", "merge_tokens",
    "get_theme_color", "get_social_color", "get_card_styles", "generate_css_variables",
    "classify", "strategy_for", "visibility_for", "place_block", "assemble",
    "BlockRegistry",
    "SectionManifest", "parse_manifest",
    "render_section", "generate_layout_css",
    "SectionBuilder",
    "configure_logging",
]
