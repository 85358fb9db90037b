"""Layout — fond, stratégies, visibilité, placement, assemblage du plan."""
from .background import classify, resolve_background
from .strategies import LayoutStrategy, STRATEGIES, strategy_for, container_for
from .visibility import visibility_for, visibility_class, resolve_visibility
from .placement import place_block, arrange_columns, group_rows
from .assembler import assemble, assemble_entries, sort_blocks

__all__ = [
    "classify", "resolve_background",
    "LayoutStrategy", "STRATEGIES", "strategy_for", "container_for",
    "visibility_for", "visibility_class", "resolve_visibility",
    "place_block", "arrange_columns", "group_rows",
    "assemble", "assemble_entries", "sort_blocks",
]
