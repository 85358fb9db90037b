"""
Layout Mode Selector — identifiant de layout → LayoutStrategy.

| layout        | conteneur                                                      |
|---------------|----------------------------------------------------------------|
| single-column | pile verticale, 1 colonne implicite                             |
| two-column    | grille 2 pistes (blocs span 1 ou 2)                            |
| grid          | grille ≤ 3 pistes (span 1–3, row-span 1–3)                     |
| masonry       | 2 ou 3 colonnes CSS, blocs jamais coupés                      |
| flex-columns  | ≤ 3 colonnes assignées explicitement, 1 colonne sous lg       |
| float-columns | blocs flottants gauche/droite ou empilés, breakpoint global    |

Identifiant inconnu → single-column.
"""
import logging
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict

from ..config import BLOCK_GAP
from ..core.schemas import ContainerSpec, LayoutConfig

log = logging.getLogger(__name__)


class LayoutStrategy(BaseModel):
    """Règles de disposition au niveau conteneur."""
    model_config = ConfigDict(frozen=True)

    name: str
    placement: str                  # stack | grid | masonry | columns | float
    max_tracks: int = 1             # pistes desktop (grid) / colonnes max
    max_row_span: int = 1
    collapse_breakpoint: Optional[str] = None   # en dessous : 1 colonne
    container_classes: tuple = ()


STRATEGIES: Dict[str, LayoutStrategy] = {
    "single-column": LayoutStrategy(
        name="single-column", placement="stack",
        container_classes=("layout-stack",),
    ),
    "two-column": LayoutStrategy(
        name="two-column", placement="grid", max_tracks=2, max_row_span=3,
        collapse_breakpoint="lg",
        container_classes=("layout-grid", "layout-grid--2"),
    ),
    "grid": LayoutStrategy(
        name="grid", placement="grid", max_tracks=3, max_row_span=3,
        collapse_breakpoint="lg",
        container_classes=("layout-grid", "layout-grid--3"),
    ),
    "masonry": LayoutStrategy(
        name="masonry", placement="masonry", max_tracks=3,
        collapse_breakpoint="lg",
        container_classes=("layout-masonry",),
    ),
    "flex-columns": LayoutStrategy(
        name="flex-columns", placement="columns", max_tracks=3,
        collapse_breakpoint="lg",
        container_classes=("layout-columns",),
    ),
    "float-columns": LayoutStrategy(
        name="float-columns", placement="float",
        container_classes=("layout-float",),
    ),
}

DEFAULT_STRATEGY = STRATEGIES["single-column"]


def strategy_for(layout: Optional[str]) -> LayoutStrategy:
    """Stratégie du layout, fallback single-column."""
    strategy = STRATEGIES.get(layout or "")
    if strategy is None:
        log.warning("Layout inconnu %r — fallback single-column", layout)
        return DEFAULT_STRATEGY
    return strategy


def masonry_column_count(config: LayoutConfig) -> int:
    return 3 if config.masonry_columns == "3" else 2


def container_for(config: LayoutConfig, strategy: Optional[LayoutStrategy] = None) -> ContainerSpec:
    """Classes + style du conteneur de section."""
    strategy = strategy or strategy_for(config.layout)
    classes = list(strategy.container_classes)
    style: Dict[str, str] = {}

    if strategy.placement == "grid" and config.grid_flow == "dense":
        classes.append("layout-grid--dense")
    elif strategy.placement == "masonry":
        classes.append(f"layout-masonry--{masonry_column_count(config)}")
    elif strategy.placement == "float":
        # le conteneur englobe les flottants
        style["overflow"] = "hidden"
    elif strategy.placement == "stack":
        style["row-gap"] = BLOCK_GAP

    return ContainerSpec(classes=classes, style=style)
