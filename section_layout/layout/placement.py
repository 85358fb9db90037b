"""
Block Placement Calculator — placement d'un bloc selon la stratégie active.

two-column / grid : span (1 | 2 dès md | 3 dès lg, grid uniquement | full),
                    row-span, piste de départ explicite, forceNewRow, alignSelf
masonry           : bloc insécable + marge basse uniforme
flex-columns      : colonne assignée (1 par défaut) ; colonnes desktop via arrange_columns()
float-columns     : flottant gauche/droite + largeur + marge directionnelle,
                    dé-flotté sous floatBreakpoint (même ResponsiveRule que la visibilité)
"""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ..config import BLOCK_GAP, DEFAULT_FLOAT_WIDTH, MASONRY_GAP
from ..core.breakpoints import BREAKPOINTS, rule_class, rule_from_setting
from ..core.schemas import ContentBlock, FlexColumn, LayoutConfig, Placement, RenderPlanEntry
from .strategies import LayoutStrategy, strategy_for

log = logging.getLogger(__name__)

_FLOAT_MARGINS = {
    "right": "0 0 1rem 1rem",
    "left":  "0 1rem 1rem 0",
}


def place_block(
    block: ContentBlock,
    config: LayoutConfig,
    strategy: Optional[LayoutStrategy] = None,
) -> Placement:
    """Dispatch vers le calcul de placement du mode de layout."""
    strategy = strategy or strategy_for(config.layout)
    if strategy.placement == "grid":
        return _grid_placement(block, strategy)
    if strategy.placement == "masonry":
        return _masonry_placement()
    if strategy.placement == "columns":
        return _column_placement(block)
    if strategy.placement == "float":
        return _float_placement(block, config)
    return Placement()


# ── two-column / grid ────────────────────────────────────────────────────────

def _grid_placement(block: ContentBlock, strategy: LayoutStrategy) -> Placement:
    p = Placement()
    allows_three = strategy.max_tracks >= 3

    # Span colonnes
    if block.grid_span == "full":
        p.span = "full"
        p.classes.append("block--span-full")
    elif block.grid_span == "2":
        p.span, p.span_breakpoint = 2, "md"
        p.classes.append("block--span-2-md")
    elif block.grid_span == "3" and allows_three:
        p.span, p.span_breakpoint = 3, "lg"
        p.classes.append("block--span-3-lg")
    else:
        p.span = 1
        p.classes.append("block--span-1")

    # Span lignes (auto → aucune contrainte)
    if block.grid_row_span in ("2", "3"):
        p.row_span = min(int(block.grid_row_span), strategy.max_row_span)
        p.classes.append(f"block--row-span-{p.row_span}")
    elif block.grid_row_span != "auto":
        p.row_span = 1
        p.classes.append("block--row-span-1")

    # Piste de départ : même classe à toutes les tailles
    if block.grid_column in ("1", "2") or (block.grid_column == "3" and allows_three):
        p.column_start = int(block.grid_column)
    if block.force_new_row:
        p.column_start = 1
    if p.column_start:
        p.classes.append(f"block--col-start-{p.column_start}")

    if block.align_self:
        p.style["align-self"] = block.align_self
    return p


# ── masonry ──────────────────────────────────────────────────────────────────

def _masonry_placement() -> Placement:
    return Placement(
        classes=["block--keep-intact"],
        style={"margin-bottom": MASONRY_GAP},
        keep_intact=True,
    )


# ── flex-columns ─────────────────────────────────────────────────────────────

def _column_placement(block: ContentBlock) -> Placement:
    column = int(block.column_assignment or "1")
    return Placement(classes=[f"block--column-{column}"], column=column)


def arrange_columns(
    entries: Iterable[RenderPlanEntry],
    config: LayoutConfig,
) -> Tuple[List[FlexColumn], List[str]]:
    """
    Disposition flex-columns.

    Returns:
        (colonnes desktop, pile mobile)
        - aucune largeur configurée → colonnes présentes en parts égales
        - au moins une largeur      → colonne à largeur nulle/absente omise,
                                      les autres en flex-basis/max-width %
        - pile mobile               → tous les blocs, ordre du plan, pleine largeur
    """
    entries = list(entries)
    columns: List[FlexColumn] = []

    for number in (1, 2, 3):
        block_ids = [e.block_id for e in entries if e.placement.column == number]
        if not block_ids:
            continue

        if not config.has_column_widths:
            style: Dict[str, str] = {"flex": "1"}
        else:
            width = config.column_width(number)
            if not width:
                log.debug("Colonne %d sans largeur — omise du desktop (%d bloc(s))", number, len(block_ids))
                continue
            style = {
                "flex-basis": f"{width:g}%",
                "max-width":  f"{width:g}%",
                "min-width":  "0",
            }
        columns.append(FlexColumn(number=number, style=style, block_ids=block_ids))

    mobile_stack = [e.block_id for e in entries]
    return columns, mobile_stack


# ── float-columns ────────────────────────────────────────────────────────────

def _float_placement(block: ContentBlock, config: LayoutConfig) -> Placement:
    rule = rule_from_setting(config.float_breakpoint)
    p = Placement(classes=["block--float-item"], float_rule=rule)

    if block.float_direction != "none" and rule.kind != "never":
        direction = block.float_direction
        p.floating = True
        p.float_direction = direction
        p.style.update({
            "float":      direction,
            "width":      block.float_width or DEFAULT_FLOAT_WIDTH,
            "flex-shrink": "0",
            "box-sizing": "border-box",
            "margin":     _FLOAT_MARGINS[direction],
        })
        p.classes.append(f"block--float-{direction}")
        # dé-flotte sous le breakpoint (pleine largeur, clear, empilé)
        unfloat = rule_class(rule, "unfloat", never="unfloat")
        if unfloat:
            p.classes.append(unfloat)
    else:
        p.span = "full"
        p.style["margin-bottom"] = BLOCK_GAP
        p.classes.append("block--stacked")

    if block.clear_float:
        p.style["clear"] = "both"
    return p


# ── Regroupement en lignes (two-column / grid) ───────────────────────────────

def _track_span(placement: Placement, tracks: int) -> int:
    if placement.span == "full":
        return tracks
    return max(1, min(placement.span or 1, tracks))


def group_rows(
    entries: Iterable[RenderPlanEntry],
    tracks: int,
    viewport: int = BREAKPOINTS["xl"],
) -> List[List[str]]:
    """
    Simule le placement automatique de la grille desktop (sans dense).

    Un bloc passe à la ligne suivante si sa piste de départ explicite est
    déjà dépassée ou s'il ne tient plus dans la ligne courante. Les blocs
    cachés à cette largeur n'occupent aucune piste.
    """
    rows: List[List[str]] = []
    current: List[str] = []
    cursor = 0

    for entry in entries:
        if not entry.visibility.rule.applies(viewport):
            continue
        span = _track_span(entry.placement, tracks)
        start = entry.placement.column_start
        explicit = start is not None and 1 <= start <= tracks

        pos = start - 1 if explicit else cursor
        wrap = pos < cursor if explicit else pos + span > tracks
        if wrap:
            if current:
                rows.append(current)
            current = []
            pos = start - 1 if explicit else 0

        current.append(entry.block_id)
        cursor = min(pos + span, tracks)

    if current:
        rows.append(current)
    return rows
