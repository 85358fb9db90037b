"""
Render Plan Assembler — blocs + LayoutConfig → RenderPlan ordonné.

1. filtre les blocs `enabled`
2. tri stable par `order` (égalités : ordre d'entrée conservé)
3. par bloc : visibilité + placement + fond + cadre (bordure, rayon) + padding
4. par layout : lignes (two-column/grid) ou colonnes + pile mobile (flex-columns)

Fonction pure : mêmes entrées → plan identique (JSON octet pour octet).
Un couple (category, type) inconnu du registry donne une entrée `unsupported`
avec un diagnostic — jamais d'omission ni d'exception.
"""
import logging
from typing import Dict, Iterable, List, Optional, Union

from ..config import DEFAULT_BORDER_COLOR
from ..core.schemas import ContentBlock, LayoutConfig, RenderPlan, RenderPlanEntry, load_block
from ..registry import RendererRegistry, diagnose
from .background import resolve_background
from .placement import arrange_columns, group_rows, place_block
from .strategies import LayoutStrategy, container_for, strategy_for
from .visibility import resolve_visibility

log = logging.getLogger(__name__)

BlockInput = Union[ContentBlock, dict]


def sort_blocks(blocks: Iterable[BlockInput]) -> List[ContentBlock]:
    """Blocs activés, triés par order (tri stable). Les entrées non-objet sont ignorées."""
    parsed = [block for index, raw in enumerate(blocks) if (block := load_block(raw, index)) is not None]
    return sorted((b for b in parsed if b.enabled), key=lambda b: b.order)


def unique_ids(blocks: List[ContentBlock]) -> List[str]:
    """
    Identifiant de plan unique par bloc (rows, columns et mobile_stack y font référence).

    id vide     → "block-{index}"
    id en double → suffixe "-2", "-3"… sans reprendre un id saisi par l'auteur
    """
    authored = {b.id for b in blocks if b.id}
    used: set = set()
    ids: List[str] = []
    for index, block in enumerate(blocks):
        base = block.id or f"block-{index}"
        block_id, n = base, 2
        while block_id in used or (block_id != block.id and block_id in authored):
            block_id, n = f"{base}-{n}", n + 1
        if block.id and block_id != block.id:
            log.warning("Id de bloc en double %r renommé %r", block.id, block_id)
        used.add(block_id)
        ids.append(block_id)
    return ids


def frame_style(block: ContentBlock) -> Dict[str, str]:
    """Bordure + rayon du conteneur de fond."""
    style: Dict[str, str] = {}
    if block.border_width > 0:
        style["border-width"] = f"{block.border_width:g}px"
        style["border-style"] = "solid"
        style["border-color"] = block.border_color or DEFAULT_BORDER_COLOR
    if block.border_radius > 0:
        style["border-radius"] = f"{block.border_radius:g}px"
        style["overflow"] = "hidden"
    return style


def inner_style(block: ContentBlock) -> Dict[str, str]:
    return {"padding": f"{block.padding:g}px"} if block.padding > 0 else {}


def build_entry(
    block: ContentBlock,
    config: LayoutConfig,
    strategy: LayoutStrategy,
    registry: Optional[RendererRegistry] = None,
    block_id: Optional[str] = None,
) -> RenderPlanEntry:
    """Entrée de plan d'un bloc (déjà filtré et trié)."""
    block_id = block_id or block.id or "block-0"
    diagnostic = diagnose(registry, block.category, block.type)
    if diagnostic:
        log.warning("Bloc %s : %s — placeholder émis", block_id, diagnostic)

    background = resolve_background(block.background_color)
    frame = frame_style(block)
    has_background = background.kind != "none"

    return RenderPlanEntry(
        block_id=block_id,
        block=block,
        status="unsupported" if diagnostic else "ok",
        diagnostic=diagnostic,
        placement=place_block(block, config, strategy),
        visibility=resolve_visibility(block.display_mode, config.float_breakpoint),
        background=background,
        frame_style=frame,
        inner_style=inner_style(block),
        full_bleed=block.background_width == "full" and (has_background or bool(frame)),
    )


def assemble(
    blocks: Iterable[BlockInput],
    layout_config: Union[LayoutConfig, dict, None] = None,
    registry: Optional[RendererRegistry] = None,
) -> RenderPlan:
    """
    Construit le plan de rendu complet d'une section.

    Args:
        blocks:        ContentBlock (ou dicts JSON auteur)
        layout_config: LayoutConfig (ou dict) — single-column si absent
        registry:      registry des renderers feuilles (optionnel)

    Returns:
        RenderPlan — conteneur, entrées ordonnées, lignes / colonnes
    """
    if not isinstance(layout_config, LayoutConfig):
        layout_config = LayoutConfig.model_validate(layout_config or {})
    strategy = strategy_for(layout_config.layout)

    ordered = sort_blocks(blocks)
    entries = [
        build_entry(block, layout_config, strategy, registry, block_id)
        for block, block_id in zip(ordered, unique_ids(ordered))
    ]

    plan = RenderPlan(
        layout=layout_config.layout,
        strategy=strategy.name,
        container=container_for(layout_config, strategy),
        entries=entries,
    )
    if strategy.placement == "grid":
        plan.rows = group_rows(entries, strategy.max_tracks)
    elif strategy.placement == "columns":
        plan.columns, plan.mobile_stack = arrange_columns(entries, layout_config)

    log.debug("Plan %s : %d bloc(s)", strategy.name, len(entries))
    return plan


def assemble_entries(
    blocks: Iterable[BlockInput],
    layout_config: Union[LayoutConfig, dict, None] = None,
    registry: Optional[RendererRegistry] = None,
) -> List[RenderPlanEntry]:
    """Uniquement les entrées ordonnées du plan."""
    return assemble(blocks, layout_config, registry).entries
