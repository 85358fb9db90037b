"""
Renderer HTML — enveloppe chaque bloc du plan autour de son renderer feuille.

Structure d'un bloc :
  div.block        (placement + visibilité)
    div.block__frame  (fond + bordure + rayon, si présents)
      div.block__inner  (padding, si présent)
        <renderer feuille>

flex-columns : une pile mobile (tous les blocs) + une ligne desktop (colonnes).
"""
import html
import logging
from typing import Dict, Iterable, List, Optional

from ..core.schemas import RenderPlan, RenderPlanEntry
from ..registry import RendererRegistry
from ..theme import Theme

log = logging.getLogger(__name__)


def style_to_css(style: Dict[str, str]) -> str:
    """{"float": "left", "width": "250px"} → "float:left;width:250px" """
    return ";".join(f"{k}:{v}" for k, v in style.items())


def _attrs(classes: Iterable[str], style: Dict[str, str]) -> str:
    class_attr = " ".join(c for c in classes if c)
    out = f' class="{html.escape(class_attr)}"' if class_attr else ""
    if style:
        out += f' style="{html.escape(style_to_css(style))}"'
    return out


# ── Bloc ────────────────────────────────────────────────────────────────────

def _render_leaf(entry: RenderPlanEntry, theme: Theme, registry: Optional[RendererRegistry]) -> str:
    block = entry.block
    if entry.status == "unsupported":
        return f'<div class="block--unsupported">{html.escape(entry.diagnostic or "")}</div>'
    renderer = registry.get(block.category, block.type) if registry is not None else None
    if renderer is None:
        return f"<!-- Bloc sans renderer : {html.escape(block.category)}/{html.escape(block.type)} -->"
    return renderer(block.props, theme)


def render_entry(
    entry: RenderPlanEntry,
    theme: Theme,
    registry: Optional[RendererRegistry] = None,
    structural: bool = True,
) -> str:
    """
    HTML d'une entrée du plan.

    Args:
        structural: False → classes/styles de placement omis (pile mobile flex-columns)
    """
    content = _render_leaf(entry, theme, registry)

    if entry.inner_style or entry.full_bleed:
        inner_classes = ["block__inner", "block__bleed-inner" if entry.full_bleed else ""]
        content = f"<div{_attrs(inner_classes, entry.inner_style)}>{content}</div>"

    frame = {**entry.background.style, **entry.frame_style}
    if frame or entry.background.class_name:
        content = f"<div{_attrs(['block__frame', entry.background.class_name], frame)}>{content}</div>"

    classes: List[str] = ["block"]
    style: Dict[str, str] = {}
    if structural:
        classes += entry.placement.classes
        style = dict(entry.placement.style)
    classes.append(entry.visibility.class_name)
    if entry.full_bleed:
        classes.append("block--full-bleed")

    return f'<div data-block-id="{html.escape(entry.block_id)}"{_attrs(classes, style)}>{content}</div>'


# ── Section ─────────────────────────────────────────────────────────────────

def _render_columns(plan: RenderPlan, theme: Theme, registry: Optional[RendererRegistry]) -> str:
    by_id = {e.block_id: e for e in plan.entries}

    mobile = "\n".join(render_entry(by_id[i], theme, registry, structural=False) for i in plan.mobile_stack)
    columns = "\n".join(
        f'<div{_attrs(["layout-columns__column", f"layout-columns__column--{col.number}"], col.style)}>'
        + "".join(render_entry(by_id[i], theme, registry) for i in col.block_ids)
        + "</div>"
        for col in plan.columns
    )
    return (
        f'<div class="layout-columns__mobile">\n{mobile}\n</div>\n'
        f'<div class="layout-columns__desktop">\n{columns}\n</div>'
    )


def render_section(
    plan: RenderPlan,
    theme: Theme,
    registry: Optional[RendererRegistry] = None,
    title: Optional[str] = None,
) -> str:
    """
    HTML d'une section complète à partir de son plan de rendu.

    Args:
        plan:     plan produit par assemble()
        theme:    thème résolu, transmis à chaque renderer feuille
        registry: renderers feuilles (category, type) → callable
        title:    titre optionnel de la section (h2)
    """
    if plan.strategy == "flex-columns":
        inner = _render_columns(plan, theme, registry)
    else:
        inner = "\n".join(render_entry(e, theme, registry) for e in plan.entries)

    heading = f'<h2 class="section-layout__title">{html.escape(title)}</h2>\n' if title else ""
    container = _attrs(["section-layout", *plan.container.classes], plan.container.style)
    log.debug("Rendu section %s : %d bloc(s)", plan.strategy, len(plan.entries))
    return f"<section{container}>\n{heading}{inner}\n</section>"
