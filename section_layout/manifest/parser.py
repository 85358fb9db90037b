"""
Manifest parser — SectionManifest → ParsedSection (LayoutConfig + ContentBlock[] + thème).
Chaque bloc est validé seul : un champ invalide retombe sur sa valeur par défaut.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from ..core.schemas import ContentBlock, LayoutConfig, load_block
from .schema import SectionManifest


class ParsedSection(BaseModel):
    layout_config: LayoutConfig
    blocks: List[ContentBlock] = Field(default_factory=list)
    theme_name: Optional[str] = None
    theme_override: Optional[Dict[str, Any]] = None
    title: Optional[str] = None


def parse_manifest(manifest: SectionManifest | dict) -> ParsedSection:
    """
    Convertit un manifest de section en entrées du moteur.

    1. LayoutConfig extrait des champs de layout
    2. ContentBlock validé bloc par bloc (load_block)
    3. nom de thème + override transmis tels quels au ThemeResolver
    """
    if not isinstance(manifest, SectionManifest):
        manifest = SectionManifest.model_validate(manifest)

    layout_config = LayoutConfig.model_validate(
        manifest.model_dump(include=set(LayoutConfig.model_fields))
    )
    blocks = [
        block
        for index, raw in enumerate(manifest.content_blocks)
        if (block := load_block(raw, index)) is not None
    ]

    return ParsedSection(
        layout_config=layout_config,
        blocks=blocks,
        theme_name=manifest.theme,
        theme_override=manifest.theme_overrides,
        title=manifest.section_title,
    )
