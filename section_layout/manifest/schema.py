"""
Schéma du manifest JSON — document auteur d'une section de blocs.
SectionManifest → parse_manifest() → ParsedSection → assemble() → RenderPlan

Exemple minimal :
{
  "layout": "flex-columns",
  "column1Width": 60,
  "column2Width": 40,
  "floatBreakpoint": "md",
  "theme": "midnight",
  "themeOverrides": null,
  "contentBlocks": [
    {"id": "b1", "category": "shared", "type": "Quote", "order": 1, "enabled": true,
     "props": {"text": "..."}, "columnAssignment": "1", "backgroundColor": "#faf7f2"}
  ]
}
"""
from typing import Any, Dict, List, Optional
from pydantic import Field

from ..core.schemas import LayoutConfig


class SectionManifest(LayoutConfig):
    """
    Format manifest complet d'une section : LayoutConfig + blocs + thème.

    Les blocs restent des dicts bruts ici : chaque bloc est validé
    individuellement par parse_manifest() (un bloc invalide ne bloque pas
    la section).
    """
    section_title: Optional[str] = None
    content_blocks: List[Any] = Field(default_factory=list)
    theme: Optional[str] = None
    theme_overrides: Optional[Dict[str, Any]] = None
    meta: Dict[str, Any] = Field(default_factory=dict)
