"""
API publique du moteur de layout de sections.
"""
import logging
from typing import Optional, Tuple, Union

from .config import DEFAULT_THEME_NAME
from .core.schemas import RenderPlan
from .layout.assembler import assemble
from .manifest.parser import ParsedSection, parse_manifest
from .manifest.schema import SectionManifest
from .registry import RendererRegistry
from .renderer.css import generate_layout_css
from .renderer.html import render_section
from .theme import Theme, ThemeResolver

log = logging.getLogger(__name__)

ManifestInput = Union[SectionManifest, dict]


class SectionBuilder:
    """
    Builder de sections de blocs.

    Usage:
        >>> builder = SectionBuilder(registry=registry)
        >>> theme, plan = builder.build({"layout": "grid", "contentBlocks": [...]})
        >>> html = builder.render({"layout": "grid", "contentBlocks": [...]})
    """

    def __init__(
        self,
        resolver: Optional[ThemeResolver] = None,
        registry: Optional[RendererRegistry] = None,
    ):
        """
        Args:
            resolver: résolveur de thèmes (nouvelle instance, cache isolé, si absent)
            registry: renderers feuilles ; None → aucun diagnostic "unsupported"
        """
        self.resolver = resolver or ThemeResolver()
        self.registry = registry

    def build(self, manifest: ManifestInput) -> Tuple[Theme, RenderPlan]:
        """
        Résout le thème et assemble le plan d'une section.

        Returns:
            (Theme, RenderPlan)
        """
        return self._build(parse_manifest(manifest))

    def render(self, manifest: ManifestInput, with_css: bool = True) -> str:
        """
        Rend une section en HTML.

        Args:
            with_css: préfixe un <style> avec les variables du thème + le SCSS de layout
        """
        section = parse_manifest(manifest)
        theme, plan = self._build(section)
        body = render_section(plan, theme, self.registry, title=section.title)
        if not with_css:
            return body
        return f"<style>{generate_layout_css(theme)}</style>\n{body}"

    def _build(self, section: ParsedSection) -> Tuple[Theme, RenderPlan]:
        theme = self.resolver.resolve(section.theme_name or DEFAULT_THEME_NAME, section.theme_override)
        plan = assemble(section.blocks, section.layout_config, self.registry)
        log.info("Section %s : thème %r, %d bloc(s)", plan.strategy, theme.name, len(plan.entries))
        return theme, plan
