"""
Registry des renderers feuilles — (category, type) → renderer.

Un renderer est un callable `(props, theme) -> str`. Le moteur ne lit jamais
`props` : il les transmet tels quels.

    >>> registry = BlockRegistry()
    >>> registry.register("shared", "Quote", lambda props, theme: f"<q>{props['text']}</q>")
    >>> registry.supports("shared", "Quote")
    True
"""
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, runtime_checkable

LeafRenderer = Callable[[Mapping[str, Any], Any], str]


@runtime_checkable
class RendererRegistry(Protocol):
    def supports(self, category: str, block_type: str) -> bool: ...
    def get(self, category: str, block_type: str) -> Optional[LeafRenderer]: ...


class BlockRegistry:
    """Registry en mémoire, groupé par catégorie."""

    def __init__(self, renderers: Optional[Mapping[str, Mapping[str, LeafRenderer]]] = None):
        self._renderers: Dict[str, Dict[str, LeafRenderer]] = {}
        for category, by_type in (renderers or {}).items():
            for block_type, renderer in by_type.items():
                self.register(category, block_type, renderer)

    def register(self, category: str, block_type: str, renderer: LeafRenderer) -> None:
        self._renderers.setdefault(category, {})[block_type] = renderer

    def supports(self, category: str, block_type: str) -> bool:
        return block_type in self._renderers.get(category, {})

    def get(self, category: str, block_type: str) -> Optional[LeafRenderer]:
        return self._renderers.get(category, {}).get(block_type)

    def categories(self) -> List[str]:
        return list(self._renderers)

    def catalog(self) -> Dict[str, List[str]]:
        """{category: [types…]} — exposé par GET /catalog."""
        return {category: list(by_type) for category, by_type in self._renderers.items()}


def diagnose(registry: Optional[RendererRegistry], category: str, block_type: str) -> Optional[str]:
    """Message de diagnostic si le couple n'est pas rendu par le registry, sinon None."""
    if registry is None or registry.supports(category, block_type):
        return None
    categories = registry.categories() if isinstance(registry, BlockRegistry) else None
    if categories is not None and category not in categories:
        return f"Unsupported block category: {category}"
    return f"Unsupported block type: {block_type} in category {category}"
