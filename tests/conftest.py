"""Fixtures partagées — resolver isolé + registry de renderers feuilles."""
import pytest

from section_layout.registry import BlockRegistry
from section_layout.theme import ThemeResolver


def quote_renderer(props, theme):
    return f'<blockquote style="color:{theme.colors.primary.main}">{props.get("text", "")}</blockquote>'


def text_renderer(props, theme):
    return f"<p>{props.get('text', '')}</p>"


@pytest.fixture
def resolver():
    """Nouvelle instance par test : cache vierge."""
    return ThemeResolver()


@pytest.fixture
def registry():
    return BlockRegistry({
        "shared": {"Quote": quote_renderer, "Text": text_renderer},
        "maximize": {"Stats": lambda props, theme: "<div>stats</div>"},
    })


def make_block(id, order=0, **fields):
    """Bloc auteur minimal (JSON camelCase)."""
    block = {"id": id, "category": "shared", "type": "Text", "order": order, "enabled": True,
             "props": {"text": id}}
    block.update(fields)
    return block
