"""
CSS d'une section = variables du thème + feuille de layout SCSS.

La feuille de layout ne dépend pas du thème (elle ne lit que des var(--…)) :
elle est compilée par libsass une fois par style de sortie et par processus.
"""
import logging
from functools import lru_cache
from pathlib import Path

import sass

from ..theme import Theme, generate_css_variables

log = logging.getLogger(__name__)

LAYOUT_SCSS = Path(__file__).parent.parent / "scss" / "layout.scss"


@lru_cache(maxsize=None)
def compile_layout_scss(output_style: str = "compressed") -> str:
    """Classes structurelles (visibilité, grilles, colonnes, flottants). `cache_clear()` pour recompiler."""
    log.debug("Compilation %s (%s)", LAYOUT_SCSS.name, output_style)
    return sass.compile(filename=str(LAYOUT_SCSS), output_style=output_style)


def generate_layout_css(theme: Theme, output_style: str = "compressed") -> str:
    """
    Args:
        theme:        thème résolu → bloc :root { --… }
        output_style: style libsass (compressed | expanded | nested | compact)
    """
    return f"{generate_css_variables(theme)}\n\n{compile_layout_scss(output_style)}"
