"""
Configuration section_layout — variables d'environnement.

SECTION_LAYOUT_DEFAULT_THEME  thème résolu quand aucun nom n'est fourni au builder
SECTION_LAYOUT_LOG_LEVEL      niveau de log pour configure_logging()
SECTION_LAYOUT_FLOAT_WIDTH    largeur par défaut d'un bloc flottant
SECTION_LAYOUT_BORDER_COLOR   couleur de bordure par défaut d'un bloc
"""
import logging
import os

DEFAULT_THEME_NAME   = os.getenv("SECTION_LAYOUT_DEFAULT_THEME", "standard")
LOG_LEVEL            = os.getenv("SECTION_LAYOUT_LOG_LEVEL", "INFO")
DEFAULT_FLOAT_WIDTH  = os.getenv("SECTION_LAYOUT_FLOAT_WIDTH", "250px")
DEFAULT_BORDER_COLOR = os.getenv("SECTION_LAYOUT_BORDER_COLOR", "#e5e7eb")

# Espacements structurels (marges des blocs dans les layouts)
BLOCK_GAP        = "1rem"
MASONRY_GAP      = "1.5rem"


def configure_logging(level: str | None = None) -> None:
    """Configure le logging racine (apps hôtes / scripts). La lib ne l'appelle jamais."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s — %(message)s",
    )
