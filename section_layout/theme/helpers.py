"""
Helpers de thème pour les renderers feuilles.

get_theme_color / get_social_color / get_card_styles → lookups par chemin
generate_css_variables(theme) → bloc :root { --color-primary-main: ...; } couvrant
toutes les feuilles de l'arbre (une variable par token).
"""
import re
from typing import Dict

from .merge import leaf_paths
from .tokens import Theme

FALLBACK_COLOR = "#000000"


def get_theme_color(theme: Theme, path: str) -> str:
    """Couleur par chemin pointé sous `colors` (ex: "button.primary.background")."""
    value = theme.tokens()["colors"]
    for key in path.split("."):
        if not isinstance(value, dict) or key not in value:
            return FALLBACK_COLOR
        value = value[key]
    return value if isinstance(value, str) and value else FALLBACK_COLOR


def get_social_color(theme: Theme, platform: str) -> str:
    """Couleur d'un réseau social, fallback sur la couleur primaire."""
    return theme.tokens()["colors"]["social"].get(platform.lower()) or theme.colors.primary.main


def get_card_styles(theme: Theme, variant: str = "default") -> Dict[str, str]:
    """Styles inline cohérents pour une card (default | hover | selected)."""
    styles = {
        "background-color": theme.colors.background.card,
        "border-radius":    theme.border_radius.md,
        "padding":          theme.spacing.md,
    }
    if variant == "hover":
        styles["box-shadow"] = theme.shadow.lg
        styles["border"] = f"1px solid {theme.colors.border.primary}"
    elif variant == "selected":
        styles["box-shadow"] = theme.shadow.lg
        styles["border"] = f"2px solid {theme.colors.primary.main}"
    else:
        styles["box-shadow"] = theme.shadow.md
        styles["border"] = f"1px solid {theme.colors.border.light}"
    return styles


def _css_name(path: str) -> str:
    # colors.button.primary.hoverBackground → color-button-primary-hover-background
    parts = path.split(".")
    if parts[0] == "colors":
        parts[0] = "color"
    return "-".join(re.sub(r"(?<!^)(?=[A-Z])", "-", p).lower() for p in parts)


def generate_css_variables(theme: Theme) -> str:
    """
    Génère le bloc :root {} à partir du thème résolu.

    Returns:
        CSS :root {} — une variable par feuille (hors name/description)
    """
    tokens = theme.tokens()
    tokens.pop("name", None)
    tokens.pop("description", None)

    lines = [f"  --{_css_name(path)}: {value};" for path, value in leaf_paths(tokens)]
    return ":root {\n  /* === " + theme.name + " === */\n" + "\n".join(lines) + "\n}"
