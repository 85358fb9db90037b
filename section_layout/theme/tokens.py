"""
Tokens de thème — arbre par défaut canonique + modèles Pydantic figés.

DEFAULT_THEME_TOKENS est l'unique source des valeurs par défaut (JSON auteur,
clés camelCase). Theme valide un arbre COMPLET : chaque feuille est requise,
donc aucun thème partiel ne peut être construit.

THEME_PRESETS = overrides nommés appliqués sur l'arbre par défaut
(même principe que les style presets : indépendants de la palette).
"""
from typing import Dict
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Tokens(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ── Couleurs ─────────────────────────────────────────────────────────────────

class ColorScale(_Tokens):
    main: str
    light: str
    dark: str
    text: str


class BackgroundColors(_Tokens):
    body: str
    email: str
    section: str
    alternate_section: str
    footer: str
    card: str
    highlight: str


class TextColors(_Tokens):
    primary: str
    secondary: str
    tertiary: str
    inverse: str
    link: str
    link_hover: str
    muted: str
    error: str
    success: str


class BorderColors(_Tokens):
    light: str
    medium: str
    dark: str
    primary: str
    secondary: str


class ButtonColors(_Tokens):
    background: str
    text: str
    border: str
    hover_background: str
    hover_text: str
    hover_border: str


class ButtonVariants(_Tokens):
    primary: ButtonColors
    secondary: ButtonColors
    tertiary: ButtonColors


class GradientColors(_Tokens):
    primary: str
    secondary: str
    highlight: str


class SocialColors(_Tokens):
    facebook: str
    instagram: str
    twitter: str
    linkedin: str
    youtube: str
    tiktok: str


class CommerceColors(_Tokens):
    price: str
    original_price: str
    discount: str
    stock: str
    out_of_stock: str
    rating: str


class BadgeColors(_Tokens):
    new: str
    sale: str
    featured: str
    trending: str
    exclusive: str


class OverlayColors(_Tokens):
    dark: str
    light: str
    primary: str


class ThemeColors(_Tokens):
    primary: ColorScale
    secondary: ColorScale
    background: BackgroundColors
    text: TextColors
    border: BorderColors
    button: ButtonVariants
    gradient: GradientColors
    social: SocialColors
    commerce: CommerceColors
    badge: BadgeColors
    overlay: OverlayColors


# ── Espacements, typo, rayons, ombres ────────────────────────────────────────

class Spacing(_Tokens):
    xs: str
    sm: str
    md: str
    lg: str
    xl: str
    xxl: str
    section: str
    container: str


class FontFamilies(_Tokens):
    primary: str
    secondary: str
    mono: str


class FontSizes(_Tokens):
    xs: str
    sm: str
    base: str
    lg: str
    xl: str
    xxl: str
    xxxl: str
    display: str


class FontWeights(_Tokens):
    light: str
    normal: str
    medium: str
    semibold: str
    bold: str


class LineHeights(_Tokens):
    tight: str
    normal: str
    relaxed: str


class Typography(_Tokens):
    font_family: FontFamilies
    font_size: FontSizes
    font_weight: FontWeights
    line_height: LineHeights


class BorderRadius(_Tokens):
    none: str
    sm: str
    md: str
    lg: str
    xl: str
    full: str


class Shadows(_Tokens):
    none: str
    sm: str
    md: str
    lg: str
    xl: str


class Theme(_Tokens):
    """Arbre de tokens complet et immuable."""
    name: str
    description: str = ""
    colors: ThemeColors
    spacing: Spacing
    typography: Typography
    border_radius: BorderRadius
    shadow: Shadows

    def tokens(self) -> dict:
        """Arbre JSON (camelCase) — base des merges et des CSS variables."""
        return self.model_dump(by_alias=True)


# Groupes de premier niveau obligatoires dans un override
REQUIRED_GROUPS = ("colors", "spacing", "typography")


DEFAULT_THEME_TOKENS: Dict = {
    "name": "Glamlink Standard",
    "description": "Standard Glamlink brand theme with official colors",
    "colors": {
        "primary":   {"main": "#22b8c8", "light": "#bcecf1", "dark": "#1a8c98", "text": "#ffffff"},
        "secondary": {"main": "#faf7f2", "light": "#ffffff", "dark": "#f5ede0", "text": "#333333"},
        "background": {
            "body": "#faf7f2",
            "email": "#ffffff",
            "section": "#ffffff",
            "alternateSection": "#faf7f2",
            "footer": "#333333",
            "card": "#ffffff",
            "highlight": "#bcecf1",
        },
        "text": {
            "primary": "#333333",
            "secondary": "#666666",
            "tertiary": "#999999",
            "inverse": "#ffffff",
            "link": "#22b8c8",
            "linkHover": "#1a8c98",
            "muted": "#a5a5a5",
            "error": "#d32f2f",
            "success": "#2e7d32",
        },
        "border": {
            "light": "#e0e0e0",
            "medium": "#cccccc",
            "dark": "#999999",
            "primary": "#22b8c8",
            "secondary": "#bcecf1",
        },
        "button": {
            "primary": {
                "background": "#22b8c8", "text": "#ffffff", "border": "#22b8c8",
                "hoverBackground": "#1a8c98", "hoverText": "#ffffff", "hoverBorder": "#1a8c98",
            },
            "secondary": {
                "background": "#ffffff", "text": "#22b8c8", "border": "#22b8c8",
                "hoverBackground": "#bcecf1", "hoverText": "#1a8c98", "hoverBorder": "#1a8c98",
            },
            "tertiary": {
                "background": "#faf7f2", "text": "#333333", "border": "#e0e0e0",
                "hoverBackground": "#f5ede0", "hoverText": "#22b8c8", "hoverBorder": "#22b8c8",
            },
        },
        "gradient": {
            "primary":   "linear-gradient(135deg, #ffffff 0%, #22b8c8 100%)",
            "secondary": "linear-gradient(135deg, #faf7f2 0%, #bcecf1 100%)",
            "highlight": "linear-gradient(90deg, #22b8c8 0%, #bcecf1 100%)",
        },
        "social": {
            "facebook": "#1877f2",
            "instagram": "#e4405f",
            "twitter": "#1da1f2",
            "linkedin": "#0077b5",
            "youtube": "#ff0000",
            "tiktok": "#000000",
        },
        "commerce": {
            "price": "#22b8c8",
            "originalPrice": "#999999",
            "discount": "#d32f2f",
            "stock": "#2e7d32",
            "outOfStock": "#d32f2f",
            "rating": "#ffc107",
        },
        "badge": {
            "new": "#22b8c8",
            "sale": "#d32f2f",
            "featured": "#ffc107",
            "trending": "#ff6b6b",
            "exclusive": "#9c27b0",
        },
        "overlay": {
            "dark": "rgba(0, 0, 0, 0.5)",
            "light": "rgba(255, 255, 255, 0.8)",
            "primary": "rgba(34, 184, 200, 0.1)",
        },
    },
    "spacing": {
        "xs": "8px", "sm": "12px", "md": "16px", "lg": "24px",
        "xl": "32px", "xxl": "48px", "section": "40px", "container": "600px",
    },
    "typography": {
        "fontFamily": {
            "primary": "'Helvetica Neue', Helvetica, Arial, sans-serif",
            "secondary": "Georgia, 'Times New Roman', serif",
            "mono": "'Courier New', Courier, monospace",
        },
        "fontSize": {
            "xs": "12px", "sm": "14px", "base": "16px", "lg": "18px",
            "xl": "20px", "xxl": "24px", "xxxl": "32px", "display": "48px",
        },
        "fontWeight": {"light": "300", "normal": "400", "medium": "500", "semibold": "600", "bold": "700"},
        "lineHeight": {"tight": "1.2", "normal": "1.5", "relaxed": "1.8"},
    },
    "borderRadius": {"none": "0", "sm": "4px", "md": "8px", "lg": "12px", "xl": "16px", "full": "50%"},
    "shadow": {
        "none": "none",
        "sm": "0 1px 2px rgba(0, 0, 0, 0.05)",
        "md": "0 4px 6px rgba(0, 0, 0, 0.1)",
        "lg": "0 10px 15px rgba(0, 0, 0, 0.1)",
        "xl": "0 20px 25px rgba(0, 0, 0, 0.1)",
    },
}


# Presets = overrides sur DEFAULT_THEME_TOKENS, matérialisés à la demande
THEME_PRESETS: Dict[str, dict] = {

    "midnight": {
        "name": "Midnight",
        "description": "Dark editorial theme, brand accent kept",
        "colors": {
            "secondary": {"main": "#1f2230", "light": "#2a2e40", "dark": "#15171f", "text": "#f0f0f5"},
            "background": {
                "body": "#12121c", "email": "#1c1c2a", "section": "#1c1c2a",
                "alternateSection": "#12121c", "footer": "#0b0b12", "card": "#232336",
                "highlight": "#1a8c98",
            },
            "text": {
                "primary": "#f0f0f5", "secondary": "#c3c3d0", "tertiary": "#a0a0b4",
                "inverse": "#12121c", "muted": "#7c7c90",
            },
            "border": {"light": "#323246", "medium": "#44445c", "dark": "#5a5a74"},
            "overlay": {"dark": "rgba(0, 0, 0, 0.7)", "light": "rgba(28, 28, 42, 0.8)"},
        },
        "spacing": {},
        "typography": {},
        "shadow": {
            "sm": "0 0 8px rgba(34, 184, 200, 0.2)",
            "md": "0 0 20px rgba(34, 184, 200, 0.25)",
            "lg": "0 0 40px rgba(34, 184, 200, 0.30)",
            "xl": "0 0 60px rgba(34, 184, 200, 0.35)",
        },
    },

    "blush": {
        "name": "Blush",
        "description": "Soft editorial theme for beauty features",
        "colors": {
            "primary": {"main": "#d4798f", "light": "#f6dde3", "dark": "#a8566b", "text": "#ffffff"},
            "text": {"link": "#d4798f", "linkHover": "#a8566b"},
            "border": {"primary": "#d4798f", "secondary": "#f6dde3"},
            "button": {
                "primary": {
                    "background": "#d4798f", "border": "#d4798f",
                    "hoverBackground": "#a8566b", "hoverBorder": "#a8566b",
                },
            },
            "gradient": {
                "primary": "linear-gradient(135deg, #ffffff 0%, #d4798f 100%)",
                "highlight": "linear-gradient(90deg, #d4798f 0%, #f6dde3 100%)",
            },
        },
        "spacing": {},
        "typography": {
            "fontFamily": {"primary": "Georgia, 'Times New Roman', serif"},
        },
        "borderRadius": {"md": "12px", "lg": "20px"},
    },
}
