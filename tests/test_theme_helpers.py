"""Tests helpers de thème + CSS variables."""
from section_layout.theme import (
    generate_css_variables, get_card_styles, get_social_color, get_theme_color,
)


def test_get_theme_color_path(resolver):
    theme = resolver.resolve()
    assert get_theme_color(theme, "primary.main") == "#22b8c8"
    assert get_theme_color(theme, "button.primary.hoverBackground") == "#1a8c98"


def test_get_theme_color_missing_path(resolver):
    theme = resolver.resolve()
    assert get_theme_color(theme, "primary.nope") == "#000000"
    assert get_theme_color(theme, "primary") == "#000000"


def test_get_social_color(resolver):
    theme = resolver.resolve()
    assert get_social_color(theme, "Instagram") == "#e4405f"
    assert get_social_color(theme, "mastodon") == theme.colors.primary.main


def test_card_styles_variants(resolver):
    theme = resolver.resolve()
    default = get_card_styles(theme)
    assert default["background-color"] == "#ffffff"
    assert default["border"] == "1px solid #e0e0e0"
    assert get_card_styles(theme, "selected")["border"] == "2px solid #22b8c8"
    assert get_card_styles(theme, "hover")["box-shadow"] == theme.shadow.lg


# ── CSS variables ───────────────────────────────────────────────────────────

def test_css_variables_cover_leaves(resolver):
    css = generate_css_variables(resolver.resolve())
    assert css.startswith(":root {")
    assert "--color-primary-main: #22b8c8;" in css
    assert "--color-button-primary-hover-background: #1a8c98;" in css
    assert "--typography-font-size-display: 48px;" in css
    assert "--border-radius-full: 50%;" in css
    assert "--name" not in css


def test_css_variables_contain_overridden_leaves(resolver):
    theme = resolver.resolve("promo", {
        "colors": {"primary": {"main": "#ff0000"}}, "spacing": {"lg": "30px"}, "typography": {},
    })
    css = generate_css_variables(theme)
    assert "--color-primary-main: #ff0000;" in css
    assert "--spacing-lg: 30px;" in css
    assert "/* === promo === */" in css
