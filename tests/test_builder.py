"""Tests SectionBuilder — manifest → (Theme, RenderPlan) / HTML."""
from section_layout import SectionBuilder, ThemeResolver

from conftest import make_block


def test_build_default_theme(registry):
    theme, plan = SectionBuilder(registry=registry).build({"contentBlocks": [make_block("a")]})
    assert theme.name == "Glamlink Standard"
    assert plan.strategy == "single-column"


def test_build_with_override(registry):
    builder = SectionBuilder(registry=registry)
    theme, _ = builder.build({
        "theme": "promo",
        "themeOverrides": {"colors": {"primary": {"main": "#000001"}}, "spacing": {}, "typography": {}},
    })
    assert theme.colors.primary.main == "#000001"
    assert "promo" in builder.resolver.cached_names()


def test_shared_resolver():
    resolver = ThemeResolver()
    SectionBuilder(resolver=resolver).build({"theme": "midnight"})
    assert "midnight" in resolver.cached_names()


def test_render_without_css(registry):
    html = SectionBuilder(registry=registry).render(
        {"sectionTitle": "Picks", "contentBlocks": [make_block("a")]}, with_css=False,
    )
    assert html.startswith("<section")
    assert '<h2 class="section-layout__title">Picks</h2>' in html
    assert "<style>" not in html
