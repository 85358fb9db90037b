"""
Tests ThemeResolver + merge générique.
  resolve(name, override)  → Theme complet (cache → override → registry → défaut)
  merge_tokens(base, over) → nouvel arbre, base intacte
"""
import copy

import pytest

from section_layout.theme import (
    DEFAULT_THEME_TOKENS, Theme, ThemeResolver, merge_tokens, normalize_keys,
)
from section_layout.theme.merge import leaf_paths


def full_override(**groups):
    """Override minimal valide (3 groupes requis) + groupes fournis."""
    override = {"colors": {}, "spacing": {}, "typography": {}}
    override.update(groups)
    return override


# ── merge_tokens ────────────────────────────────────────────────────────────

class TestMergeTokens:

    def test_leaf_replaced_siblings_kept(self):
        merged = merge_tokens(DEFAULT_THEME_TOKENS, {"colors": {"primary": {"main": "#ff0000"}}})
        assert merged["colors"]["primary"]["main"] == "#ff0000"
        assert merged["colors"]["primary"]["light"] == "#bcecf1"
        assert merged["colors"]["secondary"] == DEFAULT_THEME_TOKENS["colors"]["secondary"]

    def test_base_not_mutated(self):
        before = copy.deepcopy(DEFAULT_THEME_TOKENS)
        merge_tokens(DEFAULT_THEME_TOKENS, {"spacing": {"md": "20px"}})
        assert DEFAULT_THEME_TOKENS == before

    def test_unknown_keys_ignored(self):
        merged = merge_tokens(DEFAULT_THEME_TOKENS, {"colors": {"neon": {"main": "#0f0"}}, "extra": 1})
        assert "neon" not in merged["colors"]
        assert "extra" not in merged

    def test_scalar_over_group_ignored(self):
        merged = merge_tokens(DEFAULT_THEME_TOKENS, {"shadow": "none"})
        assert merged["shadow"] == DEFAULT_THEME_TOKENS["shadow"]

    def test_lists_replaced_not_concatenated(self):
        merged = merge_tokens({"a": [1, 2], "b": {"c": [3]}}, {"a": [9], "b": {"c": [4, 5]}})
        assert merged == {"a": [9], "b": {"c": [4, 5]}}

    def test_deeply_nested_group(self):
        merged = merge_tokens(DEFAULT_THEME_TOKENS, {
            "colors": {"button": {"tertiary": {"hoverText": "#123456"}}},
        })
        assert merged["colors"]["button"]["tertiary"]["hoverText"] == "#123456"
        assert merged["colors"]["button"]["tertiary"]["text"] == "#333333"

    def test_number_on_text_leaf_converted(self):
        merged = merge_tokens(DEFAULT_THEME_TOKENS, {"typography": {"fontWeight": {"bold": 800}}})
        assert merged["typography"]["fontWeight"]["bold"] == "800"

    def test_group_over_leaf_ignored(self):
        merged = merge_tokens(DEFAULT_THEME_TOKENS, {"spacing": {"md": {"nested": "x"}, "lg": [1]}})
        assert merged["spacing"]["md"] == "16px"
        assert merged["spacing"]["lg"] == "24px"

    def test_normalize_keys_snake_case(self):
        assert normalize_keys({"border_radius": {"md": "2px"}, "colors": {"text": {"link_hover": "#000"}}}) == {
            "borderRadius": {"md": "2px"}, "colors": {"text": {"linkHover": "#000"}},
        }


# ── resolve ─────────────────────────────────────────────────────────────────

class TestResolve:

    def test_no_name_returns_default(self, resolver):
        theme = resolver.resolve()
        assert theme.name == "Glamlink Standard"
        assert theme.colors.primary.main == "#22b8c8"

    def test_standard_alias(self, resolver):
        assert resolver.resolve("standard") == resolver.resolve("default") == resolver.default_theme

    def test_round_trip_completeness(self, resolver):
        """Chaque feuille de l'override est présente, chaque feuille absente vient du défaut."""
        override = full_override(
            colors={"primary": {"main": "#ff0000"}, "social": {"tiktok": "#010101"}},
            spacing={"lg": "30px"},
            typography={"fontSize": {"display": "64px"}},
            shadow={"none": "0 0 0 transparent"},
        )
        theme = resolver.resolve("promo", override)
        tokens = dict(leaf_paths(theme.tokens()))
        overridden = dict(leaf_paths(override))
        for path, value in overridden.items():
            assert tokens[path] == value
        for path, value in leaf_paths(DEFAULT_THEME_TOKENS):
            if path not in overridden and path != "name":
                assert tokens[path] == value
        assert theme.name == "promo"

    def test_snake_case_override(self, resolver):
        theme = resolver.resolve("snake", {
            "colors": {"background": {"alternate_section": "#eeeeee"}},
            "spacing": {},
            "typography": {"font_weight": {"bold": "800"}},
        })
        assert theme.colors.background.alternate_section == "#eeeeee"
        assert theme.typography.font_weight.bold == "800"

    @pytest.mark.parametrize("override", [
        {"colors": {"primary": {"main": "#f00"}}},
        {"colors": {}, "spacing": {}},
        {"colors": "red", "spacing": {}, "typography": {}},
        "not a dict",
        [],
    ])
    def test_invalid_override_falls_back_to_default(self, resolver, override):
        theme = resolver.resolve("broken", override)
        assert theme == resolver.default_theme
        assert "broken" not in resolver.cached_names()

    def test_invalid_leaf_type_falls_back(self, resolver):
        theme = resolver.resolve("bad-leaf", full_override(spacing={"md": {"nested": "x"}}))
        assert theme.spacing.md == "16px"

    def test_cache_wins_over_new_override(self, resolver):
        first = resolver.resolve("promo", full_override(colors={"primary": {"main": "#111111"}}))
        again = resolver.resolve("promo", full_override(colors={"primary": {"main": "#222222"}}))
        assert again is first
        assert again.colors.primary.main == "#111111"

    def test_unknown_name_returns_default(self, resolver):
        assert resolver.resolve("nope") == resolver.default_theme

    def test_numeric_leaves_kept_as_text(self, resolver):
        theme = resolver.resolve("brand", {
            "colors": {"primary": {"main": "#ff0000"}},
            "spacing": {},
            "typography": {"fontWeight": {"bold": 800}, "lineHeight": {"normal": 1.4}},
        })
        assert theme.colors.primary.main == "#ff0000"
        assert theme.typography.font_weight.bold == "800"
        assert theme.typography.line_height.normal == "1.4"
        assert theme.name == "brand"

    def test_bad_leaf_dropped_rest_kept(self, resolver):
        theme = resolver.resolve("brand", full_override(
            colors={"primary": {"main": "#ff0000", "light": True}},
            spacing={"md": None, "lg": "30px"},
        ))
        assert theme.colors.primary.main == "#ff0000"
        assert theme.colors.primary.light == "#bcecf1"
        assert theme.spacing.md == "16px"
        assert theme.spacing.lg == "30px"

    def test_theme_is_frozen(self, resolver):
        theme = resolver.resolve()
        with pytest.raises(Exception):
            theme.name = "mutated"


# ── Presets / registry ──────────────────────────────────────────────────────

class TestPresets:

    def test_midnight(self, resolver):
        theme = resolver.resolve("midnight")
        assert theme.name == "Midnight"
        assert theme.colors.background.body == "#12121c"
        # feuille non surchargée conservée
        assert theme.colors.primary.main == "#22b8c8"

    def test_blush(self, resolver):
        theme = resolver.resolve("blush")
        assert theme.colors.primary.main == "#d4798f"
        assert theme.border_radius.md == "12px"
        assert theme.border_radius.sm == "4px"

    def test_invalid_override_on_preset_name_uses_preset(self, resolver):
        assert resolver.resolve("midnight", {"colors": {}}).name == "Midnight"

    def test_list_themes(self, resolver):
        names = resolver.list_themes()
        assert names[:2] == ["standard", "default"]
        assert {"midnight", "blush"} <= set(names)

    def test_add_theme(self, resolver):
        tree = merge_tokens(DEFAULT_THEME_TOKENS, {"name": "Custom", "colors": {"primary": {"main": "#abcdef"}}})
        assert resolver.add_theme("custom", tree) is True
        assert resolver.resolve("custom").colors.primary.main == "#abcdef"
        assert "custom" in resolver.list_themes()

    def test_add_incomplete_theme_rejected(self, resolver):
        assert resolver.add_theme("partial", {"name": "Partial", "colors": {}}) is False
        assert resolver.resolve("partial") == resolver.default_theme

    def test_add_theme_instance(self, resolver):
        theme = resolver.merge_theme(resolver.default_theme, {"spacing": {"xs": "2px"}})
        assert resolver.add_theme("tight", theme)
        assert resolver.resolve("tight").spacing.xs == "2px"


# ── Cache ───────────────────────────────────────────────────────────────────

class TestCache:

    def test_clear_cache_keeps_builtins(self, resolver):
        resolver.resolve("midnight")
        assert "midnight" in resolver.cached_names()
        resolver.clear_cache()
        assert "midnight" not in resolver.cached_names()
        assert "standard" in resolver.cached_names()
        assert resolver.resolve("midnight").name == "Midnight"

    def test_clear_cache_drops_overrides(self, resolver):
        resolver.resolve("promo", full_override(colors={"primary": {"main": "#111111"}}))
        resolver.clear_cache()
        assert resolver.resolve("promo") == resolver.default_theme

    def test_instances_are_isolated(self):
        a, b = ThemeResolver(), ThemeResolver()
        a.resolve("promo", full_override(colors={"primary": {"main": "#111111"}}))
        assert "promo" in a.cached_names()
        assert "promo" not in b.cached_names()

    def test_custom_default_tokens(self):
        tokens = merge_tokens(DEFAULT_THEME_TOKENS, {"name": "House"})
        assert ThemeResolver(default_tokens=tokens, presets={}).resolve().name == "House"


# ── merge_theme ─────────────────────────────────────────────────────────────

def test_merge_theme_keeps_base(resolver):
    base = resolver.default_theme
    merged = resolver.merge_theme(base, {"colors": {"primary": {"main": "#000001"}}})
    assert merged.colors.primary.main == "#000001"
    assert base.colors.primary.main == "#22b8c8"
    assert isinstance(merged, Theme)


def test_merge_theme_none_override(resolver):
    assert resolver.merge_theme(resolver.default_theme, None) is resolver.default_theme
