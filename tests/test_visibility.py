"""Tests Visibility Resolver."""
import pytest

from section_layout.core.breakpoints import BREAKPOINTS
from section_layout.layout.visibility import resolve_visibility, visibility_for


def test_above_md_hidden_below_visible_above():
    rule = visibility_for("above-breakpoint", "md")
    assert not rule.applies(767)
    assert rule.applies(768)
    assert rule.applies(1400)


def test_below_md_visible_below_hidden_above():
    rule = visibility_for("below-breakpoint", "md")
    assert rule.applies(767)
    assert not rule.applies(768)


def test_above_always_visible_everywhere():
    rule = visibility_for("above-breakpoint", "always")
    assert all(rule.applies(w) for w in (0, *BREAKPOINTS.values(), 3000))


@pytest.mark.parametrize("mode,breakpoint,visible", [
    ("below-breakpoint", "always", False),
    ("above-breakpoint", "never", False),
    ("below-breakpoint", "never", True),
])
def test_sentinels(mode, breakpoint, visible):
    rule = visibility_for(mode, breakpoint)
    assert all(rule.applies(w) is visible for w in (0, 800, 3000))


def test_always_mode_ignores_breakpoint():
    for breakpoint in ("xs", "xl", "never"):
        assert visibility_for("always", breakpoint).kind == "always"


def test_unknown_inputs():
    assert visibility_for("sometimes", "md").kind == "always"
    assert visibility_for("above-breakpoint", "tablet").breakpoint == "md"


@pytest.mark.parametrize("mode,breakpoint,class_name", [
    ("always", "md", ""),
    ("above-breakpoint", "lg", "hide-below-lg"),
    ("below-breakpoint", "sm", "hide-above-sm"),
    ("below-breakpoint", "always", "hidden"),
])
def test_visibility_class(mode, breakpoint, class_name):
    assert resolve_visibility(mode, breakpoint).class_name == class_name
