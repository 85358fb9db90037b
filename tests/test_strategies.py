"""Tests Layout Mode Selector + conteneur."""
import pytest

from section_layout.core.schemas import LAYOUTS, LayoutConfig
from section_layout.layout.strategies import container_for, strategy_for


@pytest.mark.parametrize("layout", LAYOUTS)
def test_every_layout_has_strategy(layout):
    assert strategy_for(layout).name == layout


@pytest.mark.parametrize("layout", ["", None, "carousel", "GRID"])
def test_unknown_layout_falls_back(layout):
    assert strategy_for(layout).name == "single-column"


def test_track_limits():
    assert strategy_for("two-column").max_tracks == 2
    assert strategy_for("grid").max_tracks == 3
    assert strategy_for("two-column").collapse_breakpoint == "lg"


def test_grid_dense_container():
    container = container_for(LayoutConfig(layout="grid", grid_flow="dense"))
    assert container.classes == ["layout-grid", "layout-grid--3", "layout-grid--dense"]


def test_masonry_container_columns():
    assert "layout-masonry--3" in container_for(LayoutConfig(layout="masonry", masonry_columns="3")).classes
    assert "layout-masonry--2" in container_for(LayoutConfig(layout="masonry")).classes


def test_float_container_contains_floats():
    assert container_for(LayoutConfig(layout="float-columns")).style == {"overflow": "hidden"}


def test_unknown_layout_container_is_stack():
    container = container_for(LayoutConfig(layout="carousel"))
    assert container.classes == ["layout-stack"]
