"""Core module pour section_layout."""
from .breakpoints import (
    BREAKPOINTS,
    ResponsiveRule,
    rule_from_setting,
    invert,
)
from .schemas import (
    BackgroundSpec,
    BackgroundDirective,
    ContentBlock,
    LayoutConfig,
    Placement,
    Visibility,
    RenderPlanEntry,
    ContainerSpec,
    FlexColumn,
    RenderPlan,
    LAYOUTS,
    load_block,
)

__all__ = [
    "BREAKPOINTS",
    "ResponsiveRule",
    "rule_from_setting",
    "invert",
    "BackgroundSpec",
    "BackgroundDirective",
    "ContentBlock",
    "LayoutConfig",
    "Placement",
    "Visibility",
    "RenderPlanEntry",
    "ContainerSpec",
    "FlexColumn",
    "RenderPlan",
    "LAYOUTS",
    "load_block",
]
