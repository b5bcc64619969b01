"""Declarative modifiers that wrap UI components in single-child decorations."""

from .geometry import (
    BOTTOM_CENTER,
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    CENTER,
    CENTER_LEFT,
    CENTER_RIGHT,
    TOP_CENTER,
    TOP_LEFT,
    TOP_RIGHT,
    Alignment,
    BoxConstraints,
    BoxFit,
    Clip,
    EdgeInsets,
    Offset,
    Size,
    TextBaseline,
)
from .component_schema import DEFAULT_PADDING, ComponentBase
from .style.theme import DEFAULT_THEME, ThemeData, validate_theme_data
from .text.component import TextComponent
from .wrappers import (
    Align,
    AspectRatio,
    Baseline,
    Center,
    ClipOval,
    ClipPath,
    ClipRect,
    ConstrainedBox,
    CustomClipper,
    Expanded,
    FittedBox,
    FractionallySizedBox,
    IntrinsicHeight,
    IntrinsicWidth,
    LimitedBox,
    Offstage,
    Opacity,
    OverflowBox,
    Padding,
    SingleChildWrapper,
    SizedBox,
    SizedOverflowBox,
    Theme,
    Transform,
)
from .modifiers import MODIFIERS, ModifierSpec, ParamSpec, apply_modifier, get_modifier
from .invocation import ModifierInvocation, apply_chain, parse_invocations

__all__ = [
    "Align",
    "Alignment",
    "AspectRatio",
    "BOTTOM_CENTER",
    "BOTTOM_LEFT",
    "BOTTOM_RIGHT",
    "Baseline",
    "BoxConstraints",
    "BoxFit",
    "CENTER",
    "CENTER_LEFT",
    "CENTER_RIGHT",
    "Center",
    "Clip",
    "ClipOval",
    "ClipPath",
    "ClipRect",
    "ComponentBase",
    "ConstrainedBox",
    "CustomClipper",
    "DEFAULT_PADDING",
    "DEFAULT_THEME",
    "EdgeInsets",
    "Expanded",
    "FittedBox",
    "FractionallySizedBox",
    "IntrinsicHeight",
    "IntrinsicWidth",
    "LimitedBox",
    "MODIFIERS",
    "ModifierInvocation",
    "ModifierSpec",
    "Offset",
    "Offstage",
    "Opacity",
    "OverflowBox",
    "Padding",
    "ParamSpec",
    "SingleChildWrapper",
    "Size",
    "SizedBox",
    "SizedOverflowBox",
    "TOP_CENTER",
    "TOP_LEFT",
    "TOP_RIGHT",
    "TextBaseline",
    "TextComponent",
    "Theme",
    "ThemeData",
    "Transform",
    "apply_chain",
    "apply_modifier",
    "get_modifier",
    "parse_invocations",
    "validate_theme_data",
]
