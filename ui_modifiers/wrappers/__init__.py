"""Single-child wrapper kinds produced by the modifiers."""

from .base import SingleChildWrapper
from .clip import ClipOval, ClipPath, ClipRect, CustomClipper
from .layout import (
    Align,
    AspectRatio,
    Baseline,
    Center,
    ConstrainedBox,
    Expanded,
    FittedBox,
    FractionallySizedBox,
    IntrinsicHeight,
    IntrinsicWidth,
    LimitedBox,
    Offstage,
    OverflowBox,
    Padding,
    SizedBox,
    SizedOverflowBox,
)
from .paint import Opacity
from .theme import Theme
from .transform import Transform

__all__ = [
    "Align",
    "AspectRatio",
    "Baseline",
    "Center",
    "ClipOval",
    "ClipPath",
    "ClipRect",
    "ConstrainedBox",
    "CustomClipper",
    "Expanded",
    "FittedBox",
    "FractionallySizedBox",
    "IntrinsicHeight",
    "IntrinsicWidth",
    "LimitedBox",
    "Offstage",
    "Opacity",
    "OverflowBox",
    "Padding",
    "SingleChildWrapper",
    "SizedBox",
    "SizedOverflowBox",
    "Theme",
    "Transform",
]
