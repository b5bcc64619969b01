"""Declarative decorations for components.

Each function takes the target component first and returns a new wrapper
whose only child is that component:

    padded = padding(text)                  # Padding(child=text, insets=8.0 all round)
    ringed = text.clip_oval().padding()     # Padding > ClipOval > text

Functions add no validation of their own. Wrapper kinds validate their
fields on construction and those errors reach the caller unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
import inspect
import logging
import math
from typing import Any, Callable, Mapping

from .component_schema import DEFAULT_PADDING, ComponentBase
from .geometry import CENTER, Alignment, BoxConstraints, BoxFit, Clip, EdgeInsets, Offset, Size, TextBaseline
from .matrix import Matrix4
from .style.theme import ThemeData
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


LOGGER = logging.getLogger(__name__)


def padding(component: ComponentBase, insets: EdgeInsets = DEFAULT_PADDING) -> Padding:
    """Inset `component` by `insets`, 8.0 on every side unless given."""

    return Padding(child=component, insets=insets)


def center(
    component: ComponentBase,
    *,
    width_factor: float | None = None,
    height_factor: float | None = None,
) -> Center:
    return Center(child=component, width_factor=width_factor, height_factor=height_factor)


def align(component: ComponentBase, alignment: Alignment) -> Align:
    return Align(child=component, alignment=alignment)


def aspect_ratio(component: ComponentBase, ratio: float) -> AspectRatio:
    """Size `component` to `ratio` (width / height)."""

    return AspectRatio(child=component, ratio=ratio)


def baseline(component: ComponentBase, *, baseline: float, baseline_type: TextBaseline) -> Baseline:
    """Position `component` so its `baseline_type` baseline sits `baseline` px below the top."""

    return Baseline(child=component, baseline_offset=baseline, baseline_type=baseline_type)


def constrained_box(component: ComponentBase, constraints: BoxConstraints) -> ConstrainedBox:
    return ConstrainedBox(child=component, constraints=constraints)


def expanded(component: ComponentBase, flex: int) -> Expanded:
    return Expanded(child=component, flex=flex)


def fitted_box(component: ComponentBase, *, fit: BoxFit = "contain", alignment: Alignment = CENTER) -> FittedBox:
    return FittedBox(child=component, fit=fit, alignment=alignment)


def fractionally_sized_box(
    component: ComponentBase,
    *,
    alignment: Alignment = CENTER,
    width_factor: float | None = None,
    height_factor: float | None = None,
) -> FractionallySizedBox:
    return FractionallySizedBox(
        child=component,
        alignment=alignment,
        width_factor=width_factor,
        height_factor=height_factor,
    )


def intrinsic_height(component: ComponentBase) -> IntrinsicHeight:
    return IntrinsicHeight(child=component)


def intrinsic_width(
    component: ComponentBase,
    *,
    step_width: float | None = None,
    step_height: float | None = None,
) -> IntrinsicWidth:
    return IntrinsicWidth(child=component, step_width=step_width, step_height=step_height)


def limited_box(component: ComponentBase, *, max_width: float = math.inf, max_height: float = math.inf) -> LimitedBox:
    """Cap `component` only where the incoming constraints are unbounded."""

    return LimitedBox(child=component, max_width=max_width, max_height=max_height)


def offstage(component: ComponentBase, offstage: bool) -> Offstage:
    return Offstage(child=component, is_offstage=offstage)


def overflow_box(
    component: ComponentBase,
    *,
    alignment: Alignment = CENTER,
    min_width: float | None = None,
    max_width: float | None = None,
    min_height: float | None = None,
    max_height: float | None = None,
) -> OverflowBox:
    return OverflowBox(
        child=component,
        alignment=alignment,
        min_width=min_width,
        max_width=max_width,
        min_height=min_height,
        max_height=max_height,
    )


def sized_box(
    component: ComponentBase,
    *,
    alignment: Alignment = CENTER,
    width: float | None = None,
    height: float | None = None,
) -> SizedBox:
    return SizedBox(child=component, width=width, height=height, alignment=alignment)


def sized_overflow_box(component: ComponentBase, *, size: Size, alignment: Alignment = CENTER) -> SizedOverflowBox:
    return SizedOverflowBox(child=component, size=size, alignment=alignment)


def transform(
    component: ComponentBase,
    *,
    matrix: Matrix4,
    origin: Offset | None = None,
    alignment: Alignment | None = None,
    transform_hit_tests: bool = True,
) -> Transform:
    return Transform(
        child=component,
        matrix=matrix,
        origin=origin,
        alignment=alignment,
        transform_hit_tests=transform_hit_tests,
    )


def rotate(
    component: ComponentBase,
    angle: float,
    *,
    origin: Offset | None = None,
    alignment: Alignment = CENTER,
    transform_hit_tests: bool = True,
) -> Transform:
    """Rotate clockwise by `angle` radians, about the center unless told otherwise."""

    return Transform.rotation(
        component,
        angle,
        origin=origin,
        alignment=alignment,
        transform_hit_tests=transform_hit_tests,
    )


def translate(component: ComponentBase, *, offset: Offset, transform_hit_tests: bool = True) -> Transform:
    return Transform.translation(component, offset, transform_hit_tests=transform_hit_tests)


def scale(
    component: ComponentBase,
    *,
    scale: float,
    origin: Offset | None = None,
    alignment: Alignment = CENTER,
    transform_hit_tests: bool = True,
) -> Transform:
    return Transform.scaling(
        component,
        scale,
        origin=origin,
        alignment=alignment,
        transform_hit_tests=transform_hit_tests,
    )


def clip_oval(
    component: ComponentBase,
    *,
    clipper: CustomClipper | None = None,
    clip_behavior: Clip = "anti_alias",
) -> ClipOval:
    return ClipOval(child=component, clipper=clipper, clip_behavior=clip_behavior)


def clip_path(
    component: ComponentBase,
    *,
    clipper: CustomClipper | None = None,
    clip_behavior: Clip = "anti_alias",
) -> ClipPath:
    return ClipPath(child=component, clipper=clipper, clip_behavior=clip_behavior)


def clip_rect(
    component: ComponentBase,
    *,
    clipper: CustomClipper | None = None,
    clip_behavior: Clip = "hard_edge",
) -> ClipRect:
    return ClipRect(child=component, clipper=clipper, clip_behavior=clip_behavior)


def opacity(component: ComponentBase, opacity: float) -> Opacity:
    return Opacity(child=component, alpha=opacity)


def theme(component: ComponentBase, *, data: ThemeData, is_top_level: bool = False) -> Theme:
    return Theme(child=component, data=data, is_top_level=is_top_level)


@dataclass(frozen=True)
class ParamSpec:
    name: str
    required: bool
    default: object = None


@dataclass(frozen=True)
class ModifierSpec:
    name: str
    function: Callable[..., SingleChildWrapper]
    wrapper_type: type[SingleChildWrapper]
    params: tuple[ParamSpec, ...]

    def defaults(self) -> dict[str, object]:
        return {param.name: param.default for param in self.params if not param.required}

    def required_params(self) -> tuple[str, ...]:
        return tuple(param.name for param in self.params if param.required)


def _spec(function: Callable[..., SingleChildWrapper], wrapper_type: type[SingleChildWrapper]) -> ModifierSpec:
    params = []
    # First parameter is the target component.
    for param in list(inspect.signature(function).parameters.values())[1:]:
        required = param.default is inspect.Parameter.empty
        params.append(
            ParamSpec(
                name=param.name,
                required=required,
                default=None if required else param.default,
            )
        )
    return ModifierSpec(name=function.__name__, function=function, wrapper_type=wrapper_type, params=tuple(params))


MODIFIERS: Mapping[str, ModifierSpec] = {
    spec.name: spec
    for spec in (
        _spec(padding, Padding),
        _spec(center, Center),
        _spec(align, Align),
        _spec(aspect_ratio, AspectRatio),
        _spec(baseline, Baseline),
        _spec(constrained_box, ConstrainedBox),
        _spec(expanded, Expanded),
        _spec(fitted_box, FittedBox),
        _spec(fractionally_sized_box, FractionallySizedBox),
        _spec(intrinsic_height, IntrinsicHeight),
        _spec(intrinsic_width, IntrinsicWidth),
        _spec(limited_box, LimitedBox),
        _spec(offstage, Offstage),
        _spec(overflow_box, OverflowBox),
        _spec(sized_box, SizedBox),
        _spec(sized_overflow_box, SizedOverflowBox),
        _spec(transform, Transform),
        _spec(rotate, Transform),
        _spec(translate, Transform),
        _spec(scale, Transform),
        _spec(clip_oval, ClipOval),
        _spec(clip_path, ClipPath),
        _spec(clip_rect, ClipRect),
        _spec(opacity, Opacity),
        _spec(theme, Theme),
    )
}


def get_modifier(name: str) -> ModifierSpec:
    try:
        return MODIFIERS[name]
    except KeyError:
        raise ValueError(f"Unknown modifier: {name}") from None


def apply_modifier(name: str, component: ComponentBase, **params: Any) -> SingleChildWrapper:
    """Look up `name` in `MODIFIERS` and apply it to `component`.

    Every parameter is passed by keyword.
    """

    spec = get_modifier(name)
    LOGGER.debug("applying modifier %s to %s with params=%s", name, type(component).__name__, sorted(params))
    return spec.function(component, **params)
