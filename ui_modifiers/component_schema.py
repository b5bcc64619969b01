from __future__ import annotations

from dataclasses import fields, is_dataclass
import math
from types import ModuleType
from typing import TYPE_CHECKING, Any

import torch

from .geometry import CENTER, Alignment, BoxConstraints, BoxFit, Clip, EdgeInsets, Offset, Size, TextBaseline
from .matrix import Matrix4

if TYPE_CHECKING:
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
        SizedBox,
        SizedOverflowBox,
        Theme,
        Transform,
    )


DEFAULT_PADDING = EdgeInsets.all(8.0)


def _modifiers() -> ModuleType:
    # modifiers imports the wrapper kinds, which subclass ComponentBase.
    from . import modifiers

    return modifiers


class ComponentBase:
    """Opaque node in a visual tree.

    Every component, leaf or wrapper, carries the modifier suffixes so that
    decorations chain left to right: `text.clip_oval().padding()` wraps the
    clip in the padding. Each suffix forwards to the free function of the
    same name in `ui_modifiers.modifiers`.
    """

    def children(self) -> tuple[ComponentBase, ...]:
        return ()

    def to_dict(self) -> dict[str, object]:
        out: dict[str, object] = {"type": type(self).__name__}
        if is_dataclass(self):
            for f in fields(self):
                out[f.name] = _encode(getattr(self, f.name))
        return out

    def padding(self, insets: EdgeInsets = DEFAULT_PADDING) -> Padding:
        return _modifiers().padding(self, insets)

    def center(self, *, width_factor: float | None = None, height_factor: float | None = None) -> Center:
        return _modifiers().center(self, width_factor=width_factor, height_factor=height_factor)

    def align(self, alignment: Alignment) -> Align:
        return _modifiers().align(self, alignment)

    def aspect_ratio(self, ratio: float) -> AspectRatio:
        return _modifiers().aspect_ratio(self, ratio)

    def baseline(self, *, baseline: float, baseline_type: TextBaseline) -> Baseline:
        return _modifiers().baseline(self, baseline=baseline, baseline_type=baseline_type)

    def constrained_box(self, constraints: BoxConstraints) -> ConstrainedBox:
        return _modifiers().constrained_box(self, constraints)

    def expanded(self, flex: int) -> Expanded:
        return _modifiers().expanded(self, flex)

    def fitted_box(self, *, fit: BoxFit = "contain", alignment: Alignment = CENTER) -> FittedBox:
        return _modifiers().fitted_box(self, fit=fit, alignment=alignment)

    def fractionally_sized_box(
        self,
        *,
        alignment: Alignment = CENTER,
        width_factor: float | None = None,
        height_factor: float | None = None,
    ) -> FractionallySizedBox:
        return _modifiers().fractionally_sized_box(
            self,
            alignment=alignment,
            width_factor=width_factor,
            height_factor=height_factor,
        )

    def intrinsic_height(self) -> IntrinsicHeight:
        return _modifiers().intrinsic_height(self)

    def intrinsic_width(self, *, step_width: float | None = None, step_height: float | None = None) -> IntrinsicWidth:
        return _modifiers().intrinsic_width(self, step_width=step_width, step_height=step_height)

    def limited_box(self, *, max_width: float = math.inf, max_height: float = math.inf) -> LimitedBox:
        return _modifiers().limited_box(self, max_width=max_width, max_height=max_height)

    def offstage(self, offstage: bool) -> Offstage:
        return _modifiers().offstage(self, offstage)

    def overflow_box(
        self,
        *,
        alignment: Alignment = CENTER,
        min_width: float | None = None,
        max_width: float | None = None,
        min_height: float | None = None,
        max_height: float | None = None,
    ) -> OverflowBox:
        return _modifiers().overflow_box(
            self,
            alignment=alignment,
            min_width=min_width,
            max_width=max_width,
            min_height=min_height,
            max_height=max_height,
        )

    def sized_box(
        self,
        *,
        alignment: Alignment = CENTER,
        width: float | None = None,
        height: float | None = None,
    ) -> SizedBox:
        return _modifiers().sized_box(self, alignment=alignment, width=width, height=height)

    def sized_overflow_box(self, *, size: Size, alignment: Alignment = CENTER) -> SizedOverflowBox:
        return _modifiers().sized_overflow_box(self, size=size, alignment=alignment)

    def transform(
        self,
        *,
        matrix: Matrix4,
        origin: Offset | None = None,
        alignment: Alignment | None = None,
        transform_hit_tests: bool = True,
    ) -> Transform:
        return _modifiers().transform(
            self,
            matrix=matrix,
            origin=origin,
            alignment=alignment,
            transform_hit_tests=transform_hit_tests,
        )

    def rotate(
        self,
        angle: float,
        *,
        origin: Offset | None = None,
        alignment: Alignment = CENTER,
        transform_hit_tests: bool = True,
    ) -> Transform:
        return _modifiers().rotate(
            self,
            angle,
            origin=origin,
            alignment=alignment,
            transform_hit_tests=transform_hit_tests,
        )

    def translate(self, *, offset: Offset, transform_hit_tests: bool = True) -> Transform:
        return _modifiers().translate(self, offset=offset, transform_hit_tests=transform_hit_tests)

    def scale(
        self,
        *,
        scale: float,
        origin: Offset | None = None,
        alignment: Alignment = CENTER,
        transform_hit_tests: bool = True,
    ) -> Transform:
        return _modifiers().scale(
            self,
            scale=scale,
            origin=origin,
            alignment=alignment,
            transform_hit_tests=transform_hit_tests,
        )

    def clip_oval(self, *, clipper: CustomClipper | None = None, clip_behavior: Clip = "anti_alias") -> ClipOval:
        return _modifiers().clip_oval(self, clipper=clipper, clip_behavior=clip_behavior)

    def clip_path(self, *, clipper: CustomClipper | None = None, clip_behavior: Clip = "anti_alias") -> ClipPath:
        return _modifiers().clip_path(self, clipper=clipper, clip_behavior=clip_behavior)

    def clip_rect(self, *, clipper: CustomClipper | None = None, clip_behavior: Clip = "hard_edge") -> ClipRect:
        return _modifiers().clip_rect(self, clipper=clipper, clip_behavior=clip_behavior)

    def opacity(self, opacity: float) -> Opacity:
        return _modifiers().opacity(self, opacity)

    def theme(self, *, data: ThemeData, is_top_level: bool = False) -> Theme:
        return _modifiers().theme(self, data=data, is_top_level=is_top_level)


def _encode(value: Any) -> object:
    if isinstance(value, ComponentBase):
        return value.to_dict()
    if torch.is_tensor(value):
        return value.tolist()
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _encode(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    return value
