from __future__ import annotations

from dataclasses import dataclass, field
import math

from ui_modifiers.geometry import (
    BOX_FITS,
    CENTER,
    TEXT_BASELINES,
    Alignment,
    BoxConstraints,
    BoxFit,
    EdgeInsets,
    Size,
    TextBaseline,
    validate_literal,
    validate_optional_non_negative,
)

from .base import SingleChildWrapper


@dataclass(frozen=True, eq=False)
class Padding(SingleChildWrapper):
    insets: EdgeInsets

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.insets, EdgeInsets):
            raise TypeError("Padding insets must be EdgeInsets")
        if not self.insets.is_non_negative:
            raise ValueError("Padding insets must be >= 0")


@dataclass(frozen=True, eq=False)
class Align(SingleChildWrapper):
    alignment: Alignment
    width_factor: float | None = None
    height_factor: float | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.alignment, Alignment):
            raise TypeError(f"{type(self).__name__} alignment must be Alignment")
        validate_optional_non_negative(self.width_factor, field_name="width_factor")
        validate_optional_non_negative(self.height_factor, field_name="height_factor")


@dataclass(frozen=True, eq=False)
class Center(Align):
    """`Align` pinned to the center."""

    alignment: Alignment = field(default=CENTER, init=False)


@dataclass(frozen=True, eq=False)
class AspectRatio(SingleChildWrapper):
    ratio: float

    def __post_init__(self) -> None:
        super().__post_init__()
        if not math.isfinite(self.ratio) or self.ratio <= 0:
            raise ValueError("AspectRatio ratio must be finite and > 0")


@dataclass(frozen=True, eq=False)
class Baseline(SingleChildWrapper):
    baseline_offset: float
    baseline_type: TextBaseline

    def __post_init__(self) -> None:
        super().__post_init__()
        validate_literal(self.baseline_type, TEXT_BASELINES, field_name="baseline_type")


@dataclass(frozen=True, eq=False)
class ConstrainedBox(SingleChildWrapper):
    constraints: BoxConstraints

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.constraints, BoxConstraints):
            raise TypeError("ConstrainedBox constraints must be BoxConstraints")


@dataclass(frozen=True, eq=False)
class Expanded(SingleChildWrapper):
    """Flex slot; only meaningful as a direct child of a row or column."""

    flex: int

    def __post_init__(self) -> None:
        super().__post_init__()
        if isinstance(self.flex, bool) or not isinstance(self.flex, int):
            raise TypeError("Expanded flex must be an int")
        if self.flex < 0:
            raise ValueError("Expanded flex must be >= 0")


@dataclass(frozen=True, eq=False)
class FittedBox(SingleChildWrapper):
    fit: BoxFit = "contain"
    alignment: Alignment = CENTER

    def __post_init__(self) -> None:
        super().__post_init__()
        validate_literal(self.fit, BOX_FITS, field_name="fit")


@dataclass(frozen=True, eq=False)
class FractionallySizedBox(SingleChildWrapper):
    alignment: Alignment = CENTER
    width_factor: float | None = None
    height_factor: float | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        validate_optional_non_negative(self.width_factor, field_name="width_factor")
        validate_optional_non_negative(self.height_factor, field_name="height_factor")


@dataclass(frozen=True, eq=False)
class IntrinsicHeight(SingleChildWrapper):
    pass


@dataclass(frozen=True, eq=False)
class IntrinsicWidth(SingleChildWrapper):
    step_width: float | None = None
    step_height: float | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.step_width is not None and not self.step_width > 0:
            raise ValueError("IntrinsicWidth step_width must be > 0")
        if self.step_height is not None and not self.step_height > 0:
            raise ValueError("IntrinsicWidth step_height must be > 0")


@dataclass(frozen=True, eq=False)
class LimitedBox(SingleChildWrapper):
    max_width: float = math.inf
    max_height: float = math.inf

    def __post_init__(self) -> None:
        super().__post_init__()
        if not (self.max_width >= 0 and self.max_height >= 0):
            raise ValueError("LimitedBox max_width/max_height must be >= 0")


@dataclass(frozen=True, eq=False)
class Offstage(SingleChildWrapper):
    is_offstage: bool


@dataclass(frozen=True, eq=False)
class OverflowBox(SingleChildWrapper):
    alignment: Alignment = CENTER
    min_width: float | None = None
    max_width: float | None = None
    min_height: float | None = None
    max_height: float | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        for name in ("min_width", "max_width", "min_height", "max_height"):
            validate_optional_non_negative(getattr(self, name), field_name=name)


@dataclass(frozen=True, eq=False)
class SizedBox(SingleChildWrapper):
    width: float | None = None
    height: float | None = None
    alignment: Alignment = CENTER

    def __post_init__(self) -> None:
        super().__post_init__()
        validate_optional_non_negative(self.width, field_name="width")
        validate_optional_non_negative(self.height, field_name="height")


@dataclass(frozen=True, eq=False)
class SizedOverflowBox(SingleChildWrapper):
    size: Size
    alignment: Alignment = CENTER

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.size, Size):
            raise TypeError("SizedOverflowBox size must be Size")
