from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Literal, get_args


BoxFit = Literal["fill", "contain", "cover", "fit_width", "fit_height", "none", "scale_down"]
Clip = Literal["none", "hard_edge", "anti_alias", "anti_alias_with_save_layer"]
TextBaseline = Literal["alphabetic", "ideographic"]

BOX_FITS: tuple[str, ...] = get_args(BoxFit)
CLIP_BEHAVIORS: tuple[str, ...] = get_args(Clip)
TEXT_BASELINES: tuple[str, ...] = get_args(TextBaseline)


@dataclass(frozen=True)
class Offset:
    dx: float = 0.0
    dy: float = 0.0

    def __add__(self, other: Offset) -> Offset:
        return Offset(self.dx + other.dx, self.dy + other.dy)


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    def __post_init__(self) -> None:
        if not (self.width >= 0 and self.height >= 0):
            raise ValueError("size width/height must be >= 0")


@dataclass(frozen=True)
class EdgeInsets:
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def all(cls, value: float) -> EdgeInsets:
        return cls(left=value, top=value, right=value, bottom=value)

    @classmethod
    def symmetric(cls, *, horizontal: float = 0.0, vertical: float = 0.0) -> EdgeInsets:
        return cls(left=horizontal, top=vertical, right=horizontal, bottom=vertical)

    @property
    def is_non_negative(self) -> bool:
        return self.left >= 0 and self.top >= 0 and self.right >= 0 and self.bottom >= 0

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom


@dataclass(frozen=True)
class Alignment:
    """Point within a rectangle; (-1, -1) is top-left, (0, 0) the center, (1, 1) bottom-right."""

    x: float = 0.0
    y: float = 0.0

    def along_size(self, size: Size) -> Offset:
        """Resolve this alignment to an offset from the top-left of `size`."""

        return Offset((self.x + 1.0) * size.width / 2.0, (self.y + 1.0) * size.height / 2.0)


TOP_LEFT = Alignment(-1.0, -1.0)
TOP_CENTER = Alignment(0.0, -1.0)
TOP_RIGHT = Alignment(1.0, -1.0)
CENTER_LEFT = Alignment(-1.0, 0.0)
CENTER = Alignment(0.0, 0.0)
CENTER_RIGHT = Alignment(1.0, 0.0)
BOTTOM_LEFT = Alignment(-1.0, 1.0)
BOTTOM_CENTER = Alignment(0.0, 1.0)
BOTTOM_RIGHT = Alignment(1.0, 1.0)


@dataclass(frozen=True)
class BoxConstraints:
    min_width: float = 0.0
    max_width: float = math.inf
    min_height: float = 0.0
    max_height: float = math.inf

    def __post_init__(self) -> None:
        if self.min_width < 0 or self.min_height < 0:
            raise ValueError("constraint minimums must be >= 0")
        if self.min_width > self.max_width or self.min_height > self.max_height:
            raise ValueError("constraint minimums must not exceed maximums")
        if math.isinf(self.min_width) or math.isinf(self.min_height):
            raise ValueError("constraint minimums must be finite")

    @classmethod
    def tight(cls, size: Size) -> BoxConstraints:
        return cls(min_width=size.width, max_width=size.width, min_height=size.height, max_height=size.height)

    @classmethod
    def loose(cls, size: Size) -> BoxConstraints:
        return cls(max_width=size.width, max_height=size.height)

    @property
    def is_tight(self) -> bool:
        return self.min_width >= self.max_width and self.min_height >= self.max_height


def validate_literal(value: object, allowed: tuple[str, ...], *, field_name: str) -> None:
    if value not in allowed:
        raise ValueError(f"{field_name} must be one of {', '.join(allowed)}; got {value!r}")


def validate_optional_non_negative(value: float | None, *, field_name: str) -> None:
    if value is not None and not value >= 0:
        raise ValueError(f"{field_name} must be >= 0")
