from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ui_modifiers.geometry import CLIP_BEHAVIORS, Clip, Size, validate_literal

from .base import SingleChildWrapper


@runtime_checkable
class CustomClipper(Protocol):
    """Supplies the clip shape for a child laid out at `size`."""

    def get_clip(self, size: Size) -> object:
        ...

    def should_reclip(self, old_clipper: CustomClipper) -> bool:
        ...


@dataclass(frozen=True, eq=False)
class _ClipWrapper(SingleChildWrapper):
    clipper: CustomClipper | None = None
    clip_behavior: Clip = "anti_alias"

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.clipper is not None and not isinstance(self.clipper, CustomClipper):
            raise TypeError(f"{type(self).__name__} clipper must implement get_clip/should_reclip")
        validate_literal(self.clip_behavior, CLIP_BEHAVIORS, field_name="clip_behavior")
        if self.clip_behavior == "none":
            raise ValueError(f"{type(self).__name__} clip_behavior must not be `none`")


@dataclass(frozen=True, eq=False)
class ClipOval(_ClipWrapper):
    """Clips to the oval inscribed in the clip rect (the child's bounds by default)."""


@dataclass(frozen=True, eq=False)
class ClipPath(_ClipWrapper):
    pass


@dataclass(frozen=True, eq=False)
class ClipRect(_ClipWrapper):
    clip_behavior: Clip = "hard_edge"
