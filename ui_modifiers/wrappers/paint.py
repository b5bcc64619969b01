from __future__ import annotations

from dataclasses import dataclass

from .base import SingleChildWrapper


@dataclass(frozen=True, eq=False)
class Opacity(SingleChildWrapper):
    alpha: float

    def __post_init__(self) -> None:
        super().__post_init__()
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError("Opacity alpha must be in [0, 1]")
