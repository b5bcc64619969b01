from __future__ import annotations

from dataclasses import dataclass

from ui_modifiers.style.theme import ThemeData

from .base import SingleChildWrapper


@dataclass(frozen=True, eq=False)
class Theme(SingleChildWrapper):
    """Scopes `data` to the subtree below `child`.

    `is_top_level` marks the application-wide theme installed at the root.
    """

    data: ThemeData
    is_top_level: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.data, ThemeData):
            raise TypeError("Theme data must be ThemeData")
