from __future__ import annotations

from dataclasses import dataclass

from ui_modifiers.component_schema import ComponentBase


@dataclass(frozen=True, eq=False)
class TextComponent(ComponentBase):
    """Leaf text node.

    - `font_size_px=None` inherits the size from the nearest `Theme`.
    - Measurement and drawing belong to the rendering backend.
    """

    text: str = ""
    font_size_px: float | None = None
    color_hex: str | None = None
    max_width_px: float | None = None
    component_id: str | None = None

    def __post_init__(self) -> None:
        if self.font_size_px is not None and self.font_size_px <= 0:
            raise ValueError("TextComponent font_size_px must be > 0")
        if self.max_width_px is not None and self.max_width_px <= 0:
            raise ValueError("TextComponent max_width_px must be > 0")
