from __future__ import annotations

from dataclasses import dataclass, fields, replace
import re
from typing import Any, Literal, Mapping, get_args

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

Brightness = Literal["light", "dark"]

_COLOR_KEYS = (
    "primary_color",
    "secondary_color",
    "background_color",
    "surface_color",
    "text_color",
    "disabled_color",
)


@dataclass(frozen=True)
class ThemeData:
    """Visual properties handed down a subtree by a `Theme` wrapper."""

    brightness: Brightness = "light"
    primary_color: str = "#2B3442"
    secondary_color: str = "#334155"
    background_color: str = "#F8FAFC"
    surface_color: str = "#FFFFFF"
    text_color: str = "#111111"
    disabled_color: str = "#9CA3AF"
    font_family: str = "System"
    font_size_px: float = 14.0

    def copy_with(self, **overrides: Any) -> ThemeData:
        """Nested theme: this theme with `overrides` validated and applied."""

        return validate_theme_data(overrides, base=self)


DEFAULT_THEME = ThemeData()


def validate_theme_data(overrides: Mapping[str, Any] | None = None, *, base: ThemeData = DEFAULT_THEME) -> ThemeData:
    """Validate `overrides` and merge them onto `base`.

    Pass the enclosing theme as `base` to derive a nested theme; unknown keys
    are rejected instead of ignored.
    """

    raw: dict[str, Any] = dict(overrides or {})
    unknown = sorted(set(raw) - {f.name for f in fields(ThemeData)})
    if unknown:
        raise ValueError(f"Unknown theme field: {', '.join(unknown)}")

    if "brightness" in raw and raw["brightness"] not in get_args(Brightness):
        raise ValueError("Field `brightness` must be `light` or `dark`")
    for key in _COLOR_KEYS:
        if key in raw and (not isinstance(raw[key], str) or not _HEX_COLOR.match(raw[key])):
            raise ValueError(f"Field `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")
    if "font_family" in raw and (not isinstance(raw["font_family"], str) or not raw["font_family"].strip()):
        raise ValueError("Field `font_family` must be a non-empty string")
    if "font_size_px" in raw:
        size = raw["font_size_px"]
        if isinstance(size, bool) or not isinstance(size, (int, float)) or not size > 0:
            raise ValueError("Field `font_size_px` must be a positive number")
        raw["font_size_px"] = float(size)

    return replace(base, **raw)
