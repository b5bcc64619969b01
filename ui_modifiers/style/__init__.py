"""Theme data carried by `Theme` wrappers."""

from .theme import DEFAULT_THEME, Brightness, ThemeData, validate_theme_data

__all__ = [
    "Brightness",
    "DEFAULT_THEME",
    "ThemeData",
    "validate_theme_data",
]
