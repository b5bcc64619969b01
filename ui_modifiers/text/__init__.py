"""Text leaf components."""

from .component import TextComponent

__all__ = ["TextComponent"]
