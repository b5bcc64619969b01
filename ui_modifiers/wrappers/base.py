from __future__ import annotations

from dataclasses import dataclass

from ui_modifiers.component_schema import ComponentBase


@dataclass(frozen=True, eq=False)
class SingleChildWrapper(ComponentBase):
    """Component that applies one effect to exactly one child.

    Wrappers are immutable and compare by identity: wrapping the same child
    twice yields two distinct nodes.
    """

    child: ComponentBase

    def __post_init__(self) -> None:
        if not isinstance(self.child, ComponentBase):
            raise TypeError(f"{type(self).__name__} child must be a ComponentBase, got {type(self.child).__name__}")

    def children(self) -> tuple[ComponentBase, ...]:
        return (self.child,)
