from __future__ import annotations

from dataclasses import dataclass, field
import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from .component_schema import ComponentBase
from .modifiers import apply_modifier, get_modifier


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModifierInvocation:
    """A modifier name plus its parameters, detached from any target component."""

    name: str
    params: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("modifier name must be non-empty")
        if not isinstance(self.params, Mapping):
            raise TypeError("modifier params must be a mapping")
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
        spec = get_modifier(self.name)
        missing = [name for name in spec.required_params() if name not in self.params]
        if missing:
            raise ValueError(f"modifier `{self.name}` missing required params: {', '.join(missing)}")
        known = {param.name for param in spec.params}
        unknown = sorted(set(self.params) - known)
        if unknown:
            raise ValueError(f"modifier `{self.name}` got unknown params: {', '.join(unknown)}")

    def __hash__(self) -> int:
        # Raises TypeError when a parameter value is itself unhashable.
        return hash((self.name, tuple(sorted(self.params.items()))))

    def apply(self, component: ComponentBase) -> ComponentBase:
        return apply_modifier(self.name, component, **self.params)

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "params": dict(self.params)}

    @staticmethod
    def from_dict(payload: Mapping[str, object]) -> ModifierInvocation:
        raw = _expect_mapping(payload, field_name="modifier")
        if "name" not in raw:
            raise TypeError("modifier.name is required")
        params = _expect_mapping(raw.get("params", {}), field_name="modifier.params")
        return ModifierInvocation(name=str(raw["name"]), params={str(k): v for k, v in params.items()})


def parse_invocations(payload: object) -> tuple[ModifierInvocation, ...]:
    """Parse a list of `{"name": ..., "params": {...}}` mappings, innermost first."""

    if not isinstance(payload, (list, tuple)):
        raise TypeError("modifier chain must be a list")
    return tuple(ModifierInvocation.from_dict(item) for item in payload)


def apply_chain(component: ComponentBase, invocations: Iterable[ModifierInvocation]) -> ComponentBase:
    """Apply `invocations` in order; the last one becomes the outermost wrapper."""

    out = component
    depth = 0
    for invocation in invocations:
        out = invocation.apply(out)
        depth += 1
    LOGGER.debug("applied modifier chain of depth %d to %s", depth, type(component).__name__)
    return out


def _expect_mapping(raw: object, *, field_name: str) -> Mapping[str, object]:
    if not isinstance(raw, Mapping):
        raise TypeError(f"{field_name} must be an object")
    return raw
