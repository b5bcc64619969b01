from __future__ import annotations

from dataclasses import dataclass

from ui_modifiers import matrix as m4
from ui_modifiers.component_schema import ComponentBase
from ui_modifiers.geometry import CENTER, Alignment, Offset, Size
from ui_modifiers.matrix import Matrix4

from .base import SingleChildWrapper


@dataclass(frozen=True, eq=False)
class Transform(SingleChildWrapper):
    """Applies a 4x4 matrix to its child before painting.

    The matrix acts around `origin` plus the point that `alignment` resolves
    to within the child's box; with neither set it acts around the child's
    top-left corner. `transform_hit_tests=False` leaves hit testing in the
    untransformed space.
    """

    matrix: Matrix4
    origin: Offset | None = None
    alignment: Alignment | None = None
    transform_hit_tests: bool = True

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "matrix", m4.coerce_matrix4(self.matrix, "Transform matrix"))
        if self.origin is not None and not isinstance(self.origin, Offset):
            raise TypeError("Transform origin must be Offset")
        if self.alignment is not None and not isinstance(self.alignment, Alignment):
            raise TypeError("Transform alignment must be Alignment")

    @classmethod
    def rotation(
        cls,
        child: ComponentBase,
        angle: float,
        *,
        origin: Offset | None = None,
        alignment: Alignment | None = CENTER,
        transform_hit_tests: bool = True,
    ) -> Transform:
        return cls(
            child=child,
            matrix=m4.rotation_z(angle),
            origin=origin,
            alignment=alignment,
            transform_hit_tests=transform_hit_tests,
        )

    @classmethod
    def translation(cls, child: ComponentBase, offset: Offset, *, transform_hit_tests: bool = True) -> Transform:
        if not isinstance(offset, Offset):
            raise TypeError("Transform offset must be Offset")
        return cls(
            child=child,
            matrix=m4.translation(offset.dx, offset.dy),
            transform_hit_tests=transform_hit_tests,
        )

    @classmethod
    def scaling(
        cls,
        child: ComponentBase,
        scale: float,
        *,
        origin: Offset | None = None,
        alignment: Alignment | None = CENTER,
        transform_hit_tests: bool = True,
    ) -> Transform:
        return cls(
            child=child,
            matrix=m4.scaling(scale),
            origin=origin,
            alignment=alignment,
            transform_hit_tests=transform_hit_tests,
        )

    def pivot(self, size: Size) -> Offset:
        pivot = Offset()
        if self.origin is not None:
            pivot = pivot + self.origin
        if self.alignment is not None:
            pivot = pivot + self.alignment.along_size(size)
        return pivot

    def effective_matrix(self, size: Size) -> Matrix4:
        """Matrix in the child's coordinate space for a child laid out at `size`."""

        if self.origin is None and self.alignment is None:
            return self.matrix
        return m4.about_point(self.matrix, self.pivot(size))
