from __future__ import annotations

import math
from typing import Sequence, TypeAlias

import torch

from .geometry import Offset


Matrix4: TypeAlias = torch.Tensor

MATRIX_DTYPE = torch.float64


def identity() -> Matrix4:
    return torch.eye(4, dtype=MATRIX_DTYPE)


def translation(dx: float, dy: float, dz: float = 0.0) -> Matrix4:
    out = identity()
    out[0, 3] = dx
    out[1, 3] = dy
    out[2, 3] = dz
    return out


def scaling(sx: float, sy: float | None = None, sz: float = 1.0) -> Matrix4:
    """Diagonal scale; `sy` defaults to `sx` for uniform scaling in the plane."""

    return torch.diag(torch.tensor([sx, sx if sy is None else sy, sz, 1.0], dtype=MATRIX_DTYPE))


def rotation_z(radians: float) -> Matrix4:
    c = math.cos(radians)
    s = math.sin(radians)
    out = identity()
    out[0, 0] = c
    out[0, 1] = -s
    out[1, 0] = s
    out[1, 1] = c
    return out


def compose(*matrices: Matrix4) -> Matrix4:
    """Left-to-right product; the rightmost matrix is applied to points first."""

    out = identity()
    for matrix in matrices:
        out = torch.matmul(out, coerce_matrix4(matrix))
    return out


def about_point(matrix: Matrix4, point: Offset) -> Matrix4:
    """Conjugate `matrix` so that it acts around `point` instead of the origin."""

    return compose(translation(point.dx, point.dy), matrix, translation(-point.dx, -point.dy))


def transform_point(matrix: Matrix4, point: Offset) -> Offset:
    vec = torch.tensor([point.dx, point.dy, 0.0, 1.0], dtype=MATRIX_DTYPE)
    out = torch.mv(coerce_matrix4(matrix), vec)
    w = float(out[3].item())
    if w == 0.0:
        raise ValueError("point maps to infinity under this matrix")
    return Offset(float(out[0].item()) / w, float(out[1].item()) / w)


def coerce_matrix4(value: torch.Tensor | Sequence[Sequence[float]], label: str = "matrix") -> Matrix4:
    raw = value if torch.is_tensor(value) else torch.as_tensor(value, dtype=MATRIX_DTYPE)
    if tuple(raw.shape) != (4, 4):
        raise ValueError(f"{label} has invalid shape: {tuple(raw.shape)} expected (4, 4)")
    if raw.dtype == torch.bool or not (raw.is_floating_point() or raw.dtype in (
        torch.int8,
        torch.int16,
        torch.int32,
        torch.int64,
        torch.uint8,
    )):
        raise ValueError(f"{label} must be a numeric tensor, got {raw.dtype}")
    # Private copy; a wrapper never shares the caller's tensor.
    out = raw.to(MATRIX_DTYPE).clone()
    if not torch.isfinite(out).all():
        raise ValueError(f"{label} must contain only finite values")
    return out
