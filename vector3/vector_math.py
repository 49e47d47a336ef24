"""Non-mutating helpers for working with Vector3 values."""
from __future__ import annotations

from typing import Iterable, Union

import numpy as np
from numpy.typing import DTypeLike

from .vector import Vector3

VectorLike = Union[Vector3, Iterable[float]]


def to_vector(value: VectorLike, dtype: DTypeLike = None) -> Vector3:
    """Copy a Vector3 (keeping its element type) or a 3-element iterable (float64)."""
    return Vector3(value, dtype=dtype)


def magnitude(vec: VectorLike) -> float:
    return float(to_vector(vec, dtype=np.float64).norm())


def normalize(vec: VectorLike) -> Vector3:
    """Unit vector in the direction of vec; the zero vector gives non-finite elements."""
    result = to_vector(vec)
    result.normalize()
    return result


def normalize_safely(vec: VectorLike) -> Vector3:
    """Unit vector in the direction of vec, or the zero vector unchanged."""
    result = to_vector(vec)
    result.normalize_safely()
    return result
