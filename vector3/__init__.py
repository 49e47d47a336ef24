"""Generic three-component vector type over numpy element types."""

from .vector import DEFAULT_DTYPE, Vector3
from .vector_math import magnitude, normalize, normalize_safely, to_vector

__all__ = [
    "DEFAULT_DTYPE",
    "Vector3",
    "magnitude",
    "normalize",
    "normalize_safely",
    "to_vector",
]
