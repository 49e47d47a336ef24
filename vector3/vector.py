"""Three-component vector over a numpy element type."""
from __future__ import annotations

import numbers
from typing import Any, Iterator

import numpy as np
from numpy.typing import DTypeLike

DEFAULT_DTYPE = np.float64


def _format_element(value: np.generic) -> str:
    if isinstance(value, np.floating):
        return format(float(value), "g")
    return str(value)


class Vector3:
    """Fixed-size (x, y, z) value type backed by a contiguous ndarray.

    The element type is a numpy dtype. Results of in-place operators are
    stored back into that dtype with unsafe casting, so an integer vector
    stays an integer vector (``*= 2.5`` and ``/= 2`` truncate).
    """

    __slots__ = ("_values",)

    # Make numpy scalars on the left defer to the reflected operators.
    __array_ufunc__ = None

    def __init__(self, *components: Any, dtype: DTypeLike = None) -> None:
        target = DEFAULT_DTYPE if dtype is None else dtype
        if not components:
            values = np.zeros(3, dtype=target)
        elif len(components) == 3:
            # Out-of-range integers wrap on conversion.
            values = np.array(components).astype(target)
        elif len(components) == 1:
            (source,) = components
            if isinstance(source, Vector3):
                values = source._values.astype(source.dtype if dtype is None else dtype)
            else:
                values = np.array(list(source)).astype(target)
        else:
            raise TypeError(f"Vector3 takes 0, 1 or 3 components, got {len(components)}")
        if values.shape != (3,):
            raise ValueError(f"Vector3 requires exactly 3 elements, got shape {values.shape}")
        self._values = values

    @classmethod
    def _wrap(cls, values: np.ndarray) -> Vector3:
        vector = cls.__new__(cls)
        vector._values = values
        return vector

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    def astype(self, dtype: DTypeLike) -> Vector3:
        """Element-wise conversion to another element type."""
        return type(self)(self, dtype=dtype)

    def copy(self) -> Vector3:
        return self._wrap(self._values.copy())

    def __copy__(self) -> Vector3:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Vector3:
        return self.copy()

    # Element access

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> np.generic:
        return self._values[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._values[index] = value

    @property
    def x(self) -> np.generic:
        return self._values[0]

    @x.setter
    def x(self, value: Any) -> None:
        self._values[0] = value

    @property
    def y(self) -> np.generic:
        return self._values[1]

    @y.setter
    def y(self, value: Any) -> None:
        self._values[1] = value

    @property
    def z(self) -> np.generic:
        return self._values[2]

    @z.setter
    def z(self, value: Any) -> None:
        self._values[2] = value

    def __iter__(self) -> Iterator[np.generic]:
        return iter(self._values)

    def iter_mutable(self) -> np.nditer:
        """Iterate over writable 0-d views; assign with ``elem[...] = value``."""
        return np.nditer(self._values, op_flags=[["readwrite"]])

    def to_array(self) -> np.ndarray:
        return self._values.copy()

    def __array__(self, dtype: DTypeLike = None, copy: bool | None = None) -> np.ndarray:
        """Read-only view of the elements, or a fresh array when copying or converting."""
        if copy or dtype is not None:
            return self._values.astype(self.dtype if dtype is None else dtype)
        values = self._values.view()
        values.flags.writeable = False
        return values

    # In-place arithmetic

    def _apply(self, ufunc: np.ufunc, other: Any) -> Vector3:
        if isinstance(other, Vector3):
            other = other._values
        elif isinstance(other, int):
            # Out-of-range Python ints wrap on store.
            other = np.asarray(other)
        elif not isinstance(other, numbers.Number):
            return NotImplemented
        ufunc(self._values, other, out=self._values, casting="unsafe")
        return self

    def __iadd__(self, other: Vector3 | numbers.Number) -> Vector3:
        return self._apply(np.add, other)

    def __isub__(self, other: Vector3 | numbers.Number) -> Vector3:
        return self._apply(np.subtract, other)

    def __imul__(self, other: Vector3 | numbers.Number) -> Vector3:
        return self._apply(np.multiply, other)

    def __itruediv__(self, other: Vector3 | numbers.Number) -> Vector3:
        return self._apply(np.divide, other)

    # Free arithmetic, always on a copy of the vector operand

    def __add__(self, other: Vector3 | numbers.Number) -> Vector3:
        return self.copy()._apply(np.add, other)

    def __sub__(self, other: Vector3 | numbers.Number) -> Vector3:
        return self.copy()._apply(np.subtract, other)

    def __mul__(self, other: Vector3 | numbers.Number) -> Vector3:
        return self.copy()._apply(np.multiply, other)

    def __truediv__(self, other: Vector3 | numbers.Number) -> Vector3:
        return self.copy()._apply(np.divide, other)

    def __radd__(self, other: numbers.Number) -> Vector3:
        return self.copy()._apply(np.add, other)

    def __rsub__(self, other: numbers.Number) -> Vector3:
        # Commuted form: s - v is computed as v - s, not s - v[i].
        return self.copy()._apply(np.subtract, other)

    def __rmul__(self, other: numbers.Number) -> Vector3:
        return self.copy()._apply(np.multiply, other)

    def __rtruediv__(self, other: numbers.Number) -> Vector3:
        # Commuted form: s / v is computed as v * (1/s), not s / v[i].
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self.copy()._apply(np.multiply, np.divide(1, other))

    def __neg__(self) -> Vector3:
        return self._wrap(np.negative(self._values))

    # Geometry

    def dot(self, rhs: Vector3) -> np.generic:
        return self.dtype.type(np.dot(self._values, rhs._values))

    def cross(self, rhs: Vector3) -> Vector3:
        return self._wrap(np.cross(self._values, rhs._values).astype(self.dtype, copy=False))

    def norm(self) -> np.generic:
        """Euclidean length, converted to the element type."""
        return self.dtype.type(np.sqrt(self.dot(self)))

    def normalize(self) -> None:
        """Scale to unit length in place. A zero vector becomes non-finite."""
        with np.errstate(divide="ignore", invalid="ignore"):
            self /= self.norm()

    def normalize_safely(self) -> None:
        """Scale to unit length in place unless the norm is exactly zero."""
        norm = self.norm()
        if norm != 0:
            self /= norm

    def isclose(self, other: Any, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        return bool(np.allclose(self._values, np.asarray(other), rtol=rtol, atol=atol))

    # Formatting

    def __str__(self) -> str:
        return ",".join(_format_element(value) for value in self._values)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return ",".join(format(value, format_spec) for value in self._values)

    def __repr__(self) -> str:
        items = ", ".join(repr(value.item()) for value in self._values)
        return f"Vector3({items}, dtype={self.dtype.name})"
