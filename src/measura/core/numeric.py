"""
measura.core.numeric
====================

The arithmetic contract a quantity value must satisfy, plus the helpers the
algebra uses so it can be written once for every value type.

`int`, `float` and `fractions.Fraction` satisfy the contract natively. `Vector`
is a reference implementation of a value that cannot absorb a bare scalar
offset (adding ``273.15`` to a displacement has no meaning).
"""

from __future__ import annotations

import math
import numbers
from fractions import Fraction
from typing import Any, Iterable, Iterator, Protocol, TypeVar, runtime_checkable

__all__ = [
    "EPSILON",
    "Numeric",
    "Vector",
    "coerce_scalar",
    "is_zero",
    "magnitude",
    "scale",
    "shift",
    "sqrt",
    "supports_scalar_addition",
    "unscale",
    "unshift",
]

# Offsets closer to zero than this are treated as absent.
EPSILON = 1e-12

T = TypeVar("T", bound="Numeric")


@runtime_checkable
class Numeric(Protocol):
    """Arithmetic capability required of a quantity value."""

    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __truediv__(self, other: Any) -> Any: ...
    def __neg__(self) -> Any: ...
    def __pow__(self, other: Any) -> Any: ...


def supports_scalar_addition(value: Any) -> bool:
    """Return True if a bare real number can be added to ``value``."""
    if isinstance(value, numbers.Number):
        return True
    return bool(getattr(value, "scalar_addable", False))


def coerce_scalar(value: Any, scalar: float | int | Fraction) -> Any:
    """
    Return ``scalar`` in a form that keeps ``value``'s arithmetic exact.

    Fractions stay exact by reading a float factor through its decimal repr
    (0.3048 -> 381/1250 rather than the binary expansion of the float). A
    repeating ratio has no exact decimal repr, so units such as km/h declare
    a Fraction multiplier (5/18) instead. Other values get Fraction factors
    as floats, so ints and vectors do not turn into Fractions.
    """
    if isinstance(value, Fraction):
        if isinstance(scalar, Fraction):
            return scalar
        if isinstance(scalar, int):
            return Fraction(scalar)
        return Fraction(repr(float(scalar)))
    if isinstance(scalar, Fraction):
        return float(scalar)
    return scalar


def scale(value: T, factor: float | int | Fraction) -> T:
    if factor == 1:
        return value
    return value * coerce_scalar(value, factor)


def unscale(value: T, factor: float | int | Fraction) -> T:
    if factor == 1:
        return value
    return value / coerce_scalar(value, factor)


def shift(value: T, offset: float | int | Fraction) -> T:
    if offset == 0:
        return value
    return value + coerce_scalar(value, offset)


def unshift(value: T, offset: float | int | Fraction) -> T:
    if offset == 0:
        return value
    return value - coerce_scalar(value, offset)


def magnitude(value: Any) -> float:
    """Absolute size of ``value`` as a float (Euclidean norm for vectors)."""
    return float(abs(value))


def is_zero(value: float | int | Fraction, tol: float = EPSILON) -> bool:
    return abs(value) <= tol


def sqrt(value: Any) -> Any:
    """Square root that defers to the value's own ``sqrt`` when it has one."""
    own = getattr(value, "sqrt", None)
    if callable(own):
        return own()
    if isinstance(value, numbers.Real):
        return math.sqrt(value)
    return value ** 0.5


class Vector:
    """
    Immutable n-dimensional vector value.

    Supports element-wise addition/subtraction with vectors of the same size,
    scaling by real numbers, negation and element-wise integer powers. Adding a
    bare scalar is rejected, which is what `supports_scalar_addition` reports.
    """

    __slots__ = ("_components",)

    scalar_addable = False

    def __init__(self, *components: float | int | Fraction) -> None:
        if len(components) == 1 and isinstance(components[0], Iterable):
            components = tuple(components[0])  # type: ignore[arg-type]
        if not components:
            raise ValueError("Vector needs at least one component.")
        for c in components:
            if not isinstance(c, numbers.Real):
                raise TypeError(f"Vector components must be real numbers, got {type(c).__name__}")
        self._components = tuple(components)

    @property
    def components(self) -> tuple:
        return self._components

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator:
        return iter(self._components)

    def __getitem__(self, index: int) -> Any:
        return self._components[index]

    def _check_same_size(self, other: "Vector") -> None:
        if len(other) != len(self):
            raise ValueError(
                f"Vector size mismatch: {len(self)} and {len(other)}"
            )

    def __add__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        return Vector(a + b for a, b in zip(self, other))

    def __sub__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        return Vector(a - b for a, b in zip(self, other))

    def __mul__(self, other: object) -> "Vector":
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Vector(a * other for a in self)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Vector":
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Vector(a / other for a in self)

    def __neg__(self) -> "Vector":
        return Vector(-a for a in self)

    def __pow__(self, n: object) -> "Vector":
        if not isinstance(n, numbers.Real):
            return NotImplemented
        return Vector(a ** n for a in self)

    def __abs__(self) -> float:
        return math.hypot(*(float(a) for a in self))

    def sqrt(self) -> "Vector":
        return Vector(math.sqrt(a) for a in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._components == other._components

    __hash__ = None  # type: ignore[assignment]

    def isclose(self, other: "Vector", rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        if len(other) != len(self):
            return False
        return all(
            math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol) for a, b in zip(self, other)
        )

    def __repr__(self) -> str:
        return f"Vector({', '.join(f'{c:.15g}' if isinstance(c, float) else str(c) for c in self)})"
