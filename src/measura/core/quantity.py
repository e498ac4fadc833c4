"""
measura.core.quantity
=====================

Defines the `Quantity` class: a numeric value together with an ordered list
of `Dimension` values (units raised to integer powers, optionally prefixed).

The class supports:
- Conversion to another unit, to base units, or to another quantity's units.
- Simplification (merging same-kind dimensions, finding derived units such
  as m·s⁻¹ → speed) and readable prefix selection.
- Arithmetic: addition and subtraction of commensurable quantities (the
  right operand is converted into the left operand's units),
  multiplication and division (dimension lists are concatenated and
  re-simplified), integer powers and square roots.

Every operation returns a new `Quantity`; instances are never mutated.
"""

from __future__ import annotations

import math
import numbers
from collections import Counter
from fractions import Fraction
from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Sequence, Tuple, Union

from measura.catalog.entities import Prefix, Unit
from measura.core import numeric
from measura.core.dimension import Dimension, convert, convert_from_base, convert_to_base, resolve_catalog
from measura.core.numeric import Numeric
from measura.core.prefix_selection import tidy_prefixes
from measura.core.simplifier import simple_simplify, simplify, to_base_systems
from measura.core.utils import format_dimensions, format_value
from measura.exceptions import ConversionError, IncommensurableError

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measura.catalog.registry import Catalog

__all__ = ["Quantity"]

DimensionSpec = Union[str, Unit, Dimension, Tuple[Any, ...]]
Target = Union[str, Unit, "Quantity"]


def _signature(dimensions: Iterable[Dimension]) -> Counter:
    """Multiset of ``(definition, power)``: what two commensurable lists have in common."""
    return Counter((d.definition, d.power) for d in dimensions)


def _values_close(a: Any, b: Any) -> bool:
    if isinstance(a, (int, Fraction)) and isinstance(b, (int, Fraction)):
        return a == b
    if isinstance(a, numbers.Real) and isinstance(b, numbers.Real):
        return math.isclose(a, b, rel_tol=1e-12, abs_tol=0.0)
    own = getattr(a, "isclose", None)
    if callable(own):
        return bool(own(b, rel_tol=1e-12))
    return bool(a == b)


class Quantity:
    """
    A value measured in an ordered list of dimensions.

    Parameters
    ----------
    value
        Any value satisfying the `Numeric` contract (int, float, Fraction,
        `Vector`, ...).
    dimensions
        A unit name ("metre", "km"), a `Unit`, a `Dimension`, a
        ``(unit, power)`` / ``(unit, power, prefix)`` tuple, or a sequence of
        those. Empty for a dimensionless quantity.
    catalog : Catalog, optional
        Catalog used for lookups and options; the shared default when omitted.

    Examples
    --------
    >>> Quantity(5, "minute").convert("second")
    300 s
    >>> Quantity(3.2, "minute") + Quantity(30, "second")
    3.7 min
    """

    __slots__ = ("_value", "_dimensions", "_catalog")

    def __init__(
        self,
        value: Any,
        dimensions: Union[DimensionSpec, Sequence[DimensionSpec]] = (),
        catalog: Optional["Catalog"] = None,
    ) -> None:
        if not isinstance(value, Numeric):
            raise TypeError(f"Quantity value must be numeric, got {type(value).__name__}")
        self._catalog = resolve_catalog(catalog)
        self._value = value
        self._dimensions: Tuple[Dimension, ...] = tuple(
            self._as_dimension(spec) for spec in self._as_specs(dimensions)
        )

    @staticmethod
    def _as_specs(dimensions: Any) -> List[Any]:
        if isinstance(dimensions, (str, Unit, Dimension)):
            return [dimensions]
        if isinstance(dimensions, tuple) and len(dimensions) in (2, 3) and isinstance(dimensions[1], int):
            return [dimensions]
        return list(dimensions)

    def _as_dimension(self, spec: Any) -> Dimension:
        if isinstance(spec, Dimension):
            return spec
        if isinstance(spec, Unit):
            return Dimension(spec)
        if isinstance(spec, str):
            unit, prefix = self._catalog.resolve_prefixed_unit(spec)
            return Dimension(unit, 1, prefix)
        if isinstance(spec, (tuple, list)) and len(spec) in (2, 3):
            base = self._as_dimension(spec[0])
            prefix = self._as_prefix(spec[2]) if len(spec) == 3 else base.prefix
            return Dimension(base.unit, spec[1], prefix)
        raise TypeError(f"Cannot interpret {spec!r} as a dimension")

    def _as_prefix(self, prefix: Union[str, Prefix, None]) -> Optional[Prefix]:
        if prefix is None or isinstance(prefix, Prefix):
            return prefix
        return self._catalog.prefix(prefix)

    def _new(self, value: Any, dimensions: Iterable[Dimension]) -> "Quantity":
        return Quantity(value, tuple(dimensions), self._catalog)

    # --- accessors -----------------------------------------------------------

    @property
    def value(self) -> Any:
        return self._value

    @property
    def dimensions(self) -> Tuple[Dimension, ...]:
        return self._dimensions

    @property
    def catalog(self) -> "Catalog":
        return self._catalog

    @property
    def is_dimensionless(self) -> bool:
        return not self._dimensions

    # --- conversion ----------------------------------------------------------

    def convert(self, target: Target, prefix: Union[str, Prefix, None] = None) -> "Quantity":
        """
        Express this quantity in other units.

        Parameters
        ----------
        target
            A unit (name or `Unit`): every dimension of that unit's definition
            is converted to it. A `Quantity`: this quantity is expressed in
            the target's (merged) dimensions; its value is ignored.
        prefix
            Prefix for the target unit. A prefixed name such as "km" sets it too.

        Raises
        ------
        IncommensurableError
            If nothing in this quantity can be expressed in ``target``.
        """
        if isinstance(target, Quantity):
            dims, _ = simple_simplify(1, target.dimensions, self._catalog)
            return self._new(self._express_in(self, dims, "convert"), dims)

        if isinstance(target, str):
            unit, parsed = self._catalog.resolve_prefixed_unit(target)
            prefix = parsed if prefix is None else prefix
        elif isinstance(target, Unit):
            unit = target
        else:
            raise TypeError(f"Cannot convert to {type(target).__name__}")
        prefix = self._as_prefix(prefix)

        value = self._value
        dims: List[Dimension] = []
        matched = False
        for dimension in self._dimensions:
            if dimension.definition == unit.definition:
                dimension, value = convert(value, dimension, unit, prefix, self._catalog)
                matched = True
            dims.append(dimension)
        if not matched:
            raise IncommensurableError(self._dimensions, [Dimension(unit, 1, prefix)])
        return self._new(value, dims)

    def convert_to_base(self) -> "Quantity":
        """Each dimension in its definition's base unit, without prefixes (km·h⁻¹ → m·s⁻¹)."""
        value = self._value
        dims: List[Dimension] = []
        for dimension in self._dimensions:
            dimension, value = convert_to_base(value, dimension, self._catalog)
            dims.append(dimension)
        return self._new(value, dims)

    def convert_from_base(self, unit: Union[str, Unit], prefix: Union[str, Prefix, None] = None) -> "Quantity":
        """
        Convert the base-unit dimensions of ``unit``'s definition into ``unit``.

        Raises
        ------
        ConversionError
            If a dimension of that definition is not in its base unit.
        """
        if isinstance(unit, str):
            unit = self._catalog.unit(unit)
        prefix = self._as_prefix(prefix)
        value = self._value
        dims: List[Dimension] = []
        for dimension in self._dimensions:
            if dimension.definition == unit.definition:
                dimension, value = convert_from_base(value, dimension, unit, prefix)
            dims.append(dimension)
        return self._new(value, dims)

    def _express_in(self, other: "Quantity", dims: Sequence[Dimension], operation: str) -> Any:
        """
        ``other``'s value expressed in ``dims``.

        When the merged dimensions line up one-to-one (same definitions and
        powers) each is converted directly, which keeps unit offsets exact.
        Otherwise both sides are taken to fundamental base units and the
        value is rescaled by the ratio.
        """
        other_dims, value = simple_simplify(other.value, other.dimensions, self._catalog)
        if _signature(other_dims) == _signature(dims):
            by_definition = {d.definition: d for d in other_dims}
            for target in dims:
                _, value = convert(value, by_definition[target.definition], target.unit, target.prefix, self._catalog)
            return value

        other_base, value = to_base_systems(value, other_dims, self._catalog)
        target_base, unit_value = to_base_systems(1, dims, self._catalog)
        if _signature(other_base) != _signature(target_base):
            raise IncommensurableError(dims, other.dimensions, operation=operation)
        return numeric.unscale(value, unit_value)

    # --- simplification ------------------------------------------------------

    def simplify(self) -> "Quantity":
        dims, value = simplify(self._value, self._dimensions, self._catalog)
        return self._new(value, dims)

    def simple_simplify(self) -> "Quantity":
        dims, value = simple_simplify(self._value, self._dimensions, self._catalog)
        return self._new(value, dims)

    def tidy_prefixes(self) -> "Quantity":
        dims, value = tidy_prefixes(self._value, self._dimensions, self._catalog)
        return self._new(value, dims)

    def is_commensurable(self, other: "Quantity") -> bool:
        """
        True when both quantities expand to the same fundamental definitions
        with the same powers, i.e. when `add` and `convert` accept the pair.
        Units, prefixes and derived forms may differ (ha and m², Pa and N·m⁻²).
        """
        if not isinstance(other, Quantity):
            return False
        mine, _ = to_base_systems(1, self._dimensions, self._catalog)
        theirs, _ = to_base_systems(1, other.dimensions, self._catalog)
        return _signature(mine) == _signature(theirs)

    # --- arithmetic ----------------------------------------------------------

    def _operand(self, other: Any, dimensions: Tuple[DimensionSpec, ...]) -> Any:
        if dimensions:
            return Quantity(other, dimensions, self._catalog)
        return other

    def add(self, other: Any, *dimensions: DimensionSpec) -> "Quantity":
        """
        Sum in this quantity's units.

        ``q.add(30, "second")`` is ``q.add(Quantity(30, "second"))``. A bare
        number is added to the value as is.
        """
        other = self._operand(other, dimensions)
        if not isinstance(other, Quantity):
            return self._new(self._value + other, self._dimensions)
        dims, value = simple_simplify(self._value, self._dimensions, self._catalog)
        return self._new(value + self._express_in(other, dims, "add"), dims)

    def subtract(self, other: Any, *dimensions: DimensionSpec) -> "Quantity":
        """Difference in this quantity's units; see `add`."""
        other = self._operand(other, dimensions)
        if not isinstance(other, Quantity):
            return self._new(self._value - other, self._dimensions)
        dims, value = simple_simplify(self._value, self._dimensions, self._catalog)
        return self._new(value - self._express_in(other, dims, "subtract"), dims)

    def _product(self, value: Any, dims: List[Dimension]) -> "Quantity":
        dims, value = simplify(value, dims, self._catalog)
        if self._catalog.options.use_automatic_prefix_management:
            dims, value = tidy_prefixes(value, dims, self._catalog)
        return self._new(value, dims)

    def multiply(self, other: Any, *dimensions: DimensionSpec) -> "Quantity":
        other = self._operand(other, dimensions)
        if not isinstance(other, Quantity):
            return self._new(self._value * other, self._dimensions)
        return self._product(self._value * other.value, [*self._dimensions, *other.dimensions])

    def divide(self, other: Any, *dimensions: DimensionSpec) -> "Quantity":
        other = self._operand(other, dimensions)
        if not isinstance(other, Quantity):
            return self._new(self._value / other, self._dimensions)
        inverted = [d.invert() for d in other.dimensions]
        return self._product(self._value / other.value, [*self._dimensions, *inverted])

    def pow(self, n: int) -> "Quantity":
        """Raise value and every dimension power to the integer ``n``."""
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(f"Quantity exponent must be an int, got {type(n).__name__}")
        dims = [d.with_power(d.power * n) for d in self._dimensions if n != 0]
        return self._new(self._value ** n, dims)

    def sqrt(self) -> "Quantity":
        """
        Square root of value and dimensions.

        Raises
        ------
        ConversionError
            If any dimension has an odd power.
        """
        odd = [d for d in self._dimensions if d.power % 2]
        if odd:
            raise ConversionError(
                f"Cannot take the square root of odd powers: {format_dimensions(odd)}"
            )
        dims = [d.with_power(d.power // 2) for d in self._dimensions]
        return self._new(numeric.sqrt(self._value), dims)

    def _extreme(self, others: Tuple[Any, ...], pick: Any) -> "Quantity":
        dims, best = simple_simplify(self._value, self._dimensions, self._catalog)
        for other in others:
            if isinstance(other, Quantity):
                other = self._express_in(other, dims, "compare")
            best = pick(best, other)
        return self._new(best, dims)

    def min(self, *others: Any) -> "Quantity":
        """Smallest of this quantity and ``others`` (numbers or quantities), in this quantity's units."""
        return self._extreme(others, min)

    def max(self, *others: Any) -> "Quantity":
        """Largest of this quantity and ``others`` (numbers or quantities), in this quantity's units."""
        return self._extreme(others, max)

    # --- operators -----------------------------------------------------------

    @staticmethod
    def _is_operand(other: Any) -> bool:
        return isinstance(other, Quantity) or isinstance(other, Numeric)

    def __add__(self, other: Any) -> "Quantity":
        if not self._is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "Quantity":
        if not self._is_operand(other):
            return NotImplemented
        return self._new(other + self._value, self._dimensions)

    def __sub__(self, other: Any) -> "Quantity":
        if not self._is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> "Quantity":
        if not self._is_operand(other):
            return NotImplemented
        return self._new(other - self._value, self._dimensions)

    def __mul__(self, other: Any) -> "Quantity":
        if not self._is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> "Quantity":
        # allows 3 * (2 m) -> 6 m
        if not self._is_operand(other):
            return NotImplemented
        return self._new(other * self._value, self._dimensions)

    def __truediv__(self, other: Any) -> "Quantity":
        if not self._is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> "Quantity":
        # scalar / quantity -> quantity with inverted dimensions
        if not self._is_operand(other):
            return NotImplemented
        return Quantity(other, (), self._catalog).divide(self)

    def __pow__(self, n: int) -> "Quantity":
        return self.pow(n)

    def __neg__(self) -> "Quantity":
        return self._new(-self._value, self._dimensions)

    def __pos__(self) -> "Quantity":
        return self

    def __abs__(self) -> "Quantity":
        return self._new(abs(self._value), self._dimensions)

    # --- comparison ----------------------------------------------------------

    def _compared(self, other: object) -> Tuple[Any, Any]:
        """Both values in this quantity's merged units, for ordering."""
        dims, value = simple_simplify(self._value, self._dimensions, self._catalog)
        if isinstance(other, Quantity):
            return value, self._express_in(other, dims, "compare")
        if isinstance(other, numbers.Real) and not dims:
            return value, other
        raise TypeError(
            f"Cannot compare a quantity in '{format_dimensions(dims)}' with {type(other).__name__}"
        )

    def __lt__(self, other: object) -> bool:
        a, b = self._compared(other)
        return a < b and not _values_close(a, b)

    def __le__(self, other: object) -> bool:
        a, b = self._compared(other)
        return a < b or _values_close(a, b)

    def __gt__(self, other: object) -> bool:
        a, b = self._compared(other)
        return a > b and not _values_close(a, b)

    def __ge__(self, other: object) -> bool:
        a, b = self._compared(other)
        return a > b or _values_close(a, b)

    def __eq__(self, other: object) -> bool:
        # Structural: same dimensions (in any order) and a value equal within tolerance.
        if not isinstance(other, Quantity):
            return NotImplemented
        if Counter(self._dimensions) != Counter(other.dimensions):
            return False
        return _values_close(self._value, other.value)

    # `__eq__` uses a tolerance, so equal quantities could not hash alike.
    __hash__ = None  # type: ignore[assignment]

    # --- display -------------------------------------------------------------

    def __repr__(self) -> str:
        if not self._dimensions:
            return format_value(self._value)
        return f"{format_value(self._value)} {format_dimensions(self._dimensions)}"

    def __format__(self, spec: str) -> str:
        """
        Format the quantity.

        Supported specifiers
        --------------------
        "" (empty), or "native"
            As stored (default).
        "base"
            Converted to base units.
        "simplified"
            Simplified, then given a readable prefix.
        "ascii"
            As stored, with ``^`` powers and ``*`` separators.

        Raises
        ------
        ValueError
            If the format specifier is not one of the above.
        """
        spec = (spec or "").strip().lower()
        if spec in ("", "native"):
            return repr(self)
        if spec == "base":
            return repr(self.convert_to_base())
        if spec == "simplified":
            return repr(self.simplify().tidy_prefixes())
        if spec == "ascii":
            if not self._dimensions:
                return format_value(self._value)
            return f"{format_value(self._value)} {format_dimensions(self._dimensions, ascii=True)}"
        raise ValueError("Unknown format spec; use '', 'native', 'base', 'simplified' or 'ascii'")
