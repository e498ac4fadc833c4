"""
measura.core.dimension
======================

The `Dimension` value (a unit raised to an integer power, with an optional
prefix) and the conversion primitives every higher-level operation is built
from.

All conversions pivot on the base unit of the dimension's definition: a
value is first taken to the base unit and then out to the target unit, so
each unit only needs its own ``multiplier``/``offset`` pair.

Every function returns new `Dimension` values together with the converted
numeric value; nothing is mutated in place.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Optional, Tuple

from measura.core.numeric import EPSILON, scale, shift, supports_scalar_addition, unscale, unshift
from measura.core.utils import format_dimension
from measura.exceptions import ConversionError, IncommensurableError

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measura.catalog.entities import Prefix, Unit
    from measura.catalog.registry import Catalog

__all__ = [
    "Dimension",
    "combine",
    "convert",
    "convert_from_base",
    "convert_to_base",
]


@dataclass(frozen=True, slots=True)
class Dimension:
    """
    A unit raised to an integer power, optionally scaled by a prefix.

    ``Dimension(metre, 2, kilo)`` is km². Two dimensions that share a
    definition (metre and inch both measure length) can be combined.
    """

    unit: "Unit"
    power: int = 1
    prefix: Optional["Prefix"] = None

    def __post_init__(self) -> None:
        if not isinstance(self.power, int) or isinstance(self.power, bool):
            raise TypeError(f"Dimension power must be an int, got {type(self.power).__name__}")

    @property
    def definition(self) -> str:
        """Key of the dimension definition the unit belongs to."""
        return self.unit.definition

    @property
    def is_base(self) -> bool:
        return self.unit.is_base_unit and self.prefix is None

    def invert(self) -> "Dimension":
        return replace(self, power=-self.power)

    def with_power(self, power: int) -> "Dimension":
        return replace(self, power=power)

    def with_prefix(self, prefix: Optional["Prefix"]) -> "Dimension":
        return replace(self, prefix=prefix)

    def same_definition(self, other: "Dimension") -> bool:
        return self.definition == other.definition

    def __str__(self) -> str:
        return format_dimension(self)

    def __repr__(self) -> str:
        prefix = f", prefix={self.prefix.key!r}" if self.prefix is not None else ""
        return f"Dimension({self.unit.key!r}, {self.power}{prefix})"


# ---------------------------------------------------------------------------
# Single-step unit maps
# ---------------------------------------------------------------------------

def _offset_for(value: Any, unit: "Unit") -> float:
    """
    The offset to apply to ``value``; zero when the value cannot take a bare
    scalar and the unit's offset is negligible.
    """
    if supports_scalar_addition(value):
        return unit.offset
    if abs(unit.offset) <= EPSILON:
        return 0
    raise ConversionError(
        f"Unit {unit.key!r} has offset {unit.offset} which cannot be applied "
        f"to a {type(value).__name__} value"
    )


def _to_base_once(value: Any, unit: "Unit", forward: bool) -> Any:
    offset = _offset_for(value, unit)
    if forward:
        return shift(scale(value, unit.multiplier), offset)
    return unscale(unshift(value, offset), unit.multiplier)


def _from_base_once(value: Any, unit: "Unit", forward: bool) -> Any:
    offset = _offset_for(value, unit)
    if forward:
        return unscale(unshift(value, offset), unit.multiplier)
    return shift(scale(value, unit.multiplier), offset)


def resolve_catalog(catalog: Optional["Catalog"]) -> "Catalog":
    """``catalog``, or the shared default catalog when None."""
    if catalog is not None:
        return catalog
    from measura.catalog import get_default_catalog  # local import

    return get_default_catalog()


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def convert_to_base(
    value: Any,
    dimension: Dimension,
    catalog: Optional["Catalog"] = None,
) -> Tuple[Dimension, Any]:
    """
    Express ``value`` (measured in ``dimension``) in the definition's base unit.

    Returns
    -------
    (Dimension, value)
        The base-unit dimension with the same power and no prefix, and the
        converted value.

    Examples
    --------
    5 min → (second¹, 300); 2 km² → (metre², 2_000_000).
    """
    if dimension.is_base:
        return dimension, value

    unit = dimension.unit
    base_unit = resolve_catalog(catalog).base_unit_of(unit.definition)
    forward = dimension.power > 0
    step = 1 if forward else -1
    for _ in range(abs(dimension.power)):
        if dimension.prefix is not None:
            value = dimension.prefix.remove(value, step)
        if not unit.is_base_unit:
            value = _to_base_once(value, unit, forward)
    return Dimension(base_unit, dimension.power), value


def convert_from_base(
    value: Any,
    dimension: Dimension,
    unit: "Unit",
    prefix: Optional["Prefix"] = None,
) -> Tuple[Dimension, Any]:
    """
    Express ``value`` (measured in the base-unit ``dimension``) in ``unit``/``prefix``.

    Raises
    ------
    ConversionError
        If ``dimension`` is not an unprefixed base unit.
    IncommensurableError
        If ``unit`` belongs to a different definition.
    """
    if not dimension.is_base:
        raise ConversionError(
            f"Cannot convert from a non-base dimension: {dimension!r}"
        )
    target = Dimension(unit, dimension.power, prefix)
    if unit.definition != dimension.definition:
        raise IncommensurableError([dimension], [target])

    forward = dimension.power > 0
    step = 1 if forward else -1
    for _ in range(abs(dimension.power)):
        if not unit.is_base_unit:
            value = _from_base_once(value, unit, forward)
        if prefix is not None:
            value = prefix.apply(value, step)
    return target, value


def convert(
    value: Any,
    dimension: Dimension,
    unit: "Unit",
    prefix: Optional["Prefix"] = None,
    catalog: Optional["Catalog"] = None,
) -> Tuple[Dimension, Any]:
    """Convert through the base unit: `convert_to_base` then `convert_from_base`."""
    if dimension.unit == unit and dimension.prefix == prefix:
        return dimension, value
    if unit.definition != dimension.definition:
        raise IncommensurableError([dimension], [Dimension(unit, dimension.power, prefix)])
    base, value = convert_to_base(value, dimension, catalog)
    return convert_from_base(value, base, unit, prefix)


def combine(
    value: Any,
    first: Dimension,
    second: Dimension,
    catalog: Optional["Catalog"] = None,
) -> Tuple[Dimension, Any]:
    """
    Merge two dimensions of the same definition into one.

    ``second`` is converted into ``first``'s unit and prefix (changing
    ``value`` accordingly) and the powers are summed. The result may have
    power 0; callers decide whether to drop it.

    Examples
    --------
    30 · in¹ · ft⁻¹ → (in⁰, 2.5)
    """
    if not first.same_definition(second):
        raise IncommensurableError([first], [second], operation="combine")
    if (second.unit, second.prefix) != (first.unit, first.prefix):
        second, value = convert(value, second, first.unit, first.prefix, catalog)
    return Dimension(first.unit, first.power + second.power, first.prefix), value
