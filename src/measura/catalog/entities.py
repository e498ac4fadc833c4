"""
measura.catalog.entities
========================

Immutable catalog records.

Entities reference each other by key only; the `Catalog` resolves keys to
records. This keeps the unit → definition → base unit graph free of
ownership cycles while still letting every record be hashed and copied.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from math import isfinite
from typing import Any, Optional, Tuple

__all__ = [
    "DimensionDefinition",
    "MeasurementSystem",
    "Prefix",
    "PrefixKind",
    "Unit",
    "UnitKind",
]


class UnitKind(Enum):
    """Governs which prefixes a unit accepts."""

    SI = "si"
    CUSTOMARY = "customary"
    BINARY = "binary"
    FRACTIONAL = "fractional"
    WHOLE = "whole"
    RANGE = "range"

    @classmethod
    def parse(cls, text: str) -> "UnitKind":
        return cls(text.strip().lower())


class PrefixKind(Enum):
    SI = "si"
    SI_BINARY = "sibinary"
    SI_UNOFFICIAL = "siunofficial"

    @classmethod
    def parse(cls, text: str) -> "PrefixKind":
        return cls(text.strip().lower().replace("_", "").replace("-", ""))


@dataclass(frozen=True, slots=True)
class MeasurementSystem:
    """A family of units (metric, imperial, ...). Systems form a tree via ``parent``."""

    key: str
    name: str
    historical: bool = False
    parent: Optional[str] = None

    @property
    def is_root(self) -> bool:
        return self.parent is None


@dataclass(frozen=True, slots=True)
class Unit:
    """
    A concrete scale within a dimension definition.

    Conversion to the definition's base unit is
    ``base = value * multiplier + offset``.

    Attributes
    ----------
    key : str
        Unique catalog key (e.g. "metre", "reciprocalSiemens").
    definition : str
        Key of the owning `DimensionDefinition`.
    multiplier : float or Fraction
        Scale into the base unit; a Fraction keeps Fraction values exact.
    offset : float
        Added after scaling.
    kind : UnitKind
        Decides prefix compatibility.
    default_prefix : str | None
        Prefix key preferred for display (gram prefers kilo).
    prefix_free_name : str | None
        Set when the unit already embeds a prefix (kilogram -> "gram").
    """

    key: str
    name: str
    definition: str
    symbol: str = ""
    plural: str = ""
    multiplier: float | Fraction = 1.0
    offset: float = 0.0
    kind: UnitKind = UnitKind.SI
    rare: bool = False
    estimated: bool = False
    default_prefix: Optional[str] = None
    prefix_free_name: Optional[str] = None
    other_names: Tuple[str, ...] = ()
    other_symbols: Tuple[str, ...] = ()
    systems: Tuple[str, ...] = ()
    is_base_unit: bool = False

    def __post_init__(self) -> None:
        if not (isfinite(self.multiplier) and self.multiplier != 0):
            raise ValueError(f"Unit {self.key!r}: multiplier must be a non-zero finite number")
        if not isfinite(self.offset):
            raise ValueError(f"Unit {self.key!r}: offset must be finite")

    @property
    def accepts_prefixes(self) -> bool:
        return self.prefix_free_name is None

    @property
    def display_symbol(self) -> str:
        return self.symbol or self.name


@dataclass(frozen=True, slots=True)
class DimensionDefinition:
    """
    A measurable physical kind (length, time, speed).

    ``derived`` holds the direct decomposition as ``(definition_key, power)``
    pairs. A definition with an empty decomposition is fundamental.
    """

    key: str
    name: str
    base_unit: str
    symbol: str = ""
    units: Tuple[str, ...] = ()
    derived: Tuple[Tuple[str, int], ...] = ()
    vector: bool = False
    dimensionless: bool = False
    inherited_units: Optional[str] = None
    other_names: Tuple[str, ...] = ()
    other_symbols: Tuple[str, ...] = ()

    @property
    def is_derived(self) -> bool:
        return len(self.derived) > 0

    @property
    def is_fundamental(self) -> bool:
        return not self.derived


@dataclass(frozen=True, slots=True)
class Prefix:
    """
    A scale multiplier ``base ** power`` (kilo = 10**3, kibi = 2**10).

    Examples
    --------
    >>> kilo = Prefix("kilo", "k", PrefixKind.SI, base=10, power=3)
    >>> kilo.apply(5000)
    5.0
    >>> kilo.remove(5)
    5000
    """

    key: str
    symbol: str
    kind: PrefixKind = PrefixKind.SI
    base: int = 10
    power: int = 0
    rare: bool = False
    other_names: Tuple[str, ...] = ()

    @property
    def multiplier(self) -> int | Fraction:
        if self.power >= 0:
            return self.base ** self.power
        return Fraction(1, self.base ** -self.power)

    def _rescale(self, value: Any, exponent: int) -> Any:
        if exponent == 0:
            return value
        factor = self.base ** abs(exponent)
        if isinstance(value, Fraction):
            factor = Fraction(factor)
        return value * factor if exponent > 0 else value / factor

    def apply(self, value: Any, power: int = 1) -> Any:
        """Express ``value`` (of a dimension raised to ``power``) in prefixed units."""
        # once per unit of |power|: km² holds 10**6 m²
        step = -self.power if power > 0 else self.power
        return self._rescale(value, step * abs(power))

    def remove(self, value: Any, power: int = 1) -> Any:
        """Inverse of `apply`."""
        step = self.power if power > 0 else -self.power
        return self._rescale(value, step * abs(power))
