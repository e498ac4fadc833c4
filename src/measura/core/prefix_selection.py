"""
measura.core.prefix_selection
=============================

Choosing a readable prefix for a value (1 500 000 m → 1.5 Mm).

Each candidate prefix gets a rating, lower being better: the magnitude of
the rescaled value when it lands inside the readable window
``[lower_prefix_value, upper_prefix_value]``, the upper bound otherwise,
plus a fixed penalty for carrying any prefix at all. A unit's own default
prefix (kilo for gram) always rates 0.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Tuple

from measura.catalog.entities import PrefixKind, UnitKind
from measura.core.dimension import Dimension, resolve_catalog
from measura.core.numeric import magnitude

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measura.catalog.entities import Prefix, Unit
    from measura.catalog.registry import Catalog
    from measura.config import MeasurementOptions

__all__ = [
    "apply_prefix",
    "find_prefix",
    "is_compatible",
    "rate_prefix",
    "remove_prefix",
    "tidy_prefixes",
]


def is_compatible(prefix: "Prefix", unit: "Unit", options: "MeasurementOptions") -> bool:
    """
    Whether ``prefix`` may be put in front of ``unit`` under ``options``.

    Explicitly allowed ``(unit, prefix)`` pairs are always compatible. Units
    that already embed a prefix (kilogram) accept none.
    """
    if options.is_rare_combination_allowed(unit.key, prefix.key):
        return True
    if not unit.accepts_prefixes:
        return False
    if prefix.rare and not options.use_rare_prefixes:
        return False

    if prefix.kind is PrefixKind.SI:
        return unit.kind is UnitKind.SI or (
            unit.kind is UnitKind.BINARY and not options.prefer_binary_prefixes
        )
    if prefix.kind is PrefixKind.SI_BINARY:
        return unit.kind is UnitKind.BINARY and options.prefer_binary_prefixes
    if prefix.kind is PrefixKind.SI_UNOFFICIAL:
        return unit.kind is UnitKind.SI and options.use_unofficial_prefixes
    return False


def apply_prefix(value: Any, prefix: Optional["Prefix"], power: int = 1) -> Any:
    return value if prefix is None else prefix.apply(value, power)


def remove_prefix(value: Any, prefix: Optional["Prefix"], power: int = 1) -> Any:
    return value if prefix is None else prefix.remove(value, power)


def rate_prefix(
    value: Any,
    prefix: Optional["Prefix"],
    unit: "Unit",
    options: "MeasurementOptions",
    power: int = 1,
) -> float:
    """Rating of showing ``value`` with ``prefix`` (None for no prefix); lower is better."""
    if prefix is not None and prefix.key == unit.default_prefix:
        return 0.0

    size = magnitude(apply_prefix(value, prefix, power))
    if options.lower_prefix_value <= size <= options.upper_prefix_value:
        rating = size
    else:
        rating = options.upper_prefix_value
    if prefix is not None:
        rating += options.having_prefix_score_offset
    return rating


def find_prefix(
    value: Any,
    unit: "Unit",
    power: int = 1,
    catalog: Optional["Catalog"] = None,
    options: Optional["MeasurementOptions"] = None,
) -> Optional["Prefix"]:
    """
    Best prefix for ``value`` expressed in ``unit`` (raised to ``power``).

    Returns None when no compatible prefix rates better than no prefix. On
    equal ratings the earlier candidate wins, no prefix first, then catalog
    order.

    Raises
    ------
    ConfigurationError
        If the readable window is empty.
    """
    catalog = resolve_catalog(catalog)
    options = options if options is not None else catalog.options
    options.check_prefix_bounds()

    best: Optional["Prefix"] = None
    best_rating = rate_prefix(value, None, unit, options, power)
    for prefix in catalog.prefixes():
        if not is_compatible(prefix, unit, options):
            continue
        rating = rate_prefix(value, prefix, unit, options, power)
        if rating < best_rating:
            best, best_rating = prefix, rating
    return best


def tidy_prefixes(
    value: Any,
    dimensions: Sequence[Dimension],
    catalog: Optional["Catalog"] = None,
    options: Optional["MeasurementOptions"] = None,
) -> Tuple[List[Dimension], Any]:
    """
    Strip every prefix, then give a prefix to the first dimension that gets one.

    Dimensions of dimensionless definitions (radian) are never prefixed. When
    ``allow_reordering_dimensions`` is set the prefixed dimension moves to the
    front of the list (m·s⁻¹·k → km·s⁻¹ style display).
    """
    catalog = resolve_catalog(catalog)
    options = options if options is not None else catalog.options

    tidy: List[Dimension] = []
    for dimension in dimensions:
        if dimension.prefix is not None:
            value = remove_prefix(value, dimension.prefix, dimension.power)
            dimension = dimension.with_prefix(None)
        tidy.append(dimension)

    for i, dimension in enumerate(tidy):
        if catalog.definition_of(dimension.unit).dimensionless:
            continue
        prefix = find_prefix(value, dimension.unit, dimension.power, catalog, options)
        if prefix is None:
            continue
        value = apply_prefix(value, prefix, dimension.power)
        tidy[i] = dimension.with_prefix(prefix)
        if options.allow_reordering_dimensions and i > 0:
            tidy.insert(0, tidy.pop(i))
        break
    return tidy, value
