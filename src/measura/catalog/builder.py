"""
measura.catalog.builder
=======================

Turns a corpus mapping (``{"systems": ..., "dimensions": ..., "prefixes": ...}``)
into a validated, immutable `Catalog`.

Derived definitions are written as strings such as ``"mass*length/time/time"``.
Each term is a definition key and each operator applies to the term right
after it: ``*`` contributes power +1, ``/`` contributes power -1. A bare ``1``
term is a placeholder (``"1/time"``) and contributes nothing.
"""

from __future__ import annotations

import logging
import re
from fractions import Fraction
from typing import Any, Dict, List, Mapping, Optional, Tuple

from measura.catalog.entities import (
    DimensionDefinition,
    MeasurementSystem,
    Prefix,
    PrefixKind,
    Unit,
    UnitKind,
)
from measura.catalog.registry import Catalog
from measura.config import MeasurementOptions
from measura.exceptions import CatalogIntegrityError

__all__ = ["build_catalog", "parse_derived"]

logger = logging.getLogger(__name__)

_DERIVED_TERM = re.compile(r"(^\w+|([^\w\s])\s*(\w+))")


def parse_derived(text: str) -> List[Tuple[str, int]]:
    """
    Split a derived-dimension string into ``(term, power)`` pairs.

    Repeated terms are kept separate and in order; merging happens later.

    >>> parse_derived("mass*length/time/time")
    [('mass', 1), ('length', 1), ('time', -1), ('time', -1)]
    """
    text = text.strip()
    terms: List[Tuple[str, int]] = []
    consumed = 0
    for match in _DERIVED_TERM.finditer(text):
        gap = text[consumed:match.start()].strip()
        if gap:
            raise CatalogIntegrityError(f"Unexpected text {gap!r} in derived dimension {text!r}")
        consumed = match.end()

        if match.group(2) is None:
            name, power = match.group(1), 1
        else:
            divider, name = match.group(2), match.group(3)
            if divider == "*":
                power = 1
            elif divider == "/":
                power = -1
            else:
                raise CatalogIntegrityError(
                    f"Unknown divider {divider!r} in derived dimension {text!r}"
                )
        if name == "1":
            continue
        terms.append((name, power))

    trailing = text[consumed:].strip()
    if trailing:
        raise CatalogIntegrityError(f"Unexpected text {trailing!r} in derived dimension {text!r}")
    return terms


def _merge_terms(terms: List[Tuple[str, int]]) -> Tuple[Tuple[str, int], ...]:
    merged: Dict[str, int] = {}
    for name, power in terms:
        merged[name] = merged.get(name, 0) + power
    return tuple((name, power) for name, power in merged.items() if power != 0)


def _names(data: Mapping[str, Any], field: str) -> Tuple[str, ...]:
    value = data.get(field) or ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _multiplier(value: Any) -> float | Fraction:
    # exact ratios such as km/h = 5/18 stay Fractions
    if isinstance(value, Fraction):
        return value
    return float(value)


# ---------------------------------------------------------------------------
# Record builders
# ---------------------------------------------------------------------------

def _build_systems(source: Mapping[str, Any]) -> Dict[str, MeasurementSystem]:
    systems: Dict[str, MeasurementSystem] = {}
    for key, data in source.items():
        systems[key] = MeasurementSystem(
            key=key,
            name=data.get("name", key),
            historical=bool(data.get("historical", False)),
            parent=data.get("inherits"),
        )
    for system in systems.values():
        if system.parent is not None and system.parent not in systems:
            raise CatalogIntegrityError(
                f"System {system.key!r} inherits from unknown system {system.parent!r}"
            )
    return systems


def _build_prefixes(source: Mapping[str, Any]) -> Dict[str, Prefix]:
    prefixes: Dict[str, Prefix] = {}
    for key, data in source.items():
        if "base" not in data or "power" not in data:
            raise CatalogIntegrityError(f"Prefix {key!r} needs both 'base' and 'power'")
        try:
            kind = PrefixKind.parse(data.get("type", "si"))
        except ValueError as e:
            raise CatalogIntegrityError(f"Prefix {key!r} has unknown type {data.get('type')!r}") from e
        prefixes[key] = Prefix(
            key=key,
            symbol=data.get("symbol", ""),
            kind=kind,
            base=int(data["base"]),
            power=int(data["power"]),
            rare=bool(data.get("rare", False)),
            other_names=_names(data, "otherSymbols") + _names(data, "otherNames"),
        )
    return prefixes


def _build_unit(
    key: str,
    data: Mapping[str, Any],
    definition: str,
    base_unit: str,
    systems: Mapping[str, MeasurementSystem],
    prefixes: Mapping[str, Prefix],
) -> Unit:
    try:
        kind = UnitKind.parse(data.get("type", "si"))
    except ValueError as e:
        raise CatalogIntegrityError(f"Unit {key!r} has unknown type {data.get('type')!r}") from e

    unit_systems = _names(data, "systems")
    for system in unit_systems:
        if system not in systems:
            raise CatalogIntegrityError(f"Unit {key!r} belongs to unknown system {system!r}")

    default_prefix = data.get("prefixName")
    if default_prefix is not None and default_prefix not in prefixes:
        raise CatalogIntegrityError(f"Unit {key!r} defaults to unknown prefix {default_prefix!r}")

    try:
        return Unit(
            key=key,
            name=data.get("name", key),
            definition=definition,
            symbol=data.get("symbol", ""),
            plural=data.get("plural", ""),
            multiplier=_multiplier(data.get("multiplier", 1.0)),
            offset=float(data.get("offset", 0.0)),
            kind=kind,
            rare=bool(data.get("rare", False)),
            estimated=bool(data.get("estimation", False)),
            default_prefix=default_prefix,
            prefix_free_name=data.get("prefixFreeName"),
            other_names=_names(data, "otherNames"),
            other_symbols=_names(data, "otherSymbols"),
            systems=unit_systems,
            is_base_unit=(key == base_unit),
        )
    except ValueError as e:
        raise CatalogIntegrityError(str(e)) from e


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def build_catalog(source: Mapping[str, Any], options: Optional[MeasurementOptions] = None) -> Catalog:
    """
    Build a `Catalog` from a corpus mapping.

    Parameters
    ----------
    source : Mapping
        ``{"systems": {...}, "dimensions": {...}, "prefixes": {...}}``. Missing
        sections are treated as empty.
    options : MeasurementOptions, optional
        Options the catalog starts with. Defaults to ``MeasurementOptions()``.

    Raises
    ------
    CatalogIntegrityError
        On unknown references, duplicate unit keys, a missing base unit, a
        malformed derived string, or a cycle between derived definitions.
    """
    systems = _build_systems(source.get("systems", {}))
    prefixes = _build_prefixes(source.get("prefixes", {}))
    raw_dimensions: Mapping[str, Any] = source.get("dimensions", {})

    units: Dict[str, Unit] = {}
    definitions: Dict[str, DimensionDefinition] = {}

    for def_key, data in raw_dimensions.items():
        base_unit = data.get("baseUnit")
        if not base_unit:
            raise CatalogIntegrityError(f"Dimension {def_key!r} has no base unit")

        own_units: List[str] = []
        for unit_key, unit_data in (data.get("units") or {}).items():
            if unit_key in units:
                raise CatalogIntegrityError(
                    f"Unit key {unit_key!r} is defined by both {units[unit_key].definition!r} and {def_key!r}"
                )
            units[unit_key] = _build_unit(unit_key, unit_data, def_key, base_unit, systems, prefixes)
            own_units.append(unit_key)

        derived_text = data.get("derived")
        derived = _merge_terms(parse_derived(derived_text)) if derived_text else ()

        definitions[def_key] = DimensionDefinition(
            key=def_key,
            name=data.get("name", def_key),
            base_unit=base_unit,
            symbol=data.get("symbol", ""),
            units=tuple(own_units),
            derived=derived,
            vector=bool(data.get("vector", False)),
            dimensionless=bool(data.get("dimensionless", False)),
            inherited_units=data.get("inheritedUnits"),
            other_names=_names(data, "otherNames"),
            other_symbols=_names(data, "otherSymbols"),
        )

    _link_inherited_units(definitions, units)

    for definition in definitions.values():
        for component, _ in definition.derived:
            if component not in definitions:
                raise CatalogIntegrityError(
                    f"Derived dimension {definition.key!r} refers to unknown dimension {component!r}"
                )
        if definition.base_unit not in definition.units:
            raise CatalogIntegrityError(
                f"Base unit {definition.base_unit!r} of {definition.key!r} is not one of its units"
            )

    fundamentals = _fundamental_decompositions(definitions)

    logger.debug(
        "Built catalog: %d systems, %d definitions, %d units, %d prefixes",
        len(systems), len(definitions), len(units), len(prefixes),
    )
    return Catalog(
        systems=systems,
        definitions=definitions,
        units=units,
        prefixes=prefixes,
        fundamentals=fundamentals,
        options=options,
    )


def _link_inherited_units(definitions: Dict[str, DimensionDefinition], units: Mapping[str, Unit]) -> None:
    """Extend each definition's unit list with the units of the definition it inherits from."""
    for key, definition in list(definitions.items()):
        source_key = definition.inherited_units
        if source_key is None:
            continue
        source = definitions.get(source_key)
        if source is None:
            raise CatalogIntegrityError(
                f"Dimension {key!r} inherits units from unknown dimension {source_key!r}"
            )
        extra = tuple(u for u in source.units if units[u].definition == source_key and u not in definition.units)
        definitions[key] = DimensionDefinition(
            key=definition.key,
            name=definition.name,
            base_unit=definition.base_unit,
            symbol=definition.symbol,
            units=definition.units + extra,
            derived=definition.derived,
            vector=definition.vector,
            dimensionless=definition.dimensionless,
            inherited_units=definition.inherited_units,
            other_names=definition.other_names,
            other_symbols=definition.other_symbols,
        )


def _fundamental_decompositions(
    definitions: Mapping[str, DimensionDefinition],
) -> Dict[str, Tuple[Tuple[str, int], ...]]:
    """
    Expand every derived definition down to fundamental definitions.

    ``force`` → ``(("mass", 1), ("length", 1), ("time", -2))``.
    """
    resolved: Dict[str, Tuple[Tuple[str, int], ...]] = {}

    def expand(key: str, path: Tuple[str, ...]) -> Tuple[Tuple[str, int], ...]:
        if key in resolved:
            return resolved[key]
        if key in path:
            cycle = " -> ".join(path + (key,))
            raise CatalogIntegrityError(f"Derived dimensions form a cycle: {cycle}")

        definition = definitions[key]
        if definition.is_fundamental:
            result: Tuple[Tuple[str, int], ...] = ((key, 1),)
        else:
            terms: List[Tuple[str, int]] = []
            for component, power in definition.derived:
                for fundamental, inner in expand(component, path + (key,)):
                    terms.append((fundamental, inner * power))
            result = _merge_terms(terms)
        resolved[key] = result
        return result

    for key in definitions:
        expand(key, ())
    return resolved
