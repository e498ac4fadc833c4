"""
measura.core.simplifier
=======================

Simplification of dimension lists.

Three strategies produce candidate results:

1. `simple_simplify` merges dimensions that share a definition (m²·m⁻¹ → m).
2. `to_base_systems` converts everything to base units and expands derived
   definitions into their fundamental components (N → kg·m·s⁻²).
3. `find_derived_candidates` searches the expanded list for subsets that
   form a derived definition (m·s⁻¹ → speed) and keeps searching on each
   result, so derived-of-derived forms (N·m → J) are found too.

`simplify` scores every candidate with `score_dimensions` and keeps the best.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, FrozenSet, List, Optional, Sequence, Tuple

from measura.core.dimension import Dimension, combine, convert_to_base, resolve_catalog
from measura.core.utils import format_dimensions

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measura.catalog.entities import DimensionDefinition
    from measura.catalog.registry import Catalog
    from measura.config import MeasurementOptions

__all__ = [
    "BASE_SCORE",
    "DERIVED_DIMENSION_PENALTY",
    "DIMENSION_COUNT_PENALTY",
    "NEGATIVE_POWER_PENALTY",
    "POWER_PENALTY",
    "find_derived_candidates",
    "match_dimensions",
    "score_dimensions",
    "simple_simplify",
    "simplify",
    "to_base_systems",
]

logger = logging.getLogger(__name__)

# Candidate scoring weights. Higher scores win; ties go to the earlier candidate.
BASE_SCORE = 1000
DIMENSION_COUNT_PENALTY = 10  # per dimension in the list
POWER_PENALTY = 5  # per unit of |power|
DERIVED_DIMENSION_PENALTY = 5  # per dimension whose definition is derived
NEGATIVE_POWER_PENALTY = 3  # per dimension with a negative power

DimensionList = List[Dimension]


def simple_simplify(
    value: Any,
    dimensions: Sequence[Dimension],
    catalog: Optional["Catalog"] = None,
) -> Tuple[DimensionList, Any]:
    """
    Merge dimensions that share a definition, in a single pass.

    Later dimensions are converted into the unit of the first dimension of
    their definition; merged dimensions whose power cancels to zero are
    dropped. Surviving dimensions keep the order of first occurrence.

    Examples
    --------
    >>> simple_simplify(30, [m², in, ft⁻¹, s])  # doctest: +SKIP
    ([m², s], 2.5)
    """
    pending = [d for d in dimensions if d.power != 0]
    merged = [False] * len(pending)
    result: DimensionList = []

    for i, current in enumerate(pending):
        if merged[i]:
            continue
        for j in range(i + 1, len(pending)):
            if merged[j] or not current.same_definition(pending[j]):
                continue
            current, value = combine(value, current, pending[j], catalog)
            merged[j] = True
        if current.power != 0:
            result.append(current)
    return result, value


def to_base_systems(
    value: Any,
    dimensions: Sequence[Dimension],
    catalog: Optional["Catalog"] = None,
) -> Tuple[DimensionList, Any]:
    """
    Convert every dimension to its base unit and expand derived definitions
    into fundamental ones, then merge with `simple_simplify`.

    Base units of derived definitions are coherent with the base units of
    their components, so expansion itself does not change the value.
    """
    catalog = resolve_catalog(catalog)
    expanded: DimensionList = []
    for dimension in dimensions:
        base, value = convert_to_base(value, dimension, catalog)
        definition = catalog.definition_of(base.unit)
        if not definition.is_derived:
            expanded.append(base)
            continue
        for fundamental, power in catalog.fundamental_decomposition(definition):
            expanded.append(Dimension(catalog.base_unit_of(fundamental), power * base.power))
    return simple_simplify(value, expanded, catalog)


def match_dimensions(
    dimensions: Sequence[Dimension],
    need: Sequence[Tuple[str, int]],
) -> Optional[DimensionList]:
    """
    Take ``need`` (``(definition_key, power)`` pairs) out of ``dimensions``.

    Each needed entry is taken from a dimension of the same definition whose
    power has the same sign and at least the needed magnitude. Returns the
    remaining dimensions, or None if any entry cannot be satisfied.

    Examples
    --------
    [m², s⁻¹] minus speed (length¹, time⁻¹) leaves [m¹].
    """
    remaining = list(dimensions)
    for definition, power in need:
        for i, dimension in enumerate(remaining):
            if dimension.definition != definition:
                continue
            if (dimension.power > 0) != (power > 0) or abs(dimension.power) < abs(power):
                continue
            left = dimension.power - power
            if left == 0:
                del remaining[i]
            else:
                remaining[i] = dimension.with_power(left)
            break
        else:
            return None
    return remaining


def find_derived_candidates(
    dimensions: Sequence[Dimension],
    catalog: Optional["Catalog"] = None,
    options: Optional["MeasurementOptions"] = None,
) -> List[DimensionList]:
    """
    Every dimension list reachable by substituting derived definitions.

    A derived definition is tried when it shares a definition with one of
    the dimensions scanned so far; the scan stops at the first dimension
    whose own definition is derived, so substitutions only start from
    fundamental dimensions that precede it. Each definition is matched by
    its direct decomposition (force·length for energy) and by its
    fundamental one (mass·length²·time⁻²), so pressure is found in
    kg·m⁻¹·s⁻² although force/area needs a positive length.
    Each successful substitution appends the derived base unit at power 1
    and is searched again, with that definition excluded further down the
    same chain.
    """
    catalog = resolve_catalog(catalog)
    derived = catalog.derived_definitions(options)
    if not derived:
        return []
    needs = {d.key: _needs(catalog, d) for d in derived}

    candidates: List[DimensionList] = []
    work: List[Tuple[DimensionList, FrozenSet[str]]] = [(list(dimensions), frozenset())]

    while work:
        current, excluded = work.pop()
        tried: set = set()
        for dimension in current:
            if catalog.definition_of(dimension.unit).is_derived:
                break
            for definition in derived:
                if definition.key in excluded or definition.key in tried:
                    continue
                if not _shares(needs[definition.key], dimension.definition):
                    continue
                tried.add(definition.key)
                for need in needs[definition.key]:
                    remaining = match_dimensions(current, need)
                    if remaining is None:
                        continue
                    found = remaining + [Dimension(catalog.base_unit_of(definition))]
                    if found in candidates:
                        continue
                    candidates.append(found)
                    work.append((found, excluded | {definition.key}))
    return candidates


def _needs(catalog: "Catalog", definition: "DimensionDefinition") -> List[Tuple[Tuple[str, int], ...]]:
    """Direct decomposition first, then the fundamental one when it differs."""
    direct = tuple(definition.derived)
    fundamental = tuple(catalog.fundamental_decomposition(definition))
    return [direct] if fundamental == direct else [direct, fundamental]


def _shares(needs: Sequence[Sequence[Tuple[str, int]]], key: str) -> bool:
    return any(component == key for need in needs for component, _ in need)


def score_dimensions(dimensions: Sequence[Dimension], catalog: Optional["Catalog"] = None) -> int:
    """
    Heuristic readability score of a dimension list; higher is simpler.

    ``1000 - 10·count - 5·Σ|power| - 5·derived - 3·negative``
    """
    catalog = resolve_catalog(catalog)
    score = BASE_SCORE
    score -= DIMENSION_COUNT_PENALTY * len(dimensions)
    score -= POWER_PENALTY * sum(abs(d.power) for d in dimensions)
    score -= DERIVED_DIMENSION_PENALTY * sum(
        1 for d in dimensions if catalog.definition_of(d.unit).is_derived
    )
    score -= NEGATIVE_POWER_PENALTY * sum(1 for d in dimensions if d.power < 0)
    return score


def simplify(
    value: Any,
    dimensions: Sequence[Dimension],
    catalog: Optional["Catalog"] = None,
    options: Optional["MeasurementOptions"] = None,
) -> Tuple[DimensionList, Any]:
    """
    Pick the best-scoring form among the merged list, the fully expanded
    list and every derived substitution of the expanded list.

    With ``allow_derived_dimensions`` off, only the merged list is returned.
    """
    catalog = resolve_catalog(catalog)
    options = options if options is not None else catalog.options

    simple, simple_value = simple_simplify(value, dimensions, catalog)
    if not options.allow_derived_dimensions or not simple:
        return simple, simple_value

    expanded, expanded_value = to_base_systems(value, dimensions, catalog)
    candidates: List[Tuple[DimensionList, Any]] = [(simple, simple_value), (expanded, expanded_value)]
    candidates.extend((found, expanded_value) for found in find_derived_candidates(expanded, catalog, options))

    best, best_value = candidates[0]
    best_score = score_dimensions(best, catalog)
    for found, found_value in candidates[1:]:
        found_score = score_dimensions(found, catalog)
        if found_score > best_score:
            best, best_value, best_score = found, found_value, found_score

    logger.debug(
        "Simplified '%s' to '%s' (score %d, %d candidates)",
        format_dimensions(dimensions), format_dimensions(best), best_score, len(candidates),
    )
    return best, best_value
