"""
measura.catalog.registry
========================

Read-only lookup over the measurement corpus.

A `Catalog` owns every system, dimension definition, unit and prefix and
resolves the keys the records use to reference each other. Lookups accept
the key, the display name, the plural, the symbol or any alias; an exact
match wins over a case-insensitive one.
"""

from __future__ import annotations

import unicodedata
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, TypeVar

from measura.catalog.entities import DimensionDefinition, MeasurementSystem, Prefix, Unit
from measura.config import MeasurementOptions
from measura.exceptions import UnknownEntityError

__all__ = ["Catalog", "normalize_name"]

T = TypeVar("T")


def normalize_name(s: str) -> str:
    """Strip surrounding whitespace and compose Unicode (NFC), so "µ" typed two ways matches."""
    return unicodedata.normalize("NFC", s.strip())


class _NameIndex:
    """Maps every spelling of a record to its key. First registration wins."""

    def __init__(self) -> None:
        self._exact: Dict[str, str] = {}
        self._folded: Dict[str, str] = {}

    def add(self, key: str, spellings: Iterable[str]) -> None:
        for spelling in spellings:
            if not spelling:
                continue
            spelling = normalize_name(spelling)
            self._exact.setdefault(spelling, key)
            self._folded.setdefault(spelling.casefold(), key)

    def find_exact(self, name: str) -> Optional[str]:
        return self._exact.get(normalize_name(name))

    def find(self, name: str) -> Optional[str]:
        key = self.find_exact(name)
        if key is None:
            key = self._folded.get(normalize_name(name).casefold())
        return key


class Catalog:
    """
    Immutable collection of measurement records plus the options that steer
    the algebra built on top of it.

    Build one with `measura.catalog.build_catalog`; the shared default lives
    at `measura.catalog.DEFAULT_CATALOG`.
    """

    def __init__(
        self,
        systems: Mapping[str, MeasurementSystem],
        definitions: Mapping[str, DimensionDefinition],
        units: Mapping[str, Unit],
        prefixes: Mapping[str, Prefix],
        fundamentals: Mapping[str, Tuple[Tuple[str, int], ...]],
        options: Optional[MeasurementOptions] = None,
    ) -> None:
        self._systems = dict(systems)
        self._definitions = dict(definitions)
        self._units = dict(units)
        self._prefixes = dict(prefixes)
        self._fundamentals = dict(fundamentals)
        self.options = options if options is not None else MeasurementOptions()

        self._system_index = _NameIndex()
        for s in self._systems.values():
            self._system_index.add(s.key, (s.key, s.name))

        self._definition_index = _NameIndex()
        for d in self._definitions.values():
            self._definition_index.add(d.key, (d.key, d.name, *d.other_names, d.symbol, *d.other_symbols))

        # Keys and names are indexed before symbols so that a name never loses
        # to another unit's symbol in the case-insensitive table.
        self._unit_index = _NameIndex()
        for u in self._units.values():
            self._unit_index.add(u.key, (u.key, u.name, u.plural, *u.other_names))
        for u in self._units.values():
            self._unit_index.add(u.key, (u.symbol, *u.other_symbols))

        self._prefix_index = _NameIndex()
        for p in self._prefixes.values():
            self._prefix_index.add(p.key, (p.key, p.symbol, *p.other_names))

    def __repr__(self) -> str:
        return (
            f"Catalog({len(self._definitions)} definitions, {len(self._units)} units, "
            f"{len(self._prefixes)} prefixes)"
        )

    # -------------------------- options ------------------------------------
    def reset_to_default_options(self) -> None:
        self.options = MeasurementOptions()

    # -------------------------- lookups ------------------------------------
    @staticmethod
    def _lookup(kind: str, index: _NameIndex, records: Mapping[str, T], name: str) -> T:
        key = name if name in records else index.find(name)
        if key is None:
            raise UnknownEntityError(kind, name)
        return records[key]

    def system(self, name: str) -> MeasurementSystem:
        return self._lookup("system", self._system_index, self._systems, name)

    def definition(self, name: str) -> DimensionDefinition:
        return self._lookup("dimension definition", self._definition_index, self._definitions, name)

    def unit(self, name: str) -> Unit:
        return self._lookup("unit", self._unit_index, self._units, name)

    def prefix(self, name: str) -> Prefix:
        return self._lookup("prefix", self._prefix_index, self._prefixes, name)

    def has_unit(self, name: str) -> bool:
        return name in self._units or self._unit_index.find(name) is not None

    def definition_of(self, unit: Unit) -> DimensionDefinition:
        return self._definitions[unit.definition]

    def base_unit_of(self, definition: DimensionDefinition | str) -> Unit:
        if isinstance(definition, str):
            definition = self.definition(definition)
        return self._units[definition.base_unit]

    def fundamental_decomposition(self, definition: DimensionDefinition | str) -> Tuple[Tuple[str, int], ...]:
        """``(fundamental_definition_key, power)`` pairs; a fundamental definition maps to itself."""
        key = definition if isinstance(definition, str) else definition.key
        try:
            return self._fundamentals[key]
        except KeyError:
            raise UnknownEntityError("dimension definition", key) from None

    def resolve_prefixed_unit(self, text: str) -> Tuple[Unit, Optional[Prefix]]:
        """
        Resolve a possibly prefixed unit spelling.

        ``"metre"`` → (metre, None); ``"kilometre"`` and ``"km"`` → (metre, kilo).
        A known unit always wins over a prefix split, so ``"min"`` stays a
        minute and never becomes milli-inch. Stacked prefixes are not split.
        """
        if self.has_unit(text):
            return self.unit(text), None

        spelling = normalize_name(text)
        candidates: List[Tuple[str, Prefix]] = []
        for p in self._prefixes.values():
            for head in (p.key, p.symbol, *p.other_names):
                if head and spelling.startswith(head) and len(spelling) > len(head):
                    candidates.append((head, p))
        # longest prefix first: "Mi" before "M", "da" before "d"
        candidates.sort(key=lambda c: len(c[0]), reverse=True)
        for head, p in candidates:
            rest = spelling[len(head):]
            key = rest if rest in self._units else self._unit_index.find_exact(rest)
            if key is None:
                continue
            unit = self._units[key]
            if not unit.accepts_prefixes:
                continue
            return unit, p
        raise UnknownEntityError("unit", text)

    # -------------------------- listings -----------------------------------
    def systems(self) -> List[MeasurementSystem]:
        return list(self._systems.values())

    def root_systems(self) -> List[MeasurementSystem]:
        return [s for s in self._systems.values() if s.is_root]

    def child_systems(self, system: MeasurementSystem | str) -> List[MeasurementSystem]:
        key = system if isinstance(system, str) else system.key
        return [s for s in self._systems.values() if s.parent == key]

    def ancestors(self, system: MeasurementSystem | str) -> List[MeasurementSystem]:
        """The chain from the root system down to (and including) ``system``."""
        current: Optional[MeasurementSystem] = self.system(system) if isinstance(system, str) else system
        chain: List[MeasurementSystem] = []
        while current is not None:
            chain.append(current)
            current = self._systems.get(current.parent) if current.parent else None
        chain.reverse()
        return chain

    def all_definitions(self) -> List[DimensionDefinition]:
        return list(self._definitions.values())

    def definitions(self) -> List[DimensionDefinition]:
        """Definitions visible under the current options (vector ones hidden unless allowed)."""
        allow_vector = self.options.allow_vector_dimensions
        return [d for d in self._definitions.values() if allow_vector or not d.vector]

    def derived_definitions(self, options: Optional[MeasurementOptions] = None) -> List[DimensionDefinition]:
        """
        Derived definitions the resolver may substitute under ``options``
        (the catalog's own by default); empty when derived dimensions are disabled.
        """
        options = options if options is not None else self.options
        if not options.allow_derived_dimensions:
            return []
        return [
            d for d in self._definitions.values()
            if d.is_derived and (options.allow_vector_dimensions or not d.vector)
        ]

    def units(self, definition: DimensionDefinition | str | None = None) -> List[Unit]:
        if definition is None:
            return list(self._units.values())
        if isinstance(definition, str):
            definition = self.definition(definition)
        return [self._units[k] for k in definition.units]

    def units_in_system(self, system: MeasurementSystem | str) -> List[Unit]:
        key = system if isinstance(system, str) else system.key
        return [u for u in self._units.values() if key in u.systems]

    def prefixes(self) -> List[Prefix]:
        return list(self._prefixes.values())
