from typing import TYPE_CHECKING, Any

from measura.catalog.builder import build_catalog, parse_derived
from measura.catalog.entities import (
    DimensionDefinition,
    MeasurementSystem,
    Prefix,
    PrefixKind,
    Unit,
    UnitKind,
)
from measura.catalog.registry import Catalog

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measura.config import MeasurementOptions

__all__ = [
    "Catalog",
    "DEFAULT_CATALOG",
    "DimensionDefinition",
    "MeasurementSystem",
    "Prefix",
    "PrefixKind",
    "Unit",
    "UnitKind",
    "build_catalog",
    "build_default_catalog",
    "get_default_catalog",
    "parse_derived",
]

_default_catalog: "Catalog | None" = None


def build_default_catalog(options: "MeasurementOptions | None" = None) -> Catalog:
    """Build a fresh catalog from the bundled corpus."""
    from measura.catalog.data import DEFAULT_SOURCE  # local import

    return build_catalog(DEFAULT_SOURCE, options)


def get_default_catalog() -> Catalog:
    # Built on first use so that importing measura stays cheap.
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = build_default_catalog()
    return _default_catalog


# Lazy access helpers -------------------------------------------------------

def __getattr__(name: str) -> Any:
    """Accessing 'DEFAULT_CATALOG' builds the shared catalog on first use."""
    if name == "DEFAULT_CATALOG":
        return get_default_catalog()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + ["DEFAULT_CATALOG"])
