"""
Measura: unit conversion, simplification and prefix selection over a catalog
of measurement systems, dimensions, units and prefixes.

A `Quantity` pairs a numeric value with an ordered list of dimensions (units
raised to integer powers, optionally prefixed). Quantities convert between
units of the same kind, simplify products such as m·s⁻¹ into derived units,
and pick readable prefixes.

This module exposes a minimal, stable public API. The default catalog is built
lazily on first use to avoid import-time work.
"""

from importlib import metadata as _metadata
from typing import Any

from measura.catalog import Catalog, build_catalog, build_default_catalog, get_default_catalog
from measura.config import MeasurementOptions
from measura.core.dimension import Dimension
from measura.core.numeric import Vector
from measura.core.quantity import Quantity
from measura.exceptions import (
    CatalogIntegrityError,
    ConfigurationError,
    ConversionError,
    IncommensurableError,
    MeasurementError,
    UnknownEntityError,
)

__license__ = "MIT"

# Try to read the installed package version first; fall back to the project file for local dev.
try:
    __version__ = _metadata.version("measura")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public names exposed by the package. Keep this minimal and stable.
__all__ = [
    "__version__",
    "__license__",
    "Catalog",
    "CatalogIntegrityError",
    "ConfigurationError",
    "ConversionError",
    "DEFAULT_CATALOG",
    "Dimension",
    "IncommensurableError",
    "MeasurementError",
    "MeasurementOptions",
    "Quantity",
    "UnknownEntityError",
    "Vector",
    "build_catalog",
    "build_default_catalog",
    "get_default_catalog",
]


def __getattr__(name: str) -> Any:
    if name == "DEFAULT_CATALOG":
        return get_default_catalog()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
