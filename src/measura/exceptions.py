"""
measura.exceptions
==================

Exception hierarchy for the measurement algebra.

- MeasurementError: base class for every error raised by measura
- CatalogIntegrityError: inconsistent catalog data (missing base unit, bad derived entry)
- UnknownEntityError: a unit, dimension, prefix or system name could not be resolved
- ConversionError: a conversion precondition was violated
- IncommensurableError: quantities with different dimensional structure were combined
- ConfigurationError: options that cannot produce a meaningful result
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measura.core.dimension import Dimension

__all__ = [
    "CatalogIntegrityError",
    "ConfigurationError",
    "ConversionError",
    "IncommensurableError",
    "MeasurementError",
    "UnknownEntityError",
]


class MeasurementError(Exception):
    """Base exception for all measura errors."""

    pass


class CatalogIntegrityError(MeasurementError, ValueError):
    """
    Raised when catalog data is internally inconsistent.

    This covers dimension definitions without a base unit, derived entries that
    name an unknown definition, and derived dividers other than ``*`` or ``/``.
    """

    pass


class UnknownEntityError(MeasurementError, KeyError):
    """Raised when a catalog lookup finds no entity for the given name."""

    def __init__(self, kind: str, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"Unknown {kind}: {name!r}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0])


class ConversionError(MeasurementError, ValueError):
    """Raised when a dimension conversion precondition is violated."""

    pass


class IncommensurableError(MeasurementError, TypeError):
    """
    Raised when quantities do not share the same dimensional structure.

    Parameters
    ----------
    left
        Dimensions of the receiving quantity (or the convertible source).
    right
        Dimensions of the other operand (or the conversion target).
    operation
        Name of the attempted operation, used in the message.
    """

    def __init__(
        self,
        left: Sequence["Dimension"],
        right: Sequence["Dimension"],
        operation: str = "convert",
    ) -> None:
        self.left = tuple(left)
        self.right = tuple(right)
        self.operation = operation
        left_s = "·".join(str(d) for d in self.left) or "1"
        right_s = "·".join(str(d) for d in self.right) or "1"
        super().__init__(
            f"Cannot {operation} incommensurable dimensions: '{left_s}' and '{right_s}'"
        )


class ConfigurationError(MeasurementError, ValueError):
    """Raised when measurement options cannot be used as configured."""

    pass
