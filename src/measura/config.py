"""
measura.config
==============

Options that tune simplification and prefix selection.

A single `MeasurementOptions` instance lives on each catalog
(`Catalog.options`); algebra functions fall back to it when no explicit
options are passed.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from math import isfinite
from typing import Any, Tuple

from measura.exceptions import ConfigurationError

__all__ = ["MeasurementOptions"]


@dataclass(frozen=True)
class MeasurementOptions:
    """
    Configuration surface of the measurement algebra.

    Parameters
    ----------
    allow_derived_dimensions
        Search for derived dimension definitions (e.g. speed) when simplifying.
    allow_vector_dimensions
        Include vector dimension definitions in catalog lookups.
    use_rare_prefixes
        Consider prefixes flagged as rare (centi, deca, ...) when choosing a prefix.
    use_unofficial_prefixes
        Consider unofficial SI prefixes.
    prefer_binary_prefixes
        Use binary prefixes (kibi, mebi, ...) rather than SI prefixes for binary units.
    upper_prefix_value
        Upper bound of the readable magnitude window.
    lower_prefix_value
        Lower bound of the readable magnitude window.
    having_prefix_score_offset
        Penalty added to the rating of any candidate that carries a prefix.
    allow_reordering_dimensions
        Allow the prefixed dimension to be moved to the start of the list.
    use_automatic_prefix_management
        Tidy prefixes of quantity products and quotients automatically.
    allowed_rare_prefix_combinations
        ``(unit_key, prefix_key)`` pairs that are always compatible, rare or not.

    Raises
    ------
    ValueError
        If a bound or the prefix penalty is not a finite number.
    """

    allow_derived_dimensions: bool = True
    allow_vector_dimensions: bool = False
    use_rare_prefixes: bool = False
    use_unofficial_prefixes: bool = False
    prefer_binary_prefixes: bool = True
    upper_prefix_value: float = 1000.0
    lower_prefix_value: float = 1.0
    having_prefix_score_offset: float = 10.0
    allow_reordering_dimensions: bool = True
    use_automatic_prefix_management: bool = False
    allowed_rare_prefix_combinations: Tuple[Tuple[str, str], ...] = field(
        default=(("metre", "centi"),)
    )

    def __post_init__(self) -> None:
        for name in ("upper_prefix_value", "lower_prefix_value", "having_prefix_score_offset"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not isfinite(value):
                msg = f"{name} must be a finite number, got {value!r}"
                raise ValueError(msg)
        # Normalise lists from callers into hashable tuples.
        pairs = tuple((str(u), str(p)) for u, p in self.allowed_rare_prefix_combinations)
        object.__setattr__(self, "allowed_rare_prefix_combinations", pairs)

    def replace(self, **changes: Any) -> "MeasurementOptions":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)

    def check_prefix_bounds(self) -> None:
        """
        Ensure the readable window is non-empty.

        Raises
        ------
        ConfigurationError
            If ``upper_prefix_value <= lower_prefix_value``.
        """
        if self.upper_prefix_value <= self.lower_prefix_value:
            msg = (
                f"upper_prefix_value ({self.upper_prefix_value}) must be greater than "
                f"lower_prefix_value ({self.lower_prefix_value})"
            )
            raise ConfigurationError(msg)

    def is_rare_combination_allowed(self, unit_key: str, prefix_key: str) -> bool:
        return (unit_key, prefix_key) in self.allowed_rare_prefix_combinations
