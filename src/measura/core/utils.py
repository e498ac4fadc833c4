"""
measura.core.utils
==================

Formatting helpers for displaying dimension lists in a readable scientific
form (e.g. 'km²·s⁻¹' or, in plain ASCII, 'km^2*s^-1').
"""

from __future__ import annotations

from fractions import Fraction
from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measura.core.dimension import Dimension

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def _sup(n: int) -> str:
    return "" if n == 1 else str(n).translate(_SUPERSCRIPTS)


def dimension_symbol(dimension: "Dimension") -> str:
    """Prefix symbol + unit symbol, without the power ('km', 'kg', 'm²' for squareMetre)."""
    unit = dimension.unit
    if dimension.prefix is None:
        return unit.display_symbol
    return f"{dimension.prefix.symbol}{unit.display_symbol}"


def format_dimension(dimension: "Dimension", *, ascii: bool = False) -> str:
    symbol = dimension_symbol(dimension)
    if dimension.power == 1:
        return symbol
    if ascii:
        return f"{symbol}^{dimension.power}"
    return f"{symbol}{_sup(dimension.power)}"


def format_dimensions(dimensions: Iterable["Dimension"], *, ascii: bool = False) -> str:
    """
    Join a dimension list in its stored order.

    Examples
    --------
    'm·s⁻¹' for [metre, second⁻¹]; with ``ascii=True`` -> 'm*s^-1'.
    """
    sep = "*" if ascii else "·"
    return sep.join(format_dimension(d, ascii=ascii) for d in dimensions)


def format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.15g}"
    if isinstance(value, Fraction) and value.denominator == 1:
        return str(value.numerator)
    return str(value)
