from fractions import Fraction

import pytest

import measura.core.utils as utils
from measura.core.dimension import Dimension


# -------------------------------
# _sup
# -------------------------------

@pytest.mark.parametrize("n, expected", [
    (1, ""),
    (2, "²"),
    (10, "¹⁰"),
    (-1, "⁻¹"),
    (-3, "⁻³"),
    (0, "⁰"),
])
def test_sup(n, expected):
    assert utils._sup(n) == expected


# -------------------------------
# Dimension lists
# -------------------------------

def test_symbol_without_prefix(tiny_catalog):
    dim = Dimension(tiny_catalog.unit("metre"))
    assert utils.dimension_symbol(dim) == "m"


def test_prefixed_symbols(catalog):
    dim = Dimension(catalog.unit("second"), -2, catalog.prefix("micro"))
    assert utils.format_dimension(dim) == "µs⁻²"
    assert utils.format_dimension(dim, ascii=True) == "µs^-2"


def test_format_dimensions_joins_in_order(catalog):
    dims = [Dimension(catalog.unit("kilogram")), Dimension(catalog.unit("metre"), 2),
            Dimension(catalog.unit("second"), -2)]
    assert utils.format_dimensions(dims) == "kg·m²·s⁻²"
    assert utils.format_dimensions(dims, ascii=True) == "kg*m^2*s^-2"
    assert utils.format_dimensions([]) == ""


# -------------------------------
# Values
# -------------------------------

@pytest.mark.parametrize("value, expected", [
    (3, "3"),
    (2.5, "2.5"),
    (0.1 + 0.2, "0.3"),
    (1e-20, "1e-20"),
    (Fraction(12), "12"),
    (Fraction(1, 3), "1/3"),
])
def test_format_value(value, expected):
    assert utils.format_value(value) == expected
