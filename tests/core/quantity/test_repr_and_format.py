from fractions import Fraction

import pytest

from measura import Quantity


# -------------------------------
# __repr__: pretty printing
# -------------------------------

def test_repr_uses_symbols_and_superscripts():
    q = Quantity(3, [("metre", 2, "kilo"), ("second", -1)])
    assert repr(q) == "3 km²·s⁻¹"


def test_repr_of_dimensionless_is_just_the_value():
    assert repr(Quantity(5)) == "5"
    assert repr(Quantity(Fraction(1, 3))) == "1/3"


def test_repr_trims_float_noise():
    assert repr(Quantity(0.1 + 0.2, "metre")) == "0.3 m"


def test_repr_keeps_stored_order():
    q = Quantity(1, [("second", -1), "metre"])
    assert repr(q) == "1 s⁻¹·m"


# -------------------------------
# __format__
# -------------------------------

@pytest.fixture
def speed():
    return Quantity(36, ["km", ("hour", -1)])


def test_format_default_matches_repr(speed):
    assert f"{speed}" == repr(speed)
    assert f"{speed:native}" == "36 km·h⁻¹"


def test_format_base(speed):
    assert f"{speed:base}" == "10 m·s⁻¹"


def test_format_simplified(speed):
    assert f"{speed:simplified}" == "10 m/s"
    assert f"{Quantity(1_500_000, 'metre'):simplified}" == "1.5 Mm"


def test_format_ascii(speed):
    assert f"{speed:ascii}" == "36 km*h^-1"
    assert format(Quantity(2), "ascii") == "2"


def test_format_is_case_insensitive(speed):
    assert f"{speed:BASE}" == "10 m·s⁻¹"


def test_unknown_format_spec_raises(speed):
    with pytest.raises(ValueError):
        f"{speed:fancy}"
