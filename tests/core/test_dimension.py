from fractions import Fraction

import pytest

from measura.core.dimension import Dimension, combine, convert, convert_from_base, convert_to_base
from measura.core.numeric import Vector
from measura.exceptions import ConversionError, IncommensurableError


@pytest.fixture
def u(catalog):
    return catalog.unit


@pytest.fixture
def p(catalog):
    return catalog.prefix


# -------------------------------
# The value type
# -------------------------------

def test_power_must_be_int(u):
    with pytest.raises(TypeError):
        Dimension(u("metre"), 1.5)
    with pytest.raises(TypeError):
        Dimension(u("metre"), True)


def test_str_and_repr(u, p):
    km2 = Dimension(u("metre"), 2, p("kilo"))
    assert str(km2) == "km²"
    assert repr(km2) == "Dimension('metre', 2, prefix='kilo')"
    assert repr(Dimension(u("second"), -1)) == "Dimension('second', -1)"


def test_derived_helpers(u):
    s = Dimension(u("second"), 2)
    assert s.invert().power == -2
    assert s.with_power(3).power == 3
    assert s.definition == "time"
    assert s.same_definition(Dimension(u("minute")))
    assert not s.same_definition(Dimension(u("metre")))


def test_is_base(u, p):
    assert Dimension(u("kilogram")).is_base
    assert not Dimension(u("gram")).is_base
    assert not Dimension(u("metre"), 1, p("kilo")).is_base


# -------------------------------
# To and from the base unit
# -------------------------------

def test_minutes_to_seconds(u):
    base, value = convert_to_base(5, Dimension(u("minute")))
    assert base == Dimension(u("second"))
    assert value == 300


def test_prefix_removed_once_per_power(u, p):
    base, value = convert_to_base(2, Dimension(u("metre"), 2, p("kilo")))
    assert base == Dimension(u("metre"), 2)
    assert value == 2_000_000


def test_negative_powers_invert_the_map(u, p):
    _, value = convert_to_base(1, Dimension(u("minute"), -1))
    assert value == pytest.approx(1 / 60)
    _, value = convert_to_base(1, Dimension(u("metre"), -1, p("kilo")))
    assert value == pytest.approx(0.001)


def test_base_dimension_is_untouched(u):
    dim = Dimension(u("second"), 3)
    assert convert_to_base(7, dim) == (dim, 7)


def test_from_base_requires_base(u):
    with pytest.raises(ConversionError):
        convert_from_base(1, Dimension(u("minute")), u("second"))


def test_from_base_rejects_other_definition(u):
    with pytest.raises(IncommensurableError):
        convert_from_base(1, Dimension(u("second")), u("metre"))


def test_from_base_applies_prefix(u, p):
    dim, value = convert_from_base(1500, Dimension(u("metre")), u("metre"), p("kilo"))
    assert dim == Dimension(u("metre"), 1, p("kilo"))
    assert value == pytest.approx(1.5)


# -------------------------------
# Unit to unit
# -------------------------------

def test_celsius_to_fahrenheit(u):
    dim, value = convert(20, Dimension(u("celsius")), u("fahrenheit"))
    assert dim.unit.key == "fahrenheit"
    assert value == pytest.approx(68)


def test_celsius_to_kelvin(u):
    _, value = convert(20, Dimension(u("celsius")), u("kelvin"))
    assert value == pytest.approx(293.15)


def test_kilogram_to_gram(u):
    _, value = convert(1, Dimension(u("kilogram")), u("gram"))
    assert value == pytest.approx(1000)


def test_fractions_convert_exactly(u):
    _, value = convert(Fraction(1), Dimension(u("foot")), u("inch"))
    assert value == Fraction(12)
    assert isinstance(value, Fraction)


def test_same_unit_returns_input(u):
    dim = Dimension(u("metre"))
    assert convert(4, dim, u("metre")) == (dim, 4)


def test_convert_between_definitions_raises(u):
    with pytest.raises(IncommensurableError):
        convert(1, Dimension(u("metre")), u("second"))


def test_vectors_convert_without_offset(u):
    _, value = convert(Vector(1, 2), Dimension(u("foot")), u("metre"))
    assert value.isclose(Vector(0.3048, 0.6096))


def test_vectors_cannot_take_an_offset(u):
    with pytest.raises(ConversionError):
        convert(Vector(1, 2), Dimension(u("celsius")), u("kelvin"))


# -------------------------------
# combine
# -------------------------------

def test_combine_converts_into_first_unit(u):
    dim, value = combine(30, Dimension(u("inch")), Dimension(u("foot"), -1))
    assert dim == Dimension(u("inch"), 0)
    assert value == pytest.approx(2.5)


def test_combine_sums_powers(u):
    dim, value = combine(1, Dimension(u("minute")), Dimension(u("second"), 2))
    assert dim == Dimension(u("minute"), 3)
    assert value == pytest.approx(1 / 3600)


def test_combine_requires_same_definition(u):
    with pytest.raises(IncommensurableError, match="combine"):
        combine(1, Dimension(u("metre")), Dimension(u("second")))


@pytest.mark.parametrize("definition", ["length", "mass", "time", "temperature", "speed", "energy"])
def test_round_trip_through_base(catalog, definition):
    base = catalog.base_unit_of(definition)
    for unit in catalog.units(definition):
        _, value = convert(42.5, Dimension(base), unit)
        _, back = convert(value, Dimension(unit), base)
        assert back == pytest.approx(42.5)


def test_merge_order_does_not_change_result(u):
    parts = [Dimension(u("metre")), Dimension(u("metre"), 2), Dimension(u("metre"), -1)]
    first, _ = combine(1, *parts[:2])
    first, _ = combine(1, first, parts[2])
    second, _ = combine(1, parts[2], parts[0])
    second, _ = combine(1, second, parts[1])
    assert first == second == Dimension(u("metre"), 2)
