import math
from fractions import Fraction

import pytest

from measura import Quantity, Vector
from measura.exceptions import ConversionError, IncommensurableError, UnknownEntityError


# -------------------------------
# Construction
# -------------------------------

def test_accepts_names_units_and_tuples(catalog):
    q = Quantity(36, ["km", ("hour", -1)])
    assert [(d.unit.key, d.power, d.prefix.key if d.prefix else None) for d in q.dimensions] == [
        ("metre", 1, "kilo"), ("hour", -1, None),
    ]
    assert Quantity(2, catalog.unit("second")).dimensions[0].unit.key == "second"
    assert Quantity(2, ("metre", 2, "centi")).dimensions[0].prefix.key == "centi"


def test_dimensionless_by_default(catalog):
    q = Quantity(5)
    assert q.is_dimensionless
    assert q.catalog is catalog


def test_rejects_non_numeric_values():
    with pytest.raises(TypeError):
        Quantity("1", "metre")


def test_unknown_unit_name():
    with pytest.raises(UnknownEntityError):
        Quantity(1, "furlong")


@pytest.mark.regression
@pytest.mark.parametrize("dims", [[("metre", 2.5)], [("metre", 2.0, "kilo")], ("metre", 2.5)])
def test_rejects_non_integer_powers(dims):
    with pytest.raises(TypeError):
        Quantity(1, dims)


# -------------------------------
# convert
# -------------------------------

def test_minutes_to_seconds():
    q = Quantity(5, "minute").convert("second")
    assert q.value == 300
    assert repr(q) == "300 s"


def test_kilometres_per_hour_to_metres_per_second():
    q = Quantity(36, "kilometrePerHour").convert("metrePerSecond")
    assert math.isclose(q.value, 10)


def test_convert_only_touches_matching_dimensions():
    q = Quantity(1500, ["metre", ("second", -1)]).convert("km")
    assert repr(q) == "1.5 km·s⁻¹"


def test_convert_with_explicit_prefix():
    q = Quantity(2.5, "metre").convert("metre", prefix="milli")
    assert math.isclose(q.value, 2500)


def test_convert_to_unrelated_unit_raises():
    with pytest.raises(IncommensurableError):
        Quantity(1, "metre").convert("second")


def test_convert_to_quantity_structurally():
    q = Quantity(1, "foot").convert(Quantity(1, "inch"))
    assert math.isclose(q.value, 12)
    assert q.dimensions[0].unit.key == "inch"


def test_convert_to_quantity_through_base_units():
    q = Quantity(10, ["metre", ("second", -1)]).convert(Quantity(1, "kilometrePerHour"))
    assert math.isclose(q.value, 36)
    assert [d.unit.key for d in q.dimensions] == ["kilometrePerHour"]


def test_convert_to_incommensurable_quantity_raises():
    with pytest.raises(IncommensurableError):
        Quantity(10, "metre").convert(Quantity(1, "kilometrePerHour"))


def test_temperatures_keep_their_offset():
    q = Quantity(100, "celsius").convert("fahrenheit")
    assert math.isclose(q.value, 212)


def test_fractions_stay_exact():
    q = Quantity(Fraction(1), "foot").convert("inch")
    assert q.value == Fraction(12)
    assert repr(q) == "12 in"


@pytest.mark.regression
def test_repeating_ratios_stay_exact():
    q = Quantity(Fraction(36), "kilometrePerHour").convert("metrePerSecond")
    assert q.value == Fraction(10)
    back = q.convert("knot")
    assert back.value == Fraction(10) / Fraction(463, 900)


def test_fraction_multipliers_keep_ints_out_of_fractions():
    q = Quantity(36, "kilometrePerHour").convert("metrePerSecond")
    assert isinstance(q.value, float)
    assert math.isclose(q.value, 10)


def test_vectors_convert_componentwise():
    q = Quantity(Vector(1, 2), "foot").convert("metre")
    assert q.value.isclose(Vector(0.3048, 0.6096))


def test_vectors_reject_offset_units():
    with pytest.raises(ConversionError):
        Quantity(Vector(1, 2), "celsius").convert("kelvin")


# -------------------------------
# Base units
# -------------------------------

def test_convert_to_base():
    q = Quantity(36, ["km", ("hour", -1)]).convert_to_base()
    assert repr(q) == "10 m·s⁻¹"


def test_convert_from_base():
    q = Quantity(300, "second").convert_from_base("minute")
    assert repr(q) == "5 min"


def test_convert_from_base_requires_base_dimensions():
    with pytest.raises(ConversionError):
        Quantity(5, "minute").convert_from_base("hour")


def test_kilogram_round_trip_through_gram():
    grams = Quantity(1, "kilogram").convert("gram")
    assert math.isclose(grams.value, 1000)
    assert repr(grams.tidy_prefixes()) == "1 kg"
