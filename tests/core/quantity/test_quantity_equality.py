import pytest

from measura import Quantity, Vector
from measura.exceptions import IncommensurableError


# -------------------------------
# Ordering
# -------------------------------

def test_ordering_converts_the_right_operand():
    assert Quantity(59, "second") < Quantity(1, "minute")
    assert Quantity(61, "second") > Quantity(1, "minute")
    assert Quantity(60, "second") <= Quantity(1, "minute")
    assert Quantity(60, "second") >= Quantity(1, "minute")
    assert not Quantity(60, "second") < Quantity(1, "minute")


def test_ordering_tolerates_float_noise():
    a = Quantity(0.1 + 0.2, "metre")
    b = Quantity(0.3, "metre")
    assert a <= b and a >= b
    assert not a > b


def test_ordering_incommensurable_raises():
    with pytest.raises(IncommensurableError):
        Quantity(1, "metre") < Quantity(1, "second")


def test_dimensionless_compares_with_numbers():
    assert Quantity(2) > 1
    with pytest.raises(TypeError):
        Quantity(2, "metre") > 1


# -------------------------------
# Equality
# -------------------------------

@pytest.mark.regression(reason="Equality compares stored dimensions, not converted values")
def test_equal_values_in_other_units_are_not_equal():
    assert Quantity(60, "second") != Quantity(1, "minute")
    assert Quantity(60, "second") == Quantity(1, "minute").convert("second")


def test_equality_ignores_dimension_order():
    a = Quantity(1, ["metre", ("second", -1)])
    b = Quantity(1, [("second", -1), "metre"])
    assert a == b


def test_equality_within_tolerance():
    assert Quantity(0.1 + 0.2, "metre") == Quantity(0.3, "metre")
    assert Quantity(1.0, "metre") != Quantity(1.001, "metre")


def test_vector_quantities_compare_by_components():
    assert Quantity(Vector(1, 2), "metre") == Quantity(Vector(1, 2), "metre")
    assert Quantity(Vector(1, 2), "metre") != Quantity(Vector(2, 1), "metre")


def test_equality_with_other_types():
    assert Quantity(1, "metre") != 1
    assert Quantity(1, "metre") != "1 m"


def test_quantities_are_unhashable():
    with pytest.raises(TypeError):
        hash(Quantity(1, "metre"))
    with pytest.raises(TypeError):
        {Quantity(1, "metre")}
