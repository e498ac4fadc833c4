import pytest

from measura.config import MeasurementOptions
from measura.core.dimension import Dimension
from measura.core.prefix_selection import find_prefix, is_compatible, rate_prefix, tidy_prefixes
from measura.exceptions import ConfigurationError

DEFAULTS = MeasurementOptions()


@pytest.fixture
def u(catalog):
    return catalog.unit


@pytest.fixture
def p(catalog):
    return catalog.prefix


def prefix_key(prefix):
    return prefix.key if prefix is not None else None


# -------------------------------
# Compatibility
# -------------------------------

def test_si_prefixes_fit_si_units(u, p):
    assert is_compatible(p("kilo"), u("metre"), DEFAULTS)
    assert not is_compatible(p("kilo"), u("foot"), DEFAULTS)


def test_embedded_prefix_blocks_others(u, p):
    assert not is_compatible(p("mega"), u("kilogram"), DEFAULTS)


def test_rare_prefixes_need_option_or_whitelist(u, p):
    assert not is_compatible(p("deci"), u("second"), DEFAULTS)
    assert is_compatible(p("deci"), u("second"), DEFAULTS.replace(use_rare_prefixes=True))
    assert is_compatible(p("centi"), u("metre"), DEFAULTS)


def test_binary_units_follow_preference(u, p):
    assert is_compatible(p("kibi"), u("byte"), DEFAULTS)
    assert not is_compatible(p("kilo"), u("byte"), DEFAULTS)

    decimal = DEFAULTS.replace(prefer_binary_prefixes=False)
    assert is_compatible(p("kilo"), u("byte"), decimal)
    assert not is_compatible(p("kibi"), u("byte"), decimal)


def test_unofficial_prefixes_need_option(u, p):
    assert not is_compatible(p("myria"), u("metre"), DEFAULTS)
    assert is_compatible(p("myria"), u("metre"), DEFAULTS.replace(use_unofficial_prefixes=True))


# -------------------------------
# Rating
# -------------------------------

def test_rating_inside_and_outside_window(u, p):
    assert rate_prefix(500, None, u("metre"), DEFAULTS) == 500
    assert rate_prefix(5000, None, u("metre"), DEFAULTS) == 1000
    assert rate_prefix(5000, p("kilo"), u("metre"), DEFAULTS) == pytest.approx(15)


def test_default_prefix_rates_zero(u, p):
    assert rate_prefix(3, p("kilo"), u("gram"), DEFAULTS) == 0


# -------------------------------
# find_prefix
# -------------------------------

@pytest.mark.parametrize(
    "value, unit, expected",
    [
        (1.5e6, "metre", "mega"),
        (1500, "metre", "kilo"),
        (5, "metre", None),
        (0.5, "metre", "milli"),
        (0.05, "metre", "centi"),
        (0.05, "second", "milli"),
        (2048, "bit", "kibi"),
        (1e6, "kilogram", None),
        (5000, "foot", None),
    ],
)
def test_find_prefix(u, value, unit, expected):
    assert prefix_key(find_prefix(value, u(unit))) == expected


def test_find_prefix_counts_power(u):
    assert prefix_key(find_prefix(2e6, u("metre"), power=2)) == "kilo"


def test_find_prefix_decimal_bytes(u):
    opts = DEFAULTS.replace(prefer_binary_prefixes=False)
    assert prefix_key(find_prefix(2048, u("bit"), options=opts)) == "kilo"


def test_find_prefix_rejects_empty_window(u):
    opts = DEFAULTS.replace(lower_prefix_value=10, upper_prefix_value=1)
    with pytest.raises(ConfigurationError):
        find_prefix(5, u("metre"), options=opts)


# -------------------------------
# tidy_prefixes
# -------------------------------

def test_tidy_uses_default_prefix(u, p):
    dims, value = tidy_prefixes(1000, [Dimension(u("gram"))])
    assert dims == [Dimension(u("gram"), 1, p("kilo"))]
    assert value == pytest.approx(1)


def test_tidy_strips_existing_prefixes(u, p):
    dims, value = tidy_prefixes(1500, [Dimension(u("metre"), 1, p("milli"))])
    assert dims == [Dimension(u("metre"))]
    assert value == pytest.approx(1.5)


def test_tidy_skips_dimensionless_and_reorders(u, p):
    dims, value = tidy_prefixes(5000, [Dimension(u("radian")), Dimension(u("metre"))])
    assert dims == [Dimension(u("metre"), 1, p("kilo")), Dimension(u("radian"))]
    assert value == pytest.approx(5)


def test_tidy_keeps_order_when_reordering_disabled(u, p):
    opts = DEFAULTS.replace(allow_reordering_dimensions=False)
    dims, _ = tidy_prefixes(5000, [Dimension(u("radian")), Dimension(u("metre"))], options=opts)
    assert dims == [Dimension(u("radian")), Dimension(u("metre"), 1, p("kilo"))]
