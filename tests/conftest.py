# tests/conftest.py
import copy

import pytest

from measura.catalog import build_catalog, build_default_catalog, get_default_catalog


TINY_SOURCE = {
    "systems": {
        "si": {"name": "SI"},
    },
    "dimensions": {
        "length": {
            "name": "length",
            "baseUnit": "metre",
            "units": {
                "metre": {"name": "metre", "symbol": "m", "type": "si", "systems": ["si"]},
                "foot": {"name": "foot", "symbol": "ft", "type": "customary", "multiplier": 0.3048},
            },
        },
        "time": {
            "name": "time",
            "baseUnit": "second",
            "units": {
                "second": {"name": "second", "symbol": "s", "type": "si", "systems": ["si"]},
                "minute": {"name": "minute", "symbol": "min", "type": "customary", "multiplier": 60},
            },
        },
        "velocity": {
            "name": "velocity",
            "vector": True,
            "derived": "length/time",
            "baseUnit": "metrePerSecondVector",
            "units": {
                "metrePerSecondVector": {"name": "metre per second (vector)", "symbol": "m/s→",
                                         "type": "customary"},
            },
        },
    },
    "prefixes": {
        "kilo": {"symbol": "k", "type": "si", "base": 10, "power": 3},
    },
}


@pytest.fixture(scope="session")
def catalog():
    return get_default_catalog()


@pytest.fixture
def fresh_catalog():
    # Own copy, so tests can change options freely.
    return build_default_catalog()


@pytest.fixture
def tiny_source():
    return copy.deepcopy(TINY_SOURCE)


@pytest.fixture
def tiny_catalog(tiny_source):
    return build_catalog(tiny_source)


@pytest.fixture(autouse=True)
def _restore_default_options():
    yield
    get_default_catalog().reset_to_default_options()
