"""
measura.catalog.data
====================

The bundled measurement corpus, in the same shape as a ``systems.json``
corpus file: ``{"systems": ..., "dimensions": ..., "prefixes": ...}``.

Unit conversion into the base unit of its dimension is
``base = value * multiplier + offset``; a `Fraction` multiplier is kept exact.
Base units of derived dimensions are coherent with the base units of their
components (1 N = 1 kg·m·s⁻²).
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Dict

__all__ = ["DEFAULT_SOURCE"]

_FAHRENHEIT = 5.0 / 9.0

DEFAULT_SOURCE: Dict[str, Any] = {
    "systems": {
        "metric": {"name": "Metric"},
        "si": {"name": "International System of Units", "inherits": "metric"},
        "imperial": {"name": "Imperial"},
        "usCustomary": {"name": "United States customary", "inherits": "imperial"},
        "nautical": {"name": "Nautical"},
        "information": {"name": "Information"},
    },
    "dimensions": {
        # --- fundamental -----------------------------------------------------
        "length": {
            "name": "length",
            "symbol": "L",
            "otherNames": ["distance"],
            "baseUnit": "metre",
            "units": {
                "metre": {"name": "metre", "plural": "metres", "symbol": "m", "type": "si",
                          "otherNames": ["meter"], "systems": ["si"], "multiplier": 1},
                "inch": {"name": "inch", "plural": "inches", "symbol": "in", "type": "customary",
                         "systems": ["imperial", "usCustomary"], "multiplier": 0.0254},
                "foot": {"name": "foot", "plural": "feet", "symbol": "ft", "type": "customary",
                         "systems": ["imperial", "usCustomary"], "multiplier": 0.3048},
                "yard": {"name": "yard", "plural": "yards", "symbol": "yd", "type": "customary",
                         "systems": ["imperial", "usCustomary"], "multiplier": 0.9144},
                "mile": {"name": "mile", "plural": "miles", "symbol": "mi", "type": "customary",
                         "systems": ["imperial", "usCustomary"], "multiplier": 1609.344},
                "nauticalMile": {"name": "nautical mile", "plural": "nautical miles", "symbol": "NM",
                                 "type": "customary", "systems": ["nautical"], "multiplier": 1852},
            },
        },
        "mass": {
            "name": "mass",
            "symbol": "M",
            "baseUnit": "kilogram",
            "units": {
                "kilogram": {"name": "kilogram", "plural": "kilograms", "symbol": "kg", "type": "si",
                             "systems": ["si"], "multiplier": 1, "prefixFreeName": "gram"},
                "gram": {"name": "gram", "plural": "grams", "symbol": "g", "type": "si",
                         "systems": ["si"], "multiplier": 0.001, "prefixName": "kilo"},
                "tonne": {"name": "tonne", "plural": "tonnes", "symbol": "t", "type": "si",
                          "otherNames": ["metric ton"], "systems": ["metric"], "multiplier": 1000},
                "pound": {"name": "pound", "plural": "pounds", "symbol": "lb", "type": "customary",
                          "systems": ["imperial", "usCustomary"], "multiplier": 0.45359237},
                "ounce": {"name": "ounce", "plural": "ounces", "symbol": "oz", "type": "customary",
                          "systems": ["imperial", "usCustomary"], "multiplier": 0.028349523125},
            },
        },
        "time": {
            "name": "time",
            "symbol": "T",
            "baseUnit": "second",
            "units": {
                "second": {"name": "second", "plural": "seconds", "symbol": "s", "type": "si",
                           "systems": ["si"], "multiplier": 1},
                "minute": {"name": "minute", "plural": "minutes", "symbol": "min", "type": "customary",
                           "systems": ["metric"], "multiplier": 60},
                "hour": {"name": "hour", "plural": "hours", "symbol": "h", "type": "customary",
                         "systems": ["metric"], "multiplier": 3600},
                "day": {"name": "day", "plural": "days", "symbol": "d", "type": "customary",
                        "systems": ["metric"], "multiplier": 86400},
                "week": {"name": "week", "plural": "weeks", "symbol": "wk", "type": "customary",
                         "systems": ["metric"], "multiplier": 604800},
            },
        },
        "temperature": {
            "name": "temperature",
            "symbol": "Θ",
            "baseUnit": "kelvin",
            "units": {
                "kelvin": {"name": "kelvin", "plural": "kelvin", "symbol": "K", "type": "si",
                           "systems": ["si"], "multiplier": 1},
                "celsius": {"name": "degree Celsius", "plural": "degrees Celsius", "symbol": "°C",
                            "type": "customary", "otherNames": ["celsius"], "systems": ["metric"],
                            "multiplier": 1, "offset": 273.15},
                "fahrenheit": {"name": "degree Fahrenheit", "plural": "degrees Fahrenheit", "symbol": "°F",
                               "type": "customary", "otherNames": ["fahrenheit"],
                               "systems": ["imperial", "usCustomary"],
                               "multiplier": _FAHRENHEIT, "offset": 459.67 * _FAHRENHEIT},
                "rankine": {"name": "degree Rankine", "plural": "degrees Rankine", "symbol": "°R",
                            "type": "customary", "otherNames": ["rankine"], "systems": ["usCustomary"],
                            "multiplier": _FAHRENHEIT, "rare": True},
            },
        },
        "electricCurrent": {
            "name": "electric current",
            "symbol": "I",
            "otherNames": ["current"],
            "baseUnit": "ampere",
            "units": {
                "ampere": {"name": "ampere", "plural": "amperes", "symbol": "A", "type": "si",
                           "otherNames": ["amp"], "systems": ["si"], "multiplier": 1},
            },
        },
        "amountOfSubstance": {
            "name": "amount of substance",
            "symbol": "N",
            "baseUnit": "mole",
            "units": {
                "mole": {"name": "mole", "plural": "moles", "symbol": "mol", "type": "si",
                         "systems": ["si"], "multiplier": 1},
            },
        },
        "luminousIntensity": {
            "name": "luminous intensity",
            "symbol": "J",
            "baseUnit": "candela",
            "units": {
                "candela": {"name": "candela", "plural": "candelas", "symbol": "cd", "type": "si",
                            "systems": ["si"], "multiplier": 1},
            },
        },
        "information": {
            "name": "information",
            "baseUnit": "bit",
            "units": {
                "bit": {"name": "bit", "plural": "bits", "symbol": "b", "type": "binary",
                        "systems": ["information"], "multiplier": 1},
                "byte": {"name": "byte", "plural": "bytes", "symbol": "B", "type": "binary",
                         "otherNames": ["octet"], "systems": ["information"], "multiplier": 8},
            },
        },
        "planeAngle": {
            "name": "plane angle",
            "otherNames": ["angle"],
            "dimensionless": True,
            "baseUnit": "radian",
            "units": {
                "radian": {"name": "radian", "plural": "radians", "symbol": "rad", "type": "si",
                           "systems": ["si"], "multiplier": 1},
                "degree": {"name": "degree", "plural": "degrees", "symbol": "°", "type": "customary",
                           "systems": ["metric"], "multiplier": 0.017453292519943295},
            },
        },
        # --- derived ---------------------------------------------------------
        "area": {
            "name": "area",
            "symbol": "A",
            "derived": "length*length",
            "baseUnit": "squareMetre",
            "units": {
                "squareMetre": {"name": "square metre", "plural": "square metres", "symbol": "m²",
                                "type": "customary", "systems": ["si"], "multiplier": 1},
                "hectare": {"name": "hectare", "plural": "hectares", "symbol": "ha", "type": "customary",
                            "systems": ["metric"], "multiplier": 10000},
                "acre": {"name": "acre", "plural": "acres", "symbol": "ac", "type": "customary",
                         "systems": ["imperial", "usCustomary"], "multiplier": 4046.8564224},
                "squareFoot": {"name": "square foot", "plural": "square feet", "symbol": "ft²",
                               "type": "customary", "systems": ["imperial", "usCustomary"],
                               "multiplier": 0.09290304},
            },
        },
        "volume": {
            "name": "volume",
            "symbol": "V",
            "derived": "length*length*length",
            "baseUnit": "cubicMetre",
            "units": {
                "cubicMetre": {"name": "cubic metre", "plural": "cubic metres", "symbol": "m³",
                               "type": "customary", "systems": ["si"], "multiplier": 1},
                "litre": {"name": "litre", "plural": "litres", "symbol": "L", "type": "si",
                          "otherNames": ["liter"], "otherSymbols": ["l"], "systems": ["metric"],
                          "multiplier": 0.001},
                "gallon": {"name": "gallon", "plural": "gallons", "symbol": "gal", "type": "customary",
                           "systems": ["usCustomary"], "multiplier": 0.003785411784},
            },
        },
        "speed": {
            "name": "speed",
            "derived": "length/time",
            "baseUnit": "metrePerSecond",
            "units": {
                "metrePerSecond": {"name": "metre per second", "plural": "metres per second",
                                   "symbol": "m/s", "type": "customary", "systems": ["si"],
                                   "multiplier": 1},
                "kilometrePerHour": {"name": "kilometre per hour", "plural": "kilometres per hour",
                                     "symbol": "km/h", "type": "customary", "systems": ["metric"],
                                     "multiplier": Fraction(5, 18)},
                "milePerHour": {"name": "mile per hour", "plural": "miles per hour", "symbol": "mph",
                                "type": "customary", "systems": ["imperial", "usCustomary"],
                                "multiplier": 0.44704},
                "knot": {"name": "knot", "plural": "knots", "symbol": "kn", "type": "customary",
                         "systems": ["nautical"], "multiplier": Fraction(463, 900)},
            },
        },
        "acceleration": {
            "name": "acceleration",
            "derived": "length/time/time",
            "baseUnit": "metrePerSquareSecond",
            "units": {
                "metrePerSquareSecond": {"name": "metre per second squared",
                                         "plural": "metres per second squared", "symbol": "m/s²",
                                         "type": "customary", "systems": ["si"], "multiplier": 1},
                "standardGravity": {"name": "standard gravity", "plural": "standard gravities",
                                    "symbol": "g₀", "type": "customary", "systems": ["metric"],
                                    "multiplier": 9.80665},
            },
        },
        "force": {
            "name": "force",
            "symbol": "F",
            "derived": "mass*length/time/time",
            "baseUnit": "newton",
            "units": {
                "newton": {"name": "newton", "plural": "newtons", "symbol": "N", "type": "si",
                           "systems": ["si"], "multiplier": 1},
                "dyne": {"name": "dyne", "plural": "dynes", "symbol": "dyn", "type": "customary",
                         "systems": ["metric"], "multiplier": 1e-5, "rare": True},
                "poundForce": {"name": "pound-force", "plural": "pounds-force", "symbol": "lbf",
                               "type": "customary", "systems": ["imperial", "usCustomary"],
                               "multiplier": 4.4482216152605},
            },
        },
        "energy": {
            "name": "energy",
            "symbol": "E",
            "otherNames": ["work", "heat"],
            "derived": "force*length",
            "baseUnit": "joule",
            "units": {
                "joule": {"name": "joule", "plural": "joules", "symbol": "J", "type": "si",
                          "systems": ["si"], "multiplier": 1},
                "calorie": {"name": "calorie", "plural": "calories", "symbol": "cal", "type": "si",
                            "systems": ["metric"], "multiplier": 4.184},
                "kilowattHour": {"name": "kilowatt hour", "plural": "kilowatt hours", "symbol": "kWh",
                                 "type": "customary", "systems": ["metric"], "multiplier": 3.6e6},
                "electronvolt": {"name": "electronvolt", "plural": "electronvolts", "symbol": "eV",
                                 "type": "si", "systems": ["metric"], "multiplier": 1.602176634e-19},
            },
        },
        "power": {
            "name": "power",
            "symbol": "P",
            "derived": "energy/time",
            "baseUnit": "watt",
            "units": {
                "watt": {"name": "watt", "plural": "watts", "symbol": "W", "type": "si",
                         "systems": ["si"], "multiplier": 1},
                "horsepower": {"name": "horsepower", "plural": "horsepower", "symbol": "hp",
                               "type": "customary", "systems": ["imperial", "usCustomary"],
                               "multiplier": 745.69987158227022},
            },
        },
        "pressure": {
            "name": "pressure",
            "symbol": "p",
            "derived": "force/area",
            "baseUnit": "pascal",
            "units": {
                "pascal": {"name": "pascal", "plural": "pascals", "symbol": "Pa", "type": "si",
                           "systems": ["si"], "multiplier": 1},
                "bar": {"name": "bar", "plural": "bars", "symbol": "bar", "type": "si",
                        "systems": ["metric"], "multiplier": 1e5},
                "atmosphere": {"name": "atmosphere", "plural": "atmospheres", "symbol": "atm",
                               "type": "customary", "systems": ["metric"], "multiplier": 101325},
                "poundPerSquareInch": {"name": "pound per square inch", "plural": "pounds per square inch",
                                       "symbol": "psi", "type": "customary",
                                       "systems": ["imperial", "usCustomary"],
                                       "multiplier": 6894.757293168},
            },
        },
        "electricCharge": {
            "name": "electric charge",
            "symbol": "Q",
            "otherNames": ["charge"],
            "derived": "electricCurrent*time",
            "baseUnit": "coulomb",
            "units": {
                "coulomb": {"name": "coulomb", "plural": "coulombs", "symbol": "C", "type": "si",
                            "systems": ["si"], "multiplier": 1},
                "ampereHour": {"name": "ampere hour", "plural": "ampere hours", "symbol": "Ah",
                               "type": "customary", "systems": ["metric"], "multiplier": 3600},
            },
        },
        "voltage": {
            "name": "voltage",
            "otherNames": ["electric potential", "electromotive force"],
            "derived": "power/electricCurrent",
            "baseUnit": "volt",
            "units": {
                "volt": {"name": "volt", "plural": "volts", "symbol": "V", "type": "si",
                         "systems": ["si"], "multiplier": 1},
            },
        },
        "resistance": {
            "name": "electrical resistance",
            "symbol": "R",
            "otherNames": ["resistance", "impedance"],
            "derived": "voltage/electricCurrent",
            "baseUnit": "ohm",
            "units": {
                "ohm": {"name": "ohm", "plural": "ohms", "symbol": "Ω", "type": "si",
                        "systems": ["si"], "multiplier": 1},
                "reciprocalSiemens": {"name": "reciprocal siemens", "plural": "reciprocal siemens",
                                      "symbol": "S⁻¹", "type": "customary", "systems": ["si"],
                                      "multiplier": 1},
            },
        },
    },
    "prefixes": {
        "yotta": {"symbol": "Y", "type": "si", "base": 10, "power": 24},
        "zetta": {"symbol": "Z", "type": "si", "base": 10, "power": 21},
        "exa": {"symbol": "E", "type": "si", "base": 10, "power": 18},
        "peta": {"symbol": "P", "type": "si", "base": 10, "power": 15},
        "tera": {"symbol": "T", "type": "si", "base": 10, "power": 12},
        "giga": {"symbol": "G", "type": "si", "base": 10, "power": 9},
        "mega": {"symbol": "M", "type": "si", "base": 10, "power": 6},
        "myria": {"symbol": "my", "type": "siUnofficial", "base": 10, "power": 4},
        "kilo": {"symbol": "k", "type": "si", "base": 10, "power": 3},
        "hecto": {"symbol": "h", "type": "si", "base": 10, "power": 2, "rare": True},
        "deca": {"symbol": "da", "type": "si", "base": 10, "power": 1, "rare": True},
        "deci": {"symbol": "d", "type": "si", "base": 10, "power": -1, "rare": True},
        "centi": {"symbol": "c", "type": "si", "base": 10, "power": -2, "rare": True},
        "milli": {"symbol": "m", "type": "si", "base": 10, "power": -3},
        "myrio": {"symbol": "mo", "type": "siUnofficial", "base": 10, "power": -4},
        "micro": {"symbol": "µ", "type": "si", "base": 10, "power": -6, "otherSymbols": ["u"]},
        "nano": {"symbol": "n", "type": "si", "base": 10, "power": -9},
        "pico": {"symbol": "p", "type": "si", "base": 10, "power": -12},
        "femto": {"symbol": "f", "type": "si", "base": 10, "power": -15},
        "atto": {"symbol": "a", "type": "si", "base": 10, "power": -18},
        "zepto": {"symbol": "z", "type": "si", "base": 10, "power": -21},
        "yocto": {"symbol": "y", "type": "si", "base": 10, "power": -24},
        "kibi": {"symbol": "Ki", "type": "siBinary", "base": 2, "power": 10},
        "mebi": {"symbol": "Mi", "type": "siBinary", "base": 2, "power": 20},
        "gibi": {"symbol": "Gi", "type": "siBinary", "base": 2, "power": 30},
        "tebi": {"symbol": "Ti", "type": "siBinary", "base": 2, "power": 40},
        "pebi": {"symbol": "Pi", "type": "siBinary", "base": 2, "power": 50},
        "exbi": {"symbol": "Ei", "type": "siBinary", "base": 2, "power": 60},
    },
}
