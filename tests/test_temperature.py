"""Tests for the schema-driven temperature tables."""

from __future__ import annotations

from thinq_purifier.model_info import ModelInfo
from thinq_purifier.temperature import TemperatureConverter


def _converter(values: dict) -> TemperatureConverter:
    return TemperatureConverter(ModelInfo.from_dict({"Value": values}))


def test_lookups_follow_declared_pairs(model: ModelInfo) -> None:
    """Each declared pair converts; undeclared values miss."""

    converter = TemperatureConverter(model)

    assert converter.celsius_to_fahrenheit(24) == 75
    assert converter.celsius_to_fahrenheit(26) == 79
    assert converter.celsius_to_fahrenheit(25) is None
    assert converter.fahrenheit_to_celsius(76) == 24
    assert converter.celsius_to_fahrenheit_table == {18: 64, 24: 75, 26: 79, 30: 86}


def test_directions_are_independent() -> None:
    """The two tables are not required to be inverses of each other."""

    converter = _converter(
        {
            "TempCelToFah": {"type": "Enum", "option": {"20": "68"}},
            "TempFahToCel": {"type": "Enum", "option": {"70": "21"}},
        }
    )

    assert converter.celsius_to_fahrenheit(20) == 68
    assert converter.fahrenheit_to_celsius(68) is None
    assert converter.fahrenheit_to_celsius(70) == 21
    assert converter.celsius_to_fahrenheit(21) is None


def test_non_enum_definitions_yield_empty_tables() -> None:
    """Only enumerated option tables produce entries."""

    converter = _converter(
        {"TempCelToFah": {"type": "Range", "option": {"min": 0, "max": 40}}}
    )

    assert converter.celsius_to_fahrenheit_table == {}
    assert converter.fahrenheit_to_celsius_table == {}
    assert converter.celsius_to_fahrenheit(0) is None


def test_malformed_entries_are_skipped() -> None:
    """Entries that are not whole numbers are ignored."""

    converter = _converter(
        {
            "TempCelToFah": {
                "type": "Enum",
                "option": {"20": "68", "warm": "70", "21": "69.5", "22.0": "72"},
            }
        }
    )

    assert converter.celsius_to_fahrenheit_table == {20: 68, 22: 72}


def test_lookup_keys_accept_whole_floats(model: ModelInfo) -> None:
    """Whole-number floats convert; fractional and missing values miss."""

    converter = TemperatureConverter(model)

    assert converter.celsius_to_fahrenheit(24.0) == 75
    assert converter.celsius_to_fahrenheit(24.5) is None
    assert converter.celsius_to_fahrenheit(None) is None
    assert converter.fahrenheit_to_celsius(None) is None


def test_numeric_option_values_convert() -> None:
    """Tables declared with numeric values still convert entry by entry."""

    converter = _converter(
        {
            "TempCelToFah": {
                "type": "Enum",
                "option": {"24": 75, "25": "warm", "26": "79"},
            },
            "Hologram": None,
        }
    )

    assert converter.celsius_to_fahrenheit(24) == 75
    assert converter.celsius_to_fahrenheit_table == {24: 75, 26: 79}
