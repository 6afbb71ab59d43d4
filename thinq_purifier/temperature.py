"""Celsius/Fahrenheit lookup tables declared by the device schema."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .codecs import enum_options
from .const import FIELD_TEMP_CEL_TO_FAH, FIELD_TEMP_FAH_TO_CEL

if TYPE_CHECKING:
    from .device_types.base import Schema

_LOGGER = logging.getLogger(__name__)


def _as_int(value: object) -> int | None:
    """Return ``value`` as an integer when it represents a whole number."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not number.is_integer():
        return None
    return int(number)


class TemperatureConverter:
    """Convert temperatures through the schema's two independent tables.

    The Celsius to Fahrenheit table and its inverse are declared
    separately and need not agree, so each lookup reads the table for
    its own direction. Tables are rebuilt on every access.
    """

    def __init__(self, schema: Schema) -> None:
        self._schema = schema

    def _build_table(self, field: str) -> dict[int, int]:
        options = enum_options(self._schema, field)
        if options is None:
            return {}
        table: dict[int, int] = {}
        for source, target in options.items():
            key = _as_int(source)
            value = _as_int(target)
            if key is None or value is None:
                _LOGGER.debug(
                    "Skipping malformed %s entry %r -> %r", field, source, target
                )
                continue
            table[key] = value
        return table

    @property
    def celsius_to_fahrenheit_table(self) -> dict[int, int]:
        """Return the schema-declared Celsius to Fahrenheit table."""

        return self._build_table(FIELD_TEMP_CEL_TO_FAH)

    @property
    def fahrenheit_to_celsius_table(self) -> dict[int, int]:
        """Return the schema-declared Fahrenheit to Celsius table."""

        return self._build_table(FIELD_TEMP_FAH_TO_CEL)

    def celsius_to_fahrenheit(self, celsius: float | int | None) -> int | None:
        """Return the Fahrenheit value declared for ``celsius``."""

        key = _as_int(celsius)
        if key is None:
            return None
        return self.celsius_to_fahrenheit_table.get(key)

    def fahrenheit_to_celsius(self, fahrenheit: float | int | None) -> int | None:
        """Return the Celsius value declared for ``fahrenheit``."""

        key = _as_int(fahrenheit)
        if key is None:
            return None
        return self.fahrenheit_to_celsius_table.get(key)
