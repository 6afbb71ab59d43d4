"""Read-only view over one decoded telemetry report."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from ..codecs import UnknownType, decode_int_enum
from ..const import (
    FIELD_AIR_POLLUTION,
    FIELD_OP_MODE,
    FIELD_OPERATION,
    FIELD_ROTATE_SPEED,
    FIELD_SENSOR_PM1,
    FIELD_SENSOR_PM2,
    FIELD_SENSOR_PM10,
    FIELD_TEMP_CFG,
    FIELD_TEMP_CUR,
    FIELD_TOTAL_AIR_POLLUTION,
    FIELD_WIND_STRENGTH,
    TEMP_UNIT_FAHRENHEIT,
)
from ..enums import (
    AirPurifierFanSpeed,
    AirPurifierOperation,
    AirPurifierOperationMode,
    RotateSpeed,
)

if TYPE_CHECKING:
    from ..device_types.air_purifier import AirPurifierDevice

_ACCESSORS = (
    "current_temp_in_celsius",
    "current_temp_in_fahrenheit",
    "target_temp_in_celsius",
    "target_temp_in_fahrenheit",
    "sensor_pm1",
    "sensor_pm2",
    "sensor_pm10",
    "air_pollution",
    "total_air_pollution",
    "mode",
    "fan_speed",
    "rotate_speed",
    "is_on",
)


def as_number(raw: Any) -> int | float | None:
    """Parse ``raw`` into an int or float, or ``None`` when not numeric."""

    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int | float):
        return raw
    try:
        number = float(str(raw).strip())
    except ValueError:
        return None
    if number.is_integer():
        return int(number)
    return number


@dataclass(frozen=True)
class AirPurifierStatus:
    """Typed accessors over a decoded purifier telemetry mapping.

    ``device`` is only consulted for its translation tables; every
    accessor is derived from ``data`` on read.
    """

    device: AirPurifierDevice = field(repr=False, compare=False)
    data: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    @property
    def current_temp_in_celsius(self) -> int | float | None:
        return as_number(self.data.get(FIELD_TEMP_CUR))

    @property
    def current_temp_in_fahrenheit(self) -> int | None:
        return self.device.temperatures.celsius_to_fahrenheit(
            self.current_temp_in_celsius
        )

    @property
    def target_temp_in_celsius(self) -> int | float | None:
        return as_number(self.data.get(FIELD_TEMP_CFG))

    @property
    def target_temp_in_fahrenheit(self) -> int | None:
        return self.device.temperatures.celsius_to_fahrenheit(
            self.target_temp_in_celsius
        )

    @property
    def current_temperature(self) -> int | float | None:
        """Return the current temperature in the configured unit."""

        if self._unit == TEMP_UNIT_FAHRENHEIT:
            return self.current_temp_in_fahrenheit
        return self.current_temp_in_celsius

    @property
    def target_temperature(self) -> int | float | None:
        """Return the target temperature in the configured unit."""

        if self._unit == TEMP_UNIT_FAHRENHEIT:
            return self.target_temp_in_fahrenheit
        return self.target_temp_in_celsius

    @property
    def sensor_pm1(self) -> int | float | None:
        return as_number(self.data.get(FIELD_SENSOR_PM1))

    @property
    def sensor_pm2(self) -> int | float | None:
        return as_number(self.data.get(FIELD_SENSOR_PM2))

    @property
    def sensor_pm10(self) -> int | float | None:
        return as_number(self.data.get(FIELD_SENSOR_PM10))

    @property
    def air_pollution(self) -> int | float | None:
        return as_number(self.data.get(FIELD_AIR_POLLUTION))

    @property
    def total_air_pollution(self) -> int | float | None:
        return as_number(self.data.get(FIELD_TOTAL_AIR_POLLUTION))

    @property
    def mode(self) -> bool:
        """Return True when the purifier reports the clean operation mode."""

        decoded = self.device.enums.decode(
            FIELD_OP_MODE, self.data.get(FIELD_OP_MODE), AirPurifierOperationMode
        )
        return decoded is AirPurifierOperationMode.CLEAN

    @property
    def fan_speed(self) -> AirPurifierFanSpeed | UnknownType:
        return self.device.enums.decode(
            FIELD_WIND_STRENGTH,
            self.data.get(FIELD_WIND_STRENGTH),
            AirPurifierFanSpeed,
        )

    @property
    def rotate_speed(self) -> RotateSpeed | UnknownType:
        return decode_int_enum(self.data.get(FIELD_ROTATE_SPEED), RotateSpeed)

    @property
    def is_on(self) -> bool:
        """Return False only when the decoded operation is explicitly off."""

        decoded = self.device.enums.decode(
            FIELD_OPERATION, self.data.get(FIELD_OPERATION), AirPurifierOperation
        )
        return decoded is not AirPurifierOperation.OFF

    @property
    def _unit(self) -> str | None:
        config = self.device.config
        return config.temperature_unit if config is not None else None

    def as_dict(self) -> dict[str, Any]:
        """Return every accessor value keyed by accessor name."""

        return {name: getattr(self, name) for name in _ACCESSORS}
