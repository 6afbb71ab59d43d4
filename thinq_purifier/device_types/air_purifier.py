"""Air purifier device support."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ..const import (
    FIELD_DISPLAY_CONTROL,
    FIELD_DUCT_ZONE,
    FIELD_ENERGY_DESIRED,
    FIELD_FILTER,
    FIELD_M_FILTER,
    FIELD_OP_MODE,
    FIELD_OPERATION,
    FIELD_SPK_VOLUME,
    FIELD_TEMP_CFG,
    FIELD_WIND_STRENGTH,
    TEMP_UNIT_FAHRENHEIT,
)
from ..enums import AirPurifierFanSpeed, AirPurifierOperation, AirPurifierOperationMode
from ..state.status import AirPurifierStatus, as_number
from ..zones import ZoneInput
from .base import BaseDevice

_LOGGER = logging.getLogger(__name__)


class AirPurifierDevice(BaseDevice):
    """Semantic commands, reads and telemetry polling for an air purifier."""

    async def set_celsius(self, celsius: int | float | None) -> None:
        """Write the target temperature in Celsius."""

        if isinstance(celsius, float) and celsius.is_integer():
            celsius = int(celsius)
        value = None if celsius is None else str(celsius)
        await self.set_control(FIELD_TEMP_CFG, value)

    async def set_fahrenheit(self, fahrenheit: int | float) -> None:
        """Write the target temperature via the Fahrenheit to Celsius table.

        A value missing from the table is still dispatched (as ``None``)
        and left for the device to reject.
        """

        celsius = self.temperatures.fahrenheit_to_celsius(fahrenheit)
        if celsius is None:
            _LOGGER.debug("No Celsius mapping for %s F", fahrenheit)
        await self.set_celsius(celsius)

    async def set_temperature(self, value: int | float) -> None:
        """Write the target temperature in the configured unit."""

        unit = self.config.temperature_unit if self.config is not None else None
        if unit == TEMP_UNIT_FAHRENHEIT:
            await self.set_fahrenheit(value)
        else:
            await self.set_celsius(value)

    async def set_zones(self, zones: Iterable[ZoneInput]) -> None:
        """Turn duct zones on or off.

        ``zones`` holds :class:`ZoneRecord` instances or vendor dicts with
        ``No`` (1-based index), ``Cfg`` (``"1"`` when enabled) and
        ``State`` (``"1"`` when open). Nothing is sent when no zone is
        enabled.
        """

        command = self.zones.encode(zones)
        if command is None:
            _LOGGER.debug("No enabled zones; skipping %s write", FIELD_DUCT_ZONE)
            return
        await self.set_control(FIELD_DUCT_ZONE, command)

    async def get_zones(self) -> str:
        return await self.get_config(FIELD_DUCT_ZONE)

    async def set_fan_speed(self, speed: AirPurifierFanSpeed) -> None:
        raw = self.enums.encode(FIELD_WIND_STRENGTH, speed)
        await self.set_control(FIELD_WIND_STRENGTH, raw)

    async def set_mode(self, mode: AirPurifierOperationMode | None) -> None:
        """Write power on or off to the ``OpMode`` point based on ``mode``.

        Any truthy mode selects on; this mirrors the vendor app rather
        than selecting the given operation mode.
        """

        operation = AirPurifierOperation.ON if mode else AirPurifierOperation.OFF
        raw = self.enums.encode(FIELD_OP_MODE, operation)
        await self.set_control(FIELD_OP_MODE, raw)

    async def set_on(self, is_on: bool) -> None:
        operation = AirPurifierOperation.ON if is_on else AirPurifierOperation.OFF
        raw = self.enums.encode(FIELD_OPERATION, operation)
        await self.set_control(FIELD_OPERATION, raw)

    async def get_filter_state(self) -> str:
        return await self.get_config(FIELD_FILTER)

    async def get_m_filter_state(self) -> str:
        return await self.get_config(FIELD_M_FILTER)

    async def get_energy_target(self) -> str:
        return await self.get_config(FIELD_ENERGY_DESIRED)

    async def get_light(self) -> bool:
        """Return True when the display light control reads ``"0"``."""

        value = await self.get_control(FIELD_DISPLAY_CONTROL)
        return value == "0"

    async def get_volume(self) -> int | float | None:
        value = await self.get_control(FIELD_SPK_VOLUME)
        return as_number(value)

    async def poll(self) -> AirPurifierStatus | None:
        """Return a status snapshot for the next telemetry report, if any."""

        if self.monitor is None:
            return None
        blob: Any = await self.monitor.poll()
        if not blob:
            return None
        data = self.model.decode_monitor(blob)
        return AirPurifierStatus(self, data)
