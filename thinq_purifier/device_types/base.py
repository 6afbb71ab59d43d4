"""Device base class and the collaborator interfaces it relies on."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from ..codecs import EnumCodec
from ..temperature import TemperatureConverter
from ..zones import ZoneCodec

if TYPE_CHECKING:
    from ..config import PurifierConfig

_LOGGER = logging.getLogger(__name__)


class Schema(Protocol):
    """Per-device schema describing control points and telemetry."""

    def value(self, name: str) -> Any | None:
        """Return the descriptor for ``name`` or ``None``."""

    def enum_value(self, name: str, semantic_key: str) -> str:
        """Return the raw code mapped to ``semantic_key``."""

    def decode_monitor(self, blob: Any) -> dict[str, str]:
        """Decode a telemetry blob into a flat field mapping."""


class DeviceSession(Protocol):
    """Remote calls against a single device."""

    async def set_control(self, name: str, value: Any) -> None:
        """Write ``value`` to the control point ``name``."""

    async def get_config(self, name: str) -> str:
        """Read the config point ``name``."""

    async def get_control(self, name: str) -> str:
        """Read the control point ``name``."""


class Monitor(Protocol):
    """Source of periodic telemetry blobs."""

    async def poll(self) -> Any | None:
        """Return the next telemetry blob or ``None``."""


class BaseDevice:
    """Bind a device session to its schema and translation helpers."""

    def __init__(
        self,
        session: DeviceSession,
        model: Schema,
        monitor: Monitor | None = None,
        *,
        config: PurifierConfig | None = None,
    ) -> None:
        """Initialise the device with its collaborators."""

        self.session = session
        self.model = model
        self.monitor = monitor
        self.config = config
        self.enums = EnumCodec(model)
        self.temperatures = TemperatureConverter(model)
        self.zones = ZoneCodec()

    @property
    def device_id(self) -> str | None:
        """Return the configured device identifier, if any."""

        if self.config is None:
            return None
        return self.config.device_id

    def attach_monitor(self, monitor: Monitor) -> None:
        """Use ``monitor`` as the telemetry source for :meth:`poll`."""

        self.monitor = monitor

    def detach_monitor(self) -> None:
        """Drop the telemetry source; polling yields nothing afterwards."""

        self.monitor = None

    async def set_control(self, name: str, value: Any) -> None:
        _LOGGER.debug("Setting %s to %r on %s", name, value, self.device_id)
        await self.session.set_control(name, value)

    async def get_config(self, name: str) -> str:
        value = await self.session.get_config(name)
        _LOGGER.debug("Config %s on %s is %r", name, self.device_id, value)
        return value

    async def get_control(self, name: str) -> str:
        value = await self.session.get_control(name)
        _LOGGER.debug("Control %s on %s is %r", name, self.device_id, value)
        return value
