"""Configuration for ThinQ purifier devices."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import voluptuous as vol

from .const import DOMAIN, TEMP_UNIT_CELSIUS, TEMP_UNITS
from .device_types.air_purifier import AirPurifierDevice
from .exceptions import ConfigError
from .model_info import load_model_info

if TYPE_CHECKING:
    from .device_types.base import DeviceSession, Monitor, Schema

_LOGGER = logging.getLogger(__name__)

CONF_DEVICE_ID = "device_id"
CONF_MODEL_INFO = "model_info"
CONF_TEMPERATURE_UNIT = "temperature_unit"
CONF_DEBUG = "debug"

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_DEVICE_ID): vol.All(str, vol.Length(min=1)),
        vol.Optional(CONF_MODEL_INFO): vol.Any(None, vol.Coerce(Path)),
        vol.Optional(CONF_TEMPERATURE_UNIT, default=TEMP_UNIT_CELSIUS): vol.All(
            vol.Lower, vol.In(TEMP_UNITS)
        ),
        vol.Optional(CONF_DEBUG, default=False): bool,
    }
)


@dataclass(frozen=True, slots=True)
class PurifierConfig:
    """Validated runtime configuration for a purifier."""

    device_id: str
    model_info: Path | None = None
    temperature_unit: str = TEMP_UNIT_CELSIUS
    debug: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PurifierConfig:
        """Validate ``data`` and build a configuration."""

        try:
            validated = CONFIG_SCHEMA(dict(data))
        except vol.Invalid as exc:
            raise ConfigError(f"Invalid purifier configuration: {exc}") from exc
        return cls(
            device_id=validated[CONF_DEVICE_ID],
            model_info=validated.get(CONF_MODEL_INFO),
            temperature_unit=validated[CONF_TEMPERATURE_UNIT],
            debug=validated[CONF_DEBUG],
        )


def build_device(
    config: PurifierConfig | Mapping[str, Any],
    session: DeviceSession,
    monitor: Monitor | None = None,
    model: Schema | None = None,
) -> AirPurifierDevice:
    """Create an :class:`AirPurifierDevice` from configuration."""

    if not isinstance(config, PurifierConfig):
        config = PurifierConfig.from_mapping(config)
    if config.debug:
        logging.getLogger(DOMAIN).setLevel(logging.DEBUG)
    if model is None:
        if config.model_info is None:
            raise ConfigError(f"No model info available for {config.device_id}")
        model = load_model_info(config.model_info)
        _LOGGER.debug(
            "Loaded model info for %s from %s", config.device_id, config.model_info
        )
    return AirPurifierDevice(session, model, monitor, config=config)
