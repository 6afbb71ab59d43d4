"""Typed adapter for ThinQ air purifiers driven by per-device model info."""

from __future__ import annotations

from .codecs import UNKNOWN, EnumCodec, UnknownType
from .config import PurifierConfig, build_device
from .const import DOMAIN
from .device_types import AirPurifierDevice, BaseDevice
from .enums import (
    AirPurifierFanSpeed,
    AirPurifierOperation,
    AirPurifierOperationMode,
    RotateSpeed,
)
from .exceptions import ConfigError, MonitorDecodeError, SchemaMismatchError, ThinQError
from .model_info import ModelInfo, load_model_info
from .state import AirPurifierStatus
from .temperature import TemperatureConverter
from .zones import ZoneCodec, ZoneRecord

__all__ = [
    "DOMAIN",
    "UNKNOWN",
    "AirPurifierDevice",
    "AirPurifierFanSpeed",
    "AirPurifierOperation",
    "AirPurifierOperationMode",
    "AirPurifierStatus",
    "BaseDevice",
    "ConfigError",
    "EnumCodec",
    "ModelInfo",
    "MonitorDecodeError",
    "PurifierConfig",
    "RotateSpeed",
    "SchemaMismatchError",
    "TemperatureConverter",
    "ThinQError",
    "UnknownType",
    "ZoneCodec",
    "ZoneRecord",
    "build_device",
    "load_model_info",
]
