"""Device type implementations for the ThinQ purifier adapter."""

from .air_purifier import AirPurifierDevice
from .base import BaseDevice, DeviceSession, Monitor, Schema

__all__ = [
    "AirPurifierDevice",
    "BaseDevice",
    "DeviceSession",
    "Monitor",
    "Schema",
]
