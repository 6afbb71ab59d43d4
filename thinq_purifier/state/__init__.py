"""Telemetry snapshots for ThinQ purifier devices."""

from .status import AirPurifierStatus, as_number

__all__ = ["AirPurifierStatus", "as_number"]
