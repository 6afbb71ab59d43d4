"""Semantic enums for the air purifier appliance class."""

from __future__ import annotations

from enum import Enum, IntEnum


class RotateSpeed(IntEnum):
    """Numeric rotate-speed levels reported by the appliance."""

    LOW = 2
    MID = 4
    HIGH = 6
    FASTWIND = 7
    AUTO = 8


class AirPurifierOperationMode(str, Enum):
    """Operation mode for an air purifier."""

    SLEEP = "@AP_MAIN_MID_OPMODE_SLEEP_W"
    SILENT = "@AP_MAIN_MID_OPMODE_SILENT_W"
    CLEAN = "@AP_MAIN_MID_OPMODE_CLEAN_W"


class AirPurifierFanSpeed(str, Enum):
    """Fan speed for an air purifier."""

    LOW = "@AP_MAIN_MID_WINDSTRENGTH_LOW_W"
    MID = "@AP_MAIN_MID_WINDSTRENGTH_MID_W"
    HIGH = "@AP_MAIN_MID_WINDSTRENGTH_HIGH_W"
    FASTWIND = "@AP_MAIN_MID_WINDSTRENGTH_FASTWIND_W"
    AUTO = "@AP_MAIN_MID_WINDSTRENGTH_AUTO_W"


class AirPurifierOperation(str, Enum):
    """Whether the purifier is on or off."""

    ON = "@operation_on"
    OFF = "@operation_off"
