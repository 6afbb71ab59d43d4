"""Constants for the ThinQ air purifier adapter."""

from __future__ import annotations

from typing import Final

DOMAIN: Final = "thinq_purifier"

# Control points
FIELD_OP_MODE: Final = "OpMode"
FIELD_OPERATION: Final = "Operation"
FIELD_WIND_STRENGTH: Final = "WindStrength"
FIELD_TEMP_CFG: Final = "TempCfg"
FIELD_DUCT_ZONE: Final = "DuctZone"
FIELD_DISPLAY_CONTROL: Final = "DisplayControl"
FIELD_SPK_VOLUME: Final = "SpkVolume"

# Config points
FIELD_FILTER: Final = "Filter"
FIELD_M_FILTER: Final = "MFilter"
FIELD_ENERGY_DESIRED: Final = "EnergyDesiredValue"

# Temperature tables
FIELD_TEMP_CEL_TO_FAH: Final = "TempCelToFah"
FIELD_TEMP_FAH_TO_CEL: Final = "TempFahToCel"

# Monitoring fields ("Polution" is the vendor's spelling)
FIELD_TEMP_CUR: Final = "TempCur"
FIELD_SENSOR_PM1: Final = "SensorPM1"
FIELD_SENSOR_PM2: Final = "SensorPM2"
FIELD_SENSOR_PM10: Final = "SensorPM10"
FIELD_AIR_POLLUTION: Final = "AirPolution"
FIELD_TOTAL_AIR_POLLUTION: Final = "TotalAirPolution"
FIELD_ROTATE_SPEED: Final = "RotateSpeed"

ENUM_TYPES: Final = frozenset({"Enum", "enum"})
MONITOR_BINARY: Final = "BINARY(BYTE)"

TEMP_UNIT_CELSIUS: Final = "celsius"
TEMP_UNIT_FAHRENHEIT: Final = "fahrenheit"
TEMP_UNITS: Final = (TEMP_UNIT_CELSIUS, TEMP_UNIT_FAHRENHEIT)

ZONE_SEPARATOR: Final = "/"
ZONE_FIELD_SEPARATOR: Final = "_"
