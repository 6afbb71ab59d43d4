"""Exceptions raised by the ThinQ purifier adapter."""

from __future__ import annotations


class ThinQError(RuntimeError):
    """Base class for adapter errors."""


class SchemaMismatchError(ThinQError):
    """Raised when the device schema cannot encode a requested write."""

    def __init__(self, field: str, value: object | None = None) -> None:
        """Record the field and semantic value that failed to encode."""

        self.field = field
        self.value = value
        if value is None:
            msg = f"Schema has no enum mapping for {field!r}"
        else:
            msg = f"Schema has no option {value!r} for {field!r}"
        super().__init__(msg)


class MonitorDecodeError(ThinQError):
    """Raised when a telemetry blob cannot be decoded through the schema."""


class ConfigError(ThinQError):
    """Raised when adapter configuration fails validation."""
