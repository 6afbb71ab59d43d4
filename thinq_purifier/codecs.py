"""Translate between semantic enums and device-specific raw codes."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any, Final, TypeVar

from .const import ENUM_TYPES
from .exceptions import SchemaMismatchError

if TYPE_CHECKING:
    from .device_types.base import Schema

_LOGGER = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)
IE = TypeVar("IE", bound=IntEnum)


class UnknownType:
    """Sentinel for raw values the schema does not map to a semantic value."""

    _instance: UnknownType | None = None

    def __new__(cls) -> UnknownType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNKNOWN"


UNKNOWN: Final = UnknownType()


def enum_options(schema: Schema, field: str) -> Mapping[str, Any] | None:
    """Return the option table for ``field`` when it is enum-shaped."""

    descriptor = schema.value(field)
    if descriptor is None:
        return None
    if isinstance(descriptor, Mapping):
        kind, options = descriptor.get("type"), descriptor.get("options")
    else:
        kind = getattr(descriptor, "type", None)
        options = getattr(descriptor, "options", None)
    if kind not in ENUM_TYPES:
        return None
    if not isinstance(options, Mapping):
        return None
    return options


class EnumCodec:
    """Encode semantic enum members to raw codes and decode them back.

    Every lookup consults the schema directly so that per-device option
    tables are always current. Decoding fails soft with ``UNKNOWN``;
    encoding raises ``SchemaMismatchError``.
    """

    def __init__(self, schema: Schema) -> None:
        """Bind the codec to ``schema``."""

        self._schema = schema

    def decode_key(self, field: str, raw_value: str | None) -> str | UnknownType:
        """Return the semantic key for ``raw_value`` or ``UNKNOWN``."""

        if raw_value is None:
            return UNKNOWN
        options = enum_options(self._schema, field)
        if options is None:
            _LOGGER.debug("No enum mapping for %s", field)
            return UNKNOWN
        enum_name = getattr(self._schema, "enum_name", None)
        if enum_name is not None:
            key = enum_name(field, raw_value)
        else:
            key = options.get(raw_value)
        if key is None:
            _LOGGER.debug("Unmapped raw value %r for %s", raw_value, field)
            return UNKNOWN
        return key

    def decode(
        self, field: str, raw_value: str | None, enum_cls: type[E]
    ) -> E | UnknownType:
        """Return the ``enum_cls`` member for ``raw_value`` or ``UNKNOWN``."""

        key = self.decode_key(field, raw_value)
        if key is UNKNOWN:
            return UNKNOWN
        try:
            return enum_cls(key)
        except ValueError:
            _LOGGER.debug("Key %r for %s is not a %s", key, field, enum_cls.__name__)
            return UNKNOWN

    def encode(self, field: str, value: Enum | str) -> str:
        """Return the raw code for ``value`` on ``field``."""

        key = value.value if isinstance(value, Enum) else value
        if self._schema.value(field) is None:
            raise SchemaMismatchError(field)
        try:
            raw_code = self._schema.enum_value(field, key)
        except (KeyError, ValueError) as exc:
            raise SchemaMismatchError(field, key) from exc
        if raw_code is None:
            raise SchemaMismatchError(field, key)
        return raw_code


def decode_int_enum(raw_value: str | None, enum_cls: type[IE]) -> IE | UnknownType:
    """Decode a numeric raw value into ``enum_cls`` or ``UNKNOWN``."""

    if raw_value is None:
        return UNKNOWN
    try:
        return enum_cls(int(raw_value))
    except ValueError:
        return UNKNOWN
