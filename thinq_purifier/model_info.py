"""Per-device schema ("model info") describing control points and telemetry."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .const import ENUM_TYPES, MONITOR_BINARY
from .exceptions import MonitorDecodeError, SchemaMismatchError

_LOGGER = logging.getLogger(__name__)


class EnumValue(BaseModel):
    """Enumerated options keyed by raw device code."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Enum"] = "Enum"
    options: dict[str, str | int | float]


class RangeValue(BaseModel):
    """Numeric range accepted by a control point."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Range"] = "Range"
    min: float
    max: float
    step: float = 1


class BitValue(BaseModel):
    """Bit field options keyed by start bit."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Bit"] = "Bit"
    options: dict[int, str]


class ReferenceValue(BaseModel):
    """Options resolved from another top-level section of the document."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Reference"] = "Reference"
    reference: dict[str, Any]


class StringValue(BaseModel):
    """Free-form string value."""

    model_config = ConfigDict(frozen=True)

    type: Literal["String"] = "String"
    comment: str = ""


ValueDescriptor = EnumValue | RangeValue | BitValue | ReferenceValue | StringValue


class MonitoringField(BaseModel):
    """Slice of a binary telemetry frame."""

    model_config = ConfigDict(populate_by_name=True)

    start_byte: int = Field(alias="startByte", ge=0)
    length: int = Field(ge=1)
    value: str


class MonitoringSpec(BaseModel):
    """Describe how telemetry blobs are encoded."""

    type: str = "JSON"
    protocol: list[MonitoringField] | dict[str, Any] = Field(default_factory=list)


class ModelInfoDocument(BaseModel):
    """Validated top-level layout of a model-info JSON document."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    values: dict[str, Any] = Field(default_factory=dict, alias="Value")
    monitoring: MonitoringSpec | None = Field(default=None, alias="Monitoring")


class ModelInfo:
    """Schema object answering value, enum and telemetry decode lookups."""

    def __init__(self, document: ModelInfoDocument) -> None:
        self._document = document

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> ModelInfo:
        """Validate ``payload`` and wrap it."""

        return cls(ModelInfoDocument.model_validate(payload))

    @property
    def document(self) -> ModelInfoDocument:
        return self._document

    def value(self, name: str) -> ValueDescriptor | None:
        """Return the descriptor declared for ``name`` or ``None``."""

        definition = self._document.values.get(name)
        if definition is None:
            return None
        if not isinstance(definition, dict):
            _LOGGER.debug("Ignoring non-mapping value definition for %s", name)
            return None
        kind = definition.get("type")
        options = definition.get("option")
        try:
            if kind in ENUM_TYPES:
                return EnumValue(options=options)
            if kind == "Range":
                return RangeValue(
                    min=options["min"],
                    max=options["max"],
                    step=options.get("step", 1),
                )
            if kind == "Bit":
                return BitValue(
                    options={item["startbit"]: item["value"] for item in options}
                )
            if kind == "Reference":
                extra = self._document.model_extra or {}
                return ReferenceValue(reference=extra.get(options[0], {}))
            if kind in ("String", "string"):
                return StringValue(comment=definition.get("_comment", ""))
        except (KeyError, IndexError, TypeError, ValidationError) as exc:
            _LOGGER.debug("Malformed value definition for %s: %s", name, exc)
            return None
        _LOGGER.debug("Unsupported value type %r for %s", kind, name)
        return None

    def enum_value(self, name: str, semantic_key: str) -> str:
        """Return the raw code whose option text is ``semantic_key``."""

        descriptor = self.value(name)
        if not isinstance(descriptor, EnumValue):
            raise SchemaMismatchError(name)
        for raw_code, option in descriptor.options.items():
            if option == semantic_key:
                return raw_code
        raise SchemaMismatchError(name, semantic_key)

    def enum_name(self, name: str, raw_code: str) -> str | int | float | None:
        """Return the option text for ``raw_code`` or ``None``."""

        descriptor = self.value(name)
        if not isinstance(descriptor, EnumValue):
            return None
        return descriptor.options.get(raw_code)

    def decode_monitor(self, blob: bytes | str) -> dict[str, str]:
        """Decode a telemetry blob into a flat field mapping."""

        monitoring = self._document.monitoring
        if monitoring is not None and monitoring.type == MONITOR_BINARY:
            return self._decode_binary(monitoring, blob)
        return self._decode_json(blob)

    def _decode_binary(
        self, monitoring: MonitoringSpec, blob: bytes | str
    ) -> dict[str, str]:
        if isinstance(blob, str):
            raise MonitorDecodeError("Binary telemetry must be provided as bytes")
        if not isinstance(monitoring.protocol, list):
            raise MonitorDecodeError("Binary monitoring requires a field protocol")
        decoded: dict[str, str] = {}
        for item in monitoring.protocol:
            chunk = blob[item.start_byte : item.start_byte + item.length]
            if len(chunk) < item.length:
                msg = f"Telemetry frame too short for {item.value}"
                raise MonitorDecodeError(msg)
            decoded[item.value] = str(int.from_bytes(chunk, "big"))
        return decoded

    def _decode_json(self, blob: bytes | str) -> dict[str, str]:
        try:
            text = blob.decode("utf-8") if isinstance(blob, bytes | bytearray) else blob
            payload = json.loads(text)
        except (UnicodeDecodeError, ValueError) as exc:
            raise MonitorDecodeError("Telemetry is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise MonitorDecodeError("Telemetry JSON must be an object")
        return {str(key): str(value) for key, value in payload.items()}


def load_model_info(path: Path | str) -> ModelInfo:
    """Load a model-info document from ``path``."""

    data_path = Path(path)
    with data_path.open("r", encoding="utf-8") as fp:
        payload = json.load(fp)
    return ModelInfo.from_dict(payload)
