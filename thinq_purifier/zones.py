"""Duct zone records and their positional command encoding."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .const import ZONE_FIELD_SEPARATOR, ZONE_SEPARATOR

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZoneRecord:
    """Toggle state for a single duct zone (``index`` starts at 1)."""

    index: int
    enabled: bool
    is_open: bool

    def __post_init__(self) -> None:
        if self.index < 1:
            raise ValueError(f"Zone index must be positive, got {self.index}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ZoneRecord:
        """Build a record from the vendor ``{"No", "Cfg", "State"}`` layout."""

        return cls(
            index=int(data["No"]),
            enabled=str(data.get("Cfg")) == "1",
            is_open=str(data.get("State")) == "1",
        )

    @property
    def toggle_weight(self) -> int:
        """Return how many toggles this record contributes to a command."""

        return 1 if self.enabled else 0

    @property
    def command(self) -> str:
        return f"{self.index}{ZONE_FIELD_SEPARATOR}{1 if self.is_open else 0}"


ZoneInput = ZoneRecord | Mapping[str, Any]


class ZoneCodec:
    """Serialise zone records into the ``DuctZone`` command string."""

    @staticmethod
    def _as_record(zone: ZoneInput) -> ZoneRecord:
        if isinstance(zone, ZoneRecord):
            return zone
        return ZoneRecord.from_dict(zone)

    def encode(self, zones: Iterable[ZoneInput]) -> str | None:
        """Return the command for ``zones`` or ``None`` when nothing toggles.

        Disabled zones are dropped; the remaining zones keep their input
        order.
        """

        records = [self._as_record(zone) for zone in zones]
        if sum(record.toggle_weight for record in records) == 0:
            return None
        return ZONE_SEPARATOR.join(
            record.command for record in records if record.enabled
        )

    def parse(self, raw: str | None) -> list[ZoneRecord]:
        """Parse a ``"<index>_<state>/..."`` string into enabled records."""

        if not raw:
            return []
        records: list[ZoneRecord] = []
        for segment in raw.split(ZONE_SEPARATOR):
            index, sep, state = segment.strip().partition(ZONE_FIELD_SEPARATOR)
            if not sep or state not in ("0", "1"):
                _LOGGER.debug("Skipping malformed zone segment %r", segment)
                continue
            try:
                records.append(
                    ZoneRecord(index=int(index), enabled=True, is_open=state == "1")
                )
            except ValueError:
                _LOGGER.debug("Skipping malformed zone segment %r", segment)
        return records
