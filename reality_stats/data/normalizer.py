"""
Normalization of raw show records into canonical show models.

Upstream documents use Portuguese keys (``nome``, ``emissora``,
``participantes``, ``premios``...); English keys are accepted as well.
Absent prize lists become empty tuples here, once, so report code never
has to special-case them.
"""

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from ..errors import DataQualityError, MalformedDataError, MissingDataError
from .models import Broadcaster, Participant, Prize, Show

logger = logging.getLogger(__name__)

# canonical field -> accepted raw keys, first match wins
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("nome", "name"),
    "broadcaster": ("emissora", "broadcaster"),
    "audience_points": ("pontos_audiencia", "audience_points"),
    "participants": ("participantes", "participants"),
    "age": ("idade", "age"),
    "prizes": ("premios", "prizes"),
    "description": ("descricao", "description"),
    "value": ("valor", "value"),
    "date_received": ("data_recebimento", "date_received"),
}

_MISSING = object()


def _lookup(record: Mapping[str, Any], field_name: str) -> Any:
    for key in FIELD_ALIASES[field_name]:
        if key in record:
            return record[key]
    return _MISSING


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ShowNormalizer:
    """
    Converts raw show documents to immutable Show models.

    Handles key aliasing, type checking and the empty-prize-list
    normalization applied at the data model boundary.

    Values are type-checked only. Ages of zero or below and negative prize
    values are kept as the snapshot states them; the report builders treat
    them with plain arithmetic.
    """

    def __init__(self, skip_invalid: bool = False):
        """
        Initialize the normalizer.

        Args:
            skip_invalid: Drop records that fail normalization instead of
                raising, logging each dropped record
        """
        self.skip_invalid = skip_invalid

    def normalize_shows(self, records: Iterable[Mapping[str, Any]]) -> list[Show]:
        """Normalize a batch of raw show records, preserving order."""
        shows = []
        for index, record in enumerate(records):
            try:
                shows.append(self.normalize_show(record))
            except DataQualityError as e:
                if not self.skip_invalid:
                    raise
                logger.warning("Skipping invalid show record at index %d: %s", index, e)
        return shows

    def normalize_show(self, record: Mapping[str, Any]) -> Show:
        """Normalize a single raw show record."""
        if not isinstance(record, Mapping):
            raise MalformedDataError(
                "Show record must be a mapping",
                raw_data=repr(record)[:100],
                expected_format="mapping"
            )

        name = self._require_str(record, "name", "show")

        raw_broadcaster = _lookup(record, "broadcaster")
        if raw_broadcaster is _MISSING or raw_broadcaster is None:
            raise MissingDataError(f"Show '{name}' has no broadcaster", data_type="broadcaster")
        broadcaster = self._normalize_broadcaster(raw_broadcaster, name)

        raw_participants = _lookup(record, "participants")
        if raw_participants is _MISSING or raw_participants is None:
            raw_participants = []
        participants = tuple(
            self._normalize_participant(raw, name)
            for raw in self._require_list(raw_participants, "participants", name)
        )

        return Show(name=name, broadcaster=broadcaster, participants=participants)

    def _normalize_broadcaster(self, record: Any, show_name: str) -> Broadcaster:
        if not isinstance(record, Mapping):
            raise MalformedDataError(
                f"Broadcaster of show '{show_name}' must be a mapping",
                raw_data=repr(record)[:100],
                expected_format="mapping"
            )
        name = self._require_str(record, "name", "broadcaster")
        audience_points = self._require_number(record, "audience_points", f"broadcaster '{name}'")
        return Broadcaster(name=name, audience_points=audience_points)

    def _normalize_participant(self, record: Any, show_name: str) -> Participant:
        if not isinstance(record, Mapping):
            raise MalformedDataError(
                f"Participant of show '{show_name}' must be a mapping",
                raw_data=repr(record)[:100],
                expected_format="mapping"
            )
        name = self._require_str(record, "name", "participant")
        age = self._require_number(record, "age", f"participant '{name}'")
        if isinstance(age, float):
            if not age.is_integer():
                raise MalformedDataError(
                    f"Age of participant '{name}' must be a whole number",
                    raw_data=repr(age),
                    expected_format="integer"
                )
            age = int(age)

        raw_prizes = _lookup(record, "prizes")
        if raw_prizes is _MISSING or raw_prizes is None:
            raw_prizes = []
        prizes = tuple(
            self._normalize_prize(raw, name)
            for raw in self._require_list(raw_prizes, "prizes", name)
        )

        return Participant(name=name, age=age, prizes=prizes)

    def _normalize_prize(self, record: Any, participant_name: str) -> Prize:
        if not isinstance(record, Mapping):
            raise MalformedDataError(
                f"Prize of participant '{participant_name}' must be a mapping",
                raw_data=repr(record)[:100],
                expected_format="mapping"
            )
        value = self._require_number(record, "value", f"prize of '{participant_name}'")
        description = _lookup(record, "description")
        date_received = _lookup(record, "date_received")
        return Prize(
            description="" if description is _MISSING or description is None else str(description),
            value=value,
            date_received=None if date_received is _MISSING else date_received,
        )

    def _require_str(self, record: Mapping[str, Any], field_name: str, owner: str) -> str:
        value = _lookup(record, field_name)
        if value is _MISSING or value is None:
            raise MissingDataError(f"{owner} record is missing '{field_name}'", data_type=field_name)
        if not isinstance(value, str):
            raise MalformedDataError(
                f"{owner} '{field_name}' must be a string",
                raw_data=repr(value)[:100],
                expected_format="string"
            )
        return value

    def _require_number(self, record: Mapping[str, Any], field_name: str, owner: str) -> Any:
        value = _lookup(record, field_name)
        if value is _MISSING or value is None:
            raise MissingDataError(f"{owner} is missing '{field_name}'", data_type=field_name)
        if not _is_number(value) or math.isnan(value) or math.isinf(value):
            raise MalformedDataError(
                f"{owner} '{field_name}' must be a finite number",
                raw_data=repr(value)[:100],
                expected_format="number"
            )
        return value

    def _require_list(self, value: Any, field_name: str, owner: Optional[str]) -> list:
        if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
            raise MalformedDataError(
                f"'{field_name}' of '{owner}' must be a list",
                raw_data=repr(value)[:100],
                expected_format="list"
            )
        return list(value)
