"""
Data gateways supplying show snapshots to the report engine.

The engine depends only on the ShowGateway protocol. A database-backed
gateway lives with the caller; the in-memory gateway here serves tests,
scripts and file-based snapshots.
"""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Callable, Optional, Protocol, Union

import yaml

from ..errors import MalformedDataError
from ..utils.matching import matches
from .models import Show
from .normalizer import ShowNormalizer

Matcher = Callable[[str, Optional[str]], bool]


class ShowGateway(Protocol):
    """Read-only provider of show snapshots."""

    def list_shows(self) -> list[Show]:
        """Return every show, possibly none."""
        ...

    def find_show_by_name(self, pattern: str) -> Optional[Show]:
        """Return the first show whose name matches the pattern, if any."""
        ...


class InMemoryShowGateway:
    """Gateway over an already materialized list of shows."""

    def __init__(self, shows: Iterable[Show], matcher: Matcher = matches):
        self._shows = tuple(shows)
        self._matcher = matcher

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        normalizer: Optional[ShowNormalizer] = None,
        matcher: Matcher = matches,
    ) -> "InMemoryShowGateway":
        """Build a gateway from raw upstream show documents."""
        normalizer = normalizer or ShowNormalizer()
        return cls(normalizer.normalize_shows(records), matcher=matcher)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        normalizer: Optional[ShowNormalizer] = None,
        matcher: Matcher = matches,
    ) -> "InMemoryShowGateway":
        """
        Build a gateway from a YAML or JSON file.

        The file holds either a list of show documents or a mapping with
        the list under a ``shows`` key.
        """
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)

        if content is None:
            records: Any = []
        elif isinstance(content, Mapping):
            records = content.get("shows", [])
        else:
            records = content

        if not isinstance(records, list):
            raise MalformedDataError(
                f"{path} must contain a list of shows",
                raw_data=repr(records)[:100],
                expected_format="list"
            )

        return cls.from_records(records, normalizer=normalizer, matcher=matcher)

    def list_shows(self) -> list[Show]:
        return list(self._shows)

    def find_show_by_name(self, pattern: str) -> Optional[Show]:
        for show in self._shows:
            if self._matcher(pattern, show.name):
                return show
        return None
