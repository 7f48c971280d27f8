"""Prizes at or above a value threshold"""

import math
from collections.abc import Sequence
from typing import Any, Optional

from ..data.models import Show
from ..errors import InvalidArgumentError
from ..models.reports import ThresholdMatch, ThresholdReport, ThresholdSummary
from ..utils.numbers import format_percent, round_half_up


def parse_threshold(value: Any) -> float:
    """
    Validate a threshold given as a number or numeric string.

    Raises:
        InvalidArgumentError: If the value is not a finite, non-negative number
    """
    if isinstance(value, bool) or value is None:
        raise InvalidArgumentError(
            "Invalid threshold: provide a non-negative number",
            argument="threshold", value=value
        )
    try:
        threshold = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(
            "Invalid threshold: provide a non-negative number",
            argument="threshold", value=value
        )
    if math.isnan(threshold) or math.isinf(threshold) or threshold < 0:
        raise InvalidArgumentError(
            "Invalid threshold: provide a non-negative number",
            argument="threshold", value=value
        )
    return threshold


def percent_above(value: float, threshold: float) -> Optional[str]:
    """Percentage by which value exceeds threshold, None for a zero threshold."""
    if threshold == 0:
        return None
    return format_percent((value - threshold) / threshold * 100)


def filter_label(threshold: float) -> str:
    """Human readable description of the filter, e.g. "prizes >= 50,000"."""
    if threshold.is_integer():
        return f"prizes >= {int(threshold):,}"
    return f"prizes >= {threshold:,}"


def _dedupe(names: list[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(names))


def build_threshold_report(shows: Sequence[Show], threshold: Any) -> ThresholdReport:
    """
    Select every prize worth at least the threshold.

    Matches are ordered by value, highest first; equal values keep the
    order they were found in (show, then participant, then prize).

    Args:
        shows: Snapshot of every show
        threshold: Minimum prize value, number or numeric string

    Returns:
        ThresholdReport, with no matches when nothing qualifies

    Raises:
        InvalidArgumentError: If the threshold is invalid
    """
    threshold = parse_threshold(threshold)

    found = []
    for show in shows:
        for participant, prize in show.iter_prizes():
            if prize.value >= threshold:
                found.append(ThresholdMatch(
                    broadcaster=show.broadcaster.name,
                    show=show.name,
                    participant=participant.name,
                    participant_age=participant.age,
                    description=prize.description,
                    value=prize.value,
                    date_received=prize.date_received,
                    percent_above_threshold=percent_above(prize.value, threshold),
                ))

    found.sort(key=lambda match: match.value, reverse=True)

    values = [match.value for match in found]
    total = sum(values)
    summary = ThresholdSummary(
        count=len(found),
        threshold=threshold,
        max_value=values[0] if values else 0,
        min_value=values[-1] if values else 0,
        total_value=total,
        mean_value=round_half_up(total / len(values), 2) if values else 0.0,
        broadcasters=_dedupe([match.broadcaster for match in found]),
        shows=_dedupe([match.show for match in found]),
    )

    return ThresholdReport(
        filter_label=filter_label(threshold),
        summary=summary,
        matches=tuple(found),
    )
