"""Broadcaster ranking by audience points"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from ..config.defaults import ReportParams
from ..data.models import Number, Show
from ..models.reports import (
    AudienceRankingReport,
    AudienceSummary,
    BroadcasterRanking,
    EfficiencyTier,
)
from ..utils.numbers import format_percent, round_half_up, safe_ratio

HIGH_EFFICIENCY_POINTS = 70
MEDIUM_EFFICIENCY_POINTS = 60


def efficiency_tier(audience_points: Number) -> EfficiencyTier:
    """High above 70 points, Medium above 60, Low otherwise."""
    if audience_points > HIGH_EFFICIENCY_POINTS:
        return EfficiencyTier.HIGH
    if audience_points > MEDIUM_EFFICIENCY_POINTS:
        return EfficiencyTier.MEDIUM
    return EfficiencyTier.LOW


@dataclass
class _BroadcasterTally:
    name: str
    audience_points: Number
    show_names: list[str] = field(default_factory=list)
    total_participants: int = 0
    total_prize_value: Number = 0


def _tally_broadcasters(shows: Sequence[Show]) -> list[_BroadcasterTally]:
    """Group shows by broadcaster name in first-seen order."""
    tallies: dict[str, _BroadcasterTally] = {}
    for show in shows:
        broadcaster = show.broadcaster
        tally = tallies.get(broadcaster.name)
        if tally is None:
            # audience points come from the first show seen
            tally = _BroadcasterTally(broadcaster.name, broadcaster.audience_points)
            tallies[broadcaster.name] = tally
        tally.show_names.append(show.name)
        tally.total_participants += len(show.participants)
        tally.total_prize_value += show.total_prize_value
    return list(tallies.values())


def build_audience_report(shows: Sequence[Show], params: ReportParams = ReportParams()) -> AudienceRankingReport:
    """
    Rank broadcasters by audience points, highest first.

    Market share is each broadcaster's share of the summed audience points;
    investment per point divides prize value by audience points. Both are
    reported as zero when their denominator is zero.
    """
    tallies = sorted(_tally_broadcasters(shows), key=lambda t: t.audience_points, reverse=True)

    total_points = sum(t.audience_points for t in tallies)
    total_invested = sum(t.total_prize_value for t in tallies)

    ranking = []
    for position, tally in enumerate(tallies, start=1):
        if total_points:
            share = format_percent(tally.audience_points / total_points * 100)
        else:
            share = "0%"
        ranking.append(BroadcasterRanking(
            position=position,
            broadcaster=tally.name,
            audience_points=tally.audience_points,
            market_share=share,
            show_count=len(tally.show_names),
            show_names=tuple(tally.show_names),
            total_participants=tally.total_participants,
            total_prize_value=tally.total_prize_value,
            investment_per_audience_point=round_half_up(
                safe_ratio(tally.total_prize_value, tally.audience_points), 2
            ),
            efficiency=efficiency_tier(tally.audience_points),
        ))

    summary = AudienceSummary(
        total_broadcasters=len(tallies),
        total_audience_points=total_points,
        total_invested=total_invested,
        mean_points_per_broadcaster=round_half_up(safe_ratio(total_points, len(tallies)), 2),
        audience_leader=tallies[0].name if tallies else params.no_data_label,
    )

    return AudienceRankingReport(summary=summary, ranking=tuple(ranking))
