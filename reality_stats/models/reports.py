"""Report records produced by the report builders"""

from dataclasses import dataclass, fields, is_dataclass
from datetime import date
from enum import Enum
from typing import Any, Optional, Union

Number = Union[int, float]


def to_plain(value: Any) -> Any:
    """Convert report records to plain dicts, lists and scalars."""
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    if isinstance(value, date):
        return value.isoformat()
    return value


class ReportRecord:
    """Mixin giving report dataclasses a plain-record view."""

    def to_dict(self) -> dict[str, Any]:
        return to_plain(self)


class ReportStatus(str, Enum):
    """Outcome of a report computation."""
    OK = "ok"
    EMPTY = "empty"


@dataclass(frozen=True)
class ReportResult(ReportRecord):
    """Envelope returned by the engine for every report."""
    report: str
    status: ReportStatus
    data: Optional[Any] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, report: str, data: Any, message: Optional[str] = None) -> "ReportResult":
        """Create a successful result."""
        return cls(report=report, status=ReportStatus.OK, data=data, message=message)

    @classmethod
    def empty(cls, report: str, message: str) -> "ReportResult":
        """Create a result for a dataset with nothing to report."""
        return cls(report=report, status=ReportStatus.EMPTY, data=None, message=message)

    @property
    def is_empty(self) -> bool:
        return self.status is ReportStatus.EMPTY


# Prize overview

@dataclass(frozen=True)
class PrizeEntry(ReportRecord):
    description: str
    value: Number
    date_received: Any = None


@dataclass(frozen=True)
class ParticipantPrizes(ReportRecord):
    """One participant's line in the prize overview."""
    name: str
    age: int
    prize_count: int
    total_value: Number
    prizes: tuple[PrizeEntry, ...] = ()


@dataclass(frozen=True)
class ShowPrizes(ReportRecord):
    """Per-show block of the prize overview, participants richest first."""
    show: str
    broadcaster: str
    total_participants: int
    participants_with_prizes: int
    total_prize_value: Number
    participants: tuple[ParticipantPrizes, ...] = ()


@dataclass(frozen=True)
class PrizeOverviewSummary(ReportRecord):
    total_shows: int
    total_participants: int
    total_value_distributed: Number
    total_prizes_distributed: int


@dataclass(frozen=True)
class PrizeOverviewReport(ReportRecord):
    summary: PrizeOverviewSummary
    shows: tuple[ShowPrizes, ...]


# Age demographics

@dataclass(frozen=True)
class ParticipantAgeEntry(ReportRecord):
    """Extremal participant of a show with their prize tally."""
    name: str
    age: int
    prize_count: int
    total_value: Number


@dataclass(frozen=True)
class AgeStatistics(ReportRecord):
    total_participants: int
    mean_age: float
    age_range: int


@dataclass(frozen=True)
class AgeDemographicsReport(ReportRecord):
    show: str
    broadcaster: str
    statistics: AgeStatistics
    youngest: ParticipantAgeEntry
    oldest: ParticipantAgeEntry
    distribution: dict[str, int]


# Threshold filter

@dataclass(frozen=True)
class ThresholdMatch(ReportRecord):
    """Prize at or above the threshold with where it was won."""
    broadcaster: str
    show: str
    participant: str
    participant_age: int
    description: str
    value: Number
    date_received: Any
    percent_above_threshold: Optional[str]  # None when the threshold is zero


@dataclass(frozen=True)
class ThresholdSummary(ReportRecord):
    count: int
    threshold: float
    max_value: Number
    min_value: Number
    total_value: Number
    mean_value: float
    broadcasters: tuple[str, ...]
    shows: tuple[str, ...]


@dataclass(frozen=True)
class ThresholdReport(ReportRecord):
    filter_label: str
    summary: ThresholdSummary
    matches: tuple[ThresholdMatch, ...]


# Per-show totals

@dataclass(frozen=True)
class TopPrize(ReportRecord):
    participant: str
    description: str
    value: Number
    date_received: Any = None


@dataclass(frozen=True)
class ShowTotals(ReportRecord):
    show: str
    broadcaster: str
    total_distributed: Number
    prize_count: int
    participants_awarded: int
    total_participants: int
    largest_prize: Number
    smallest_prize: Number
    mean_prize: float
    pct_participants_awarded: str
    top_prizes: tuple[TopPrize, ...]


@dataclass(frozen=True)
class TotalsSummary(ReportRecord):
    total_shows: int
    total_value_distributed: Number
    total_prizes_distributed: int
    mean_prizes_per_show: float
    mean_value_per_show: float
    most_generous_show: str
    largest_individual_prize: Number


@dataclass(frozen=True)
class ShowTotalsReport(ReportRecord):
    summary: TotalsSummary
    shows: tuple[ShowTotals, ...]


# Audience ranking

class EfficiencyTier(str, Enum):
    """Audience efficiency label of a broadcaster."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class BroadcasterRanking(ReportRecord):
    position: int
    broadcaster: str
    audience_points: Number
    market_share: str
    show_count: int
    show_names: tuple[str, ...]
    total_participants: int
    total_prize_value: Number
    investment_per_audience_point: float
    efficiency: EfficiencyTier


@dataclass(frozen=True)
class AudienceSummary(ReportRecord):
    total_broadcasters: int
    total_audience_points: Number
    total_invested: Number
    mean_points_per_broadcaster: float
    audience_leader: str


@dataclass(frozen=True)
class AudienceRankingReport(ReportRecord):
    summary: AudienceSummary
    ranking: tuple[BroadcasterRanking, ...]


# Catalog

@dataclass(frozen=True)
class ShowListing(ReportRecord):
    name: str
    broadcaster: str
    total_participants: int


@dataclass(frozen=True)
class ShowCatalog(ReportRecord):
    total: int
    shows: tuple[ShowListing, ...]
