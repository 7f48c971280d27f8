"""
Report engine coordinator.

Fetches a snapshot from the injected show gateway for every request, runs
the matching report builder over it and wraps the outcome in a
ReportResult for the caller to serialize.
"""

from typing import Any, Optional

from .config.defaults import DefaultConfig, get_default_config
from .data.gateway import ShowGateway
from .errors import InvalidArgumentError, NotFoundError
from .logging.config import get_report_logger, log_report_outcome
from .models.reports import ReportResult, ReportStatus
from .reports import (
    build_age_report,
    build_audience_report,
    build_prize_overview,
    build_show_catalog,
    build_threshold_report,
    build_totals_report,
    parse_threshold,
)

logger = get_report_logger(__name__)

PRIZE_OVERVIEW = "prize_overview"
AGE_DEMOGRAPHICS = "age_demographics"
PRIZES_ABOVE = "prizes_above"
SHOW_TOTALS = "show_totals"
AUDIENCE_RANKING = "audience_ranking"
SHOW_CATALOG = "show_catalog"

REPORT_DESCRIPTIONS: dict[str, str] = {
    PRIZE_OVERVIEW: "Every show with its participants ranked by prize value",
    AGE_DEMOGRAPHICS: "Youngest and oldest participant and age distribution of a show",
    PRIZES_ABOVE: "Prizes worth at least a given value",
    SHOW_TOTALS: "Prize totals per show, most generous first",
    AUDIENCE_RANKING: "Broadcasters ranked by audience points",
    SHOW_CATALOG: "List of every show",
}


class ReportEngine:
    """
    Stateless coordinator for show reports.

    Holds only the gateway and configuration; every report reads a fresh
    snapshot, so concurrent calls share nothing mutable.
    """

    def __init__(self, gateway: ShowGateway, config: Optional[DefaultConfig] = None) -> None:
        self.gateway = gateway
        self.config = config or get_default_config()
        self.logger = logger

    def describe_reports(self) -> list[dict[str, str]]:
        """Name and description of every available report."""
        return [
            {"report": name, "description": description}
            for name, description in REPORT_DESCRIPTIONS.items()
        ]

    def prize_overview(self) -> ReportResult:
        """Prize overview over every show; EMPTY when there are no shows."""
        shows = self.gateway.list_shows()
        if not shows:
            return self._empty(PRIZE_OVERVIEW, "No reality shows found")

        report = build_prize_overview(shows)
        self._log_ok(PRIZE_OVERVIEW, shows=len(shows),
                     total_value=report.summary.total_value_distributed)
        return ReportResult.ok(PRIZE_OVERVIEW, report)

    def age_demographics(self, pattern: str) -> ReportResult:
        """
        Age demographics of the first show whose name matches the pattern.

        Raises:
            InvalidArgumentError: If the pattern is blank
            NotFoundError: If no show matches or the show has no participants
        """
        if not isinstance(pattern, str) or not pattern.strip():
            self._log_rejected(AGE_DEMOGRAPHICS, "blank show name", pattern=pattern)
            raise InvalidArgumentError(
                "Show name is required", argument="pattern", value=pattern
            )

        show = self.gateway.find_show_by_name(pattern)
        if show is None:
            self._log_rejected(AGE_DEMOGRAPHICS, "show not found", pattern=pattern)
            raise NotFoundError(f"Reality show \"{pattern}\" not found", pattern=pattern)

        try:
            report = build_age_report(show)
        except NotFoundError as e:
            self._log_rejected(AGE_DEMOGRAPHICS, str(e), pattern=pattern, show=show.name)
            raise

        self._log_ok(AGE_DEMOGRAPHICS, pattern=pattern, show=show.name,
                     participants=report.statistics.total_participants)
        return ReportResult.ok(AGE_DEMOGRAPHICS, report)

    def prizes_above(self, threshold: Any) -> ReportResult:
        """
        Prizes worth at least ``threshold``.

        No matches is still an OK result, with an empty match list.

        Raises:
            InvalidArgumentError: If the threshold is not a finite, non-negative number
        """
        try:
            value = parse_threshold(threshold)
        except InvalidArgumentError:
            self._log_rejected(PRIZES_ABOVE, "invalid threshold", threshold=repr(threshold))
            raise

        report = build_threshold_report(self.gateway.list_shows(), value)

        message = None
        if not report.matches:
            message = f"No prizes found with {report.filter_label}"
        self._log_ok(PRIZES_ABOVE, threshold=value, matches=report.summary.count)
        return ReportResult.ok(PRIZES_ABOVE, report, message=message)

    def show_totals(self) -> ReportResult:
        """Per-show totals; EMPTY when there are no shows."""
        shows = self.gateway.list_shows()
        if not shows:
            return self._empty(SHOW_TOTALS, "No reality shows found")

        report = build_totals_report(shows, self.config.reports)
        self._log_ok(SHOW_TOTALS, shows=len(shows),
                     total_value=report.summary.total_value_distributed)
        return ReportResult.ok(SHOW_TOTALS, report)

    def audience_ranking(self) -> ReportResult:
        """Broadcaster ranking; an empty snapshot yields an empty ranking."""
        shows = self.gateway.list_shows()
        report = build_audience_report(shows, self.config.reports)
        self._log_ok(AUDIENCE_RANKING, broadcasters=report.summary.total_broadcasters)
        return ReportResult.ok(AUDIENCE_RANKING, report)

    def list_shows(self) -> ReportResult:
        """Catalog of every show."""
        catalog = build_show_catalog(self.gateway.list_shows())
        self._log_ok(SHOW_CATALOG, shows=catalog.total)
        return ReportResult.ok(SHOW_CATALOG, catalog)

    def _empty(self, report: str, message: str) -> ReportResult:
        log_report_outcome(self.logger, report, ReportStatus.EMPTY.value)
        return ReportResult.empty(report, message)

    def _log_ok(self, report: str, **context: Any) -> None:
        log_report_outcome(self.logger, report, ReportStatus.OK.value, context)

    def _log_rejected(self, report: str, reason: str, **context: Any) -> None:
        self.logger.warning("Report request rejected", report=report, reason=reason, **context)
