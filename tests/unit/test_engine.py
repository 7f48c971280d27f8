"""Unit tests for the report engine."""

import pytest
from unittest.mock import Mock

from reality_stats.config.defaults import DefaultConfig, GatewayParams, LoggingParams, ReportParams
from reality_stats.data.gateway import InMemoryShowGateway
from reality_stats.engine import REPORT_DESCRIPTIONS, ReportEngine
from reality_stats.errors import InvalidArgumentError, NotFoundError
from reality_stats.models.reports import ReportStatus


@pytest.fixture
def empty_engine() -> ReportEngine:
    return ReportEngine(InMemoryShowGateway([]))


class TestReportEngine:
    """Test suite for ReportEngine."""

    def test_engine_initialization(self, gateway) -> None:
        engine = ReportEngine(gateway)

        assert engine.gateway is gateway
        assert engine.config.reports.top_prizes_per_show == 3

    def test_describe_reports(self, engine) -> None:
        described = engine.describe_reports()

        assert [d["report"] for d in described] == list(REPORT_DESCRIPTIONS)
        assert all(d["description"] for d in described)

    def test_prize_overview(self, engine) -> None:
        result = engine.prize_overview()

        assert result.status is ReportStatus.OK
        assert result.report == "prize_overview"
        assert result.data.summary.total_shows == 4

    def test_show_totals(self, engine) -> None:
        result = engine.show_totals()

        assert result.status is ReportStatus.OK
        assert result.data.summary.most_generous_show == "Big Brother Brasil"

    def test_show_totals_uses_config(self, gateway) -> None:
        config = DefaultConfig(
            reports=ReportParams(top_prizes_per_show=1),
            logging=LoggingParams(),
            gateway=GatewayParams(),
        )
        result = ReportEngine(gateway, config).show_totals()

        assert len(result.data.shows[0].top_prizes) == 1

    def test_audience_ranking(self, engine) -> None:
        result = engine.audience_ranking()

        assert result.data.summary.audience_leader == "Globo"

    def test_list_shows(self, engine) -> None:
        result = engine.list_shows()

        assert result.data.total == 4


class TestAgeDemographics:
    """Test suite for show lookup through the engine."""

    def test_found(self, engine) -> None:
        result = engine.age_demographics("fazenda")

        assert result.status is ReportStatus.OK
        assert result.data.show == "A Fazenda"
        assert result.data.youngest.name == "Rico"

    def test_not_found(self, engine) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            engine.age_demographics("survivor")

        assert exc_info.value.pattern == "survivor"

    def test_show_without_participants(self, engine) -> None:
        with pytest.raises(NotFoundError):
            engine.age_demographics("casa de verao")

    @pytest.mark.parametrize("pattern", ["", "   ", None])
    def test_blank_pattern(self, engine, pattern) -> None:
        with pytest.raises(InvalidArgumentError):
            engine.age_demographics(pattern)

    def test_uses_gateway_lookup(self, shows) -> None:
        """The engine asks the gateway to resolve the show."""
        gateway = Mock()
        gateway.find_show_by_name.return_value = shows[0]

        ReportEngine(gateway).age_demographics("bbb")

        gateway.find_show_by_name.assert_called_once_with("bbb")
        gateway.list_shows.assert_not_called()


class TestPrizesAbove:
    """Test suite for the threshold report through the engine."""

    def test_matches(self, engine) -> None:
        result = engine.prizes_above("100000")

        assert result.status is ReportStatus.OK
        assert result.message is None
        assert result.data.summary.count == 3

    def test_no_matches_is_ok(self, engine) -> None:
        result = engine.prizes_above(10_000_000)

        assert result.status is ReportStatus.OK
        assert result.data.matches == ()
        assert "No prizes found" in result.message

    def test_invalid_threshold_skips_fetch(self) -> None:
        gateway = Mock()

        with pytest.raises(InvalidArgumentError):
            ReportEngine(gateway).prizes_above("abc")

        gateway.list_shows.assert_not_called()


class TestEmptySnapshot:
    """Test suite for an empty dataset."""

    def test_prize_overview_is_empty(self, empty_engine) -> None:
        result = empty_engine.prize_overview()

        assert result.status is ReportStatus.EMPTY
        assert result.is_empty
        assert result.data is None
        assert result.message == "No reality shows found"

    def test_show_totals_is_empty(self, empty_engine) -> None:
        assert empty_engine.show_totals().is_empty

    def test_threshold_on_empty_snapshot(self, empty_engine) -> None:
        result = empty_engine.prizes_above(0)

        assert result.status is ReportStatus.OK
        assert result.data.matches == ()

    def test_audience_on_empty_snapshot(self, empty_engine) -> None:
        result = empty_engine.audience_ranking()

        assert result.status is ReportStatus.OK
        assert result.data.summary.audience_leader == "N/A"

    def test_age_demographics_on_empty_snapshot(self, empty_engine) -> None:
        with pytest.raises(NotFoundError):
            empty_engine.age_demographics("anything")


class TestResultSerialization:
    """Test suite for the plain-record view of results."""

    def test_ok_result(self, engine) -> None:
        record = engine.show_totals().to_dict()

        assert record["report"] == "show_totals"
        assert record["status"] == "ok"
        assert record["message"] is None
        assert record["data"]["summary"]["total_shows"] == 4
        assert record["data"]["shows"][0]["top_prizes"][0]["value"] == 1500000

    def test_empty_result(self, empty_engine) -> None:
        record = empty_engine.prize_overview().to_dict()

        assert record == {
            "report": "prize_overview",
            "status": "empty",
            "data": None,
            "message": "No reality shows found",
        }
