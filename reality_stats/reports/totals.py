"""Per-show prize totals with a dataset-wide summary"""

from collections.abc import Sequence

from ..config.defaults import ReportParams
from ..data.models import Show
from ..models.reports import ShowTotals, ShowTotalsReport, TopPrize, TotalsSummary
from ..utils.numbers import format_percent, round_half_up, safe_ratio


def summarize_show_totals(show: Show, top_n: int = 3) -> ShowTotals:
    """
    Compute prize totals for one show.

    Largest, smallest and mean prize are 0 for a show without prizes.
    ``top_prizes`` holds at most ``top_n`` prizes, highest first, equal
    values in the order they were found.
    """
    prizes = [
        TopPrize(
            participant=participant.name,
            description=prize.description,
            value=prize.value,
            date_received=prize.date_received,
        )
        for participant, prize in show.iter_prizes()
    ]
    values = [prize.value for prize in prizes]
    awarded = {p.name for p in show.participants if p.has_prizes}
    total = sum(values)
    total_participants = len(show.participants)

    if total_participants:
        pct_awarded = format_percent(len(awarded) / total_participants * 100)
    else:
        pct_awarded = "0%"

    return ShowTotals(
        show=show.name,
        broadcaster=show.broadcaster.name,
        total_distributed=total,
        prize_count=len(prizes),
        participants_awarded=len(awarded),
        total_participants=total_participants,
        largest_prize=max(values, default=0),
        smallest_prize=min(values, default=0),
        mean_prize=round_half_up(safe_ratio(total, len(values)), 2),
        pct_participants_awarded=pct_awarded,
        top_prizes=tuple(sorted(prizes, key=lambda p: p.value, reverse=True)[:top_n]),
    )


def build_totals_report(shows: Sequence[Show], params: ReportParams = ReportParams()) -> ShowTotalsReport:
    """
    Build per-show totals, most generous show first.

    Args:
        shows: Snapshot of every show
        params: Report parameters (top prize count, no-data label)

    Returns:
        ShowTotalsReport with a summary over every show
    """
    totals = sorted(
        (summarize_show_totals(show, params.top_prizes_per_show) for show in shows),
        key=lambda entry: entry.total_distributed,
        reverse=True,
    )

    total_value = sum(entry.total_distributed for entry in totals)
    total_prizes = sum(entry.prize_count for entry in totals)
    # maximum over actual prizes; a prizeless show contributes nothing, not 0
    largest = max((entry.largest_prize for entry in totals if entry.prize_count), default=0)

    summary = TotalsSummary(
        total_shows=len(totals),
        total_value_distributed=total_value,
        total_prizes_distributed=total_prizes,
        mean_prizes_per_show=round_half_up(safe_ratio(total_prizes, len(totals)), 2),
        mean_value_per_show=round_half_up(safe_ratio(total_value, len(totals)), 2),
        most_generous_show=totals[0].show if totals else params.no_data_label,
        largest_individual_prize=largest,
    )

    return ShowTotalsReport(summary=summary, shows=tuple(totals))
