"""Prize overview: every show with its participants ranked by winnings"""

from collections.abc import Sequence

from ..data.models import Participant, Show
from ..models.reports import (
    ParticipantPrizes,
    PrizeEntry,
    PrizeOverviewReport,
    PrizeOverviewSummary,
    ShowPrizes,
)


def _participant_prizes(participant: Participant) -> ParticipantPrizes:
    return ParticipantPrizes(
        name=participant.name,
        age=participant.age,
        prize_count=participant.prize_count,
        total_value=participant.total_prize_value,
        prizes=tuple(
            PrizeEntry(
                description=prize.description,
                value=prize.value,
                date_received=prize.date_received,
            )
            for prize in participant.prizes
        ),
    )


def summarize_show_prizes(show: Show) -> ShowPrizes:
    """
    Summarize the prizes of a single show.

    Participants are listed by their own total prize value, highest
    first; participants with equal totals keep their original order.
    """
    participants = sorted(
        (_participant_prizes(p) for p in show.participants),
        key=lambda entry: entry.total_value,
        reverse=True,
    )

    return ShowPrizes(
        show=show.name,
        broadcaster=show.broadcaster.name,
        total_participants=len(show.participants),
        participants_with_prizes=sum(1 for p in show.participants if p.has_prizes),
        total_prize_value=show.total_prize_value,
        participants=tuple(participants),
    )


def build_prize_overview(shows: Sequence[Show]) -> PrizeOverviewReport:
    """
    Build the prize overview for a snapshot.

    Args:
        shows: Snapshot of every show

    Returns:
        PrizeOverviewReport with one block per show, in snapshot order
    """
    blocks = tuple(summarize_show_prizes(show) for show in shows)

    summary = PrizeOverviewSummary(
        total_shows=len(shows),
        total_participants=sum(block.total_participants for block in blocks),
        total_value_distributed=sum(block.total_prize_value for block in blocks),
        total_prizes_distributed=sum(
            p.prize_count for show in shows for p in show.participants
        ),
    )

    return PrizeOverviewReport(summary=summary, shows=blocks)
