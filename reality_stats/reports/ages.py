"""Age demographics of a single show"""

from typing import Optional

from ..data.models import Participant, Show
from ..errors import NotFoundError
from ..models.reports import AgeDemographicsReport, AgeStatistics, ParticipantAgeEntry
from ..utils.numbers import round_half_up

# (label, lowest age, highest age), both ends inclusive, None is unbounded.
# "under 20" keeps the histogram summing to the participant count.
AGE_BUCKETS: tuple[tuple[str, Optional[int], Optional[int]], ...] = (
    ("under 20", None, 19),
    ("20-25", 20, 25),
    ("26-30", 26, 30),
    ("31-35", 31, 35),
    ("over 35", 36, None),
)


def age_distribution(ages: list[int]) -> dict[str, int]:
    """Count ages per fixed bucket, keeping bucket order."""
    distribution = {}
    for label, low, high in AGE_BUCKETS:
        distribution[label] = sum(
            1 for age in ages
            if (low is None or age >= low) and (high is None or age <= high)
        )
    return distribution


def _age_entry(participant: Participant) -> ParticipantAgeEntry:
    return ParticipantAgeEntry(
        name=participant.name,
        age=participant.age,
        prize_count=participant.prize_count,
        total_value=participant.total_prize_value,
    )


def build_age_report(show: Show) -> AgeDemographicsReport:
    """
    Build the age demographics of a show.

    The youngest and oldest participants are the first ones found with the
    minimum and maximum age. The mean age is rounded to one decimal.

    Raises:
        NotFoundError: If the show has no participants
    """
    participants = show.participants
    if not participants:
        raise NotFoundError(
            f"No participants found in show '{show.name}'",
            pattern=show.name
        )

    youngest = min(participants, key=lambda p: p.age)
    oldest = max(participants, key=lambda p: p.age)
    ages = [p.age for p in participants]

    return AgeDemographicsReport(
        show=show.name,
        broadcaster=show.broadcaster.name,
        statistics=AgeStatistics(
            total_participants=len(participants),
            mean_age=round_half_up(sum(ages) / len(ages), 1),
            age_range=oldest.age - youngest.age,
        ),
        youngest=_age_entry(youngest),
        oldest=_age_entry(oldest),
        distribution=age_distribution(ages),
    )
