"""
Canonical data models for normalized show data.

This module defines immutable data structures that represent clean show
records after normalization from the raw upstream document format.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Broadcaster:
    """Broadcaster distributing a show. Identity is the name."""
    name: str
    audience_points: Number = 0


@dataclass(frozen=True)
class Prize:
    """Monetary prize received by a participant."""
    description: str
    value: Number
    date_received: Optional[Union[str, date]] = None


@dataclass(frozen=True)
class Participant:
    """Show participant with the prizes they won, in upstream order."""
    name: str
    age: int
    prizes: tuple[Prize, ...] = ()

    @property
    def prize_count(self) -> int:
        """Number of prizes received."""
        return len(self.prizes)

    @property
    def total_prize_value(self) -> Number:
        """Sum of prize values, 0 with no prizes."""
        return sum(prize.value for prize in self.prizes)

    @property
    def has_prizes(self) -> bool:
        """True if at least one prize was received."""
        return bool(self.prizes)


@dataclass(frozen=True)
class Show:
    """Reality show with its broadcaster and participants."""
    name: str
    broadcaster: Broadcaster
    participants: tuple[Participant, ...] = field(default_factory=tuple)

    @property
    def total_prize_value(self) -> Number:
        """Sum of every participant's prizes."""
        return sum(p.total_prize_value for p in self.participants)

    def iter_prizes(self):
        """Yield (participant, prize) pairs in participant then prize order."""
        for participant in self.participants:
            for prize in participant.prizes:
                yield participant, prize
