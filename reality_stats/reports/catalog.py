"""Plain listing of the shows in a snapshot"""

from collections.abc import Sequence

from ..data.models import Show
from ..models.reports import ShowCatalog, ShowListing


def build_show_catalog(shows: Sequence[Show]) -> ShowCatalog:
    """List every show with its broadcaster and participant count."""
    return ShowCatalog(
        total=len(shows),
        shows=tuple(
            ShowListing(
                name=show.name,
                broadcaster=show.broadcaster.name,
                total_participants=len(show.participants),
            )
            for show in shows
        ),
    )
