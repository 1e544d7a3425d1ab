"""Detection of newly listed shows."""
import logging
from typing import List, Sequence

from processor.models import Show

logger = logging.getLogger(__name__)


def find_new_shows(previous: Sequence[Show], current: Sequence[Show]) -> List[Show]:
    """
    Find shows in the current listing that were not in the previous one.

    Shows are compared on all fields. Shows that disappeared since the
    previous run are not reported.

    Args:
        previous: Shows from the last saved snapshot
        current: Shows from this run

    Returns:
        New shows, in the order they appear in current
    """
    if list(previous) == list(current):
        return []

    seen = set(previous)
    new_shows = [show for show in current if show not in seen]
    logger.info(f"Found {len(new_shows)} new shows out of {len(current)}")
    return new_shows
