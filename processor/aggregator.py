"""Aggregation of shows across all categories."""
import logging
from typing import Iterable, List

from processor.models import Category, Show

logger = logging.getLogger(__name__)


class ShowAggregator:
    """Collects shows for several categories into one sorted list."""

    def __init__(self, scraper, categories: Iterable[Category]):
        """
        Args:
            scraper: Object with a get_shows(category) method
            categories: Categories in fetch order; ties in the sort keep this order
        """
        self.scraper = scraper
        self.categories = list(categories)

    def aggregate(self) -> List[Show]:
        """
        Fetch every category and sort the combined list by date and time.

        Returns:
            Shows sorted by (date, time), stable with respect to fetch order

        Raises:
            HtmaScannerError: If fetching or extracting any category fails
        """
        shows = []
        for category in self.categories:
            shows.extend(self.scraper.get_shows(category))

        # sorted() is stable, so equal (date, time) keep category order
        shows = sorted(shows, key=lambda show: (show.date, show.time))
        logger.info(
            f"Aggregated {len(shows)} shows from {len(self.categories)} categories"
        )
        return shows
