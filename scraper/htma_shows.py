"""Scraper for the HTMA show listing pages."""
import logging
from typing import List

import requests
from bs4 import BeautifulSoup

from processor.exceptions import MissingContainer, NetworkError
from processor.hebrew_dates import parse_date, parse_time
from processor.models import Category, Show
from scraper.registry import CategoryRegistry

logger = logging.getLogger(__name__)

CONTAINER_SELECTOR = 'div[class="category_shows"]'
DETAILS_SELECTOR = 'div.details-container'
TITLE_SELECTOR = 'h2'
DATE_SELECTOR = 'div.date_container'
TIME_SELECTOR = 'div.time_container'


def extract_shows(html_content: str, category: Category) -> List[Show]:
    """
    Extract shows from a category listing page.

    A details block without a title, date or time element keeps the
    default for that field. A date or time element whose text cannot be
    parsed is an error.

    Args:
        html_content: HTML of the listing page
        category: Category assigned to every extracted show

    Returns:
        Shows in document order

    Raises:
        MissingContainer: If the page has no listing container
        ParseError: If a date or time element is malformed
    """
    soup = BeautifulSoup(html_content, 'html.parser')

    container = soup.select_one(CONTAINER_SELECTOR)
    if container is None:
        raise MissingContainer(category)

    shows = []
    for element in container.select(DETAILS_SELECTOR):
        fields = {'category': category}

        title_elem = element.select_one(TITLE_SELECTOR)
        if title_elem is not None:
            fields['title'] = title_elem.get_text().strip()

        date_elem = element.select_one(DATE_SELECTOR)
        if date_elem is not None:
            fields['date'] = parse_date(date_elem.get_text().strip())

        time_elem = element.select_one(TIME_SELECTOR)
        if time_elem is not None:
            fields['time'] = parse_time(time_elem.get_text())

        shows.append(Show(**fields))

    return shows


class HtmaShowsScraper:
    """Fetches and extracts shows for each HTMA category."""

    def __init__(self, registry: CategoryRegistry, timeout: int = 30):
        """
        Initialize the scraper.

        Args:
            registry: Category to URL registry
            timeout: HTTP request timeout in seconds (default: 30)
        """
        self.registry = registry
        self.timeout = timeout

    def get_shows(self, category: Category) -> List[Show]:
        """
        Fetch the listing page of a category and extract its shows.

        Args:
            category: Category to fetch

        Returns:
            List of Show objects in page order
        """
        html_content = self.fetch_html(category)
        shows = extract_shows(html_content, category)
        logger.info(f"Extracted {len(shows)} {category} shows")
        return shows

    def fetch_html(self, category: Category) -> str:
        """
        Fetch the listing HTML of a category.

        Raises:
            CategoryNotFound: If the category has no registered endpoint
            NetworkError: If the request fails or returns an error status
        """
        url = self.registry.lookup(category)
        logger.info(f"Fetching {category} listing from {url}")
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(url, f"Failed to fetch {category} listing: {e}") from e
        return response.text
