"""Registry of listing endpoints per show category."""
from types import MappingProxyType
from typing import List, Mapping

from processor.exceptions import CategoryNotFound
from processor.models import Category

HTMA_BASE_URL = "https://htma.smarticket.co.il"

# Percent-encoded Hebrew category slugs
ENDPOINT_URLS = {
    Category.COMEDY: f"{HTMA_BASE_URL}/%D7%91%D7%99%D7%93%D7%95%D7%A8",
    Category.MUSIC: f"{HTMA_BASE_URL}/%D7%9E%D7%95%D7%A1%D7%99%D7%A7%D7%94",
}


class CategoryRegistry:
    """Immutable mapping from category to listing URL."""

    def __init__(self, endpoints: Mapping[Category, str]):
        self._endpoints = MappingProxyType(dict(endpoints))

    @property
    def categories(self) -> List[Category]:
        """Registered categories in registration order."""
        return list(self._endpoints)

    def lookup(self, category: Category) -> str:
        """
        Get the listing URL for a category.

        Raises:
            CategoryNotFound: If the category has no registered endpoint
        """
        try:
            return self._endpoints[category]
        except KeyError:
            raise CategoryNotFound(category) from None


def default_registry() -> CategoryRegistry:
    """Build the registry of HTMA category pages."""
    return CategoryRegistry(ENDPOINT_URLS)
