"""Data models for show processing."""
import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class Category(Enum):
    """Kind of show listing; NONE is the unassigned placeholder."""
    NONE = 'none'
    COMEDY = 'comedy'
    MUSIC = 'music'

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_display_name(cls, name: str) -> 'Category':
        """
        Resolve a category from its display name.

        Raises:
            ValueError: If no category has that display name
        """
        for category, display_name in _DISPLAY_NAMES.items():
            if display_name == name:
                return category
        raise ValueError(f"Unknown category: {name!r}")

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES = {
    Category.NONE: 'None',
    Category.COMEDY: 'Comedy',
    Category.MUSIC: 'Music',
}


@dataclass(frozen=True)
class Show:
    """A single show listing. Equality is structural over all fields."""
    title: str = ''
    date: datetime.date = field(default=datetime.date(1970, 1, 1))
    time: datetime.time = field(default=datetime.time(0, 0, 0))
    category: Category = Category.NONE

    def __str__(self) -> str:
        return (
            f"Title: {self.title}, Date: {self.date.isoformat()}, "
            f"Time: {self.time.isoformat()}, Category: {self.category}"
        )

    def to_dict(self) -> Dict[str, str]:
        """Serialize to a snapshot record."""
        return {
            'title': self.title,
            'date': self.date.isoformat(),
            'time': self.time.strftime('%H:%M:%S'),
            'category': self.category.display_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Show':
        """
        Deserialize a snapshot record.

        Args:
            data: Mapping with title, date, time and category keys

        Returns:
            Show instance

        Raises:
            KeyError, ValueError, TypeError: If the record is malformed
        """
        title = data['title']
        if not isinstance(title, str):
            raise TypeError(f"title must be a string, got {type(title).__name__}")
        return cls(
            title=title,
            date=datetime.date.fromisoformat(data['date']),
            time=datetime.time.fromisoformat(data['time']),
            category=Category.from_display_name(data['category']),
        )
