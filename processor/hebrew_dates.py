"""Parsing of Hebrew date and time strings from the HTMA listings."""
import re
from datetime import date, datetime, time

from processor.exceptions import (
    InvalidDate,
    InvalidDateFormat,
    InvalidDay,
    InvalidMonth,
    InvalidTimeFormat,
    InvalidYear,
)

HEBREW_MONTHS = (
    'ינואר',
    'פברואר',
    'מרץ',
    'אפריל',
    'מאי',
    'יוני',
    'יולי',
    'אוגוסט',
    'ספטמבר',
    'אוקטובר',
    'נובמבר',
    'דצמבר',
)

# "at", as in "בשעה 20:30"
TIME_PREFIX = 'בשעה'

_TIME_PATTERN = re.compile(r'[0-9]{2}:[0-9]{2}')

# ASCII digits only; int() alone also takes "1_2" and non-ASCII digits
_DAY_PATTERN = re.compile(r'\+?[0-9]+')
_YEAR_PATTERN = re.compile(r'[+-]?[0-9]+')


def _parse_number(token: str, pattern, error_class) -> int:
    if not pattern.fullmatch(token):
        raise error_class(token)
    return int(token)


def parse_date(text: str) -> date:
    """
    Parse a Hebrew date such as "רביעי, 5 מאי 2027".

    The weekday label before the comma is discarded.

    Args:
        text: Date text from the listing

    Returns:
        Parsed calendar date

    Raises:
        InvalidDateFormat: If the text does not have the expected shape
        InvalidDay: If the day is not an integer
        InvalidMonth: If the month name is not a known Hebrew month
        InvalidYear: If the year is not an integer
        InvalidDate: If day, month and year do not form a real date
    """
    parts = text.split(',')
    if len(parts) != 2:
        raise InvalidDateFormat(text)

    tokens = parts[1].split()
    if len(tokens) != 3:
        raise InvalidDateFormat(text)
    day_text, month_name, year_text = tokens

    day = _parse_number(day_text, _DAY_PATTERN, InvalidDay)

    if month_name not in HEBREW_MONTHS:
        raise InvalidMonth(month_name)
    month = HEBREW_MONTHS.index(month_name) + 1

    year = _parse_number(year_text, _YEAR_PATTERN, InvalidYear)

    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDate(text) from e


def parse_time(text: str) -> time:
    """
    Parse a listing time such as "בשעה 20:30" as 24-hour HH:MM.

    Args:
        text: Time text, with or without the leading "at" phrase

    Returns:
        Parsed time of day

    Raises:
        InvalidTimeFormat: If the remainder is not a valid HH:MM time
    """
    value = text.strip()
    if value.startswith(TIME_PREFIX):
        value = value[len(TIME_PREFIX):].strip()

    if not _TIME_PATTERN.fullmatch(value):
        raise InvalidTimeFormat(text)

    try:
        return datetime.strptime(value, '%H:%M').time()
    except ValueError as e:
        raise InvalidTimeFormat(text) from e
