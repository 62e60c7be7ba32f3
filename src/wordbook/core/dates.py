"""
Date argument parsing and display formatting.
"""

from datetime import datetime

from wordbook.config import DATE_ARG_FORMAT, DATE_ARG_PATTERN, DISPLAY_DATE_FORMAT
from wordbook.core.errors import InvalidDate


def parse_date_arg(text: str) -> datetime:
    """Parse a MM:dd:yyyy:HH:mm (24-hour) date argument."""
    try:
        return datetime.strptime(text.strip(), DATE_ARG_FORMAT)
    except ValueError:
        raise InvalidDate(f'Invalid date "{text}"! Dates must be formatted as {DATE_ARG_PATTERN}')


def format_date(value: datetime) -> str:
    return value.strftime(DISPLAY_DATE_FORMAT)
