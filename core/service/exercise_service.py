import math
import re
from datetime import date, datetime
from typing import Any, Optional, Union

from core.entities import LogQuery
from .user_service import normalize_text

Number = Union[int, float]

EPOCH = date(1970, 1, 1)
DISPLAY_DATE_FORMAT = "%a %b %d %Y"

_NUMBER_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")

# Tried in order after ISO 8601.
_DATE_FORMATS = (
    DISPLAY_DATE_FORMAT,
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%Y-%m",
    "%Y",
)


def today() -> date:
    """Current calendar date in server local time."""
    return date.today()


def format_date(value: date) -> str:
    """Render a date as a calendar string, e.g. 'Mon Jan 01 2024'."""
    return value.strftime(DISPLAY_DATE_FORMAT)


def parse_number(value: Any) -> Optional[Number]:
    """
    Parse a decimal number from a string or a JSON number.

    Integral values are returned as int so that '30' and 30.0 both echo as 30.

    Returns:
        Optional[Number]: The parsed finite number, or None if unparseable.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = normalize_text(value)
        if text is None or not _NUMBER_PATTERN.match(text):
            return None
        number = float(text)

    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def parse_duration(value: Any) -> Optional[Number]:
    """
    Parse an exercise duration in minutes.

    Returns:
        Optional[Number]: The duration if it is a strictly positive number, None otherwise.
    """
    number = parse_number(value)
    if number is None or number <= 0:
        return None
    return number


def parse_date(value: Any) -> Optional[date]:
    """
    Parse a calendar date. Accepts ISO 8601 dates and datetimes plus a few
    common written forms. Any time component is dropped.

    Returns:
        Optional[date]: The parsed date, or None if absent or unparseable.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = normalize_text(value)
    if text is None:
        return None

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def parse_limit(value: Any) -> Optional[int]:
    """
    Parse a result cap. Fractions are truncated.

    Returns:
        Optional[int]: The limit if non-negative, None if absent, negative or non-numeric.
    """
    number = parse_number(value)
    if number is None or number < 0:
        return None
    return int(number)


def resolve_exercise_date(value: Any) -> date:
    """Date for a new exercise. Absent or unparseable input means today."""
    return parse_date(value) or today()


def build_log_query(date_from: Any = None, date_to: Any = None, limit: Any = None) -> LogQuery:
    """
    Build the filters for an exercise log request.

    Malformed filters never reject the request: an unparseable lower bound
    becomes the epoch, an unparseable upper bound becomes today and an
    invalid limit is dropped. Empty strings count as absent.
    """
    query = LogQuery()

    if normalize_text(date_from) is not None:
        query.date_from = parse_date(date_from) or EPOCH

    if normalize_text(date_to) is not None:
        query.date_to = parse_date(date_to) or today()

    if normalize_text(limit) is not None or isinstance(limit, (int, float)):
        query.limit = parse_limit(limit)

    return query


def coerce_stored_duration(value: Any) -> Number:
    """Duration of a stored record, 0 when the record holds garbage"""
    number = parse_number(value)
    return number if number is not None else 0


def coerce_stored_date(value: Any) -> date:
    """Date of a stored record, today when the record holds garbage"""
    return parse_date(value) or today()
