"""Expansion of a date range and two weekdays into the date pairs to search."""
import logging
import re

from datetime import date, datetime, timedelta
from typing import List, Union

from .exceptions import InvalidDateFormat, InvalidWeekdayName
from .types import DatePair

logger = logging.getLogger(__name__)

WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday"
)

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
WEEK = timedelta(days=7)


def parse_weekday(name: str) -> int:
    """Returns the weekday index (monday is 0) of an English weekday name, ignoring case."""
    if not isinstance(name, str) or name.lower() not in WEEKDAYS:
        raise InvalidWeekdayName(name)
    return WEEKDAYS.index(name.lower())


def parse_date(value: Union[str, date]) -> date:
    """Parses a YYYY-MM-DD string. `date` objects are returned unchanged."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        raise InvalidDateFormat(value)
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError) as e:
        raise InvalidDateFormat(value) from e


def expand_weekday_pairs(
        range_start: Union[str, date],
        range_end: Union[str, date],
        outbound_weekday: str,
        return_weekday: str
    ) -> List[DatePair]:
    """Lists one (outbound, return) date pair per week of the range.

    The first outbound date is the first `outbound_weekday` on or after
    `range_start`; the first return date is the first `return_weekday` on or
    after it, pushed one week later if it would fall before the outbound date.
    Both advance a week at a time while the return date is strictly before
    `range_end`. A range too narrow for a single pair yields an empty list.

    Raises:
        InvalidDateFormat: If a boundary is not a YYYY-MM-DD date.
        InvalidWeekdayName: If a weekday is not an English weekday name.
    """
    start = parse_date(range_start)
    end = parse_date(range_end)
    outbound_day = parse_weekday(outbound_weekday)
    return_day = parse_weekday(return_weekday)

    days_until_outbound = (outbound_day - start.weekday() + 7) % 7
    days_until_return = (return_day - start.weekday() + 7) % 7

    outbound_date = start + timedelta(days=days_until_outbound)
    return_date = start + timedelta(days=days_until_return)

    if return_date < outbound_date:
        return_date += WEEK

    pairs: List[DatePair] = []
    while return_date < end:
        pairs.append(DatePair(outbound_date, return_date))
        outbound_date += WEEK
        return_date += WEEK

    logger.debug(f"Expanded {start} - {end} ({outbound_weekday}/{return_weekday}) into {len(pairs)} date pairs")
    return pairs
