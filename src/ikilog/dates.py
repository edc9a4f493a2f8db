"""
Log dates and the date suppression policy.

Every log call carries the date it was written, e.g. "2016-Jul-28".
Calls dated on or before the configured cutoff stay silent, so old
debugging output can be retired without deleting the calls. CRITICAL
calls ignore the cutoff.
"""

from datetime import date, datetime
from typing import Optional

from .tags import Tag

# yyyy-MMM-dd, e.g. 2016-Jul-28
DATE_FORMAT = '%Y-%b-%d'

DEFAULT_SUPPRESS_BEFORE_DATE = '2000-Jan-01'


def parse_log_date(text) -> Optional[date]:
    """Parse a yyyy-MMM-dd string. Returns None if it is not one."""
    if not isinstance(text, str):
        return None
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def format_log_date(value: date) -> str:
    """Format a date the way log calls spell it."""
    return value.strftime(DATE_FORMAT)


def should_log_for_date(date_text: str, tag: Tag,
                        suppress_before_date: str) -> bool:
    """Decide whether an event passes the date cutoff.

    CRITICAL events always pass, without either date being parsed.
    Otherwise both dates must parse and the event date must be
    strictly after the cutoff; anything else drops the event.

    Args:
        date_text: The event's date (yyyy-MMM-dd)
        tag: The event's tag
        suppress_before_date: The configured cutoff (yyyy-MMM-dd)

    Returns:
        True if the event should be emitted
    """
    if tag.bypasses_date_cutoff:
        return True

    event_date = parse_log_date(date_text)
    cutoff = parse_log_date(suppress_before_date)
    if event_date is None or cutoff is None:
        return False
    return event_date > cutoff
