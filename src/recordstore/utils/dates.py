import re
from datetime import date, datetime
from typing import Optional

DISPLAY_FORMAT = "%d/%m/%Y"

_DISPLAY_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")
# yyyy-mm-dd, optionally followed by a time part ("2023-08-15 16:00:00" or "2023-08-15T16:00")
_ISO_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:[ T].*)?$")


def _build(year: str, month: str, day: str) -> Optional[date]:
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def parse_date_term(value: object) -> Optional[str]:
    """
    Canonicalize a date-like string to ``dd/mm/yyyy``.

    Returns None when the value is not a recognised date, instead of
    falling back to today. Used for search terms.
    """
    if not isinstance(value, str):
        return None
    value = value.strip()

    m = _DISPLAY_RE.match(value)
    if m:
        day, month, year = m.groups()
        parsed = _build(year, month, day)
        return value if parsed else None

    m = _ISO_RE.match(value)
    if m:
        year, month, day = m.groups()
        parsed = _build(year, month, day)
        return parsed.strftime(DISPLAY_FORMAT) if parsed else None

    return None


def canonicalize_date(value: object, today: Optional[date] = None) -> str:
    """
    Canonicalize an order date to the display format ``dd/mm/yyyy``.

    Accepts an already canonical value, or ``yyyy-mm-dd`` optionally
    followed by a time component. Anything else (absent, empty,
    unparseable, impossible calendar date) becomes the current date.

    Args:
        value: Raw value supplied by the caller
        today: Override for the current date (tests)

    Returns:
        Date string in ``dd/mm/yyyy`` format
    """
    canonical = parse_date_term(value)
    if canonical is not None:
        return canonical
    today = today or datetime.now().date()
    return today.strftime(DISPLAY_FORMAT)
