"""Format-trying date parser for OCR token text."""

import re
from datetime import date, datetime

# Structural check for a numeric date with a four digit year ("3/15/2024")
_FOUR_DIGIT_YEAR_DATE = re.compile(r"\d\d?[-/]\d\d?[-/]\d\d\d\d", re.ASCII)

FOUR_DIGIT_YEAR_FORMATS = ("%m-%d-%Y", "%m/%d/%Y")
SHORT_FORMATS = ("%m-%d-%y", "%m/%d/%y")
# Month names are tried in full form first, then as abbreviations
WRITTEN_FORMATS = ("%B %d, %Y", "%B %d %Y", "%b %d, %Y", "%b %d %Y")


def parse_date(text: str) -> date | None:
    """
    Parse a token description as a date.

    Numeric dates are read month-first. Parse failure is a normal result
    and returns None; this function never raises on arbitrary text.

    Args:
        text: Raw token description, e.g. "3/15/2024" or "May 3, 2024"

    Returns:
        The first successfully parsed date, or None
    """
    if not isinstance(text, str) or not text:
        return None

    lowered = text.lower()
    if _FOUR_DIGIT_YEAR_DATE.search(lowered):
        return _first_parse(lowered, FOUR_DIGIT_YEAR_FORMATS)

    return _first_parse(lowered, SHORT_FORMATS) or _first_parse(lowered.capitalize(), WRITTEN_FORMATS)


def is_date(text: str) -> bool:
    return parse_date(text) is not None


def _first_parse(text: str, formats: tuple[str, ...]) -> date | None:
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None
