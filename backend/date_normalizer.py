"""
Date parsing shared by the MRZ decoder and the regex-based parsers.

UAE documents print day-first dates, so D-M-Y is tried before M-D-Y when the
order is ambiguous. All helpers return None instead of raising.
"""
import re
from datetime import date, datetime
from typing import Optional

_NUMERIC_DATE = re.compile(r"(\d{1,4})([/\-.])(\d{1,2})\2(\d{1,4})")

_TEXTUAL_FORMATS = (
    "%d %b %Y",
    "%d %B %Y",
    "%d-%b-%Y",
    "%d-%b-%y",
    "%b %d, %Y",
    "%B %d, %Y",
)


def _expand_year(token: str) -> Optional[int]:
    if len(token) == 4:
        return int(token)
    if len(token) == 2:
        # same pivot as strptime %y
        return datetime.strptime(token, "%y").year
    return None


def _safe_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a free-form date string.

    Accepts '/', '-' or '.' separators (the same one twice), 2- or 4-digit
    years, Y-M-D when the first component has four digits, and a few textual
    month formats.
    """
    if not value:
        return None

    value = value.strip()
    match = _NUMERIC_DATE.fullmatch(value)
    if match:
        first, _, second, third = match.groups()

        if len(first) == 4:
            return _safe_date(int(first), int(second), int(third))

        if len(first) > 2:
            return None
        year = _expand_year(third)
        if year is None:
            return None

        # Day-first, then month-first
        return (_safe_date(year, int(second), int(first))
                or _safe_date(year, int(first), int(second)))

    for fmt in _TEXTUAL_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue

    return None


def parse_mrz_date(yymmdd: Optional[str]) -> Optional[date]:
    """
    Strict YYMMDD decoding for MRZ fields.

    The century comes straight from strptime's two-digit-year rule; no attempt
    is made to roll birth dates that land in the future.
    """
    if not yymmdd or len(yymmdd) != 6 or not yymmdd.isdigit():
        return None
    try:
        return datetime.strptime(yymmdd, "%y%m%d").date()
    except ValueError:
        return None


def parse_compact_date(ddmmyyyy: Optional[str]) -> Optional[date]:
    """Strict DDMMYYYY decoding (8 digits, no separators)."""
    if not ddmmyyyy or len(ddmmyyyy) != 8 or not ddmmyyyy.isdigit():
        return None
    return _safe_date(int(ddmmyyyy[4:8]), int(ddmmyyyy[2:4]), int(ddmmyyyy[0:2]))


def decode_digit_run(digits: Optional[str]) -> Optional[date]:
    """
    Decode a 9-10 digit run that should have been a DDMMYYYY date.

    OCR sometimes glues a stray digit onto the front of the date, so the first
    eight digits are tried, then digits 1..8.
    """
    if not digits or not digits.isdigit() or not 9 <= len(digits) <= 10:
        return None
    return parse_compact_date(digits[:8]) or parse_compact_date(digits[1:9])
