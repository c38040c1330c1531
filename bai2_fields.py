"""
bai2_fields.py
Field splitting and value normalization shared by the scanner and decoder.

BAI2 has no quoting or escaping: fields are separated by commas and a record
ends with "/". Every helper here is total; values that don't parse come back
as None (or the supplied default) rather than raising.
"""

import re
from datetime import date, datetime, time
from typing import List, Optional, Union

FIELD_SEPARATOR = ","
RECORD_TERMINATOR = "/"

# 2400 and 9999 both mean "end of the business day" in BAI2 time fields
END_OF_DAY = "end of day"
END_OF_DAY_CODES = ("2400", "9999")

_INT_RE = re.compile(r"^[+-]?\d+$")

TimeValue = Union[time, str]


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------
def split_fields(line: str) -> List[str]:
    """Split a physical BAI2 line on commas. Nothing is stripped."""
    return line.split(FIELD_SEPARATOR)


def get_field(fields: List[str], index: int, default: str = "") -> str:
    """Bounds-checked field access; out-of-range reads return `default`."""
    if 0 <= index < len(fields):
        return fields[index]
    return default


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------
def parse_string(value: str) -> str:
    """Trim whitespace and drop every "/" (not only a trailing one)."""
    return value.strip().replace(RECORD_TERMINATOR, "")


def parse_currency(value: str, default: str = "USD") -> str:
    code = parse_string(value)
    return code if code else default


def parse_date(value: str) -> Optional[date]:
    """Parse a BAI2 date, YYMMDD (standard) or YYYYMMDD."""
    raw = parse_string(value)
    if not raw.isdigit():
        return None
    try:
        if len(raw) == 6:
            return datetime.strptime(raw, "%y%m%d").date()
        elif len(raw) == 8:
            return datetime.strptime(raw, "%Y%m%d").date()
    except ValueError:
        pass
    return None


def parse_time(value: str) -> Optional[TimeValue]:
    """
    Parse a BAI2 HHMM time.
    Returns a datetime.time, END_OF_DAY for 2400/9999, or None when blank
    or malformed.
    """
    raw = parse_string(value)
    if not raw:
        return None
    if raw in END_OF_DAY_CODES:
        return END_OF_DAY
    if len(raw) != 4 or not raw.isdigit():
        return None
    try:
        return datetime.strptime(raw, "%H%M").time()
    except ValueError:
        return None


def parse_int(value: str) -> Optional[int]:
    """
    Parse an optionally signed integer after normalization.
    Leading zeros are stripped first ("0005" -> 5); an all-zero value is 0.
    Anything else that is not a plain run of digits returns None.
    """
    raw = parse_string(value)
    sign = ""
    if raw[:1] in ("+", "-"):
        sign, raw = raw[0], raw[1:]
    if not raw:
        return None
    digits = raw.lstrip("0") or "0"
    candidate = sign + digits
    if not _INT_RE.match(candidate):
        return None
    try:
        return int(candidate)
    except ValueError:
        # longer than the interpreter allows for int conversion
        return None


def format_time(value: Optional[TimeValue]) -> Optional[str]:
    """Render a parse_time() result for JSON/CSV output."""
    if value is None:
        return None
    if isinstance(value, time):
        return value.isoformat()
    return value
