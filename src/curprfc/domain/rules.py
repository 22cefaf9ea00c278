"""Structural rules for CURP and RFC codes."""

import calendar
import re

CURP_LENGTH = 18
RFC_MIN_LENGTH = 12
RFC_MAX_LENGTH = 13
MATCH_PREFIX_LENGTH = 10

DEFAULT_MIN_YEAR = 1950
REFERENCE_MAX_YEAR = 2025

# Entidades federativas; NE (born abroad) is not accepted
STATE_CODES = frozenset(
    {
        "AS", "BC", "BS", "CC", "CL", "CM", "CS", "CH",
        "DF", "DG", "GT", "GR", "HG", "JC", "MC", "MN",
        "MS", "NT", "NL", "OC", "PL", "QT", "QR", "SP",
        "SL", "SR", "TC", "TS", "TL", "VZ", "YN", "ZS",
    }
)

# Internal consonants exclude vowels and Ñ
CURP_PATTERN = re.compile(
    r"^[A-Z]{4}[0-9]{6}[HM][A-Z]{2}[BCDFGHJKLMNPQRSTVWXYZ]{3}[0-9A-Z]{2}$"
)
RFC_PATTERN = re.compile(r"^(?P<letters>[A-Z]{3,4})(?P<date>[0-9]{6})[A-Z0-9]{2,3}$")

CURP_STATE_SLICE = slice(11, 13)
CURP_DATE_SLICE = slice(4, 10)

_WHITESPACE = re.compile(r"\s+")


def normalize(value: str | None) -> str:
    """Uppercase and drop every whitespace character."""
    if not value:
        return ""
    return _WHITESPACE.sub("", value.upper())


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_valid_date(
    year: int,
    month: int,
    day: int,
    min_year: int = DEFAULT_MIN_YEAR,
    max_year: int = REFERENCE_MAX_YEAR,
) -> bool:
    """Check that a birth date is a real Gregorian date within the year range."""
    if year < min_year or year > max_year:
        return False
    if month < 1 or month > 12:
        return False
    if month == 2:
        days_in_month = 29 if is_leap_year(year) else 28
    else:
        days_in_month = calendar.monthrange(year, month)[1]
    return 1 <= day <= days_in_month
