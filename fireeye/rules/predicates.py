from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
import re
from typing import Optional, Pattern

EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+@[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?)*\.[A-Za-z]{2,}"
)
MOBILE_PATTERN = re.compile(r"1[3-9]\d{9}")
PHONE_PATTERN = re.compile(r"(?:0\d{2,3}-)?[1-9]\d{6,7}")
URL_PATTERN = re.compile(
    r"(?:https?|ftp)://(?:[A-Za-z0-9-]+\.)*[A-Za-z0-9-]+(?::\d{1,5})?(?:[/?#]\S*)?",
    re.IGNORECASE,
)
DIGITS_PATTERN = re.compile(r"[0-9]+")
_OCTET = r"(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"
IPV4_PATTERN = re.compile(rf"{_OCTET}(?:\.{_OCTET}){{3}}")
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def to_decimal(value: str) -> Optional[Decimal]:
    """Parse a plain ASCII decimal. Grouping underscores, non-ASCII digits and NaN/Infinity are rejected."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    if DECIMAL_PATTERN.fullmatch(text) is None:
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


def is_not_blank(value: str) -> bool:
    return bool(value) and not value.isspace()


def has_length(value: str, min_length: int, max_length: Optional[int]) -> bool:
    length = len(value)
    if length < min_length:
        return False
    return max_length is None or length <= max_length


def matches(pattern: Pattern[str], value: str) -> bool:
    return pattern.fullmatch(value) is not None


def in_range(value: str, minimum: Optional[Decimal], maximum: Optional[Decimal]) -> bool:
    number = to_decimal(value)
    if number is None:
        return False
    if minimum is not None and number < minimum:
        return False
    if maximum is not None and number > maximum:
        return False
    return True


def is_date(value: str, date_format: str) -> bool:
    try:
        datetime.strptime(value, date_format)
    except ValueError:
        return False
    return True


def passes_luhn(value: str) -> bool:
    digits = value.replace(" ", "").replace("-", "")
    if not DIGITS_PATTERN.fullmatch(digits) or not 13 <= len(digits) <= 19:
        return False
    total = 0
    for index, char in enumerate(reversed(digits)):
        digit = int(char)
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0
