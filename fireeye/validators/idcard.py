"""
Checksum validation for mainland China resident ID card numbers.

18-character numbers carry a check character computed from a weighted sum of
the first 17 digits modulo 11. 15-character numbers predate the check
character and are only checked structurally.
"""
from __future__ import annotations

from datetime import datetime
import logging
import re

logger = logging.getLogger(__name__)

WEIGHT = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)
CHECK_CODES = ("1", "0", "X", "9", "8", "7", "6", "5", "4", "3", "2")

_LEGACY_SUFFIX = re.compile(r"\d{2}[xX]?")
_ASCII_DIGITS = "0123456789"


def is_valid_id_card(value: str) -> bool:
    if not value:
        return False
    if len(value) == 15:
        return is_old_cn_id_card(value)
    if len(value) == 18:
        return is_new_cn_id_card(value)
    return False


def is_new_cn_id_card(numbers: str) -> bool:
    """The 18th character must equal the check code of the weighted digit sum. 'x' is not accepted for 'X'."""
    if len(numbers) != 18:
        return False
    try:
        total = sum(weight * _digit_value(char) for weight, char in zip(WEIGHT, numbers))
    except ValueError as exc:
        logger.debug("Rejected ID card %r: %s", numbers, exc)
        return False
    return CHECK_CODES[total % 11] == numbers[17]


def is_old_cn_id_card(numbers: str) -> bool:
    # Layout: RRRRR ? YYMMDD SS ?  (index 5 and index 14 are not checked)
    if len(numbers) != 15:
        return False
    region = numbers[0:5]
    birth = numbers[6:12]
    suffix = numbers[12:14]
    try:
        region_ok = region == str(int(region))
    except ValueError:
        return False
    try:
        datetime.strptime(birth, "%y%m%d")
    except ValueError:
        return False
    return region_ok and _LEGACY_SUFFIX.fullmatch(suffix) is not None


def _digit_value(char: str) -> int:
    if char not in _ASCII_DIGITS:
        raise ValueError(f"Not a digit: {char!r}")
    return ord(char) - ord("0")
