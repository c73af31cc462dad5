"""Rewrite raw phone lines into 10-digit local numbers."""

from __future__ import annotations

import re

INVALID_PHONE = "เบอร์ไม่ถูกต้อง"
LOCAL_LENGTH = 10

# Checked in order; the first match is replaced by the trunk prefix
COUNTRY_CODES = ("66", "60")
TRUNK_PREFIX = "0"

NON_DIGIT_PATTERN = re.compile(r"[^0-9]")


def extract_digits(line: str) -> str:
    return NON_DIGIT_PATTERN.sub("", line or "")


def _apply_prefix_rules(digits: str) -> str:
    for code in COUNTRY_CODES:
        if digits.startswith(code):
            return TRUNK_PREFIX + digits[len(code):]
    if not digits.startswith(TRUNK_PREFIX):
        return TRUNK_PREFIX + digits
    return digits


def normalize_phone(line: str) -> str:
    """Normalize one raw line.

    Returns the 10-digit number, ``INVALID_PHONE`` when no 10-digit form can be
    recovered, or ``""`` when the line has no digits at all.
    """
    digits = extract_digits(line)
    if not digits:
        return ""

    digits = _apply_prefix_rules(digits)

    # Leftover country-code noise: keep the last 10 only if they look local
    if len(digits) > LOCAL_LENGTH:
        last_ten = digits[-LOCAL_LENGTH:]
        if last_ten.startswith(TRUNK_PREFIX):
            digits = last_ten

    # Single trim, not a loop
    if len(digits) > LOCAL_LENGTH and digits.startswith(TRUNK_PREFIX * 2):
        digits = digits[1:]

    if len(digits) != LOCAL_LENGTH:
        return INVALID_PHONE
    return digits
