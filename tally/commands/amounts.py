"""Amount and date token handling shared by the classifier and extractors.

The format test and the value parse work on two different strings: the test
sees the token exactly as typed, the parse sees a copy with the decimal comma
turned into a dot and everything but digits and dots removed.
"""

import re
from datetime import date
from decimal import Decimal, InvalidOperation

AMOUNT_FORMAT = re.compile(r"^\d+([.,]\d+)?$")
DATE_FORMAT = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_amount_token(token: str) -> bool:
    return AMOUNT_FORMAT.match(token) is not None


def parse_amount_value(token: str) -> Decimal | None:
    cleaned = token.replace(",", ".", 1)
    digits = re.sub(r"[^\d.]", "", cleaned)
    try:
        return Decimal(digits)
    except InvalidOperation:
        return None


def parse_amount(token: str) -> Decimal | None:
    """Decimal value of an amount token, or None when it is not one."""
    if not is_amount_token(token):
        return None
    return parse_amount_value(token)


def is_positive_amount(token: str) -> bool:
    value = parse_amount(token)
    return value is not None and value > 0


def is_date_token(token: str) -> bool:
    return DATE_FORMAT.match(token) is not None


def parse_date(token: str) -> date | None:
    """Calendar date for a ``YYYY-MM-DD`` token that names a real day."""
    if not is_date_token(token):
        return None
    try:
        return date.fromisoformat(token)
    except ValueError:
        return None
