#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Text and number formatting helpers
"""

from datetime import datetime, timezone
from typing import Union

CURRENCY_SYMBOL = "€"

Number = Union[int, float]


def format_amount(value: Number, max_fraction_digits: int = 3) -> str:
    """
    Number with thousands separators, at most `max_fraction_digits` decimals
    and no trailing zeros: 42000 -> "42,000", 1234.5 -> "1,234.5"
    """
    rounded = round(float(value), max_fraction_digits)
    if rounded == 0:
        return "0"
    if rounded.is_integer():
        return f"{int(rounded):,}"
    return f"{rounded:,.{max_fraction_digits}f}".rstrip("0")


def format_currency(value: Number) -> str:
    """Amount prefixed with the currency symbol"""
    return f"{CURRENCY_SYMBOL}{format_amount(value)}"


def json_number(value: Number) -> Number:
    """Integral floats as int so 42000.0 is sent as 42000"""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def iso_timestamp(moment: datetime = None) -> str:
    """
    ISO-8601 UTC timestamp with milliseconds and a 'Z' suffix
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def mask_secret(value: str, visible: int = 4) -> str:
    """Hide all but the last characters of a secret"""
    if not value:
        return "NOT SET"
    return "***" + value[-visible:]


def truncate(text: str, limit: int = 100) -> str:
    if text and len(text) > limit:
        return text[:limit] + "..."
    return text
