"""Utilities"""
from .logger import setup_logging, app_logger
from .formatters import format_amount, format_currency, iso_timestamp, json_number

__all__ = [
    'setup_logging',
    'app_logger',
    'format_amount',
    'format_currency',
    'iso_timestamp',
    'json_number',
]
