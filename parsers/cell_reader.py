"""
Cell Value Reader

PURPOSE: Turn one raw spreadsheet cell into a trimmed string, whatever
         the cell holds (text, number, boolean, date, time, error)

R EQUIVALENT: Like as.character() with format(x, scientific = FALSE) and
a tryCatch() that falls back to ""

RULES:
    - text             -> trimmed text
    - whole numbers    -> "12" (never "12.0")
    - other numbers    -> plain decimal, never scientific notation
    - booleans         -> "true" / "false"
    - date / datetime  -> "YYYY-MM-DD" ("YYYY-MM-DD HH:MM:SS" with a time part)
    - time             -> "HH:MM:SS"
    - duration         -> whole seconds
    - error literal / None (formula without a cached value) / anything else -> ""
    - text starting with "=" is kept; the loader reads cached values only

    The reader never raises - a cell that cannot be read is an empty cell.
"""

import logging
import math
from datetime import date, datetime, time, timedelta
from decimal import Decimal

LOGGER = logging.getLogger(__name__)

# Cached error results openpyxl hands back as plain strings
ERROR_LITERALS = {'#REF!', '#N/A', '#VALUE!', '#DIV/0!', '#NAME?', '#NULL!', '#NUM!'}


def read_cell(value) -> str:
    """
    Convert a raw cell value to a normalized string.

    PARAMETERS:
        value: Raw value from the sheet grid (None for an empty cell)

    RETURNS:
        str: Trimmed text, '' when empty or unreadable

    EXAMPLE:
        read_cell(30.0)          # '30'
        read_cell(0.0000125)     # '0.0000125'
        read_cell(True)          # 'true'
        read_cell(" VGroup: A ") # 'VGroup: A'
    """
    try:
        return _read(value)
    except Exception as e:
        LOGGER.debug("Unreadable cell value %r: %s", value, e)
        return ''


def _read(value) -> str:
    if value is None:
        return ''

    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return 'true' if value else 'false'

    if isinstance(value, str):
        text = value.strip()
        if text in ERROR_LITERALS:
            return ''
        return text

    if isinstance(value, int):
        return str(value)

    if isinstance(value, (float, Decimal)):
        return _format_number(value)

    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.strftime('%Y-%m-%d')
        return value.strftime('%Y-%m-%d %H:%M:%S')

    if isinstance(value, date):
        return value.strftime('%Y-%m-%d')

    if isinstance(value, time):
        return value.strftime('%H:%M:%S')

    if isinstance(value, timedelta):
        return str(int(value.total_seconds()))

    return ''


def _format_number(value) -> str:
    if isinstance(value, float):
        if not math.isfinite(value):
            return ''
        if value.is_integer():
            return str(int(value))
        # repr() gives the shortest round-tripping digits; Decimal drops the exponent
        return format(Decimal(repr(value)), 'f')

    if not value.is_finite():
        return ''
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), 'f')
