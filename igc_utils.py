#!/usr/bin/env python3
"""
Field decoding functions for IGC to CSV converter

Stateless helpers that turn fixed-width IGC columns into numbers, dates and
times. Every decoder raises MalformedRecordError on bad input; nothing is
silently defaulted.
"""

import re
import struct
from datetime import datetime, date, time
from decimal import Decimal

from igc_model import MalformedRecordError
from igc_constants import (
    MINUTES_WIDTH,
    NEGATIVE_HEMISPHERES,
    COORDINATE_UNITS_PER_DEGREE,
    CENTURY_PIVOT,
    TIME_FORMAT_HMS_COMPACT,
    FLOAT32_MAX_DIGITS
)

_DIGITS = re.compile(r'[0-9]+')
_SIGNED_INTEGER = re.compile(r'[+-]?[0-9]+')
_SIX_DIGITS = re.compile(r'[0-9]{6}')


def parseDigits(text: str, width: int, what: str) -> int:
    """Parse an unsigned field of exactly `width` ASCII digits"""
    if len(text) != width or not _DIGITS.fullmatch(text):
        raise MalformedRecordError(f"Expected {width} digits for {what}, got {text!r}")
    return int(text)


def decodeCoordinate(degree_width: int, field: str) -> int:
    """
    Decode a sexagesimal coordinate field into thousandths of arc-minutes.

    The field is [degrees][MMmmm][hemisphere], with 2 degree digits for a
    latitude and 3 for a longitude. The five minute digits are read as one
    integer (minutes * 1000 + thousandths).

    Both 'S' and 'E' negate the result, so positive means North or West and
    negative means South or East. Any other hemisphere letter is positive.
    """
    if len(field) < degree_width + MINUTES_WIDTH + 1:
        raise MalformedRecordError(f"Coordinate field too short: {field!r}")

    degrees = parseDigits(field[:degree_width], degree_width, f"degrees in {field!r}")
    minutes = parseDigits(field[degree_width:degree_width + MINUTES_WIDTH], MINUTES_WIDTH,
                          f"minutes in {field!r}")
    hemisphere = field[degree_width + MINUTES_WIDTH]

    value = minutes + degrees * COORDINATE_UNITS_PER_DEGREE
    if hemisphere in NEGATIVE_HEMISPHERES:
        value = -value

    return value


def decodeAltitude(field: str) -> int:
    """Decode a fixed-width altitude in meters. Leading zeros and a sign are accepted"""
    if not _SIGNED_INTEGER.fullmatch(field):
        raise MalformedRecordError(f"Invalid altitude: {field!r}")
    return int(field)


def decodeDate(field: str) -> date:
    """Decode a DDMMYY date; years 00-69 are 20xx and 70-99 are 19xx"""
    if not _SIX_DIGITS.fullmatch(field):
        raise MalformedRecordError(f"Expected DDMMYY date, got {field!r}")
    day, month, year = int(field[0:2]), int(field[2:4]), int(field[4:6])
    year += 2000 if year < CENTURY_PIVOT else 1900
    try:
        return date(year, month, day)
    except ValueError as e:
        raise MalformedRecordError(f"Invalid date {field!r}: {e}") from e


def decodeTime(field: str) -> time:
    """Decode a HHMMSS time of day"""
    if not _SIX_DIGITS.fullmatch(field):
        raise MalformedRecordError(f"Expected HHMMSS time, got {field!r}")
    try:
        return datetime.strptime(field, TIME_FORMAT_HMS_COMPACT).time()
    except ValueError as e:
        raise MalformedRecordError(f"Invalid time {field!r}: {e}") from e


def toFloat32(value: float) -> float:
    """Round a float to the nearest IEEE-754 single precision value"""
    return struct.unpack('<f', struct.pack('<f', value))[0]


def coordinateToDegrees(value: int) -> float:
    """Convert thousandths of arc-minutes to decimal degrees at single precision"""
    return toFloat32(value / float(COORDINATE_UNITS_PER_DEGREE))


def formatFloat32(value: float) -> str:
    """
    Render a single precision value with the fewest digits that read back
    to the same value, in plain notation:
    0.0 -> '0', 123.0 -> '123', 0.1 -> '0.1'
    """
    single = toFloat32(value)

    text = repr(single)
    for digits in range(1, FLOAT32_MAX_DIGITS + 1):
        candidate = f"{single:.{digits}g}"
        if toFloat32(float(candidate)) == single:
            text = candidate
            break

    return format(Decimal(text), 'f')
