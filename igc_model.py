#!/usr/bin/env python3
"""
Data models, enums and errors for IGC to CSV converter
"""

from dataclasses import dataclass
from enum import Enum
from datetime import date, datetime, time
from typing import Optional

CalendarDate = date


class IgcError(ValueError):
    """Base class for errors raised while reading an IGC file"""


class MalformedRecordError(IgcError):
    """A record has a field that cannot be decoded (bad digits, short line, invalid date/time)"""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.line = line

    def __str__(self):
        if self.line_number is not None:
            return f"line {self.line_number}: {self.message}"
        return self.message


class MissingFlightDateError(IgcError):
    """A fix record was found before any HFDTE header"""

    def __init__(self, line_number: Optional[int] = None):
        self.line_number = line_number
        where = f" at line {line_number}" if line_number is not None else ""
        super().__init__(f"Fix record{where} precedes the flight date header (HFDTE)")


class RecordKind(Enum):
    HEADER = "H"
    FIX = "B"
    OTHER = "other"


class HeaderKind(Enum):
    DATE = "DTE"
    OTHER = "other"


@dataclass(frozen=True)
class LatLng:
    """
    A position in thousandths of arc-minutes.
    Positive values are North/West, negative values South/East.
    """
    lat: int
    lng: int


@dataclass(frozen=True)
class FixRecord:
    """A single B record: time of day, position and both altitudes in meters"""
    timestamp: time
    pos: LatLng
    alt_baro: int
    alt_gps: int
    validity: Optional[str] = None


@dataclass(frozen=True)
class HeaderRecord:
    """An H record. Only the date header carries data"""
    kind: HeaderKind
    date: Optional[CalendarDate] = None

    @classmethod
    def of_date(cls, flight_date: CalendarDate) -> 'HeaderRecord':
        return cls(HeaderKind.DATE, flight_date)

    @classmethod
    def other(cls) -> 'HeaderRecord':
        return cls(HeaderKind.OTHER)


@dataclass(frozen=True)
class ParsedLine:
    """
    Tagged result of classifying one line.
    Use the factories so that the payload always matches the kind.
    """
    kind: RecordKind
    header: Optional[HeaderRecord] = None
    fix: Optional[FixRecord] = None

    @classmethod
    def of_header(cls, header: HeaderRecord) -> 'ParsedLine':
        return cls(RecordKind.HEADER, header=header)

    @classmethod
    def of_fix(cls, fix: FixRecord) -> 'ParsedLine':
        return cls(RecordKind.FIX, fix=fix)

    @classmethod
    def other(cls) -> 'ParsedLine':
        return cls(RecordKind.OTHER)


@dataclass
class TrackPoint:
    """One output row: full timestamp, position in decimal degrees and altitudes"""
    time: datetime
    lat: float
    lng: float
    alt_baro: int
    alt_gps: int
    validity: Optional[str] = None


@dataclass
class ConversionStats:
    """Counters gathered while converting a file"""
    lines: int = 0
    headers: int = 0
    fixes: int = 0
    others: int = 0
    flight_date: Optional[date] = None
    first_time: Optional[datetime] = None
    last_time: Optional[datetime] = None
