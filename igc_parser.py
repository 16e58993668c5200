#!/usr/bin/env python3
"""
IGC file parser module for IGC to CSV converter

This module classifies IGC lines into header, fix and other records and
folds the resulting records into timestamped track points. The flight date
from the last HFDTE header is carried explicitly through the fold.
"""

import logging
from datetime import date, datetime
from typing import Iterable, Iterator, Optional, Tuple

from igc_model import (
    ConversionStats,
    FixRecord,
    HeaderKind,
    HeaderRecord,
    LatLng,
    MalformedRecordError,
    MissingFlightDateError,
    ParsedLine,
    RecordKind,
    TrackPoint
)
from igc_utils import (
    coordinateToDegrees,
    decodeAltitude,
    decodeCoordinate,
    decodeDate,
    decodeTime
)
from igc_constants import (
    IGC_RECORD_HEADER,
    IGC_RECORD_POSITION,
    IGC_HEADER_DATE,
    IGC_HEADER_SUBTYPE_START,
    IGC_HEADER_SUBTYPE_END,
    IGC_HEADER_DATE_END,
    IGC_FIX_TIME,
    IGC_FIX_LATITUDE,
    IGC_FIX_LONGITUDE,
    IGC_FIX_VALIDITY,
    IGC_FIX_ALT_BARO,
    IGC_FIX_ALT_GPS,
    IGC_FIX_MIN_LENGTH,
    LATITUDE_DEGREE_WIDTH,
    LONGITUDE_DEGREE_WIDTH
)

# Configure logger
logger = logging.getLogger(__name__)


class IgcHeaderParser:
    """
    Parses H records. Only the flight date (HFDTE) is recognized,
    every other subtype is reported as HeaderKind.OTHER. A header too
    short to carry a subtype is malformed.
    """

    @staticmethod
    def classify_header(line: str) -> HeaderRecord:
        """Classify a line starting with 'H'"""
        if len(line) < IGC_HEADER_SUBTYPE_END:
            raise MalformedRecordError(f"Header record too short: {line!r}")

        subtype = line[IGC_HEADER_SUBTYPE_START:IGC_HEADER_SUBTYPE_END]
        if subtype != IGC_HEADER_DATE:
            return HeaderRecord.other()

        if len(line) < IGC_HEADER_DATE_END:
            raise MalformedRecordError(f"Date header too short: {line!r}")

        return HeaderRecord.of_date(decodeDate(line[IGC_HEADER_SUBTYPE_END:IGC_HEADER_DATE_END]))


class IgcPositionParser:
    """
    Parses B records (position fixes).
    Layout: B HHMMSS DDMMmmmN DDDMMmmmW V PPPPP GGGGG [extensions]
    """

    @staticmethod
    def classify_fix(line: str) -> FixRecord:
        """Classify a line starting with 'B'"""
        if len(line) < IGC_FIX_MIN_LENGTH:
            raise MalformedRecordError(
                f"Fix record has {len(line)} characters, expected at least {IGC_FIX_MIN_LENGTH}"
            )

        timestamp = decodeTime(line[slice(*IGC_FIX_TIME)])
        lat = decodeCoordinate(LATITUDE_DEGREE_WIDTH, line[slice(*IGC_FIX_LATITUDE)])
        lng = decodeCoordinate(LONGITUDE_DEGREE_WIDTH, line[slice(*IGC_FIX_LONGITUDE)])
        alt_baro = decodeAltitude(line[slice(*IGC_FIX_ALT_BARO)])
        alt_gps = decodeAltitude(line[slice(*IGC_FIX_ALT_GPS)])

        # The validity flag is carried along as-is; A/V is not checked
        return FixRecord(
            timestamp=timestamp,
            pos=LatLng(lat=lat, lng=lng),
            alt_baro=alt_baro,
            alt_gps=alt_gps,
            validity=line[IGC_FIX_VALIDITY]
        )


class IgcRecordClassifier:
    """
    Dispatches a raw line on its first character.
    Every line gets a result; unknown prefixes are RecordKind.OTHER.
    """

    def __init__(self):
        self.header_parser = IgcHeaderParser()
        self.position_parser = IgcPositionParser()

    def classify_line(self, line: str) -> ParsedLine:
        line = line.rstrip('\r\n')
        record_type = line[:1]

        if record_type == IGC_RECORD_HEADER:
            return ParsedLine.of_header(self.header_parser.classify_header(line))
        if record_type == IGC_RECORD_POSITION:
            return ParsedLine.of_fix(self.position_parser.classify_fix(line))
        return ParsedLine.other()


def foldRecord(flight_date: Optional[date],
               parsed: ParsedLine,
               line_number: Optional[int] = None) -> Tuple[Optional[date], Optional[TrackPoint]]:
    """
    One step of the track fold.
    Returns the (possibly updated) flight date and the track point for a fix.
    """
    if parsed.kind == RecordKind.HEADER:
        if parsed.header.kind == HeaderKind.DATE:
            return parsed.header.date, None
        return flight_date, None

    if parsed.kind == RecordKind.FIX:
        if flight_date is None:
            raise MissingFlightDateError(line_number)
        fix = parsed.fix
        point = TrackPoint(
            time=datetime.combine(flight_date, fix.timestamp),
            lat=coordinateToDegrees(fix.pos.lat),
            lng=coordinateToDegrees(fix.pos.lng),
            alt_baro=fix.alt_baro,
            alt_gps=fix.alt_gps,
            validity=fix.validity
        )
        return flight_date, point

    return flight_date, None


class TrackBuilder:
    """
    Builds track points from a stream of IGC lines in a single pass.
    Points are yielded as soon as their line is read.
    """

    def __init__(self):
        self.classifier = IgcRecordClassifier()
        self.stats = ConversionStats()

    def _count(self, parsed: ParsedLine, point: Optional[TrackPoint]) -> None:
        if parsed.kind == RecordKind.HEADER:
            self.stats.headers += 1
        elif parsed.kind == RecordKind.OTHER:
            self.stats.others += 1

        if point is not None:
            self.stats.fixes += 1
            if self.stats.first_time is None:
                self.stats.first_time = point.time
            self.stats.last_time = point.time

    def build_track(self, lines: Iterable[str]) -> Iterator[TrackPoint]:
        self.stats = ConversionStats()
        flight_date = None

        for line_number, line in enumerate(lines, start=1):
            self.stats.lines += 1
            try:
                parsed = self.classifier.classify_line(line)
            except MalformedRecordError as e:
                e.line_number = line_number
                e.line = line.rstrip('\r\n')
                raise

            new_date, point = foldRecord(flight_date, parsed, line_number)
            if new_date != flight_date:
                if flight_date is not None:
                    logger.info(f"Flight date changed from {flight_date} to {new_date} at line {line_number}")
                else:
                    logger.debug(f"Flight date {new_date} from line {line_number}")
                flight_date = new_date
                self.stats.flight_date = flight_date

            self._count(parsed, point)
            if point is not None:
                yield point


# Public functions

def parseLine(line: str) -> ParsedLine:
    """Classify a single IGC line"""
    return IgcRecordClassifier().classify_line(line)


def buildTrack(lines: Iterable[str]) -> Iterator[TrackPoint]:
    """Lazily convert IGC lines into track points"""
    return TrackBuilder().build_track(lines)
