#!/usr/bin/env python3
"""
CSV file writer module for IGC to CSV converter

This module renders track points as CSV rows. Rows are written one at a
time so a track can be streamed straight from the parser.
"""

from typing import Iterable, List, TextIO

from igc_model import TrackPoint
from igc_utils import formatFloat32
from igc_constants import (
    CSV_COLUMNS,
    CSV_COLUMN_VALIDITY,
    CSV_LINE_TERMINATOR,
    DEFAULT_DELIMITER,
    TIMESTAMP_FORMAT
)


class CsvWriter:
    """
    Handles writing track points in CSV format.
    Column layout: time,lat,lng,alt_baro,alt_gps[,validity]
    """

    def __init__(self, config=None):
        """Initialize with configuration"""
        self.delimiter = config.delimiter if config else DEFAULT_DELIMITER
        self.include_validity = config.include_validity if config else False

    def columns(self) -> List[str]:
        names = list(CSV_COLUMNS)
        if self.include_validity:
            names.append(CSV_COLUMN_VALIDITY)
        return names

    def format_header(self) -> str:
        """Format the CSV header line"""
        return self.delimiter.join(self.columns()) + CSV_LINE_TERMINATOR

    def format_row(self, point: TrackPoint) -> str:
        """Format a single track point as a CSV line"""
        fields = [
            point.time.strftime(TIMESTAMP_FORMAT),
            formatFloat32(point.lat),
            formatFloat32(point.lng),
            str(point.alt_baro),
            str(point.alt_gps),
        ]
        if self.include_validity:
            fields.append(point.validity or '')

        return self.delimiter.join(fields) + CSV_LINE_TERMINATOR

    def write_file(self, csv_file: TextIO, track_points: Iterable[TrackPoint]) -> int:
        """Write the header and every track point; returns the number of rows"""
        csv_file.write(self.format_header())

        count = 0
        for point in track_points:
            csv_file.write(self.format_row(point))
            count += 1

        return count


# Public function
def writeOutputFile(config, csv_file: TextIO, track_points: Iterable[TrackPoint]) -> int:
    """Write a CSV file from track points"""
    writer = CsvWriter(config)
    return writer.write_file(csv_file, track_points)
