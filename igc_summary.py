#!/usr/bin/env python3
"""
Conversion summary functions for IGC to CSV converter
"""

from igc_constants import DEFAULT_NA_TEXT, DATE_FORMAT_ISO, TIME_FORMAT_HMS


def conversionSummary(stats) -> str:
    """Generate a one-line summary of a conversion"""
    date_str = stats.flight_date.strftime(DATE_FORMAT_ISO) if stats.flight_date else DEFAULT_NA_TEXT
    start_time = stats.first_time.strftime(TIME_FORMAT_HMS) if stats.first_time else DEFAULT_NA_TEXT
    end_time = stats.last_time.strftime(TIME_FORMAT_HMS) if stats.last_time else DEFAULT_NA_TEXT

    fixes = f"{stats.fixes} fix{'es' if stats.fixes != 1 else ''}"

    return (f"{date_str}: {fixes} from {start_time} to {end_time} "
            f"({stats.lines} lines, {stats.headers} headers, {stats.others} other)")
