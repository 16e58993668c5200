#!/usr/bin/env python3
"""
Constants for IGC to CSV converter
"""

# Program identification
PROGRAM_NAME = "igc2csv"
PROGRAM_VERSION = "1.0"

# Default configuration values
DEFAULT_DELIMITER = ","
DEFAULT_INCLUDE_VALIDITY = False
DEFAULT_OUT_PATH = None
DEFAULT_NA_TEXT = "N/A"

# Configuration
CONFIG_SECTION_DEFAULTS = "Defaults"
CONFIG_FILE_NAMES = ("igc2csv.conf", "igc2csv.ini")

# IGC record types (first character of a line)
IGC_RECORD_HEADER = "H"
IGC_RECORD_POSITION = "B"

# IGC header subtypes (columns 2..5 of an H record)
IGC_HEADER_DATE = "DTE"
IGC_HEADER_SUBTYPE_START = 2
IGC_HEADER_SUBTYPE_END = 5
IGC_HEADER_DATE_END = 11

# B record layout: B HHMMSS DDMMmmmN DDDMMmmmW V PPPPP GGGGG
IGC_FIX_TIME = (1, 7)
IGC_FIX_LATITUDE = (7, 15)
IGC_FIX_LONGITUDE = (15, 24)
IGC_FIX_VALIDITY = 24
IGC_FIX_ALT_BARO = (25, 30)
IGC_FIX_ALT_GPS = (30, 35)
IGC_FIX_MIN_LENGTH = 35

# Coordinate fields
LATITUDE_DEGREE_WIDTH = 2
LONGITUDE_DEGREE_WIDTH = 3
MINUTES_WIDTH = 5
NEGATIVE_HEMISPHERES = ("S", "E")
THOUSANDTHS_PER_MINUTE = 1000
MINUTES_PER_DEGREE = 60
COORDINATE_UNITS_PER_DEGREE = MINUTES_PER_DEGREE * THOUSANDTHS_PER_MINUTE

# Date and time formats
# Two-digit years below the pivot are 20xx, the rest 19xx
CENTURY_PIVOT = 70
TIME_FORMAT_HMS_COMPACT = "%H%M%S"
TIME_FORMAT_HMS = "%H:%M:%S"
DATE_FORMAT_ISO = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# CSV output
CSV_COLUMNS = ("time", "lat", "lng", "alt_baro", "alt_gps")
CSV_COLUMN_VALIDITY = "validity"
CSV_LINE_TERMINATOR = "\n"

# Float rendering (single precision has at most 9 significant digits)
FLOAT32_MAX_DIGITS = 9

# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_INPUT = 2
EXIT_FILE_NOT_FOUND = 3
