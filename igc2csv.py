#!/usr/bin/env python3
"""
IGC to CSV Converter

This script converts an IGC flight log into CSV rows of
time, latitude, longitude, barometric altitude and GPS altitude.

Usage:
    python igc2csv.py [-c config] [-o output.csv] [-d delimiter] [--validity] file.igc
"""

import argparse
import sys
import logging
from typing import List, Optional, TextIO

from igc_config import Config
from igc_parser import TrackBuilder
from igc_writer import CsvWriter
from igc_summary import conversionSummary
from igc_model import ConversionStats, IgcError
from igc_constants import (
    PROGRAM_NAME,
    PROGRAM_VERSION,
    EXIT_OK,
    EXIT_ERROR,
    EXIT_INVALID_INPUT,
    EXIT_FILE_NOT_FOUND
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger('igc2csv')


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description='Convert an IGC flight log into CSV (time,lat,lng,alt_baro,alt_gps)',
        epilog='Example: python igc2csv.py -o flight.csv flight.igc'
    )

    parser.add_argument('-c', '--config', default=None, help='Path to config file')
    parser.add_argument('-o', '--output', default=None, help='Write CSV to this file instead of standard output')
    parser.add_argument('-d', '--delimiter', default=None, help='CSV field delimiter (default ",")')
    parser.add_argument('--validity', action='store_true', help='Append the raw fix validity flag as an extra column')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('-V', '--version', action='version', version=f'{PROGRAM_NAME} {PROGRAM_VERSION}')
    parser.add_argument('trackfile', help='Path to the IGC file')
    return parser


def process_file(config: Config, in_path: str, out_file: Optional[TextIO] = None) -> ConversionStats:
    """
    Convert one IGC file. Rows are streamed to out_file, or to the configured
    output path, or to standard output. Any parse error ends the conversion.
    """
    logger.debug(f"Processing {in_path}...")
    builder = TrackBuilder()
    writer = CsvWriter(config)

    with open(in_path, 'r', encoding='ascii', errors='replace') as trackFile:
        if out_file is not None:
            writer.write_file(out_file, builder.build_track(trackFile))
        elif config.outPath:
            with open(config.outPath, 'w', encoding='utf-8', newline='') as csvFile:
                writer.write_file(csvFile, builder.build_track(trackFile))
            logger.info(f"Successfully generated: {config.outPath}")
        else:
            writer.write_file(sys.stdout, builder.build_track(trackFile))
            sys.stdout.flush()

    if builder.stats.fixes == 0:
        logger.warning(f"No fix records found in {in_path}")
    logger.info(conversionSummary(builder.stats))
    return builder.stats


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    # Set log level based on verbose flag
    if args.verbose:
        logger.setLevel(logging.DEBUG)
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = Config(args)
        process_file(config, args.trackfile)
    except FileNotFoundError as e:
        logger.critical(f"File not found: {e.filename}")
        return EXIT_FILE_NOT_FOUND
    except IgcError as e:
        logger.critical(f"Invalid input in {args.trackfile}: {e}", exc_info=args.verbose)
        return EXIT_INVALID_INPUT
    except ValueError as e:
        logger.critical(f"Invalid input: {e}", exc_info=args.verbose)
        return EXIT_INVALID_INPUT
    except OSError as e:
        logger.critical(f"I/O error: {e}", exc_info=args.verbose)
        return EXIT_ERROR
    except Exception as e:
        logger.critical(f"Unexpected error: {e}", exc_info=True)
        return EXIT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
