#!/usr/bin/env python3
"""
Configuration handling for IGC to CSV converter

This module provides configuration management for the IGC to CSV converter.
Settings come from an optional INI file and are overridden by command line
arguments.
"""

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from igc_constants import (
    CONFIG_FILE_NAMES,
    CONFIG_SECTION_DEFAULTS,
    DEFAULT_DELIMITER,
    DEFAULT_INCLUDE_VALIDITY,
    DEFAULT_OUT_PATH
)

# Configure logger
logger = logging.getLogger(__name__)


@dataclass
class OutputSettings:
    """Settings that shape the CSV output"""
    delimiter: str = DEFAULT_DELIMITER
    include_validity: bool = DEFAULT_INCLUDE_VALIDITY
    out_path: Optional[str] = DEFAULT_OUT_PATH

    def validate(self) -> None:
        if len(self.delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, got {self.delimiter!r}")


class ConfigParser:
    """
    Handles parsing of configuration files.
    Separates the parsing logic from the configuration storage.
    """

    def __init__(self):
        """Initialize the config parser"""
        self.parser = configparser.RawConfigParser()

    def find_config_file(self, cli_path: Optional[str] = None) -> Optional[str]:
        """Find a configuration file to use"""
        if cli_path:
            if os.path.isfile(cli_path):
                logger.info(f"Using configuration file: {cli_path}")
                return cli_path
            logger.warning(f"Configuration file not found: {cli_path}")

        # Look in standard locations
        paths = ('.', os.path.dirname(os.path.abspath(__file__)))

        for path in paths:
            for file in CONFIG_FILE_NAMES:
                full_path = os.path.join(path, file)
                if Path(full_path).is_file():
                    logger.info(f"Found configuration file: {full_path}")
                    return full_path

        logger.debug("No configuration file found, using defaults")
        return None

    def load_config_file(self, file_path: Optional[str] = None) -> bool:
        """Load configuration from file"""
        config_file = self.find_config_file(file_path)
        if not config_file:
            return False

        try:
            self.parser.read(config_file)
            return True
        except configparser.Error as e:
            logger.error(f"Error reading config file: {e}")
            return False

    def get_sections(self) -> List[str]:
        """Get all section names from the configuration file"""
        return self.parser.sections()

    def get_default_settings(self) -> Dict[str, str]:
        """Get the raw [Defaults] values, keys lowercased"""
        if CONFIG_SECTION_DEFAULTS in self.parser:
            return dict(self.parser[CONFIG_SECTION_DEFAULTS])
        return {}

    def get_boolean(self, key: str, fallback: bool) -> bool:
        """Read a boolean from [Defaults], keeping the fallback on bad values"""
        if CONFIG_SECTION_DEFAULTS not in self.parser:
            return fallback
        try:
            return self.parser[CONFIG_SECTION_DEFAULTS].getboolean(key, fallback=fallback)
        except ValueError:
            logger.warning(f"Invalid boolean for {key}: {self.parser[CONFIG_SECTION_DEFAULTS][key]!r}")
            return fallback


class Config:
    """Main configuration class for IGC to CSV converter"""

    def __init__(self, cli_args):
        """Initialize with command line arguments"""
        self.parser = ConfigParser()
        self.cli_args = cli_args
        self.output_settings = OutputSettings()

        # Load configuration
        self._load_config()

    def _load_config(self):
        """Load and process configuration"""
        self.parser.load_config_file(self.cli_args.config)

        defaults = self.parser.get_default_settings()

        # Apply CLI arguments (override config file)
        if self.cli_args.delimiter:
            self.output_settings.delimiter = self.cli_args.delimiter
        elif 'delimiter' in defaults:
            self.output_settings.delimiter = defaults['delimiter']

        if self.cli_args.validity:
            self.output_settings.include_validity = True
        else:
            self.output_settings.include_validity = self.parser.get_boolean(
                'includevalidity', DEFAULT_INCLUDE_VALIDITY
            )

        if self.cli_args.output:
            self.output_settings.out_path = self.cli_args.output
        elif defaults.get('outpath'):
            self.output_settings.out_path = defaults['outpath']

        self.output_settings.validate()

    @property
    def delimiter(self) -> str:
        """Get CSV field delimiter"""
        return self.output_settings.delimiter

    @property
    def include_validity(self) -> bool:
        """Whether the fix validity column is written"""
        return self.output_settings.include_validity

    @property
    def outPath(self) -> Optional[str]:
        """Get output path, None for standard output"""
        return self.output_settings.out_path
