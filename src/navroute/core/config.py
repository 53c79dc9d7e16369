"""Configuration management for navroute."""

import configparser
import logging
import os
from pathlib import Path
from typing import Optional

from .polyline import DEFAULT_PRECISION

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "GOOGLE_MAPS_API_KEY"


class Config:
    """Parse and manage navroute configuration."""

    DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api"
    DEFAULT_TIMEOUT = 10
    DEFAULT_MODE = "driving"
    DEFAULT_LANGUAGE = "en"

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to config.ini file. If None, uses defaults.
        """
        self.api_key: Optional[str] = None
        self.base_url = self.DEFAULT_BASE_URL
        self.timeout = self.DEFAULT_TIMEOUT
        self.mode = self.DEFAULT_MODE
        self.language = self.DEFAULT_LANGUAGE
        self.precision = DEFAULT_PRECISION

        if config_file:
            self._load_config(config_file)

        if not self.api_key:
            self.api_key = os.environ.get(API_KEY_ENV_VAR) or None
            if self.api_key:
                logger.debug("Using API key from %s", API_KEY_ENV_VAR)

    def _load_config(self, config_file: str):
        """Load configuration from INI file."""
        config_path = Path(config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")

        parser = configparser.ConfigParser()
        parser.read(config_path)
        logger.debug("Loaded config from %s", config_path)

        if 'directions' in parser:
            section = parser['directions']
            self.api_key = section.get('api_key', self.api_key) or None
            self.base_url = section.get('base_url', self.base_url).rstrip('/')
            self.mode = section.get('mode', self.mode)
            self.language = section.get('language', self.language)
            self.timeout = self._get_int(section, 'timeout', self.timeout)

        if 'polyline' in parser:
            self.precision = self._get_int(parser['polyline'], 'precision', self.precision)

    @staticmethod
    def _get_int(section, key: str, default: int) -> int:
        value = section.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"Invalid integer for '{key}': {value!r}")

    def require_api_key(self) -> str:
        """Return the API key or fail with a hint on where to set it."""
        if not self.api_key:
            raise ValueError(
                f"No API key configured. Set {API_KEY_ENV_VAR} or api_key "
                f"in the [directions] section of config.ini"
            )
        return self.api_key
