"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0
Date Modified: 2026-10-19

- Called by: colorlog.py
- Purpose: Rendering options, TOML loading and defaults

FlexFormat Configuration - Rendering Options, Loading and Defaults

PURPOSE:
    Holds the options a FlexibleFormatter renders with: which fields are shown,
    the date pattern and the color. The configuration can be kept in a TOML
    file and loaded with sensible defaults as fallback.

WHO READS ME:
    - colorlog.py: FlexibleFormatter renders from a FormatterConfig snapshot

WHO I READ:
    - models.py: FlexibleColor, FlexFormatError
    - datefmt.py: validate_pattern()

DEPENDENCIES:
    - serde: TOML serialization/deserialization (@deserialize, @serialize)
    - serde.toml: from_toml(), to_toml()
    - dataclasses: @dataclass decorator
    - logging: Configuration loading status messages

KEY EXPORTS:
    - FormatterConfig: Frozen dataclass containing all rendering options

CONFIG PARAMETERS:
    - date_pattern: date pattern for the date field (default: MM/dd/yyyy HH:mm:ss)
    - color: color of the whole line (default: default, no color)
    - show_level: prefix lines with [LEVEL] (default: false)
    - show_name: prefix lines with [logger name] (default: false)
    - show_date: prefix lines with [date] (default: false)

FILE FORMAT:
    flexformat.toml example:
    ```toml
    date_pattern = "yyyy-MM-dd HH:mm:ss"
    color = "green"
    show_level = true
    show_name = false
    show_date = true
    ```
"""

import logging
from dataclasses import dataclass

from serde import deserialize, serialize, SerdeError
from serde.toml import from_toml, to_toml

from flexformat.datefmt import validate_pattern
from flexformat.models import FlexibleColor, FlexFormatError

_LOGGER = logging.getLogger(__name__)

DEFAULT_DATE_PATTERN = "MM/dd/yyyy HH:mm:ss"


@deserialize
@serialize
@dataclass(frozen=True)
class FormatterConfig:
    """log line rendering configuration"""

    date_pattern: str = DEFAULT_DATE_PATTERN
    color: FlexibleColor = FlexibleColor.DEFAULT
    show_level: bool = False
    show_name: bool = False
    show_date: bool = False

    def __post_init__(self):
        validate_pattern(self.date_pattern)

    @classmethod
    def load(cls, filename: str) -> "FormatterConfig":
        """load the configuration from the given file"""
        try:
            with open(filename, encoding="utf-8") as handle:
                cfg = from_toml(cls, handle.read())
            _LOGGER.info("Configuration loaded from file %s", filename)
        except (
            FileNotFoundError,
            TypeError,
            ValueError,
            SerdeError,
            FlexFormatError,
        ) as exc:
            if not isinstance(exc, FileNotFoundError):
                _LOGGER.error(exc)
            cfg = cls()
            _LOGGER.warning("using configuration defaults")
        return cfg

    def save(self, filename: str):
        """save the configuration to the given file"""
        with open(filename, "w+", encoding="utf-8") as handle:
            handle.write(to_toml(self))
