"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0
Date Modified: 2026-10-19

- Called by: colorlog.py, config.py, datefmt.py
- Purpose: Line colors and the package error type

FlexFormat Data Models - Colors and Errors

PURPOSE:
    Defines the color choices a FlexibleFormatter can wrap its output in and
    the package-wide error type.

WHO READS ME:
    - colorlog.py: Uses FlexibleColor.ansi while rendering, FlexFormatError
    - config.py: Uses FlexibleColor as a config field type
    - datefmt.py: Raises FlexFormatError for invalid patterns

WHO I READ:
    - None (leaf module, no internal dependencies)

DEPENDENCIES:
    - enum: Enum base class for FlexibleColor

KEY EXPORTS:
    - FlexFormatError: Base exception class for all flexformat errors
    - FlexibleColor: Output color, with its ANSI escape code
    - RESET: ANSI sequence that restores the terminal's default color

COLOR TABLE:
    - BLUE:    \\x1b[34m
    - GREEN:   \\x1b[32m
    - PURPLE:  \\x1b[35m
    - RED:     \\x1b[31m
    - WHITE:   \\x1b[37m
    - YELLOW:  \\x1b[33m
    - DEFAULT: (no escape code, output is not wrapped)
"""

from enum import Enum

RESET = "\x1b[0m"


class FlexFormatError(Exception):
    """Base class for all errors raised by flexformat"""


class FlexibleColor(Enum):
    """color of a formatted log line"""

    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    RED = "red"
    WHITE = "white"
    YELLOW = "yellow"
    DEFAULT = "default"

    @property
    def ansi(self) -> str:
        """the escape code that starts this color, empty for DEFAULT"""
        return _ANSI[self]

    @classmethod
    def parse(cls, value: "FlexibleColor | str") -> "FlexibleColor":
        """return the color for a member, or for its case-insensitive name"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(color.value for color in cls)
            raise FlexFormatError(
                f"invalid color {value!r}. Valid colors are {choices}."
            ) from None


_ANSI = {
    FlexibleColor.BLUE: "\x1b[34m",
    FlexibleColor.GREEN: "\x1b[32m",
    FlexibleColor.PURPLE: "\x1b[35m",
    FlexibleColor.RED: "\x1b[31m",
    FlexibleColor.WHITE: "\x1b[37m",
    FlexibleColor.YELLOW: "\x1b[33m",
    FlexibleColor.DEFAULT: "",
}
