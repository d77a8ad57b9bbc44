"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0
Date Modified: 2026-10-19

- Called by: colorlog.py, config.py
- Purpose: Letter-based date pattern compilation and formatting

FlexFormat Date Patterns - Letter-Based Date/Time Pattern Formatting

PURPOSE:
    Formats timestamps with letter patterns such as "MM/dd/yyyy HH:mm:ss",
    the pattern language a FlexibleFormatter is configured with. Patterns are
    compiled once into a tuple of small field renderers and cached.

WHO READS ME:
    - colorlog.py: Validates patterns on set, formats the date fragment on render
    - config.py: Validates patterns loaded from a configuration file

WHO I READ:
    - models.py: FlexFormatError

DEPENDENCIES:
    - datetime: The timestamps being formatted
    - functools: lru_cache for compiled patterns

KEY EXPORTS:
    - compile_pattern(pattern): Compile a pattern, raise FlexFormatError if invalid
    - validate_pattern(pattern): Compile a pattern and return it unchanged
    - format_datetime(pattern, when): Format a timestamp, defaults to now

PATTERN LETTERS:
    y year (yy: two digits)      M month (MMM: Jan, MMMM: January)
    d day in month               D day in year
    E day name (EEEE: Monday)    u day number of week (1 = Monday)
    a AM/PM marker               H hour 0-23
    k hour 1-24                  K hour 0-11
    h hour 1-12                  m minute
    s second                     S millisecond
    z time zone name             Z UTC offset (+0100)

    Numbers are zero-padded to the length of the letter run. Text between
    single quotes is copied as is, '' is a single quote. Any other ASCII
    letter is an error, all other characters are copied as is.
"""

from datetime import datetime
from functools import lru_cache
from typing import Callable

from flexformat.models import FlexFormatError

FieldRenderer = Callable[[datetime], str]

_NUMBERS: dict[str, Callable[[datetime], int]] = {
    "d": lambda when: when.day,
    "D": lambda when: when.timetuple().tm_yday,
    "u": lambda when: when.isoweekday(),
    "H": lambda when: when.hour,
    "k": lambda when: when.hour or 24,
    "K": lambda when: when.hour % 12,
    "h": lambda when: when.hour % 12 or 12,
    "m": lambda when: when.minute,
    "s": lambda when: when.second,
    "S": lambda when: when.microsecond // 1000,
}


def _literal(text: str) -> FieldRenderer:
    return lambda when: text


def _number(value: Callable[[datetime], int], width: int) -> FieldRenderer:
    return lambda when: f"{value(when):0{width}d}"


def _field(letter: str, count: int, pattern: str) -> FieldRenderer:
    """return the renderer for a run of count identical pattern letters"""
    if letter in _NUMBERS:
        return _number(_NUMBERS[letter], count)
    if letter == "y":
        if count == 2:
            return lambda when: f"{when.year % 100:02d}"
        return _number(lambda when: when.year, count)
    if letter == "M":
        if count >= 4:
            return lambda when: when.strftime("%B")
        if count == 3:
            return lambda when: when.strftime("%b")
        return _number(lambda when: when.month, count)
    if letter == "E":
        if count >= 4:
            return lambda when: when.strftime("%A")
        return lambda when: when.strftime("%a")
    if letter == "a":
        return lambda when: when.strftime("%p")
    if letter == "z":
        return lambda when: when.tzname() or ""
    if letter == "Z":
        return lambda when: when.strftime("%z")
    raise FlexFormatError(
        f"invalid date pattern {pattern!r}: unknown pattern letter {letter!r}"
    )


def _quoted(pattern: str, start: int) -> tuple[str, int]:
    """return the literal text of the quote opened at start and the index
    just past its closing quote"""
    text = []
    pos = start + 1
    while pos < len(pattern):
        if pattern[pos] == "'":
            if pattern.startswith("''", pos):
                text.append("'")
                pos += 2
                continue
            return "".join(text), pos + 1
        text.append(pattern[pos])
        pos += 1
    raise FlexFormatError(f"invalid date pattern {pattern!r}: unterminated quote")


def compile_pattern(pattern: str) -> tuple[FieldRenderer, ...]:
    """compile the given date pattern, raises FlexFormatError if it is invalid"""
    if not isinstance(pattern, str):
        raise FlexFormatError(f"date pattern must be a string, not {type(pattern).__name__}")
    return _compile(pattern)


@lru_cache(maxsize=64)
def _compile(pattern: str) -> tuple[FieldRenderer, ...]:
    parts: list[FieldRenderer] = []
    pos = 0
    while pos < len(pattern):
        char = pattern[pos]
        if pattern.startswith("''", pos):
            parts.append(_literal("'"))
            pos += 2
        elif char == "'":
            text, pos = _quoted(pattern, pos)
            parts.append(_literal(text))
        elif char.isascii() and char.isalpha():
            end = pos
            while end < len(pattern) and pattern[end] == char:
                end += 1
            parts.append(_field(char, end - pos, pattern))
            pos = end
        else:
            parts.append(_literal(char))
            pos += 1
    return tuple(parts)


def validate_pattern(pattern: str) -> str:
    """check the pattern and return it, raises FlexFormatError if invalid"""
    compile_pattern(pattern)
    return pattern


def format_datetime(pattern: str, when: datetime | None = None) -> str:
    """format when (local time now if not given) using the date pattern"""
    if when is None:
        when = datetime.now().astimezone()
    return "".join(part(when) for part in compile_pattern(pattern))
