import re
from datetime import datetime, timedelta, timezone

import pytest

from flexformat.datefmt import compile_pattern, format_datetime, validate_pattern
from flexformat.models import FlexFormatError

# a Saturday, day 66 of the year
WHEN = datetime(2026, 3, 7, 14, 5, 9, 42000)


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("MM/dd/yyyy HH:mm:ss", "03/07/2026 14:05:09"),
        ("M/d/y", "3/7/2026"),
        ("yy", "26"),
        ("yyyy-MM-dd'T'HH:mm:ss.SSS", "2026-03-07T14:05:09.042"),
        ("h:mm", "2:05"),
        ("hh 'o''clock'", "02 o'clock"),
        ("K", "2"),
        ("D u", "66 6"),
        ("''", "'"),
        ("[HH]", "[14]"),
    ],
)
def test_format_datetime(pattern, expected):
    assert format_datetime(pattern, WHEN) == expected


def test_hours_around_midnight():
    midnight = datetime(2026, 3, 7, 0, 30)
    assert format_datetime("H k K h", midnight) == "0 24 0 12"


def test_text_fields_follow_strftime():
    assert format_datetime("EEE MMM", WHEN) == WHEN.strftime("%a %b")
    assert format_datetime("EEEE MMMM", WHEN) == WHEN.strftime("%A %B")
    assert format_datetime("a", WHEN) == WHEN.strftime("%p")


def test_time_zone_fields():
    when = WHEN.replace(tzinfo=timezone(timedelta(hours=1)))
    assert format_datetime("Z", when) == "+0100"
    assert format_datetime("z", WHEN.replace(tzinfo=timezone.utc)) == "UTC"


def test_defaults_to_now():
    assert re.fullmatch(r"\d{2}/\d{2}/\d{4}", format_datetime("MM/dd/yyyy"))


def test_unknown_letter_is_rejected():
    with pytest.raises(FlexFormatError, match="unknown pattern letter 'q'"):
        compile_pattern("yyyy-qq")


def test_unterminated_quote_is_rejected():
    with pytest.raises(FlexFormatError, match="unterminated quote"):
        validate_pattern("HH 'at")


def test_non_string_is_rejected():
    with pytest.raises(FlexFormatError):
        validate_pattern(42)


def test_validate_returns_pattern():
    assert validate_pattern("HH:mm") == "HH:mm"


def test_unhashable_pattern_is_rejected():
    with pytest.raises(FlexFormatError, match="must be a string, not list"):
        validate_pattern(["yyyy"])
