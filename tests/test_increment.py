"""Tests for increment parsing."""

import math

import pytest

from datespace import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR, ParseError
from datespace.increment import normalize_increment, parse_duration


def test_parse_single_segment():
    assert parse_duration("12h") == 12 * HOUR
    assert parse_duration("500ms") == 500


def test_parse_multiple_segments_sum():
    """Segments are added together, separator ignored."""
    assert parse_duration("1day.500ms") == DAY + 500
    assert parse_duration("1w 2d 3h") == WEEK + 2 * DAY + 3 * HOUR


def test_parse_repeated_unit_accumulates():
    """The same unit twice counts twice rather than overriding."""
    assert parse_duration("1h.1h") == 2 * HOUR
    assert parse_duration("10s,5s") == 15 * SECOND


def test_segment_order_does_not_matter():
    assert parse_duration("1h.30m") == parse_duration("30m.1h") == 90 * MINUTE


def test_leading_minus_negates_total():
    assert parse_duration("-12h") == -12 * HOUR
    assert parse_duration("-1h.30m") == -90 * MINUTE


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1ms", 1),
        ("1millisecond", 1),
        ("2milliseconds", 2),
        ("1s", SECOND),
        ("1sec", SECOND),
        ("1second", SECOND),
        ("3seconds", 3 * SECOND),
        ("1m", MINUTE),
        ("1min", MINUTE),
        ("1minute", MINUTE),
        ("5minutes", 5 * MINUTE),
        ("1h", HOUR),
        ("1hr", HOUR),
        ("1hour", HOUR),
        ("2hours", 2 * HOUR),
        ("1d", DAY),
        ("1day", DAY),
        ("7days", 7 * DAY),
        ("1w", WEEK),
        ("1wk", WEEK),
        ("1week", WEEK),
        ("2weeks", 2 * WEEK),
        ("1b", MONTH),
        ("1month", MONTH),
        ("6months", 6 * MONTH),
        ("1y", YEAR),
        ("1yr", YEAR),
        ("1year", YEAR),
        ("2years", 2 * YEAR),
    ],
)
def test_unit_spellings(text, expected):
    assert parse_duration(text) == expected


def test_calendar_average_units():
    """Months and years use 365.25-day averages."""
    assert MONTH == 365.25 / 12 * DAY
    assert YEAR == 365.25 * DAY


def test_units_are_case_sensitive():
    with pytest.raises(ParseError, match="Unrecognized increment unit: 'H'"):
        parse_duration("12H")


def test_unknown_unit_raises():
    with pytest.raises(ParseError, match="'fortnight'"):
        parse_duration("1fortnight")


@pytest.mark.parametrize("text", ["beep", "", "h", "-"])
def test_no_segments_raises(text):
    with pytest.raises(ParseError, match="Unable to parse increment string"):
        parse_duration(text)


def test_normalize_default_is_one_day():
    assert normalize_increment(None) == DAY


@pytest.mark.parametrize("value", [1000, 0.5, 0, -1000, -0.25, math.inf])
def test_normalize_numbers_pass_through(value):
    assert normalize_increment(value) == value


def test_normalize_string_is_parsed():
    assert normalize_increment("-1d") == -DAY


def test_normalize_rejects_nan():
    with pytest.raises(TypeError, match="valid number"):
        normalize_increment(math.nan)


@pytest.mark.parametrize("value", [True, False, [], {}, (), lambda: None, object()])
def test_normalize_rejects_other_types(value):
    with pytest.raises(TypeError, match="string or number"):
        normalize_increment(value)


@pytest.mark.parametrize("text", ["1.5h", "-0.5d", "1h.2.5m"])
def test_fractional_segments_raise(text):
    """A decimal point inside a number is not read as a separator."""
    with pytest.raises(ParseError, match="whole numbers"):
        parse_duration(text)


def test_dot_between_segments_is_a_separator():
    assert parse_duration("1h.5m") == HOUR + 5 * MINUTE
