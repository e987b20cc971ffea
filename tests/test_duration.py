import logging

import pytest

from slack_revoke.duration import DEFAULT_DELAY_MS, parse_duration


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, 100),
        ("", 100),
        ("500ms", 500),
        ("500", 500),
        ("2s", 2000),
        ("1.5s", 1500),
        ("1m", 60000),
        ("1h", 3600000),
        ("3S", 3000),
        ("250MS", 250),
    ],
)
def test_parse_duration(value, expected):
    assert parse_duration(value) == expected


def test_invalid_duration_falls_back_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="slack_revoke.duration"):
        assert parse_duration("invalid") == DEFAULT_DELAY_MS
    assert "Invalid duration format: invalid" in caplog.text


def test_negative_or_spaced_values_fall_back():
    assert parse_duration("-5s") == DEFAULT_DELAY_MS
    assert parse_duration("5 s") == DEFAULT_DELAY_MS


@pytest.mark.parametrize("value", ["5s\n", "500ms\n", "٥s"])
def test_trailing_newline_and_non_ascii_digits_fall_back(value):
    assert parse_duration(value) == DEFAULT_DELAY_MS
