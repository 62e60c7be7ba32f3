"""Tests for date argument parsing and display."""

from datetime import datetime

import pytest

from wordbook.core.dates import format_date, parse_date_arg
from wordbook.core.errors import InvalidDate, MalformedArgument


def test_parse_date_arg():
    assert parse_date_arg("08:30:2019:17:46") == datetime(2019, 8, 30, 17, 46)


def test_parse_date_arg_strips_whitespace():
    assert parse_date_arg(" 01:01:2020:00:00 ") == datetime(2020, 1, 1, 0, 0)


@pytest.mark.parametrize("text", ["", "2020-01-01", "13:01:2020:00:00", "01:01:2020:24:00", "01:01:2020"])
def test_parse_date_arg_rejects(text):
    with pytest.raises(InvalidDate):
        parse_date_arg(text)


def test_invalid_date_is_malformed_argument():
    assert issubclass(InvalidDate, MalformedArgument)


def test_format_date():
    assert format_date(datetime(2019, 12, 22, 21, 9)) == "12/22/2019 09:09:00 PM"
    assert format_date(datetime(2020, 1, 1, 0, 0)) == "01/01/2020 12:00:00 AM"
