from datetime import datetime, timedelta, timezone

import pytest

from chanboard.ui import append_reply_reference, format_timestamp, parse_reply_targets


def test_format_timestamp_matches_browser_rendering():
    assert format_timestamp("2022-06-05T12:00:00Z") == "Sun, 5 Jun 2022, 12:00:00"


def test_format_timestamp_is_stable():
    value = "2022-06-05T12:00:00Z"
    assert format_timestamp(value) == format_timestamp(value) == format_timestamp(value)


def test_format_timestamp_pads_clock_not_day():
    assert format_timestamp("2021-01-03T09:05:03+00:00") == "Sun, 3 Jan 2021, 09:05:03"


def test_naive_datetime_is_utc():
    assert format_timestamp(datetime(2022, 6, 5, 12, 0, 0)) == "Sun, 5 Jun 2022, 12:00:00"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2022-06-05T12:00:00Z", "Sun, 5 Jun 2022, 07:00:00"),
        ("2022-06-05T02:30:00Z", "Sat, 4 Jun 2022, 21:30:00"),
    ],
)
def test_format_timestamp_converts_timezone(value, expected):
    assert format_timestamp(value, tz=timezone(timedelta(hours=-5))) == expected


def test_append_reply_reference():
    assert append_reply_reference("", 5) == " >>5"
    assert append_reply_reference("agreed", 12) == "agreed >>12"


def test_parse_reply_targets():
    assert parse_reply_targets("a >>1 >>2 >>1 >>x >3") == [1, 2]
    assert parse_reply_targets(None) == []
    assert parse_reply_targets(append_reply_reference("see", 7)) == [7]


def test_parse_reply_targets_skips_ids_outside_column_range():
    assert parse_reply_targets(">>0 >>2147483648 >>99999999999999999999 >>5") == [5]
    assert parse_reply_targets(">>2147483647 >>007") == [2147483647, 7]
