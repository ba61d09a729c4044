from datetime import timedelta

import pytest

from timestring.duration import HOUR, MILLISECOND, MINUTE, NANOSECOND, SECOND
from timestring.formatter import FormatterOption
from timestring.shortprocess import SHORT_PROCESS, ShortProcessFormatter

DAY = 24 * HOUR

CASES = [
    ("Zero duration", 0, (), "0s"),
    ("Only milliseconds", 500 * MILLISECOND, (), "500ms"),
    ("Only seconds", 5 * SECOND, (), "5s"),
    ("Seconds and milliseconds", 5 * SECOND + 500 * MILLISECOND, (), "5s 500ms"),
    ("Only minutes", 10 * MINUTE, (), "10m"),
    ("Minutes and seconds", 10 * MINUTE + 5 * SECOND, (), "10m 5s"),
    ("Only hours", 2 * HOUR, (), "2h"),
    ("Hours and minutes", 2 * HOUR + 10 * MINUTE, (), "2h 10m"),
    ("Only days", 3 * DAY, (), "3d"),
    ("Days and hours", 3 * DAY + 2 * HOUR, (), "3d 2h"),
    ("All units", DAY + 2 * HOUR + 3 * MINUTE + 4 * SECOND + 5 * MILLISECOND, (), "1d 2h 3m 4s 5ms"),
    (
        "Complex duration with all parts",
        DAY + 2 * HOUR + 3 * MINUTE + 4 * SECOND + 5 * MILLISECOND,
        (),
        "1d 2h 3m 4s 5ms",
    ),
    ("Less than 1ms but non-zero", 100 * NANOSECOND, (), "0s"),
    ("NoSpaces option", DAY + 2 * HOUR + 3 * MINUTE, (FormatterOption.NO_SPACES,), "1d2h3m"),
    ("NoUnitSpaces option", DAY + 2 * HOUR + 3 * MINUTE, (FormatterOption.NO_UNIT_SPACES,), "1d 2h 3m"),
    (
        "NoSpaces and NoUnitSpaces",
        DAY + 2 * HOUR + 3 * MINUTE,
        (FormatterOption.NO_SPACES, FormatterOption.NO_UNIT_SPACES),
        "1d2h3m",
    ),
    ("Zero duration with NoSpaces", 0, (FormatterOption.NO_SPACES,), "0s"),
    ("Seconds and ms with NoSpaces", 5 * SECOND + 500 * MILLISECOND, (FormatterOption.NO_SPACES,), "5s500ms"),
    ("ShowMSOnSeconds", 5 * SECOND, (FormatterOption.SHOW_MS_ON_SECONDS,), "5s"),
    ("Abbreviated", 5 * SECOND, (FormatterOption.ABBREVIATED,), "5s"),
]


@pytest.mark.parametrize("name, duration, options, expected", CASES, ids=[case[0] for case in CASES])
def test_short_process_format(name, duration, options, expected):
    formatter = SHORT_PROCESS.option(*options) if options else SHORT_PROCESS
    assert formatter.format(duration) == expected


def test_format_accepts_timedelta():
    assert SHORT_PROCESS.format(timedelta(seconds=5, milliseconds=500)) == "5s 500ms"


def test_show_ms_option_is_ignored():
    formatter = SHORT_PROCESS.option(FormatterOption.SHOW_MS_ON_SECONDS)
    assert formatter.show_ms_on_seconds is False
    assert formatter == SHORT_PROCESS


def test_option_forces_abbreviated():
    formatter = ShortProcessFormatter(abbreviated=False).option(FormatterOption.NO_SPACES)
    assert formatter.abbreviated is True
    assert formatter.no_spaces is True


def test_option_leaves_default_instance_unchanged():
    SHORT_PROCESS.option(FormatterOption.NO_SPACES)
    assert SHORT_PROCESS.format(10 * MINUTE + 5 * SECOND) == "10m 5s"