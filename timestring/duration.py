"""Duration arithmetic and parsing for human readable time strings."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import timedelta

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_LIMIT = 1 << 63

_UNIT_SIZES = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "\u00b5s": MICROSECOND,
    "\u03bcs": MICROSECOND,
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_NUMBER = re.compile(r"([0-9]*)(?:\.([0-9]*))?")
_UNIT = re.compile(r"[^0-9.]*")


@dataclass(frozen=True)
class Duration:
    """A duration split into display fields that together add up to the total.

    Unlike a total count of hours, ``hours`` holds only the hours left over
    once whole days are taken out, and so on for the smaller fields.
    """

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0


def _invalid(text: str) -> ValueError:
    return ValueError(f"invalid duration {text!r}")


def _fraction(digits: str) -> tuple[int, float]:
    value, scale, overflow = 0, 1.0, False
    for char in digits:
        if overflow:
            continue
        candidate = value * 10 + int(char)
        if candidate > _LIMIT:
            overflow = True
            continue
        value = candidate
        scale *= 10
    return value, scale


def parse_duration(text: str) -> int:
    """Parse a duration such as ``"1h30m"`` or ``"-1.5s"`` into nanoseconds.

    Accepted units are ns, us (or µs), ms, s, m and h. Raises ValueError on
    malformed input or when the result does not fit a signed 64-bit count.
    """
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return 0
    if not rest:
        raise _invalid(text)

    total = 0
    while rest:
        if not (rest[0] == "." or rest[0] in "0123456789"):
            raise _invalid(text)
        number = _NUMBER.match(rest)
        whole_digits, frac_digits = number.group(1), number.group(2) or ""
        if not whole_digits and not frac_digits:
            raise _invalid(text)
        whole = int(whole_digits) if whole_digits else 0
        if whole > _LIMIT:
            raise _invalid(text)
        frac, scale = _fraction(frac_digits)
        rest = rest[number.end():]

        unit_name = _UNIT.match(rest).group(0)
        if not unit_name:
            raise ValueError(f"missing unit in duration {text!r}")
        if unit_name not in _UNIT_SIZES:
            raise ValueError(f"unknown unit {unit_name!r} in duration {text!r}")
        rest = rest[len(unit_name):]
        unit = _UNIT_SIZES[unit_name]

        if whole > _LIMIT // unit:
            raise _invalid(text)
        amount = whole * unit
        if frac > 0:
            amount += int(float(frac) * (unit / scale))
            if amount > _LIMIT:
                raise _invalid(text)
        total += amount
        if total > _LIMIT:
            raise _invalid(text)

    if negative:
        return -total
    if total > _LIMIT - 1:
        raise _invalid(text)
    return total


def to_nanoseconds(value: int | timedelta | str) -> int:
    """Return a duration given as nanoseconds, a timedelta or a string in nanoseconds."""
    if isinstance(value, bool):
        raise TypeError("a duration cannot be a bool")
    if isinstance(value, int):
        return value
    if isinstance(value, timedelta):
        micros = (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds
        return micros * MICROSECOND
    if isinstance(value, str):
        return parse_duration(value)
    raise TypeError(f"cannot interpret {type(value).__name__} as a duration")


def _split(nanoseconds: int, unit: int) -> tuple[int, int]:
    quotient, remainder = divmod(abs(nanoseconds), unit)
    if nanoseconds < 0:
        return -quotient, -remainder
    return quotient, remainder


def _in_units(nanoseconds: int, unit: int) -> float:
    whole, rest = _split(nanoseconds, unit)
    return whole + rest / float(unit)


def to_duration(value: int | timedelta | str) -> Duration:
    """Split a duration into days, hours, minutes, seconds and milliseconds."""
    nanoseconds = to_nanoseconds(value)
    hours = _in_units(nanoseconds, HOUR)
    minutes = _in_units(nanoseconds, MINUTE)
    seconds = _in_units(nanoseconds, SECOND)
    millis = float(_split(nanoseconds, MILLISECOND)[0])
    return Duration(
        days=math.trunc(hours / 24),
        hours=math.trunc(math.fmod(hours, 24)),
        minutes=math.trunc(math.fmod(minutes, 60)),
        seconds=math.trunc(math.fmod(seconds, 60)),
        milliseconds=math.trunc(math.fmod(millis, 1000)),
    )