"""Definitions of the units a duration is displayed in."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeUnit:
    """A unit of time with its names and display rules."""

    singular: str
    plural: str
    abbrev: str
    show_zero: bool = False
    """Show the unit even when its value is zero."""
    only_if_seconds: bool = False
    """Show the unit only when the whole duration is under a minute."""

    def with_value(self, value: int) -> UnitValue:
        """Pair this unit with an amount."""
        return UnitValue(self, value)


@dataclass(frozen=True)
class UnitValue:
    """An amount of a single unit."""

    unit: TimeUnit
    value: int

    @property
    def show_zero(self) -> bool:
        return self.unit.show_zero

    @property
    def only_if_seconds(self) -> bool:
        return self.unit.only_if_seconds

    @property
    def abbrev(self) -> str:
        return self.unit.abbrev

    def name_for(self, abbreviated: bool) -> str:
        """Return the unit name that suits the value."""
        if abbreviated:
            return self.unit.abbrev
        return self.unit.singular if self.value == 1 else self.unit.plural


DAYS = TimeUnit("day", "days", "d")
HOURS = TimeUnit("hour", "hours", "h")
MINUTES = TimeUnit("minute", "minutes", "m")
SECONDS = TimeUnit("second", "seconds", "s", show_zero=True)
MILLISECONDS = TimeUnit("millisecond", "milliseconds", "ms", show_zero=True, only_if_seconds=True)

UNITS = (DAYS, HOURS, MINUTES, SECONDS, MILLISECONDS)