"""A formatter for long running processes, such as service uptime."""

from __future__ import annotations

from dataclasses import dataclass

from timestring.duration import SECOND, to_duration
from timestring.formatter import Formatter, FormatterOption
from timestring.timeunit import DAYS, HOURS, MILLISECONDS, MINUTES, SECONDS, UnitValue


@dataclass(frozen=True)
class LongProcessFormatter(Formatter):
    """Formats durations as days, hours, minutes, seconds and milliseconds.

    Zero units are left out; milliseconds are shown only with the
    show_ms_on_seconds option and only for durations under a minute.
    """

    def option(self, *args: FormatterOption) -> LongProcessFormatter:
        """Return a copy with the given options applied."""
        return super().option(*args)

    def format(self, value) -> str:
        """Return the duration as a human readable string."""
        return super().format(value)

    def _render(self, nanoseconds: int) -> str:
        d = to_duration(nanoseconds)
        units = (
            DAYS.with_value(d.days),
            HOURS.with_value(d.hours),
            MINUTES.with_value(d.minutes),
            SECONDS.with_value(d.seconds),
            MILLISECONDS.with_value(d.milliseconds),
        )

        parts: list[str] = []
        has_content = False
        for unit in units:
            if unit.only_if_seconds and (not self.show_ms_on_seconds or nanoseconds >= 60 * SECOND):
                continue
            if unit.abbrev == "s" and unit.value == 0 and self.show_ms_on_seconds and d.milliseconds > 0:
                continue
            if unit.value == 0 and (not unit.show_zero or has_content):
                continue
            text = self._format_unit(unit, has_content)
            if text:
                parts.append(text)
                has_content = True

        out = "".join(parts)
        if not out:
            return "0s" if self.abbreviated else "0 seconds"
        if self.no_spaces:
            return out
        return out[:-1] if out.endswith(" ") else out

    def _format_unit(self, unit: UnitValue, has_content: bool) -> str | None:
        if unit.value == 0:
            if unit.only_if_seconds and self.show_ms_on_seconds and has_content:
                return None
            if unit.show_zero:
                if has_content:
                    return None
            elif not unit.only_if_seconds and not self.show_ms_on_seconds:
                return None

        space = "" if self.no_spaces else " "
        unit_space = "" if self.no_unit_spaces else " "
        if self.abbreviated:
            return f"{unit.value}{unit.abbrev}{space}"
        return f"{unit.value}{unit_space}{unit.name_for(False)}{space}"


LONG_PROCESS = LongProcessFormatter()