"""A concise formatter that always uses abbreviated units."""

from __future__ import annotations

from dataclasses import dataclass, replace

from timestring.duration import to_duration
from timestring.formatter import Formatter, FormatterOption
from timestring.timeunit import UNITS


@dataclass(frozen=True)
class ShortProcessFormatter(Formatter):
    """Formats durations like "1d 2h 3m 4s 5ms", leaving out zero units.

    Units are always abbreviated; the show_ms_on_seconds option does not apply.
    """

    abbreviated: bool = True

    def option(self, *args: FormatterOption) -> ShortProcessFormatter:
        """Return a copy with the given options; only the spacing options take effect."""
        kept = [opt for opt in args if opt in (FormatterOption.NO_SPACES, FormatterOption.NO_UNIT_SPACES)]
        return replace(super().option(*kept), abbreviated=True)

    def format(self, value) -> str:
        """Return the duration as a short abbreviated string."""
        return super().format(value)

    def _render(self, nanoseconds: int) -> str:
        if nanoseconds == 0:
            return "0s"
        d = to_duration(nanoseconds)
        values = (d.days, d.hours, d.minutes, d.seconds, d.milliseconds)
        parts = [f"{value}{unit.abbrev}" for unit, value in zip(UNITS, values) if value > 0]
        if not parts:
            return "0s"
        return ("" if self.no_spaces else " ").join(parts)


SHORT_PROCESS = ShortProcessFormatter()