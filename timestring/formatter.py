"""The common formatter interface and its options."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import timedelta

from timestring.duration import to_nanoseconds


class FormatterOption(enum.IntEnum):
    """Options that can be applied to the standard formatters."""

    NO_SPACES = 0
    """Leave out the spaces between values."""
    NO_UNIT_SPACES = 1
    """Leave out the spaces between a value and its unit."""
    ABBREVIATED = 2
    """Use short unit names, such as "d" instead of "days"."""
    SHOW_MS_ON_SECONDS = 3
    """Show milliseconds when the duration is under a minute."""


_FLAGS = {
    FormatterOption.NO_SPACES: "no_spaces",
    FormatterOption.NO_UNIT_SPACES: "no_unit_spaces",
    FormatterOption.ABBREVIATED: "abbreviated",
    FormatterOption.SHOW_MS_ON_SECONDS: "show_ms_on_seconds",
}


@dataclass(frozen=True)
class Formatter(ABC):
    """Base of the duration formatters; instances are immutable."""

    no_spaces: bool = False
    no_unit_spaces: bool = False
    abbreviated: bool = False
    show_ms_on_seconds: bool = False

    def option(self, *options: FormatterOption) -> Formatter:
        """Return a copy of this formatter with the given options switched on.

        Values that are not known options are ignored.
        """
        changes = {_FLAGS[opt]: True for opt in options if opt in _FLAGS}
        return replace(self, **changes)

    def format(self, value: int | timedelta | str) -> str:
        """Format a duration given as nanoseconds, a timedelta or a duration string."""
        return self._render(to_nanoseconds(value))

    @abstractmethod
    def _render(self, nanoseconds: int) -> str:
        """Render a duration given in nanoseconds."""