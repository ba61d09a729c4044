# timestring

Format time durations in a human readable way.

Two formatters are provided:

- `LongProcessFormatter` (in `timestring.longprocess`) is for processes that
  run a long time, such as the uptime of a server or service:
  `41 days 16 hours 32 minutes 29 seconds`.
- `ShortProcessFormatter` (in `timestring.shortprocess`) gives a compact,
  always abbreviated form, down to milliseconds: `1d 2h 3m 4s 5ms`.

Ready-made instances with no options set are available as
`timestring.longprocess.LONG_PROCESS` and
`timestring.shortprocess.SHORT_PROCESS`.

## Installation

```
pip install timestring
```

## Usage

`format()` takes a duration as a `datetime.timedelta`, as an integer number of
nanoseconds, or as a duration string such as `"1000h32m29s"`.

```python
from datetime import timedelta

from timestring.formatter import FormatterOption
from timestring.longprocess import LongProcessFormatter
from timestring.shortprocess import ShortProcessFormatter

long_fmt = LongProcessFormatter()
long_fmt.format("1000h32m29s")
# '41 days 16 hours 32 minutes 29 seconds'

long_fmt.option(FormatterOption.ABBREVIATED).format("1000h32m29s")
# '41d 16h 32m 29s'

long_fmt.option(FormatterOption.NO_SPACES, FormatterOption.NO_UNIT_SPACES).format("1000h32m29s")
# '41days16hours32minutes29seconds'

long_fmt.option(
    FormatterOption.ABBREVIATED,
    FormatterOption.NO_SPACES,
    FormatterOption.SHOW_MS_ON_SECONDS,
).format("10s999.9ms")
# '10s999ms'

short_fmt = ShortProcessFormatter()
short_fmt.format(timedelta(seconds=5, milliseconds=500))
# '5s 500ms'
short_fmt.option(FormatterOption.NO_SPACES).format("26h3m")
# '1d2h3m'
```

`option()` never changes the formatter it is called on; it returns a new
formatter with the options applied. Values that are not known options are
ignored.

The long formatter leaves out units whose value is zero. A duration that
rounds down to nothing is shown as `0 seconds` (or `0s` when abbreviated).
The short formatter also leaves out zero units and shows `0s` for zero or
for durations under one millisecond.

A malformed duration string raises `ValueError`; a value of any other type
(including `bool`) raises `TypeError`.

### Options

`timestring.formatter.FormatterOption`:

| Option | Effect |
| --- | --- |
| `NO_SPACES` | no space between successive values |
| `NO_UNIT_SPACES` | no space between a value and its unit |
| `ABBREVIATED` | `d`, `h`, `m`, `s`, `ms` instead of full unit names |
| `SHOW_MS_ON_SECONDS` | show milliseconds when the duration is under a minute |

The short formatter is always abbreviated and ignores `SHOW_MS_ON_SECONDS`;
`NO_UNIT_SPACES` makes no difference to its output.

### Splitting and parsing durations

`timestring.duration` offers:

- `parse_duration(text)` reads a duration string into nanoseconds. Units are
  `ns`, `us` (or `µs`), `ms`, `s`, `m` and `h`; a leading `+` or `-` and
  fractions such as `1.5h` are accepted. Results must fit a signed 64-bit
  nanosecond count.
- `to_nanoseconds(value)` turns a timedelta, integer or duration string into
  nanoseconds.
- `to_duration(value)` returns a `Duration` holding `days`, `hours`,
  `minutes`, `seconds` and `milliseconds`, each only the part that remains
  after the larger units.

`timestring.timeunit` holds the unit definitions (`TimeUnit`, `UnitValue`)
the formatters use.

## What it does not do

This is a library only: there is no command-line tool, and no units larger
than days (weeks, months, years) are shown.