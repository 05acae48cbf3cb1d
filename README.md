# utilkit

Small helpers for everyday Python code: identifier case conversion, random
strings, day differences and timer formatting, calendar ranges, time and
protobuf conversions, UUID parsing and dataclass-to-dict mapping.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

The only runtime dependency is `protobuf`, used by `utilkit.timeconv`.

## Modules

### `utilkit.stringcase`

- `to_snake_case(text)`: spaces are dropped, `-` and `_` become `_`, and an
  underscore goes in front of each upper-case letter that starts a new word.
  `"lowerCamelCase"` becomes `"lower_camel_case"`.
- `to_pascal_case(text)` and `to_low_camel_case(text)`: build camel case from
  the ASCII letters and digits of `text`. `_`, space, `-` and `.` start a new
  word and are dropped, as are all other non-alphanumeric bytes. A letter that
  follows a digit is capitalised.

### `utilkit.randomstring`

Random strings of a given length. All functions raise `ValueError` for a
negative count, an empty character set, or a `start`/`end` pair where `end`
is not greater than `start` or is beyond the character set.

- `random_alpha_numeric`, `random_alphabetic`, `random_numeric`,
  `random_ascii` (code points 32 to 126), `random_non_alpha_numeric` (any
  31-bit code point, unfiltered) and `random_alpha_numeric_custom(count,
  letters, numbers)` use a module-level `random.Random`.
- `random_string(count, start, end, letters, numbers, *chars)` is the general
  form. With `start` and `end` both `0` the range is all of `chars` if given,
  `' '` to `'z'` when letters or digits are asked for, or every 31-bit code
  point otherwise.
- `random_seed(count, start, end, letters, numbers, chars, rng)` does the
  same with a `random.Random` of your own, for repeatable output.
- `crypto_random` and the `crypto_random_*` functions are the same, drawing
  from `secrets`.

Code points that cannot appear in a Python string (surrogates, values above
U+10FFFF) come out as U+FFFD, so the unfiltered variants may contain it.

### `utilkit.structutil`

- `for_each(instance, function)` calls `function(name, value, metadata)` for
  each field of a dataclass instance; anything else raises `TypeError`.
- `to_map(instance, *tag_names)` returns a `dict` of field names to values.
  For each tag name, a non-empty entry in a field's metadata replaces its key;
  a key of `"-"` leaves the field out.

```python
from dataclasses import dataclass, field
from utilkit.structutil import to_map

@dataclass
class Item:
    first: str
    third: bool = field(default=True, metadata={"struct": "Third"})

to_map(Item("a"), "struct")   # {"first": "a", "Third": True}
```

### `utilkit.trans`

Defaults for missing values: `string_value`, `int_value`, `float_value`,
`bool_value` and `time_value` (the current local time) return their argument,
or a default when it is `None`. `value_list(values, default)` replaces each
`None` in a sequence. `map_keys` and `map_values` return a mapping's keys or
values as a list.

### `utilkit.uuidutil`

- `to_uuid(text)` parses the canonical, `urn:uuid:`, braced and 32-digit hex
  forms, and returns the nil UUID when `text` does not parse.
- `to_uuid_or_none(text)` returns `None` for `None` or invalid text.
- `to_string_or_none(value)` gives the canonical string, or `None`.

### `utilkit.timefmt`

- Layout constants `DATE_LAYOUT`, `CLOCK_LAYOUT` and `TIME_LAYOUT`
  (`strftime` formats), `DEFAULT_TIME_LOCATION_NAME` (`"Asia/Shanghai"`) and
  `reference_time()`, which returns 2006-01-02 15:04:05.999999 at -07:00.
- `string_difference_days`, `time_difference_days` and
  `seconds_difference_days` give the days between two `YYYY-MM-DD` strings,
  the calendar days of two datetimes, or two Unix timestamps, rounded up. The
  matching `*_difference_hours` functions give the hours.
- `duration_hms(duration)` splits a `timedelta`, rounded to the second, into
  hours, minutes and seconds. `format_timer` writes it as `[H]H:MM:SS` and
  drops a zero hour field. `format_timerf(fmt, duration)` applies a
  printf-style format to the three numbers.

### `utilkit.timerange`

Start (00:00:00) and end (23:59:59) of today, yesterday, the current and last
month, and the current and last year, as local naive datetimes
(`get_today_range_time` and so on), as `YYYY-MM-DD` strings
(`get_*_range_date_string`) or as `YYYY-MM-DD HH:MM:SS` strings
(`get_*_range_time_string`).

### `utilkit.timeconv`

- `string_time_to_time` and `string_date_to_time` read `YYYY-MM-DD
  HH:MM:SS`, `YYYY-MM-DD` or `HH:MM:SS` in the default zone and return `None`
  for empty or unreadable text. The default zone is `Asia/Shanghai`; change it
  with `refresh_default_time_location(name)`. If the zone cannot be loaded,
  reading raises `LookupError`.
- `unix_milli_to_string`, `string_to_unix_milli`, `time_to_time_string` and
  `time_to_date_string` convert between milliseconds, strings and datetimes.
- `timestamp_to_time` and `time_to_timestamp` convert to and from protobuf
  `Timestamp`.
- `number_to_duration`, `float_to_duration`, `duration_to_float` and
  `duration_to_number(value, precision, number_type)` convert between numbers
  and protobuf `Duration` in units of a precision (`NANOSECOND`, `SECOND`,
  `MINUTE` and the like, or a `timedelta`). `duration_to_durationpb` and
  `durationpb_to_duration` convert to and from `timedelta`.

Every conversion returns `None` when given `None`.

## Example

```python
from datetime import timedelta
from utilkit.stringcase import to_snake_case, to_pascal_case
from utilkit.timefmt import string_difference_days, format_timer

to_snake_case("lowerCamelCase")                      # "lower_camel_case"
to_pascal_case("snake_case")                         # "SnakeCase"
string_difference_days("2017-09-01", "2018-03-11")   # 191
format_timer(timedelta(minutes=5, seconds=3))        # "5:03"
```

## What it does not do

This is a library only: it has no command-line interface.