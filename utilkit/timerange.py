"""Start and end times of today, yesterday, this and last month and year."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from utilkit.timefmt import DATE_LAYOUT, TIME_LAYOUT

__all__ = [
    "get_yesterday_range_time",
    "get_today_range_time",
    "get_last_month_range_time",
    "get_current_month_range_time",
    "get_current_year_range_time",
    "get_last_year_range_time",
    "get_today_range_date_string",
    "get_yesterday_range_date_string",
    "get_current_month_range_date_string",
    "get_last_month_range_date_string",
    "get_current_year_range_date_string",
    "get_last_year_range_date_string",
    "get_yesterday_range_time_string",
    "get_today_range_time_string",
    "get_last_month_range_time_string",
    "get_current_month_range_time_string",
    "get_last_year_range_time_string",
    "get_current_year_range_time_string",
]

_END_OF_DAY = time(23, 59, 59)

TimeRange = tuple[datetime, datetime]


def _add_date(day: date, years: int = 0, months: int = 0, days: int = 0) -> date:
    """Shift ``day``; an out-of-range day of month spills into the next month."""
    month_index = day.year * 12 + (day.month - 1) + years * 12 + months
    year, month0 = divmod(month_index, 12)
    return date(year, month0 + 1, 1) + timedelta(days=day.day - 1 + days)


def _start_of(day: date) -> datetime:
    return datetime.combine(day, time.min)


def _end_of(day: date) -> datetime:
    return datetime.combine(day, _END_OF_DAY)


def _day_range(day: date) -> TimeRange:
    return _start_of(day), _end_of(day)


def _month_range(day: date) -> TimeRange:
    first = date(day.year, day.month, 1)
    last = _add_date(first, months=1, days=-1)
    return _start_of(first), _end_of(last)


def _year_range(day: date) -> TimeRange:
    first = date(day.year, 1, 1)
    last = _add_date(first, years=1, days=-1)
    return _start_of(first), _end_of(last)


def _today() -> date:
    return datetime.now().date()


def _format(bounds: TimeRange, layout: str) -> tuple[str, str]:
    start, end = bounds
    return start.strftime(layout), end.strftime(layout)


def get_yesterday_range_time() -> TimeRange:
    """Local 00:00:00 and 23:59:59 of yesterday."""
    return _day_range(_add_date(_today(), days=-1))


def get_today_range_time() -> TimeRange:
    """Local 00:00:00 and 23:59:59 of today."""
    return _day_range(_today())


def get_last_month_range_time() -> TimeRange:
    """First day 00:00:00 and last day 23:59:59 of last month."""
    return _month_range(_add_date(_today(), months=-1))


def get_current_month_range_time() -> TimeRange:
    """First day 00:00:00 and last day 23:59:59 of this month."""
    return _month_range(_today())


def get_current_year_range_time() -> TimeRange:
    """1 January 00:00:00 and 31 December 23:59:59 of this year."""
    return _year_range(_today())


def get_last_year_range_time() -> TimeRange:
    """1 January 00:00:00 and 31 December 23:59:59 of last year."""
    return _year_range(_add_date(_today(), years=-1))


def get_today_range_date_string() -> tuple[str, str]:
    """Today's range as ``YYYY-MM-DD`` strings."""
    return _format(get_today_range_time(), DATE_LAYOUT)


def get_yesterday_range_date_string() -> tuple[str, str]:
    """Yesterday's range as ``YYYY-MM-DD`` strings."""
    return _format(get_yesterday_range_time(), DATE_LAYOUT)


def get_current_month_range_date_string() -> tuple[str, str]:
    """This month's range as ``YYYY-MM-DD`` strings."""
    return _format(get_current_month_range_time(), DATE_LAYOUT)


def get_last_month_range_date_string() -> tuple[str, str]:
    """Last month's range as ``YYYY-MM-DD`` strings."""
    return _format(get_last_month_range_time(), DATE_LAYOUT)


def get_current_year_range_date_string() -> tuple[str, str]:
    """This year's range as ``YYYY-MM-DD`` strings."""
    return _format(get_current_year_range_time(), DATE_LAYOUT)


def get_last_year_range_date_string() -> tuple[str, str]:
    """Last year's range as ``YYYY-MM-DD`` strings."""
    return _format(get_last_year_range_time(), DATE_LAYOUT)


def get_yesterday_range_time_string() -> tuple[str, str]:
    """Yesterday's range as ``YYYY-MM-DD HH:MM:SS`` strings."""
    return _format(get_yesterday_range_time(), TIME_LAYOUT)


def get_today_range_time_string() -> tuple[str, str]:
    """Today's range as ``YYYY-MM-DD HH:MM:SS`` strings."""
    return _format(get_today_range_time(), TIME_LAYOUT)


def get_last_month_range_time_string() -> tuple[str, str]:
    """Last month's range as ``YYYY-MM-DD HH:MM:SS`` strings."""
    return _format(get_last_month_range_time(), TIME_LAYOUT)


def get_current_month_range_time_string() -> tuple[str, str]:
    """This month's range as ``YYYY-MM-DD HH:MM:SS`` strings."""
    return _format(get_current_month_range_time(), TIME_LAYOUT)


def get_last_year_range_time_string() -> tuple[str, str]:
    """Last year's range as ``YYYY-MM-DD HH:MM:SS`` strings."""
    return _format(get_last_year_range_time(), TIME_LAYOUT)


def get_current_year_range_time_string() -> tuple[str, str]:
    """This year's range as ``YYYY-MM-DD HH:MM:SS`` strings."""
    return _format(get_current_year_range_time(), TIME_LAYOUT)