"""Month grid computation and calendar-day helpers.

Months are zero-based (January = 0) and weekdays are numbered from
Sunday = 0, matching what the calendar front end sends. All values are
naive local dates; comparisons happen at day granularity.
"""

from datetime import date, datetime, time, timedelta

GRID_WEEKS = 6
DAYS_PER_WEEK = 7
GRID_CELLS = GRID_WEEKS * DAYS_PER_WEEK

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
SHORT_DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def _lookup(table: tuple[str, ...], index: int, what: str) -> str:
    # Negative indexes would silently wrap around.
    if not 0 <= index < len(table):
        raise IndexError(f"{what} index out of range: {index}")
    return table[index]


def month_name(month: int) -> str:
    return _lookup(MONTH_NAMES, month, "month")


def day_name(weekday: int) -> str:
    return _lookup(DAY_NAMES, weekday, "weekday")


def short_day_name(weekday: int) -> str:
    return _lookup(SHORT_DAY_NAMES, weekday, "weekday")


def weekday_of(day: date) -> int:
    """Weekday number with Sunday = 0."""
    return (day.weekday() + 1) % DAYS_PER_WEEK


def as_day(value: date | datetime) -> date:
    """Drop the time-of-day part of ``value``, if any."""
    if isinstance(value, datetime):
        return value.date()
    return value


def start_of_day(value: date | datetime) -> datetime:
    return datetime.combine(as_day(value), time.min)


def is_same_day(first: date | datetime, second: date | datetime) -> bool:
    return as_day(first) == as_day(second)


def first_of_month(year: int, month: int) -> date:
    _lookup(MONTH_NAMES, month, "month")
    return date(year, month + 1, 1)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move ``delta`` months forward (or back) from a zero-based month."""
    _lookup(MONTH_NAMES, month, "month")
    years, month = divmod(month + delta, 12)
    return year + years, month


def days_in_month(year: int, month: int) -> list[date]:
    first = first_of_month(year, month)
    next_year, next_month = shift_month(year, month, 1)
    count = (first_of_month(next_year, next_month) - first).days
    return [first + timedelta(days=offset) for offset in range(count)]


def week_start(day: date | datetime, first_day_of_week: int = 0) -> date:
    """Most recent day on or before ``day`` that falls on ``first_day_of_week``."""
    day = as_day(day)
    back = (weekday_of(day) - first_day_of_week) % DAYS_PER_WEEK
    return day - timedelta(days=back)


def weekday_headers(first_day_of_week: int = 0) -> list[str]:
    """Short day names in display order for a grid starting on ``first_day_of_week``."""
    return [
        short_day_name((first_day_of_week + offset) % DAYS_PER_WEEK)
        for offset in range(DAYS_PER_WEEK)
    ]


def calendar_grid(year: int, month: int, first_day_of_week: int = 0) -> list[list[date]]:
    """Return the 6x7 grid of days shown for a month.

    The grid starts on the most recent ``first_day_of_week`` on or before
    the 1st of the month and always holds exactly 42 consecutive days, so
    leading and trailing cells belong to the adjacent months.
    """
    _lookup(SHORT_DAY_NAMES, first_day_of_week, "weekday")
    anchor = week_start(first_of_month(year, month), first_day_of_week)
    days = [anchor + timedelta(days=offset) for offset in range(GRID_CELLS)]
    return [days[row:row + DAYS_PER_WEEK] for row in range(0, GRID_CELLS, DAYS_PER_WEEK)]
