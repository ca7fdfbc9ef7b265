"""Associating events with calendar days.

An event is "on" a day when that day falls inside the event's whole-day
span: both ends are truncated to their calendar day and the range is
inclusive, so multi-day events show up on every day they touch.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from planner.domain.date_grid import (
    as_day,
    calendar_grid,
    month_name,
    start_of_day,
    weekday_headers,
)
from planner.domain.models import Event, EventStats

URGENT_PRIORITY = "urgent"


def _by_start(events: Iterable[Event]) -> list[Event]:
    return sorted(events, key=lambda event: event.start_date)


def occurs_on(event: Event, day: date | datetime) -> bool:
    return as_day(event.start_date) <= as_day(day) <= as_day(event.end_date)


def events_on_date(events: Iterable[Event], day: date | datetime) -> list[Event]:
    """Events overlapping ``day``, ordered by start."""
    return _by_start(event for event in events if occurs_on(event, day))


def events_in_range(
    events: Iterable[Event],
    range_start: date | datetime | None = None,
    range_end: date | datetime | None = None,
) -> list[Event]:
    """Events whose day span overlaps the inclusive ``[range_start, range_end]`` days."""
    selected = []
    for event in events:
        if range_start is not None and as_day(event.end_date) < as_day(range_start):
            continue
        if range_end is not None and as_day(event.start_date) > as_day(range_end):
            continue
        selected.append(event)
    return _by_start(selected)


def stats_for(events: Iterable[Event], now: datetime) -> EventStats:
    """Dashboard counters relative to ``now``.

    ``upcoming`` counts everything starting after midnight today, which
    includes events later today as well as future ones.
    """
    events = list(events)
    midnight = start_of_day(now)
    return EventStats(
        total=len(events),
        today=len(events_on_date(events, now)),
        upcoming=sum(1 for event in events if event.start_date > midnight),
        urgent=sum(
            1 for event in events
            if event.priority == URGENT_PRIORITY and event.start_date >= now
        ),
    )


@dataclass(frozen=True)
class GridCell:
    """One day of the month view with the events that fall on it."""

    day: date
    in_month: bool
    is_today: bool
    is_selected: bool
    events: tuple[Event, ...]


@dataclass(frozen=True)
class MonthView:
    """A month's 6x7 grid with events associated to each cell."""

    year: int
    month: int
    title: str
    weekday_headers: tuple[str, ...]
    weeks: tuple[tuple[GridCell, ...], ...]

    def cells(self) -> list[GridCell]:
        return [cell for week in self.weeks for cell in week]


def build_month_view(
    year: int,
    month: int,
    events: Iterable[Event],
    today: date | datetime,
    selected: date | datetime | None = None,
    first_day_of_week: int = 0,
) -> MonthView:
    events = list(events)
    today = as_day(today)
    selected = as_day(selected) if selected is not None else None
    weeks = tuple(
        tuple(
            GridCell(
                day=day,
                in_month=day.month == month + 1,
                is_today=day == today,
                is_selected=day == selected,
                events=tuple(events_on_date(events, day)),
            )
            for day in week
        )
        for week in calendar_grid(year, month, first_day_of_week)
    )
    return MonthView(
        year=year,
        month=month,
        title=f"{month_name(month)} {year}",
        weekday_headers=tuple(weekday_headers(first_day_of_week)),
        weeks=weeks,
    )
