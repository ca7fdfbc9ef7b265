"""Unit tests for the month grid and date helpers.

Months are zero-based and weekdays count from Sunday = 0.
Run with: pytest tests/test_date_grid.py -v
"""

from datetime import date, datetime, timedelta

import pytest

from planner.domain.date_grid import (
    calendar_grid,
    day_name,
    days_in_month,
    is_same_day,
    month_name,
    shift_month,
    short_day_name,
    start_of_day,
    week_start,
    weekday_headers,
    weekday_of,
)


class TestNames:
    def test_month_names_are_zero_based(self):
        """Month names are indexed from 0."""
        assert month_name(0) == "January"
        assert month_name(11) == "December"

    @pytest.mark.parametrize("month", [-1, 12])
    def test_month_name_out_of_range(self, month):
        """Month indexes outside 0..11 raise IndexError."""
        with pytest.raises(IndexError):
            month_name(month)

    def test_day_names_start_on_sunday(self):
        """Day names start on Sunday."""
        assert day_name(0) == "Sunday"
        assert short_day_name(6) == "Sat"

    def test_day_name_out_of_range(self):
        """Day indexes outside 0..6 raise IndexError."""
        with pytest.raises(IndexError):
            day_name(7)

    def test_weekday_headers_follow_first_day(self):
        """Headers rotate with the first day of the week."""
        assert weekday_headers() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
        assert weekday_headers(1)[0] == "Mon"
        assert weekday_headers(1)[-1] == "Sun"


class TestDayArithmetic:
    def test_weekday_of_sunday_is_zero(self):
        """Sunday is weekday 0."""
        assert weekday_of(date(2024, 1, 7)) == 0
        assert weekday_of(date(2024, 1, 8)) == 1

    def test_same_day_ignores_time(self):
        """is_same_day compares calendar days only."""
        assert is_same_day(datetime(2024, 3, 5, 0, 0), datetime(2024, 3, 5, 23, 59))
        assert not is_same_day(datetime(2024, 3, 5, 23, 59), datetime(2024, 3, 6, 0, 0))

    def test_start_of_day(self):
        """start_of_day truncates to midnight."""
        assert start_of_day(datetime(2024, 3, 5, 17, 45)) == datetime(2024, 3, 5)
        assert start_of_day(date(2024, 3, 5)) == datetime(2024, 3, 5)

    def test_shift_month_wraps_years(self):
        """Shifting months wraps across years."""
        assert shift_month(2024, 11, 1) == (2025, 0)
        assert shift_month(2024, 0, -1) == (2023, 11)
        assert shift_month(2024, 5, 0) == (2024, 5)

    def test_days_in_leap_february(self):
        """Leap-year February has 29 days."""
        days = days_in_month(2024, 1)
        assert len(days) == 29
        assert days[-1] == date(2024, 2, 29)

    def test_week_start(self):
        """week_start finds the first day of the week."""
        wednesday = date(2024, 1, 10)
        assert week_start(wednesday) == date(2024, 1, 7)
        assert week_start(wednesday, 1) == date(2024, 1, 8)


class TestCalendarGrid:
    def test_grid_starts_on_preceding_sunday(self):
        """The grid starts on the Sunday before the 1st."""
        grid = calendar_grid(2024, 0)
        assert grid[0][0] == date(2023, 12, 31)
        assert grid[-1][-1] == date(2024, 2, 10)

    def test_grid_starts_on_the_first_when_it_is_the_first_weekday(self):
        """The grid starts on the 1st when it is the first weekday."""
        assert calendar_grid(2024, 8)[0][0] == date(2024, 9, 1)
        assert calendar_grid(2024, 0, first_day_of_week=1)[0][0] == date(2024, 1, 1)

    def test_february_that_fills_four_rows_still_has_six(self):
        """A four-row February still gets six rows."""
        grid = calendar_grid(2015, 1)
        assert grid[0][0] == date(2015, 2, 1)
        assert len(grid) == 6

    @pytest.mark.parametrize("first_day_of_week", [0, 1])
    def test_every_month_is_covered_by_42_consecutive_days(self, first_day_of_week):
        """Every month fits in 42 consecutive days."""
        for year in (2023, 2024):
            for month in range(12):
                grid = calendar_grid(year, month, first_day_of_week)
                cells = [day for week in grid for day in week]
                assert len(grid) == 6
                assert all(len(week) == 7 for week in grid)
                assert all(b - a == timedelta(days=1) for a, b in zip(cells, cells[1:]))
                assert set(days_in_month(year, month)) <= set(cells)
                assert weekday_of(cells[0]) == first_day_of_week

    def test_rejects_unknown_first_day(self):
        """Unsupported first days of week raise IndexError."""
        with pytest.raises(IndexError):
            calendar_grid(2024, 0, first_day_of_week=7)
