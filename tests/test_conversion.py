"""Tests for conversion between dates and ISO day counts."""

from __future__ import annotations

import datetime

import pytest

from ethiopic._internal.calendar import (
    date_from_iso_days,
    date_to_iso_days,
    days_in_month,
    days_in_year,
    valid_date,
)
from ethiopic.convert.iso import gregorian_to_iso_days

SAMPLE_YEARS = [-9999, -2001, -5, -4, -3, -2, -1, 1, 2, 3, 4, 5, 1999, 2015, 2016, 9999]


class TestDateToIsoDays:
    """Tests for date_to_iso_days()."""

    def test_first_day_of_calendar(self) -> None:
        """1 Meskerem 1 is the epoch."""
        assert date_to_iso_days(1, 1, 1) == 3161

    def test_new_year_2016(self) -> None:
        """1 Meskerem 2016 is Gregorian 2023-09-12."""
        assert date_to_iso_days(2016, 1, 1) == gregorian_to_iso_days(
            datetime.date(2023, 9, 12)
        )

    def test_leap_day(self) -> None:
        """Pagume 6, 2015 is Gregorian 2023-09-11."""
        assert date_to_iso_days(2015, 13, 6) == gregorian_to_iso_days(
            datetime.date(2023, 9, 11)
        )

    def test_genna_2016(self) -> None:
        """Tahsas 28, 2016 is Gregorian 2024-01-07."""
        assert date_to_iso_days(2016, 4, 28) == gregorian_to_iso_days(
            datetime.date(2024, 1, 7)
        )

    def test_months_are_thirty_days_apart(self) -> None:
        """The first days of consecutive months are 30 days apart."""
        for month in range(1, 13):
            assert date_to_iso_days(2016, month + 1, 1) - date_to_iso_days(2016, month, 1) == 30

    @pytest.mark.parametrize("year", SAMPLE_YEARS)
    def test_year_length(self, year: int) -> None:
        """The distance between consecutive new years is the year length."""
        assert date_to_iso_days(year + 1, 1, 1) - date_to_iso_days(year, 1, 1) == days_in_year(year)

    def test_negative_years_use_floor_division(self) -> None:
        """Year -1 is a leap year and ends the day before year 0 begins."""
        assert date_to_iso_days(-1, 1, 1) == 2430
        assert date_to_iso_days(-1, 13, 6) == 2795
        assert date_to_iso_days(0, 1, 1) == 2796


class TestDateFromIsoDays:
    """Tests for date_from_iso_days()."""

    def test_epoch(self) -> None:
        """The epoch converts back to 1 Meskerem 1."""
        assert date_from_iso_days(3161) == (1, 1, 1)

    def test_day_before_epoch(self) -> None:
        """The day before the epoch is the last day of year 0."""
        assert date_from_iso_days(3160) == (0, 13, 5)

    def test_new_year_boundary(self) -> None:
        """The leap day and the following new year convert correctly."""
        assert date_from_iso_days(739139) == (2015, 13, 6)
        assert date_from_iso_days(739140) == (2016, 1, 1)

    def test_common_year_boundary(self) -> None:
        """A year ending on Pagume 5 rolls straight over to the next year."""
        last = date_to_iso_days(2016, 13, 5)
        assert date_from_iso_days(last) == (2016, 13, 5)
        assert date_from_iso_days(last + 1) == (2017, 1, 1)

    def test_negative_year_boundary(self) -> None:
        """Boundaries before the epoch convert with floor semantics."""
        assert date_from_iso_days(2430) == (-1, 1, 1)
        assert date_from_iso_days(2429) == (-2, 13, 5)
        assert date_from_iso_days(2795) == (-1, 13, 6)


class TestRoundTrip:
    """date_from_iso_days(date_to_iso_days(y, m, d)) == (y, m, d)."""

    @pytest.mark.parametrize("year", SAMPLE_YEARS)
    def test_every_day_of_sample_years(self, year: int) -> None:
        """Every valid date of a sample year round-trips."""
        for month in range(1, 14):
            for day in range(1, days_in_month(year, month) + 1):
                assert valid_date(year, month, day)
                days = date_to_iso_days(year, month, day)
                assert date_from_iso_days(days) == (year, month, day)

    def test_year_boundaries_across_supported_range(self) -> None:
        """First and last days of every supported year round-trip."""
        for year in range(-9999, 10000):
            if year == 0:
                continue
            last_day = days_in_month(year, 13)
            for month, day in ((1, 1), (12, 30), (13, 1), (13, last_day)):
                days = date_to_iso_days(year, month, day)
                assert date_from_iso_days(days) == (year, month, day)

    def test_consecutive_day_counts_are_consecutive_dates(self) -> None:
        """Walking day by day over several leap cycles never skips a date."""
        start = date_to_iso_days(-10, 1, 1)
        end = date_to_iso_days(10, 1, 1)
        previous = date_from_iso_days(start)
        for days in range(start + 1, end + 1):
            current = date_from_iso_days(days)
            year, month, day = previous
            if day < days_in_month(year, month):
                expected = (year, month, day + 1)
            elif month < 13:
                expected = (year, month + 1, 1)
            else:
                expected = (year + 1, 1, 1)
            assert current == expected
            previous = current


class TestGregorianCrossCheck:
    """Cross-check against the standard-library Gregorian calendar."""

    def test_new_years_day_falls_on_sept_11_or_12(self) -> None:
        """Ethiopic new year is Sept 12 after a leap year, Sept 11 otherwise (1901-2099)."""
        for year in range(1894, 2092):
            days = date_to_iso_days(year, 1, 1)
            gregorian = datetime.date.fromordinal(days - 365)
            expected_day = 12 if (year - 1) % 4 == 3 else 11
            assert (gregorian.month, gregorian.day) == (9, expected_day)
