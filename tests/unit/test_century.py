"""
Unit tests for century resolution of two-digit years.
"""

from datetime import date

import pytest

from pnrkoll.swedish.personnummer import (
    CENTENARIAN_DAYS,
    ErrorKind,
    Separator,
    century_candidates,
    resolve_birth_date,
    resolve_century,
    validate_personnummer,
)


class TestCenturyCandidates:
    """Tests for candidate date construction."""

    def test_three_centuries(self):
        assert century_candidates(81, 12, 18) == {
            1800: date(1881, 12, 18),
            1900: date(1900 + 81, 12, 18),
            2000: date(2081, 12, 18),
        }

    def test_leap_day_only_in_2000(self):
        """1800 and 1900 were not leap years."""
        assert century_candidates(0, 2, 29) == {2000: date(2000, 2, 29)}

    def test_impossible_date(self):
        assert century_candidates(1, 2, 29) == {}
        assert century_candidates(81, 13, 1) == {}


class TestHyphenResolution:
    """Without '+' the most recent date not after today wins."""

    def test_past_date_this_century(self, today):
        result = validate_personnummer("250301-1237", today=today)
        assert result.birth_date == date(2025, 3, 1)

    def test_tomorrow_goes_back_a_century(self, today):
        result = validate_personnummer("250302-1236", today=today)
        assert result.birth_date == date(1925, 3, 2)
        assert result.normalized == "19250302-1236"

    def test_no_separator_same_as_hyphen(self, today):
        result = validate_personnummer("2503011237", today=today)
        assert result.birth_date == date(2025, 3, 1)
        assert result.normalized == "20250301-1237"

    def test_leap_day_2000(self, today):
        result = validate_personnummer("000229-1235", today=today)
        assert result.is_valid
        assert result.birth_date == date(2000, 2, 29)

    def test_all_candidates_in_future_falls_back_to_1900s(self):
        result = validate_personnummer("811218-9876", today=date(1850, 1, 1))
        assert result.birth_date == date(1981, 12, 18)

    def test_result_depends_on_today(self):
        earlier = validate_personnummer("250301-1237", today=date(2025, 2, 28))
        later = validate_personnummer("250301-1237", today=date(2025, 3, 1))
        assert earlier.birth_date == date(1925, 3, 1)
        assert later.birth_date == date(2025, 3, 1)


class TestPlusResolution:
    """With '+' the most recent date at least 100 years back wins."""

    def test_centenarian(self, today):
        result = validate_personnummer("811218+9876", today=today)
        assert result.birth_date == date(1881, 12, 18)
        assert result.normalized == "18811218+9876"

    def test_exactly_100_years(self, today):
        """1925-03-01 to 2025-03-01 is 36525 days, which qualifies."""
        assert (today - date(1925, 3, 1)).days == CENTENARIAN_DAYS
        result = validate_personnummer("250301+1237", today=today)
        assert result.birth_date == date(1925, 3, 1)

    def test_one_day_short_of_100_years(self, today):
        result = validate_personnummer("250302+1236", today=today)
        assert result.birth_date == date(1825, 3, 2)

    def test_no_candidate_old_enough_falls_back_to_1900s(self):
        result = validate_personnummer("811218+9876", today=date(1890, 1, 1))
        assert result.is_valid
        assert result.birth_date == date(1981, 12, 18)
        assert result.normalized == "19811218+9876"

    def test_leap_day_without_1900s_fallback(self, today):
        """Only 2000-02-29 exists and it is not 100 years back."""
        result = validate_personnummer("000229+1235", today=today)
        assert not result.is_valid
        assert result.error_kind is ErrorKind.DATE


class TestResolveBirthDate:
    """Tests for the fragment-to-date step."""

    def test_full_year_is_final(self, today):
        assert resolve_birth_date("20300101", Separator.PLUS, today) == date(2030, 1, 1)

    @pytest.mark.parametrize("fragment", ["19990230", "19991301", "00000101", "010229"])
    def test_invalid_fragments(self, today, fragment):
        assert resolve_birth_date(fragment, Separator.NONE, today) is None

    def test_wrong_length(self, today):
        assert resolve_birth_date("8112", Separator.NONE, today) is None

    def test_resolve_century_prefers_latest(self, today):
        candidates = century_candidates(10, 1, 1)
        assert resolve_century(candidates, Separator.HYPHEN, today) == date(2010, 1, 1)
        assert resolve_century(candidates, Separator.PLUS, today) == date(1910, 1, 1)

    def test_resolve_century_missing_fallback(self, today):
        assert resolve_century({}, Separator.NONE, today) is None
