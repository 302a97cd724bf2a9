"""Tests for day resolution, time-range parsing and tag extraction."""

import datetime

import pytest

from conftest import FIXED_WEEK, clock_at
from weekplan.exception import (
    InvalidDate,
    InvalidDay,
    InvalidTimeFormat,
    InvalidTimeRange,
)
from weekplan.parse import (
    extract_tags,
    is_day_token,
    is_time_range,
    parse_time_range,
    resolve_day,
)
from weekplan.week import DAYS, next_week_key


class TestResolveDay:
    def test_today_uses_clock(self, clock):
        assert resolve_day("today", clock) == (FIXED_WEEK, "wednesday")

    def test_token_is_trimmed_and_lowercased(self, clock):
        assert resolve_day("  Monday ", clock) == (FIXED_WEEK, "monday")
        assert resolve_day("TODAY", clock) == (FIXED_WEEK, "wednesday")

    @pytest.mark.parametrize("day", DAYS)
    def test_plus_prefix_moves_to_next_week(self, clock, day):
        """+day keeps the weekday and moves to the successor week."""
        week, resolved = resolve_day(day, clock)
        next_week, next_resolved = resolve_day("+" + day, clock)

        assert resolved == next_resolved == day
        assert next_week == next_week_key(week)

    def test_weekday_in_the_past_stays_in_current_week(self, clock):
        # the clock is a Wednesday; monday is still this week's monday
        assert resolve_day("monday", clock) == (FIXED_WEEK, "monday")

    def test_plus_day_rolls_into_next_year(self):
        clock = clock_at(2025, 12, 24)
        assert resolve_day("monday", clock) == ("2025-W52", "monday")
        assert resolve_day("+monday", clock) == ("2026-W01", "monday")

    def test_plus_day_from_week_53_rolls_to_week_1(self):
        # 2026-12-31 is in ISO week 2026-W53
        clock = clock_at(2026, 12, 31)
        assert resolve_day("today", clock) == ("2026-W53", "thursday")
        assert resolve_day("+friday", clock) == ("2027-W01", "friday")

    def test_plus_day_from_week_52_skips_week_53(self):
        """Stepping wraps at 52 even in a year with an ISO week 53."""
        clock = clock_at(2026, 12, 21)
        assert resolve_day("+monday", clock) == ("2027-W01", "monday")

    def test_explicit_date(self):
        assert resolve_day("2025-02-10") == ("2025-W07", "monday")

    @pytest.mark.parametrize(
        "token",
        ["2025-02-10", "2024-12-30", "2021-01-03", "2020-12-31", "2026-12-31"],
    )
    def test_explicit_date_matches_iso_calendar(self, token):
        year, week_number, weekday = datetime.date.fromisoformat(token).isocalendar()
        assert resolve_day(token) == (f"{year}-W{week_number:02d}", DAYS[weekday - 1])

    def test_explicit_date_ignores_clock(self):
        assert resolve_day("2024-12-30", clock_at(2030, 6, 1)) == ("2025-W01", "monday")

    @pytest.mark.parametrize("token", ["2025-02-32", "2025-13-01", "2025-02-29"])
    def test_impossible_date(self, token):
        with pytest.raises(InvalidDate) as error:
            resolve_day(token)
        assert token in str(error.value)

    @pytest.mark.parametrize("token", ["funday", "mon", "+today", "2025-2-10", ""])
    def test_unknown_day(self, clock, token):
        with pytest.raises(InvalidDay):
            resolve_day(token, clock)

    def test_non_ascii_date_is_not_a_date(self, clock):
        with pytest.raises(InvalidDay):
            resolve_day("\u0662\u0660\u0662\u0665-\u0660\u0662-\u0661\u0660", clock)

    def test_unknown_day_echoes_input(self, clock):
        with pytest.raises(InvalidDay, match="funday"):
            resolve_day("+funday", clock)


class TestIsDayToken:
    @pytest.mark.parametrize(
        "token", ["today", "Monday", "+sunday", "2025-02-10", "2025-02-32"]
    )
    def test_day_shaped(self, token):
        assert is_day_token(token)

    @pytest.mark.parametrize("token", ["+today", "meeting", "9:00-10:00", "++monday"])
    def test_not_day_shaped(self, token):
        assert not is_day_token(token)


class TestParseTimeRange:
    def test_canonical_range(self):
        assert parse_time_range("09:05-10:00") == ("09:05", "10:00")

    def test_single_digit_hour_is_padded(self):
        assert parse_time_range("9:00-10:00") == ("09:00", "10:00")
        assert parse_time_range("7:30-8:15") == ("07:30", "08:15")

    def test_whitespace_around_parts(self):
        assert parse_time_range(" 9:00 - 10:00 ") == ("09:00", "10:00")

    def test_single_digit_minutes_rejected(self):
        with pytest.raises(InvalidTimeFormat):
            parse_time_range("9:5-10:00")

    def test_out_of_range_values_are_accepted(self):
        assert parse_time_range("25:00-26:00") == ("25:00", "26:00")
        assert parse_time_range("10:99-09:00") == ("10:99", "09:00")

    @pytest.mark.parametrize(
        "token", ["10:00", "9:00-10:00-11:00", "-10:00", "9:00-", ""]
    )
    def test_wrong_shape(self, token):
        with pytest.raises(InvalidTimeRange):
            parse_time_range(token)

    @pytest.mark.parametrize("token", ["9.00-10.00", "123:00-1:00", "ab:cd-10:00"])
    def test_bad_clock(self, token):
        with pytest.raises(InvalidTimeFormat) as error:
            parse_time_range(token)
        assert token in str(error.value)

    def test_only_ascii_digits(self):
        with pytest.raises(InvalidTimeFormat):
            parse_time_range("\u0669:\u0660\u0660-\u0661\u0660:\u0660\u0660")
        assert not is_time_range("\u0669:\u0660\u0660-\u0661\u0660:\u0660\u0660")


class TestIsTimeRange:
    def test_time_range(self):
        assert is_time_range("9:00-10:30")
        assert is_time_range("09:00-10:30")

    def test_not_time_range(self):
        assert not is_time_range("monday")
        assert not is_time_range("9:0-10:30")


class TestExtractTags:
    def test_case_insensitive_dedup(self):
        assert extract_tags("deep work #project #Project", "") == (
            "deep work",
            ["project"],
        )

    def test_explicit_tag_is_lowercased(self):
        assert extract_tags("sync", "Acme") == ("sync", ["acme"])

    def test_explicit_tag_comes_first(self):
        assert extract_tags("#b review #a", "Z") == ("review", ["z", "b", "a"])

    def test_explicit_tag_duplicated_by_hashtag(self):
        assert extract_tags("call #ACME", "acme") == ("call", ["acme"])

    def test_no_tags(self):
        assert extract_tags("  plain text  ") == ("plain text", [])

    def test_internal_whitespace_untouched(self):
        assert extract_tags("a #x b") == ("a  b", ["x"])

    def test_only_word_characters_form_a_tag(self):
        assert extract_tags("ship #v2-release") == ("ship -release", ["v2"])
