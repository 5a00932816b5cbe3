"""
Test suite for explicit course field parsing.

System role: Verification of ParseResult-based coercion
"""

from datetime import datetime, time, timezone

import pytest

from course_catalog.core.coercion import (
    ParseResult,
    parse_max_students,
    parse_price,
    parse_time_of_day,
    parse_timestamp,
)
from course_catalog.core.exceptions import ValidationError


class TestParseResult:
    """ParseResult behaviour."""

    def test_unwrap_success(self) -> None:
        assert ParseResult.success(3).unwrap("x") == 3

    def test_unwrap_failure_raises_validation_error_with_field(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ParseResult.failure("bad").unwrap("price")
        assert exc_info.value.message == "bad"
        assert exc_info.value.details == {"field": "price"}


class TestParsePrice:
    """Test suite for parse_price()."""

    def test_numeric_string(self) -> None:
        result = parse_price("19.99")
        assert result.ok
        assert result.value == pytest.approx(19.99)

    def test_number_passes_through_as_float(self) -> None:
        result = parse_price(20)
        assert result.value == 20.0
        assert isinstance(result.value, float)

    @pytest.mark.parametrize("raw", ["not-a-number", "", "1,5", True, [1]])
    def test_uncoercible_values_fail(self, raw) -> None:
        assert not parse_price(raw).ok

    @pytest.mark.parametrize("raw", ["nan", "inf", -1, "-0.5"])
    def test_non_finite_and_negative_fail(self, raw) -> None:
        assert not parse_price(raw).ok


class TestParseMaxStudents:
    """Test suite for parse_max_students()."""

    @pytest.mark.parametrize("raw,expected", [(30, 30), ("30", 30), (30.0, 30), (" 0 ", 0)])
    def test_valid_counts(self, raw, expected) -> None:
        assert parse_max_students(raw).value == expected

    @pytest.mark.parametrize("raw", ["3.5", 3.5, "many", -2, False])
    def test_invalid_counts(self, raw) -> None:
        assert not parse_max_students(raw).ok


class TestParseTimestamp:
    """Test suite for parse_timestamp()."""

    def test_iso_with_zulu_suffix(self) -> None:
        result = parse_timestamp("2024-03-01T10:00:00Z", "startDate")
        assert result.value == datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)

    def test_json_quoted_string_is_unwrapped(self) -> None:
        result = parse_timestamp('"2024-03-01T10:00:00Z"', "startDate")
        assert result.value == datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)

    def test_naive_date_is_taken_as_utc(self) -> None:
        result = parse_timestamp("2024-03-01", "endDate")
        assert result.value.tzinfo == timezone.utc

    def test_garbage_fails_and_names_field(self) -> None:
        result = parse_timestamp("next tuesday", "endDate")
        assert not result.ok
        assert "endDate" in result.error

    def test_offset_is_converted_to_utc(self) -> None:
        result = parse_timestamp("2024-05-01T08:00:00+02:00", "startDate")

        assert result.value == datetime(2024, 5, 1, 6, 0, tzinfo=timezone.utc)
        assert result.value.utcoffset().total_seconds() == 0


class TestParseTimeOfDay:
    """Test suite for parse_time_of_day()."""

    def test_hours_and_minutes(self) -> None:
        assert parse_time_of_day("09:30", "startTime").value == time(9, 30)

    def test_invalid_time_fails(self) -> None:
        assert not parse_time_of_day("25:99", "startTime").ok

    def test_non_string_fails(self) -> None:
        assert not parse_time_of_day(930, "startTime").ok

    @pytest.mark.parametrize("raw", ["09:30+02:00", "09:30Z", time(9, 30, tzinfo=timezone.utc)])
    def test_offset_is_rejected(self, raw) -> None:
        result = parse_time_of_day(raw, "startTime")

        assert not result.ok
        assert "startTime" in result.error
