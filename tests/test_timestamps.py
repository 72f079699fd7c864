"""Tests for RFC3339 helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from tasksync.utils.timestamps import (
    format_rfc3339,
    from_millis,
    parse_rfc3339,
    to_utc_naive,
    utcnow,
)


class TestParse:
    def test_parses_z_suffix_as_utc(self) -> None:
        assert parse_rfc3339("2025-01-31T13:45:00Z") == datetime(2025, 1, 31, 13, 45)

    def test_converts_offsets_to_utc(self) -> None:
        assert parse_rfc3339("2025-01-31T13:45:00+02:00") == datetime(2025, 1, 31, 11, 45)

    def test_keeps_milliseconds(self) -> None:
        assert parse_rfc3339("2025-01-31T13:45:00.123Z") == datetime(2025, 1, 31, 13, 45, 0, 123000)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2025-01-01T10:00:00.5Z", datetime(2025, 1, 1, 10, 0, 0, 500000)),
            ("2025-01-01T10:00:00.12Z", datetime(2025, 1, 1, 10, 0, 0, 120000)),
            ("2025-01-01T10:00:00.123456789Z", datetime(2025, 1, 1, 10, 0, 0, 123456)),
            ("2025-01-01T12:00:00.123456789+02:00", datetime(2025, 1, 1, 10, 0, 0, 123456)),
        ],
    )
    def test_any_fraction_length(self, value, expected) -> None:
        assert parse_rfc3339(value) == expected

    @pytest.mark.parametrize("value", ["0001-01-01T00:00:00+01:00", "9999-12-31T23:59:59-01:00"])
    def test_out_of_range_after_utc_conversion_is_absent(self, value) -> None:
        assert parse_rfc3339(value) is None

    @pytest.mark.parametrize("value", [None, "", "   ", "tomorrow", "2025-13-45"])
    def test_unreadable_values_are_absent(self, value) -> None:
        assert parse_rfc3339(value) is None


class TestFormat:
    def test_formats_with_millis_and_z(self) -> None:
        assert format_rfc3339(datetime(2025, 1, 31, 13, 45, 0, 123456)) == "2025-01-31T13:45:00.123Z"

    def test_aware_values_are_converted(self) -> None:
        paris = timezone(timedelta(hours=1))
        assert format_rfc3339(datetime(2025, 1, 31, 14, 0, tzinfo=paris)) == "2025-01-31T13:00:00.000Z"

    def test_none_passes_through(self) -> None:
        assert format_rfc3339(None) is None

    def test_format_then_parse_is_stable_at_millisecond_precision(self) -> None:
        value = from_millis(1_735_725_600_123)
        assert parse_rfc3339(format_rfc3339(value)) == value


class TestClock:
    def test_from_millis_is_naive_utc(self) -> None:
        assert from_millis(1_735_725_600_000) == datetime(2025, 1, 1, 10, 0)

    def test_utcnow_is_truncated_to_milliseconds(self) -> None:
        now = utcnow()
        assert now.tzinfo is None
        assert now.microsecond % 1000 == 0

    def test_to_utc_naive_leaves_naive_values(self) -> None:
        value = datetime(2025, 1, 1, 10, 0)
        assert to_utc_naive(value) is value
