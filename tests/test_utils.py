from datetime import datetime, timedelta, timezone

import pytest

from domca.shared.core.exceptions import InvalidArgumentError
from domca.shared.utils.dates import day_range, ensure_utc, month_range, week_range, year_range
from domca.shared.utils.validators import (
    ensure_in_range,
    ensure_not_blank,
    ensure_not_none,
    is_empty_or_whitespace,
)


class TestEnsureUtc:
    def test_naive_is_tagged_without_shift(self):
        assert ensure_utc(datetime(2026, 1, 1, 10, 0)) == datetime(2026, 1, 1, 10, 0, tzinfo=timezone.utc)

    def test_utc_passes_through(self):
        value = datetime(2026, 1, 1, 10, 0, tzinfo=timezone.utc)
        assert ensure_utc(value) is value

    def test_other_zone_is_converted(self):
        minus_five = timezone(timedelta(hours=-5))
        result = ensure_utc(datetime(2026, 1, 1, 22, 0, tzinfo=minus_five))
        assert result.tzinfo is timezone.utc
        assert (result.day, result.hour) == (2, 3)


class TestDateWindows:
    def test_day_range(self):
        start, end = day_range(datetime(2026, 10, 19, 15, 30, tzinfo=timezone.utc))
        assert start == datetime(2026, 10, 19, tzinfo=timezone.utc)
        assert end == datetime(2026, 10, 20, tzinfo=timezone.utc)

    def test_week_starts_on_monday(self):
        # 2026-10-22 is a Thursday
        start, end = week_range(datetime(2026, 10, 22, 9, 0, tzinfo=timezone.utc))
        assert start == datetime(2026, 10, 19, tzinfo=timezone.utc)
        assert end == datetime(2026, 10, 26, tzinfo=timezone.utc)

    def test_week_of_a_monday(self):
        start, _ = week_range(datetime(2026, 10, 19, 0, 0, tzinfo=timezone.utc))
        assert start == datetime(2026, 10, 19, tzinfo=timezone.utc)

    def test_december_rolls_over(self):
        start, end = month_range(12, 2025)
        assert start == datetime(2025, 12, 1, tzinfo=timezone.utc)
        assert end == datetime(2026, 1, 1, tzinfo=timezone.utc)

    def test_year_range(self):
        assert year_range(2026) == (
            datetime(2026, 1, 1, tzinfo=timezone.utc),
            datetime(2027, 1, 1, tzinfo=timezone.utc),
        )


class TestValidators:
    @pytest.mark.parametrize("value", [None, "", "  ", [], {}])
    def test_empty_values(self, value):
        assert is_empty_or_whitespace(value)

    def test_non_empty(self):
        assert not is_empty_or_whitespace("a")
        assert not is_empty_or_whitespace(0)

    def test_ensure_not_blank_returns_value(self):
        assert ensure_not_blank(" a ", "name") == " a "

    def test_ensure_not_blank_names_argument(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            ensure_not_blank("\t", "user_name")
        assert exc_info.value.argument == "user_name"
        assert exc_info.value.details["argument"] == "user_name"

    def test_ensure_not_none(self):
        with pytest.raises(InvalidArgumentError):
            ensure_not_none(None, "record")

    def test_exclusive_maximum(self):
        assert ensure_in_range(9_999, "amount", minimum=1, maximum=10_000, maximum_exclusive=True) == 9_999
        with pytest.raises(InvalidArgumentError):
            ensure_in_range(10_000, "amount", minimum=1, maximum=10_000, maximum_exclusive=True)

    def test_inclusive_maximum(self):
        assert ensure_in_range(12, "month", minimum=1, maximum=12) == 12
        with pytest.raises(InvalidArgumentError):
            ensure_in_range(0, "month", minimum=1, maximum=12)
