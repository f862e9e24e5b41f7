"""Tests for pay period splitting."""

import pytest

from mentor_shift.calendar_builder import CalendarBuilder
from mentor_shift.config import ConfigurationError
from mentor_shift.models import HolidayConfig
from mentor_shift.pay_periods import PayPeriodSplitter
from mentor_shift.shifts import ShiftCatalog


@pytest.fixture
def days(winter_season):
    catalog = ShiftCatalog([winter_season], HolidayConfig())
    return catalog.apply(CalendarBuilder(2024, 2, [winter_season]).build())


class TestPayPeriodSplitter:
    def test_default_length_is_fifteen(self, days):
        pay1, pay2 = PayPeriodSplitter().split(days)

        assert len(pay1) == 15
        assert len(pay2) == 14
        assert pay1.end_date.day == 15
        assert pay2.start_date.day == 16

    @pytest.mark.parametrize("length", [1, 10, 15, 28, 29, 31, 45])
    def test_concatenation_reproduces_month(self, days, length):
        pay1, pay2 = PayPeriodSplitter(length).split(days)

        assert pay1.days + pay2.days == days
        assert all(a is b for a, b in zip(pay1.days + pay2.days, days))

    @pytest.mark.parametrize("length", [29, 31])
    def test_length_covering_month_leaves_pay2_empty(self, days, length):
        pay1, pay2 = PayPeriodSplitter(length).split(days)

        assert len(pay1) == 29
        assert len(pay2) == 0
        assert pay2.total_hours == 0

    def test_totals_sum_member_days(self, days):
        pay1, pay2 = PayPeriodSplitter(15).split(days)

        assert pay1.total_hours == pytest.approx(sum(d.total_hours for d in days[:15]))
        assert pay1.total_hours + pay2.total_hours == pytest.approx(
            sum(d.total_hours for d in days)
        )
        assert pay1.assigned_hours == 0

    @pytest.mark.parametrize("length", [0, -3, True])
    def test_non_positive_length_raises(self, length):
        with pytest.raises(ConfigurationError, match="positive integer"):
            PayPeriodSplitter(length)
