"""Tests for the greedy assignment engine."""

import pytest

from mentor_shift.calendar_builder import CalendarBuilder
from mentor_shift.engine import AssignmentEngine
from mentor_shift.mentors import MentorPool
from mentor_shift.models import HolidayConfig, Mentor
from mentor_shift.shifts import ShiftCatalog

FEB_2024_WEEKS = 29 / 7


def build_days(season, holiday_dates=()):
    holidays = HolidayConfig(dates=list(holiday_dates))
    catalog = ShiftCatalog([season], holidays)
    return catalog.apply(CalendarBuilder(2024, 2, [season], holidays.dates).build())


@pytest.fixture
def flat_days(single_shift_season):
    return build_days(single_shift_season)


class TestPriorityChain:
    """Selection order: preferred-within-target, then deficit, then name."""

    def test_preferred_weekday_wins_over_larger_deficit(self, flat_days):
        pool = MentorPool(
            [
                Mentor(name="Alice", hours_wanted_per_week=10, preferred_weekdays=["Monday"]),
                Mentor(name="Bob", hours_wanted_per_week=20),
            ],
            flat_days,
            FEB_2024_WEEKS,
        )
        engine = AssignmentEngine(pool)
        monday, tuesday = flat_days[4], flat_days[5]

        assert engine.select(monday, "a_shift", 5).name == "Alice"
        assert engine.select(tuesday, "a_shift", 5).name == "Bob"

    def test_preference_dropped_when_it_would_exceed_target(self, flat_days):
        """Alice's target is about 4.1h, so a 5h shift overshoots it."""
        mentors = [
            Mentor(name="Alice", hours_wanted_per_week=1, preferred_weekdays=["Monday"]),
            Mentor(name="Bob", hours_wanted_per_week=20),
        ]
        monday = flat_days[4]

        strict = AssignmentEngine(MentorPool(mentors, flat_days, FEB_2024_WEEKS))
        assert strict.select(monday, "a_shift", 5).name == "Bob"

        lenient = AssignmentEngine(
            MentorPool(mentors, flat_days, FEB_2024_WEEKS), target_tolerance=1.0
        )
        assert lenient.select(monday, "a_shift", 5).name == "Alice"

    def test_largest_deficit_wins_within_preferred_tier(self, flat_days):
        pool = MentorPool(
            [
                Mentor(name="Alice", hours_wanted_per_week=10, preferred_weekdays=["Monday"]),
                Mentor(name="Erin", hours_wanted_per_week=20, preferred_weekdays=["Monday"]),
                Mentor(name="Zed", hours_wanted_per_week=40),
            ],
            flat_days,
            FEB_2024_WEEKS,
        )
        assert AssignmentEngine(pool).select(flat_days[4], "a_shift", 5).name == "Erin"

    def test_ties_broken_alphabetically(self, flat_days):
        pool = MentorPool(
            [
                Mentor(name="Dana", hours_wanted_per_week=10),
                Mentor(name="Carl", hours_wanted_per_week=10),
            ],
            flat_days,
            FEB_2024_WEEKS,
        )
        assert AssignmentEngine(pool).select(flat_days[0], "a_shift", 5).name == "Carl"

    def test_deficit_shifts_after_assignment(self, flat_days):
        pool = MentorPool(
            [
                Mentor(name="Dana", hours_wanted_per_week=10),
                Mentor(name="Carl", hours_wanted_per_week=10),
            ],
            flat_days,
            FEB_2024_WEEKS,
        )
        pool.record_assignment(pool.get("Carl"), 5)

        assert AssignmentEngine(pool).select(flat_days[1], "a_shift", 5).name == "Dana"

    def test_no_eligible_mentor_returns_none(self, flat_days, alice):
        pool = MentorPool([alice], flat_days, FEB_2024_WEEKS)
        assert AssignmentEngine(pool).select(flat_days[13], "a_shift", 5) is None


class TestAssignPass:
    """Whole-month behavior of the greedy pass."""

    def test_one_eligible_mentor_fills_one_shift_per_day(self, winter_season):
        days = build_days(winter_season)
        pool = MentorPool([Mentor(name="Solo", hours_wanted_per_week=40)], days, FEB_2024_WEEKS)

        AssignmentEngine(pool).assign(days)

        for day in days:
            filled = [s for s, name in day.assignments.items() if name is not None]
            assert filled == ["a_shift"]
            assert len(day.unfilled_shifts()) == len(day.shifts) - 1

    def test_load_balances_toward_targets(self, single_shift_season):
        days = build_days(single_shift_season)
        pool = MentorPool(
            [
                Mentor(name="Alice", hours_wanted_per_week=10),
                Mentor(name="Bob", hours_wanted_per_week=10),
            ],
            days,
            FEB_2024_WEEKS,
        )
        AssignmentEngine(pool).assign(days)

        alice, bob = pool.get("Alice"), pool.get("Bob")
        # 29 five-hour shifts split as evenly as possible, Alice first on ties
        assert alice.hours_assigned == 75
        assert bob.hours_assigned == 70
        assert days[0].assignments["a_shift"] == "Alice"
        assert days[1].assignments["a_shift"] == "Bob"

    def test_record_assignment_updates_counters(self, single_shift_season):
        days = build_days(single_shift_season)
        pool = MentorPool([Mentor(name="Solo", hours_wanted_per_week=5)], days, FEB_2024_WEEKS)

        AssignmentEngine(pool).assign(days)

        solo = pool.get("Solo")
        assert solo.hours_assigned == 29 * 5
        assert solo.days_left == 0

    def test_holiday_days_use_holiday_shifts(self, winter_season, alice, bob):
        days = build_days(winter_season, holiday_dates=[19])
        pool = MentorPool([alice, bob], days, FEB_2024_WEEKS)

        AssignmentEngine(pool).assign(days)

        presidents_day = days[18]
        assert list(presidents_day.shifts) == ["holiday_a_shift", "holiday_b_shift"]
        assert set(presidents_day.assignments.values()) == {"Alice", "Bob"}
