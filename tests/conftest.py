"""Shared fixtures for mentor-shift tests."""

import pytest
from datetime import date

from mentor_shift.models import (
    DateRange,
    HolidayConfig,
    Mentor,
    ScheduleConfig,
    SeasonConfig,
)

WINTER_HOURS = {
    "Sunday": {"a_shift": 9, "b_shift": 9},
    "Monday": {"a_shift": 7, "b_shift": 7, "c_shift": 5},
    "Tuesday": {"a_shift": 6, "b_shift": 6, "c_shift": 4},
    "Wednesday": {"a_shift": 6, "b_shift": 6},
    "Thursday": {"a_shift": 6, "b_shift": 6, "c_shift": 4},
    "Friday": {"a_shift": 8, "b_shift": 8, "c_shift": 4},
    "Saturday": {"a_shift": 11, "b_shift": 11, "c_shift": 4},
}


@pytest.fixture
def winter_season() -> SeasonConfig:
    """Winter shift table covering every supported year."""
    return SeasonConfig(
        name="winter",
        date_range=DateRange(start=date(2020, 1, 1), end=date(2101, 1, 1)),
        shift_hours=WINTER_HOURS,
    )


@pytest.fixture
def single_shift_season() -> SeasonConfig:
    """One 5-hour a_shift on every day of the week."""
    return SeasonConfig(
        name="flat",
        date_range=DateRange(start=date(2020, 1, 1), end=date(2101, 1, 1)),
        shift_hours={
            weekday: {"a_shift": 5}
            for weekday in [
                "Monday",
                "Tuesday",
                "Wednesday",
                "Thursday",
                "Friday",
                "Saturday",
                "Sunday",
            ]
        },
    )


@pytest.fixture
def alice() -> Mentor:
    """Alice prefers Mondays and is off on the 14th."""
    return Mentor(
        name="Alice",
        hours_wanted_per_week=10,
        preferred_weekdays=["Monday"],
        hard_dates={14},
    )


@pytest.fixture
def bob() -> Mentor:
    """Bob never works Sundays."""
    return Mentor(
        name="Bob",
        hours_wanted_per_week=20,
        unavailable_weekdays={"Sunday"},
    )


@pytest.fixture
def carol() -> Mentor:
    """Carol has no constraints."""
    return Mentor(name="Carol", hours_wanted_per_week=15)


@pytest.fixture
def make_config(winter_season):
    """Factory for February 2024 configs with the winter table."""

    def _make(mentors, **overrides) -> ScheduleConfig:
        settings = {
            "year": 2024,
            "month": 2,
            "seasons": [winter_season],
            "mentors": mentors,
            "holidays": HolidayConfig(),
        }
        settings.update(overrides)
        return ScheduleConfig(**settings)

    return _make


@pytest.fixture
def february_config(make_config, alice, bob, carol) -> ScheduleConfig:
    """February 2024 (leap year) with three mentors and no holidays."""
    return make_config([alice, bob, carol])
