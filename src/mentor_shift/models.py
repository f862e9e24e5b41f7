"""
Data models for the mentor shift scheduling system.
"""

import calendar
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Set

WEEKDAY_NAMES = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]

NORMAL_SHIFTS = ("a_shift", "b_shift", "c_shift")
HOLIDAY_SHIFTS = ("holiday_a_shift", "holiday_b_shift")


@dataclass
class DateRange:
    """A half-open date range: start is inclusive, end is exclusive.

    With ``recurring=True`` only month and day are compared, so the range
    repeats every year and may wrap across the new year (e.g. Aug 1 to May 1).
    """

    start: date
    end: date
    recurring: bool = False

    def __post_init__(self):
        if not self.recurring and self.end <= self.start:
            raise ValueError(
                f"End date {self.end} must be after start date {self.start}"
            )

    def contains(self, check_date: date) -> bool:
        """Check if a date falls within this range."""
        if not self.recurring:
            return self.start <= check_date < self.end

        key = (check_date.month, check_date.day)
        start = (self.start.month, self.start.day)
        end = (self.end.month, self.end.day)
        if start < end:
            return start <= key < end
        if start > end:
            return key >= start or key < end
        # Same month-day on both ends covers the whole year
        return True


@dataclass
class SeasonConfig:
    """Shift-hours table that applies within a date range."""

    name: str
    date_range: DateRange
    shift_hours: Dict[str, Dict[str, float]]  # weekday -> shift -> hours


@dataclass
class HolidayConfig:
    """Holiday shift hours and the days of the month that are holidays."""

    shift_hours: Dict[str, float] = field(
        default_factory=lambda: {"holiday_a_shift": 9, "holiday_b_shift": 9}
    )
    dates: List[int] = field(default_factory=list)

    def __post_init__(self):
        self.dates = sorted(set(self.dates))

    def is_holiday(self, day_of_month: int) -> bool:
        return day_of_month in self.dates

    def to_dict(self) -> Dict[str, Any]:
        return {"shift_hours": dict(self.shift_hours), "dates": list(self.dates)}


@dataclass
class Mentor:
    """A mentor with availability constraints and run-scoped hour counters."""

    name: str
    hours_wanted_per_week: float = 0.0
    hard_dates: Set[int] = field(default_factory=set)
    unavailable_weekdays: Set[str] = field(default_factory=set)
    preferred_weekdays: List[str] = field(default_factory=list)
    auto_fill: bool = False
    show_on_calendar: bool = True
    hours_assigned: float = 0.0
    days_left: int = 0

    def __post_init__(self):
        if self.hours_wanted_per_week < 0:
            raise ValueError(
                f"Hours wanted per week for {self.name} cannot be negative, "
                f"got {self.hours_wanted_per_week}"
            )
        for weekday in list(self.unavailable_weekdays) + self.preferred_weekdays:
            if weekday not in WEEKDAY_NAMES:
                raise ValueError(f"Unknown weekday '{weekday}' for {self.name}")

    def is_excluded_on(self, day_of_month: int, weekday: str) -> bool:
        """Check whether a hard date or unavailable weekday rules out a day."""
        return (
            day_of_month in self.hard_dates or weekday in self.unavailable_weekdays
        )

    def prefers(self, weekday: str) -> bool:
        return weekday in self.preferred_weekdays

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "hours_wanted_per_week": self.hours_wanted_per_week,
            "hard_dates": sorted(self.hard_dates),
            "unavailable_weekdays": [
                w for w in WEEKDAY_NAMES if w in self.unavailable_weekdays
            ],
            "preferred_weekdays": list(self.preferred_weekdays),
            "auto_fill": self.auto_fill,
            "show_on_calendar": self.show_on_calendar,
            "hours_assigned": self.hours_assigned,
            "days_left": self.days_left,
        }


@dataclass
class Day:
    """One calendar day with its open shifts and who is on them."""

    date: date
    weekday: str
    season: str
    is_holiday: bool = False
    shifts: Dict[str, float] = field(default_factory=dict)  # shift -> hours
    assignments: Dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def day_of_month(self) -> int:
        return self.date.day

    @property
    def total_hours(self) -> float:
        """Sum of hours over every open shift."""
        return sum(self.shifts.values())

    @property
    def assigned_hours(self) -> float:
        """Sum of hours over filled shifts only."""
        return sum(
            hours
            for shift, hours in self.shifts.items()
            if self.assignments.get(shift) is not None
        )

    def shift_held_by(self, mentor_name: str) -> Optional[str]:
        """Return the shift a mentor holds on this day, if any."""
        for shift, name in self.assignments.items():
            if name == mentor_name:
                return shift
        return None

    def unfilled_shifts(self) -> List[str]:
        return [shift for shift in self.shifts if self.assignments.get(shift) is None]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "weekday": self.weekday,
            "season": self.season,
            "is_holiday": self.is_holiday,
            "shifts": dict(self.shifts),
            "assignments": dict(self.assignments),
            "total_hours": self.total_hours,
            "assigned_hours": self.assigned_hours,
        }


@dataclass
class PayPeriod:
    """A contiguous run of days used for payroll totals."""

    days: List[Day]

    @property
    def total_hours(self) -> float:
        return sum(day.total_hours for day in self.days)

    @property
    def assigned_hours(self) -> float:
        return sum(day.assigned_hours for day in self.days)

    @property
    def start_date(self) -> Optional[date]:
        return self.days[0].date if self.days else None

    @property
    def end_date(self) -> Optional[date]:
        return self.days[-1].date if self.days else None

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self):
        return iter(self.days)


@dataclass
class ScheduleConfig:
    """Complete configuration for one month of mentor scheduling."""

    year: int
    month: int
    seasons: List[SeasonConfig]
    mentors: List[Mentor]
    holidays: HolidayConfig = field(default_factory=HolidayConfig)
    pay_period_length: int = 15
    target_tolerance: float = 0.0
    deviation_threshold: float = 5.0

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def num_weeks_in_month(self) -> float:
        """Fractional number of weeks, used to scale weekly hour targets."""
        return self.days_in_month / 7

    @property
    def mentor_names(self) -> List[str]:
        return [mentor.name for mentor in self.mentors]

    def get_mentor(self, mentor_name: str) -> Mentor:
        """Get a mentor by name."""
        for mentor in self.mentors:
            if mentor.name == mentor_name:
                return mentor
        raise ValueError(f"Mentor '{mentor_name}' not found")


@dataclass
class ScheduleResult:
    """Complete result of one scheduling run."""

    year: int
    month: int
    assigned_days: List[Day]
    pay1: PayPeriod
    pay2: PayPeriod
    holidays: HolidayConfig
    mentors: List[Mentor]
    num_weeks_in_month: float
    pay_period_length: int = 15
    validation_messages: List[str] = field(default_factory=list)

    @property
    def total_hours(self) -> float:
        return sum(day.total_hours for day in self.assigned_days)

    @property
    def assigned_hours(self) -> float:
        return sum(day.assigned_hours for day in self.assigned_days)

    @property
    def unfilled_count(self) -> int:
        return sum(len(day.unfilled_shifts()) for day in self.assigned_days)

    def get_day(self, day_of_month: int) -> Day:
        """Get a day by its day-of-month number."""
        for day in self.assigned_days:
            if day.day_of_month == day_of_month:
                return day
        raise ValueError(
            f"Day {day_of_month} is not in {self.year}-{self.month:02d}"
        )

    def get_mentor(self, mentor_name: str) -> Mentor:
        """Get a mentor from the post-run roster."""
        for mentor in self.mentors:
            if mentor.name == mentor_name:
                return mentor
        raise ValueError(f"Mentor '{mentor_name}' not found in results")

    def pay_period_of(self, day_of_month: int) -> PayPeriod:
        day = self.get_day(day_of_month)
        return self.pay1 if any(d is day for d in self.pay1.days) else self.pay2

    def reassign_shift(
        self, day_of_month: int, shift: str, mentor_name: Optional[str]
    ) -> Optional[str]:
        """
        Replace a single shift assignment after generation.

        Pay periods share Day objects with ``assigned_days``, so the edit is
        visible in both. No other day, no mentor counter and no validation
        message is touched; double booking on the target day is not checked.

        Args:
            day_of_month: Day number within the scheduled month
            shift: Shift identifier open on that day
            mentor_name: New assignee, or None/"" to clear the slot

        Returns:
            The previous assignee (or None)

        Raises:
            ValueError: If the day is outside the month or the shift is not open
        """
        day = self.get_day(day_of_month)
        if shift not in day.shifts:
            raise ValueError(
                f"Shift '{shift}' is not open on {day.date.isoformat()} "
                f"(open: {', '.join(day.shifts) or 'none'})"
            )
        previous = day.assignments.get(shift)
        day.assignments[shift] = mentor_name or None
        return previous

    def hours_by_mentor(self) -> Dict[str, float]:
        """Recount hours per mentor from the calendar itself.

        Unlike ``Mentor.hours_assigned`` this reflects manual edits made with
        ``reassign_shift``.
        """
        totals = {mentor.name: 0.0 for mentor in self.mentors}
        for day in self.assigned_days:
            for shift, name in day.assignments.items():
                if name is not None:
                    totals[name] = totals.get(name, 0.0) + day.shifts[shift]
        return totals

    def time_off_calendar(self) -> Dict[int, List[str]]:
        """Day of month -> names of mentors off that day.

        Only mentors with ``show_on_calendar`` set are listed; the rest are
        still excluded from those days, just not shown.
        """
        calendar_days: Dict[int, List[str]] = {}
        for mentor in sorted(self.mentors, key=lambda m: m.name):
            if not mentor.show_on_calendar:
                continue
            for day in self.assigned_days:
                if day.day_of_month in mentor.hard_dates:
                    calendar_days.setdefault(day.day_of_month, []).append(mentor.name)
        return dict(sorted(calendar_days.items()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "pay_period_length": self.pay_period_length,
            "num_weeks_in_month": self.num_weeks_in_month,
            "assigned_days": [day.to_dict() for day in self.assigned_days],
            "pay1": [day.to_dict() for day in self.pay1.days],
            "pay2": [day.to_dict() for day in self.pay2.days],
            "mentors": [mentor.to_dict() for mentor in self.mentors],
            "holidays": self.holidays.to_dict(),
            "time_off": {
                str(day): names for day, names in self.time_off_calendar().items()
            },
            "validation_messages": list(self.validation_messages),
        }
