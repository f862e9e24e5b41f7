"""
Run-scoped mentor roster with eligibility checks and hour accounting.
"""

from dataclasses import replace
from typing import Dict, List

from .models import Day, Mentor


class MentorPool:
    """Holds private copies of the roster for a single scheduling run.

    The caller's Mentor records are never mutated: counters are reset on the
    copies made here.
    """

    def __init__(self, mentors: List[Mentor], days: List[Day], num_weeks: float):
        self.num_weeks = num_weeks
        self.mentors: List[Mentor] = []

        for mentor in sorted(mentors, key=lambda m: m.name):
            copy = replace(
                mentor,
                hard_dates=set(mentor.hard_dates),
                unavailable_weekdays=set(mentor.unavailable_weekdays),
                preferred_weekdays=list(mentor.preferred_weekdays),
                hours_assigned=0.0,
                days_left=sum(
                    1
                    for day in days
                    if not mentor.is_excluded_on(day.day_of_month, day.weekday)
                ),
            )
            self.mentors.append(copy)

        self._by_name: Dict[str, Mentor] = {m.name: m for m in self.mentors}

    def __iter__(self):
        return iter(self.mentors)

    def get(self, name: str) -> Mentor:
        return self._by_name[name]

    def monthly_target(self, mentor: Mentor) -> float:
        """Hours wanted per week scaled to the month."""
        return mentor.hours_wanted_per_week * self.num_weeks

    def deficit(self, mentor: Mentor) -> float:
        """Hours still missing to reach the monthly target (negative if over)."""
        return self.monthly_target(mentor) - mentor.hours_assigned

    def eligible(self, day: Day, shift: str) -> List[Mentor]:
        """
        Mentors who may take a shift on a day.

        Excludes hard dates, unavailable weekdays, and anyone already holding
        a different shift that day.
        """
        return [
            mentor
            for mentor in self.mentors
            if not mentor.is_excluded_on(day.day_of_month, day.weekday)
            and day.shift_held_by(mentor.name) in (None, shift)
        ]

    def record_assignment(self, mentor: Mentor, hours: float) -> None:
        mentor.hours_assigned += hours
        mentor.days_left -= 1
