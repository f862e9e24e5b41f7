"""
Greedy shift assignment.

One deterministic pass over the month: days in calendar order, shifts in
catalog order, at most one mentor per shift. There is no search or
backtracking, so the same inputs always produce the same calendar.
"""

import logging
from typing import List, Optional

from .mentors import MentorPool
from .models import Day, Mentor

logger = logging.getLogger(__name__)


class AssignmentEngine:
    """Fills open shifts from a MentorPool using a fixed priority chain."""

    def __init__(self, pool: MentorPool, target_tolerance: float = 0.0):
        """
        Args:
            pool: Run-scoped mentors; their counters are updated in place
            target_tolerance: Hours a preferred mentor may exceed their
                monthly target by and still get the preference boost
        """
        self.pool = pool
        self.target_tolerance = target_tolerance

    def assign(self, days: List[Day]) -> List[Day]:
        """
        Assign mentors to every open shift of every day.

        Shifts with no eligible mentor stay unassigned (None).

        Returns:
            The same day list, populated
        """
        for day in days:
            for shift, hours in day.shifts.items():
                mentor = self.select(day, shift, hours)
                if mentor is None:
                    logger.info(
                        "No eligible mentor for %s on %s", shift, day.date.isoformat()
                    )
                    continue

                day.assignments[shift] = mentor.name
                self.pool.record_assignment(mentor, hours)
                logger.debug(
                    "%s %s -> %s (%.1fh, total %.1fh)",
                    day.date.isoformat(),
                    shift,
                    mentor.name,
                    hours,
                    mentor.hours_assigned,
                )

        return days

    def select(self, day: Day, shift: str, hours: float) -> Optional[Mentor]:
        """
        Pick at most one mentor for a shift.

        Priority:
            1. Mentors who prefer this weekday and stay within their monthly
               target (plus tolerance) after taking the shift
            2. Otherwise every eligible mentor
        Within the chosen tier the largest remaining deficit wins, then the
        alphabetically first name.
        """
        candidates = self.pool.eligible(day, shift)
        if not candidates:
            return None

        preferred = [
            mentor
            for mentor in candidates
            if mentor.prefers(day.weekday) and self._fits_target(mentor, hours)
        ]

        return min(preferred or candidates, key=self._rank)

    def _fits_target(self, mentor: Mentor, hours: float) -> bool:
        projected = mentor.hours_assigned + hours
        return projected <= self.pool.monthly_target(mentor) + self.target_tolerance

    def _rank(self, mentor: Mentor):
        return (-self.pool.deficit(mentor), mentor.name)
