"""
Post-assignment diagnostics.
"""

from typing import Dict, List

from .models import Day, Mentor

SUCCESS = "✓"
WARNING = "⚠"
INFO = "ℹ"


class ScheduleValidator:
    """Inspects a finished calendar and describes what is unmet.

    Read-only: hours and shift counts are tallied from the days themselves,
    so the same validator can be re-run after manual edits.
    """

    def __init__(
        self,
        days: List[Day],
        mentors: List[Mentor],
        num_weeks: float,
        deviation_threshold: float = 5.0,
    ):
        self.days = days
        self.mentors = mentors
        self.num_weeks = num_weeks
        self.deviation_threshold = deviation_threshold

    def validate(self) -> List[str]:
        """Unfilled shifts in day order, then one summary per mentor by name."""
        return self._unfilled_messages() + self._mentor_messages()

    def _unfilled_messages(self) -> List[str]:
        messages = []
        for day in self.days:
            for shift in day.unfilled_shifts():
                messages.append(
                    f"{WARNING} Unfilled shift: {shift} on "
                    f"{day.date.isoformat()} ({day.weekday})"
                )
        return messages

    def _tally(self) -> Dict[str, List[float]]:
        """Mentor name -> [hours, shift count] counted from the calendar."""
        tally = {mentor.name: [0.0, 0] for mentor in self.mentors}
        for day in self.days:
            for shift, name in day.assignments.items():
                if name is None:
                    continue
                entry = tally.setdefault(name, [0.0, 0])
                entry[0] += day.shifts[shift]
                entry[1] += 1
        return tally

    def _mentor_messages(self) -> List[str]:
        messages = []
        tally = self._tally()

        for mentor in sorted(self.mentors, key=lambda m: m.name):
            hours, shift_count = tally[mentor.name]
            target = mentor.hours_wanted_per_week * self.num_weeks
            diff = hours - target

            if abs(diff) <= self.deviation_threshold:
                messages.append(
                    f"{SUCCESS} {mentor.name}: {hours:.1f}h assigned "
                    f"(target {target:.1f}h)"
                )
            else:
                direction = "over" if diff > 0 else "under"
                messages.append(
                    f"{WARNING} {mentor.name}: {abs(diff):.1f}h {direction} target "
                    f"({hours:.1f}h of {target:.1f}h)"
                )

            if shift_count == 0:
                messages.append(
                    f"{INFO} {mentor.name} was not assigned any shifts this month"
                )

        return messages
