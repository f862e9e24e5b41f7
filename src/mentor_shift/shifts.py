"""
Shift catalog: which shifts are open on a given day, and for how many hours.
"""

from typing import Dict, List

from .config import DataError
from .models import (
    HOLIDAY_SHIFTS,
    NORMAL_SHIFTS,
    WEEKDAY_NAMES,
    Day,
    HolidayConfig,
    SeasonConfig,
)


def shift_label(shift: str) -> str:
    """Short calendar label: a_shift -> A, holiday_b_shift -> HB."""
    label = shift.replace("_shift", "").upper()
    return label.replace("HOLIDAY_", "H")


class ShiftCatalog:
    """Resolves the open shifts of a day from season tables and holidays."""

    def __init__(self, seasons: List[SeasonConfig], holidays: HolidayConfig):
        """
        Args:
            seasons: Season shift-hour tables
            holidays: Holiday shift hours and dates

        Raises:
            DataError: If a table misses a weekday, names a shift other than
                a/b/c
                or has negative hours
        """
        self.holidays = holidays
        self._tables: Dict[str, Dict[str, Dict[str, float]]] = {}

        for season in seasons:
            self._check_table(season)
            self._tables[season.name] = season.shift_hours

        for shift, hours in holidays.shift_hours.items():
            if shift not in HOLIDAY_SHIFTS:
                raise DataError(f"Unknown holiday shift '{shift}'")
            if hours < 0:
                raise DataError(f"Holiday shift {shift} has negative hours: {hours}")

    def _check_table(self, season: SeasonConfig) -> None:
        missing = [w for w in WEEKDAY_NAMES if w not in season.shift_hours]
        if missing:
            raise DataError(
                f"Season '{season.name}' has no shift hours for: {', '.join(missing)}"
            )

        for weekday, hours in season.shift_hours.items():
            for shift, value in hours.items():
                if shift not in NORMAL_SHIFTS:
                    raise DataError(
                        f"Season '{season.name}' {weekday} has unknown shift '{shift}'"
                    )
                if value < 0:
                    raise DataError(
                        f"Season '{season.name}' {weekday} {shift} has negative "
                        f"hours: {value}"
                    )

    def open_shifts(self, day: Day) -> Dict[str, float]:
        """
        Return the open shifts of a day in canonical order.

        Holiday shifts replace the normal a/b/c shifts entirely.
        """
        if day.is_holiday:
            return {
                shift: self.holidays.shift_hours[shift]
                for shift in HOLIDAY_SHIFTS
                if shift in self.holidays.shift_hours
            }

        if day.season not in self._tables:
            raise DataError(f"Unknown season '{day.season}' on {day.date.isoformat()}")

        weekday_hours = self._tables[day.season][day.weekday]
        return {
            shift: weekday_hours[shift]
            for shift in NORMAL_SHIFTS
            if shift in weekday_hours
        }

    def apply(self, days: List[Day]) -> List[Day]:
        """Fill in the open shifts of each day and mark every slot unassigned."""
        for day in days:
            day.shifts = self.open_shifts(day)
            day.assignments = {shift: None for shift in day.shifts}
        return days
