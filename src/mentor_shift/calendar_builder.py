"""
Month calendar construction with weekday and season classification.
"""

import calendar
from datetime import date
from typing import Iterable, List

from .config import DataError, validate_planning
from .models import WEEKDAY_NAMES, Day, SeasonConfig


class CalendarBuilder:
    """Enumerates the days of one month and tags each with its season."""

    def __init__(
        self,
        year: int,
        month: int,
        seasons: List[SeasonConfig],
        holiday_dates: Iterable[int] = (),
    ):
        # Pay period length is checked by the splitter
        validate_planning(year, month, 1)
        self.year = year
        self.month = month
        self.seasons = seasons
        self.holiday_dates = set(holiday_dates)

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    def season_for(self, check_date: date) -> str:
        """
        Find the first season whose range contains the date.

        Raises:
            DataError: If no season covers the date
        """
        for season in self.seasons:
            if season.date_range.contains(check_date):
                return season.name
        raise DataError(
            f"{check_date.isoformat()} is not covered by any season "
            f"({', '.join(s.name for s in self.seasons) or 'no seasons configured'})"
        )

    def build(self) -> List[Day]:
        """
        Build the ordered list of days for the month.

        Shifts are left empty; the shift catalog fills them in.
        """
        days = []
        for day_of_month in range(1, self.days_in_month + 1):
            current = date(self.year, self.month, day_of_month)
            days.append(
                Day(
                    date=current,
                    weekday=WEEKDAY_NAMES[current.weekday()],
                    season=self.season_for(current),
                    is_holiday=day_of_month in self.holiday_dates,
                )
            )
        return days
