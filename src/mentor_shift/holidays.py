"""
Holiday helpers: default national holidays and holiday date-string parsing.
"""

import calendar
from typing import Dict, List

MONDAY = calendar.MONDAY
THURSDAY = calendar.THURSDAY


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> int:
    """Day of month of the n-th given weekday (0=Mon, 6=Sun)."""
    first_weekday = calendar.weekday(year, month, 1)
    return 1 + (weekday - first_weekday) % 7 + (n - 1) * 7


def last_weekday_of_month(year: int, month: int, weekday: int) -> int:
    """Day of month of the last given weekday (0=Mon, 6=Sun)."""
    last_day = calendar.monthrange(year, month)[1]
    last_weekday = calendar.weekday(year, month, last_day)
    return last_day - (last_weekday - weekday) % 7


def national_holidays(year: int) -> Dict[int, List[int]]:
    """
    Compute the observed holiday days for every month of a year.

    Fixed dates (New Year, Juneteenth, Independence Day, the winter break)
    are combined with the floating Monday/Thursday holidays.

    Returns:
        Mapping of month (1-12) to a sorted list of day-of-month numbers
    """
    holidays = {
        1: [1, nth_weekday_of_month(year, 1, MONDAY, 3)],  # MLK Day
        2: [nth_weekday_of_month(year, 2, MONDAY, 3)],  # Presidents' Day
        3: [],
        4: [],
        5: [last_weekday_of_month(year, 5, MONDAY)],  # Memorial Day
        6: [19],
        7: [4, 24],
        8: [],
        9: [nth_weekday_of_month(year, 9, MONDAY, 1)],  # Labor Day
        10: [],
        11: [nth_weekday_of_month(year, 11, THURSDAY, 4)],  # Thanksgiving
        12: [24, 25, 31],
    }
    return {month: sorted(days) for month, days in holidays.items()}


def parse_holiday_dates(text: str) -> List[int]:
    """
    Parse a holiday string such as ``"1, 4, 24-26"`` into day numbers.

    Ranges are inclusive. Blank parts, non-numeric parts and reversed ranges
    are skipped.

    Returns:
        Sorted list of unique day-of-month numbers
    """
    days = set()

    for part in text.split(","):
        part = part.strip()
        if not part:
            continue

        if "-" in part:
            start_text, _, end_text = part.partition("-")
            try:
                start, end = int(start_text.strip()), int(end_text.strip())
            except ValueError:
                continue
            if start <= end:
                days.update(range(start, end + 1))
        else:
            try:
                days.add(int(part))
            except ValueError:
                continue

    return sorted(days)


def format_holiday_dates(days: List[int]) -> str:
    """Format day numbers back into the comma-separated form."""
    return ",".join(str(day) for day in sorted(set(days)))
