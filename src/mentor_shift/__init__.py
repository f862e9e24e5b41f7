"""
Mentor Shift - Monthly mentor shift assignment with a deterministic greedy scheduler.
"""

__version__ = "0.1.0"

from .config import (
    ConfigLoader,
    ConfigurationError,
    DataError,
    InvalidDateFormatError,
)
from .models import (
    DateRange,
    Day,
    HolidayConfig,
    Mentor,
    PayPeriod,
    ScheduleConfig,
    ScheduleResult,
    SeasonConfig,
)
from .calendar_builder import CalendarBuilder
from .shifts import ShiftCatalog
from .mentors import MentorPool
from .engine import AssignmentEngine
from .pay_periods import PayPeriodSplitter
from .validator import ScheduleValidator
from .scheduler import ShiftScheduler
from .reporter import ScheduleReporter

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DataError",
    "InvalidDateFormatError",
    "DateRange",
    "Day",
    "HolidayConfig",
    "Mentor",
    "PayPeriod",
    "ScheduleConfig",
    "ScheduleResult",
    "SeasonConfig",
    "CalendarBuilder",
    "ShiftCatalog",
    "MentorPool",
    "AssignmentEngine",
    "PayPeriodSplitter",
    "ScheduleValidator",
    "ShiftScheduler",
    "ScheduleReporter",
]
