"""
Monthly mentor scheduling: calendar, shifts, greedy assignment, pay periods
and validation in one run.
"""

import logging
from typing import List

from .calendar_builder import CalendarBuilder
from .config import validate_planning
from .engine import AssignmentEngine
from .mentors import MentorPool
from .models import Day, HolidayConfig, ScheduleConfig, ScheduleResult
from .pay_periods import PayPeriodSplitter
from .shifts import ShiftCatalog
from .validator import ScheduleValidator

logger = logging.getLogger(__name__)


class ShiftScheduler:
    """Generates a month of mentor assignments from a ScheduleConfig."""

    def __init__(self, config: ScheduleConfig):
        self.config = config
        self.days: List[Day] | None = None
        self.pool: MentorPool | None = None

    def generate(self) -> ScheduleResult:
        """
        Run the scheduler and return results.

        Every fatal check happens before any mentor is assigned. Each call
        starts from fresh mentor copies, so repeated calls give identical
        results.

        Returns:
            ScheduleResult with days, pay periods and validation messages

        Raises:
            ConfigurationError: If year, month or pay period length is invalid
            DataError: If a date has no season or a season table is incomplete
        """
        self._build()
        self._assign()
        return self._extract_results()

    def _build(self) -> None:
        """Build the calendar and open shifts, and copy the roster."""
        cfg = self.config
        validate_planning(cfg.year, cfg.month, cfg.pay_period_length)

        logger.info(
            "Generating schedule for %d-%02d with %d mentors",
            cfg.year,
            cfg.month,
            len(cfg.mentors),
        )

        catalog = ShiftCatalog(cfg.seasons, cfg.holidays)
        builder = CalendarBuilder(cfg.year, cfg.month, cfg.seasons, cfg.holidays.dates)
        self.days = catalog.apply(builder.build())
        self.pool = MentorPool(cfg.mentors, self.days, cfg.num_weeks_in_month)

    def _assign(self) -> None:
        """Run the greedy assignment pass."""
        engine = AssignmentEngine(self.pool, self.config.target_tolerance)
        engine.assign(self.days)

    def _extract_results(self) -> ScheduleResult:
        """Split pay periods, validate, and bundle everything."""
        cfg = self.config
        pay1, pay2 = PayPeriodSplitter(cfg.pay_period_length).split(self.days)

        messages = ScheduleValidator(
            self.days,
            self.pool.mentors,
            cfg.num_weeks_in_month,
            cfg.deviation_threshold,
        ).validate()

        result = ScheduleResult(
            year=cfg.year,
            month=cfg.month,
            assigned_days=self.days,
            pay1=pay1,
            pay2=pay2,
            holidays=HolidayConfig(
                shift_hours=dict(cfg.holidays.shift_hours),
                dates=list(cfg.holidays.dates),
            ),
            mentors=self.pool.mentors,
            num_weeks_in_month=cfg.num_weeks_in_month,
            pay_period_length=cfg.pay_period_length,
            validation_messages=messages,
        )

        logger.info(
            "Schedule generated: %.1f of %.1f hours assigned, %d unfilled shifts",
            result.assigned_hours,
            result.total_hours,
            result.unfilled_count,
        )
        return result
