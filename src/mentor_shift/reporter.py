"""
Reporting and output formatting for mentor schedules.
"""

import pandas as pd

from .holidays import format_holiday_dates
from .models import ScheduleResult
from .shifts import shift_label


class ScheduleReporter:
    """Formats and displays scheduling results."""

    def __init__(self, result: ScheduleResult, deviation_threshold: float = 5.0):
        self.result = result
        self.deviation_threshold = deviation_threshold

    def print_report(self, quiet: bool) -> None:
        """Print complete scheduling report."""
        self._print_header()
        self._print_daily_schedule()

        if not quiet:
            self._print_time_off()
            self._print_pay_periods()
            self._print_hours_summary()

        self._print_validation_messages()

    def _print_title(self, title: str) -> None:
        print("=" * 80)
        print(title)
        print("=" * 80)

    def _print_header(self) -> None:
        """Print report header."""
        self._print_title("MENTOR SHIFT SCHEDULE")

        result = self.result
        print(f"\nMonth: {result.year}-{result.month:02d}")
        print(f"Weeks in Month: {result.num_weeks_in_month:.2f}")
        print(
            f"Holidays: {format_holiday_dates(result.holidays.dates) or 'None'}"
        )
        print(
            f"Hours Assigned: {result.assigned_hours:.1f} of {result.total_hours:.1f}"
        )
        print(f"Unfilled Shifts: {result.unfilled_count}")
        print()

    def _print_daily_schedule(self) -> None:
        """Print day-by-day schedule."""
        self._print_title("DAILY SCHEDULE")

        for day in self.result.assigned_days:
            slots = ", ".join(
                f"{shift_label(shift)}={name or '-'}"
                for shift, name in day.assignments.items()
            )
            marker = " [holiday]" if day.is_holiday else ""
            print(
                f"{day.date.strftime('%Y-%m-%d')} {day.weekday[:3]} "
                f"({day.season}){marker}: {slots:50s} "
                f"[{day.assigned_hours:g}/{day.total_hours:g}h]"
            )
        print()

    def _print_time_off(self) -> None:
        """Print who is off on each day, for mentors shown on the calendar."""
        self._print_title("TIME OFF")

        time_off = self.result.time_off_calendar()
        if not time_off:
            print("\nNo time off this month")
        for day_of_month, names in time_off.items():
            print(f"  {day_of_month:2d}: {', '.join(names)}")
        print()

    def pay_period_frame(self) -> pd.DataFrame:
        """Totals per pay period."""
        data = []
        for label, period in (("Pay 1", self.result.pay1), ("Pay 2", self.result.pay2)):
            data.append(
                {
                    "Period": label,
                    "Start": period.start_date,
                    "End": period.end_date,
                    "Days": len(period),
                    "Total Hours": period.total_hours,
                    "Assigned Hours": period.assigned_hours,
                }
            )
        return pd.DataFrame(data).set_index("Period")

    def hours_summary_frame(self) -> pd.DataFrame:
        """
        Per-mentor hours against the monthly target.

        Hours are recounted from the calendar, so manual edits show up here.
        """
        hours = self.result.hours_by_mentor()
        data = []

        for name in sorted(hours):
            try:
                mentor = self.result.get_mentor(name)
            except ValueError:
                mentor = None

            weekly = mentor.hours_wanted_per_week if mentor else 0.0
            target = weekly * self.result.num_weeks_in_month
            days_off = sorted(mentor.hard_dates) if mentor else []

            data.append(
                {
                    "Mentor": name,
                    "Total Hours": hours[name],
                    "Weekly Target": weekly,
                    "Monthly Target": target,
                    "Difference": hours[name] - target,
                    "Days Off": ", ".join(str(d) for d in days_off) or "None",
                }
            )

        columns = [
            "Mentor",
            "Total Hours",
            "Weekly Target",
            "Monthly Target",
            "Difference",
            "Days Off",
        ]
        return pd.DataFrame(data, columns=columns).set_index("Mentor")

    def _print_pay_periods(self) -> None:
        self._print_title("PAY PERIODS")

        pd.options.display.float_format = "{:.1f}".format
        print(self.pay_period_frame().to_string())
        print()

    def _print_hours_summary(self) -> None:
        """Print mentor hours table, flagging large deviations."""
        self._print_title("HOURS SUMMARY")

        df = self.hours_summary_frame()
        df["Flag"] = [
            "!" if abs(diff) > self.deviation_threshold else ""
            for diff in df["Difference"]
        ]

        pd.options.display.float_format = "{:.1f}".format
        print(df.to_string())
        print()

    def _print_validation_messages(self) -> None:
        self._print_title("VALIDATION")

        if not self.result.validation_messages:
            print("\n✓ Nothing to report")
        for message in self.result.validation_messages:
            print(f"  {message}")
        print()
