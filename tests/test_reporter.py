"""Tests for report tables and console output."""

import pytest

from mentor_shift.reporter import ScheduleReporter
from mentor_shift.scheduler import ShiftScheduler


@pytest.fixture
def result(february_config):
    return ShiftScheduler(february_config).generate()


class TestHoursSummaryFrame:
    def test_columns_and_index(self, result):
        df = ScheduleReporter(result).hours_summary_frame()

        assert list(df.index) == ["Alice", "Bob", "Carol"]
        assert list(df.columns) == [
            "Total Hours",
            "Weekly Target",
            "Monthly Target",
            "Difference",
            "Days Off",
        ]

    def test_targets_and_days_off(self, result):
        df = ScheduleReporter(result).hours_summary_frame()

        assert df.loc["Alice", "Monthly Target"] == pytest.approx(10 * 29 / 7)
        assert df.loc["Alice", "Days Off"] == "14"
        assert df.loc["Bob", "Days Off"] == "None"

    def test_totals_match_mentor_counters(self, result):
        df = ScheduleReporter(result).hours_summary_frame()

        for mentor in result.mentors:
            assert df.loc[mentor.name, "Total Hours"] == pytest.approx(
                mentor.hours_assigned
            )

    def test_reflects_manual_reassignment(self, result):
        before = ScheduleReporter(result).hours_summary_frame()
        hours = result.get_day(5).shifts["a_shift"]

        result.reassign_shift(5, "a_shift", "Carol")
        after = ScheduleReporter(result).hours_summary_frame()

        assert after.loc["Alice", "Total Hours"] == pytest.approx(
            before.loc["Alice", "Total Hours"] - hours
        )
        assert after.loc["Carol", "Total Hours"] == pytest.approx(
            before.loc["Carol", "Total Hours"] + hours
        )

    def test_off_roster_name_has_zero_target(self, result):
        result.reassign_shift(5, "a_shift", "Guest")
        df = ScheduleReporter(result).hours_summary_frame()

        assert df.loc["Guest", "Monthly Target"] == 0
        assert df.loc["Guest", "Total Hours"] == pytest.approx(7)


class TestPayPeriodFrame:
    def test_periods(self, result):
        df = ScheduleReporter(result).pay_period_frame()

        assert list(df.index) == ["Pay 1", "Pay 2"]
        assert df.loc["Pay 1", "Days"] == 15
        assert df.loc["Pay 2", "Days"] == 14
        assert df["Total Hours"].sum() == pytest.approx(result.total_hours)


class TestPrintReport:
    def test_full_report_sections(self, result, capsys):
        ScheduleReporter(result).print_report(quiet=False)
        out = capsys.readouterr().out

        for section in (
            "MENTOR SHIFT SCHEDULE",
            "DAILY SCHEDULE",
            "TIME OFF",
            "PAY PERIODS",
            "HOURS SUMMARY",
            "VALIDATION",
        ):
            assert section in out
        assert "Month: 2024-02" in out
        assert "2024-02-05 Mon (winter)" in out
        assert "  14: Alice" in out

    def test_quiet_report_skips_tables(self, result, capsys):
        ScheduleReporter(result).print_report(quiet=True)
        out = capsys.readouterr().out

        assert "DAILY SCHEDULE" in out
        assert "VALIDATION" in out
        assert "TIME OFF" not in out
        assert "PAY PERIODS" not in out
        assert "HOURS SUMMARY" not in out

    def test_validation_messages_printed(self, result, capsys):
        ScheduleReporter(result).print_report(quiet=True)
        out = capsys.readouterr().out

        for message in result.validation_messages:
            assert message in out
