"""
Export strategies for schedule data.

This module implements the Strategy Pattern for exporting schedule results
to various formats. Each exporter encapsulates a specific output format.
"""

import csv
import json
from abc import ABC, abstractmethod
from datetime import date

from .models import ScheduleResult
from .shifts import shift_label


class ExportStrategy(ABC):
    """Abstract base class for schedule export strategies.

    Subclasses implement specific export formats (CSV, JSON).
    Common helper methods for data transformation are provided here.
    """

    def __init__(self, result: ScheduleResult):
        """Initialize the export strategy.

        Args:
            result: The schedule result to export
        """
        self.result = result

    @abstractmethod
    def export(self, filepath: str) -> None:
        """Export schedule to the specified file.

        Args:
            filepath: Path to the output file
        """
        pass

    def _get_date_range(self) -> list[date]:
        """Get ordered list of all dates in the scheduled month."""
        return [day.date for day in self.result.assigned_days]

    def _build_mentor_assignment_map(self) -> dict[str, dict[date, str]]:
        """Build lookup map from mentor name to {date: shift}.

        Every mentor on the roster gets an entry, even with no shifts.
        """
        assignment_map: dict[str, dict[date, str]] = {
            mentor.name: {} for mentor in self.result.mentors
        }
        for day in self.result.assigned_days:
            for shift, name in day.assignments.items():
                if name is not None:
                    assignment_map.setdefault(name, {})[day.date] = shift
        return assignment_map


class SimpleCSVExporter(ExportStrategy):
    """Exports schedule as a flat CSV.

    Output format: Date, Day_of_Week, Shift, Hours, Mentor
    One row per open shift per day; unfilled shifts have an empty Mentor.
    """

    FIELDNAMES = ["Date", "Day_of_Week", "Shift", "Hours", "Mentor"]

    def export(self, filepath: str) -> None:
        """Export schedule to CSV file in simple format.

        Args:
            filepath: Path to the output CSV file
        """
        rows: list[dict[str, str]] = []

        for day in self.result.assigned_days:
            for shift, hours in day.shifts.items():
                rows.append(
                    {
                        "Date": day.date.isoformat(),
                        "Day_of_Week": day.weekday,
                        "Shift": shift,
                        "Hours": f"{hours:g}",
                        "Mentor": day.assignments.get(shift) or "",
                    }
                )

        with open(filepath, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=self.FIELDNAMES)
            writer.writeheader()
            writer.writerows(rows)

        print(f"\n✓ Schedule exported to {filepath}")


class MatrixCSVExporter(ExportStrategy):
    """Exports schedule as a mentor-by-date matrix.

    Output format:
    - First column: Mentor name
    - Subsequent columns: One per date, holding the shift label (A, B, HA...)
    - Mentors sorted alphabetically
    - Hours row at the bottom with each date's assigned/total hours
    """

    def export(self, filepath: str) -> None:
        """Export schedule to CSV file in matrix format.

        Args:
            filepath: Path to the output CSV file
        """
        dates = self._get_date_range()
        assignment_map = self._build_mentor_assignment_map()

        rows: list[list[str]] = [self._build_header_row(dates)]

        for name in sorted(assignment_map):
            mentor_dates = assignment_map[name]
            row = [name]
            for d in dates:
                shift = mentor_dates.get(d)
                row.append(shift_label(shift) if shift else "")
            rows.append(row)

        rows.append(self._build_hours_row())

        with open(filepath, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerows(rows)

        print(f"\n✓ Schedule exported to {filepath} (matrix format)")

    def _build_header_row(self, dates: list[date]) -> list[str]:
        """Build the header row with Mentor column and date columns."""
        header = ["Mentor"]
        for d in dates:
            header.append(f"{d.strftime('%Y-%m-%d')} {d.strftime('%a')}")
        return header

    def _build_hours_row(self) -> list[str]:
        """Build the HOURS row as assigned/total per date."""
        return ["HOURS"] + [
            f"{day.assigned_hours:g}/{day.total_hours:g}"
            for day in self.result.assigned_days
        ]


class JSONExporter(ExportStrategy):
    """Exports the full schedule document: days, pay periods, roster, messages."""

    def __init__(self, result: ScheduleResult, indent: int = 2):
        super().__init__(result)
        self.indent = indent

    def export(self, filepath: str) -> None:
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.result.to_dict(), f, indent=self.indent, ensure_ascii=False)

        print(f"\n✓ Schedule exported to {filepath} (JSON)")
