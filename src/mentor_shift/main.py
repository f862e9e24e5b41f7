"""
Main entry point for mentor shift scheduling.
"""

import sys
import logging
import argparse

from .config import ConfigLoader, ConfigurationError, DataError, InvalidDateFormatError
from .exporters import JSONExporter, MatrixCSVExporter, SimpleCSVExporter
from .scheduler import ShiftScheduler
from .reporter import ScheduleReporter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mentor-shift",
        description="Assign mentors to daily shifts for a month",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full report for the month in the config file
  mentor-shift config/schedule.yaml

  # Override the month and keep output short
  mentor-shift config/schedule.yaml --year 2024 --month 2 --quiet

  # Export to CSV and JSON
  mentor-shift config/schedule.yaml --export-csv out.csv --export-json out.json
        """,
    )

    parser.add_argument("config", type=str, help="Path to YAML configuration file")
    parser.add_argument("--year", type=int, help="Override planning year")
    parser.add_argument("--month", type=int, help="Override planning month (1-12)")
    parser.add_argument(
        "--pay-period-length", type=int, help="Days in the first pay period"
    )
    parser.add_argument("--export-csv", type=str, help="Export schedule to CSV file")
    parser.add_argument(
        "--matrix",
        action="store_true",
        help="Write the CSV export as a mentor-by-date matrix",
    )
    parser.add_argument(
        "--export-json", type=str, help="Export full schedule document to JSON"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress detailed output (only show calendar and validation)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log every assignment decision"
    )
    return parser


def main():
    """Main entry point for the CLI."""
    args = build_parser().parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        # Load configuration
        print(f"Loading configuration from: {args.config}")
        loader = ConfigLoader(args.config)
        config = loader.load(
            year=args.year,
            month=args.month,
            pay_period_length=args.pay_period_length,
        )

        print("✓ Configuration loaded successfully")
        print(loader.get_summary())
        print()

        # Run scheduler
        print("Generating schedule...")
        result = ShiftScheduler(config).generate()
        print("✓ Schedule generated")
        print()

        # Generate report
        reporter = ScheduleReporter(result, config.deviation_threshold)
        reporter.print_report(args.quiet)

        if args.export_csv:
            exporter_cls = MatrixCSVExporter if args.matrix else SimpleCSVExporter
            exporter_cls(result).export(args.export_csv)

        if args.export_json:
            JSONExporter(result).export(args.export_json)

        sys.exit(0)

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except InvalidDateFormatError as e:
        print(f"Date Format Error: {e}", file=sys.stderr)
        print(
            "\n Tip: Use ISO 8601 dates (YYYY-MM-DD) or MM-DD for yearly seasons.",
            file=sys.stderr,
        )
        sys.exit(1)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        sys.exit(1)

    except DataError as e:
        print(f"Data Error: {e}", file=sys.stderr)
        sys.exit(1)

    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"Unexpected Error: {e}", file=sys.stderr)
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
