"""
Configuration loader for parsing YAML mentor scheduling configuration.
"""

import calendar
import re
import yaml
from pathlib import Path
from typing import Dict, Any, List
from datetime import date, datetime

from .holidays import format_holiday_dates, national_holidays, parse_holiday_dates
from .models import (
    HOLIDAY_SHIFTS,
    NORMAL_SHIFTS,
    WEEKDAY_NAMES,
    DateRange,
    HolidayConfig,
    Mentor,
    ScheduleConfig,
    SeasonConfig,
)


class ConfigurationError(Exception):
    """Custom exception for configuration errors."""

    pass


class InvalidDateFormatError(ConfigurationError):
    """Raised when a season bound is neither an ISO date nor MM-DD."""

    pass


class DataError(Exception):
    """Raised when configuration data would silently mis-schedule a month."""

    pass


MIN_YEAR = 2020
MAX_YEAR = 2100

# Placeholder leap year so that recurring bounds may use Feb 29
RECURRING_YEAR = 2000

_MONTH_DAY = re.compile(r"^(\d{1,2})-(\d{1,2})$")

DEFAULT_HOLIDAY_SHIFT_HOURS = {"holiday_a_shift": 9.0, "holiday_b_shift": 9.0}

# Built-in tables, used when a config file has no seasons section
DEFAULT_SEASONAL_SHIFT_HOURS = {
    "summer": {
        "dates": ("05-01", "08-01"),
        "shift_hours": {
            "Sunday": {"a_shift": 10, "b_shift": 10},
            "Monday": {"a_shift": 8, "b_shift": 8, "c_shift": 5},
            "Tuesday": {"a_shift": 7, "b_shift": 7, "c_shift": 4},
            "Wednesday": {"a_shift": 7, "b_shift": 7},
            "Thursday": {"a_shift": 7, "b_shift": 7, "c_shift": 4},
            "Friday": {"a_shift": 8, "b_shift": 8, "c_shift": 4},
            "Saturday": {"a_shift": 11, "b_shift": 11, "c_shift": 4},
        },
    },
    "winter": {
        "dates": ("08-01", "05-01"),
        "shift_hours": {
            "Sunday": {"a_shift": 9, "b_shift": 9},
            "Monday": {"a_shift": 7, "b_shift": 7, "c_shift": 5},
            "Tuesday": {"a_shift": 6, "b_shift": 6, "c_shift": 4},
            "Wednesday": {"a_shift": 6, "b_shift": 6},
            "Thursday": {"a_shift": 6, "b_shift": 6, "c_shift": 4},
            "Friday": {"a_shift": 8, "b_shift": 8, "c_shift": 4},
            "Saturday": {"a_shift": 11, "b_shift": 11, "c_shift": 4},
        },
    },
}


def default_seasons() -> List[SeasonConfig]:
    """Build fresh SeasonConfig objects from the built-in tables."""
    seasons = []
    for name, data in DEFAULT_SEASONAL_SHIFT_HOURS.items():
        start, end = (
            date(RECURRING_YEAR, *map(int, bound.split("-"))) for bound in data["dates"]
        )
        seasons.append(
            SeasonConfig(
                name=name,
                date_range=DateRange(start=start, end=end, recurring=True),
                shift_hours={
                    weekday: {shift: float(h) for shift, h in hours.items()}
                    for weekday, hours in data["shift_hours"].items()
                },
            )
        )
    return seasons


def _is_int(value: Any) -> bool:
    # YAML reads yes/no/true as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def validate_planning(year: int, month: int, pay_period_length: int) -> None:
    """
    Check the planning period before any day is built.

    Raises:
        ConfigurationError: If year, month or pay period length is out of range
    """
    if not _is_int(year) or not MIN_YEAR <= year <= MAX_YEAR:
        raise ConfigurationError(
            f"Year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )
    if not _is_int(month) or not 1 <= month <= 12:
        raise ConfigurationError(f"Month must be between 1 and 12, got {month}")
    if not _is_int(pay_period_length) or pay_period_length < 1:
        raise ConfigurationError(
            f"Pay period length must be a positive integer, got {pay_period_length}"
        )


def normalize_weekday(name: str) -> str:
    """Map a case-insensitive weekday name to its canonical title-case form."""
    canonical = str(name).strip().title()
    if canonical not in WEEKDAY_NAMES:
        raise ConfigurationError(
            f"Invalid day name: '{name}'. Valid names: {', '.join(WEEKDAY_NAMES)}"
        )
    return canonical


class ConfigLoader:
    """Loads and validates mentor scheduling configuration from YAML files."""

    # Legacy field names accepted for each canonical mentor field
    MENTOR_FIELD_ALIASES = {
        "hours_wanted_per_week": ("hours_wanted_per_week", "hours_wanted"),
        "unavailable_weekdays": ("unavailable_weekdays", "weekdays"),
        "preferred_weekdays": ("preferred_weekdays", "preferred_weekday"),
        "hard_dates": ("hard_dates", "unavailable_dates"),
        "auto_fill": ("auto_fill", "auto_fill_calendar"),
    }

    def __init__(self, config_path: str | Path):
        """
        Initialize the ConfigLoader with a configuration file path.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        self.config_path = Path(config_path)

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        self._raw_config: Dict[str, Any] | None = None
        self._config: ScheduleConfig | None = None
        self._overrides: Dict[str, Any] = {}

    def load(self, **planning_overrides: Any) -> ScheduleConfig:
        """
        Load and parse the configuration file.

        Args:
            planning_overrides: year, month or pay_period_length values that
                replace the planning section (None values are ignored)

        Returns:
            ScheduleConfig object with all parsed data

        Raises:
            InvalidDateFormatError: If season bounds are malformed
            ConfigurationError: If configuration is invalid
            DataError: If a season or holiday table names an invalid shift
        """
        self._overrides = {
            key: value for key, value in planning_overrides.items() if value is not None
        }

        with open(self.config_path, "r") as f:
            self._raw_config = yaml.safe_load(f) or {}

        if not isinstance(self._raw_config, dict):
            raise ConfigurationError(
                f"Top level of {self.config_path} must be a mapping"
            )

        self._config = self._parse_config()
        self._validate()

        return self._config

    def reload(self) -> ScheduleConfig:
        """
        Reload the configuration from the file.

        Useful if the file has been modified.

        Returns:
            ScheduleConfig object with all parsed data
        """
        return self.load(**self._overrides)

    @property
    def config(self) -> ScheduleConfig:
        """
        Get the loaded configuration.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._config

    @property
    def raw_config(self) -> Dict[str, Any]:
        """
        Get the raw configuration dictionary.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        if self._raw_config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._raw_config

    def _parse_config(self) -> ScheduleConfig:
        """Parse raw YAML data into ScheduleConfig object."""
        raw = self._raw_config

        planning = {**self._section(raw, "planning"), **self._overrides}
        year = planning.get("year", date.today().year)
        month = planning.get("month", date.today().month)
        pay_period_length = planning.get("pay_period_length", 15)
        validate_planning(year, month, pay_period_length)

        scheduling = self._section(raw, "scheduling")
        target_tolerance = scheduling.get("target_tolerance", 0.0)
        deviation_threshold = scheduling.get("deviation_threshold", 5.0)

        seasons_raw = raw.get("seasons")
        seasons = (
            self._parse_seasons(seasons_raw) if seasons_raw else default_seasons()
        )

        holidays = self._parse_holidays(self._section(raw, "holidays"), year, month)
        mentors = self._parse_mentors(raw.get("mentors") or {})
        self._apply_time_off(mentors, raw.get("time_off") or {}, year, month)

        return ScheduleConfig(
            year=year,
            month=month,
            seasons=seasons,
            mentors=mentors,
            holidays=holidays,
            pay_period_length=pay_period_length,
            target_tolerance=float(target_tolerance),
            deviation_threshold=float(deviation_threshold),
        )

    def _parse_seasons(self, seasons_raw: Dict[str, Any]) -> List[SeasonConfig]:
        """Parse seasons, keeping configuration order for range matching."""
        if not isinstance(seasons_raw, dict):
            raise ConfigurationError("'seasons' must map season names to settings")

        seasons = []
        for season_name, season_data in seasons_raw.items():
            if not isinstance(season_data, dict):
                raise ConfigurationError(
                    f"Season '{season_name}' must be a mapping with 'dates' and "
                    f"'shift_hours', got: {season_data!r}"
                )

            dates = season_data.get("dates") or {}
            if not isinstance(dates, dict):
                raise ConfigurationError(
                    f"Season '{season_name}' dates must have 'start' and 'end'"
                )
            date_range = self._parse_date_range(
                dates.get("start"), dates.get("end"), season_name
            )

            shift_hours: Dict[str, Dict[str, float]] = {}
            weekday_tables = season_data.get("shift_hours") or {}
            if not isinstance(weekday_tables, dict):
                raise ConfigurationError(
                    f"Season '{season_name}' shift_hours must map weekdays to shifts"
                )
            for weekday, hours in weekday_tables.items():
                if hours is not None and not isinstance(hours, dict):
                    raise ConfigurationError(
                        f"Season '{season_name}' {weekday} must map shifts to "
                        f"hours, got: {hours!r}"
                    )
                shift_hours[normalize_weekday(weekday)] = {
                    shift: float(value) for shift, value in (hours or {}).items()
                }

            seasons.append(
                SeasonConfig(
                    name=season_name, date_range=date_range, shift_hours=shift_hours
                )
            )

        return seasons

    def _parse_date_range(self, start: Any, end: Any, season_name: str) -> DateRange:
        """Parse season bounds as absolute dates or recurring MM-DD pairs."""
        # YAML reads "2024-05-01 00:00:00" as a datetime
        start, end = (
            value.date() if isinstance(value, datetime) else value
            for value in (start, end)
        )

        if isinstance(start, date) and isinstance(end, date):
            try:
                return DateRange(start=start, end=end)
            except ValueError as e:
                raise ConfigurationError(f"Season '{season_name}': {e}") from e

        bounds = []
        for label, value in (("start", start), ("end", end)):
            match = _MONTH_DAY.match(str(value)) if isinstance(value, str) else None
            if match is None:
                raise InvalidDateFormatError(
                    f"Season '{season_name}' {label} must be an ISO 8601 date "
                    f"(YYYY-MM-DD) or a recurring MM-DD bound, got: {value}. "
                    f"Example: 2024-08-01 or 08-01"
                )
            try:
                bounds.append(
                    date(RECURRING_YEAR, int(match.group(1)), int(match.group(2)))
                )
            except ValueError as e:
                raise InvalidDateFormatError(
                    f"Season '{season_name}' {label} is not a real date: {value}"
                ) from e

        return DateRange(start=bounds[0], end=bounds[1], recurring=True)

    def _parse_holidays(
        self, holidays_raw: Dict[str, Any], year: int, month: int
    ) -> HolidayConfig:
        """Parse holiday hours and dates ("1,3-5" strings, lists, or "national")."""
        shift_hours = dict(DEFAULT_HOLIDAY_SHIFT_HOURS)
        for shift, hours in self._section(holidays_raw, "shift_hours").items():
            if shift not in HOLIDAY_SHIFTS:
                raise DataError(
                    f"Invalid holiday shift: '{shift}'. "
                    f"Valid shifts: {', '.join(HOLIDAY_SHIFTS)}"
                )
            shift_hours[shift] = float(hours)

        dates_raw = holidays_raw.get("dates", [])
        if dates_raw == "national":
            dates = national_holidays(year).get(month, [])
        elif isinstance(dates_raw, str):
            dates = parse_holiday_dates(dates_raw)
        elif isinstance(dates_raw, int):
            dates = [dates_raw]
        else:
            dates = [int(d) for d in dates_raw or []]

        return HolidayConfig(shift_hours=shift_hours, dates=dates)

    def _parse_mentors(self, mentors_raw: Any) -> List[Mentor]:
        """Parse the mentor roster, accepting a mapping or a list of entries."""
        if isinstance(mentors_raw, dict):
            entries = []
            for name, data in mentors_raw.items():
                if data is not None and not isinstance(data, dict):
                    raise ConfigurationError(
                        f"Mentor '{name}' must be a mapping of settings, got: {data!r}"
                    )
                entries.append({"name": name, **(data or {})})
        elif isinstance(mentors_raw, list):
            entries = mentors_raw
        else:
            raise ConfigurationError(
                "'mentors' must be a mapping of names or a list of entries"
            )

        mentors = []
        for mentor_data in entries:
            if not isinstance(mentor_data, dict):
                raise ConfigurationError(
                    f"Mentor entry {mentor_data!r} must be a mapping with a 'name'"
                )
            name = mentor_data.get("name")
            if not name:
                raise ConfigurationError(f"Mentor entry has no name: {mentor_data}")

            hours = self._mentor_field(mentor_data, "hours_wanted_per_week", 0)

            unavailable = self._mentor_field(mentor_data, "unavailable_weekdays", [])
            preferred = self._mentor_field(mentor_data, "preferred_weekdays", [])
            hard_dates = self._mentor_field(mentor_data, "hard_dates", [])
            auto_fill = self._mentor_field(mentor_data, "auto_fill", False)

            try:
                mentors.append(
                    Mentor(
                        name=str(name),
                        hours_wanted_per_week=float(hours or 0),
                        hard_dates={int(d) for d in self._as_list(hard_dates)},
                        unavailable_weekdays={
                            normalize_weekday(w) for w in self._as_list(unavailable)
                        },
                        preferred_weekdays=[
                            normalize_weekday(w) for w in self._as_list(preferred)
                        ],
                        auto_fill=bool(auto_fill),
                        show_on_calendar=bool(
                            mentor_data.get("show_on_calendar", True)
                        ),
                    )
                )
            except ValueError as e:
                raise ConfigurationError(f"Mentor '{name}': {e}") from e

        return mentors

    def _apply_time_off(
        self, mentors: List[Mentor], time_off_raw: Any, year: int, month: int
    ) -> None:
        """
        Fold the time-off calendar into each mentor's hard dates.

        ``time_off`` maps a day of the month to the mentors off that day. For
        mentors with ``auto_fill`` set, every date of the month that falls on
        one of their unavailable weekdays is added as well.
        """
        if not isinstance(time_off_raw, dict):
            raise ConfigurationError(
                "'time_off' must map days of the month to mentor names"
            )

        by_name = {mentor.name: mentor for mentor in mentors}
        days_in_month = calendar.monthrange(year, month)[1]

        for day_raw, names in time_off_raw.items():
            try:
                day_of_month = int(day_raw)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"Time-off key must be a day of the month, got: {day_raw!r}"
                ) from e

            if not 1 <= day_of_month <= days_in_month:
                print(
                    f"Warning: time-off date {day_of_month} is outside "
                    f"{year}-{month:02d} ({days_in_month} days)"
                )
                continue

            for name in self._as_list(names):
                if name not in by_name:
                    raise ConfigurationError(
                        f"Time-off on day {day_of_month} names unknown mentor '{name}'"
                    )
                by_name[name].hard_dates.add(day_of_month)

        for mentor in mentors:
            if not mentor.auto_fill:
                continue
            mentor.hard_dates.update(
                day_of_month
                for day_of_month in range(1, days_in_month + 1)
                if WEEKDAY_NAMES[calendar.weekday(year, month, day_of_month)]
                in mentor.unavailable_weekdays
            )

    @staticmethod
    def _section(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
        """Return a top-level mapping section, empty when absent."""
        section = raw.get(key) or {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"'{key}' must be a mapping, got: {section!r}")
        return section

    def _mentor_field(self, mentor_data: Dict[str, Any], field: str, default: Any):
        """Read a canonical mentor field, falling back to its legacy aliases."""
        for key in self.MENTOR_FIELD_ALIASES[field]:
            if mentor_data.get(key) is not None:
                return mentor_data[key]
        return default

    @staticmethod
    def _as_list(value: Any) -> list:
        if value is None:
            return []
        if isinstance(value, (list, tuple, set)):
            return list(value)
        return [value]

    def _validate(self) -> None:
        """
        Validate that the configuration is internally consistent.

        Raises:
            ConfigurationError: If configuration has issues
            DataError: If a season table names a shift other than a/b/c
        """
        config = self._config

        names = config.mentor_names
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ConfigurationError(
                f"Duplicate mentor names: {', '.join(duplicates)}"
            )

        for season in config.seasons:
            for weekday, hours in season.shift_hours.items():
                unknown = [shift for shift in hours if shift not in NORMAL_SHIFTS]
                if unknown:
                    raise DataError(
                        f"Season '{season.name}' {weekday} has unknown shifts: "
                        f"{', '.join(unknown)}"
                    )

        if config.target_tolerance < 0:
            raise ConfigurationError(
                f"target_tolerance cannot be negative, got {config.target_tolerance}"
            )
        if config.deviation_threshold < 0:
            raise ConfigurationError(
                f"deviation_threshold cannot be negative, "
                f"got {config.deviation_threshold}"
            )

        self._check_holiday_dates()

    def _check_holiday_dates(self) -> None:
        """Check and warn if holiday dates fall outside the planned month."""
        config = self._config

        for day_of_month in config.holidays.dates:
            if not 1 <= day_of_month <= config.days_in_month:
                print(
                    f"Warning: holiday date {day_of_month} is outside "
                    f"{config.year}-{config.month:02d} ({config.days_in_month} days)"
                )

    def get_summary(self) -> str:
        """
        Get a summary of the loaded configuration.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        config = self.config

        lines = [
            f"Configuration from: {self.config_path}",
            f"Planning Month: {config.year}-{config.month:02d} "
            f"({config.days_in_month} days, {config.num_weeks_in_month:.2f} weeks)",
            f"Pay Period Length: {config.pay_period_length} days",
            f"Seasons: {', '.join(season.name for season in config.seasons)}",
            f"Holidays: {format_holiday_dates(config.holidays.dates) or 'None'}",
            f"Mentors: {len(config.mentors)}",
        ]

        for mentor in config.mentors:
            lines.append(
                f"  - {mentor.name}: {mentor.hours_wanted_per_week:g}h/week"
            )

        return "\n".join(lines)
