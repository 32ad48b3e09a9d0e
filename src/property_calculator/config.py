"""Configuration for the property expense calculator."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from property_calculator.data.options import DEFAULT_REPORT_FILENAME, STORAGE_KEY
from property_calculator.exceptions import ConfigurationError
from property_calculator.log import LOG_LEVELS
from property_calculator.portfolio import SortOption

DEFAULT_DATA_DIR = "~/.property-expense-calculator"


@dataclass
class AppConfig:
    """Runtime settings shared by the CLI and the GUI."""

    data_dir: Path = field(default_factory=lambda: Path(DEFAULT_DATA_DIR).expanduser())
    log_level: str = "WARNING"
    report_file: str = DEFAULT_REPORT_FILENAME
    default_sort: SortOption = SortOption.ADDRESS

    @property
    def storage_path(self) -> Path:
        return self.data_dir / f"{STORAGE_KEY}.json"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from PROPERTY_CALC_* environment variables."""
        log_level = os.getenv("PROPERTY_CALC_LOG_LEVEL", "WARNING").upper()
        if log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"PROPERTY_CALC_LOG_LEVEL must be one of {LOG_LEVELS}, got {log_level!r}"
            )

        sort_raw = os.getenv("PROPERTY_CALC_SORT", SortOption.ADDRESS.value)
        try:
            default_sort = SortOption(sort_raw)
        except ValueError:
            choices = [o.value for o in SortOption]
            raise ConfigurationError(
                f"PROPERTY_CALC_SORT must be one of {choices}, got {sort_raw!r}"
            ) from None

        return cls(
            data_dir=Path(os.getenv("PROPERTY_CALC_DATA_DIR", DEFAULT_DATA_DIR)).expanduser(),
            log_level=log_level,
            report_file=os.getenv("PROPERTY_CALC_REPORT_FILE", DEFAULT_REPORT_FILENAME),
            default_sort=default_sort,
        )
