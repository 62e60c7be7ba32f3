"""
Configuration: constants and environment-driven settings.
"""

import os
from dataclasses import dataclass


# Date given to `changedate` and date-tagged definitions
DATE_ARG_FORMAT = "%m:%d:%Y:%H:%M"
DATE_ARG_PATTERN = "MM:dd:yyyy:HH:mm"

# Date shown by `find`, `changedate` and the statistics report
DISPLAY_DATE_FORMAT = "%m/%d/%Y %I:%M:%S %p"

PROMPT = "Enter a command:"
QUIT_COMMAND = "quit"

# Dictionary file
FILE_FORMAT = "wordbook.dictionary"
FILE_VERSION = 1

# statsdump output
STATS_FILENAME = "stats.txt"
HISTOGRAM_FILENAME = "time_differences.png"
TRIMMED_HISTOGRAM_FILENAME = "time_differences_no_outliers.png"
HISTOGRAM_DPI = 150

# Tukey fences for outlier removal
OUTLIER_IQR_FACTOR = 1.5


@dataclass
class Settings:
    log_level: str = "WARNING"
    log_file: str | None = None
    dates_enabled: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("WORDBOOK_LOG_LEVEL", "WARNING").upper(),
            log_file=os.getenv("WORDBOOK_LOG_FILE") or None,
            dates_enabled=os.getenv("WORDBOOK_DATES", "").lower() in ("1", "true", "yes"),
        )
