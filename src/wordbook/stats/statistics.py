"""
Statistics snapshot for a dictionary.
"""

from dataclasses import dataclass
from datetime import datetime

from wordbook.core.dates import format_date
from wordbook.core.errors import StatisticsUnavailable
from wordbook.stats.distribution import Distribution


TIME_DIFFERENCES_NAME = "Time Differences Distribution"
TIME_DIFFERENCES_DESCRIPTION = (
    "Distribution of entry times between consecutive definitions. Time is measured in minutes"
)


def time_differences(dictionary) -> list[int]:
    """Whole minutes between consecutive entries, in entry-date order."""
    dates = [dictionary.entries[w].entry_date for w in dictionary.date_sorted_words()]
    return [
        int((later - earlier).total_seconds() // 60)
        for earlier, later in zip(dates, dates[1:])
    ]


@dataclass(frozen=True)
class Statistics:
    dictionary_name: str
    entry_count: int
    generated_at: datetime
    time_differences: Distribution
    trimmed_time_differences: Distribution

    @classmethod
    def from_dictionary(cls, dictionary, now: datetime | None = None) -> "Statistics":
        if len(dictionary) < 2:
            raise StatisticsUnavailable("At least two definitions are needed to generate statistics!")

        raw = Distribution(
            TIME_DIFFERENCES_NAME,
            TIME_DIFFERENCES_DESCRIPTION,
            time_differences(dictionary),
        )
        return cls(
            dictionary_name=dictionary.name,
            entry_count=len(dictionary),
            generated_at=now or datetime.now(),
            time_differences=raw,
            trimmed_time_differences=raw.without_outliers(),
        )

    def render(self) -> str:
        lines = [
            "============ STATISTICS ============",
            f"As of {format_date(self.generated_at)}:",
            f"There are {self.entry_count} definitions in {self.dictionary_name}",
            "",
            self.time_differences.summary(),
            "",
            self.trimmed_time_differences.summary(),
        ]
        return "\n".join(lines)
