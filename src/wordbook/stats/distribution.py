"""
Descriptive statistics over a set of data points.

Quartiles are medians of the lower and upper halves (the middle point is
excluded from both halves when the size is odd). Skewness and kurtosis use
the sample-size adjusted moment formulas over the population standard
deviation.
"""

import math

import pandas as pd

from wordbook.config import OUTLIER_IQR_FACTOR


def _median_of(values: list[float], start: int, end: int) -> float:
    """Median of values[start:end]; values must be sorted."""
    size = end - start
    middle = start + size // 2
    if size % 2 == 1:
        return values[middle]
    return (values[middle - 1] + values[middle]) / 2.0


class Distribution:
    def __init__(self, name: str, description: str, data):
        series = pd.Series(sorted(data), dtype="float64")
        if series.empty:
            raise ValueError(f"Distribution {name!r} needs at least one data point")

        self.name = name
        self.description = description
        self.data = series
        values = series.tolist()
        n = len(values)

        self.size = n
        self.mean = float(series.mean())
        deviations = series - self.mean
        self.variance = float((deviations ** 2).mean())
        self.stdev = math.sqrt(self.variance)

        self.median = _median_of(values, 0, n)
        if n == 1:
            self.quartile1 = self.quartile3 = values[0]
        else:
            self.quartile1 = _median_of(values, 0, n // 2)
            upper_start = n // 2 + 1 if n % 2 == 1 else n // 2
            self.quartile3 = _median_of(values, upper_start, n)
        self.iqr = self.quartile3 - self.quartile1

        self.min = values[0]
        self.max = values[-1]
        self.range = self.max - self.min

        if n < 3 or self.stdev == 0:
            self.skewness = math.nan
        else:
            coeff = n / ((n - 1) * (n - 2) * self.stdev ** 3)
            self.skewness = coeff * float((deviations ** 3).sum())

        if n < 4 or self.stdev == 0:
            self.kurtosis = math.nan
        else:
            coeff = (n * (n + 1)) / ((n - 1) * (n - 2) * (n - 3) * self.stdev ** 4)
            correction = (3 * (n - 1) ** 2) / ((n - 2) * (n - 3))
            self.kurtosis = coeff * float((deviations ** 4).sum()) - correction

    def without_outliers(self, name: str | None = None, description: str | None = None) -> "Distribution":
        """Keep only the points inside the Tukey fences (Q1/Q3 -+ 1.5 IQR)."""
        low = self.quartile1 - OUTLIER_IQR_FACTOR * self.iqr
        high = self.quartile3 + OUTLIER_IQR_FACTOR * self.iqr
        kept = self.data[(self.data >= low) & (self.data <= high)]
        return Distribution(
            name or f"{self.name} (Outliers Removed)",
            description or self.description,
            kept.tolist(),
        )

    def summary(self) -> str:
        rows = [
            ("Size", self.size),
            ("Mean", self.mean),
            ("Variance", self.variance),
            ("Standard deviation", self.stdev),
            ("Minimum", self.min),
            ("First quartile", self.quartile1),
            ("Median", self.median),
            ("Third quartile", self.quartile3),
            ("Maximum", self.max),
            ("Range", self.range),
            ("Interquartile range", self.iqr),
            ("Skewness", self.skewness),
            ("Kurtosis", self.kurtosis),
        ]
        lines = [f"====== {self.name} ======", self.description]
        for label, value in rows:
            text = str(value) if isinstance(value, int) else f"{value:.4f}"
            lines.append(f"{label + ':':<22}{text}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Distribution(name={self.name!r}, size={self.size})"
