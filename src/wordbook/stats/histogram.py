"""
Histograms of a distribution, rendered with matplotlib.
"""

import math

from wordbook.stats.distribution import Distribution


def ideal_bin_count(distribution: Distribution) -> int:
    return 1 + int(math.sqrt(distribution.size))


class Histogram:
    def __init__(self, distribution: Distribution, bin_count: int | None = None, bin_width: float | None = None):
        self.distribution = distribution
        self.bin_count = bin_count or ideal_bin_count(distribution)
        if bin_width is None:
            bin_width = distribution.range / self.bin_count
        self.bin_width = bin_width
        self.bins = self._count()

    def _count(self) -> list[int]:
        bins = [0] * self.bin_count
        start = self.distribution.min
        for value in self.distribution.data:
            if self.bin_width > 0:
                index = min(int((value - start) / self.bin_width), self.bin_count - 1)
            else:
                index = 0
            bins[index] += 1
        return bins

    def edges(self) -> list[float]:
        """Left edge of each bin."""
        return [self.distribution.min + i * self.bin_width for i in range(self.bin_count)]

    def save(self, path, dpi: int = 150) -> None:
        from matplotlib.figure import Figure

        width = self.bin_width if self.bin_width > 0 else 1.0

        fig = Figure(figsize=(10, 6))
        ax = fig.subplots()
        ax.bar(self.edges(), self.bins, width=width, align="edge", color="green", edgecolor="black")
        ax.set_xlabel("Minutes")
        ax.set_ylabel("Count")
        ax.set_title(self.distribution.name)
        ax.grid(True, alpha=0.3)
        fig.savefig(str(path), dpi=dpi)
