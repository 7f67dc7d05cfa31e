"""Binned histograms over integer samples."""

from __future__ import annotations

import os
import re
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

_INT_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")
_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_PROGRESS_STEP = 1_000_000


@dataclass
class Histogram:
    """Bin counts over the half-open range ``[min_value, max_value)``."""

    bin_count: int
    min_value: float
    max_value: float
    bin_width: float = 0.0
    bin_counts: List[float] = field(default_factory=list)

    def bin_centers(self) -> List[float]:
        """Return the x position at the centre of each bin."""
        return [self.min_value + (i + 0.5) * self.bin_width for i in range(self.bin_count)]


def _empty_histogram(bin_count: int, min_range: float, max_range: float) -> Histogram:
    if bin_count <= 0:
        raise ValueError("bin_count must be positive")
    return Histogram(
        bin_count=bin_count,
        min_value=min_range,
        max_value=max_range,
        bin_width=(max_range - min_range) / bin_count,
        bin_counts=[0.0] * bin_count,
    )


def _bin_index(value: float, hist: Histogram) -> Optional[int]:
    if not hist.min_value <= value < hist.max_value:
        return None
    index = int((value - hist.min_value) / hist.bin_width)
    return index if 0 <= index < hist.bin_count else None


def compute_histogram_bins(
    data: Sequence[int], bin_count: int, min_range: float, max_range: float
) -> Histogram:
    """Count the values of ``data`` falling in each of ``bin_count`` equal bins."""
    hist = _empty_histogram(bin_count, min_range, max_range)
    for value in data:
        index = _bin_index(value, hist)
        if index is not None:
            hist.bin_counts[index] += 1
    return hist


def compute_histogram_bins_threaded(
    data: Sequence[int],
    bin_count: int,
    min_range: float,
    max_range: float,
    progress_callback: Optional[Callable[[float], None]] = None,
) -> Histogram:
    """Like :func:`compute_histogram_bins`, split across worker threads.

    ``progress_callback``, if given, receives a fraction in ``[0, 1)`` every
    million samples.
    """
    hist = _empty_histogram(bin_count, min_range, max_range)
    size = len(data)
    workers = max(1, os.cpu_count() or 1)
    partials = [[0.0] * bin_count for _ in range(workers)]

    def count(worker: int, start: int, end: int) -> None:
        counts = partials[worker]
        for i, value in enumerate(data[start:end], start=start):
            index = _bin_index(value, hist)
            if index is not None:
                counts[index] += 1
            if progress_callback is not None and i % _PROGRESS_STEP == 0:
                progress = (i - start) / (end - start)
                progress_callback((worker + progress) / workers)

    threads = [
        threading.Thread(
            target=count, args=(w, w * size // workers, (w + 1) * size // workers)
        )
        for w in range(workers)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    hist.bin_counts = [sum(column) for column in zip(*partials)]
    return hist


def compute_subset_histogram(
    data: Sequence[int], min_range: float, max_range: float, bin_count: int
) -> Histogram:
    """Histogram of only the values of ``data`` within ``[min_range, max_range)``."""
    subset = [value for value in data if min_range <= value < max_range]
    return compute_histogram_bins(subset, bin_count, min_range, max_range)


def read_integer_text_file(filename) -> List[int]:
    """Read whitespace-separated 32-bit integers until the first unreadable entry.

    A file that cannot be opened yields an empty list.
    """
    try:
        with open(filename, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return []

    values: List[int] = []
    pos = 0
    while (match := _INT_PATTERN.match(text, pos)) is not None:
        value = int(match.group(1))
        if not _INT_MIN <= value <= _INT_MAX:
            break
        values.append(value)
        pos = match.end()
    return values