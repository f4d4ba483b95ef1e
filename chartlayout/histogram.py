"""Histogram bucketing.

Values are grouped into a fixed number of equal-width bins over a domain that
is either supplied by the caller or derived from the data.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from .dto import AxisRange
from .errors import InvalidArgumentError, check_progress

logger = logging.getLogger(__name__)


def _domain(values: Sequence[float], value_range: tuple[float, float] | None) -> tuple[float, float]:
    if value_range is not None:
        low, high = value_range
        if high < low:
            raise InvalidArgumentError(argument="value_range", reason=f"max ({high}) is below min ({low})")
        return low, high
    if not values:
        return 0.0, 0.0
    return min(values), max(values)


def bucketize(
    values: Sequence[float],
    bin_count: int,
    value_range: tuple[float, float] | None = None,
) -> tuple[int, ...]:
    """Count values into `bin_count` equal-width bins.

    Values exactly at the upper bound land in the last bin. Values outside the
    domain (possible only with an explicit `value_range`) are dropped. When all
    values are identical the bin width is 0 and every value lands in bin 0.
    Empty input without a range yields all-zero counts.

    Args:
        values: Values to count.
        bin_count: Number of bins (> 1).
        value_range: Optional `(min, max)` domain; defaults to the data extent.

    Returns:
        Tuple of `bin_count` counts.

    Raises:
        InvalidArgumentError: When `bin_count <= 1` or the range is inverted.
    """

    if bin_count <= 1:
        raise InvalidArgumentError(argument="bin_count", reason=f"must be greater than 1, got {bin_count}")

    low, high = _domain(values, value_range)
    bin_width = (high - low) / bin_count
    counts = [0] * bin_count
    dropped = 0

    for value in values:
        if value < low or value > high:
            dropped += 1
            continue
        if bin_width == 0:
            counts[0] += 1
            continue
        index = math.floor((value - low) / bin_width)
        counts[min(max(index, 0), bin_count - 1)] += 1

    if dropped:
        logger.debug("Dropped %d value(s) outside [%s, %s].", dropped, low, high)
    return tuple(counts)


def bin_edges(value_range: AxisRange, bin_count: int) -> tuple[float, ...]:
    """Return the `bin_count + 1` bin boundaries of a domain.

    Args:
        value_range: Histogram domain.
        bin_count: Number of bins (> 1).

    Returns:
        Boundaries in ascending order, starting at `min` and ending at `max`.
    """

    if bin_count <= 1:
        raise InvalidArgumentError(argument="bin_count", reason=f"must be greater than 1, got {bin_count}")
    bin_width = value_range.span / bin_count
    edges = [value_range.min + bin_width * i for i in range(bin_count)]
    edges.append(value_range.max)
    return tuple(edges)


def bar_heights(counts: Sequence[int], *, progress: float = 1.0) -> tuple[float, ...]:
    """Scale bin counts to bar heights relative to the tallest bin.

    Args:
        counts: Bin counts from `bucketize`.
        progress: Reveal factor in [0, 1].

    Returns:
        Heights in [0, 1]; all zeros when every count is 0.
    """

    check_progress(progress)
    tallest = max(counts, default=0)
    if tallest == 0:
        return tuple(0.0 for _ in counts)
    return tuple(count / tallest * progress for count in counts)
