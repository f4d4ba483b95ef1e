"""Axis range helpers.

Ranges are derived from point collections unless the caller supplies an
explicit override. Empty input yields the degenerate `AxisRange(0, 0)` rather
than an error; downstream code uses `AxisRange.fraction` to stay safe.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .dto import AxisRange, Point, Series
from .errors import InvalidArgumentError
from .settings import AXIS_TICK_STEPS, HEADROOM_RATIO

logger = logging.getLogger(__name__)

EMPTY_RANGE = AxisRange(min=0.0, max=0.0)


def compute_range(
    points: Iterable[Point],
    *,
    override: AxisRange | None = None,
    force_min_zero: bool = False,
    headroom: bool = False,
    headroom_ratio: float = HEADROOM_RATIO,
) -> AxisRange:
    """Compute the y-axis range for a collection of points.

    Args:
        points: Points contributing to the range.
        override: Explicit range; returned unchanged when provided.
        force_min_zero: Pin the lower bound to 0 regardless of the data.
        headroom: Expand the upper bound by `(max - min) * headroom_ratio`.
        headroom_ratio: Headroom fraction used when `headroom` is set.

    Returns:
        AxisRange covering the data, `override`, or `AxisRange(0, 0)` for empty
        input.
    """

    if override is not None:
        return override

    ys = [point.y for point in points]
    if not ys:
        logger.debug("No points supplied; using the empty axis range.")
        return EMPTY_RANGE

    low = min(ys)
    high = max(ys)
    if force_min_zero:
        low = 0.0
        # All-negative data would otherwise invert the range.
        high = max(high, 0.0)
    if headroom:
        high = high + (high - low) * headroom_ratio
    return AxisRange(min=low, max=high)


def compute_series_range(
    series: Iterable[Series],
    *,
    override: AxisRange | None = None,
    force_min_zero: bool = False,
    headroom: bool = False,
    headroom_ratio: float = HEADROOM_RATIO,
) -> AxisRange:
    """Compute the y-axis range shared by several series.

    Args:
        series: Series whose points contribute to the range.
        override: Explicit range; returned unchanged when provided.
        force_min_zero: Pin the lower bound to 0 regardless of the data.
        headroom: Expand the upper bound by `(max - min) * headroom_ratio`.
        headroom_ratio: Headroom fraction used when `headroom` is set.

    Returns:
        AxisRange covering every point of every series.
    """

    all_points = [point for entry in series for point in entry.points]
    return compute_range(
        all_points,
        override=override,
        force_min_zero=force_min_zero,
        headroom=headroom,
        headroom_ratio=headroom_ratio,
    )


def compute_x_range(points: Iterable[Point]) -> AxisRange:
    """Return the x-axis range of a point collection (`(0, 0)` when empty)."""

    xs = [point.x for point in points]
    if not xs:
        return EMPTY_RANGE
    return AxisRange(min=min(xs), max=max(xs))


def axis_ticks(axis_range: AxisRange, *, steps: int = AXIS_TICK_STEPS) -> tuple[float, ...]:
    """Return evenly spaced tick values from `min` to `max` inclusive.

    Args:
        axis_range: Axis domain.
        steps: Number of intervals; the result has `steps + 1` values.

    Returns:
        Tick values in ascending order.

    Raises:
        InvalidArgumentError: When `steps` is below 1.
    """

    if steps < 1:
        raise InvalidArgumentError(argument="steps", reason=f"must be >= 1, got {steps}")
    return tuple(axis_range.min + axis_range.span * i / steps for i in range(steps + 1))
