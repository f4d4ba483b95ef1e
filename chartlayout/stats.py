"""Descriptive statistics, smoothing and regression over numeric series."""

from __future__ import annotations

import statistics
from collections.abc import Sequence

from .dto import Point, RegressionLine, Series, SeriesSummary
from .errors import InvalidArgumentError
from .settings import MOVING_AVERAGE_WINDOW


def _require_values(values: Sequence[float]) -> None:
    if not values:
        raise InvalidArgumentError(argument="values", reason="at least one value is required")


def mean(values: Sequence[float]) -> float:
    """Return the arithmetic mean of a non-empty sequence."""

    _require_values(values)
    return statistics.fmean(values)


def median(values: Sequence[float]) -> float:
    """Return the median; the average of the two middle values on even counts."""

    _require_values(values)
    return float(statistics.median(values))


def std_dev(values: Sequence[float]) -> float:
    """Return the population standard deviation (divides by N)."""

    _require_values(values)
    return float(statistics.pstdev(values))


def summarize(values: Sequence[float]) -> SeriesSummary:
    """Compute min, max, mean, median and population standard deviation.

    Args:
        values: Non-empty numeric sequence.

    Returns:
        SeriesSummary for the values.

    Raises:
        InvalidArgumentError: When `values` is empty.
    """

    _require_values(values)
    return SeriesSummary(
        count=len(values),
        min=float(min(values)),
        max=float(max(values)),
        mean=mean(values),
        median=median(values),
        std_dev=std_dev(values),
    )


def moving_average(points: Sequence[Point], window_size: int) -> tuple[Point, ...]:
    """Smooth a point sequence with an unweighted moving average.

    The first and last `window_size // 2` points are kept as-is. Every interior
    point `i` takes the mean y of `points[i - h : i - h + window_size]`, where
    `h = window_size // 2`, and keeps its own x and label.

    Args:
        points: Ordered points.
        window_size: Window width.

    Returns:
        Smoothed points; the input unchanged when `window_size <= 1` or there
        are no more points than the window.
    """

    if window_size <= 1 or len(points) <= window_size:
        return tuple(points)

    half = window_size // 2
    smoothed: list[Point] = list(points[:half])
    for index in range(half, len(points) - half):
        window = points[index - half : index - half + window_size]
        current = points[index]
        smoothed.append(
            Point(
                x=current.x,
                y=sum(point.y for point in window) / window_size,
                label=current.label,
            )
        )
    smoothed.extend(points[len(points) - half :])
    return tuple(smoothed)


def linear_regression(points: Sequence[Point]) -> RegressionLine:
    """Fit an ordinary least-squares line.

    Args:
        points: At least two points with at least two distinct x values.

    Returns:
        RegressionLine with slope, intercept and the line evaluated at the
        smallest and largest input x.

    Raises:
        InvalidArgumentError: On fewer than two points or identical x values.
    """

    n = len(points)
    if n < 2:
        raise InvalidArgumentError(argument="points", reason=f"at least two points are required, got {n}")

    xs = [point.x for point in points]
    start_x = min(xs)
    end_x = max(xs)
    if start_x == end_x:
        raise InvalidArgumentError(argument="points", reason="all x values are identical")

    sum_x = sum(xs)
    sum_y = sum(point.y for point in points)
    sum_xy = sum(point.x * point.y for point in points)
    sum_x2 = sum(x * x for x in xs)

    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        raise InvalidArgumentError(argument="points", reason="x values have no variance")

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return RegressionLine(
        slope=slope,
        intercept=intercept,
        start=Point(x=start_x, y=slope * start_x + intercept, label="start"),
        end=Point(x=end_x, y=slope * end_x + intercept, label="end"),
    )


def smooth_series(series: Series, window_size: int = MOVING_AVERAGE_WINDOW) -> Series:
    """Return a moving-average copy of a series, named `"<name> (smoothed)"`."""

    return Series(name=f"{series.name} (smoothed)", points=moving_average(series.points, window_size))


def regression_series(series: Series) -> Series:
    """Return the two-point regression line of a series as a new series."""

    line = linear_regression(series.points)
    return Series(name=f"Regression ({series.name})", points=line.points)
