"""Helpers that build layout inputs from bare values."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .dto import Point, Segment, Series


def generate_series(
    values: Sequence[float],
    name: str,
    *,
    start_x: float = 0.0,
    step_x: float = 1.0,
) -> Series:
    """Wrap a list of y values into a Series with evenly stepped x values.

    Args:
        values: y values in order.
        name: Series name.
        start_x: x of the first point.
        step_x: Distance between consecutive x values.

    Returns:
        Series whose point labels are the x values rendered as text.
    """

    points = []
    for index, value in enumerate(values):
        x = start_x + index * step_x
        points.append(Point(x=x, y=value, label=str(x)))
    return Series(name=name, points=tuple(points))


def generate_segments(data: Mapping[str, float]) -> tuple[Segment, ...]:
    """Turn a label -> value mapping into pie segments, keeping insertion order."""

    return tuple(Segment(label=label, value=value) for label, value in data.items())
