"""Grouped and stacked bar layout.

Bars are laid out in screen space: x grows rightwards across `width`, y grows
downwards and every bar stands on the bottom edge (`height`). Categories are
the distinct point labels, in the order they first appear across the series.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .axis import compute_series_range
from .dto import AxisRange, BarRect, Series
from .errors import InvalidArgumentError, check_progress
from .settings import BAR_SPACING_RATIO

logger = logging.getLogger(__name__)


def categories(series: Sequence[Series]) -> tuple[str, ...]:
    """Return the distinct point labels across all series, first-seen order."""

    seen: dict[str, None] = {}
    for entry in series:
        for point in entry.points:
            seen.setdefault(point.label, None)
    return tuple(seen)


def _value_for(entry: Series, label: str) -> float | None:
    for point in entry.points:
        if point.label == label:
            return point.y
    return None


def layout(
    series: Sequence[Series],
    *,
    width: float,
    height: float,
    value_range: AxisRange | None = None,
    stacked: bool = False,
    progress: float = 1.0,
    spacing_ratio: float = BAR_SPACING_RATIO,
) -> tuple[BarRect, ...]:
    """Compute bar rectangles for one or more series.

    Args:
        series: Series to draw; points are matched across series by label.
        width: Plot width (> 0).
        height: Plot height (> 0).
        value_range: y domain; defaults to the range of all points with the
            lower bound pinned to 0, so every bar stays inside the plot.
        stacked: Stack series on top of each other instead of side by side.
        progress: Reveal factor in [0, 1] scaling every bar height.
        spacing_ratio: Share of `width` used for the gaps between groups.

    Returns:
        Rectangles in category order, then series order. Categories missing
        from a series produce no rectangle for it.

    Raises:
        InvalidArgumentError: On empty `series`, non-positive dimensions or
            `progress` outside [0, 1].
    """

    if not series:
        raise InvalidArgumentError(argument="series", reason="at least one series is required")
    if width <= 0 or height <= 0:
        raise InvalidArgumentError(argument="width/height", reason=f"must be positive, got {width}x{height}")
    check_progress(progress)

    labels = categories(series)
    if not labels:
        return ()

    resolved = value_range if value_range is not None else compute_series_range(series, force_min_zero=True)
    if resolved.is_degenerate:
        logger.debug("Degenerate value range %s; bars collapse to zero height.", resolved)

    def bar_height(value: float) -> float:
        if resolved.is_degenerate:
            return 0.0
        return (value / resolved.span) * height * progress

    count = len(labels)
    spacing = width * spacing_ratio / count
    group_width = (width - (count + 1) * spacing) / count
    bar_width = group_width / len(series)

    rects: list[BarRect] = []
    for label_index, label in enumerate(labels):
        group_left = spacing + label_index * (group_width + spacing)
        offset = 0.0
        for series_index, entry in enumerate(series):
            value = _value_for(entry, label)
            if value is None:
                continue
            bar = bar_height(value)
            if stacked:
                rects.append(
                    BarRect(
                        left=group_left,
                        top=height - offset - bar,
                        right=group_left + group_width,
                        bottom=height - offset,
                        series_name=entry.name,
                        label=label,
                        value=value,
                    )
                )
                offset += bar
            else:
                rects.append(
                    BarRect(
                        left=group_left + series_index * bar_width,
                        top=height - bar,
                        right=group_left + (series_index + 1) * bar_width,
                        bottom=height,
                        series_name=entry.name,
                        label=label,
                        value=value,
                    )
                )
    return tuple(rects)
