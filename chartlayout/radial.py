"""Radar chart layout on a unit disk.

Category `i` of `n` sits at angle `2π·i/n − π/2`: index 0 points to 12 o'clock
and the rest follow clockwise in screen space. Callers scale the unit
coordinates by their own radius.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence

from .dto import Series
from .errors import InvalidArgumentError, check_progress
from .settings import RADAR_LABEL_DISTANCE, RADAR_RINGS

logger = logging.getLogger(__name__)


def _angle(index: int, count: int) -> float:
    return 2 * math.pi * index / count - math.pi / 2


def _require_categories(count: int) -> None:
    if count == 0:
        raise InvalidArgumentError(argument="categories", reason="at least one category is required")


def layout(
    categories: Sequence[str],
    series: Series,
    max_value: float,
    progress: float = 1.0,
) -> tuple[tuple[float, float], ...]:
    """Compute the polygon vertices of one series.

    Args:
        categories: Axis labels, in display order.
        series: Series whose point labels are matched against `categories`.
        max_value: Value mapped to the unit radius (> 0).
        progress: Reveal factor in [0, 1].

    Returns:
        One `(x, y)` vertex per category. Categories without a matching point
        collapse to the centre.

    Raises:
        InvalidArgumentError: On empty categories, non-positive `max_value`,
            or `progress` outside [0, 1].
    """

    _require_categories(len(categories))
    if max_value <= 0:
        raise InvalidArgumentError(argument="max_value", reason=f"must be positive, got {max_value}")
    check_progress(progress)

    values: dict[str, float] = {}
    for point in series.points:
        # First point wins for duplicated labels.
        values.setdefault(point.label, point.y)

    vertices: list[tuple[float, float]] = []
    for index, category in enumerate(categories):
        value = values.get(category)
        if value is None:
            logger.debug("Series %r has no point for category %r.", series.name, category)
            value = 0.0
        angle = _angle(index, len(categories))
        distance = value / max_value * progress
        vertices.append((math.cos(angle) * distance, math.sin(angle) * distance))
    return tuple(vertices)


def resolve_max_value(series: Iterable[Series], override: float | None = None) -> float:
    """Return the radar scale maximum.

    Args:
        series: All series drawn on the chart.
        override: Explicit maximum; used instead of the data when given.

    Returns:
        `override`, or the largest y over every point of every series.

    Raises:
        InvalidArgumentError: When the resolved maximum is not positive.
    """

    if override is not None:
        resolved = override
    else:
        resolved = max((point.y for entry in series for point in entry.points), default=0.0)
    if resolved <= 0:
        raise InvalidArgumentError(argument="max_value", reason=f"must be positive, got {resolved}")
    return resolved


def spoke_ends(count: int) -> tuple[tuple[float, float], ...]:
    """Return the unit-length end point of every category axis."""

    _require_categories(count)
    return tuple((math.cos(_angle(i, count)), math.sin(_angle(i, count))) for i in range(count))


def label_positions(
    categories: Sequence[str],
    *,
    distance: float = RADAR_LABEL_DISTANCE,
) -> tuple[tuple[str, float, float], ...]:
    """Return `(label, x, y)` positions just outside the unit disk."""

    _require_categories(len(categories))
    return tuple(
        (category, math.cos(_angle(i, len(categories))) * distance, math.sin(_angle(i, len(categories))) * distance)
        for i, category in enumerate(categories)
    )


def ring_values(max_value: float, *, rings: int = RADAR_RINGS) -> tuple[float, ...]:
    """Return the data value of each concentric grid ring, innermost first."""

    if rings < 1:
        raise InvalidArgumentError(argument="rings", reason=f"must be >= 1, got {rings}")
    return tuple(max_value * i / rings for i in range(1, rings + 1))
