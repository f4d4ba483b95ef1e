"""Pie and donut arc layout.

Angles are in degrees, measured clockwise from 3 o'clock (screen space, y
pointing down). Segment order is significant: spans are laid out in input
order, so the same values in a different order produce a different chart.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from .dto import ArcSpan, LabelAnchor, Segment
from .errors import InvalidArgumentError, check_progress
from .settings import LABEL_MIN_SWEEP, PIE_LABEL_RADIUS

logger = logging.getLogger(__name__)

FULL_CIRCLE = 360.0


def _total(segments: Sequence[Segment]) -> float:
    for segment in segments:
        if segment.value < 0:
            raise InvalidArgumentError(
                argument="segments",
                reason=f"segment {segment.label!r} has a negative value ({segment.value})",
            )
    total = sum(segment.value for segment in segments)
    if total == 0:
        raise InvalidArgumentError(argument="segments", reason="at least one segment must have a positive value")
    return total


def _check_donut_ratio(donut_ratio: float | None) -> None:
    if donut_ratio is not None and not 0.0 <= donut_ratio <= 1.0:
        raise InvalidArgumentError(argument="donut_ratio", reason=f"must be within [0, 1], got {donut_ratio}")


def layout(segments: Sequence[Segment], progress: float = 1.0) -> tuple[ArcSpan, ...]:
    """Lay out segments as consecutive arcs.

    Args:
        segments: Weighted segments, in display order.
        progress: Reveal factor in [0, 1] scaling every sweep.

    Returns:
        One ArcSpan per segment. At `progress=1` the sweeps sum to 360°.

    Raises:
        InvalidArgumentError: When a value is negative, all values are zero
            (or there are no segments), or `progress` is outside [0, 1].
    """

    check_progress(progress)
    total = _total(segments)

    spans: list[ArcSpan] = []
    start = 0.0
    for segment in segments:
        sweep = (segment.value / total) * FULL_CIRCLE * progress
        spans.append(ArcSpan(start_angle=start, sweep_angle=sweep, segment=segment))
        start += sweep
    return tuple(spans)


def segment_at_angle(segments: Sequence[Segment], angle: float) -> Segment | None:
    """Return the segment whose full-progress arc contains `angle`.

    Args:
        segments: The same segments passed to `layout`.
        angle: Angle in degrees; normalised into [0, 360).

    Returns:
        The first segment whose `[start, start + sweep)` interval holds the
        angle, or None when only zero-width segments sit there.
    """

    normalized = angle % FULL_CIRCLE
    spans = layout(segments)
    last_positive: ArcSpan | None = None
    for span in spans:
        if span.sweep_angle <= 0:
            continue
        if span.contains(normalized):
            return span.segment
        last_positive = span

    # Accumulated sweeps can end a hair short of 360.
    if last_positive is not None and normalized >= last_positive.start_angle:
        return last_positive.segment
    logger.debug("No positive-width segment at %s degrees.", normalized)
    return None


def percentages(segments: Sequence[Segment]) -> tuple[float, ...]:
    """Return each segment's share of the total, in percent."""

    total = _total(segments)
    return tuple(segment.value / total * 100.0 for segment in segments)


def angle_at_offset(
    dx: float,
    dy: float,
    *,
    radius: float = 1.0,
    donut_ratio: float | None = None,
) -> float | None:
    """Convert an offset from the chart centre into a layout angle.

    Args:
        dx: Horizontal offset from the centre.
        dy: Vertical offset from the centre (screen space, down is positive).
        radius: Outer radius of the pie.
        donut_ratio: Inner/outer radius ratio for donuts; None for a full pie.

    Returns:
        Angle in [0, 360), or None when the offset lies outside the disk or
        inside the donut hole.
    """

    if radius <= 0:
        raise InvalidArgumentError(argument="radius", reason=f"must be positive, got {radius}")
    _check_donut_ratio(donut_ratio)

    distance = math.hypot(dx, dy)
    if distance > radius:
        return None
    if donut_ratio is not None and distance < radius * donut_ratio:
        return None

    angle = math.degrees(math.atan2(dy, dx))
    if angle < 0:
        angle += FULL_CIRCLE
    if angle >= FULL_CIRCLE:
        angle = 0.0
    return angle


def label_anchors(
    spans: Sequence[ArcSpan],
    *,
    donut_ratio: float | None = None,
    min_sweep: float = LABEL_MIN_SWEEP,
    label_radius: float = PIE_LABEL_RADIUS,
) -> tuple[LabelAnchor, ...]:
    """Place percentage labels at the middle of sufficiently wide arcs.

    Args:
        spans: Output of `layout`.
        donut_ratio: Inner/outer radius ratio; labels then sit mid-ring.
        min_sweep: Arcs must be strictly wider than this to get a label.
        label_radius: Label radius for full pies (unit disk).

    Returns:
        Anchors on the unit disk, in span order, with texts like `"25.0%"`.
    """

    _check_donut_ratio(donut_ratio)
    total = sum(span.segment.value for span in spans)
    if total == 0:
        return ()

    radius = (1.0 + donut_ratio) / 2 if donut_ratio is not None else label_radius
    anchors: list[LabelAnchor] = []
    for span in spans:
        if span.sweep_angle <= min_sweep:
            continue
        middle = math.radians(span.start_angle + span.sweep_angle / 2)
        anchors.append(
            LabelAnchor(
                x=math.cos(middle) * radius,
                y=math.sin(middle) * radius,
                text=f"{span.segment.value / total * 100:.1f}%",
                segment=span.segment,
            )
        )
    return tuple(anchors)
