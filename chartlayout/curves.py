"""Line-chart path geometry.

Paths are emitted as plain commands in whatever coordinate space the input
points use (data space, or screen space after `Viewport.project`). A reveal
animation is expressed by `progress`, which pulls every y towards a baseline;
the function holds no animation state and is re-invoked per frame.
"""

from __future__ import annotations

from collections.abc import Sequence

from .dto import ClosePath, CubicTo, CurvePath, LineTo, MoveTo, PathCommand, Point
from .errors import check_progress


def _deflect(y: float, *, baseline: float, progress: float) -> float:
    if progress == 1.0:
        return y
    return baseline + (y - baseline) * progress


def _resolve_baseline(points: Sequence[Point], baseline: float | None) -> float:
    if baseline is not None:
        return baseline
    return min(point.y for point in points)


def _segments(points: Sequence[Point], *, smooth: bool, baseline: float, progress: float) -> list[PathCommand]:
    """Build the drawing commands following the first vertex."""

    commands: list[PathCommand] = []
    prev_x = points[0].x
    prev_y = _deflect(points[0].y, baseline=baseline, progress=progress)
    for point in points[1:]:
        curr_x = point.x
        curr_y = _deflect(point.y, baseline=baseline, progress=progress)
        if smooth:
            # Horizontal tangents at both ends give the S-shaped segment.
            commands.append(
                CubicTo(
                    c1x=prev_x + (curr_x - prev_x) / 3,
                    c1y=prev_y,
                    c2x=prev_x + 2 * (curr_x - prev_x) / 3,
                    c2y=curr_y,
                    x=curr_x,
                    y=curr_y,
                )
            )
        else:
            commands.append(LineTo(x=curr_x, y=curr_y))
        prev_x, prev_y = curr_x, curr_y
    return commands


def build_path(
    points: Sequence[Point],
    *,
    smooth: bool,
    progress: float = 1.0,
    baseline: float | None = None,
) -> CurvePath:
    """Build a straight or smoothed path through a sequence of points.

    Args:
        points: Ordered points; fewer than two yield an empty path.
        smooth: Emit cubic Bézier segments instead of straight lines.
        progress: Reveal factor in [0, 1]; 0 collapses every y onto `baseline`.
        baseline: y value the path collapses to. Defaults to the smallest y.

    Returns:
        CurvePath starting with a MoveTo followed by one LineTo/CubicTo per
        subsequent point.

    Raises:
        InvalidArgumentError: When `progress` is outside [0, 1].
    """

    check_progress(progress)
    if len(points) < 2:
        return CurvePath()

    resolved = _resolve_baseline(points, baseline)
    first = points[0]
    commands: list[PathCommand] = [MoveTo(x=first.x, y=_deflect(first.y, baseline=resolved, progress=progress))]
    commands.extend(_segments(points, smooth=smooth, baseline=resolved, progress=progress))
    return CurvePath(commands=tuple(commands))


def build_fill_path(
    points: Sequence[Point],
    *,
    smooth: bool,
    progress: float = 1.0,
    baseline: float | None = None,
) -> CurvePath:
    """Build the closed area between a line path and the chart baseline.

    The outline drops from the baseline up to the first point, follows the
    same segments as `build_path`, falls back to the baseline under the last
    point and closes.

    Args:
        points: Ordered points; fewer than two yield an empty path.
        smooth: Emit cubic Bézier segments instead of straight lines.
        progress: Reveal factor in [0, 1].
        baseline: Bottom edge of the filled area. Defaults to the smallest y.

    Returns:
        Closed CurvePath.
    """

    check_progress(progress)
    if len(points) < 2:
        return CurvePath()

    resolved = _resolve_baseline(points, baseline)
    first = points[0]
    last = points[-1]
    commands: list[PathCommand] = [
        MoveTo(x=first.x, y=resolved),
        LineTo(x=first.x, y=_deflect(first.y, baseline=resolved, progress=progress)),
    ]
    commands.extend(_segments(points, smooth=smooth, baseline=resolved, progress=progress))
    commands.append(LineTo(x=last.x, y=resolved))
    commands.append(ClosePath())
    return CurvePath(commands=tuple(commands))
