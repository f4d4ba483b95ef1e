"""DTO types consumed and produced by the layout functions.

DTOs are plain value objects. Inputs are created by a data-loading
collaborator and read without mutation; outputs are handed to a renderer that
paints them. Nothing here knows about canvases, colors or animation clocks.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Point:
    """A single data point.

    Attributes:
        x: Horizontal value.
        y: Vertical value.
        label: Opaque display tag; used as the category key by bar and radar
            layouts.
    """

    x: float
    y: float
    label: str = ""


@dataclass(frozen=True, slots=True)
class Series:
    """A named, ordered sequence of points."""

    name: str
    points: tuple[Point, ...] = ()


@dataclass(frozen=True, slots=True)
class Segment:
    """A labelled weight for pie/donut layout. A value of 0 is legal."""

    label: str
    value: float


@dataclass(frozen=True, slots=True)
class AxisRange:
    """An inclusive numeric domain for an axis.

    Attributes:
        min: Lower bound.
        max: Upper bound (never below `min`).
    """

    min: float
    max: float

    def __post_init__(self) -> None:
        if self.max < self.min:
            raise InvalidArgumentError(
                argument="AxisRange",
                reason=f"max ({self.max}) must not be below min ({self.min})",
            )

    @property
    def span(self) -> float:
        return self.max - self.min

    @property
    def is_degenerate(self) -> bool:
        """Return True when the range collapses to a single value."""

        return self.max == self.min

    def fraction(self, value: float) -> float:
        """Return the relative position of `value` within the range.

        Args:
            value: Value on the axis.

        Returns:
            `(value - min) / span`, or 0.0 for a degenerate range so callers
            never divide by zero.
        """

        if self.is_degenerate:
            return 0.0
        return (value - self.min) / self.span


@dataclass(frozen=True, slots=True)
class ArcSpan:
    """Angular extent of one pie/donut segment, in degrees.

    Attributes:
        start_angle: Start of the arc, measured clockwise from 3 o'clock.
        sweep_angle: Angular width (>= 0).
        segment: The input segment this arc represents.
    """

    start_angle: float
    sweep_angle: float
    segment: Segment

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep_angle

    def contains(self, angle: float) -> bool:
        """Return True when `angle` lies in the half-open `[start, end)` interval."""

        return self.start_angle <= angle < self.end_angle


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new sub-path at (x, y)."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight line to (x, y)."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class CubicTo:
    """Cubic Bézier segment with two control points ending at (x, y)."""

    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current sub-path."""


PathCommand = MoveTo | LineTo | CubicTo | ClosePath


@dataclass(frozen=True, slots=True)
class CurvePath:
    """An ordered, immutable list of path commands for a renderer."""

    commands: tuple[PathCommand, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.commands

    @property
    def vertices(self) -> tuple[tuple[float, float], ...]:
        """Return the on-curve endpoints of every drawing command, in order."""

        return tuple(
            (command.x, command.y)
            for command in self.commands
            if not isinstance(command, ClosePath)
        )


@dataclass(frozen=True, slots=True)
class BarRect:
    """A bar rectangle in screen space (y grows downwards).

    Attributes:
        left: Left edge.
        top: Top edge.
        right: Right edge.
        bottom: Bottom edge.
        series_name: Name of the series the bar belongs to.
        label: Category label of the bar.
        value: Underlying data value.
    """

    left: float
    top: float
    right: float
    bottom: float
    series_name: str
    label: str
    value: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True, slots=True)
class LabelAnchor:
    """Position of a percentage label on a unit pie/donut disk."""

    x: float
    y: float
    text: str
    segment: Segment


@dataclass(frozen=True, slots=True)
class SeriesSummary:
    """Descriptive statistics for a numeric series."""

    count: int
    min: float
    max: float
    mean: float
    median: float
    std_dev: float


@dataclass(frozen=True, slots=True)
class RegressionLine:
    """Least-squares line evaluated at the input's x extremes.

    Attributes:
        slope: Fitted slope.
        intercept: Fitted intercept.
        start: Line value at the smallest input x.
        end: Line value at the largest input x.
    """

    slope: float
    intercept: float
    start: Point
    end: Point

    @property
    def points(self) -> tuple[Point, Point]:
        return (self.start, self.end)
