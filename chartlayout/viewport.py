"""Data-to-screen projection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .dto import AxisRange, Point
from .errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Viewport:
    """A rectangular plot area mapped onto x/y data ranges.

    Screen y grows downwards, so `y_range.min` sits on the bottom edge. A
    degenerate range maps every value onto the left/bottom edge.

    Attributes:
        width: Plot width in screen units (> 0).
        height: Plot height in screen units (> 0).
        x_range: Data domain shown horizontally.
        y_range: Data domain shown vertically.
    """

    width: float
    height: float
    x_range: AxisRange
    y_range: AxisRange

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidArgumentError(
                argument="Viewport",
                reason=f"width and height must be positive, got {self.width}x{self.height}",
            )

    @property
    def baseline(self) -> float:
        """Screen y of the bottom edge."""

        return self.height

    def to_screen(self, point: Point) -> Point:
        return Point(
            x=self.x_range.fraction(point.x) * self.width,
            y=self.height - self.y_range.fraction(point.y) * self.height,
            label=point.label,
        )

    def project(self, points: Iterable[Point]) -> tuple[Point, ...]:
        return tuple(self.to_screen(point) for point in points)
