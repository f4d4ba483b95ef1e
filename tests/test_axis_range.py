"""Unit tests for axis range computation."""

from __future__ import annotations

import pytest

from chartlayout.axis import axis_ticks, compute_range, compute_series_range, compute_x_range
from chartlayout.dto import AxisRange, Point, Series
from chartlayout.errors import InvalidArgumentError

pytestmark = pytest.mark.unit


def _points(*ys: float) -> list[Point]:
    return [Point(x=float(idx), y=y) for idx, y in enumerate(ys)]


def test_compute_range_empty_input_is_zero_range() -> None:
    """Empty input should resolve to (0, 0) without raising."""

    assert compute_range([]) == AxisRange(min=0.0, max=0.0)


def test_compute_range_uses_data_extent() -> None:
    """Min/max should come from the y values."""

    assert compute_range(_points(2.0, 5.0, 3.0)) == AxisRange(min=2.0, max=5.0)


def test_compute_range_override_wins() -> None:
    """An explicit override is returned unchanged."""

    override = AxisRange(min=-1.0, max=1.0)
    assert compute_range(_points(2.0, 5.0), override=override, headroom=True) is override


def test_compute_range_force_min_zero_ignores_data_minimum() -> None:
    """force_min_zero pins the lower bound to 0."""

    assert compute_range(_points(2.0, 5.0), force_min_zero=True) == AxisRange(min=0.0, max=5.0)


def test_compute_range_force_min_zero_with_negative_data_keeps_order() -> None:
    """All-negative data should not invert the range when pinned to zero."""

    assert compute_range(_points(-4.0, -1.0), force_min_zero=True) == AxisRange(min=0.0, max=0.0)


def test_compute_range_headroom_adds_ten_percent_of_span() -> None:
    """Headroom expands the maximum by 10% of the span."""

    result = compute_range(_points(2.0, 5.0, 3.0), headroom=True)
    assert result.min == 2.0
    assert result.max == pytest.approx(5.3)


def test_compute_range_headroom_uses_clamped_minimum() -> None:
    """The headroom span is measured from the clamped minimum."""

    result = compute_range(_points(2.0, 5.0), force_min_zero=True, headroom=True, headroom_ratio=0.2)
    assert result.max == pytest.approx(6.0)


def test_compute_series_range_spans_all_series() -> None:
    """Several series share one range."""

    series = [Series(name="a", points=tuple(_points(1.0, 2.0))), Series(name="b", points=tuple(_points(-3.0, 7.0)))]
    assert compute_series_range(series) == AxisRange(min=-3.0, max=7.0)


def test_compute_series_range_forwards_range_options() -> None:
    """Zero pinning and headroom apply to the combined series range."""

    series = [Series(name="a", points=tuple(_points(2.0, 4.0))), Series(name="b", points=tuple(_points(6.0)))]
    result = compute_series_range(series, force_min_zero=True, headroom=True, headroom_ratio=0.5)
    assert result == AxisRange(min=0.0, max=9.0)
    assert compute_series_range(series, override=AxisRange(1.0, 2.0)) == AxisRange(1.0, 2.0)


def test_compute_x_range() -> None:
    """x range covers the x extent, and is (0, 0) when empty."""

    assert compute_x_range([Point(x=3.0, y=0.0), Point(x=-1.0, y=0.0)]) == AxisRange(min=-1.0, max=3.0)
    assert compute_x_range([]) == AxisRange(min=0.0, max=0.0)


def test_axis_ticks_are_evenly_spaced() -> None:
    """Five steps produce six tick values."""

    assert axis_ticks(AxisRange(min=0.0, max=10.0)) == (0.0, 2.0, 4.0, 6.0, 8.0, 10.0)


def test_axis_ticks_rejects_zero_steps() -> None:
    with pytest.raises(InvalidArgumentError, match="steps"):
        axis_ticks(AxisRange(min=0.0, max=1.0), steps=0)


def test_axis_range_rejects_inverted_bounds() -> None:
    """AxisRange enforces max >= min."""

    with pytest.raises(InvalidArgumentError):
        AxisRange(min=5.0, max=1.0)


def test_axis_range_fraction_handles_degenerate_span() -> None:
    """A zero-width range maps every value to 0 instead of dividing by zero."""

    assert AxisRange(min=3.0, max=3.0).fraction(3.0) == 0.0
    assert AxisRange(min=0.0, max=4.0).fraction(1.0) == 0.25
