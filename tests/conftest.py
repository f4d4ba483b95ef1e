"""Pytest configuration shared across the chartlayout test suite."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from chartlayout.dto import Point, Segment, Series


@pytest.fixture
def zigzag_points() -> tuple[Point, ...]:
    """Return a small three-point series used by path tests."""

    return (Point(x=0.0, y=0.0), Point(x=1.0, y=1.0), Point(x=2.0, y=0.0))


@pytest.fixture
def quarter_segments() -> tuple[Segment, ...]:
    """Return four equal pie segments."""

    return tuple(Segment(label=label, value=1.0) for label in ("a", "b", "c", "d"))


@pytest.fixture
def radar_series() -> Series:
    """Return a radar series missing the `c` category."""

    return Series(
        name="team",
        points=(
            Point(x=0.0, y=10.0, label="a"),
            Point(x=1.0, y=5.0, label="b"),
            Point(x=3.0, y=10.0, label="d"),
        ),
    )


SPEED_MARKERS = ("unit", "integration")


def _speed_markers(item: pytest.Item) -> list[str]:
    return [name for name in SPEED_MARKERS if item.get_closest_marker(name) is not None]


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Reject tests that do not carry exactly one of `unit` or `integration`.

    Pure layout tests are `unit`; anything touching files, environment
    variables or logging handlers is `integration`.
    """

    offenders = [
        f"{item.nodeid} has {markers or 'no speed marker'}"
        for item in items
        if len(markers := _speed_markers(item)) != 1
    ]
    if offenders:
        listing = "\n".join(f"  {line}" for line in offenders)
        raise pytest.UsageError(f"Mark every test with exactly one of {SPEED_MARKERS}:\n{listing}")
