"""Unit tests for pie/donut arc layout."""

from __future__ import annotations

import math

import pytest

from chartlayout.arcs import angle_at_offset, label_anchors, layout, percentages, segment_at_angle
from chartlayout.dto import Segment
from chartlayout.errors import InvalidArgumentError

pytestmark = pytest.mark.unit


def test_layout_sweeps_are_proportional_and_consecutive() -> None:
    """Sweeps follow value shares; starts accumulate in input order."""

    segments = (Segment("a", 1.0), Segment("b", 1.0), Segment("c", 2.0))
    spans = layout(segments)
    assert [span.sweep_angle for span in spans] == [90.0, 90.0, 180.0]
    assert [span.start_angle for span in spans] == [0.0, 90.0, 180.0]
    assert [span.segment for span in spans] == list(segments)


def test_layout_sweeps_sum_to_full_circle() -> None:
    """Sweeps add up to 360 degrees for awkward shares."""

    segments = [Segment(label=str(idx), value=value) for idx, value in enumerate((3.0, 7.1, 0.0, 1.9, 13.37, 2.2))]
    spans = layout(segments)
    assert sum(span.sweep_angle for span in spans) == pytest.approx(360.0, abs=1e-4)


def test_layout_order_is_significant() -> None:
    """The same values in another order yield a different layout."""

    forward = layout([Segment("a", 1.0), Segment("c", 2.0)])
    backward = layout([Segment("c", 2.0), Segment("a", 1.0)])
    assert forward[0].sweep_angle == pytest.approx(120.0)
    assert backward[0].sweep_angle == pytest.approx(240.0)


def test_layout_progress_scales_sweeps(quarter_segments: tuple[Segment, ...]) -> None:
    spans = layout(quarter_segments, progress=0.5)
    assert [span.sweep_angle for span in spans] == [45.0, 45.0, 45.0, 45.0]


def test_layout_rejects_all_zero_segments() -> None:
    """A zero total has no well-defined layout."""

    with pytest.raises(InvalidArgumentError, match="positive"):
        layout([Segment("a", 0.0), Segment("b", 0.0)])
    with pytest.raises(InvalidArgumentError):
        layout([])


def test_layout_rejects_negative_values() -> None:
    with pytest.raises(InvalidArgumentError, match="negative"):
        layout([Segment("a", 2.0), Segment("b", -1.0)])


def test_zero_value_segment_has_zero_sweep() -> None:
    spans = layout([Segment("a", 1.0), Segment("z", 0.0), Segment("b", 1.0)])
    assert spans[1].sweep_angle == 0.0
    assert spans[1].start_angle == 180.0


def test_segment_at_angle_inverts_layout() -> None:
    """Every angle strictly inside a span resolves to that span's segment."""

    segments = [Segment(label=str(idx), value=value) for idx, value in enumerate((1.0, 1.0, 1.0, 0.5, 4.25))]
    for span in layout(segments):
        for fraction in (0.01, 0.5, 0.99):
            angle = span.start_angle + span.sweep_angle * fraction
            assert segment_at_angle(segments, angle) == span.segment


def test_segment_at_angle_skips_zero_width_segments() -> None:
    """A zero-width segment never claims its boundary angle."""

    segments = [Segment("a", 1.0), Segment("z", 0.0), Segment("b", 1.0)]
    assert segment_at_angle(segments, 180.0) == Segment("b", 1.0)
    assert segment_at_angle(segments, 45.0) == Segment("a", 1.0)


def test_segment_at_angle_normalises_and_closes_circle() -> None:
    segments = [Segment("a", 1.0), Segment("b", 1.0)]
    assert segment_at_angle(segments, 360.0) == Segment("a", 1.0)
    assert segment_at_angle(segments, -90.0) == Segment("b", 1.0)
    assert segment_at_angle(segments, 359.9999999) == Segment("b", 1.0)


def test_percentages() -> None:
    assert percentages([Segment("a", 1.0), Segment("b", 3.0)]) == (25.0, 75.0)


def test_angle_at_offset_runs_clockwise_from_three_oclock() -> None:
    """Screen-space offsets map to layout angles (y down means clockwise)."""

    assert angle_at_offset(1.0, 0.0) == 0.0
    assert angle_at_offset(0.0, 1.0) == pytest.approx(90.0)
    assert angle_at_offset(-1.0, 0.0) == pytest.approx(180.0)
    assert angle_at_offset(0.0, -1.0) == pytest.approx(270.0)


def test_angle_at_offset_respects_disk_and_donut_hole() -> None:
    assert angle_at_offset(2.0, 0.0) is None
    assert angle_at_offset(0.1, 0.0, donut_ratio=0.5) is None
    assert angle_at_offset(0.75, 0.0, donut_ratio=0.5) == 0.0
    with pytest.raises(InvalidArgumentError, match="donut_ratio"):
        angle_at_offset(0.5, 0.0, donut_ratio=1.5)


def test_label_anchors_sit_mid_arc(quarter_segments: tuple[Segment, ...]) -> None:
    """Labels sit at the middle angle of each arc at the pie label radius."""

    anchors = label_anchors(layout(quarter_segments))
    assert len(anchors) == 4
    first = anchors[0]
    assert first.text == "25.0%"
    assert first.x == pytest.approx(0.7 * math.cos(math.radians(45.0)))
    assert first.y == pytest.approx(0.7 * math.sin(math.radians(45.0)))


def test_label_anchors_skip_narrow_arcs_and_use_donut_ring() -> None:
    spans = layout([Segment("big", 100.0), Segment("tiny", 1.0)])
    anchors = label_anchors(spans, donut_ratio=0.6)
    assert [anchor.segment.label for anchor in anchors] == ["big"]
    assert math.hypot(anchors[0].x, anchors[0].y) == pytest.approx(0.8)
