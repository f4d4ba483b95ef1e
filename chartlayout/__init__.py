"""Pure chart layout package.

This package turns plain numeric data into plain geometric descriptors (axis
ranges, histogram buckets, path commands, arc spans, radar vertices, bar
rectangles). It must not import any GUI or web framework and performs no I/O
beyond optional settings loading.
"""

import logging

from .dto import (
    ArcSpan,
    AxisRange,
    BarRect,
    ClosePath,
    CubicTo,
    CurvePath,
    LabelAnchor,
    LineTo,
    MoveTo,
    Point,
    RegressionLine,
    Segment,
    Series,
    SeriesSummary,
)
from .errors import InvalidArgumentError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArcSpan",
    "AxisRange",
    "BarRect",
    "ClosePath",
    "CubicTo",
    "CurvePath",
    "InvalidArgumentError",
    "LabelAnchor",
    "LineTo",
    "MoveTo",
    "Point",
    "RegressionLine",
    "Segment",
    "Series",
    "SeriesSummary",
]
