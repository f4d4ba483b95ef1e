"""Explicit interaction state for an interactive chart view.

The layout functions are stateless; a view that supports selection, zoom and
pan keeps those values in a `ChartViewState` and passes them to the renderer
each frame. Every transition returns a new state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .dto import Point
from .settings import MAX_ZOOM, MIN_ZOOM


@dataclass(frozen=True, slots=True)
class ChartViewState:
    """Selection, zoom and pan state of a chart view.

    Attributes:
        selected_point: Currently selected point, if any.
        selected_series: Index of the series holding the selected point.
        tooltip_visible: Whether the renderer should show a tooltip.
        zoom_level: Horizontal zoom factor.
        pan_offset: Horizontal pan offset in screen units.
    """

    selected_point: Point | None = None
    selected_series: int | None = None
    tooltip_visible: bool = False
    zoom_level: float = 1.0
    pan_offset: float = 0.0

    def select_point(self, point: Point, series_index: int) -> ChartViewState:
        return replace(self, selected_point=point, selected_series=series_index, tooltip_visible=True)

    def deselect(self) -> ChartViewState:
        return replace(self, selected_point=None, selected_series=None, tooltip_visible=False)

    def zoom(
        self,
        delta: float,
        center: float,
        *,
        min_zoom: float = MIN_ZOOM,
        max_zoom: float = MAX_ZOOM,
    ) -> ChartViewState:
        """Apply a relative zoom around a screen position.

        Args:
            delta: Relative change; the new level is `zoom_level * (1 + delta)`.
            center: Screen x that should stay under the cursor.
            min_zoom: Lower clamp for the zoom level.
            max_zoom: Upper clamp for the zoom level.

        Returns:
            The updated state; unchanged when the clamped level does not move.
        """

        new_level = min(max(self.zoom_level * (1.0 + delta), min_zoom), max_zoom)
        if new_level == self.zoom_level:
            return self
        old_center = (center - self.pan_offset) / self.zoom_level
        new_center = (center - self.pan_offset) / new_level
        return replace(
            self,
            zoom_level=new_level,
            pan_offset=self.pan_offset + (new_center - old_center) * new_level,
        )

    def pan(self, delta: float) -> ChartViewState:
        return replace(self, pan_offset=self.pan_offset + delta)

    def reset(self) -> ChartViewState:
        """Restore the default zoom and pan, keeping the selection."""

        return replace(self, zoom_level=1.0, pan_offset=0.0)
