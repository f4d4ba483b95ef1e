"""Tunable layout constants and their loader.

The module-level constants are the defaults every layout function uses.
Applications that want different values build a `LayoutSettings` (optionally
from a YAML file and `CHARTLAYOUT_*` environment variables) and pass the
fields to the layout calls explicitly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import InvalidArgumentError

HEADROOM_RATIO = 0.1
AXIS_TICK_STEPS = 5
BAR_SPACING_RATIO = 0.1
PIE_LABEL_RADIUS = 0.7
LABEL_MIN_SWEEP = 15.0
RADAR_LABEL_DISTANCE = 1.1
RADAR_RINGS = 5
MIN_ZOOM = 0.5
MAX_ZOOM = 5.0
MOVING_AVERAGE_WINDOW = 3

ENV_PREFIX = "CHARTLAYOUT_"


@dataclass(frozen=True, slots=True)
class LayoutSettings:
    """Bundle of layout tunables.

    Attributes:
        headroom_ratio: Fraction of the y span added above line-chart maxima.
        axis_tick_steps: Number of intervals between axis tick labels.
        bar_spacing_ratio: Share of the chart width reserved for bar gaps.
        pie_label_radius: Radius (unit disk) of pie percentage labels.
        label_min_sweep: Smallest sweep, in degrees, that receives a label.
        radar_label_distance: Radius (unit disk) of radar category labels.
        radar_rings: Number of concentric radar grid rings.
        min_zoom: Lower zoom clamp for the interaction view state.
        max_zoom: Upper zoom clamp for the interaction view state.
        moving_average_window: Default smoothing window.
    """

    headroom_ratio: float = HEADROOM_RATIO
    axis_tick_steps: int = AXIS_TICK_STEPS
    bar_spacing_ratio: float = BAR_SPACING_RATIO
    pie_label_radius: float = PIE_LABEL_RADIUS
    label_min_sweep: float = LABEL_MIN_SWEEP
    radar_label_distance: float = RADAR_LABEL_DISTANCE
    radar_rings: int = RADAR_RINGS
    min_zoom: float = MIN_ZOOM
    max_zoom: float = MAX_ZOOM
    moving_average_window: int = MOVING_AVERAGE_WINDOW

    def __post_init__(self) -> None:
        if self.min_zoom <= 0 or self.max_zoom < self.min_zoom:
            raise InvalidArgumentError(
                argument="zoom bounds",
                reason=f"expected 0 < min_zoom <= max_zoom, got {self.min_zoom}..{self.max_zoom}",
            )
        if self.headroom_ratio < 0:
            raise InvalidArgumentError(argument="headroom_ratio", reason="must be >= 0")
        if self.axis_tick_steps < 1 or self.radar_rings < 1:
            raise InvalidArgumentError(argument="step counts", reason="axis_tick_steps and radar_rings must be >= 1")


DEFAULT_SETTINGS = LayoutSettings()


def _env_float(name: str, *, default: float) -> float:
    """Parse a float environment variable.

    Args:
        name: Environment variable name.
        default: Value when the variable is not set.

    Returns:
        Parsed float value.
    """

    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        raise InvalidArgumentError(argument=name, reason=f"not a number: {raw!r}") from None


def _env_int(name: str, *, default: int) -> int:
    """Parse an integer environment variable.

    Args:
        name: Environment variable name.
        default: Value when the variable is not set.

    Returns:
        Parsed integer value.
    """

    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidArgumentError(argument=name, reason=f"not an integer: {raw!r}") from None


def _coerce(name: str, value: Any, *, kind: type) -> float | int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(argument=name, reason=f"expected a number, got {value!r}")
    if kind is int:
        if isinstance(value, float) and not value.is_integer():
            raise InvalidArgumentError(argument=name, reason=f"expected an integer, got {value!r}")
        return int(value)
    return float(value)


def load_settings(path: str | Path | None = None) -> LayoutSettings:
    """Load layout settings from an optional YAML file plus the environment.

    Precedence, lowest first: built-in defaults, the YAML mapping, then
    `CHARTLAYOUT_<FIELD>` environment variables (e.g.
    `CHARTLAYOUT_HEADROOM_RATIO=0.2`).

    Args:
        path: Optional YAML file holding a flat mapping of field names.

    Returns:
        A validated LayoutSettings.

    Raises:
        InvalidArgumentError: On unknown keys, non-numeric values, or values
            that violate the settings invariants.
    """

    known = [f.name for f in fields(LayoutSettings)]
    settings = DEFAULT_SETTINGS

    if path is not None:
        payload = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        if not isinstance(payload, dict):
            raise InvalidArgumentError(argument="settings file", reason="top level must be a mapping")
        unknown = sorted(set(payload) - set(known))
        if unknown:
            raise InvalidArgumentError(argument="settings file", reason=f"unknown keys: {', '.join(unknown)}")
        overrides: dict[str, Any] = {
            name: _coerce(name, value, kind=int if isinstance(getattr(settings, name), int) else float)
            for name, value in payload.items()
        }
        settings = replace(settings, **overrides)

    env_overrides: dict[str, Any] = {}
    for name in known:
        env_name = f"{ENV_PREFIX}{name.upper()}"
        current = getattr(settings, name)
        if isinstance(current, int):
            env_overrides[name] = _env_int(env_name, default=current)
        else:
            env_overrides[name] = _env_float(env_name, default=current)
    return replace(settings, **env_overrides)
