"""Arc and tick-mark geometry.

Angles are in degrees, 0 at 12 o'clock, increasing clockwise. Screen
coordinates: y grows downwards.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Angular shortfall of a "full" ring; a start == end arc would be degenerate.
FULL_CIRCLE_EPSILON = 0.01


def fmt_number(v: float) -> str:
    s = f"{v:.6f}".rstrip("0").rstrip(".")
    return "0" if s in ("-0", "") else s


def sweep_angle(value: float, total: float) -> float:
    if total <= 0:
        raise ValueError(f"total must be positive, got {total!r}")
    return 360.0 * value / total


def polar_to_xy(cx: float, cy: float, radius: float, alpha_deg: float) -> tuple[float, float]:
    a = math.radians(90.0 - alpha_deg)
    return cx + radius * math.cos(a), cy - radius * math.sin(a)


@dataclass(frozen=True)
class PathDescription:
    """Move + single elliptical-arc command pair."""

    commands: tuple
    full_circle: bool = False

    def __iter__(self):
        return iter(self.commands)

    def __len__(self):
        return len(self.commands)

    @property
    def start(self) -> tuple[float, float]:
        return self.commands[0][1], self.commands[0][2]

    @property
    def end(self) -> tuple[float, float]:
        return self.commands[-1][-2], self.commands[-1][-1]

    @property
    def large_arc(self) -> bool:
        return self.commands[-1][4] == 1

    @property
    def sweep(self) -> int:
        return self.commands[-1][5]

    def __str__(self) -> str:
        return " ".join(
            " ".join([cmd[0], *(fmt_number(v) for v in cmd[1:])]) for cmd in self.commands
        )


def arc_path(cx: float, cy: float, value: float, total: float, radius: float) -> PathDescription:
    alpha = sweep_angle(value, total)
    move = ("M", cx, cy - radius)

    if value == total:
        return PathDescription(
            (move, ("A", radius, radius, 0, 1, 1, cx - FULL_CIRCLE_EPSILON, cy - radius)),
            full_circle=True,
        )

    x, y = polar_to_xy(cx, cy, radius, alpha)
    large = 1 if alpha > 180 else 0
    return PathDescription((move, ("A", radius, radius, 0, large, 1, x, y)))


def arc_points(cx: float, cy: float, value: float, total: float, radius: float, steps=None) -> list:
    """Polyline approximation of ``arc_path`` for raster surfaces."""
    alpha = min(sweep_angle(value, total), 360.0)
    if steps is None:
        steps = max(2, int(math.ceil(alpha)))
    return [polar_to_xy(cx, cy, radius, alpha * i / steps) for i in range(steps + 1)]


class TickPositions:
    """``density`` points evenly spaced on a circle, in angular order.

    Iterating twice yields the same points.
    """

    def __init__(self, cx: float, cy: float, radius: float, density: int, compensation: float = 0):
        if density < 0:
            raise ValueError(f"density must be >= 0, got {density!r}")
        self.cx = cx
        self.cy = cy
        self.radius = radius + compensation
        self.density = int(density)

    def __len__(self):
        return self.density

    def __iter__(self):
        for i in range(self.density):
            yield polar_to_xy(self.cx, self.cy, self.radius, 360.0 / self.density * i)


def tick_positions(cx, cy, radius, density, compensation=0) -> TickPositions:
    return TickPositions(cx, cy, radius, density, compensation)
