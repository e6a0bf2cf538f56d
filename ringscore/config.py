from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

from .errors import InvalidConfiguration

# -----------------------
# Canvas
# -----------------------
DEFAULT_CONTAINER = "canvas"
DEFAULT_SIZE = 300

# -----------------------
# Categories
# -----------------------
# Draw order. Earlier inner categories sit on larger radii; total is drawn last.
CATEGORY_ORDER = ("lifestyle", "mental", "physical", "nutrition", "total")
TOTAL = "total"
SCORE_SPAN = 100

# -----------------------
# Colors
# -----------------------
COLORS = {
    "physical": "#FFCC00",
    "nutrition": "#99CC00",
    "mental": "#FF9900",
    "lifestyle": "#FF3300",
    "total": "#46BFEC",
}
COLOR_TRACK = "#FFFFFF"
COLOR_LABEL = "#666666"
COLOR_GLOW = "#000000"

# -----------------------
# Label
# -----------------------
LABEL_FONT_FAMILY = "Sanuk-BlackSCRegular"
LABEL_FONT_WEIGHT = "bold"


@dataclass(frozen=True)
class CanvasConfig:
    container_id: str = DEFAULT_CONTAINER
    size: float | None = None

    @property
    def resolved_size(self) -> float:
        return DEFAULT_SIZE if self.size is None else self.size

    @property
    def center(self) -> float:
        return self.resolved_size / 2


@dataclass(frozen=True)
class ArcStyle:
    """Radii and widths of the gauge, in canvas units.

    The defaults describe the 300-unit reference canvas; use
    ``ringscore.scale.resolve`` to get the values for any other size.
    """

    total_track_width: float = 35
    total_arc_width: float = 38
    inner_arc_width: float = 10
    inner_arc_radius: float = 80
    total_arc_radius: float = 100
    text_size: float = 30
    decrease_by: float = 10

    def scaled(self, factor: float) -> ArcStyle:
        values = {f.name: getattr(self, f.name) * factor for f in fields(self)}
        return replace(self, **values)

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


BASE_ARC_STYLE = ArcStyle()


def _check_size(size) -> float | None:
    if size is None:
        return None
    if isinstance(size, bool) or not isinstance(size, numbers.Real):
        raise InvalidConfiguration("canvas size must be a number", size=size)
    if not math.isfinite(size) or size <= 0:
        raise InvalidConfiguration("canvas size must be a positive finite number", size=size)
    return size


def canvas_config(config=None) -> CanvasConfig:
    """Coerce ``None``, a mapping or a ``CanvasConfig`` into a validated ``CanvasConfig``.

    Mappings accept ``container_id`` (or ``container``) and ``size``.
    """
    if config is None:
        return CanvasConfig()
    if isinstance(config, CanvasConfig):
        container_id, size = config.container_id, config.size
    elif isinstance(config, Mapping):
        container_id = config.get("container_id") or config.get("container") or DEFAULT_CONTAINER
        size = config.get("size")
    else:
        raise InvalidConfiguration("unsupported canvas configuration", config=config)

    if not isinstance(container_id, str) or not container_id:
        raise InvalidConfiguration("container id must be a non-empty string", container_id=container_id)
    return CanvasConfig(container_id=container_id, size=_check_size(size))
