from __future__ import annotations

import colorsys
import json
import logging
import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass

from .config import CATEGORY_ORDER, COLORS, SCORE_SPAN, TOTAL, ArcStyle
from .errors import InvalidConfiguration, InvalidScoreData, MissingScoreData

logger = logging.getLogger(__name__)

# Glow pass: a faint dark arc nudged right to fake a drop shadow.
GLOW_OFFSET = 4
GLOW_WIDTH = 1
GLOW_OPACITY = 0.05

TICK_DOT_RADIUS = 1
TICK_DENSITY_PAD = 30
DEFAULT_TICK_COMPENSATION = (2, 3)


@dataclass(frozen=True)
class RingSpec:
    category: str
    stroke_color: str
    stroke_width: float
    draw_value: float
    radius: float
    has_glow: bool
    glow_value: float | None = None


@dataclass(frozen=True)
class TickRingSpec:
    radius: float
    density: int
    compensation: float
    color: str


# -----------------------
# Scores
# -----------------------
def validate_scores(scores) -> dict:
    """Return the payload as a ``{category: float}`` dict or raise."""
    if scores is None:
        raise MissingScoreData("a score payload is required")

    if isinstance(scores, (str, bytes)):
        try:
            scores = json.loads(scores)
        except ValueError as exc:
            raise InvalidScoreData("score payload is not valid JSON", error=str(exc)) from exc

    if not isinstance(scores, Mapping):
        raise InvalidScoreData("score payload must be a mapping", type=type(scores).__name__)

    missing = [c for c in CATEGORY_ORDER if c not in scores]
    unknown = sorted(str(k) for k in scores if k not in CATEGORY_ORDER)
    if missing or unknown:
        raise InvalidScoreData("score payload keys do not match categories", missing=missing, unknown=unknown)

    out = {}
    for category in CATEGORY_ORDER:
        value = scores[category]
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidScoreData("score must be numeric", category=category, value=value)
        if not math.isfinite(value) or not 0 <= value <= SCORE_SPAN:
            raise InvalidScoreData(f"score must be within 0..{SCORE_SPAN}", category=category, value=value)
        out[category] = value
    return out


# -----------------------
# Rings
# -----------------------
def plan(scores, style: ArcStyle, order=CATEGORY_ORDER, colors=COLORS) -> list:
    """One ``RingSpec`` per category, in draw order.

    Inner categories start at ``style.inner_arc_radius`` and step inwards by
    ``style.decrease_by``; ``total`` sits on ``style.total_arc_radius``.
    """
    running_radius = style.inner_arc_radius
    rings = []

    for category in order:
        try:
            color = colors[category]
        except KeyError:
            raise InvalidConfiguration("no color for category", category=category) from None
        score = scores[category]

        if category == TOTAL:
            rings.append(RingSpec(
                category=category,
                stroke_color=color,
                stroke_width=style.total_arc_width,
                draw_value=score,
                radius=style.total_arc_radius,
                has_glow=False,
            ))
            continue

        radius = running_radius
        running_radius -= style.decrease_by
        rings.append(RingSpec(
            category=category,
            stroke_color=color,
            stroke_width=style.inner_arc_width,
            draw_value=1 if score == 0 else score,
            radius=radius,
            has_glow=True,
            glow_value=0 if score == 0 else score - 1,
        ))

    logger.debug("planned %d rings", len(rings))
    return rings


# -----------------------
# Ticks
# -----------------------
def tick_color(radius: float) -> str:
    r, g, b = colorsys.hsv_to_rgb((round(radius) / 200) % 1.0, 1.0, 0.75)
    return "#{:02X}{:02X}{:02X}".format(*(int(round(c * 255)) for c in (r, g, b)))


def tick_compensation(error_compensation=None) -> tuple:
    """``None`` -> defaults, a number ``e`` -> ``(e, e + 1)``, a pair -> as given."""
    if error_compensation is None:
        return DEFAULT_TICK_COMPENSATION
    if isinstance(error_compensation, (tuple, list)):
        if len(error_compensation) != 2:
            raise InvalidConfiguration("error compensation pair must have two values", value=error_compensation)
        pair = tuple(error_compensation)
    else:
        pair = (error_compensation,)

    for value in pair:
        if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
            raise InvalidConfiguration("error compensation must be a finite number", value=error_compensation)

    if len(pair) == 1:
        return error_compensation, error_compensation + 1
    return pair


def _density(value: float) -> int:
    # round first so float noise from rescaling does not add a tick
    return math.ceil(round(value, 6))


def plan_ticks(style: ArcStyle, center: float, error_compensation=None) -> list:
    outer_comp, inner_comp = tick_compensation(error_compensation)
    outer_radius = center - style.total_track_width
    inner_radius = center - style.total_track_width * 2
    return [
        TickRingSpec(
            radius=outer_radius,
            density=_density(style.total_arc_radius + TICK_DENSITY_PAD),
            compensation=outer_comp,
            color=tick_color(outer_radius),
        ),
        TickRingSpec(
            radius=inner_radius,
            density=_density(style.total_arc_radius),
            compensation=inner_comp,
            color=tick_color(inner_radius),
        ),
    ]
