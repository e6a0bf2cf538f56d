"""Score gauge: concentric category rings over a total ring, track and tick marks.

How to use::

    gauge = ringscore.init({"container_id": "canvas", "size": 240})
    gauge.draw({"nutrition": 33, "physical": 0, "lifestyle": 0, "mental": 0, "total": 25})
    svg = gauge.surface.to_markup()
"""

from __future__ import annotations

import logging

from .config import BASE_ARC_STYLE, CATEGORY_ORDER, COLOR_GLOW, COLOR_TRACK, COLORS, SCORE_SPAN, canvas_config
from .errors import MissingContainer
from .geometry import tick_positions
from .labels import label_strategy
from .layout import GLOW_OFFSET, GLOW_OPACITY, GLOW_WIDTH, TICK_DOT_RADIUS, plan, plan_ticks, validate_scores
from .scale import resolve
from .surface import DOCUMENT, get_provider

logger = logging.getLogger(__name__)


def _label_text(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ScoreGauge:
    """Handle returned by ``init``; owns one container of a ``Document``."""

    def __init__(self, config=None, error_compensation=None, is_mobile=False, *,
                 document=None, backend="svg", compensate_redraw=False):
        self.canvas = canvas_config(config)
        self.style = resolve(BASE_ARC_STYLE, self.canvas.size)
        self.error_compensation = error_compensation
        self.is_mobile = bool(is_mobile)
        self.label = label_strategy(self.is_mobile, compensate_redraw)

        factory = get_provider(backend)

        document = DOCUMENT if document is None else document
        self.container = document.get(self.canvas.container_id)
        if self.container is None:
            raise MissingContainer("container not found", container_id=self.canvas.container_id)

        # no traces of a previous gauge may survive in the container
        self.redraw = self.container.has_children()
        if self.redraw:
            logger.warning("clearing %d stale node(s) from container %r",
                           len(self.container.children), self.container.id)
            self.container.clear()
        self.container.owner = self

        self.surface = factory(self.canvas.resolved_size)
        logger.debug("initialized gauge in %r (size=%s, backend=%s, mobile=%s)",
                     self.canvas.container_id, self.canvas.resolved_size, backend, self.is_mobile)

    @property
    def center(self) -> float:
        return self.canvas.center

    # -----------------------
    # Drawing passes
    # -----------------------
    def _draw_track(self):
        c = self.center
        self.surface.arc(c, c, SCORE_SPAN, SCORE_SPAN, self.style.total_arc_radius,
                         COLOR_TRACK, self.style.total_track_width)

    def _draw_ticks(self):
        c = self.center
        for spec in plan_ticks(self.style, c, self.error_compensation):
            for x, y in tick_positions(c, c, spec.radius, spec.density, spec.compensation):
                self.surface.circle(x, y, TICK_DOT_RADIUS, spec.color)

    def _draw_rings(self, scores):
        c = self.center
        rings = plan(scores, self.style, CATEGORY_ORDER, COLORS)
        for ring in rings:
            self.surface.arc(c, c, ring.draw_value, SCORE_SPAN, ring.radius,
                             ring.stroke_color, ring.stroke_width)
            if ring.has_glow and ring.glow_value > 0:
                self.surface.arc(c + GLOW_OFFSET, c, ring.glow_value, SCORE_SPAN, ring.radius,
                                 COLOR_GLOW, GLOW_WIDTH, opacity=GLOW_OPACITY)
        return rings

    def draw(self, scores=None) -> list:
        """Render ``scores`` and return the ring specs that were drawn."""
        if self.container.owner is not self:
            raise MissingContainer("container was claimed by a newer gauge", container_id=self.container.id)
        scores = validate_scores(scores)

        self.surface.clear()
        self.container.clear()
        self.container.append(self.surface)

        self._draw_track()
        self._draw_ticks()
        rings = self._draw_rings(scores)
        self.label.render_label(self.surface, self.container, _label_text(scores["total"]),
                                self.center, self.redraw, self.style.text_size)

        logger.debug("drew gauge in %r (total=%s)", self.container.id, scores["total"])
        return rings

    def to_markup(self) -> str:
        return self.container.to_markup()


def init(config=None, error_compensation=None, is_mobile=False, **kwargs) -> ScoreGauge:
    return ScoreGauge(config, error_compensation, is_mobile, **kwargs)
