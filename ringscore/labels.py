"""Center label strategies for the total score."""

from __future__ import annotations

import html

from .config import COLOR_LABEL, LABEL_FONT_FAMILY, LABEL_FONT_WEIGHT
from .surface import MarkupNode

# Vertical nudge used with the half-canvas redraw correction.
REDRAW_NUDGE = 3.5


class VectorTextLabel:
    """Draws the value as text on the surface itself.

    Some vector backends ignore the y coordinate of text drawn into a
    container that previously held a gauge. ``compensate_redraw`` opts into
    moving the label to ``center / 2 + 3.5`` on such redraws; it is off by
    default because every draw here starts from a freshly built surface.
    """

    def __init__(self, compensate_redraw: bool = False):
        self.compensate_redraw = compensate_redraw

    def position(self, center: float, redraw: bool) -> tuple:
        if redraw and self.compensate_redraw:
            return center, center / 2 + REDRAW_NUDGE
        return center, center

    def render_label(self, surface, container, value, position, redraw, text_size):
        x, y = self.position(position, redraw)
        surface.text(x, y, value, text_size, COLOR_LABEL, weight=LABEL_FONT_WEIGHT, family=LABEL_FONT_FAMILY)


class MarkupLabel:
    """Appends the value as plain markup next to the surface; positioned by the host's CSS."""

    def render_label(self, surface, container, value, position, redraw, text_size):
        markup = (
            '<div class="score-text-wrapper"><div class="score-text">'
            f"<p>{html.escape(str(value))}</p>"
            "</div></div>"
        )
        return container.append(MarkupNode(markup))


def label_strategy(is_mobile: bool, compensate_redraw: bool = False):
    if is_mobile:
        return MarkupLabel()
    return VectorTextLabel(compensate_redraw=compensate_redraw)
