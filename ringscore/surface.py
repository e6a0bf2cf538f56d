"""Drawing surfaces and the host containers they are mounted into.

A ``Document`` stands in for the host page: it maps container ids to
``Container`` objects whose ``children`` are surfaces or markup nodes.
"""

from __future__ import annotations

import html
import logging
from pathlib import Path

from .errors import MissingDependency
from .geometry import arc_path, arc_points, fmt_number

logger = logging.getLogger(__name__)


# -----------------------
# Host model
# -----------------------
class MarkupNode:
    def __init__(self, markup: str):
        self.markup = markup

    def to_markup(self) -> str:
        return self.markup


class Container:
    def __init__(self, container_id: str):
        self.id = container_id
        self.children = []
        self.owner = None

    def has_children(self) -> bool:
        return bool(self.children)

    def append(self, child):
        self.children.append(child)
        return child

    def clear(self):
        self.children.clear()

    def to_markup(self) -> str:
        parts = [c.to_markup() for c in self.children if hasattr(c, "to_markup")]
        return f'<div id="{html.escape(self.id)}">' + "\n".join(parts) + "</div>"


class Document:
    def __init__(self, *container_ids):
        self.containers = {}
        for cid in container_ids:
            self.add(cid)

    def add(self, container_id: str) -> Container:
        return self.containers.setdefault(container_id, Container(container_id))

    def get(self, container_id: str):
        return self.containers.get(container_id)

    def __contains__(self, container_id):
        return container_id in self.containers


DOCUMENT = Document("canvas")


# -----------------------
# SVG
# -----------------------
class SvgSurface:
    def __init__(self, size: float):
        self.size = size
        self.elements = []

    def clear(self):
        self.elements.clear()

    def arc(self, cx, cy, value, total, radius, stroke, width, opacity=1.0):
        d = arc_path(cx, cy, value, total, radius)
        attrs = f'd="{d}" fill="none" stroke="{stroke}" stroke-width="{fmt_number(width)}"'
        if opacity < 1:
            attrs += f' stroke-opacity="{fmt_number(opacity)}"'
        self.elements.append(f"<path {attrs}/>")

    def circle(self, x, y, r, fill):
        self.elements.append(
            f'<circle cx="{fmt_number(x)}" cy="{fmt_number(y)}" r="{fmt_number(r)}" fill="{fill}" stroke="none"/>'
        )

    def text(self, x, y, value, size, fill, weight="normal", family="sans-serif"):
        self.elements.append(
            f'<text x="{fmt_number(x)}" y="{fmt_number(y)}" text-anchor="middle" dominant-baseline="central" '
            f'font-size="{fmt_number(size)}" font-weight="{weight}" font-family="{html.escape(family)}" '
            f'fill="{fill}">{html.escape(str(value))}</text>'
        )

    def to_markup(self) -> str:
        s = fmt_number(self.size)
        svg = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" viewBox="0 0 {s} {s}">']
        svg.extend(self.elements)
        svg.append("</svg>")
        return "\n".join(svg)

    def save(self, path):
        path = Path(path)
        path.write_text(self.to_markup(), encoding="utf-8")
        return path


# -----------------------
# pygame
# -----------------------
def _load_pygame():
    try:
        import pygame
    except ImportError as exc:
        raise MissingDependency("pygame is required for the raster backend", backend="pygame") from exc
    return pygame


class PygameSurface:
    """Raster surface backed by an off-screen ``pygame.Surface``; no display needed."""

    def __init__(self, size: float):
        self.pygame = _load_pygame()
        self.size = size
        px = max(1, int(round(size)))
        self.surface = self.pygame.Surface((px, px), self.pygame.SRCALPHA)

    def clear(self):
        self.surface.fill((0, 0, 0, 0))

    def _color(self, value, opacity=1.0):
        color = self.pygame.Color(value)
        color.a = int(round(opacity * 255))
        return color

    def arc(self, cx, cy, value, total, radius, stroke, width, opacity=1.0):
        points = arc_points(cx, cy, value, total, radius)
        thickness = max(1, int(round(width)))
        if opacity >= 1:
            self.pygame.draw.lines(self.surface, self._color(stroke), False, points, thickness)
            return
        layer = self.pygame.Surface(self.surface.get_size(), self.pygame.SRCALPHA)
        self.pygame.draw.lines(layer, self._color(stroke, opacity), False, points, thickness)
        self.surface.blit(layer, (0, 0))

    def circle(self, x, y, r, fill):
        self.pygame.draw.circle(self.surface, self._color(fill), (x, y), max(1, int(round(r))))

    def text(self, x, y, value, size, fill, weight="normal", family=None):
        if not self.pygame.font.get_init():
            self.pygame.font.init()
        font = self.pygame.font.SysFont(family, max(1, int(round(size))), bold=(weight == "bold"))
        img = font.render(str(value), True, self._color(fill))
        self.surface.blit(img, img.get_rect(center=(x, y)))

    def save(self, path):
        path = Path(path)
        self.pygame.image.save(self.surface, str(path))
        return path


PROVIDERS = {
    "svg": SvgSurface,
    "pygame": PygameSurface,
}


def get_provider(name: str):
    """Surface factory for ``name``; raises ``MissingDependency`` if unusable."""
    try:
        factory = PROVIDERS[name]
    except KeyError:
        raise MissingDependency("unknown drawing-surface provider", backend=name) from None
    if factory is PygameSurface:
        _load_pygame()
    logger.debug("using %s drawing surface", name)
    return factory
