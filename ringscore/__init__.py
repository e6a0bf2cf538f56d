from .config import BASE_ARC_STYLE, CATEGORY_ORDER, COLORS, DEFAULT_SIZE, ArcStyle, CanvasConfig
from .errors import (
    GaugeError,
    InvalidConfiguration,
    InvalidScoreData,
    MissingContainer,
    MissingDependency,
    MissingScoreData,
)
from .gauge import ScoreGauge, init
from .geometry import arc_path, tick_positions
from .layout import RingSpec, plan
from .scale import resolve
from .surface import DOCUMENT, Container, Document

__all__ = [
    "ArcStyle", "BASE_ARC_STYLE", "CATEGORY_ORDER", "COLORS", "CanvasConfig", "Container",
    "DEFAULT_SIZE", "DOCUMENT", "Document", "GaugeError", "InvalidConfiguration",
    "InvalidScoreData", "MissingContainer", "MissingDependency", "MissingScoreData",
    "RingSpec", "ScoreGauge", "arc_path", "init", "plan", "resolve", "tick_positions",
]
