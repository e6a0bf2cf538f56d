from __future__ import annotations

import logging
import math
import numbers

from .config import DEFAULT_SIZE, ArcStyle
from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)


def _positive(name: str, size) -> float:
    if isinstance(size, bool) or not isinstance(size, numbers.Real):
        raise InvalidConfiguration(f"{name} must be a number", **{name: size})
    if not math.isfinite(size) or size <= 0:
        raise InvalidConfiguration(f"{name} must be a positive finite number", **{name: size})
    return size


def magnitude(default_size: float, requested_size: float) -> float:
    """Ratio of the larger size to the smaller one (always >= 1)."""
    default_size = _positive("default_size", default_size)
    requested_size = _positive("requested_size", requested_size)
    return max(default_size, requested_size) / min(default_size, requested_size)


def resolve(base: ArcStyle, requested_size=None, default_size: float = DEFAULT_SIZE) -> ArcStyle:
    """Rescale ``base`` (designed for ``default_size``) to ``requested_size``.

    ``None`` or the default size returns ``base`` itself. A smaller canvas
    divides every field by the magnitude, a larger one multiplies.
    """
    if requested_size is None:
        return base

    factor = magnitude(default_size, requested_size)
    if requested_size == default_size:
        return base

    if requested_size < default_size:
        scaled = base.scaled(1 / factor)
    else:
        scaled = base.scaled(factor)

    for name, value in scaled.as_dict().items():
        if not math.isfinite(value) or value <= 0:
            raise InvalidConfiguration(
                "rescaling produced an unusable value",
                field=name, value=value, requested_size=requested_size,
            )

    logger.debug("scaled arc style from %s to %s (magnitude %.4f)", default_size, requested_size, factor)
    return scaled
