"""Error taxonomy for gauge initialization and drawing.

Every error is fatal to the call that raised it; nothing is retried or
recovered internally.
"""

from __future__ import annotations


class GaugeError(Exception):
    """Base error. ``kind`` names the failure, ``context`` carries the details."""

    def __init__(self, message: str, **context):
        super().__init__(message)
        self.kind = type(self).__name__
        self.context = context

    def __str__(self) -> str:
        base = super().__str__()
        if not self.context:
            return base
        details = ", ".join(f"{k}={v!r}" for k, v in sorted(self.context.items()))
        return f"{base} ({details})"


class MissingDependency(GaugeError):
    """The requested drawing-surface provider is not available."""


class MissingContainer(GaugeError):
    """The target container could not be located."""


class MissingScoreData(GaugeError):
    """``draw`` was called without a score payload."""


class InvalidScoreData(GaugeError):
    """Score payload is malformed, incomplete or out of range."""


class InvalidConfiguration(GaugeError):
    """Canvas or arc configuration cannot produce a drawable gauge."""
