"""Exception hierarchy for explodeview."""

from __future__ import annotations


class ExplodeViewError(Exception):
    """Base class for all explodeview errors."""


class ConfigurationError(ExplodeViewError, ValueError):
    """
    Invalid setup value: non-positive dimension, span, speed or duration,
    cosmetic hint outside [0, 1], duplicate part id.

    Raised at construction/assignment time, never mid-animation.
    """


class LayoutError(ExplodeViewError):
    """Generated layout violates a geometric rule."""


class FlushFitError(LayoutError):
    """Two parts designed to share a face do not meet exactly."""

    def __init__(self, joint, detail: str):
        self.joint = joint
        self.detail = detail
        super().__init__(f"{joint}: {detail}")
