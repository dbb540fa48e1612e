# beam_analysis/kernel/geometry.py
"""Span validation shared by the analyzers."""

import math

from ..model import Beam


class InvalidGeometry(ValueError):
    """Raised when beam spans cannot produce a finite curve."""
    pass


def check_span(value: float, name: str) -> float:
    """
    Return value as float if it is a finite, positive length.

    Raises:
        InvalidGeometry: if value is not finite or <= 0
    """
    try:
        span = float(value)
    except (TypeError, ValueError):
        raise InvalidGeometry(f"{name} must be a number, got {value!r}")
    if not math.isfinite(span):
        raise InvalidGeometry(f"{name} must be finite, got {value}")
    if span <= 0:
        raise InvalidGeometry(f"{name} must be positive, got {value}")
    return span


def single_span_length(beam: Beam) -> float:
    """Span of a single-span beam; the secondary span is ignored."""
    return check_span(beam.primary_span, "primary_span")


def two_span_lengths(beam: Beam):
    """(l1, l2) of a two-span beam, both strictly positive."""
    l1 = check_span(beam.primary_span, "primary_span")
    l2 = check_span(beam.secondary_span, "secondary_span")
    return l1, l2
