"""Classification of correlation coefficients into display bands."""

from __future__ import annotations

from ..types import Confidence, Direction, Interpretation, Strength

# Conventional correlation strength bands, compared with ``>=``.
STRONG_THRESHOLD = 0.8
MODERATE_THRESHOLD = 0.5
WEAK_THRESHOLD = 0.3

DESCRIPTIONS = {
    "strong": "These indicators move closely together",
    "moderate": "These indicators show some relationship",
    "weak": "These indicators show a slight relationship",
    "none": "These indicators move independently",
}


def direction_of(r: float) -> Direction:
    if r > 0:
        return Direction.SAME
    if r < 0:
        return Direction.OPPOSITE
    return Direction.NONE


def confidence_of(r: float) -> Confidence:
    abs_r = abs(r)
    if abs_r >= MODERATE_THRESHOLD:
        return Confidence.HIGH
    if abs_r >= WEAK_THRESHOLD:
        return Confidence.MEDIUM
    return Confidence.LOW


def r_squared(r: float) -> float:
    """Return the coefficient of determination for ``r``."""

    return r * r


def classify_strength(r: float) -> Strength:
    """Map ``r`` onto one of the seven strength labels.

    The first band whose lower bound ``|r|`` reaches wins; the sign of ``r``
    selects the positive or negative label.
    """

    abs_r = abs(r)
    positive = r > 0
    if abs_r >= STRONG_THRESHOLD:
        return Strength.STRONG_POSITIVE if positive else Strength.STRONG_NEGATIVE
    if abs_r >= MODERATE_THRESHOLD:
        return Strength.MODERATE_POSITIVE if positive else Strength.MODERATE_NEGATIVE
    if abs_r >= WEAK_THRESHOLD:
        return Strength.WEAK_POSITIVE if positive else Strength.WEAK_NEGATIVE
    return Strength.NONE


def describe(strength: Strength) -> str:
    if strength in (Strength.STRONG_POSITIVE, Strength.STRONG_NEGATIVE):
        return DESCRIPTIONS["strong"]
    if strength in (Strength.MODERATE_POSITIVE, Strength.MODERATE_NEGATIVE):
        return DESCRIPTIONS["moderate"]
    if strength in (Strength.WEAK_POSITIVE, Strength.WEAK_NEGATIVE):
        return DESCRIPTIONS["weak"]
    return DESCRIPTIONS["none"]


def interpret(r: float) -> Interpretation:
    """Return the strength, direction and description for ``r``."""

    strength = classify_strength(r)
    return Interpretation(
        strength=strength,
        direction=direction_of(r),
        description=describe(strength),
    )
