"""Unit conversion helpers for DrawingML measurements."""
from __future__ import annotations

EMU_PER_INCH = 914400
EMU_PER_CENTIMETER = 360000
EMU_PER_MILLIMETER = 36000
EMU_PER_POINT = 12700
POINTS_PER_INCH = 72
TWIPS_PER_POINT = 20


def emu_to_points(value: int) -> float:
    """Convert English Metric Units to typographic points."""
    return (value / EMU_PER_INCH) * POINTS_PER_INCH


def twips_to_points(value: float) -> float:
    """Convert twips (1/20th of a point) to points."""
    return value / TWIPS_PER_POINT
