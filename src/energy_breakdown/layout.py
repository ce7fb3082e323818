"""Label rotation and bottom margin as a function of the selected column count."""

from __future__ import annotations

from dataclasses import dataclass

# (max column count, rotation in degrees); larger counts use MAX_ROTATION.
ROTATION_STEPS: tuple[tuple[int, float], ...] = (
    (6, 0.0),
    (10, 25.0),
    (14, 45.0),
    (20, 60.0),
    (26, 75.0),
)
MAX_ROTATION = 89.5

FLAT_BOTTOM_MARGIN = 30
ROTATED_BOTTOM_MARGIN = 50


@dataclass(frozen=True, slots=True)
class LabelLayout:
    rotation: float
    bottom_margin: int


def rotation_for(count: int) -> float:
    for upper, angle in ROTATION_STEPS:
        if count <= upper:
            return angle
    return MAX_ROTATION


def bottom_margin_for(angle: float) -> int:
    """All rotated labels share one margin; only flat labels get the smaller one."""
    return FLAT_BOTTOM_MARGIN if angle == 0 else ROTATED_BOTTOM_MARGIN


def layout_for(count: int) -> LabelLayout:
    angle = rotation_for(count)
    return LabelLayout(rotation=angle, bottom_margin=bottom_margin_for(angle))


__all__ = [
    "LabelLayout",
    "MAX_ROTATION",
    "bottom_margin_for",
    "layout_for",
    "rotation_for",
]
