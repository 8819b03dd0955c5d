"""Axis-aligned rectangles and small numeric helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    def collides(self, other: Rect) -> bool:
        """True when the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to ``[low, high]``; ``high`` wins if the bounds cross."""
    result = low if value < low else value
    return high if result > high else result