"""Rectangle value type for resolved container geometry."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in absolute pixel space."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def to_array(self) -> NDArray[np.float64]:
        """Return [x, y, width, height] as a float64 array."""
        return np.array([self.x, self.y, self.width, self.height], dtype=np.float64)

    def to_box(self) -> tuple[float, float, float, float]:
        """Return (left, top, right, bottom), the form Pillow draws with."""
        return (self.x, self.y, self.right, self.bottom)
