"""Axis names used by rules and rule sets."""

from __future__ import annotations

from enum import Enum

from ..errors import InvalidAxis


class Axis(str, Enum):
    """One of the four resolved quantities of a container.

    Values compare equal to their lower-case names, so custom rules may
    test ``axis == "width"`` without importing this enum.
    """

    X = "x"
    Y = "y"
    WIDTH = "width"
    HEIGHT = "height"

    @classmethod
    def parse(cls, value: Axis | str) -> Axis:
        """Convert a name or alias to an Axis.

        Args:
            value: An Axis, or one of "x", "y", "width"/"w", "height"/"h"
                (case-insensitive)

        Returns:
            The matching Axis

        Raises:
            InvalidAxis: If the name is not recognised
        """
        if isinstance(value, Axis):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            axis = _ALIASES.get(name)
            if axis is not None:
                return axis
        raise InvalidAxis(f"Unknown axis: {value!r}")

    @property
    def is_position(self) -> bool:
        return self in (Axis.X, Axis.Y)

    @property
    def is_size(self) -> bool:
        return self in (Axis.WIDTH, Axis.HEIGHT)

    @property
    def size_axis(self) -> Axis:
        """The parent dimension this axis is measured against (x -> width, y -> height)."""
        if self in (Axis.X, Axis.WIDTH):
            return Axis.WIDTH
        return Axis.HEIGHT

    def __str__(self) -> str:
        return self.value


_ALIASES: dict[str, Axis] = {
    "x": Axis.X,
    "y": Axis.Y,
    "w": Axis.WIDTH,
    "width": Axis.WIDTH,
    "h": Axis.HEIGHT,
    "height": Axis.HEIGHT,
}

# Canonical slot order of a rule set.
AXES: tuple[Axis, ...] = (Axis.X, Axis.Y, Axis.WIDTH, Axis.HEIGHT)
