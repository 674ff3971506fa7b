"""Ready-made rule sets for common layouts."""

from __future__ import annotations

from ..errors import InvalidDirection
from .builtin import Max, Parent, Pixel, Relative
from .ruleset import RuleSet

DIRECTIONS = ("top", "bottom", "left", "right")


def full() -> RuleSet:
    """Fill the parent on every axis."""
    return RuleSet(x=Parent(), y=Parent(), width=Parent(), height=Parent())


def half(direction: str) -> RuleSet:
    """Take the half of the parent on one edge.

    Args:
        direction: One of "top", "bottom", "left", "right"

    Raises:
        InvalidDirection: If direction is not one of the four edges
    """
    edge = direction.lower() if isinstance(direction, str) else direction
    if edge not in DIRECTIONS:
        raise InvalidDirection(
            f"Unknown direction {direction!r}, expected one of {', '.join(DIRECTIONS)}"
        )

    rules = full()
    if edge == "top":
        rules.add_height(Relative(0.5))
    elif edge == "bottom":
        rules.add_y(Relative(0.5)).add_height(Relative(0.5))
    elif edge == "left":
        rules.add_width(Relative(0.5))
    else:
        rules.add_x(Relative(0.5)).add_width(Relative(0.5))
    return rules


def relative_gutter(value: float) -> RuleSet:
    """Inset by a fraction of the parent's size on all four sides."""
    # The margin applies to both sides of each dimension.
    return RuleSet(
        x=Relative(value),
        y=Relative(value),
        width=Relative(1 - value * 2),
        height=Relative(1 - value * 2),
    )


def pixel_gutter(value: float) -> RuleSet:
    """Inset by a fixed number of pixels on all four sides."""
    return RuleSet(
        x=Pixel(value),
        y=Pixel(value),
        width=Max(value * 2),
        height=Max(value * 2),
    )
