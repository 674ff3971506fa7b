"""Built-in layout rules.

Each rule resolves a single axis of a container. Positions are returned in
parent-local coordinates; the owning RuleSet adds the parent's origin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.axis import Axis
from ..errors import InvalidAxis
from .base import BaseRule, parent_of

if TYPE_CHECKING:
    from ..core.container import Container
    from .ruleset import RuleSet


class Pixel(BaseRule):
    """A fixed value, independent of the parent."""

    _params = ("value",)

    def __init__(self, value: float) -> None:
        self.value = value

    def realise(self, axis: Axis, element: Container, rules: RuleSet) -> float:
        return self.value


class Relative(BaseRule):
    """A fraction of the parent's size along the matching dimension."""

    _params = ("value",)

    def __init__(self, value: float) -> None:
        self.value = value

    def realise(self, axis: Axis, element: Container, rules: RuleSet) -> float:
        axis = Axis.parse(axis)
        parent = parent_of(element)
        if axis is Axis.WIDTH or axis is Axis.X:
            return parent.width * self.value
        return parent.height * self.value


class Center(BaseRule):
    """Centers the element within its parent. Only valid for x and y."""

    def realise(self, axis: Axis, element: Container, rules: RuleSet) -> float:
        axis = Axis.parse(axis)
        if axis.is_size:
            raise InvalidAxis("Center rule doesn't work for widths or heights")

        parent = parent_of(element)
        # The element's own size may not be resolved yet, so ask its size
        # rule directly. Cyclic rules are not detected.
        size_axis = axis.size_axis
        own_size = rules.get_axis(size_axis).realise(size_axis, element, rules)
        if axis is Axis.X:
            return parent.width / 2 - own_size / 2
        return parent.height / 2 - own_size / 2


class Aspect(BaseRule):
    """Sizes one dimension as a multiple of the other. Only valid for width and height."""

    _params = ("value",)

    def __init__(self, value: float) -> None:
        self.value = value

    def realise(self, axis: Axis, element: Container, rules: RuleSet) -> float:
        axis = Axis.parse(axis)
        if axis.is_position:
            raise InvalidAxis("Aspect rule doesn't work for x or y coordinates")

        other = Axis.HEIGHT if axis is Axis.WIDTH else Axis.WIDTH
        return rules.get_axis(other).realise(other, element, rules) * self.value


class Parent(BaseRule):
    """Copies the parent's resolved value for the same axis."""

    def realise(self, axis: Axis, element: Container, rules: RuleSet) -> float:
        axis = Axis.parse(axis)
        return getattr(parent_of(element), axis.value)


class Max(BaseRule):
    """The parent's size along the matching dimension, less an inset."""

    _params = ("value",)

    def __init__(self, value: float = 0) -> None:
        self.value = value

    def realise(self, axis: Axis, element: Container, rules: RuleSet) -> float:
        axis = Axis.parse(axis)
        parent = parent_of(element)
        if axis.size_axis is Axis.WIDTH:
            return parent.width - self.value
        return parent.height - self.value


def pixel(value: float) -> Pixel:
    return Pixel(value)


def relative(value: float) -> Relative:
    return Relative(value)


def center() -> Center:
    return Center()


def aspect(value: float) -> Aspect:
    return Aspect(value)


def parent() -> Parent:
    return Parent()


def max_(value: float = 0) -> Max:
    """Factory for Max; named with a trailing underscore to keep the builtin."""
    return Max(value)
