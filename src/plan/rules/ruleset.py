"""RuleSet: the four rules that govern one container's geometry."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Callable, Iterator, Self

from ..core.axis import AXES, Axis
from ..errors import InvalidRule
from .base import Rule, is_number, is_rule
from .builtin import Parent, Pixel

if TYPE_CHECKING:
    from ..core.container import Container


RuleInput = Rule | float


def _validate(value: Any, axis: Axis) -> Rule:
    """Wrap numbers as Pixel rules and reject anything that is not a rule."""
    if is_number(value):
        return Pixel(value)
    if not is_rule(value):
        raise InvalidRule(f"An invalid input was passed to the {axis} axis: {value!r}")
    return value


class RuleSet:
    """Holds exactly one rule per axis and resolves them for an element.

    Axes that are not given default to Parent(), so a fresh RuleSet fills its
    parent until overridden.

    Example:
        rules = (
            RuleSet()
            .add_x(center())
            .add_y(20)
            .add_width(aspect(1))
            .add_height(relative(0.33))
        )
    """

    def __init__(
        self,
        x: RuleInput | None = None,
        y: RuleInput | None = None,
        width: RuleInput | None = None,
        height: RuleInput | None = None,
    ) -> None:
        self._rules: dict[Axis, Rule] = {axis: Parent() for axis in AXES}
        for axis, value in zip(AXES, (x, y, width, height)):
            if value is not None:
                self.set_axis(axis, value)

    def set_axis(self, axis: Axis | str, rule: RuleInput) -> Self:
        """Install a rule for an axis, replacing the previous one.

        Args:
            axis: The axis to set
            rule: A rule, or a number as shorthand for a Pixel rule

        Returns:
            This rule set (for chaining)

        Raises:
            InvalidRule: If rule is neither a number nor a rule
        """
        axis = Axis.parse(axis)
        self._rules[axis] = _validate(rule, axis)
        return self

    def get_axis(self, axis: Axis | str) -> Rule:
        """Return the installed rule for an axis (not a copy)."""
        return self._rules[Axis.parse(axis)]

    def add_x(self, rule: RuleInput) -> Self:
        return self.set_axis(Axis.X, rule)

    def add_y(self, rule: RuleInput) -> Self:
        return self.set_axis(Axis.Y, rule)

    def add_width(self, rule: RuleInput) -> Self:
        return self.set_axis(Axis.WIDTH, rule)

    def add_height(self, rule: RuleInput) -> Self:
        return self.set_axis(Axis.HEIGHT, rule)

    def get_x(self) -> Rule:
        return self._rules[Axis.X]

    def get_y(self) -> Rule:
        return self._rules[Axis.Y]

    def get_width(self) -> Rule:
        return self._rules[Axis.WIDTH]

    def get_height(self) -> Rule:
        return self._rules[Axis.HEIGHT]

    def realise(self, element: Container) -> tuple[float, float, float, float]:
        """Resolve all four axes for an element.

        Rules produce x and y relative to the parent; the parent's resolved
        origin is added here. Elements without a parent use the origin (0, 0).

        Returns:
            Absolute (x, y, width, height)
        """
        parent = element.parent
        origin_x = parent.x if parent is not None else 0
        origin_y = parent.y if parent is not None else 0

        width = self._resolve(Axis.WIDTH, element)
        height = self._resolve(Axis.HEIGHT, element)
        x = origin_x + self._resolve(Axis.X, element)
        y = origin_y + self._resolve(Axis.Y, element)
        return x, y, width, height

    def _resolve(self, axis: Axis, element: Container) -> float:
        return self._rules[axis].realise(axis, element, self)

    def update(
        self, axis: Axis | str, fn: Callable[..., Rule], *args: Any, **kwargs: Any
    ) -> None:
        """Replace an axis's rule with fn(current_rule, *args, **kwargs).

        Geometry is not recomputed; call refresh() on the tree afterwards.
        """
        axis = Axis.parse(axis)
        self._rules[axis] = _validate(fn(self._rules[axis], *args, **kwargs), axis)

    def clone(self) -> RuleSet:
        """Deep copy; each rule is copied via its own clone() when it has one."""
        copy_ = RuleSet()
        for axis, rule in self:
            clone = getattr(rule, "clone", None)
            copy_._rules[axis] = clone() if callable(clone) else copy.deepcopy(rule)
        return copy_

    def __iter__(self) -> Iterator[tuple[Axis, Rule]]:
        for axis in AXES:
            yield axis, self._rules[axis]

    def __repr__(self) -> str:
        slots = ", ".join(f"{axis}={rule!r}" for axis, rule in self)
        return f"RuleSet({slots})"
