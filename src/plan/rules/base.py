"""Rule protocol and shared base class for built-in rules."""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from ..core.axis import Axis
from ..errors import MissingParent

if TYPE_CHECKING:
    from ..core.container import Container
    from .ruleset import RuleSet


@runtime_checkable
class Rule(Protocol):
    """Protocol for layout rules.

    Any object with a realise() method satisfies this protocol. clone() and
    set() are optional conventions followed by the built-in rules.
    """

    def realise(self, axis: Axis, element: Container, rules: RuleSet) -> float:
        """Compute the value of one axis for an element."""
        ...


class BaseRule(ABC):
    """Abstract base class for the built-in rules.

    Subclasses store their constant parameters as attributes and list them
    in ``_params`` so clone(), set(), equality and repr come for free.
    """

    _params: tuple[str, ...] = ()

    @abstractmethod
    def realise(self, axis: Axis, element: Container, rules: RuleSet) -> float:
        """Compute the value of one axis for an element.

        Args:
            axis: The axis being resolved
            element: The container being resolved
            rules: The container's own rule set, for cross-axis lookups

        Returns:
            The resolved value, in parent-local coordinates for x and y
        """

    def clone(self) -> BaseRule:
        """Return an independent copy with the same parameters."""
        return type(self)(*(getattr(self, name) for name in self._params))

    def set(self, *values: Any) -> None:
        """Replace the rule's parameters in place, in constructor order."""
        for name, value in zip(self._params, values):
            setattr(self, name, value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, n) == getattr(other, n) for n in self._params)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        args = ", ".join(repr(getattr(self, n)) for n in self._params)
        return f"{type(self).__name__}({args})"


def is_number(value: object) -> bool:
    """True for real numbers, excluding bools."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_rule(value: object) -> bool:
    """True if value exposes a callable realise()."""
    return isinstance(value, Rule) and callable(getattr(value, "realise", None))


def parent_of(element: Container) -> Container:
    """Return the element's parent, which a parent-relative rule needs."""
    parent = element.parent
    if parent is None:
        raise MissingParent(
            f"Cannot resolve {element!r}: rule depends on a parent but the element has none"
        )
    return parent
