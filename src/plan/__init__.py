"""Plan - rule-based 2D layout for containers in a tree."""

from .errors import (
    CyclicTree,
    InvalidAxis,
    InvalidDirection,
    InvalidRule,
    MissingParent,
    PlanError,
)
from .core import Axis, Container, Element, Rect
from .rules import (
    Aspect,
    BaseRule,
    Center,
    Max,
    Parent,
    Pixel,
    Relative,
    Rule,
    RuleSet,
    aspect,
    center,
    factory,
    is_rule,
    max_,
    parent,
    pixel,
    relative,
)
from .rules.factory import full, half, pixel_gutter, relative_gutter
from .root import Plan, Viewport

__version__ = "0.5.0"

__all__ = [
    "PlanError", "CyclicTree", "InvalidAxis", "InvalidDirection", "InvalidRule", "MissingParent",
    "Axis", "Container", "Element", "Rect",
    "Aspect", "BaseRule", "Center", "Max", "Parent", "Pixel", "Relative", "Rule", "RuleSet",
    "aspect", "center", "max_", "parent", "pixel", "relative", "is_rule",
    "factory", "full", "half", "pixel_gutter", "relative_gutter",
    "Plan", "Viewport",
]
