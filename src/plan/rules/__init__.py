"""Layout rules and rule sets."""

from .base import BaseRule, Rule, is_rule
from .builtin import (
    Aspect,
    Center,
    Max,
    Parent,
    Pixel,
    Relative,
    aspect,
    center,
    max_,
    parent,
    pixel,
    relative,
)
from .ruleset import RuleSet
from . import factory

__all__ = [
    "BaseRule", "Rule", "is_rule",
    "Aspect", "Center", "Max", "Parent", "Pixel", "Relative",
    "aspect", "center", "max_", "parent", "pixel", "relative",
    "RuleSet", "factory",
]
