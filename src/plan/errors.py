"""Exceptions raised when the layout API is misused."""


class PlanError(Exception):
    """Base class for all layout errors."""


class InvalidAxis(PlanError, ValueError):
    """A rule was asked to resolve an axis it does not support."""


class InvalidRule(PlanError, TypeError):
    """A value assigned to a rule set axis is neither a number nor a rule."""


class InvalidDirection(PlanError, ValueError):
    """A rule set factory was given an unknown edge name."""


class MissingParent(PlanError, LookupError):
    """A parent-relative rule was resolved on an element with no parent."""


class CyclicTree(PlanError, ValueError):
    """A container was added beneath itself."""
