"""Layout tree components."""

from .axis import Axis
from .rect import Rect
from .container import Container, Element

__all__ = ["Axis", "Rect", "Container", "Element"]
