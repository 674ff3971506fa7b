"""Example widgets built on Container."""

from .canvas import Canvas
from .panel import Panel

__all__ = ["Canvas", "Panel"]
