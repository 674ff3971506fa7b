"""Panel: a filled, rounded rectangle container."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..core.container import Container
from .canvas import Canvas, Colour


@dataclass(eq=False)
class Panel(Container):
    """A container that paints its rectangle before drawing its children.

    Example:
        canvas = Canvas(800, 600)
        panel = Panel(rules, canvas=canvas, colour=(0.133, 0.133, 0.133))
        plan.add_child(panel)
        plan.draw()
    """

    canvas: Canvas | None = field(default=None, repr=False)
    colour: Colour = (0.133, 0.133, 0.133)
    radius: float = 5

    def draw(self) -> None:
        if self.canvas is not None:
            self.canvas.fill_rect(self.rect, self.colour, self.radius)
        super().draw()
