"""Root facade: a container anchored to the host's viewport."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from .core.container import Container
from .rules.builtin import Pixel
from .rules.ruleset import RuleSet

logger = logging.getLogger(__name__)

ViewportSource = Callable[[], tuple[float, float]]

_SIZE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*[xX]\s*(\d+(?:\.\d+)?)\s*$")


@dataclass
class Viewport:
    """A host-owned viewport size.

    Calling the viewport returns its current (width, height), which makes it
    a ready-made source for Plan. Hosts with their own window object can pass
    any zero-argument callable instead.
    """

    width: float
    height: float

    def __call__(self) -> tuple[float, float]:
        return (self.width, self.height)

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    @classmethod
    def parse(cls, text: str) -> Viewport:
        """Parse a "WIDTHxHEIGHT" string such as "800x600".

        Raises:
            ValueError: If the text is not of that form
        """
        match = _SIZE_PATTERN.match(text)
        if match is None:
            raise ValueError(f"Expected a size like 800x600, got {text!r}")
        width, height = (float(v) for v in match.groups())
        return cls(width, height)


def _full_screen(width: float, height: float) -> RuleSet:
    # Parent rules would need a parent, so the root is pinned with pixels.
    return RuleSet(x=Pixel(0), y=Pixel(0), width=Pixel(width), height=Pixel(height))


class Plan:
    """Entry point of a layout tree.

    Owns a root Container whose rules always match the viewport. Call
    refresh() after the viewport is resized or after mutating any rules.

    Example:
        viewport = Viewport(800, 600)
        plan = Plan(viewport)
        plan.add_child(Container(relative_gutter(0.1)))
        viewport.resize(1024, 768)
        plan.refresh()
    """

    def __init__(self, viewport: ViewportSource) -> None:
        """Initialize the root from the viewport's current size.

        Args:
            viewport: Zero-argument callable returning (width, height)
        """
        self._viewport = viewport
        self.root = Container(_full_screen(*viewport()), name="root")
        self.root.is_root = True

    def refresh(self) -> None:
        """Re-read the viewport size and recompute the whole tree."""
        width, height = self._viewport()
        logger.debug("Refreshing layout for viewport %gx%g", width, height)
        self.root.rules = _full_screen(width, height)
        self.root.refresh()

    def add_child(self, child: Container) -> Container:
        return self.root.add_child(child)

    def remove_child(self, child: Container) -> bool:
        return self.root.remove_child(child)

    def clear_children(self) -> None:
        self.root.clear_children()

    def update(self, dt: float) -> None:
        self.root.update(dt)

    def draw(self) -> None:
        self.root.draw()

    def emit(self, event: str, *args: Any) -> None:
        self.root.emit(event, *args)

    @property
    def children(self) -> list[Container]:
        return self.root.children

    def iter_nodes(self) -> Iterator[Container]:
        return self.root.iter_nodes()

    def find_at(self, px: float, py: float) -> Container | None:
        return self.root.find_at(px, py)
