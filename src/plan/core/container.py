"""Container: a node in the layout tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Iterator, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from ..errors import CyclicTree
from .rect import Rect

if TYPE_CHECKING:
    from ..rules.ruleset import RuleSet

logger = logging.getLogger(__name__)

EventHandler = Callable[..., Any]


@runtime_checkable
class Element(Protocol):
    """Operations every participant of a layout tree provides.

    Container implements all of them with no-op defaults, so traversals call
    them unconditionally.
    """

    def refresh(self) -> None: ...

    def update(self, dt: float) -> None: ...

    def draw(self) -> None: ...

    def emit(self, event: str, *args: Any) -> None: ...

    def handle(self, event: str, *args: Any) -> Any: ...

    def add_child(self, child: Container) -> Container: ...

    def remove_child(self, child: Container) -> bool: ...


@dataclass(eq=False)
class Container:
    """A rectangle in the layout tree whose geometry comes from a RuleSet.

    Geometry (x, y, width, height) is absolute and stays at zero until
    refresh() runs on the container or an ancestor. Children are resolved
    after their parent, in insertion order, so their rules can read the
    parent's resolved rectangle.

    Subclasses override update(), draw() or handle() and call the base
    implementation through super() to keep the traversal going.

    Example:
        plan = Plan(Viewport(800, 600))
        sidebar = Container(half("left"), name="sidebar")
        plan.add_child(sidebar)
        sidebar.add_child(Container(pixel_gutter(8), name="content"))
    """

    rules: RuleSet
    name: str | None = None
    x: float = field(default=0.0, init=False)
    y: float = field(default=0.0, init=False)
    width: float = field(default=0.0, init=False)
    height: float = field(default=0.0, init=False)
    parent: Container | None = field(default=None, init=False, repr=False)
    children: list[Container] = field(default_factory=list, init=False, repr=False)
    is_root: bool = field(default=False, init=False, repr=False)
    _handlers: dict[str, EventHandler] = field(default_factory=dict, init=False, repr=False)

    # -- tree structure ---------------------------------------------------

    def add_child(self, child: Container) -> Container:
        """Attach a child at the end of the child list.

        A child that already has another parent is moved. If this container
        is a root or sits beneath one, the tree from this container down is
        refreshed, so the child's geometry is valid on return.

        Args:
            child: The container to attach

        Returns:
            The added child (for chaining)

        Raises:
            CyclicTree: If child is this container or one of its ancestors
        """
        node: Container | None = self
        while node is not None:
            if node is child:
                raise CyclicTree(
                    f"Cannot add {child.label} beneath itself (via {self.label})"
                )
            node = node._live_parent()

        previous = child.parent
        if previous is not None and previous is not self:
            previous.remove_child(child)
        child.parent = self
        if not any(c is child for c in self.children):
            self.children.append(child)
        logger.debug("Attached %s to %s", child.label, self.label)
        if self.is_attached:
            self.refresh()
        return child

    def remove_child(self, child: Container) -> bool:
        """Detach a child.

        The child keeps its parent reference and its last geometry; it is
        simply no longer visited by traversals.

        Returns:
            True if the child was found and removed
        """
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                logger.debug("Detached %s from %s", child.label, self.label)
                return True
        return False

    def clear_children(self) -> None:
        """Detach every child, leaving their parent references untouched."""
        self.children = []

    def _live_parent(self) -> Container | None:
        # A removed child keeps its parent reference but is no longer listed.
        parent = self.parent
        if parent is not None and any(c is self for c in parent.children):
            return parent
        return None

    @property
    def root(self) -> Container:
        """The topmost ancestor that still lists this branch (self if detached)."""
        node = self
        parent = node._live_parent()
        while parent is not None:
            node = parent
            parent = node._live_parent()
        return node

    @property
    def is_attached(self) -> bool:
        """True if this container is a root or sits beneath one."""
        return self.root.is_root

    @property
    def depth(self) -> int:
        """Depth in the hierarchy (root = 0)."""
        parent = self._live_parent()
        if parent is None:
            return 0
        return parent.depth + 1

    def iter_nodes(self, include_self: bool = True) -> Iterator[Container]:
        """Walk the subtree in the order refresh() resolves it.

        Args:
            include_self: Whether to yield this container first

        Yields:
            Containers, each before its children, siblings in list order
        """
        pending = [self] if include_self else list(reversed(self.children))
        while pending:
            node = pending.pop()
            yield node
            pending.extend(reversed(node.children))

    # -- geometry ---------------------------------------------------------

    def refresh(self) -> None:
        """Recompute this container's geometry, then each child's in order."""
        self.x, self.y, self.width, self.height = self.rules.realise(self)
        logger.debug(
            "Resolved %s -> (%g, %g, %g, %g)",
            self.label, self.x, self.y, self.width, self.height,
        )
        for child in self.children:
            child.refresh()

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def geometry_array(self, include_self: bool = True) -> NDArray[np.float64]:
        """Snapshot the subtree's geometry.

        Returns:
            An (N, 4) array of [x, y, width, height] rows in pre-order
        """
        rows = [node.rect.to_array() for node in self.iter_nodes(include_self)]
        if not rows:
            return np.zeros((0, 4), dtype=np.float64)
        return np.vstack(rows)

    def find_at(self, px: float, py: float) -> Container | None:
        """Find the deepest container whose rectangle holds a point.

        Later siblings win, matching the order they are drawn in.

        Returns:
            The container, or None if the point is outside this container
        """
        if not self.rect.contains(px, py):
            return None
        for child in reversed(self.children):
            hit = child.find_at(px, py)
            if hit is not None:
                return hit
        return self

    # -- broadcasts -------------------------------------------------------

    def update(self, dt: float) -> None:
        """Pass a time step to every child. The base class does nothing else."""
        for child in self.children:
            child.update(dt)

    def draw(self) -> None:
        """Ask every child to draw. The base class draws nothing itself."""
        for child in self.children:
            child.draw()

    def on(self, event: str, handler: EventHandler) -> EventHandler:
        """Register the handler this container runs when `event` reaches it.

        A handler returning False stops the event from reaching this
        container's own children. Registering again replaces the handler.

        Returns:
            The handler
        """
        self._handlers[event] = handler
        return handler

    def handle(self, event: str, *args: Any) -> Any:
        """Run this container's handler for an event, if any, and return its result."""
        handler = self._handlers.get(event)
        if handler is None:
            return None
        return handler(*args)

    def emit(self, event: str, *args: Any) -> None:
        """Broadcast an event to all descendants, depth-first.

        Each child handles the event before its own children. When a child's
        handler returns False, that child's subtree is skipped; its siblings
        still receive the event.
        """
        for child in self.children:
            if child.handle(event, *args) is False:
                continue
            child.emit(event, *args)

    # -- misc -------------------------------------------------------------

    def copy(self, deep: bool = True) -> Container:
        """Create an unattached copy with cloned rules.

        The copy is a plain Container; geometry and event handlers are not
        copied.

        Args:
            deep: If True, recursively copy children
        """
        new = Container(self.rules.clone(), name=self.name)
        if deep:
            for child in self.children:
                new.add_child(child.copy(deep=True))
        return new

    @property
    def label(self) -> str:
        return self.name if self.name is not None else type(self).__name__
