"""Shared test fixtures for plan."""

import pytest

from plan import Container, Plan, RuleSet, Viewport


def _place(rules: RuleSet, parent_rect=(10.0, 20.0, 100.0, 50.0)) -> Container:
    parent = Container(RuleSet(), name="parent")
    parent.x, parent.y, parent.width, parent.height = parent_rect
    child = Container(rules, name="child")
    child.parent = parent
    parent.children.append(child)
    return child


@pytest.fixture
def place():
    """Factory placing a container under a parent already resolved to (10, 20, 100, 50)."""
    return _place


@pytest.fixture
def viewport():
    """800x600 host viewport."""
    return Viewport(800, 600)


@pytest.fixture
def plan(viewport):
    """Plan rooted on the 800x600 viewport."""
    return Plan(viewport)
