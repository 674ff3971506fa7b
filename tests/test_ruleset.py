"""Tests for RuleSet."""

import pytest

from plan import (
    Aspect,
    Axis,
    Center,
    Container,
    InvalidAxis,
    InvalidRule,
    Parent,
    Pixel,
    Relative,
    RuleSet,
)


def test_defaults_to_parent_rules():
    rules = RuleSet()
    for axis, rule in rules:
        assert isinstance(rule, Parent), axis


def test_numbers_become_pixel_rules():
    rules = RuleSet().add_x(5).add_y(6.5).add_width(7).add_height(8)
    assert rules.get_x() == Pixel(5)
    assert rules.get_y() == Pixel(6.5)
    assert rules.get_width() == Pixel(7)
    assert rules.get_height() == Pixel(8)


def test_setters_overwrite_and_chain():
    rules = RuleSet()
    assert rules.add_width(Relative(0.5)) is rules
    rules.add_width(Pixel(10))
    assert rules.get_width() == Pixel(10)


def test_get_axis_returns_installed_reference():
    rule = Relative(0.2)
    rules = RuleSet().set_axis("height", rule)
    assert rules.get_axis(Axis.HEIGHT) is rule
    assert rules.get_axis("h") is rule
    assert rules.get_height() is rule


@pytest.mark.parametrize("bad", ["10", None, object(), True, [1, 2]])
def test_invalid_input_rejected(bad):
    with pytest.raises(InvalidRule):
        RuleSet().add_x(bad)


def test_invalid_rule_raised_before_resolution():
    rules = RuleSet(width=Pixel(1))
    with pytest.raises(InvalidRule):
        rules.set_axis("width", "wide")
    assert rules.get_width() == Pixel(1)


def test_unknown_axis_rejected():
    with pytest.raises(InvalidAxis):
        RuleSet().set_axis("depth", 1)


def test_custom_rules_accepted():
    class Constant:
        def realise(self, axis, element, rules):
            return 3

    rules = RuleSet(x=Constant(), y=0, width=1, height=2)
    assert rules.realise(Container(rules)) == (3, 0, 1, 2)


def test_realise_without_parent_uses_origin():
    rules = RuleSet(x=5, y=6, width=7, height=8)
    assert rules.realise(Container(rules)) == (5, 6, 7, 8)


def test_realise_offsets_by_parent_origin(place):
    child = place(RuleSet(x=Relative(0.1), y=Pixel(5), width=Pixel(30), height=Pixel(40)))
    x, y, width, height = child.rules.realise(child)
    assert x == 10 + 100 * 0.1
    assert y == 20 + 5
    assert (width, height) == (30, 40)


def test_realise_resolves_center_and_aspect(place):
    child = place(RuleSet(x=Center(), y=Center(), width=Aspect(2), height=Pixel(10)))
    x, y, width, height = child.rules.realise(child)
    assert width == 20
    assert height == 10
    assert x == 10 + (100 - 20) / 2
    assert y == 20 + (50 - 10) / 2


def test_update_applies_transformer():
    rules = RuleSet(width=Pixel(10))
    rules.update("w", lambda rule, extra: Pixel(rule.value + extra), 5)
    assert rules.get_width() == Pixel(15)


def test_update_can_mutate_in_place():
    rule = Relative(0.5)
    rules = RuleSet(height=rule)

    def shrink(current, amount):
        current.set(current.value - amount)
        return current

    rules.update(Axis.HEIGHT, shrink, 0.25)
    assert rules.get_height() is rule
    assert rule.value == 0.25


def test_update_validates_result():
    rules = RuleSet()
    with pytest.raises(InvalidRule):
        rules.update("x", lambda rule: "nope")


def test_update_does_not_refresh(plan):
    child = Container(RuleSet(x=0, y=0, width=100, height=100))
    plan.add_child(child)
    child.rules.update("width", lambda rule: Pixel(50))
    assert child.width == 100
    plan.refresh()
    assert child.width == 50


def test_clone_is_deep(place):
    original = RuleSet(x=Relative(0.5), y=Pixel(1), width=Pixel(10), height=Aspect(1))
    clone = original.clone()

    for (axis, a), (_, b) in zip(original, clone):
        assert a == b, axis
        assert a is not b, axis

    clone.get_x().set(0.0)
    clone.add_width(Pixel(99))
    child = place(original)
    assert child.rules.realise(child) == (10 + 50, 21, 10, 10)

    original.get_y().set(2)
    assert clone.get_y() == Pixel(1)


def test_clone_copies_rules_without_clone():
    class Offset:
        def __init__(self, value):
            self.value = value

        def realise(self, axis, element, rules):
            return self.value

    rule = Offset(4)
    clone = RuleSet(x=rule).clone()
    assert clone.get_x() is not rule
    assert clone.get_x().value == 4
