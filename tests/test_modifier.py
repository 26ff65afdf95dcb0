#!/usr/bin/env python3
import pytest

from rpgcore.errors import InvalidRangeError, MismatchedModifierError
from rpgcore.stats.modifier import Modifier, ModifierKind, Modifiers


def test_additive_modifiers_add_amounts():
    assert Modifier.additive(5) + Modifier.additive(2) == Modifier.additive(7)
    assert Modifier.additive(5) - Modifier.additive(2) == Modifier.additive(3)


def test_multiplicative_modifiers_stack_by_multiplying():
    assert Modifier.multiplicative(2) + Modifier.multiplicative(3) == Modifier.multiplicative(6)
    assert Modifier.multiplicative(6) - Modifier.multiplicative(3) == Modifier.multiplicative(2)


def test_none_combines_with_none():
    assert Modifier.none() + Modifier.none() == Modifier.none()
    assert Modifier.none() - Modifier.none() == Modifier.none()


@pytest.mark.parametrize("left,right", [
    (Modifier.additive(1), Modifier.multiplicative(2)),
    (Modifier.multiplicative(2), Modifier.additive(1)),
    (Modifier.additive(1), Modifier.none()),
])
def test_mixing_variants_is_an_error(left, right):
    with pytest.raises(MismatchedModifierError):
        left + right
    with pytest.raises(MismatchedModifierError):
        left - right


def test_default_stack_is_identity():
    stack = Modifiers()
    assert stack.additive == Modifier.additive(0)
    assert stack.multiplicative == Modifier.multiplicative(1)


def test_stack_routes_by_variant():
    stack = Modifiers()
    stack.add(Modifier.additive(5))
    stack.add(Modifier.multiplicative(2))
    stack.add(Modifier.additive(2))
    stack.add(Modifier.multiplicative(3))
    assert stack.additive == Modifier.additive(7)
    assert stack.multiplicative == Modifier.multiplicative(6)


def test_none_is_ignored_by_stack():
    stack = Modifiers()
    stack.add(Modifier.none())
    stack.remove(Modifier.none())
    assert stack == Modifiers()


def test_remove_goes_negative():
    stack = Modifiers(Modifier.additive(2), Modifier.multiplicative(1))
    stack.remove(Modifier.additive(5))
    assert stack.additive == Modifier.additive(-3)
    stack.add(Modifier.additive(5))
    assert stack.additive == Modifier.additive(2)


@pytest.mark.parametrize("amount", [5.0, -3.5, 0.25, 1024.0])
def test_additive_round_trip(amount):
    stack = Modifiers(Modifier.additive(2.5), Modifier.multiplicative(1.5))
    before = stack.additive
    stack.add(Modifier.additive(amount))
    stack.remove(Modifier.additive(amount))
    assert stack.additive == before
    assert stack.multiplicative == Modifier.multiplicative(1.5)


@pytest.mark.parametrize("factor", [2.0, 0.5, 4.0])
def test_multiplicative_round_trip(factor):
    stack = Modifiers(Modifier.additive(0), Modifier.multiplicative(1.5))
    stack.add(Modifier.multiplicative(factor))
    stack.remove(Modifier.multiplicative(factor))
    assert stack.multiplicative == Modifier.multiplicative(1.5)


def test_stack_rejects_wrong_variant_in_slot():
    with pytest.raises(MismatchedModifierError):
        Modifiers(Modifier.multiplicative(2), Modifier.multiplicative(1))
    with pytest.raises(MismatchedModifierError):
        Modifiers(Modifier.additive(0), Modifier.none())


def test_removing_zero_factor_is_a_range_error():
    stack = Modifiers()
    stack.add(Modifier.multiplicative(0))
    assert stack.multiplicative == Modifier.multiplicative(0)
    with pytest.raises(InvalidRangeError):
        stack.remove(Modifier.multiplicative(0))
    assert stack.multiplicative == Modifier.multiplicative(0)
    with pytest.raises(InvalidRangeError):
        Modifier.multiplicative(2) - Modifier.multiplicative(0)


def test_modifier_str():
    assert str(Modifier.additive(5)) == "+5"
    assert str(Modifier.additive(-2.5)) == "-2.5"
    assert str(Modifier.multiplicative(2)) == "x2"
    assert str(Modifier.none()) == "none"
    assert Modifier.none().kind is ModifierKind.NONE
