#!/usr/bin/env python3
import logging

import pytest

from rpgcore.errors import MismatchedModifierError
from rpgcore.stats import Depletable, Modifier, Stat, StatGrowth, StatName, Static


def test_base_of_static_stat():
    assert Stat(StatName.ATTACK, Static(42), StatGrowth.SLOW).base() == 42


def test_base_of_depletable_is_current_not_maximum():
    stat = Stat(StatName.HEALTH_POINTS, Depletable(15, 100), StatGrowth.SLOW)
    assert stat.base() == 15


def test_value_applies_additive_before_multiplicative():
    stat = Stat(StatName.ATTACK, Static(10), StatGrowth.SLOW)
    stat.add_modifier(Modifier.additive(5))
    stat.add_modifier(Modifier.multiplicative(2))
    assert stat.value() == 30.0


def test_value_without_modifiers_is_base():
    stat = Stat(StatName.SPEED, Static(7), StatGrowth.FAST)
    assert stat.value() == 7.0


def test_remove_modifier_restores_value():
    stat = Stat(StatName.DEFENSE, Static(20), StatGrowth.SLOW)
    stat.add_modifier(Modifier.multiplicative(0.5))
    assert stat.value() == 10.0
    stat.remove_modifier(Modifier.multiplicative(0.5))
    assert stat.value() == 20.0


def test_set_base_replaces_static_value():
    stat = Stat(StatName.ATTACK, Static(0), StatGrowth.SLOW)
    stat.set_base(999)
    assert stat.kind == Static(999)


def test_set_base_keeps_depletable_maximum():
    stat = Stat(StatName.HEALTH_POINTS, Depletable(10, 120), StatGrowth.SLOW)
    stat.set_base(50)
    assert stat.kind == Depletable(50, 120)


@pytest.mark.parametrize("value", [0, -1, 1000])
def test_set_base_out_of_range_is_silent(value):
    stat = Stat(StatName.ATTACK, Static(30), StatGrowth.SLOW)
    assert stat.set_base(value) is None
    assert stat.kind == Static(30)


def test_friendship_limit():
    stat = Stat(StatName.FRIENDSHIP, Static(3), StatGrowth.SLOW)
    stat.set_base(20)
    assert stat.base() == 3
    stat.set_base(15)
    assert stat.base() == 15


def test_silent_set_base_leaves_debug_trace(caplog):
    stat = Stat(StatName.FRIENDSHIP, Static(3), StatGrowth.SLOW)
    with caplog.at_level(logging.DEBUG, logger="rpgcore.stats.stat"):
        stat.set_base(16)
    assert any("Ignoring base value 16" in rec.message for rec in caplog.records)


def test_grow_raises_base_and_maximum():
    stat = Stat(StatName.SKILL_POINTS, Depletable(10, 20), StatGrowth.SLOW)
    stat.grow(3)
    assert stat.kind == Depletable(13, 23)

    static = Stat(StatName.EVASION, Static(4), StatGrowth.SLOW)
    static.grow(2)
    assert static.kind == Static(6)


def test_grow_caps_maximum_and_ignores_overflow():
    stat = Stat(StatName.HEALTH_POINTS, Depletable(990, 998), StatGrowth.SLOW)
    stat.grow(5)
    assert stat.kind == Depletable(995, 999)
    stat.grow(10)
    assert stat.kind == Depletable(995, 999)


def test_corrupted_stack_is_an_error():
    stat = Stat(StatName.ATTACK, Static(10), StatGrowth.SLOW)
    stat.modifiers.additive = Modifier.multiplicative(2)
    with pytest.raises(MismatchedModifierError):
        stat.value()
