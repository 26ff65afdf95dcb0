#!/usr/bin/env python3
import os
import threading

import pytest

from rpgcore.base.config import GameConfig, peek_config, reset_config
from rpgcore.errors import InvalidDiceExpressionError
from rpgcore.stats import GrowthRate, StatGrowth
from rpgcore.utils.dice import DiceRoller, get_dice_roller, parse_dice_notation, set_dice_roller

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def test_preset_dice_expressions():
    assert StatGrowth.SLOW.dice == "1d2"
    assert StatGrowth.MEDIUM.dice == "1d3"
    assert StatGrowth.FAST.dice == "3d2"
    assert StatGrowth.custom("4d6+2").dice == "4d6+2"


@pytest.mark.parametrize("growth,low,high", [
    (StatGrowth.SLOW, 1, 2),
    (StatGrowth.MEDIUM, 1, 3),
    (StatGrowth.FAST, 3, 6),
    (StatGrowth.custom("2d4+1"), 3, 9),
])
def test_rolls_stay_in_range(growth, low, high, roller):
    for _ in range(200):
        assert low <= growth.roll(roller) <= high


def test_seeded_rollers_repeat():
    first, second = DiceRoller(seed=7), DiceRoller(seed=7)
    assert [StatGrowth.FAST.roll(first) for _ in range(10)] == \
        [StatGrowth.FAST.roll(second) for _ in range(10)]


@pytest.mark.parametrize("expression", ["", "banana", "2d", "d0", "0d6", "2d6+", "2d6 junk", None])
def test_invalid_custom_expression_is_an_error(expression, roller):
    with pytest.raises(InvalidDiceExpressionError):
        StatGrowth.custom(expression).roll(roller)


def test_parse_dice_notation():
    assert parse_dice_notation("3d2") == {"num_dice": 3, "sides": 2, "modifier": 0}
    assert parse_dice_notation("d6-1") == {"num_dice": 1, "sides": 6, "modifier": -1}


def test_shared_roller_is_lazy_and_seeded_from_config(isolated_config):
    isolated_config.set("progression.rng_seed", 99)
    set_dice_roller(None)
    shared = get_dice_roller()
    assert get_dice_roller() is shared
    expected = DiceRoller(seed=99).roll("3d2")
    assert StatGrowth.FAST.roll() == expected


def test_shared_roller_does_not_create_config():
    reset_config()
    set_dice_roller(None)
    default_dir = os.path.join(PROJECT_ROOT, "config")
    existed = os.path.exists(default_dir)

    assert 1 <= StatGrowth.SLOW.roll() <= 2
    assert GameConfig._instance is None
    assert peek_config() is None
    assert os.path.exists(default_dir) == existed


def test_shared_roller_serializes_concurrent_rolls():
    set_dice_roller(DiceRoller(seed=5))
    results = []
    lock = threading.Lock()

    def worker():
        for _ in range(100):
            value = StatGrowth.MEDIUM.roll()
            with lock:
                results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 800
    assert set(results) <= {1, 2, 3}


def test_growth_str():
    assert str(StatGrowth.SLOW) == "Slow"
    assert str(StatGrowth.custom("1d8")) == "Custom(1d8)"
    assert StatGrowth.custom("1d8").rate is GrowthRate.CUSTOM


@pytest.mark.parametrize("expression", ["99999999999d2", "1001d2", "2d1001", "1d2+9999999"])
def test_oversized_dice_rejected(expression):
    with pytest.raises(InvalidDiceExpressionError):
        parse_dice_notation(expression)


def test_dice_limits_inclusive():
    assert parse_dice_notation("1000d1000+999999") == {"num_dice": 1000, "sides": 1000, "modifier": 999999}


def test_preset_rate_rejects_custom_dice():
    with pytest.raises(InvalidDiceExpressionError):
        StatGrowth(GrowthRate.SLOW, "9d9")
    with pytest.raises(InvalidDiceExpressionError):
        StatGrowth(GrowthRate.CUSTOM)
    assert StatGrowth(GrowthRate.FAST) == StatGrowth.FAST
