#!/usr/bin/env python3
import pytest

from rpgcore.base.config import GameConfig, reset_config
from rpgcore.utils.dice import DiceRoller, set_dice_roller


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Point the config singleton at a temporary directory and drop the shared roller."""
    reset_config()
    set_dice_roller(None)
    config = GameConfig(config_dir=str(tmp_path / "config"))
    yield config
    reset_config()
    set_dice_roller(None)


@pytest.fixture
def roller():
    return DiceRoller(seed=1234)


class FixedRoller(DiceRoller):
    """Roller that always returns the same total, recording what it was asked to roll."""

    def __init__(self, total):
        super().__init__(seed=0)
        self.total = total
        self.rolled = []

    def roll(self, notation):
        self.rolled.append(notation)
        return self.total


@pytest.fixture
def fixed_roller():
    return FixedRoller
