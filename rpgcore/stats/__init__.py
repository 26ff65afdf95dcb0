"""
Stats module for the progression engine.

This module contains the stat value model, modifier stacks and stat growth.
"""

from rpgcore.stats.stats_base import StatName, Depletable, Static, StatKind
from rpgcore.stats.modifier import Modifier, ModifierKind, Modifiers
from rpgcore.stats.stat_growth import GrowthRate, StatGrowth
from rpgcore.stats.stat import Stat
from rpgcore.stats.stats import Stats
