"""
Level and experience tracking.
"""

import math
from typing import Optional

from rpgcore.errors import InvalidRangeError
from rpgcore.stats.stat import Stat
from rpgcore.stats.stats import Stats
from rpgcore.stats.stats_base import Depletable, Static
from rpgcore.utils.dice import DiceRoller
from rpgcore.utils.logging_config import get_logger

logger = get_logger("PROGRESSION")


class LevelData:
    """
    The level of an entity, its experience and the experience needed to level up.

    ``experience_for_next_level`` is a threshold, not a remaining amount: it
    does not shrink as experience grows. Between calls,
    ``current_experience < experience_for_next_level`` always holds.
    """

    # Multiplying factor for the size of every threshold.
    BASE_XP = 1000.0
    # Larger exponents widen the gap between levels.
    EXPONENT = 1.5
    MIN_LEVEL = 1
    MAX_LEVEL = 99

    def __init__(self, level: int = 1, current_experience: int = 0):
        """
        Create level data for a level and current experience.

        Raises:
            InvalidRangeError: If level is outside 1-99 or the experience is
                negative or already reaches the threshold for the next level.
        """
        experience_for_next_level = self.experience_for_level(level)
        level_ok = self.MIN_LEVEL <= level <= self.MAX_LEVEL
        experience_ok = 0 <= current_experience < experience_for_next_level

        if not level_ok and not experience_ok:
            message = (f"Level must be between {self.MIN_LEVEL} and {self.MAX_LEVEL} and current experience "
                       f"must be less than experience required for the next level (got {level}, {current_experience})")
        elif not level_ok:
            message = f"Level must be between {self.MIN_LEVEL} and {self.MAX_LEVEL} (got {level})"
        elif not experience_ok:
            message = (f"Current experience must be between 0 and the experience required for the next "
                       f"level ({experience_for_next_level}), got {current_experience}")
        else:
            message = None

        if message:
            logger.error(message)
            raise InvalidRangeError(message)

        self._level = level
        self._current_experience = current_experience
        self._experience_for_next_level = experience_for_next_level

    @property
    def level(self) -> int:
        return self._level

    @property
    def current_experience(self) -> int:
        return self._current_experience

    @property
    def experience_for_next_level(self) -> int:
        return self._experience_for_next_level

    @property
    def is_max_level(self) -> bool:
        return self._level >= self.MAX_LEVEL

    def set_current_experience(self, experience: int) -> None:
        """
        Set the current experience, levelling up as many times as it allows.

        Each level up consumes one full threshold, then the level increases and
        the threshold is recalculated for the new level. At the maximum level
        experience stops at one below the threshold and the rest is discarded.

        Raises:
            InvalidRangeError: If experience is negative.
        """
        if experience < 0:
            message = f"Experience cannot be negative (got {experience})"
            logger.error(message)
            raise InvalidRangeError(message)

        while experience >= self._experience_for_next_level:
            if self.is_max_level:
                discarded = experience - (self._experience_for_next_level - 1)
                experience = self._experience_for_next_level - 1
                logger.info(f"Level cap {self.MAX_LEVEL} reached, discarding {discarded} experience")
                break

            experience -= self._experience_for_next_level
            self._level += 1
            self._experience_for_next_level = self.experience_for_level(self._level)
            logger.info(f"Level up to {self._level} (next level at {self._experience_for_next_level} experience)")

        self._current_experience = experience

    def gain_experience(self, amount: int) -> int:
        """
        Add experience on top of the current amount.

        Returns:
            The number of levels gained.
        """
        if amount < 0:
            message = f"Experience gained cannot be negative (got {amount})"
            logger.error(message)
            raise InvalidRangeError(message)

        previous_level = self._level
        self.set_current_experience(self._current_experience + amount)
        return self._level - previous_level

    @classmethod
    def experience_for_level(cls, level: int) -> int:
        """
        Calculate the experience required to level up from a level.

        floor(BASE_XP * level ^ EXPONENT), a curve that gets steeper with each
        level. Any level is accepted here.
        """
        return int(math.floor(cls.BASE_XP * (float(level) ** cls.EXPONENT)))

    def create_stat_table(self, growth_from: Optional[Stats] = None,
                          roller: Optional[DiceRoller] = None) -> Stats:
        """
        Create a stat table holding the increase in stats for one level up.

        Every stat of a fresh default collection gets its base plus one growth
        roll: a depletable stat stores it as its maximum, a static stat as its
        value.

        Args:
            growth_from: Collection whose growth rates are rolled. Defaults to
                the default collection's own rates.
            roller: Random source for the rolls. The shared roller when omitted.
        """
        stats = Stats.default()
        for index, stat in enumerate(stats.stats):
            growth = growth_from[stat.name].stat_growth if growth_from is not None else stat.stat_growth
            increase = max(0, stat.base() + growth.roll(roller))
            if isinstance(stat.kind, Depletable):
                kind = Depletable(stat.kind.current, increase)
            else:
                kind = Static(increase)
            stats.stats[index] = Stat(stat.name, kind, growth)

        return stats

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LevelData):
            return NotImplemented
        return (self._level, self._current_experience, self._experience_for_next_level) == \
            (other._level, other._current_experience, other._experience_for_next_level)

    def __repr__(self) -> str:
        return (f"LevelData(level={self._level}, current_experience={self._current_experience}, "
                f"experience_for_next_level={self._experience_for_next_level})")
