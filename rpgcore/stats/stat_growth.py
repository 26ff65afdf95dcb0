"""
Stat growth rates rolled on level up.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional

from rpgcore.errors import InvalidDiceExpressionError
from rpgcore.utils.dice import DiceRoller, get_dice_roller
from rpgcore.utils.logging_config import get_logger

logger = get_logger(__name__)


class GrowthRate(Enum):
    """How fast a stat increases on level up."""
    SLOW = "slow"
    MEDIUM = "medium"
    FAST = "fast"
    CUSTOM = "custom"


# Dice rolled for each preset rate.
GROWTH_DICE = {
    GrowthRate.SLOW: "1d2",
    GrowthRate.MEDIUM: "1d3",
    GrowthRate.FAST: "3d2",
}


@dataclass(frozen=True)
class StatGrowth:
    """
    A growth rate and the dice expression it rolls.

    Use the SLOW, MEDIUM and FAST presets, or StatGrowth.custom("2d4+1")
    for stats that do not fit them. Custom expressions are only parsed
    when rolled.
    """
    rate: GrowthRate
    custom_dice: Optional[str] = None

    def __post_init__(self):
        if self.rate is GrowthRate.CUSTOM:
            if not isinstance(self.custom_dice, str):
                raise InvalidDiceExpressionError(
                    f"Custom growth needs a dice expression, got {self.custom_dice!r}"
                )
        elif self.custom_dice is not None:
            raise InvalidDiceExpressionError(
                f"{self.rate.name} growth rolls {GROWTH_DICE[self.rate]} and takes no custom dice"
            )

    @classmethod
    def custom(cls, dice: str) -> 'StatGrowth':
        return cls(GrowthRate.CUSTOM, dice)

    @property
    def dice(self) -> str:
        """The dice expression for this growth rate."""
        if self.rate is GrowthRate.CUSTOM:
            return self.custom_dice
        return GROWTH_DICE[self.rate]

    def roll(self, roller: Optional[DiceRoller] = None) -> int:
        """
        Roll the increase for one level up.

        Args:
            roller: Random source to use. The shared roller when omitted.

        Raises:
            InvalidDiceExpressionError: If a custom expression cannot be parsed.
        """
        roller = roller or get_dice_roller()
        result = roller.roll(self.dice)
        logger.debug(f"Stat growth {self.rate.name} ({self.dice}) rolled {result}")
        return result

    def __str__(self) -> str:
        if self.rate is GrowthRate.CUSTOM:
            return f"Custom({self.custom_dice})"
        return self.rate.name.capitalize()


StatGrowth.SLOW = StatGrowth(GrowthRate.SLOW)
StatGrowth.MEDIUM = StatGrowth(GrowthRate.MEDIUM)
StatGrowth.FAST = StatGrowth(GrowthRate.FAST)
