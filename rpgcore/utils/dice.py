"""
Dice rolling utilities for stat growth.

Expressions use dice notation, e.g. "3d2" or "2d6+3". All rolls go through a
DiceRoller; a process-wide roller is created lazily by get_dice_roller().
"""

import re
import random
import threading
from typing import Any, Dict, List, Optional

from rpgcore.errors import InvalidDiceExpressionError
from rpgcore.utils.logging_config import get_logger

logger = get_logger(__name__)

# Dice notation: NdS with an optional +M / -M modifier. The dice count may be omitted ("d6").
# Each number is at most six digits so oversized input fails the match before int().
DICE_PATTERN = re.compile(r'(\d{0,6})d(\d{1,6})(?:([+\-])(\d{1,6}))?')

# Upper bounds on a single roll.
MAX_DICE = 1000
MAX_SIDES = 1000


def parse_dice_notation(notation: str) -> Dict[str, Any]:
    """
    Parse a dice notation string (e.g., "2d6+3").

    Args:
        notation: The dice notation string.

    Returns:
        Dictionary with keys 'num_dice', 'sides' and 'modifier'.

    Raises:
        InvalidDiceExpressionError: If the notation is invalid.
    """
    if not isinstance(notation, str):
        raise InvalidDiceExpressionError(f"Invalid dice notation: {notation!r}")

    match = DICE_PATTERN.fullmatch(notation.strip().lower())
    if not match:
        raise InvalidDiceExpressionError(f"Invalid dice notation: {notation!r}")

    num_dice = int(match.group(1)) if match.group(1) else 1
    sides = int(match.group(2))
    if num_dice < 1 or sides < 1:
        raise InvalidDiceExpressionError(
            f"Invalid dice notation: {notation!r} (dice count and sides must be at least 1)"
        )
    if num_dice > MAX_DICE or sides > MAX_SIDES:
        raise InvalidDiceExpressionError(
            f"Invalid dice notation: {notation!r} (at most {MAX_DICE} dice of at most {MAX_SIDES} sides)"
        )

    modifier = 0
    if match.group(3):
        modifier = int(match.group(4))
        if match.group(3) == '-':
            modifier = -modifier

    return {'num_dice': num_dice, 'sides': sides, 'modifier': modifier}


class DiceRoller:
    """
    Thread-safe random source for dice rolls.

    Concurrent callers serialize on an internal lock. With a seed the
    sequence is reproducible for a single caller; interleaving between
    threads is not.
    """

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    def roll_dice(self, num_dice: int, sides: int) -> List[int]:
        """Roll num_dice dice with the given number of sides."""
        with self._lock:
            return [self._random.randint(1, sides) for _ in range(num_dice)]

    def roll_notation(self, notation: str) -> Dict[str, Any]:
        """
        Roll dice based on dice notation.

        Returns:
            A dictionary with 'total', 'rolls' and 'modifier'.
        """
        parsed = parse_dice_notation(notation)
        rolls = self.roll_dice(parsed['num_dice'], parsed['sides'])
        total = sum(rolls) + parsed['modifier']
        logger.debug(f"Rolled {notation}: Rolls={rolls}, Mod={parsed['modifier']}, Final={total}")
        return {"total": total, "rolls": rolls, "modifier": parsed['modifier']}

    def roll(self, notation: str) -> int:
        """Roll dice notation and return only the total."""
        return self.roll_notation(notation)["total"]


_roller: Optional[DiceRoller] = None
_roller_lock = threading.Lock()


def get_dice_roller() -> DiceRoller:
    """
    Get the shared dice roller, creating it on first use.

    The seed comes from the ``progression.rng_seed`` configuration value
    when a configuration is already loaded. Otherwise the roller is seeded
    from OS entropy; rolling never creates the configuration or touches disk.
    """
    global _roller
    if _roller is None:
        with _roller_lock:
            if _roller is None:
                from rpgcore.base.config import peek_config
                config = peek_config()
                seed = config.get("progression.rng_seed") if config is not None else None
                _roller = DiceRoller(seed)
                logger.debug(f"Shared dice roller created (seed={seed})")
    return _roller


def set_dice_roller(roller: Optional[DiceRoller]) -> None:
    """Replace the shared dice roller. Passing None recreates it lazily."""
    global _roller
    with _roller_lock:
        _roller = roller
