"""
A single character stat with its modifier stack.
"""

from dataclasses import dataclass, field

from rpgcore.errors import MismatchedModifierError
from rpgcore.stats.modifier import Modifier, ModifierKind, Modifiers
from rpgcore.stats.stat_growth import StatGrowth
from rpgcore.stats.stats_base import Depletable, Static, StatKind, StatName
from rpgcore.utils.logging_config import get_logger

logger = get_logger(__name__)

# Upper bounds for base values. Endgame values sit well below these:
# HP around 500, SP around 250, Friendship 6-15, everything else around 150.
FRIENDSHIP_LIMIT = 15
DEFAULT_LIMIT = 999


@dataclass
class Stat:
    """
    One stat of an entity: its name, kind, modifier stack and growth rate.

    The kind holds the base value. Modifiers never touch the base; they are
    folded in only when value() is computed.
    """
    name: StatName
    kind: StatKind
    stat_growth: StatGrowth = StatGrowth.SLOW
    modifiers: Modifiers = field(default_factory=Modifiers)

    @property
    def limit(self) -> int:
        """Largest base value this stat accepts."""
        return FRIENDSHIP_LIMIT if self.name is StatName.FRIENDSHIP else DEFAULT_LIMIT

    def base(self) -> int:
        """
        Get the base value, without modifiers.

        For a depletable stat this is the current value, not the maximum.
        """
        if isinstance(self.kind, Depletable):
            return self.kind.current
        return self.kind.value

    def _in_range(self, value: int) -> bool:
        return 0 < value <= self.limit

    def set_base(self, value: int) -> None:
        """
        Set the base value.

        Values outside 1..limit are ignored without raising; the call just has
        no effect. A depletable stat keeps its maximum.
        """
        if not self._in_range(value):
            logger.debug(f"Ignoring base value {value} for {self.name} (allowed 1-{self.limit})")
            return

        if isinstance(self.kind, Depletable):
            self.kind = Depletable(value, self.kind.maximum)
        else:
            self.kind = Static(value)

    def grow(self, increase: int) -> None:
        """
        Raise the base by a level-up increase.

        A depletable stat also raises its maximum, capped at the limit. Like
        set_base, a result outside 1..limit leaves the stat unchanged.
        """
        new_base = self.base() + increase
        if not self._in_range(new_base):
            logger.debug(f"Ignoring growth of {increase} for {self.name}: {new_base} out of range")
            return

        if isinstance(self.kind, Depletable):
            self.kind = Depletable(new_base, min(self.kind.maximum + increase, self.limit))
        else:
            self.kind = Static(new_base)

    def add_modifier(self, modifier: Modifier) -> None:
        self.modifiers.add(modifier)

    def remove_modifier(self, modifier: Modifier) -> None:
        self.modifiers.remove(modifier)

    def value(self) -> float:
        """
        Get the value with modifiers applied.

        Additive modifiers are applied first and multiplicative ones second,
        so (base + additive) * multiplicative.
        """
        additive = self.modifiers.additive
        multiplicative = self.modifiers.multiplicative
        if additive.kind is not ModifierKind.ADDITIVE or multiplicative.kind is not ModifierKind.MULTIPLICATIVE:
            raise MismatchedModifierError(
                f"Corrupted modifier stack on {self.name}: "
                f"{additive.kind.name}/{multiplicative.kind.name}"
            )

        current_value = float(self.base())
        current_value += additive.amount
        current_value *= multiplicative.factor
        return current_value
