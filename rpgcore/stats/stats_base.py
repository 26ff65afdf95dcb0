"""
Base enums and stat kinds for the stats system.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Union


class StatName(Enum):
    """All stats an entity can have."""
    HEALTH_POINTS = "Health Points"
    SKILL_POINTS = "Skill Points"
    DEFENSE = "Defense"
    SPECIAL_DEFENSE = "Special Defense"
    ATTACK = "Attack"
    SPECIAL_ATTACK = "Special Attack"
    SPEED = "Speed"
    EVASION = "Evasion"
    FRIENDSHIP = "Friendship"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, stat_name: str) -> 'StatName':
        """Convert a string such as "SPECIAL_ATTACK" or "Special Attack" to a StatName."""
        normalized = stat_name.strip().lower().replace(" ", "_")
        for stat in cls:
            if stat.name.lower() == normalized or stat.value.lower().replace(" ", "_") == normalized:
                return stat
        raise ValueError(f"Unknown stat name: {stat_name}")


@dataclass(frozen=True)
class Depletable:
    """
    A stat that is consumed and restored during battle, such as HP.

    ``current`` is not checked against ``maximum``.
    """
    current: int
    maximum: int


@dataclass(frozen=True)
class Static:
    """A stat that only changes through base updates or modifiers."""
    value: int


StatKind = Union[Depletable, Static]
