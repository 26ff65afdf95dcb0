"""
Entities in the world: players, NPCs, enemies.
"""

from dataclasses import dataclass, field

from rpgcore.inventory.equipment import Equipment
from rpgcore.inventory.item import Item
from rpgcore.levels.level import LevelData
from rpgcore.stats.stats import Stats


@dataclass
class Entity:
    """
    Any entity in the world: a player controlled character, an NPC, an enemy.

    Attributes:
        name: The name shown in game.
        id: The id assigned on creation.
        stats: Battle stats. Mostly relevant for players and enemies.
        level_data: Current level and experience.
        equipment: Worn equipment, which grants stat bonuses in battle.
    """
    name: str
    id: int
    stats: Stats = field(default_factory=Stats.default)
    level_data: LevelData = field(default_factory=LevelData)
    equipment: Equipment = field(default_factory=Equipment)

    def can_use(self, item: Item) -> bool:
        """Whether this entity may use an item, going by the item's restriction list."""
        if item.restriction is None:
            return True
        return self.id in item.restriction
