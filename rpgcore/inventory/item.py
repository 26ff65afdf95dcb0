"""
Item data structures.

Items carry a Stats collection describing the bonus they grant, and an
optional restriction naming the entities allowed to use them.
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import List, Optional

from rpgcore.errors import InvalidItemError
from rpgcore.stats.stats import Stats


class EquipmentType(Enum):
    """Slots an equipment item can occupy. An entity holds one of each."""
    ACCESSORY = auto()
    ARMOUR = auto()
    LEGS = auto()
    FEET = auto()
    HEAD = auto()


class ItemCategory(Enum):
    """When and where an item can be used."""
    KEY_ITEM = auto()           # Story items, can never be thrown away
    USABLE_IN_BATTLE = auto()   # e.g. throwing shurikens
    USABLE_IN_FIELD = auto()    # e.g. the phone
    USABLE_EVERYWHERE = auto()  # e.g. potions
    EQUIPMENT = auto()          # Equipped onto entities for stat bonuses


@dataclass(frozen=True)
class ItemKind:
    """
    The kind of an item. Equipment kinds also carry their EquipmentType.
    """
    category: ItemCategory
    equipment_type: Optional[EquipmentType] = None

    def __post_init__(self):
        if (self.category is ItemCategory.EQUIPMENT) != (self.equipment_type is not None):
            raise InvalidItemError("An equipment type is required for, and only for, equipment items")

    @classmethod
    def equipment(cls, equipment_type: EquipmentType) -> 'ItemKind':
        return cls(ItemCategory.EQUIPMENT, equipment_type)

    @property
    def is_equipment(self) -> bool:
        return self.category is ItemCategory.EQUIPMENT


ItemKind.KEY_ITEM = ItemKind(ItemCategory.KEY_ITEM)
ItemKind.USABLE_IN_BATTLE = ItemKind(ItemCategory.USABLE_IN_BATTLE)
ItemKind.USABLE_IN_FIELD = ItemKind(ItemCategory.USABLE_IN_FIELD)
ItemKind.USABLE_EVERYWHERE = ItemKind(ItemCategory.USABLE_EVERYWHERE)


@dataclass
class Item:
    """
    A game item.

    Attributes:
        name: Display name.
        id: Unique id of the item.
        kind: Determines when and how the item can be used.
        restriction: Ids of the entities allowed to use it. None means anyone.
        desc: Description text.
        stats: The effect this item has on stats.
    """
    name: str
    id: int
    kind: ItemKind
    restriction: Optional[List[int]] = None
    desc: str = ""
    stats: Stats = field(default_factory=Stats.default)
