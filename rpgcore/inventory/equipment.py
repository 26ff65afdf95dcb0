"""
Equipment worn by an entity.
"""

from typing import Iterable, Iterator, List, Optional

from rpgcore.errors import CapacityExceededError, InvalidItemError
from rpgcore.inventory.item import Item
from rpgcore.utils.logging_config import get_logger

logger = get_logger("Inventory")

MAX_EQUIPMENT = 5


class Equipment:
    """
    Up to five equipment items worn by an entity.

    Slot uniqueness (one item per EquipmentType) is not checked.
    """

    def __init__(self, items: Optional[Iterable[Item]] = None):
        items = list(items or [])
        for item in items:
            self._check_equipment(item)
        if len(items) > MAX_EQUIPMENT:
            raise CapacityExceededError(f"There can be no more than {MAX_EQUIPMENT} equipment on an entity.")
        self._items: List[Item] = items

    @staticmethod
    def _check_equipment(item: Item) -> None:
        if not item.kind.is_equipment:
            raise InvalidItemError(
                f"Item '{item.name}' is not equipment; only equipment items can be equipped"
            )

    @property
    def items(self) -> List[Item]:
        return list(self._items)

    def add(self, item: Item) -> None:
        """Equip an item, if it is equipment and fewer than five are worn."""
        self._check_equipment(item)
        if len(self._items) >= MAX_EQUIPMENT:
            raise CapacityExceededError(f"There can be no more than {MAX_EQUIPMENT} equipment on an entity.")
        self._items.append(item)
        logger.debug(f"Equipped '{item.name}' (id {item.id})")

    def remove_by_id(self, item_id: int) -> List[Item]:
        """Return the equipped items without those with the given id. Does not modify the equipment."""
        return [item for item in self._items if item.id != item_id]

    def remove(self, item: Item) -> None:
        """Unequip an item. Nothing happens if it is not equipped."""
        self._items = self.remove_by_id(item.id)
        logger.debug(f"Unequipped item id {item.id}")

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Equipment):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Equipment({self._items!r})"
