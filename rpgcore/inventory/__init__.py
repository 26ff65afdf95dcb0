"""
Items and equipment.
"""

from rpgcore.inventory.item import EquipmentType, ItemCategory, ItemKind, Item
from rpgcore.inventory.equipment import Equipment
