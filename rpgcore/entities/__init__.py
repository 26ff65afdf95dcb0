"""
Entities and parties.
"""

from rpgcore.entities.entity import Entity
from rpgcore.entities.party import Party
