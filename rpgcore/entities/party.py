"""
The player's party.
"""

from typing import Iterable, List, Optional

from rpgcore.entities.entity import Entity
from rpgcore.errors import CapacityExceededError
from rpgcore.utils.logging_config import get_logger

logger = get_logger(__name__)

MAX_ACTIVE_MEMBERS = 4


class Party:
    """
    Party members, split into the active party and the reserve.

    Only active members take part in battles. Reserve members can be switched
    in outside battle.
    """

    def __init__(self, active_party: Optional[Iterable[Entity]] = None,
                 reserved_party: Optional[Iterable[Entity]] = None):
        active_party = list(active_party or [])
        if len(active_party) > MAX_ACTIVE_MEMBERS:
            raise CapacityExceededError(f"There can only be {MAX_ACTIVE_MEMBERS} active party members.")
        self.active_party: List[Entity] = active_party
        self.reserved_party: List[Entity] = list(reserved_party or [])

    def add_active(self, member: Entity) -> None:
        if len(self.active_party) >= MAX_ACTIVE_MEMBERS:
            raise CapacityExceededError(f"There can only be {MAX_ACTIVE_MEMBERS} active party members.")
        self.active_party.append(member)
        logger.debug(f"{member.name} joined the active party")

    def add_reserved(self, member: Entity) -> None:
        self.reserved_party.append(member)
        logger.debug(f"{member.name} joined the reserve")

    @staticmethod
    def remove_by_id(party: Iterable[Entity], entity_id: int) -> List[Entity]:
        """Return the members of party without the given id. Missing ids are ignored."""
        return [entity for entity in party if entity.id != entity_id]

    def remove_active(self, member: Entity) -> None:
        self.active_party = self.remove_by_id(self.active_party, member.id)

    def remove_reserved(self, member: Entity) -> None:
        self.reserved_party = self.remove_by_id(self.reserved_party, member.id)

    def switch_members(self, active_member: Entity, reserved_member: Entity) -> None:
        """Move an active member to the reserve and a reserve member into the active party."""
        self.remove_active(active_member)
        self.add_reserved(active_member)
        self.add_active(reserved_member)
        self.remove_reserved(reserved_member)
