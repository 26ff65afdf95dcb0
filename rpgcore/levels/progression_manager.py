"""
Manager tying an entity's level progression to its stats.
"""

from typing import Dict, Optional, Union

from PySide6.QtCore import QObject, Signal

from rpgcore.entities.entity import Entity
from rpgcore.errors import StatNotFoundError
from rpgcore.stats.modifier import Modifier
from rpgcore.stats.stats_base import Depletable, StatName
from rpgcore.stats.stats import Stats
from rpgcore.utils.dice import DiceRoller
from rpgcore.utils.logging_config import get_logger


logger = get_logger("PROGRESSION")


class ProgressionManager(QObject):
    """
    Drives level ups for one entity and applies the stat growth they roll.

    Listeners are notified through Qt signals, so a UI can follow the
    entity without polling it.
    """

    # (level, current_experience) after any experience change
    experience_changed = Signal(int, int)
    # New level, emitted once per level gained
    level_up = Signal(int)
    # Stat display name -> modified value
    stats_changed = Signal(dict)

    def __init__(self, entity: Entity, roller: Optional[DiceRoller] = None):
        """
        Initialize the progression manager.

        Args:
            entity: The entity whose level and stats are managed.
            roller: Random source for growth rolls. The shared roller when omitted.
        """
        super().__init__()  # Initialize QObject
        self.entity = entity
        self._roller = roller

    @property
    def stats(self) -> Stats:
        return self.entity.stats

    def award_experience(self, amount: int) -> int:
        """
        Give the entity experience, levelling it up as often as the total allows.

        Every level gained rolls a stat table from the entity's own growth
        rates and adds it onto the entity's stats.

        Returns:
            The number of levels gained.
        """
        level_data = self.entity.level_data
        start_level = level_data.level
        levels_gained = level_data.gain_experience(amount)

        for new_level in range(start_level + 1, start_level + levels_gained + 1):
            increases = self.apply_level_up()
            logger.info(f"{self.entity.name} reached level {new_level}: {increases}")
            self.level_up.emit(new_level)

        self.experience_changed.emit(level_data.level, level_data.current_experience)
        if levels_gained:
            self.stats_changed.emit(self.stats.values())

        return levels_gained

    def apply_level_up(self) -> Dict[str, int]:
        """
        Roll one level's stat table and grow the entity's stats by it.

        Returns:
            Stat display name -> rolled increase.
        """
        table = self.entity.level_data.create_stat_table(growth_from=self.stats, roller=self._roller)
        increases = {}
        for row in table:
            increase = row.kind.maximum if isinstance(row.kind, Depletable) else row.kind.value
            self.stats[row.name].grow(increase)
            increases[str(row.name)] = increase
        return increases

    def _resolve(self, name: Union[StatName, str]) -> StatName:
        if isinstance(name, str):
            try:
                return StatName.from_string(name)
            except ValueError:
                raise StatNotFoundError(f"Unknown stat: {name}")
        return name

    def set_base_stat(self, name: Union[StatName, str], value: int) -> None:
        """
        Set a stat's base value. Out-of-range values are ignored by the stat.

        Args:
            name: The stat, or its name such as "ATTACK" or "Special Attack".
            value: The new base value.

        Raises:
            StatNotFoundError: If the name does not match a stat.
        """
        name = self._resolve(name)
        self.stats[name].set_base(value)
        self.stats_changed.emit(self.stats.values())

    def add_modifier(self, name: Union[StatName, str], modifier: Modifier) -> None:
        name = self._resolve(name)
        self.stats[name].add_modifier(modifier)
        logger.debug(f"Added modifier {modifier} to {name} of {self.entity.name}")
        self.stats_changed.emit(self.stats.values())

    def remove_modifier(self, name: Union[StatName, str], modifier: Modifier) -> None:
        name = self._resolve(name)
        self.stats[name].remove_modifier(modifier)
        logger.debug(f"Removed modifier {modifier} from {name} of {self.entity.name}")
        self.stats_changed.emit(self.stats.values())
