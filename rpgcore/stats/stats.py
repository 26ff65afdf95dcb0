"""
The full set of stats belonging to one entity.
"""

from typing import Iterable, Iterator, List, Optional

from rpgcore.errors import DuplicateStatError, StatNotFoundError
from rpgcore.stats.stat import Stat
from rpgcore.stats.stat_growth import StatGrowth
from rpgcore.stats.stats_base import Depletable, Static, StatName
from rpgcore.utils.logging_config import get_logger

logger = get_logger(__name__)

# Stats whose kind is Depletable in a default collection.
DEPLETABLE_STATS = (StatName.HEALTH_POINTS, StatName.SKILL_POINTS)


class Stats:
    """
    An ordered collection holding one Stat per StatName.

    Every StatName is expected to be present. Looking up a missing name means
    the collection is corrupt and raises StatNotFoundError.
    """

    def __init__(self, stats: Optional[Iterable[Stat]] = None):
        self.stats: List[Stat] = list(stats or [])

        seen = set()
        for stat in self.stats:
            if stat.name in seen:
                logger.error(f"Duplicate stat {stat.name} in Stats collection")
                raise DuplicateStatError(f"Stat {stat.name} appears more than once")
            seen.add(stat.name)

    @classmethod
    def default(cls) -> 'Stats':
        """Create the canonical collection: every stat at 0 with SLOW growth."""
        stats = []
        for name in StatName:
            kind = Depletable(0, 0) if name in DEPLETABLE_STATS else Static(0)
            stats.append(Stat(name, kind, StatGrowth.SLOW))
        return cls(stats)

    def lookup(self, name: StatName) -> Stat:
        """
        Get the stat with the given name.

        The returned Stat is the live object; changes to it change this collection.

        Raises:
            StatNotFoundError: If the stat is missing.
        """
        for stat in self.stats:
            if stat.name is name:
                return stat
        logger.error(f"Invalid stat lookup: {name!r}")
        raise StatNotFoundError(f"Invalid Stat {name!r}")

    def __getitem__(self, name: StatName) -> Stat:
        return self.lookup(name)

    def __contains__(self, name: object) -> bool:
        return any(stat.name is name for stat in self.stats)

    def __iter__(self) -> Iterator[Stat]:
        return iter(self.stats)

    def __len__(self) -> int:
        return len(self.stats)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stats):
            return NotImplemented
        return self.stats == other.stats

    def __repr__(self) -> str:
        return f"Stats({self.stats!r})"

    def names(self) -> List[StatName]:
        return [stat.name for stat in self.stats]

    def values(self) -> dict:
        """Map each stat's display name to its modified value."""
        return {str(stat.name): stat.value() for stat in self.stats}
