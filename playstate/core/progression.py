from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, Optional, Set

from playstate.core.persistence import PersistedState

logger = logging.getLogger(__name__)

FIRST_LEVEL = 1


class ProgressionModel:
    """Unlocked levels and the level last started.

    Levels are 1-based. Level 1 is always unlocked and levels are never
    locked again once unlocked.
    """

    def __init__(
        self,
        total_levels: int,
        unlocked_levels: Optional[Iterable[int]] = None,
        current_level: int = FIRST_LEVEL,
    ) -> None:
        if total_levels < FIRST_LEVEL:
            raise ValueError(f"total_levels must be at least {FIRST_LEVEL}, got {total_levels}")
        self._total_levels = total_levels
        self._unlocked: Set[int] = {FIRST_LEVEL}
        for level in unlocked_levels or ():
            if self._in_range(level):
                self._unlocked.add(level)
            else:
                logger.warning("Ignoring unlocked level %s outside 1..%d", level, total_levels)
        self._current_level = current_level

    @classmethod
    def from_state(cls, state: PersistedState, total_levels: int) -> "ProgressionModel":
        return cls(total_levels, state.unlocked_levels, state.current_level)

    @property
    def total_levels(self) -> int:
        return self._total_levels

    @property
    def current_level(self) -> int:
        return self._current_level

    @property
    def unlocked_levels(self) -> FrozenSet[int]:
        return frozenset(self._unlocked)

    def is_level_unlocked(self, level_number: int) -> bool:
        return level_number in self._unlocked

    def select_level(self, level_number: int) -> None:
        self._current_level = level_number

    def unlock_next_level(self) -> bool:
        """Unlock the level after the current one.

        Returns True if a level was added, meaning the change must be saved.
        """
        next_level = self._current_level + 1
        if not self._in_range(next_level) or next_level in self._unlocked:
            return False
        self._unlocked.add(next_level)
        logger.info("Unlocked level %d", next_level)
        return True

    def _in_range(self, level_number: int) -> bool:
        return FIRST_LEVEL <= level_number <= self._total_levels
