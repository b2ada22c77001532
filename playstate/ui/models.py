"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from playstate.core.levels import Level, LevelCatalogue
from playstate.core.progression import ProgressionModel


@dataclass
class LevelState:
    """UI state for a single level button: unlock status and selection."""

    level: Level
    unlocked: bool
    is_current: bool = False


def build_level_states(catalogue: LevelCatalogue, progression: ProgressionModel) -> List[LevelState]:
    """One entry per catalogue level, marking the level last played."""
    return [
        LevelState(
            level=level,
            unlocked=progression.is_level_unlocked(level.number),
            is_current=level.number == progression.current_level,
        )
        for level in catalogue.all()
    ]
