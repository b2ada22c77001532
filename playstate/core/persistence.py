from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional

from playstate import config

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class PersistenceError(Exception):
    """Raised when the player data file cannot be written."""


@dataclass(frozen=True)
class PersistedState:
    """Everything that survives a restart: volumes plus unlocked levels."""

    music_volume: float = 1.0
    sfx_volume: float = 1.0
    unlocked_levels: FrozenSet[int] = field(default_factory=lambda: frozenset({1}))
    current_level: int = 1

    @classmethod
    def defaults(cls) -> "PersistedState":
        return cls()

    def to_document(self) -> Dict[str, Any]:
        return {
            "version": FORMAT_VERSION,
            "musicVolume": self.music_volume,
            "sfxVolume": self.sfx_volume,
            "unlockedLevels": sorted(self.unlocked_levels),
            "currentLevel": self.current_level,
        }

    @classmethod
    def from_document(cls, payload: Any) -> "PersistedState":
        """Build a state from a decoded JSON document.

        Raises ValueError when the document does not have the expected shape.
        Missing ``currentLevel`` falls back to 1 (older files never wrote it).
        """
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
        levels = payload.get("unlockedLevels")
        if not isinstance(levels, list):
            raise ValueError("'unlockedLevels' must be a list")
        if any(isinstance(n, bool) or not isinstance(n, int) for n in levels):
            raise ValueError("'unlockedLevels' must contain integers only")
        current = payload.get("currentLevel", 1)
        if isinstance(current, bool) or not isinstance(current, int):
            raise ValueError("'currentLevel' must be an integer")
        return cls(
            music_volume=_read_volume(payload, "musicVolume"),
            sfx_volume=_read_volume(payload, "sfxVolume"),
            unlocked_levels=frozenset(levels),
            current_level=current,
        )


def _read_volume(payload: Dict[str, Any], key: str) -> float:
    value = payload.get(key, 1.0)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number")
    try:
        volume = float(value)
    except OverflowError:
        raise ValueError(f"'{key}' is out of range") from None
    if not math.isfinite(volume):
        raise ValueError(f"'{key}' must be finite")
    return volume


class PersistenceStore:
    """Reads and writes the single player data document.

    Holds nothing but the path; every call goes to disk. Writes go to a
    sibling ``.tmp`` file which is then renamed over the target.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._file_path = Path(path) if path is not None else config.player_data_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def exists(self) -> bool:
        return self._file_path.exists()

    def load(self) -> Optional[PersistedState]:
        """Return the saved state, or None if there is nothing usable on disk."""
        if not self.exists():
            return None
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
            return PersistedState.from_document(payload)
        except (json.JSONDecodeError, OSError, ValueError) as e:
            logger.warning("Could not load player data from %s: %s", self._file_path, e)
            return None

    def save(self, state: PersistedState) -> None:
        tmp_path = self._file_path.with_suffix(f"{self._file_path.suffix}.tmp")
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(state.to_document(), indent=2), encoding="utf-8")
            tmp_path.replace(self._file_path)
        except OSError as e:
            raise PersistenceError(f"Could not save player data to {self._file_path}: {e}") from e
        logger.debug("Saved player data to %s", self._file_path)
