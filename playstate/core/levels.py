from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from playstate import config

DEFAULT_MAIN_MENU_SCENE = "MainMenu"


@dataclass(frozen=True)
class Level:
    number: int
    title: str
    scene: str


class LevelCatalogue:
    """Levels defined in levels.yaml, numbered from 1 in file order."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else config.levels_file()
        self._main_menu_scene, self._levels = self._load_levels()

    @property
    def main_menu_scene(self) -> str:
        return self._main_menu_scene

    @property
    def total_levels(self) -> int:
        return len(self._levels)

    def all(self) -> List[Level]:
        return list(self._levels.values())

    def get(self, number: int) -> Level:
        return self._levels[number]

    def scene_for(self, number: int) -> str:
        """Scene name for a level; ``level<N>`` when the catalogue has no entry."""
        level = self._levels.get(number)
        return level.scene if level is not None else f"level{number}"

    def _load_levels(self) -> tuple[str, Dict[int, Level]]:
        if not self._path.exists():
            raise FileNotFoundError(f"Level catalogue not found: {self._path}")

        name = self._path.name
        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{name}: expected YAML mapping with a 'levels' list")
        main_menu_scene = raw.get("main_menu_scene", DEFAULT_MAIN_MENU_SCENE)
        if not main_menu_scene or not isinstance(main_menu_scene, str):
            raise ValueError(f"{name}: invalid 'main_menu_scene'")
        entries = raw.get("levels")
        if not isinstance(entries, list) or not entries:
            raise ValueError(f"{name}: 'levels' must be a non-empty list")

        levels: Dict[int, Level] = {}
        for number, entry in enumerate(entries, start=1):
            if not isinstance(entry, dict):
                raise ValueError(f"{name}: level {number} must be a mapping")
            title = entry.get("title")
            if not title or not isinstance(title, str):
                raise ValueError(f"{name}: level {number} has missing or invalid 'title'")
            scene = entry.get("scene") or f"level{number}"
            if not isinstance(scene, str):
                raise ValueError(f"{name}: level {number} has invalid 'scene'")
            levels[number] = Level(number=number, title=title.strip(), scene=scene.strip())
        return main_menu_scene.strip(), levels
