"""Interfaces the session controller drives. The Qt shell implements them."""

from __future__ import annotations

from typing import Protocol


class Presentation(Protocol):
    def show_main_menu(self) -> None: ...

    def show_settings_menu(self) -> None: ...

    def show_level_selection(self) -> None: ...

    def show_gameplay(self, level_number: int) -> None: ...

    def show_pause_menu(self) -> None: ...

    def hide_pause_menu(self) -> None: ...


class AudioSink(Protocol):
    def set_music_volume(self, volume: float) -> None: ...

    def set_effects_volume(self, volume: float) -> None: ...


class SceneLoader(Protocol):
    def load_scene(self, name: str) -> None: ...


class GameClock(Protocol):
    def set_frozen(self, frozen: bool) -> None: ...
