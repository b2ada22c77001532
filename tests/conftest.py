"""Shared fixtures: recording fakes for the session collaborators."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import pytest

from playstate.core.persistence import PersistenceStore
from playstate.core.session import SessionController


class Recorder:
    """Records every collaborator call as (method, args) in order."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, tuple]] = []

    def names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, args))


class FakePresentation(Recorder):
    def show_main_menu(self) -> None:
        self._record("show_main_menu")

    def show_settings_menu(self) -> None:
        self._record("show_settings_menu")

    def show_level_selection(self) -> None:
        self._record("show_level_selection")

    def show_gameplay(self, level_number: int) -> None:
        self._record("show_gameplay", level_number)

    def show_pause_menu(self) -> None:
        self._record("show_pause_menu")

    def hide_pause_menu(self) -> None:
        self._record("hide_pause_menu")


class FakeAudio(Recorder):
    def set_music_volume(self, volume: float) -> None:
        self._record("set_music_volume", volume)

    def set_effects_volume(self, volume: float) -> None:
        self._record("set_effects_volume", volume)


class FakeScenes(Recorder):
    def load_scene(self, name: str) -> None:
        self._record("load_scene", name)


class FakeClock(Recorder):
    def __init__(self) -> None:
        super().__init__()
        self.frozen = False

    def set_frozen(self, frozen: bool) -> None:
        self.frozen = frozen
        self._record("set_frozen", frozen)


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "save" / "playerdata.json"


@pytest.fixture()
def store(data_file: Path) -> PersistenceStore:
    return PersistenceStore(data_file)


@pytest.fixture()
def presentation() -> FakePresentation:
    return FakePresentation()


@pytest.fixture()
def audio() -> FakeAudio:
    return FakeAudio()


@pytest.fixture()
def scenes() -> FakeScenes:
    return FakeScenes()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def make_controller(store, presentation, audio, scenes, clock):
    """Factory for a controller over the temp store; not yet initialised."""

    def _make(total_levels: int = 7, catalogue=None) -> SessionController:
        return SessionController(
            store=store,
            presentation=presentation,
            audio=audio,
            scenes=scenes,
            clock=clock,
            catalogue=catalogue,
            total_levels=None if catalogue is not None else total_levels,
        )

    return _make


@pytest.fixture()
def controller(make_controller) -> SessionController:
    c = make_controller()
    c.on_init()
    return c
