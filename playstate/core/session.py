from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Optional

from playstate.core.collaborators import AudioSink, GameClock, Presentation, SceneLoader
from playstate.core.levels import DEFAULT_MAIN_MENU_SCENE, LevelCatalogue
from playstate.core.persistence import PersistedState, PersistenceError, PersistenceStore
from playstate.core.progression import ProgressionModel
from playstate.core.settings import SettingsModel

logger = logging.getLogger(__name__)


class SessionMode(Enum):
    MAIN_MENU = auto()
    SETTINGS_MENU = auto()
    LEVEL_SELECTION = auto()
    PLAYING = auto()
    PAUSED = auto()


class SessionController:
    """Owns the application mode and the live progression/settings state.

    Every mode change, level completion and settings change goes through
    here. Pause and resume are guarded: called from the wrong mode they do
    nothing. Saves happen on unlock, on settings changes, on level
    completion and on shutdown. A failed save is logged and reported as a
    False return, never raised.
    """

    def __init__(
        self,
        store: PersistenceStore,
        presentation: Presentation,
        audio: AudioSink,
        scenes: SceneLoader,
        clock: GameClock,
        catalogue: Optional[LevelCatalogue] = None,
        total_levels: Optional[int] = None,
    ) -> None:
        if total_levels is None:
            if catalogue is None:
                raise ValueError("either catalogue or total_levels is required")
            total_levels = catalogue.total_levels
        self._store = store
        self._presentation = presentation
        self._audio = audio
        self._scenes = scenes
        self._clock = clock
        self._catalogue = catalogue
        self._mode = SessionMode.MAIN_MENU
        self._progression = ProgressionModel(total_levels)
        self._settings = SettingsModel(audio)
        self._last_save_ok = True

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def mode(self) -> SessionMode:
        return self._mode

    @property
    def progression(self) -> ProgressionModel:
        return self._progression

    @property
    def settings(self) -> SettingsModel:
        return self._settings

    @property
    def total_levels(self) -> int:
        return self._progression.total_levels

    @property
    def last_save_ok(self) -> bool:
        """Whether the most recent save reached the disk."""
        return self._last_save_ok

    def is_level_unlocked(self, level_number: int) -> bool:
        return self._progression.is_level_unlocked(level_number)

    def snapshot(self) -> PersistedState:
        return PersistedState(
            music_volume=self._settings.music_volume,
            sfx_volume=self._settings.sfx_volume,
            unlocked_levels=self._progression.unlocked_levels,
            current_level=self._progression.current_level,
        )

    # ------------------------------------------------------------------
    # Lifecycle hooks
    # ------------------------------------------------------------------

    def on_init(self) -> None:
        """Load saved state (or create defaults), apply settings, show the main menu."""
        state = self._store.load()
        first_run = state is None
        if first_run:
            logger.info("No usable player data at %s; creating defaults", self._store.path)
            state = PersistedState.defaults()
        self._progression = ProgressionModel.from_state(state, self.total_levels)
        self._settings = SettingsModel(self._audio, state.music_volume, state.sfx_volume)
        if first_run:
            self._persist()
        else:
            logger.info(
                "Loaded player data: %d of %d levels unlocked",
                len(self._progression.unlocked_levels),
                self.total_levels,
            )
        self._settings.apply_all()
        self._mode = SessionMode.MAIN_MENU
        self._presentation.show_main_menu()

    def on_shutdown(self) -> bool:
        """Save current state before exit. Returns False if the save failed."""
        return self._persist()

    # ------------------------------------------------------------------
    # Mode transitions
    # ------------------------------------------------------------------

    def start_game(self, level_number: int) -> None:
        self._leave_pause()
        self._progression.select_level(level_number)
        self._enter(SessionMode.PLAYING)
        self._scenes.load_scene(self._scene_for(level_number))
        self._presentation.show_gameplay(level_number)

    def return_to_main_menu(self) -> None:
        self._leave_pause()
        self._enter(SessionMode.MAIN_MENU)
        self._scenes.load_scene(self._main_menu_scene())
        self._presentation.show_main_menu()

    def open_settings(self) -> None:
        self._leave_pause()
        self._enter(SessionMode.SETTINGS_MENU)
        self._presentation.show_settings_menu()

    def open_level_selection(self) -> None:
        self._leave_pause()
        self._enter(SessionMode.LEVEL_SELECTION)
        self._presentation.show_level_selection()

    def pause_game(self) -> None:
        if self._mode is not SessionMode.PLAYING:
            logger.debug("Ignoring pause while in %s", self._mode.name)
            return
        self._enter(SessionMode.PAUSED)
        self._clock.set_frozen(True)
        self._presentation.show_pause_menu()

    def resume_game(self) -> None:
        if self._mode is not SessionMode.PAUSED:
            logger.debug("Ignoring resume while in %s", self._mode.name)
            return
        self._enter(SessionMode.PLAYING)
        self._clock.set_frozen(False)
        self._presentation.hide_pause_menu()

    # ------------------------------------------------------------------
    # Progression
    # ------------------------------------------------------------------

    def unlock_next_level(self) -> bool:
        """Unlock the level after the current one and save if anything changed."""
        if self._progression.unlock_next_level():
            return self._persist()
        return True

    def complete_level(self) -> bool:
        """Finish the current level: unlock the next, save, go to level selection.

        Returns False if the progress could not be saved.
        """
        logger.info("Level %d completed", self._progression.current_level)
        self._progression.unlock_next_level()
        saved = self._persist()
        self.open_level_selection()
        return saved

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def set_music_volume(self, volume: float) -> float:
        stored = self._settings.set_music_volume(volume)
        self._persist()
        return stored

    def set_sfx_volume(self, volume: float) -> float:
        stored = self._settings.set_sfx_volume(volume)
        self._persist()
        return stored

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _enter(self, mode: SessionMode) -> None:
        if mode is not self._mode:
            logger.info("Session mode %s -> %s", self._mode.name, mode.name)
        self._mode = mode

    def _leave_pause(self) -> None:
        # Leaving PAUSED any other way than resume must still unfreeze the clock.
        if self._mode is SessionMode.PAUSED:
            self._clock.set_frozen(False)
            self._presentation.hide_pause_menu()

    def _scene_for(self, level_number: int) -> str:
        if self._catalogue is None:
            return f"level{level_number}"
        return self._catalogue.scene_for(level_number)

    def _main_menu_scene(self) -> str:
        if self._catalogue is None:
            return DEFAULT_MAIN_MENU_SCENE
        return self._catalogue.main_menu_scene

    def _persist(self) -> bool:
        try:
            self._store.save(self.snapshot())
        except PersistenceError as e:
            logger.warning("%s", e)
            self._last_save_ok = False
            return False
        self._last_save_ok = True
        return True
