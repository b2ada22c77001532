from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QKeySequence, QResizeEvent, QShortcut
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSlider,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from playstate.core.levels import LevelCatalogue
from playstate.core.session import SessionController, SessionMode
from playstate.ui.colors import Palette, blend_hex
from playstate.ui.game_clock import QtGameClock
from playstate.ui.models import build_level_states

logger = logging.getLogger(__name__)

LEVEL_COLUMNS = 4


class MainWindow(QMainWindow):
    """Menus, level selection and the gameplay screen.

    Acts as the session's presentation and scene-loading collaborator. Built
    before the controller exists, then wired with ``bind``.
    """

    def __init__(self, catalogue: LevelCatalogue, clock: QtGameClock) -> None:
        super().__init__()
        self._catalogue = catalogue
        self._clock = clock
        self._controller: Optional[SessionController] = None
        self._current_scene: str = ""
        self._level_buttons: Dict[int, QPushButton] = {}

        self._stack = QStackedWidget()
        self._main_menu = self._build_main_menu()
        self._settings_menu = self._build_settings_menu()
        self._level_selection = self._build_level_selection()
        self._gameplay = self._build_gameplay()
        for page in (self._main_menu, self._settings_menu, self._level_selection, self._gameplay):
            self._stack.addWidget(page)

        central = QWidget()
        central.setObjectName("root")
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._stack)
        self.setCentralWidget(central)

        self._pause_overlay = self._build_pause_overlay(central)
        self._pause_overlay.hide()

        self._pause_shortcut = QShortcut(QKeySequence(Qt.Key_Escape), self)
        self._pause_shortcut.activated.connect(self._toggle_pause)
        self._clock.ticked.connect(self._on_clock_ticked)

        self.setWindowTitle("playstate")
        self.resize(960, 640)
        self._apply_styles()

    def bind(self, controller: SessionController) -> None:
        self._controller = controller

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def show_main_menu(self) -> None:
        self._clock.stop()
        self._stack.setCurrentWidget(self._main_menu)

    def show_settings_menu(self) -> None:
        self._clock.stop()
        settings = self._require_controller().settings
        for slider, value in (
            (self._music_slider, settings.music_volume),
            (self._sfx_slider, settings.sfx_volume),
        ):
            slider.blockSignals(True)
            slider.setValue(round(value * 100))
            slider.blockSignals(False)
        self._stack.setCurrentWidget(self._settings_menu)

    def show_level_selection(self) -> None:
        self._clock.stop()
        self._refresh_level_buttons()
        self._stack.setCurrentWidget(self._level_selection)

    def show_gameplay(self, level_number: int) -> None:
        if level_number in self._level_buttons:
            title = self._catalogue.get(level_number).title
            self._gameplay_title.setText(f"Level {level_number}: {title}")
        else:
            self._gameplay_title.setText(f"Level {level_number}")
        self._scene_label.setText(self._current_scene)
        self._time_label.setText(_format_elapsed(0.0))
        self._clock.start()
        self._stack.setCurrentWidget(self._gameplay)

    def show_pause_menu(self) -> None:
        self._pause_overlay.setGeometry(self.centralWidget().rect())
        self._pause_overlay.raise_()
        self._pause_overlay.show()

    def hide_pause_menu(self) -> None:
        self._pause_overlay.hide()

    # ------------------------------------------------------------------
    # Scene loading
    # ------------------------------------------------------------------

    def load_scene(self, name: str) -> None:
        logger.info("Loading scene %s", name)
        self._current_scene = name

    # ------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        if self._pause_overlay.isVisible():
            self._pause_overlay.setGeometry(self.centralWidget().rect())

    def closeEvent(self, event: QCloseEvent) -> None:
        """Persist progress when closing the app."""
        if self._controller is not None and not self._controller.on_shutdown():
            logger.warning("Progress was not saved on exit")
        self._clock.stop()
        super().closeEvent(event)

    # ------------------------------------------------------------------
    # Page construction
    # ------------------------------------------------------------------

    def _build_main_menu(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setAlignment(Qt.AlignCenter)
        layout.setSpacing(16)

        title = QLabel("playstate")
        title.setObjectName("title")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        for text, slot in (
            ("Play", lambda: self._require_controller().open_level_selection()),
            ("Settings", lambda: self._require_controller().open_settings()),
            ("Quit", self.close),
        ):
            layout.addWidget(self._menu_button(text, slot), 0, Qt.AlignHCenter)
        return page

    def _build_settings_menu(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setAlignment(Qt.AlignCenter)
        layout.setSpacing(16)

        heading = QLabel("Settings")
        heading.setObjectName("heading")
        heading.setAlignment(Qt.AlignCenter)
        layout.addWidget(heading)

        self._music_slider = self._volume_slider(
            lambda v: self._require_controller().set_music_volume(v / 100.0)
        )
        self._sfx_slider = self._volume_slider(
            lambda v: self._require_controller().set_sfx_volume(v / 100.0)
        )
        for label_text, slider in (("Music", self._music_slider), ("Effects", self._sfx_slider)):
            row = QHBoxLayout()
            label = QLabel(label_text)
            label.setMinimumWidth(80)
            row.addWidget(label)
            row.addWidget(slider)
            layout.addLayout(row)

        layout.addWidget(
            self._menu_button("Back", lambda: self._require_controller().return_to_main_menu()),
            0,
            Qt.AlignHCenter,
        )
        return page

    def _build_level_selection(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setAlignment(Qt.AlignCenter)
        layout.setSpacing(16)

        heading = QLabel("Select a level")
        heading.setObjectName("heading")
        heading.setAlignment(Qt.AlignCenter)
        layout.addWidget(heading)

        grid = QGridLayout()
        grid.setSpacing(12)
        for index, level in enumerate(self._catalogue.all()):
            button = QPushButton(f"{level.number}\n{level.title}")
            button.setObjectName("levelButton")
            button.setMinimumSize(160, 90)
            button.clicked.connect(
                lambda _checked=False, n=level.number: self._require_controller().start_game(n)
            )
            self._level_buttons[level.number] = button
            grid.addWidget(button, index // LEVEL_COLUMNS, index % LEVEL_COLUMNS)
        layout.addLayout(grid)

        layout.addWidget(
            self._menu_button("Back", lambda: self._require_controller().return_to_main_menu()),
            0,
            Qt.AlignHCenter,
        )
        return page

    def _build_gameplay(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setAlignment(Qt.AlignCenter)
        layout.setSpacing(16)

        self._gameplay_title = QLabel("")
        self._gameplay_title.setObjectName("heading")
        self._gameplay_title.setAlignment(Qt.AlignCenter)
        self._scene_label = QLabel("")
        self._scene_label.setObjectName("muted")
        self._scene_label.setAlignment(Qt.AlignCenter)
        self._time_label = QLabel(_format_elapsed(0.0))
        self._time_label.setObjectName("timer")
        self._time_label.setAlignment(Qt.AlignCenter)
        for widget in (self._gameplay_title, self._scene_label, self._time_label):
            layout.addWidget(widget)

        row = QHBoxLayout()
        row.addWidget(self._menu_button("Pause", lambda: self._require_controller().pause_game()))
        row.addWidget(
            self._menu_button("Complete level", lambda: self._require_controller().complete_level())
        )
        layout.addLayout(row)
        return page

    def _build_pause_overlay(self, parent: QWidget) -> QWidget:
        overlay = QWidget(parent)
        overlay.setObjectName("pauseOverlay")
        overlay.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        layout = QVBoxLayout(overlay)
        layout.setAlignment(Qt.AlignCenter)
        layout.setSpacing(16)

        heading = QLabel("Paused")
        heading.setObjectName("heading")
        heading.setAlignment(Qt.AlignCenter)
        layout.addWidget(heading)
        for text, slot in (
            ("Resume", lambda: self._require_controller().resume_game()),
            ("Settings", lambda: self._require_controller().open_settings()),
            ("Main menu", lambda: self._require_controller().return_to_main_menu()),
        ):
            layout.addWidget(self._menu_button(text, slot), 0, Qt.AlignHCenter)
        return overlay

    def _menu_button(self, text: str, slot) -> QPushButton:
        button = QPushButton(text)
        button.setMinimumWidth(220)
        button.setCursor(Qt.PointingHandCursor)
        button.clicked.connect(lambda _checked=False: slot())
        return button

    def _volume_slider(self, on_change) -> QSlider:
        slider = QSlider(Qt.Horizontal)
        slider.setRange(0, 100)
        # Only report the value once the handle is released, so a drag is one save.
        slider.setTracking(False)
        slider.valueChanged.connect(on_change)
        return slider

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_controller(self) -> SessionController:
        if self._controller is None:
            raise RuntimeError("MainWindow.bind() must be called before use")
        return self._controller

    def _refresh_level_buttons(self) -> None:
        controller = self._require_controller()
        for state in build_level_states(self._catalogue, controller.progression):
            button = self._level_buttons[state.level.number]
            button.setEnabled(state.unlocked)
            button.setProperty("current", state.is_current)
            button.style().unpolish(button)
            button.style().polish(button)

    def _toggle_pause(self) -> None:
        if self._controller is None:
            return
        if self._controller.mode is SessionMode.PLAYING:
            self._controller.pause_game()
        elif self._controller.mode is SessionMode.PAUSED:
            self._controller.resume_game()

    def _on_clock_ticked(self, elapsed: float) -> None:
        self._time_label.setText(_format_elapsed(elapsed))

    def _apply_styles(self) -> None:
        hover = blend_hex(Palette.BUTTON_BG, "#FFFFFF", 0.12)
        self.setStyleSheet(
            f"""
            QWidget#root {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {Palette.BG_TOP},
                    stop:1 {Palette.BG_BOTTOM}
                );
            }}
            QLabel {{ color: {Palette.TEXT_PRIMARY}; font-size: 15px; }}
            QLabel#title {{ color: {Palette.PRIMARY}; font-size: 48px; font-weight: 700; }}
            QLabel#heading {{ font-size: 28px; font-weight: 600; }}
            QLabel#muted {{ color: {Palette.TEXT_MUTED}; }}
            QLabel#timer {{ color: {Palette.ACCENT}; font-size: 36px; }}
            QPushButton {{
                background: {Palette.BUTTON_BG};
                color: {Palette.TEXT_PRIMARY};
                border: 1px solid {Palette.PRIMARY_DARK};
                border-radius: 10px;
                padding: 10px 18px;
                font-size: 16px;
            }}
            QPushButton:hover {{ background: {hover}; }}
            QPushButton:disabled {{
                background: {Palette.BUTTON_BG_DISABLED};
                color: {Palette.TEXT_MUTED};
                border-color: {Palette.BUTTON_BG_DISABLED};
            }}
            QPushButton#levelButton[current="true"] {{ border: 2px solid {Palette.PRIMARY}; }}
            QWidget#pauseOverlay {{ background: {Palette.OVERLAY_BG}; }}
            """
        )


def _format_elapsed(seconds: float) -> str:
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"
