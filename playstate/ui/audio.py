"""Two-channel audio output for music and sound effects."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject
from PySide6.QtMultimedia import QAudioOutput

logger = logging.getLogger(__name__)


class AudioMixer(QObject):
    """Holds one QAudioOutput per channel. Players attach to ``music_output``
    or ``effects_output`` and inherit the channel volume."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.music_output = QAudioOutput(self)
        self.effects_output = QAudioOutput(self)

    def set_music_volume(self, volume: float) -> None:
        self.music_output.setVolume(volume)
        logger.debug("Music volume set to %.2f", volume)

    def set_effects_volume(self, volume: float) -> None:
        self.effects_output.setVolume(volume)
        logger.debug("Effects volume set to %.2f", volume)
