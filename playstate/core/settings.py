from __future__ import annotations

import math

from playstate.core.collaborators import AudioSink

MIN_VOLUME = 0.0
MAX_VOLUME = 1.0


def clamp_volume(value: float) -> float:
    """Clamp a volume into [0.0, 1.0]. Rejects non-numbers and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"volume must be a number, got {type(value).__name__}")
    if math.isnan(value):
        raise ValueError("volume must not be NaN")
    return max(MIN_VOLUME, min(MAX_VOLUME, float(value)))


class SettingsModel:
    """Music and sound-effect volumes, forwarded to the audio collaborator."""

    def __init__(self, audio: AudioSink, music_volume: float = 1.0, sfx_volume: float = 1.0) -> None:
        self._audio = audio
        self._music_volume = clamp_volume(music_volume)
        self._sfx_volume = clamp_volume(sfx_volume)

    @property
    def music_volume(self) -> float:
        return self._music_volume

    @property
    def sfx_volume(self) -> float:
        return self._sfx_volume

    def set_music_volume(self, value: float) -> float:
        self._music_volume = clamp_volume(value)
        self._audio.set_music_volume(self._music_volume)
        return self._music_volume

    def set_sfx_volume(self, value: float) -> float:
        self._sfx_volume = clamp_volume(value)
        self._audio.set_effects_volume(self._sfx_volume)
        return self._sfx_volume

    def apply_all(self) -> None:
        """Push both volumes to the audio collaborator."""
        self._audio.set_music_volume(self._music_volume)
        self._audio.set_effects_volume(self._sfx_volume)
