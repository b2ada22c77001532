from __future__ import annotations

import time
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal


class QtGameClock(QObject):
    """Elapsed game time that stops advancing while frozen.

    Emits ``ticked`` with the total elapsed seconds on every timer tick.
    """

    ticked = Signal(float)

    def __init__(self, interval_ms: int = 100, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._elapsed = 0.0
        self._last_tick: Optional[float] = None
        self._frozen = False
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def frozen(self) -> bool:
        return self._frozen

    def start(self) -> None:
        """Reset elapsed time and start ticking (unfrozen)."""
        self._elapsed = 0.0
        self._frozen = False
        self._last_tick = time.monotonic()
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        self._last_tick = None

    def set_frozen(self, frozen: bool) -> None:
        if frozen == self._frozen:
            return
        if frozen:
            self._advance()
        self._frozen = frozen
        self._last_tick = time.monotonic()

    def _advance(self) -> None:
        now = time.monotonic()
        if self._last_tick is not None and not self._frozen:
            self._elapsed += now - self._last_tick
        self._last_tick = now

    def _on_timeout(self) -> None:
        self._advance()
        self.ticked.emit(self._elapsed)
