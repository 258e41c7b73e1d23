"""Qt side of the session timer: owns the one SessionTimer and its 1 s ticker.

The view never touches the SessionTimer directly for mutations; it is handed a
LiveClock and calls its operations, then listens to ``tick`` and
``state_changed``.
"""

from PySide6.QtCore import QObject, QTimer, Signal
from ft.common.logger import log
from ft.core.session_timer import SessionTimer


class LiveClock(QObject):
    tick = Signal(int)            # elapsed seconds
    state_changed = Signal(str)   # 'idle', 'running' or 'paused'

    def __init__(self, timer=None, tick_interval_ms=1000, parent=None):
        super().__init__(parent)
        self._session = timer or SessionTimer()
        self._ticker = QTimer(self)
        self._ticker.setInterval(int(tick_interval_ms))
        self._ticker.timeout.connect(self._on_tick)

    @property
    def timer(self):
        return self._session

    @property
    def ticker_active(self):
        return self._ticker.isActive()

    @property
    def status(self):
        if not self._session.is_running:
            return "idle"
        return "paused" if self._session.is_paused else "running"

    # ------------------------------------------------------------------ #
    #  Operations                                                          #
    # ------------------------------------------------------------------ #

    def start(self, category):
        self._session.start(category)
        self._arm()
        self.tick.emit(self._session.elapsed_seconds)
        self.state_changed.emit("running")

    def pause(self):
        if not self._session.is_ticking:
            return
        self._disarm()
        self._session.pause()
        self.tick.emit(self._session.elapsed_seconds)
        self.state_changed.emit("paused")

    def resume(self):
        if not (self._session.is_running and self._session.is_paused):
            return
        self._session.resume()
        self._arm()
        self.state_changed.emit("running")

    def stop(self):
        self._disarm()
        result = self._session.stop()
        if result is None:
            return None
        self.tick.emit(0)
        self.state_changed.emit("idle")
        return result

    def reset(self):
        self._disarm()
        was_running = self._session.is_running
        self._session.reset()
        if was_running:
            self.tick.emit(0)
            self.state_changed.emit("idle")

    # Owning window is going away: make sure nothing keeps firing into a dead view.
    def shutdown(self):
        self._disarm()
        log.debug("Live clock shut down")

    # ------------------------------------------------------------------ #
    #  Ticker                                                              #
    # ------------------------------------------------------------------ #

    # Any previous ticker is always stopped first so resume can't stack two of them.
    def _arm(self):
        self._ticker.stop()
        self._ticker.start()

    def _disarm(self):
        if self._ticker.isActive():
            self._ticker.stop()

    def _on_tick(self):
        # A timeout queued before a pause/stop can still be delivered; drop it.
        if not self._session.is_ticking:
            self._disarm()
            return
        self.tick.emit(self._session.refresh())
