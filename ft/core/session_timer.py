"""The focus-session stopwatch: pure logic, no Qt, no I/O.

One ``SessionTimer`` exists per running application. It moves between idle,
running and paused only through ``start``/``pause``/``resume``/``stop``/``reset``.
Calls made in the wrong state are silent no-ops, never errors.

Elapsed time is measured against the wall clock.  The clock is injectable so
tests can drive it by hand.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from ft.common.logger import log

_ONE_SECOND = timedelta(seconds=1)


def _wall_clock():
    return datetime.now().astimezone()


@dataclass
class TimerState:
    is_running: bool = False
    is_paused: bool = False
    start_time: datetime | None = None          # start of the current unpaused interval
    accumulated_time: timedelta = field(default_factory=timedelta)
    elapsed_seconds: int = 0
    category: str = ""

    @staticmethod
    def idle():
        return TimerState()


@dataclass(frozen=True)
class StopResult:
    duration: int
    category: str


class SessionTimer:

    def __init__(self, clock=None):
        self._clock = clock or _wall_clock
        self._state = TimerState.idle()

    # Read-only copy of the state, so callers can't mutate around the operations.
    @property
    def state(self):
        return replace(self._state)

    @property
    def is_running(self):
        return self._state.is_running
    @property
    def is_paused(self):
        return self._state.is_paused
    # True only while the clock is actually accruing time.
    @property
    def is_ticking(self):
        return self._state.is_running and not self._state.is_paused
    @property
    def category(self):
        return self._state.category
    @property
    def elapsed_seconds(self):
        return self._state.elapsed_seconds
    @property
    def accumulated_time(self):
        return self._state.accumulated_time
    @property
    def start_time(self):
        return self._state.start_time

    # Always wipes whatever came before and begins a fresh session.
    def start(self, category):
        now = self._clock()
        self._state = TimerState(
            is_running=True,
            is_paused=False,
            start_time=now,
            accumulated_time=timedelta(),
            elapsed_seconds=0,
            category=category,
        )
        log.debug(f"Started session '{category}' at {now.isoformat()}")

    def pause(self):
        if not self.is_ticking:
            return
        now = self._clock()
        st = self._state
        st.accumulated_time += now - st.start_time
        st.start_time = None
        st.is_paused = True
        # Freeze the display at the exact pause instant instead of leaving the last tick standing.
        st.elapsed_seconds = max(st.elapsed_seconds, int(st.accumulated_time // _ONE_SECOND))
        log.debug(f"Paused session '{st.category}' with {st.accumulated_time.total_seconds():.3f}s accumulated")

    def resume(self):
        st = self._state
        if not (st.is_running and st.is_paused):
            return
        st.start_time = self._clock()
        st.is_paused = False
        log.debug(f"Resumed session '{st.category}' at {st.start_time.isoformat()}")

    # Recomputes elapsed_seconds from the clock. Outside the running-unpaused condition the last value stands.
    def refresh(self):
        st = self._state
        if self.is_ticking:
            elapsed = self._clock() - st.start_time + st.accumulated_time
            st.elapsed_seconds = max(st.elapsed_seconds, int(elapsed // _ONE_SECOND))
        return st.elapsed_seconds

    # Ends the session and reports what it accrued. Idle timers return None and stay untouched.
    def stop(self):
        if not self._state.is_running:
            return None
        self.refresh()
        result = StopResult(duration=self._state.elapsed_seconds, category=self._state.category)
        self._state = TimerState.idle()
        log.debug(f"Stopped session '{result.category}' after {result.duration}s")
        return result

    def reset(self):
        if self._state.is_running:
            log.debug(f"Discarded session '{self._state.category}' at {self._state.elapsed_seconds}s")
        self._state = TimerState.idle()
