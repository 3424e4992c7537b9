# core/chrono.py
from __future__ import annotations
import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal

from app.errors import InvalidStateError
from app.state import StopWatchConfig, StopWatchState, validate_format, validate_interval
from core.scheduler import Clock, MonotonicClock, QtScheduler, Scheduler
from utils.time_format import format_elapsed

Formatter = Callable[[int, str], str]


class StopWatch(QObject):
    """
    Start / pause / stop state machine driven by a periodic scheduler.

    Elapsed time is `now - anchor` while started. Resuming from a pause shifts
    the anchor forward by the paused duration, so paused time never counts.
    Every tick re-renders the elapsed time with `format` and emits it.
    """

    textChanged = Signal(str)
    started = Signal()
    paused = Signal()
    resumed = Signal()
    stopped = Signal()

    def __init__(
        self,
        config: Optional[StopWatchConfig] = None,
        scheduler: Optional[Scheduler] = None,
        clock: Optional[Clock] = None,
        formatter: Optional[Formatter] = None,
        parent=None,
    ):
        super().__init__(parent)
        config = config if config is not None else StopWatchConfig()
        self._format = config.format
        self._interval_ms = config.interval_ms
        self._scheduler = scheduler if scheduler is not None else QtScheduler(self)
        self._clock = clock if clock is not None else MonotonicClock()
        self._formatter = formatter if formatter is not None else format_elapsed

        self._state = StopWatchState.STOPPED
        self._anchor = 0        # ms; elapsed = now - anchor while started
        self._paused_at = 0     # ms; only meaningful while paused
        self._subscribed = False
        self._text = self._formatter(0, self._format)

    # ---------------- Properties ----------------
    @property
    def state(self) -> StopWatchState:
        return self._state

    @property
    def text(self) -> str:
        return self._text

    @property
    def format(self) -> str:
        return self._format

    @format.setter
    def format(self, fmt: str):
        self._format = validate_format(fmt)
        # running / paused watches pick it up on the next tick
        if self._state is StopWatchState.STOPPED:
            self._set_text(self._formatter(0, self._format))

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @interval_ms.setter
    def interval_ms(self, value: int):
        # only reaches the scheduler if it has never been programmed
        self._interval_ms = validate_interval(value)

    # ---------------- Transitions ----------------
    def start(self):
        if self._state is StopWatchState.STARTED:
            logging.debug("StopWatch.start rejected: already started")
            raise InvalidStateError("already started")

        resuming = self._state is StopWatchState.PAUSED
        now = self._clock.now()
        if resuming:
            self._anchor = now - self._paused_at + self._anchor
            self._paused_at = 0
        else:
            self._anchor = now
            self._subscribe()

        if self._scheduler.period() == 0:
            self._scheduler.program(self._interval_ms)
        self._scheduler.start()
        self._state = StopWatchState.STARTED
        logging.debug("StopWatch %s at %d ms", "resumed" if resuming else "started", now)
        (self.resumed if resuming else self.started).emit()

    def pause(self):
        if self._state is not StopWatchState.STARTED:
            logging.debug("StopWatch.pause rejected: state is %s", self._state.name)
            raise InvalidStateError("not started")

        self._scheduler.stop()
        self._paused_at = self._clock.now()
        self._state = StopWatchState.PAUSED
        logging.debug("StopWatch paused at %d ms", self._paused_at)
        self.paused.emit()

    def stop(self):
        if self._state is StopWatchState.STOPPED:
            logging.debug("StopWatch.stop rejected: already stopped")
            raise InvalidStateError("not started or paused")

        self._scheduler.stop()
        self._unsubscribe()
        self._anchor = 0
        self._paused_at = 0
        self._set_text(self._formatter(0, self._format))
        self._state = StopWatchState.STOPPED
        logging.debug("StopWatch stopped")
        self.stopped.emit()

    def dispose(self):
        """Halt ticks and drop the subscription. Safe in any state, any number of times."""
        self._scheduler.stop()
        self._unsubscribe()

    # ---------------- Queries ----------------
    def elapsed_ms(self) -> int:
        if self._state is StopWatchState.STARTED:
            return self._clock.now() - self._anchor
        if self._state is StopWatchState.PAUSED:
            return self._paused_at - self._anchor
        return 0

    # ---------------- Internals ----------------
    def _subscribe(self):
        if not self._subscribed:
            self._scheduler.subscribe(self._on_tick)
            self._subscribed = True

    def _unsubscribe(self):
        if self._subscribed:
            self._scheduler.unsubscribe(self._on_tick)
            self._subscribed = False

    def _set_text(self, text: str):
        self._text = text
        self.textChanged.emit(text)

    def _on_tick(self):
        # a timeout queued before pause() can still arrive
        if self._state is not StopWatchState.STARTED:
            return
        self._set_text(self._formatter(self._clock.now() - self._anchor, self._format))
