# core/scheduler.py
from __future__ import annotations
from typing import Callable, List, Protocol

from PySide6.QtCore import QObject, QElapsedTimer, QTimer, Qt

TickCallback = Callable[[], None]


class Scheduler(Protocol):
    def program(self, period_ms: int) -> None: ...
    def period(self) -> int: ...
    def start(self) -> None: ...
    def stop(self) -> None: ...
    def subscribe(self, callback: TickCallback) -> None: ...
    def unsubscribe(self, callback: TickCallback) -> None: ...


class Clock(Protocol):
    def now(self) -> int: ...


class QtScheduler(QObject):
    """Periodic callbacks on top of QTimer. Period stays 0 until programmed."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._timer = QTimer(self)
        self._timer.setTimerType(Qt.PreciseTimer)
        self._callbacks: List[TickCallback] = []

    def program(self, period_ms: int):
        self._timer.setInterval(period_ms)

    def period(self) -> int:
        return self._timer.interval()

    def start(self):
        self._timer.start()

    def stop(self):
        self._timer.stop()

    def is_active(self) -> bool:
        return self._timer.isActive()

    def subscribe(self, callback: TickCallback):
        self._callbacks.append(callback)
        self._timer.timeout.connect(callback)

    def unsubscribe(self, callback: TickCallback):
        # disconnecting an unknown slot makes Qt complain
        if callback in self._callbacks:
            self._callbacks.remove(callback)
            self._timer.timeout.disconnect(callback)


class MonotonicClock:
    def __init__(self):
        self._t = QElapsedTimer()
        self._t.start()

    def now(self) -> int:
        return self._t.elapsed()
