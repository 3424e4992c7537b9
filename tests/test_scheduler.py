# tests/test_scheduler.py
from PySide6.QtCore import QEventLoop, QTimer

from app.state import StopWatchState
from core.chrono import StopWatch
from core.scheduler import MonotonicClock, QtScheduler


def _spin(ms):
    loop = QEventLoop()
    QTimer.singleShot(ms, loop.quit)
    loop.exec()


def test_period_is_zero_until_programmed(qapp):
    s = QtScheduler()
    assert s.period() == 0
    s.program(20)
    assert s.period() == 20


def test_ticks_reach_subscribers(qapp):
    s = QtScheduler()
    hits = []
    cb = lambda: hits.append(1)
    s.subscribe(cb)
    s.program(10)
    s.start()
    assert s.is_active()
    _spin(200)
    s.stop()
    assert not s.is_active()
    assert hits

    s.unsubscribe(cb)
    count = len(hits)
    s.start()
    _spin(100)
    s.stop()
    assert len(hits) == count


def test_unsubscribe_unknown_callback_is_noop(qapp):
    s = QtScheduler()
    s.unsubscribe(lambda: None)


def test_monotonic_clock_never_goes_back(qapp):
    c = MonotonicClock()
    first = c.now()
    _spin(20)
    assert first >= 0
    assert c.now() >= first


def test_stopwatch_with_real_timer(qapp):
    watch = StopWatch()
    watch.interval_ms = 10
    texts = []
    watch.textChanged.connect(texts.append)
    watch.start()
    _spin(150)
    watch.pause()
    assert watch.state is StopWatchState.PAUSED
    assert texts
    assert all(t == "00:00:00" for t in texts)
    watch.stop()
    watch.dispose()
    watch.dispose()
