# tests/conftest.py
# Shared fixtures: headless Qt app plus deterministic clock / scheduler doubles

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from core.chrono import StopWatch


class FakeClock:
    def __init__(self, start: int = 0):
        self.ms = start

    def now(self) -> int:
        return self.ms

    def advance(self, ms: int):
        self.ms += ms

    def set(self, ms: int):
        self.ms = ms


class FakeScheduler:
    def __init__(self):
        self.period_ms = 0
        self.running = False
        self.callbacks = []
        self.program_calls = []

    def program(self, period_ms):
        self.period_ms = period_ms
        self.program_calls.append(period_ms)

    def period(self):
        return self.period_ms

    def start(self):
        self.running = True

    def stop(self):
        self.running = False

    def subscribe(self, callback):
        self.callbacks.append(callback)

    def unsubscribe(self, callback):
        self.callbacks.remove(callback)

    def fire(self):
        # copy: handlers may unsubscribe while we iterate
        for cb in list(self.callbacks):
            cb()


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def watch(clock, scheduler):
    return StopWatch(scheduler=scheduler, clock=clock)


@pytest.fixture
def emitted(watch):
    texts = []
    watch.textChanged.connect(texts.append)
    return texts
