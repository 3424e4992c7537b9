# ui/widgets/stopwatch_view.py
from __future__ import annotations
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QLabel, QVBoxLayout

from app.state import StopWatchConfig, StopWatchState
from core.chrono import StopWatch


class StopWatchView(QWidget):
    """Label that shows the stopwatch text; forwards the stopwatch API."""

    def __init__(self, config: Optional[StopWatchConfig] = None,
                 stopwatch: Optional[StopWatch] = None, parent=None):
        super().__init__(parent)
        self.stopwatch = stopwatch if stopwatch is not None else StopWatch(config, parent=self)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self.lblTime = QLabel(self.stopwatch.text, self)
        self.lblTime.setObjectName("lblTime")
        self.lblTime.setAlignment(Qt.AlignCenter)
        self.lblTime.setStyleSheet("font-size: 48px;")
        root.addWidget(self.lblTime)

        self.stopwatch.textChanged.connect(self.lblTime.setText)

    @property
    def format(self) -> str:
        return self.stopwatch.format

    @format.setter
    def format(self, fmt: str):
        self.stopwatch.format = fmt

    @property
    def interval_ms(self) -> int:
        return self.stopwatch.interval_ms

    @interval_ms.setter
    def interval_ms(self, value: int):
        self.stopwatch.interval_ms = value

    @property
    def state(self) -> StopWatchState:
        return self.stopwatch.state

    def start(self):  self.stopwatch.start()
    def pause(self):  self.stopwatch.pause()
    def stop(self):   self.stopwatch.stop()
    def dispose(self): self.stopwatch.dispose()

    def closeEvent(self, event):
        self.stopwatch.dispose()
        super().closeEvent(event)
