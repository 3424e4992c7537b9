# ui/main_window.py
import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QComboBox
)
from PySide6.QtCore import Qt

from app.errors import InvalidStateError
from app.state import StopWatchConfig, StopWatchState
from ui.widgets import StopWatchView

FORMATS = ["HH:mm:ss", "HH:mm:ss.zzz", "mm:ss", "mm:ss.zzz", "H:mm:ss"]


class MainWindow(QMainWindow):
    def __init__(self, config: StopWatchConfig = None):
        super().__init__()
        self.setWindowTitle("StopWatch")
        self.resize(420, 220)

        root = QWidget(self)
        root_v = QVBoxLayout(root)
        root_v.setContentsMargins(16, 16, 16, 16)
        root_v.setSpacing(16)

        self.view = StopWatchView(config, parent=root)
        root_v.addWidget(self.view, 1)

        row = QHBoxLayout()
        row.setSpacing(10)
        self.btn_start = QPushButton("Start", root)
        self.btn_start.clicked.connect(self._on_start)
        self.btn_pause = QPushButton("Pause", root)
        self.btn_pause.clicked.connect(self._on_pause)
        self.btn_stop = QPushButton("Stop", root)
        self.btn_stop.clicked.connect(self._on_stop)
        for btn in (self.btn_start, self.btn_pause, self.btn_stop):
            btn.setFocusPolicy(Qt.NoFocus)
            row.addWidget(btn)

        self.cmb_format = QComboBox(root)
        self.cmb_format.setEditable(True)
        self.cmb_format.addItems(FORMATS)
        if self.view.format not in FORMATS:
            self.cmb_format.addItem(self.view.format)
        self.cmb_format.setCurrentText(self.view.format)
        self.cmb_format.currentTextChanged.connect(self._on_format_changed)
        row.addWidget(self.cmb_format)
        root_v.addLayout(row)

        self.setCentralWidget(root)
        self._sync_buttons()

    # ---------------- Actions ----------------
    def _run(self, action):
        try:
            action()
        except InvalidStateError as e:
            logging.warning("StopWatch action rejected: %s", e)
            self.statusBar().showMessage(f"Cannot do that: {e}", 3000)
        self._sync_buttons()

    def _on_start(self):
        self._run(self.view.start)

    def _on_pause(self):
        self._run(self.view.pause)

    def _on_stop(self):
        self._run(self.view.stop)

    def _on_format_changed(self, fmt: str):
        if not fmt:
            return
        self.view.format = fmt

    def _sync_buttons(self):
        state = self.view.state
        self.btn_start.setText("Resume" if state is StopWatchState.PAUSED else "Start")
        self.btn_start.setEnabled(state is not StopWatchState.STARTED)
        self.btn_pause.setEnabled(state is StopWatchState.STARTED)
        self.btn_stop.setEnabled(state is not StopWatchState.STOPPED)

    def closeEvent(self, event):
        self.view.dispose()
        super().closeEvent(event)
