#===============================================================================
#  App_Bootstrapper | bootstrapper/main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Small progress window shown while the runtime / application are being
#  installed:
#    - label with the current phase + progress bar
#    - starts the bootstrap worker thread once the window is up
#    - worker -> window handoff through ProgressChannel, woken by a Qt signal
#    - generic error dialog on failure, silent exit on success
#===============================================================================

from __future__ import annotations

import sys
import threading
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QObject, Qt, QTimer, Signal
from PySide6.QtGui import QFont, QIcon, QPixmap
from PySide6.QtWidgets import (
    QApplication,
    QLabel,
    QMessageBox,
    QProgressBar,
    QVBoxLayout,
    QWidget,
)

from .channel import ProgressChannel
from .constants import (
    ERROR_MESSAGE,
    ERROR_TITLE,
    ICON_FILE_NAME,
    INITIAL_LABEL,
    PROGRESS_STEPS,
    SPLASH_FILE_NAME,
    WINDOW_POSITION,
    WINDOW_SIZE,
    WINDOW_STYLE,
)
from .models import BootstrapConfig, ProgressSignal
from .workflow import BootstrapWorkflow


class NoticeBridge(QObject):
    """Emitted from the worker thread; delivered queued on the GUI thread."""
    notice = Signal()


class DownloadWindow(QWidget):
    def __init__(self, config: BootstrapConfig, assets_dir: Optional[Path] = None, parent=None):
        super().__init__(parent)
        self.config = config
        self.background: Optional[QLabel] = None
        self.setWindowTitle(config.title)
        self.setFixedSize(*WINDOW_SIZE)
        self.move(*WINDOW_POSITION)
        self.setStyleSheet(WINDOW_STYLE)

        self._alive = True
        self.exit_code = 1
        self._worker: Optional[threading.Thread] = None

        self.label = QLabel(INITIAL_LABEL)
        self.label.setAlignment(Qt.AlignCenter)
        f = QFont("Segoe UI", 11)
        f.setWeight(QFont.Weight.Medium)
        self.label.setFont(f)

        self.progress = QProgressBar()
        self.progress.setRange(0, PROGRESS_STEPS)
        self.progress.setValue(0)
        self.progress.setTextVisible(False)

        lay = QVBoxLayout(self)
        lay.setContentsMargins(30, 10, 30, 10)
        lay.setSpacing(6)
        lay.addWidget(self.progress)
        lay.addWidget(self.label)

        if assets_dir is not None:
            self._load_artwork(assets_dir)

        self._bridge = NoticeBridge()
        self._bridge.notice.connect(self._on_notice, Qt.QueuedConnection)
        self.channel = ProgressChannel(wake=self._bridge.notice.emit)

        QTimer.singleShot(0, self.start_worker)

    def _load_artwork(self, assets_dir: Path) -> None:
        """Window icon and splash background, both optional."""
        icon_path = assets_dir / ICON_FILE_NAME
        if icon_path.exists():
            self.setWindowIcon(QIcon(str(icon_path)))

        splash_path = assets_dir / SPLASH_FILE_NAME
        if splash_path.exists():
            pixmap = QPixmap(str(splash_path))
            if not pixmap.isNull():
                self.background = QLabel(self)
                self.background.setPixmap(pixmap.scaled(*WINDOW_SIZE))
                self.background.setGeometry(0, 0, *WINDOW_SIZE)
                self.background.lower()

    # ----------------------------
    # Worker
    # ----------------------------
    def start_worker(self):
        if self._worker is not None:
            return
        workflow = BootstrapWorkflow(self.config, self.channel.send)
        self._worker = threading.Thread(target=workflow.run, name="bootstrap-worker", daemon=True)
        self._worker.start()

    def _on_notice(self):
        self.channel.drain_one(self)

    # ----------------------------
    # Observer
    # ----------------------------
    def is_alive(self) -> bool:
        return self._alive

    def on_progress(self, signal: ProgressSignal) -> None:
        if signal.label:
            self.label.setText(signal.label)
        if signal.position is not None:
            self.progress.setValue(signal.position)

        if signal is ProgressSignal.COMPLETED:
            self._finish(0)
        elif signal is ProgressSignal.FAILED:
            QMessageBox.critical(self, ERROR_TITLE, ERROR_MESSAGE)
            self._finish(1)

    def _finish(self, code: int) -> None:
        self.exit_code = code
        self._alive = False
        self.close()

    def closeEvent(self, event):
        # worker (if any) is abandoned with the process
        self._alive = False
        QApplication.exit(self.exit_code)
        super().closeEvent(event)


def run_window(config: BootstrapConfig, assets_dir: Optional[Path] = None) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    w = DownloadWindow(config, assets_dir)
    w.show()
    app.exec()
    return w.exit_code
