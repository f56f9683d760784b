# cube_timer/app/main_window.py
from __future__ import annotations

import html
from typing import List

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QCloseEvent, QFont, QKeyEvent
from PySide6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from cube_timer.app.controller import Controller
from cube_timer.app.frame import Frame
from cube_timer.app.theme import FACE_COLORS
from cube_timer.core.config import GUI_POLL_MS, TimerConfig
from cube_timer.core.session import Session


class TimerWindow(QMainWindow):
    """Ventana de escritorio (PySide6) para el timer.

    Usa la misma sesión y el mismo `Controller` que la interfaz de terminal.
    Las teclas se acumulan en `keyPressEvent` y un `QTimer` hace de loop de poll:
    cada tick aplica las teclas pendientes, revisa el timeout y redibuja.
    """

    def __init__(self, config: TimerConfig) -> None:
        """Crea la sesión, los labels y arranca el timer de poll."""
        super().__init__()
        self.setWindowTitle("Cube Timer - PySide6")
        self.resize(900, 360)

        # --- Sesión ---
        self.controller: Controller = Controller(
            Session.from_config(config), color_bg=config.color_bg
        )
        self._pending_keys: List[str] = []

        # --- UI ---
        root = QWidget()
        layout = QVBoxLayout(root)
        layout.addStretch(1)

        self.lbl_status = QLabel("")
        self.lbl_value = QLabel("")
        self.lbl_scramble = QLabel("")
        self.lbl_scramble.setTextFormat(Qt.TextFormat.RichText)
        self.lbl_scramble.setWordWrap(True)

        font = QFont()
        font.setBold(True)
        font.setPointSize(18)
        for lbl in (self.lbl_status, self.lbl_value, self.lbl_scramble):
            lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
            lbl.setFont(font)
            layout.addWidget(lbl)
        layout.insertSpacing(2, 40)

        layout.addStretch(1)
        self.setCentralWidget(root)

        # --- Loop de poll ---
        self._timer = QTimer(self)
        self._timer.setInterval(GUI_POLL_MS)
        self._timer.timeout.connect(self._on_tick)
        self._timer.start()

        self._last_frame: Frame = self.controller.frame()
        self._paint(self._last_frame)

    # -------------------
    # Entrada
    # -------------------
    def keyPressEvent(self, event: QKeyEvent) -> None:
        """Encola la tecla presionada (se ignoran las repeticiones automáticas).

        Args:
            event: Evento de teclado de Qt.
        """
        if event.isAutoRepeat():
            return
        if event.key() == Qt.Key.Key_Escape:
            self._pending_keys.append("q")
        elif event.text():
            self._pending_keys.append(event.text())

    def _on_tick(self) -> None:
        """Una iteración del loop: aplica teclas, revisa timeout y redibuja si cambió."""
        keys, self._pending_keys = self._pending_keys, []
        if not self.controller.step(keys):
            self.close()
            return

        frame = self.controller.frame()
        if frame != self._last_frame:
            self._paint(frame)
            self._last_frame = frame

    # -------------------
    # Render
    # -------------------
    def _paint(self, frame: Frame) -> None:
        """Actualiza labels y colores según el frame.

        Args:
            frame: Contenido a mostrar.
        """
        bg = frame.bg or "#000000"
        self.centralWidget().setStyleSheet(f"background-color: {bg};")
        for lbl in (self.lbl_status, self.lbl_value):
            lbl.setStyleSheet(f"color: {frame.fg};")

        self.lbl_status.setText(frame.label)
        self.lbl_value.setText(frame.seconds or "")
        self.lbl_value.setVisible(frame.seconds is not None)

        tokens = [
            f'<span style="color: {FACE_COLORS[mv.face]};">{html.escape(str(mv))}</span>'
            for mv in frame.moves
        ]
        self.lbl_scramble.setText(" ".join(tokens))
        self.lbl_scramble.setVisible(bool(tokens))

    def closeEvent(self, event: QCloseEvent) -> None:
        """Evento de cierre de ventana: detiene el timer de poll.

        Args:
            event: Evento de cierre de Qt.
        """
        self._timer.stop()
        event.accept()
