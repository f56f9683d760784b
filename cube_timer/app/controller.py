# cube_timer/app/controller.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterable, Optional

from cube_timer.app.frame import Frame, build_frame
from cube_timer.core.session import Session

logger = logging.getLogger(__name__)


class Action(Enum):
    QUIT = "quit"
    ADVANCE = "advance"
    RESHUFFLE = "reshuffle"
    TOGGLE_BG = "toggle_bg"


KEYMAP: Dict[str, Action] = {
    " ": Action.ADVANCE,
    "r": Action.RESHUFFLE,
    "c": Action.TOGGLE_BG,
    "q": Action.QUIT,
}


def action_for_key(key: str) -> Optional[Action]:
    """Traduce una tecla presionada a una acción (None si no tiene asignada)."""
    return KEYMAP.get(key.lower() if len(key) == 1 else key)


class Controller:
    """Une la sesión con las interfaces: aplica teclas y arma el frame a pintar.

    Cada iteración del loop de la UI hace:
        1. `step(teclas pendientes)` -> aplica acciones y revisa el timeout.
        2. `frame()` -> contenido a redibujar.

    Attributes:
        session: Sesión que se controla (única instancia mutable).
        color_bg: Preferencia visual de fondo coloreado (fuera de la máquina de estados).
    """

    def __init__(self, session: Session, color_bg: bool = False) -> None:
        self.session: Session = session
        self.color_bg: bool = color_bg

    def handle_key(self, key: str) -> bool:
        """Aplica la acción asociada a una tecla.

        Args:
            key: Tecla presionada (un carácter).

        Returns:
            False si la tecla pide salir; True en cualquier otro caso.
        """
        action = action_for_key(key)
        if action is None:
            return True

        if action is Action.QUIT:
            logger.debug("Salida pedida por el usuario")
            return False
        if action is Action.ADVANCE:
            self.session.advance()
        elif action is Action.RESHUFFLE:
            # Fuera de Idle se ignora
            self.session.reshuffle()
        elif action is Action.TOGGLE_BG:
            self.color_bg = not self.color_bg
        return True

    def step(self, keys: Iterable[str]) -> bool:
        """Procesa todas las teclas pendientes en orden y luego el timeout de inspección.

        Args:
            keys: Teclas leídas en este poll (puede no haber ninguna o varias).

        Returns:
            False si se pidió salir.
        """
        for key in keys:
            if not self.handle_key(key):
                return False
        self.session.update()
        return True

    def frame(self) -> Frame:
        return build_frame(self.session, self.color_bg)
