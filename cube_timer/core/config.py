# cube_timer/core/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cube_timer.logic.scramble import AdjacencyRule

# Valores fijos por sesión (no configurables por el usuario)
INSPECTION_SECONDS: float = 15.0
INSPECTION_WARNING_SECONDS: float = 3.0

# Espera máxima de cada poll de teclado
TERMINAL_POLL_SECONDS: float = 0.01
GUI_POLL_MS: int = 10


@dataclass
class TimerConfig:
    """Preferencias de ejecución elegidas desde la línea de comandos.

    Attributes:
        rule: Regla de adyacencia para generar scrambles.
        color_bg: Si True, se pinta el fondo con el color del estado.
        seed: Semilla opcional para scrambles reproducibles.
        poll_interval: Timeout (segundos) del poll de entrada en la terminal.
    """

    rule: AdjacencyRule = AdjacencyRule.AXIS
    color_bg: bool = False
    seed: Optional[int] = None
    poll_interval: float = TERMINAL_POLL_SECONDS
