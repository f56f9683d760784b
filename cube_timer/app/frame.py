# cube_timer/app/frame.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from cube_timer.app import theme
from cube_timer.core.config import INSPECTION_WARNING_SECONDS
from cube_timer.core.session import Done, Idle, Inspecting, Session, Solving
from cube_timer.logic.moves import Move

LABEL_IDLE = "Press space to start"
LABEL_INSPECTING = "Inspecting"
LABEL_SOLVING = "Solving"
LABEL_DONE = "Done"


@dataclass(frozen=True)
class Frame:
    """Contenido completo de un redibujado de pantalla.

    Las interfaces (terminal o ventana Qt) solo saben pintar un `Frame`; toda la
    lógica de qué mostrar en cada estado vive en `build_frame`.

    Attributes:
        label: Texto de estado.
        seconds: Segundos con 3 decimales (ej: "12.345s"); None en Idle.
        moves: Movimientos del scramble (solo en Idle).
        fg: Color del texto.
        bg: Color de fondo, o None si no se pinta.
    """

    label: str
    seconds: Optional[str]
    moves: Tuple[Move, ...]
    fg: str
    bg: Optional[str]


def format_seconds(secs: float) -> str:
    return f"{secs:.3f}s"


def build_frame(session: Session, color_bg: bool = False) -> Frame:
    """Construye el frame que corresponde al estado actual de la sesión.

    Args:
        session: Sesión a mostrar. Los tiempos se recalculan en este momento.
        color_bg: Preferencia de fondo coloreado.

    Returns:
        El `Frame` listo para pintar.
    """
    state = session.state

    if isinstance(state, Idle):
        fg, bg = theme.IDLE.colors(color_bg)
        return Frame(LABEL_IDLE, None, state.scramble.moves, fg, bg)

    if isinstance(state, Inspecting):
        remaining = session.inspection_remaining()
        # Aviso cuando quedan pocos segundos
        if remaining < INSPECTION_WARNING_SECONDS:
            tone = theme.INSPECTING_WARNING
        else:
            tone = theme.INSPECTING
        fg, bg = tone.colors(color_bg)
        return Frame(LABEL_INSPECTING, format_seconds(remaining), (), fg, bg)

    if isinstance(state, Solving):
        fg, bg = theme.SOLVING.colors(color_bg)
        return Frame(LABEL_SOLVING, format_seconds(session.solve_elapsed()), (), fg, bg)

    # Done
    fg, bg = theme.DONE.colors(color_bg)
    return Frame(LABEL_DONE, format_seconds(state.elapsed), (), fg, bg)
