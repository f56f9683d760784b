# cube_timer/app/terminal.py
from __future__ import annotations

import logging
from typing import Optional

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.live import Live
from rich.style import Style
from rich.text import Text

from cube_timer.app.controller import Controller
from cube_timer.app.frame import Frame
from cube_timer.app.term_input import KeyReader
from cube_timer.app.theme import FACE_COLORS
from cube_timer.core.config import TimerConfig
from cube_timer.core.session import Session

logger = logging.getLogger(__name__)


def render_frame(frame: Frame) -> RenderableType:
    """Convierte un `Frame` en un renderable de Rich centrado en pantalla.

    Layout (igual en todos los estados):
        etiqueta
        <vacío>
        <vacío>
        segundos o scramble

    Args:
        frame: Contenido a pintar.

    Returns:
        Renderable que ocupa toda la pantalla.
    """
    text_style = Style(color=frame.fg, bold=True)
    lines = [
        Text(frame.label, style=text_style, justify="center"),
        Text(""),
        Text(""),
    ]

    if frame.seconds is not None:
        lines.append(Text(frame.seconds, style=text_style, justify="center"))

    if frame.moves:
        scramble = Text(justify="center")
        for i, mv in enumerate(frame.moves):
            if i:
                scramble.append(" ")
            scramble.append(str(mv), style=Style(color=FACE_COLORS[mv.face], bold=True))
        lines.append(scramble)

    bg_style: Optional[Style] = Style(bgcolor=frame.bg) if frame.bg else None
    return Align.center(Group(*lines), vertical="middle", style=bg_style)


def run_terminal(config: TimerConfig, console: Optional[Console] = None) -> None:
    """Loop principal de la interfaz de terminal.

    Cada iteración: poll de teclado con timeout corto -> aplicar acciones y
    timeout de inspección -> redibujar si el frame cambió. La pantalla alternativa
    y el modo de la terminal se restauran al salir, también si hay un error.

    Args:
        config: Preferencias de ejecución.
        console: Consola de Rich (por defecto, una nueva sobre stdout).
    """
    console = console or Console()
    session = Session.from_config(config)
    controller = Controller(session, color_bg=config.color_bg)

    last = controller.frame()
    with KeyReader() as keys, Live(
        render_frame(last),
        console=console,
        screen=True,
        auto_refresh=False,
        transient=True,
    ) as live:
        while True:
            if not controller.step(keys.poll(config.poll_interval)):
                break

            frame = controller.frame()
            if frame != last:
                live.update(render_frame(frame), refresh=True)
                last = frame

    if session.history:
        logger.info("Sesión terminada con %d resoluciones", len(session.history))
