# main.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

from cube_timer.core.config import TimerConfig
from cube_timer.logic.scramble import AdjacencyRule

logger = logging.getLogger("cube_timer")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Define los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="cube-timer",
        description="Timer de speedcubing con scramble aleatorio e inspección de 15 s.",
    )
    parser.add_argument(
        "--gui", action="store_true", help="usar la ventana PySide6 en vez de la terminal"
    )
    parser.add_argument(
        "--rule",
        choices=[r.value for r in AdjacencyRule],
        default=AdjacencyRule.AXIS.value,
        help="regla entre movimientos consecutivos (por defecto: axis)",
    )
    parser.add_argument(
        "--color-bg", action="store_true", help="pintar el fondo con el color del estado"
    )
    parser.add_argument("--seed", type=int, default=None, help="semilla de los scrambles")
    parser.add_argument("--log-file", default=None, help="archivo donde escribir el log")
    parser.add_argument("-v", "--verbose", action="store_true", help="log en nivel DEBUG")
    return parser


def configure_logging(log_file: Optional[str], verbose: bool) -> None:
    """Configura logging solo hacia archivo: la terminal la ocupa la interfaz.

    Args:
        log_file: Ruta del archivo de log. Si es None no se configura nada.
        verbose: Si True, nivel DEBUG; si no, INFO.
    """
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def run(config: TimerConfig, gui: bool) -> int:
    """Ejecuta la interfaz elegida y retorna el código de salida."""
    if gui:
        from PySide6.QtWidgets import QApplication

        from cube_timer.app.main_window import TimerWindow

        app = QApplication(sys.argv)
        w = TimerWindow(config)
        w.show()
        return app.exec()

    from cube_timer.app.terminal import run_terminal

    run_terminal(config)
    return 0


def main(argv: Optional[List[str]] = None) -> NoReturn:
    """Punto de entrada de la aplicación.

    Lee los argumentos, configura logging y lanza la interfaz de terminal (o la
    ventana Qt con `--gui`). Los errores de terminal/entrada no se reintentan:
    se registran, se informa una línea en stderr y el proceso termina con código 1.

    Returns:
        No retorna (finaliza el proceso con `sys.exit`).
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.verbose)

    config = TimerConfig(
        rule=AdjacencyRule(args.rule),
        color_bg=args.color_bg,
        seed=args.seed,
    )

    try:
        code = run(config, args.gui)
    except KeyboardInterrupt:
        code = 0
    except Exception as exc:  # noqa: BLE001 (error fatal: informar y salir)
        logger.exception("Error fatal")
        print(f"cube-timer: {exc}", file=sys.stderr)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
