# cube_timer/app/term_input.py
from __future__ import annotations

import os
import sys
import time
from types import TracebackType
from typing import List, Optional, Type


class TerminalError(RuntimeError):
    """La terminal no se puede usar (stdin no es TTY o no acepta el modo cbreak)."""


def split_keys(text: str) -> List[str]:
    """Separa un bloque leído de la terminal en teclas individuales.

    Las secuencias de escape de teclas especiales (flechas, F1..., `ESC [ ... final`
    o `ESC O x`) no tienen acción y se descartan completas; el resto de los
    caracteres se conserva en orden.

    Args:
        text: Caracteres leídos en un solo `read`.

    Returns:
        Lista de teclas (un carácter cada una).
    """
    keys: List[str] = []
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if ch != "\x1b":
            keys.append(ch)
            i += 1
            continue

        nxt = text[i + 1] if i + 1 < n else ""
        if nxt == "[":
            # CSI: parámetros e intermedios hasta el byte final (0x40-0x7e)
            i += 2
            while i < n and not ("\x40" <= text[i] <= "\x7e"):
                i += 1
            i += 1
        elif nxt == "O":
            i += 3
        else:
            # ESC suelto
            i += 1
    return keys


if os.name == "nt":
    import msvcrt

    class KeyReader:
        """Lector de teclas sin bloqueo para Windows (consola)."""

        def __enter__(self) -> "KeyReader":
            if not sys.stdin.isatty():
                raise TerminalError("stdin no es una terminal interactiva.")
            return self

        def __exit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
        ) -> None:
            return None

        def poll(self, timeout: float) -> List[str]:
            """Espera hasta `timeout` segundos y retorna todas las teclas pendientes."""
            deadline = time.monotonic() + timeout
            while not msvcrt.kbhit():
                if time.monotonic() >= deadline:
                    return []
                time.sleep(0.001)

            keys: List[str] = []
            while msvcrt.kbhit():
                ch = msvcrt.getwch()
                # Teclas especiales (flechas, F1...) llegan en dos partes
                if ch in ("\x00", "\xe0"):
                    msvcrt.getwch()
                    continue
                keys.append(ch)
            return keys

else:
    import select
    import termios
    import tty

    class KeyReader:
        """Lector de teclas sin bloqueo para terminales Unix.

        Al entrar pone stdin en modo cbreak (sin eco, sin buffer de línea) y al salir
        restaura siempre la configuración original, incluso si hubo una excepción.

        Raises:
            TerminalError: Si stdin no es una TTY o no se puede cambiar su modo.
        """

        def __init__(self) -> None:
            self._fd: int = -1
            self._saved: Optional[list] = None

        def __enter__(self) -> "KeyReader":
            if not sys.stdin.isatty():
                raise TerminalError("stdin no es una terminal interactiva.")
            self._fd = sys.stdin.fileno()
            try:
                self._saved = termios.tcgetattr(self._fd)
                tty.setcbreak(self._fd)
            except termios.error as exc:
                raise TerminalError(f"No se pudo configurar la terminal: {exc}") from exc
            return self

        def __exit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
        ) -> None:
            if self._saved is not None:
                termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
                self._saved = None

        def poll(self, timeout: float) -> List[str]:
            """Espera hasta `timeout` segundos y retorna todas las teclas pendientes.

            Args:
                timeout: Espera máxima en segundos.

            Returns:
                Lista de caracteres leídos (vacía si no hubo teclas).
            """
            rlist, _, _ = select.select([self._fd], [], [], timeout)
            if not rlist:
                return []

            data = os.read(self._fd, 64)
            return split_keys(data.decode("utf-8", errors="ignore"))
