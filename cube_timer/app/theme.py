# cube_timer/app/theme.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from cube_timer.logic.moves import Face


@dataclass(frozen=True)
class Theme:
    """Par de colores (texto, fondo) asociado a un estado de la sesión."""

    fg: str
    bg: str

    def colors(self, color_bg: bool) -> Tuple[str, Optional[str]]:
        """Colores a usar según la preferencia de fondo.

        Args:
            color_bg: Si True se pinta el fondo y el texto pasa a un tono claro fijo.

        Returns:
            (color de texto, color de fondo o None si el fondo no se pinta).
        """
        if color_bg:
            return BG_MODE_FG, self.bg
        return self.fg, None


IDLE = Theme("#c0c0c0", "#202020")
INSPECTING = Theme("#7070d0", "#303070")
INSPECTING_WARNING = Theme("#d09060", "#905030")
SOLVING = Theme("#50a050", "#306030")
DONE = Theme("#a060a0", "#703060")

BG_MODE_FG = "#e0e0c0"

# Color de cada token del scramble según su cara
FACE_COLORS: Dict[Face, str] = {
    Face.FRONT: "#cd3131",
    Face.BACK: "#0dbc79",
    Face.LEFT: "#e5e510",
    Face.RIGHT: "#2472c8",
    Face.UP: "#bc3fbc",
    Face.DOWN: "#11a8cd",
}
