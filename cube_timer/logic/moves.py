# cube_timer/logic/moves.py
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Tuple


class Face(IntEnum):
    """Cara (y eje) sobre la que gira un movimiento."""

    FRONT = 0
    BACK = 1
    LEFT = 2
    RIGHT = 3
    UP = 4
    DOWN = 5


class Modifier(IntEnum):
    """Cantidad/sentido del giro: 90° horario, 90° antihorario o 180°."""

    FORWARD = 0
    REVERSE = 1
    DOUBLE = 2


FACE_LETTERS: Dict[Face, str] = {
    Face.FRONT: "F",
    Face.BACK: "B",
    Face.LEFT: "L",
    Face.RIGHT: "R",
    Face.UP: "U",
    Face.DOWN: "D",
}
LETTER_FACES: Dict[str, Face] = {v: k for k, v in FACE_LETTERS.items()}

MODIFIER_SUFFIX: Dict[Modifier, str] = {
    Modifier.FORWARD: "",
    Modifier.REVERSE: "'",
    Modifier.DOUBLE: "2",
}
SUFFIX_MODIFIERS: Dict[str, Modifier] = {v: k for k, v in MODIFIER_SUFFIX.items()}

# Pares de caras opuestas: girar una no afecta a la otra.
AXIS_GROUPS: Tuple[Tuple[Face, Face], ...] = (
    (Face.FRONT, Face.BACK),
    (Face.LEFT, Face.RIGHT),
    (Face.UP, Face.DOWN),
)

_FACE_BITS = 0b0000_0111
_MOD_SHIFT = 3


def axis_group(face: Face) -> int:
    """Devuelve el índice del eje (0: F/B, 1: L/R, 2: U/D) de una cara.

    Args:
        face: Cara del cubo.

    Returns:
        Índice del grupo de eje al que pertenece `face`.
    """
    return int(face) // 2


@dataclass(frozen=True)
class Move:
    """Movimiento individual de un scramble (cara + modificador).

    Es un valor inmutable. Se puede empaquetar en un entero pequeño
    (`pack`/`unpack`) y se imprime en notación estándar:

        Move(Face.UP, Modifier.REVERSE)  -> "U'"
        Move(Face.FRONT, Modifier.DOUBLE) -> "F2"
        Move(Face.LEFT, Modifier.FORWARD) -> "L"
    """

    face: Face
    modifier: Modifier = Modifier.FORWARD

    def __post_init__(self) -> None:
        # Solo se guardan valores válidos: Face(6) o Modifier(3) lanzan ValueError
        object.__setattr__(self, "face", Face(self.face))
        object.__setattr__(self, "modifier", Modifier(self.modifier))

    def __str__(self) -> str:
        return FACE_LETTERS[self.face] + MODIFIER_SUFFIX[self.modifier]

    def pack(self) -> int:
        """Empaqueta el movimiento en un entero: bits 0-2 cara, bits 3-4 modificador."""
        return int(self.face) | (int(self.modifier) << _MOD_SHIFT)

    @classmethod
    def unpack(cls, code: int) -> "Move":
        """Reconstruye un movimiento desde su forma empaquetada.

        La decodificación está verificada: cualquier código que no corresponda a
        una cara y un modificador válidos se rechaza.

        Args:
            code: Entero producido por `pack`.

        Returns:
            El `Move` correspondiente.

        Raises:
            ValueError: Si el código está fuera de rango.
        """
        if code < 0 or code >> (_MOD_SHIFT + 2):
            raise ValueError(f"Código de movimiento inválido: {code}")
        try:
            face = Face(code & _FACE_BITS)
            modifier = Modifier(code >> _MOD_SHIFT)
        except ValueError:
            raise ValueError(f"Código de movimiento inválido: {code}") from None
        return cls(face, modifier)

    @classmethod
    def parse(cls, tok: str) -> "Move":
        """Convierte un token de texto (ej: "R", "U'", "F2") en un `Move`.

        Elimina espacios y acepta comillas tipográficas (’ o ‘) como apóstrofe.

        Args:
            tok: Token de movimiento.

        Returns:
            El movimiento equivalente.

        Raises:
            ValueError: Si la cara o el sufijo no son válidos.
        """
        tok = tok.strip().replace("’", "'").replace("‘", "'")
        if not tok or tok[0] not in LETTER_FACES:
            raise ValueError(f"Movimiento inválido: {tok!r}")

        suffix = tok[1:]
        if suffix not in SUFFIX_MODIFIERS:
            raise ValueError(f"Sufijo inválido en: {tok!r}")

        return cls(LETTER_FACES[tok[0]], SUFFIX_MODIFIERS[suffix])

    def inverse(self) -> "Move":
        """Devuelve el movimiento inverso ("R" -> "R'", "R'" -> "R", "R2" -> "R2")."""
        if self.modifier == Modifier.FORWARD:
            return Move(self.face, Modifier.REVERSE)
        if self.modifier == Modifier.REVERSE:
            return Move(self.face, Modifier.FORWARD)
        return self

    @property
    def axis(self) -> int:
        return axis_group(self.face)


def parse_sequence(text: str) -> List[Move]:
    """Convierte una secuencia escrita como texto en una lista de movimientos.

    Los movimientos se separan por espacios, por ejemplo:
        "R U R' U'" -> [R, U, R', U']

    Args:
        text: Secuencia de movimientos escrita como string.

    Returns:
        Lista de `Move`, en el mismo orden.

    Raises:
        ValueError: Si algún token es inválido.
    """
    return [Move.parse(t) for t in text.split()]
