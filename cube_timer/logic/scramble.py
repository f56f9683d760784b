# cube_timer/logic/scramble.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterator, List, Optional, Tuple

from cube_timer.logic.moves import (
    AXIS_GROUPS,
    Face,
    Modifier,
    Move,
    axis_group,
    parse_sequence,
)

logger = logging.getLogger(__name__)

SCRAMBLE_MOVES: int = 30
FACES: List[Face] = list(Face)
MODIFIERS: List[Modifier] = list(Modifier)


class AdjacencyRule(Enum):
    """Regla que decide qué caras puede usar el siguiente movimiento.

    - AXIS: prohíbe el eje completo del movimiento anterior (F tras B, o B tras B).
      Quedan 4 caras candidatas.
    - FACE: solo prohíbe repetir la misma cara. Quedan 5 candidatas.
    - COMMUTING: prohíbe cualquier cara ya usada mientras se siga en el mismo eje
      (F B está permitido, F B F no).
    """

    AXIS = "axis"
    FACE = "face"
    COMMUTING = "commuting"


def _blocked_after(
    rule: AdjacencyRule, blocked: FrozenSet[Face], prev: Optional[Move], face: Face
) -> FrozenSet[Face]:
    """Calcula el conjunto de caras prohibidas después de girar `face`.

    Args:
        rule: Regla de adyacencia activa.
        blocked: Caras prohibidas antes de este movimiento.
        prev: Movimiento anterior (None si `face` es el primero).
        face: Cara del movimiento recién agregado.

    Returns:
        Caras que el siguiente movimiento no puede usar.
    """
    if rule is AdjacencyRule.AXIS:
        return frozenset(AXIS_GROUPS[axis_group(face)])
    if rule is AdjacencyRule.FACE:
        return frozenset((face,))

    # COMMUTING: se acumula mientras el eje no cambie
    if prev is not None and prev.axis == axis_group(face):
        return blocked | {face}
    return frozenset((face,))


@dataclass(frozen=True)
class Scramble:
    """Secuencia fija de `SCRAMBLE_MOVES` movimientos para mezclar el cubo.

    Raises:
        ValueError: Si la cantidad de movimientos no es `SCRAMBLE_MOVES`.
    """

    moves: Tuple[Move, ...]

    def __post_init__(self) -> None:
        if len(self.moves) != SCRAMBLE_MOVES:
            raise ValueError(
                f"Un scramble tiene {SCRAMBLE_MOVES} movimientos, no {len(self.moves)}."
            )

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def __len__(self) -> int:
        return len(self.moves)

    def __str__(self) -> str:
        return " ".join(str(m) for m in self.moves)

    @classmethod
    def parse(cls, text: str) -> "Scramble":
        """Lee un scramble desde su forma impresa ("R U' F2 ...")."""
        return cls(tuple(parse_sequence(text)))

    def is_valid(self, rule: AdjacencyRule = AdjacencyRule.AXIS) -> bool:
        """Indica si cada movimiento respeta la regla de adyacencia con el anterior.

        Args:
            rule: Regla contra la que se valida.

        Returns:
            True si ninguna cara consecutiva viola la regla.
        """
        blocked: FrozenSet[Face] = frozenset()
        prev: Optional[Move] = None
        for mv in self.moves:
            if mv.face in blocked:
                return False
            blocked = _blocked_after(rule, blocked, prev, mv.face)
            prev = mv
        return True


def generate_scramble(
    rng: Optional[random.Random] = None,
    rule: AdjacencyRule = AdjacencyRule.AXIS,
) -> Scramble:
    """Genera un scramble aleatorio de `SCRAMBLE_MOVES` movimientos.

    La cara de cada movimiento se elige de forma uniforme entre las caras que la
    regla deja disponibles después del movimiento anterior (el primero puede usar
    cualquiera). El modificador se elige de forma uniforme e independiente entre
    "", "'" y "2".

    Args:
        rng: Generador aleatorio. Si es None se usa uno nuevo sin semilla, así
            el scramble es distinto en cada ejecución.
        rule: Regla de adyacencia (por defecto, no repetir eje).

    Returns:
        Un `Scramble` que cumple `rule`.
    """
    if rng is None:
        rng = random.Random()

    seq: List[Move] = []
    blocked: FrozenSet[Face] = frozenset()
    prev: Optional[Move] = None

    for _ in range(SCRAMBLE_MOVES):
        candidates = [f for f in FACES if f not in blocked]
        face = rng.choice(candidates)
        mv = Move(face, rng.choice(MODIFIERS))

        blocked = _blocked_after(rule, blocked, prev, face)
        prev = mv
        seq.append(mv)

    scramble = Scramble(tuple(seq))
    logger.debug("Nuevo scramble (%s): %s", rule.value, scramble)
    return scramble
