# cube_timer/core/session.py
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from cube_timer.core.config import INSPECTION_SECONDS, TimerConfig
from cube_timer.logic.scramble import Scramble, generate_scramble

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
ScrambleFactory = Callable[[], Scramble]


@dataclass(frozen=True)
class Idle:
    """Esperando a que el usuario empiece; muestra el scramble actual."""

    scramble: Scramble


@dataclass(frozen=True)
class Inspecting:
    start: float


@dataclass(frozen=True)
class Solving:
    start: float


@dataclass(frozen=True)
class Done:
    elapsed: float


State = Union[Idle, Inspecting, Solving, Done]


class Session:
    """Máquina de estados de una sesión de práctica.

    Ciclo: Idle -> Inspecting -> Solving -> Done -> Idle.

    No hay hilos ni timers: el tiempo se calcula en cada consulta restando el
    instante capturado al valor actual de `clock`. El paso automático de
    Inspecting a Solving lo detecta `update()`, que el loop de la UI llama en
    cada iteración.

    Args:
        clock: Reloj monotónico en segundos (por defecto `time.monotonic`).
        scramble_factory: Función que genera un scramble nuevo.
        inspection_seconds: Tope de la inspección.
    """

    def __init__(
        self,
        clock: Clock = time.monotonic,
        scramble_factory: ScrambleFactory = generate_scramble,
        inspection_seconds: float = INSPECTION_SECONDS,
    ) -> None:
        self._clock = clock
        self._scramble_factory = scramble_factory
        self.inspection_seconds = inspection_seconds
        # Tiempos terminados en este proceso (no se guardan en disco)
        self.history: List[float] = []
        self._last_scramble: Optional[Scramble] = None
        self.state: State = Idle(self._scramble_factory())

    @classmethod
    def from_config(cls, config: TimerConfig, clock: Clock = time.monotonic) -> "Session":
        """Crea una sesión cuyos scrambles siguen la regla y semilla de `config`."""
        rng = random.Random(config.seed)
        return cls(clock, lambda: generate_scramble(rng, config.rule))

    # --------------------------
    # Consultas
    # --------------------------
    @property
    def is_idle(self) -> bool:
        return isinstance(self.state, Idle)

    def inspection_remaining(self) -> float:
        """Segundos restantes de inspección: max(0, tope - transcurrido).

        Returns:
            Tiempo restante, o 0.0 si el estado no es Inspecting.
        """
        if not isinstance(self.state, Inspecting):
            return 0.0
        elapsed = self._clock() - self.state.start
        return max(0.0, self.inspection_seconds - elapsed)

    def solve_elapsed(self) -> float:
        """Tiempo de la resolución en segundos.

        En Solving es el tiempo transcurrido hasta ahora; en Done, el tiempo final.
        En los demás estados retorna 0.0.
        """
        if isinstance(self.state, Solving):
            return self._clock() - self.state.start
        if isinstance(self.state, Done):
            return self.state.elapsed
        return 0.0

    # --------------------------
    # Transiciones
    # --------------------------
    def advance(self) -> State:
        """Aplica la acción "empezar/avanzar" y pasa al siguiente estado del ciclo.

        Returns:
            El nuevo estado.
        """
        state = self.state
        now = self._clock()

        if isinstance(state, Idle):
            self._last_scramble = state.scramble
            self._set(Inspecting(now))
        elif isinstance(state, Inspecting):
            self._set(Solving(now))
        elif isinstance(state, Solving):
            elapsed = now - state.start
            self.history.append(elapsed)
            logger.info("Resolución: %.3fs (scramble: %s)", elapsed, self._last_scramble)
            self._set(Done(elapsed))
        else:
            self._set(Idle(self._scramble_factory()))

        return self.state

    def reshuffle(self) -> bool:
        """Reemplaza el scramble por uno nuevo, solo si el estado es Idle.

        Returns:
            True si se generó un scramble nuevo; False si se ignoró.
        """
        if not self.is_idle:
            return False
        self._set(Idle(self._scramble_factory()))
        return True

    def update(self) -> bool:
        """Revisa transiciones por tiempo (fin de la inspección).

        Returns:
            True si la inspección llegó al tope y se pasó a Solving.
        """
        state = self.state
        if not isinstance(state, Inspecting):
            return False

        now = self._clock()
        if now - state.start < self.inspection_seconds:
            return False

        logger.debug("Inspección agotada")
        self._set(Solving(now))
        return True

    def _set(self, state: State) -> None:
        logger.debug("%s -> %s", type(self.state).__name__, type(state).__name__)
        if isinstance(state, Idle):
            logger.info("Scramble: %s", state.scramble)
        self.state = state
