from cube_timer.core.config import INSPECTION_SECONDS, TimerConfig
from cube_timer.core.session import Done, Idle, Inspecting, Session, Solving, State

__all__ = [
    "Done",
    "INSPECTION_SECONDS",
    "Idle",
    "Inspecting",
    "Session",
    "Solving",
    "State",
    "TimerConfig",
]
