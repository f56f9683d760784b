from cube_timer.logic.moves import Face, Modifier, Move, axis_group, parse_sequence
from cube_timer.logic.scramble import SCRAMBLE_MOVES, AdjacencyRule, Scramble, generate_scramble

__all__ = [
    "AdjacencyRule",
    "Face",
    "Modifier",
    "Move",
    "SCRAMBLE_MOVES",
    "Scramble",
    "axis_group",
    "generate_scramble",
    "parse_sequence",
]
