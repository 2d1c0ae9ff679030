"""Game module for the Tetris engine.

Exports the core game engine and supporting classes:
- GameGrid: Board cells, collision and line clearing
- Piece: Falling piece with rotation states from the shape table
- PieceKind: Enum of available piece kinds
- ScoringRules: Line-clear scoring
- TetrisEngine: Command set and state machine
- parse_commands / replay: Text command scripts
"""

from .grid import GameGrid
from .pieces import FIGURES, Piece, PieceKind
from .rules import ScoringRules
from .core import Action, GameConfig, GameSnapshot, GameState, TetrisEngine
from .controls import parse_commands, replay

__all__ = [
    "GameGrid",
    "FIGURES",
    "Piece",
    "PieceKind",
    "ScoringRules",
    "Action",
    "GameConfig",
    "GameSnapshot",
    "GameState",
    "TetrisEngine",
    "parse_commands",
    "replay",
]
