"""Game module for Falling Block RL.

Exports the core game engine and supporting classes:
- GameGrid: 10x20 board, validity checking, locking and line clearing
- Piece: Four-cell piece with pivot rotation and translation
- ShapeKind: Enum of the seven shapes in catalog order
- FallTimer: Gravity accumulator with normal and fast delays
- FallingBlockGame: Piece spawn, gravity, lock and line clear
"""

from .grid import GRID_HEIGHT, GRID_WIDTH, GameGrid
from .pieces import SHAPE_TABLE, Piece, ShapeKind, decode_shape
from .timing import FAST_DELAY, NORMAL_DELAY, FallTimer
from .core import FallingBlockGame, GameConfig, Intent

__all__ = [
    "GRID_WIDTH",
    "GRID_HEIGHT",
    "GameGrid",
    "SHAPE_TABLE",
    "Piece",
    "ShapeKind",
    "decode_shape",
    "NORMAL_DELAY",
    "FAST_DELAY",
    "FallTimer",
    "FallingBlockGame",
    "GameConfig",
    "Intent",
]
