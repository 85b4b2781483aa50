from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

import numpy as np

from .grid import GameGrid
from .pieces import NUM_COLORS, SHAPE_TABLE, Piece
from .timing import FAST_DELAY, NORMAL_DELAY, FallTimer


class Intent(IntEnum):
    NONE = 0
    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    ROTATE_UP = 3


@dataclass
class GameConfig:
    random_seed: Optional[int] = None
    normal_delay: float = NORMAL_DELAY
    fast_delay: float = FAST_DELAY
    # When False, pieces locked above row 0 lose those cells and the game never ends.
    detect_game_over: bool = False

    def __post_init__(self) -> None:
        if self.normal_delay <= 0 or self.fast_delay <= 0:
            raise ValueError(
                f"Fall delays must be positive, got normal={self.normal_delay} fast={self.fast_delay}"
            )
        if self.fast_delay > self.normal_delay:
            raise ValueError(
                f"fast_delay ({self.fast_delay}) must not exceed normal_delay ({self.normal_delay})"
            )


class FallingBlockGame:
    """Owns the board, the falling piece and the fall timer.

    The host feeds edge-triggered intents through `apply`, the held fast-drop
    state through `set_fast_drop`, and elapsed seconds through `update`.
    """

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.rng = random.Random(self.config.random_seed)
        self.grid = GameGrid()
        self.timer = FallTimer(self.config.normal_delay, self.config.fast_delay)
        self.current_piece: Piece
        self.pieces_locked = 0
        self.game_over = False
        self.reset()

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        self.grid.reset()
        self.timer.reset()
        self.pieces_locked = 0
        self.game_over = False
        self._spawn_piece()

    @property
    def board(self) -> np.ndarray:
        return self.grid.read_only_view()

    @property
    def fall_timer(self) -> float:
        return self.timer.elapsed

    @property
    def current_delay(self) -> float:
        return self.timer.delay

    def _random_piece(self) -> Piece:
        shape_index = self.rng.randint(0, len(SHAPE_TABLE) - 1)
        color = self.rng.randint(1, NUM_COLORS)
        return Piece.spawn(shape_index, color)

    def _spawn_piece(self) -> None:
        self.current_piece = self._random_piece()
        if self.config.detect_game_over and not self.grid.is_valid(self.current_piece):
            self.game_over = True

    def _try_commit(self, candidate: Piece) -> bool:
        if self.grid.is_valid(candidate):
            self.current_piece = candidate
            return True
        return False

    def apply(self, intent: Intent) -> bool:
        """Apply one discrete intent; return True if the piece changed."""
        intent = Intent(intent)
        if self.game_over or intent == Intent.NONE:
            return False
        if intent == Intent.MOVE_LEFT:
            return self._try_commit(self.current_piece.moved(-1, 0))
        if intent == Intent.MOVE_RIGHT:
            return self._try_commit(self.current_piece.moved(1, 0))
        return self._try_commit(self.current_piece.rotated())

    def move_left(self) -> bool:
        return self.apply(Intent.MOVE_LEFT)

    def move_right(self) -> bool:
        return self.apply(Intent.MOVE_RIGHT)

    def rotate(self) -> bool:
        return self.apply(Intent.ROTATE_UP)

    def set_fast_drop(self, held: bool) -> None:
        self.timer.fast_drop = bool(held)

    def update(self, dt: float) -> bool:
        """Advance the fall timer by `dt` seconds; return True if gravity fired."""
        if self.game_over:
            return False
        if not self.timer.advance(dt):
            return False
        self._gravity_tick()
        return True

    def _gravity_tick(self) -> None:
        if self._try_commit(self.current_piece.moved(0, 1)):
            return
        self.grid.lock(self.current_piece)
        self.pieces_locked += 1
        self.grid.clear_lines()
        self._spawn_piece()

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.grid.clone_state()
        if not self.game_over:
            for x, y in self.current_piece.blocks:
                if 0 <= y < self.grid.height and 0 <= x < self.grid.width:
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -self.current_piece.color
        return state
