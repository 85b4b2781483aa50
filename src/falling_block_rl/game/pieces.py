from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple


Coordinate = Tuple[int, int]

NUM_COLORS = 7


class ShapeKind(IntEnum):
    I = 0
    Z = 1
    S = 2
    T = 3
    L = 4
    J = 5
    O = 6


# Position indices into a 2-wide, 4-tall local frame: x = i % 2, y = i // 2.
# Order matters: blocks[1] is the rotation pivot.
SHAPE_TABLE: Tuple[Tuple[int, int, int, int], ...] = (
    (1, 3, 5, 7),  # I
    (2, 4, 5, 7),  # Z
    (3, 5, 4, 6),  # S
    (3, 5, 4, 7),  # T
    (2, 3, 5, 7),  # L
    (3, 5, 7, 6),  # J
    (2, 3, 4, 5),  # O
)


def decode_shape(index: int) -> Tuple[Coordinate, ...]:
    if not 0 <= index < len(SHAPE_TABLE):
        raise ValueError(f"Invalid shape index: {index}")
    return tuple((p % 2, p // 2) for p in SHAPE_TABLE[index])


@dataclass(frozen=True)
class Piece:
    """Four board cells plus a color identifier (1..7).

    Transforms never mutate; they return a candidate piece that the caller
    validates before committing.
    """

    kind: ShapeKind
    blocks: Tuple[Coordinate, ...]
    color: int

    @staticmethod
    def spawn(shape_index: int, color: int) -> "Piece":
        if not 1 <= color <= NUM_COLORS:
            raise ValueError(f"Color must be in [1, {NUM_COLORS}], got {color}")
        blocks = decode_shape(shape_index)
        return Piece(ShapeKind(shape_index), blocks, color)

    @property
    def pivot(self) -> Coordinate:
        return self.blocks[1]

    def rotated(self, pivot: Optional[Coordinate] = None) -> "Piece":
        px, py = self.pivot if pivot is None else pivot
        blocks = tuple((px - (y - py), py + (x - px)) for x, y in self.blocks)
        return Piece(self.kind, blocks, self.color)

    def moved(self, dx: int, dy: int) -> "Piece":
        blocks = tuple((x + dx, y + dy) for x, y in self.blocks)
        return Piece(self.kind, blocks, self.color)
