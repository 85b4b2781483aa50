from __future__ import annotations

from typing import Tuple


PALETTE = {
    0: (20, 20, 26),
    1: (240, 0, 0),
    2: (240, 160, 0),
    3: (240, 240, 0),
    4: (0, 240, 0),
    5: (0, 240, 240),
    6: (0, 0, 240),
    7: (160, 0, 240),
}


def color_for_value(v: int) -> Tuple[int, int, int]:
    # Negative values mark the falling piece; same color as once locked.
    return PALETTE.get(abs(v), (200, 200, 200))
