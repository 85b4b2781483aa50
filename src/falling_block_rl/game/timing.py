from __future__ import annotations

from dataclasses import dataclass


NORMAL_DELAY = 0.3
FAST_DELAY = 0.05


@dataclass
class FallTimer:
    normal_delay: float = NORMAL_DELAY
    fast_delay: float = FAST_DELAY
    elapsed: float = 0.0
    fast_drop: bool = False

    @property
    def delay(self) -> float:
        return self.fast_delay if self.fast_drop else self.normal_delay

    def advance(self, dt: float) -> bool:
        """Accumulate `dt` seconds; return True when a gravity tick is due.

        The accumulator resets to zero rather than being decremented, so a
        long frame yields a single tick.
        """
        if dt < 0:
            raise ValueError(f"Elapsed time must be non-negative, got {dt}")
        self.elapsed += dt
        if self.elapsed > self.delay:
            self.elapsed = 0.0
            return True
        return False

    def reset(self) -> None:
        self.elapsed = 0.0
        self.fast_drop = False
