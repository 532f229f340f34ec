"""Velocity that accelerates with repeated input and decays while idle."""

from __future__ import annotations

import time
from typing import Callable, Optional


def _sign(value: float) -> float:
    return float((value > 0) - (value < 0))


class AdaptiveMotion:
    """Accumulates input amounts into a velocity that grows quadratically.

    Successive inputs in the same direction build up; idle time drains the
    accumulated amount at ``deceleration`` units per second, and input in the
    opposite direction discards what was accumulated.
    """

    def __init__(
        self,
        base_step: float = 1.0,
        acceleration: float = 1.0,
        deceleration: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.step = base_step
        self.acceleration = acceleration
        self.deceleration = deceleration
        self._clock = clock
        self._time = 0.0
        self._last: Optional[float] = None

    def add(self, amount: float) -> float:
        """Feed an input amount and return the resulting signed velocity."""
        now = self._clock()
        elapsed = 0.0 if self._last is None else now - self._last
        self._last = now

        direction = _sign(amount)
        self._time -= elapsed * direction * self.deceleration
        self._time = max(self._time, 0.0) if direction > 0 else min(self._time, 0.0)
        self._time += amount * self.step
        return self._velocity(self._time)

    def _velocity(self, t: float) -> float:
        return abs(self.acceleration * t * t) * _sign(t)