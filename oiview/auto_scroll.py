"""Automatic scrolling driven by how far the pointer is from an anchor point."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .geometry import Point

SCROLL_INTERVAL_MS = 1

ScrollFunction = Callable[[Point], None]
MousePositionFunction = Callable[[], Point]


@dataclass
class ScrollMetrics:
    """How pointer distance from the anchor maps to scroll speed.

    Distances are in pixels and ``max_speed`` in pixels per second.
    """

    dead_zone_radius: int = 10
    speed_factor_in: float = 0.9
    speed_factor_out: float = 1.7
    speed_factor_range: int = 40
    max_speed: int = 5000


def _axis_speed(distance: float, metrics: ScrollMetrics) -> float:
    distance = abs(distance)
    beyond = 0 if distance <= metrics.dead_zone_radius else distance - metrics.dead_zone_radius
    if beyond == 0:
        return 0.0
    factor_in = metrics.speed_factor_in
    factor_out = metrics.speed_factor_out
    power = min(
        factor_out,
        (factor_out - factor_in) / metrics.speed_factor_range * beyond + factor_in,
    )
    return min(float(metrics.max_speed), beyond ** power)


def scroll_velocity(delta: Point, metrics: Optional[ScrollMetrics] = None) -> Point:
    """Signed scroll velocity, in pixels per second, for ``delta`` = anchor - pointer."""
    metrics = metrics or ScrollMetrics()
    speed = Point(_axis_speed(delta.x, metrics), _axis_speed(delta.y, metrics))
    return speed * delta.sign()


@dataclass
class AutoScroll:
    """Scrolls towards the pointer while active.

    ``toggle`` starts scrolling with the current pointer position as the anchor,
    or stops it. While active, the host calls ``perform`` periodically (every
    ``SCROLL_INTERVAL_MS``); each call passes the amount to scroll since the
    previous call to ``scroll_func``.
    """

    scroll_func: ScrollFunction
    mouse_position: MousePositionFunction
    metrics: ScrollMetrics = field(default_factory=ScrollMetrics)
    clock: Callable[[], float] = time.monotonic
    _active: bool = field(default=False, init=False)
    _anchor: Point = field(default_factory=Point, init=False)
    _last: Optional[float] = field(default=None, init=False)

    @property
    def is_auto_scrolling(self) -> bool:
        return self._active

    @property
    def anchor(self) -> Point:
        return self._anchor

    def toggle(self) -> bool:
        """Start or stop auto scrolling; return whether it is now active."""
        self._active = not self._active
        if self._active:
            self._anchor = self.mouse_position()
            self._last = self.clock()
        else:
            self._anchor = Point()
            self._last = None
        return self._active

    def perform(self) -> Optional[Point]:
        """Scroll by the amount due since the last call; return it, or None if inactive."""
        if not self._active:
            return None
        now = self.clock()
        elapsed = 0.0 if self._last is None else now - self._last
        self._last = now
        delta = self._anchor - self.mouse_position()
        amount = scroll_velocity(delta, self.metrics) * elapsed
        self.scroll_func(amount)
        return amount