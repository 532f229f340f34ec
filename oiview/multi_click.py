"""Turns mouse button presses into single, double and further multi-click events."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Callable, Dict, List, Optional, Set


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    X1 = 3
    X2 = 4


class ButtonState(Enum):
    NOT_SET = auto()
    UP = auto()
    DOWN = auto()


@dataclass(frozen=True)
class ClickEvent:
    button: MouseButton
    click_count: int


ClickListener = Callable[[ClickEvent], None]


@dataclass
class _ButtonData:
    last_down: float = 0
    taps: int = 0
    pos_x: int = 0
    pos_y: int = 0
    state: ButtonState = ButtonState.UP


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class MouseMultiClickHandler:
    """Counts presses of each button and reports them as one click event.

    A press within ``multipress_rate`` milliseconds of the previous one, and
    within a small radius of the first, adds to the count. The event is raised
    once the time runs out (see :meth:`process_queued_buttons`) or at once when
    the count reaches ``max_taps``. ``clock`` returns milliseconds.
    """

    max_multi_click_radius = 10

    def __init__(
        self,
        multipress_rate: int = 250,
        max_taps: int = 3,
        clock: Callable[[], float] = _monotonic_ms,
    ) -> None:
        self.multipress_rate = multipress_rate
        self.max_taps = max_taps
        self._clock = clock
        self._start = clock()
        self._pos_x = 0
        self._pos_y = 0
        self._buttons: Dict[MouseButton, _ButtonData] = {}
        self._pressed: Set[MouseButton] = set()
        self._listeners: List[ClickListener] = []
        self._timer_due: Optional[float] = None

    def add_listener(self, callback: ClickListener) -> None:
        self._listeners.append(callback)

    def _raise(self, button: MouseButton, count: int) -> None:
        event = ClickEvent(button, count)
        for listener in self._listeners:
            listener(event)

    def _now(self) -> float:
        return self._clock() - self._start

    def _data(self, button: MouseButton) -> _ButtonData:
        return self._buttons.setdefault(button, _ButtonData())

    def pending_delay(self) -> Optional[float]:
        """Milliseconds until :meth:`process_queued_buttons` is due, or None."""
        return self._timer_due

    def set_mouse_delta(self, dx: int, dy: int) -> None:
        self._pos_x += dx
        self._pos_y += dy

    def set_button_state(self, button: MouseButton, state: ButtonState) -> None:
        if state is ButtonState.NOT_SET:
            return
        data = self._data(button)
        if data.state is state:
            return
        if state is ButtonState.DOWN and data.state is ButtonState.UP:
            data.taps += 1
            data.last_down = self._now()
            if data.taps == 1:
                data.pos_x, data.pos_y = self._pos_x, self._pos_y
                self._pressed.add(button)
                if self._timer_due is None:
                    self._timer_due = self.multipress_rate
            else:
                dx = data.pos_x - self._pos_x
                dy = data.pos_y - self._pos_y
                radius = self.max_multi_click_radius
                if dx * dx + dy * dy < radius * radius:
                    if data.taps == self.max_taps:
                        self._raise(button, data.taps)
                        self._remove_button(button)
                else:
                    data.pos_x, data.pos_y = self._pos_x, self._pos_y
                    data.taps = 1
        data.state = state

    def process_queued_buttons(self) -> None:
        """Raise events for buttons whose multi-click time has run out."""
        now = self._now()
        finished = []
        closest: Optional[float] = None
        for button in sorted(self._pressed):
            data = self._data(button)
            time_to_event = now - data.last_down - self.multipress_rate
            if time_to_event >= 0:
                self._raise(button, data.taps)
                data.taps = 0
                finished.append(button)
            else:
                closest = time_to_event if closest is None else max(closest, time_to_event)

        if closest is not None:
            self._timer_due = -closest

        self._pressed.difference_update(finished)
        self._reset_position()

    def _reset_position(self) -> None:
        if not self._pressed:
            self._pos_x = 0
            self._pos_y = 0
            self._timer_due = None

    def _remove_button(self, button: MouseButton) -> None:
        self._pressed.discard(button)
        self._reset_position()
        self._data(button).taps = 0