"""Interactive selection rectangle: drawing, resizing by corners or edges, moving."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable

from .geometry import Corner, Point, Rect

SelectionChangedCallback = Callable[[Rect, bool], None]

_CORNER_DRAG_FACTOR = 6
_INFLATION_FACTOR = 0.1
_MIN_INFLATION = 5
_EDGE_DRAG_FACTOR = 8
_MIN_CAPTURE_WIDTH = 8


class Operation(Enum):
    NO_OP = auto()
    BEGIN_DRAG = auto()
    DRAG = auto()
    END_DRAG = auto()
    CANCEL_SELECTION = auto()


class LockMode(Enum):
    NO_LOCK = auto()
    LOCK_WIDTH = auto()
    LOCK_HEIGHT = auto()


_OPPOSITES = {
    Corner.TOP_RIGHT: Corner.BOTTOM_LEFT,
    Corner.BOTTOM_LEFT: Corner.TOP_RIGHT,
    Corner.TOP_LEFT: Corner.BOTTOM_RIGHT,
    Corner.BOTTOM_RIGHT: Corner.TOP_LEFT,
}


def opposite_corner(corner: Corner) -> Corner:
    """Return the diagonally opposite corner."""
    try:
        return _OPPOSITES[corner]
    except KeyError:
        raise ValueError("corner must be set to get opposite corner") from None


class SelectionRect:
    """Tracks a selection rectangle driven by pointer operations.

    ``callback(rect, visible)`` is called whenever the rectangle changes.
    """

    def __init__(self, callback: SelectionChangedCallback) -> None:
        self._callback = callback
        self._operation = Operation.NO_OP
        self._rect = Rect()
        self._start = Point()
        self._end = Point()
        self._lock = LockMode.NO_LOCK

    @property
    def rect(self) -> Rect:
        return self._rect

    @property
    def operation(self) -> Operation:
        return self._operation

    def _notify(self, visible: bool) -> None:
        self._callback(self._rect, visible)

    def closest_corner(self, point: Point) -> Corner:
        """The rectangle corner nearest to ``point``; ties go to the earlier candidate."""
        candidates = (
            Corner.TOP_LEFT,
            Corner.BOTTOM_RIGHT,
            Corner.TOP_RIGHT,
            Corner.BOTTOM_LEFT,
        )
        return min(
            candidates,
            key=lambda c: point.distance_squared(self._rect.corner(c)),
        )

    def update_selection(self, rect: Rect) -> None:
        self._rect = rect
        self._notify(True)

    def set_selection(self, operation: Operation, position: Point) -> None:
        if operation is Operation.NO_OP:
            return
        if operation is Operation.BEGIN_DRAG:
            self._begin_drag(position)
        elif operation is Operation.DRAG:
            self._drag(position)
        elif operation is Operation.END_DRAG:
            if self._operation is Operation.DRAG:
                self._operation = Operation.END_DRAG
        elif operation is Operation.CANCEL_SELECTION:
            self._rect = Rect()
            self._start = Point()
            self._end = Point()
            self._operation = Operation.NO_OP
            self._lock = LockMode.NO_LOCK
            self._notify(False)

    def _begin_drag(self, position: Point) -> None:
        if self._operation is Operation.NO_OP:
            self._start = position
            self._operation = Operation.BEGIN_DRAG

        if self._operation is not Operation.END_DRAG:
            return

        rect = self._rect
        width, height = rect.width(), rect.height()
        inflated = rect.inflate(
            max(_MIN_INFLATION, int(width * _INFLATION_FACTOR)),
            max(_MIN_INFLATION, int(height * _INFLATION_FACTOR)),
        )

        if not inflated.contains(position):
            self._start = position
            self._operation = Operation.BEGIN_DRAG
            self._lock = LockMode.NO_LOCK
            return

        corner = self.closest_corner(position)
        distance = (inflated.corner(corner) - position).abs()
        if (
            distance.x < width // _CORNER_DRAG_FACTOR
            and distance.y < height // _CORNER_DRAG_FACTOR
        ):
            self._operation = Operation.BEGIN_DRAG
            self._start = rect.corner(opposite_corner(corner))
            self._lock = LockMode.NO_LOCK
            return

        capture_width = max(_MIN_CAPTURE_WIDTH, width // _EDGE_DRAG_FACTOR)
        capture_height = max(_MIN_CAPTURE_WIDTH, height // _EDGE_DRAG_FACTOR)
        minimum = rect.corner(Corner.TOP_LEFT)
        maximum = rect.corner(Corner.BOTTOM_RIGHT)

        if maximum.y - position.y < capture_height:
            self._resize_from(Corner.TOP_LEFT, LockMode.LOCK_WIDTH)
        elif position.y - minimum.y < capture_height:
            self._resize_from(Corner.BOTTOM_RIGHT, LockMode.LOCK_WIDTH)
        elif maximum.x - position.x < capture_width:
            self._resize_from(Corner.TOP_LEFT, LockMode.LOCK_HEIGHT)
        elif position.x - minimum.x < capture_width:
            self._resize_from(Corner.TOP_RIGHT, LockMode.LOCK_HEIGHT)
        else:
            self._end = position
            self._lock = LockMode.NO_LOCK

    def _resize_from(self, anchor: Corner, lock: LockMode) -> None:
        self._operation = Operation.BEGIN_DRAG
        self._start = self._rect.corner(anchor)
        self._lock = lock

    def _drag(self, position: Point) -> None:
        if self._operation in (Operation.BEGIN_DRAG, Operation.DRAG):
            top_left = self._rect.corner(Corner.TOP_LEFT)
            bottom_right = self._rect.corner(Corner.BOTTOM_RIGHT)
            diff = (position - self._start).abs()
            if diff.x != 0 and diff.y != 0:
                lock_w = self._lock is LockMode.LOCK_WIDTH
                lock_h = self._lock is LockMode.LOCK_HEIGHT
                p0 = Point(
                    top_left.x if lock_w else min(position.x, self._start.x),
                    top_left.y if lock_h else min(position.y, self._start.y),
                )
                p1 = Point(
                    bottom_right.x if lock_w else max(position.x, self._start.x),
                    bottom_right.y if lock_h else max(position.y, self._start.y),
                )
                self._rect = Rect(p0, p1)
                self._notify(True)
            self._operation = Operation.DRAG

        if self._operation is Operation.END_DRAG:
            self._rect = self._rect.translated(position - self._end)
            self._end = position
            self._notify(True)