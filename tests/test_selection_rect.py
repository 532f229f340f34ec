import pytest

from oiview.geometry import Corner, Point, Rect
from oiview.selection_rect import (
    Operation,
    SelectionRect,
    opposite_corner,
)


@pytest.fixture
def events():
    return []


@pytest.fixture
def selection(events):
    return SelectionRect(lambda rect, visible: events.append((rect, visible)))


def draw(selection, start, end):
    selection.set_selection(Operation.BEGIN_DRAG, start)
    selection.set_selection(Operation.DRAG, end)
    selection.set_selection(Operation.END_DRAG, end)


@pytest.fixture
def square(selection, events):
    draw(selection, Point(0, 0), Point(100, 100))
    events.clear()
    return selection


def test_opposite_corner_pairs():
    for corner in (Corner.TOP_LEFT, Corner.TOP_RIGHT, Corner.BOTTOM_LEFT, Corner.BOTTOM_RIGHT):
        assert opposite_corner(opposite_corner(corner)) is corner
    assert opposite_corner(Corner.TOP_LEFT) is Corner.BOTTOM_RIGHT
    assert opposite_corner(Corner.TOP_RIGHT) is Corner.BOTTOM_LEFT


def test_opposite_of_none_raises():
    with pytest.raises(ValueError):
        opposite_corner(Corner.NONE)


def test_drawing_a_selection(selection, events):
    selection.set_selection(Operation.BEGIN_DRAG, Point(30, 40))
    assert selection.operation is Operation.BEGIN_DRAG
    selection.set_selection(Operation.DRAG, Point(10, 90))
    expected = Rect(Point(10, 40), Point(30, 90))
    assert selection.rect == expected
    assert events == [(expected, True)]
    selection.set_selection(Operation.END_DRAG, Point(10, 90))
    assert selection.operation is Operation.END_DRAG


def test_drag_without_movement_on_both_axes_does_not_change(selection, events):
    selection.set_selection(Operation.BEGIN_DRAG, Point(30, 40))
    selection.set_selection(Operation.DRAG, Point(30, 90))
    assert selection.rect == Rect()
    assert events == []
    assert selection.operation is Operation.DRAG


def test_end_drag_ignored_unless_dragging(selection):
    selection.set_selection(Operation.END_DRAG, Point(1, 1))
    assert selection.operation is Operation.NO_OP
    selection.set_selection(Operation.BEGIN_DRAG, Point(1, 1))
    selection.set_selection(Operation.END_DRAG, Point(1, 1))
    assert selection.operation is Operation.BEGIN_DRAG


def test_no_op_changes_nothing(square, events):
    before = square.rect
    square.set_selection(Operation.NO_OP, Point(500, 500))
    assert square.rect == before
    assert square.operation is Operation.END_DRAG
    assert events == []


def test_move_from_the_middle(square, events):
    original = square.rect
    square.set_selection(Operation.BEGIN_DRAG, Point(50, 50))
    assert square.operation is Operation.END_DRAG
    square.set_selection(Operation.DRAG, Point(60, 70))
    assert square.rect == original.translated(Point(10, 20))
    assert square.rect.width() == original.width()
    assert events[-1] == (square.rect, True)


def test_corner_drag_anchors_opposite_corner(square):
    square.set_selection(Operation.BEGIN_DRAG, Point(98, 98))
    assert square.operation is Operation.BEGIN_DRAG
    square.set_selection(Operation.DRAG, Point(120, 130))
    assert square.rect == Rect(Point(0, 0), Point(120, 130))


def test_lower_edge_resize_locks_width(square):
    square.set_selection(Operation.BEGIN_DRAG, Point(50, 95))
    square.set_selection(Operation.DRAG, Point(80, 130))
    assert square.rect == Rect(Point(0, 0), Point(100, 130))


def test_right_edge_resize_locks_height(square):
    square.set_selection(Operation.BEGIN_DRAG, Point(95, 50))
    square.set_selection(Operation.DRAG, Point(140, 20))
    assert square.rect == Rect(Point(0, 0), Point(140, 100))


def test_upper_edge_resize_locks_width(square):
    square.set_selection(Operation.BEGIN_DRAG, Point(50, 5))
    assert square.operation is Operation.BEGIN_DRAG
    square.set_selection(Operation.DRAG, Point(30, -20))
    assert square.rect == Rect(Point(0, -20), Point(100, 100))


def test_begin_outside_starts_new_selection(square):
    square.set_selection(Operation.BEGIN_DRAG, Point(500, 500))
    assert square.operation is Operation.BEGIN_DRAG
    square.set_selection(Operation.DRAG, Point(510, 520))
    assert square.rect == Rect(Point(500, 500), Point(510, 520))


def test_cancel_resets_and_hides(square, events):
    square.set_selection(Operation.CANCEL_SELECTION, Point(5, 5))
    assert square.rect == Rect()
    assert square.operation is Operation.NO_OP
    assert events == [(Rect(), False)]


def test_closest_corner(square):
    assert square.closest_corner(Point(-5, -5)) is Corner.TOP_LEFT
    assert square.closest_corner(Point(90, 5)) is Corner.TOP_RIGHT
    assert square.closest_corner(Point(3, 97)) is Corner.BOTTOM_LEFT
    assert square.closest_corner(Point(99, 120)) is Corner.BOTTOM_RIGHT
    assert square.closest_corner(Point(50, 50)) is Corner.TOP_LEFT


def test_update_selection_notifies(selection, events):
    rect = Rect(Point(1, 2), Point(3, 4))
    selection.update_selection(rect)
    assert selection.rect == rect
    assert events == [(rect, True)]