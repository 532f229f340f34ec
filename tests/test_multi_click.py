from oiview.multi_click import (
    ButtonState,
    ClickEvent,
    MouseButton,
    MouseMultiClickHandler,
)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_handler(rate=250, taps=3):
    clock = FakeClock()
    handler = MouseMultiClickHandler(rate, taps, clock=clock)
    events = []
    handler.add_listener(events.append)
    return handler, clock, events


def click(handler, button=MouseButton.LEFT):
    handler.set_button_state(button, ButtonState.DOWN)
    handler.set_button_state(button, ButtonState.UP)


def test_single_click_after_timeout():
    handler, clock, events = make_handler()
    click(handler)
    assert events == []
    clock.now = 300
    handler.process_queued_buttons()
    assert events == [ClickEvent(MouseButton.LEFT, 1)]
    assert handler.pending_delay() is None


def test_double_click():
    handler, clock, events = make_handler()
    click(handler)
    clock.now = 100
    click(handler)
    clock.now = 400
    handler.process_queued_buttons()
    assert events == [ClickEvent(MouseButton.LEFT, 2)]


def test_max_taps_raises_immediately():
    handler, clock, events = make_handler(taps=3)
    for step in range(3):
        clock.now = step * 50
        click(handler)
    assert events == [ClickEvent(MouseButton.LEFT, 3)]
    assert handler.pending_delay() is None
    clock.now = 1000
    handler.process_queued_buttons()
    assert len(events) == 1


def test_click_outside_radius_restarts_count():
    handler, clock, events = make_handler()
    click(handler)
    handler.set_mouse_delta(20, 0)
    clock.now = 50
    click(handler)
    clock.now = 400
    handler.process_queued_buttons()
    assert events == [ClickEvent(MouseButton.LEFT, 1)]


def test_small_move_keeps_count():
    handler, clock, events = make_handler()
    click(handler)
    handler.set_mouse_delta(3, 4)
    clock.now = 50
    click(handler)
    clock.now = 400
    handler.process_queued_buttons()
    assert events == [ClickEvent(MouseButton.LEFT, 2)]


def test_pending_delay_after_press_and_early_processing():
    handler, clock, _ = make_handler(rate=250)
    assert handler.pending_delay() is None
    click(handler)
    assert handler.pending_delay() == 250
    clock.now = 100
    handler.process_queued_buttons()
    assert handler.pending_delay() == 150


def test_buttons_tracked_independently():
    handler, clock, events = make_handler()
    click(handler, MouseButton.LEFT)
    click(handler, MouseButton.RIGHT)
    click(handler, MouseButton.RIGHT)
    clock.now = 300
    handler.process_queued_buttons()
    assert events == [
        ClickEvent(MouseButton.LEFT, 1),
        ClickEvent(MouseButton.RIGHT, 2),
    ]


def test_not_set_state_is_ignored():
    handler, clock, events = make_handler()
    handler.set_button_state(MouseButton.LEFT, ButtonState.NOT_SET)
    clock.now = 300
    handler.process_queued_buttons()
    assert events == []
    assert handler.pending_delay() is None


def test_repeated_down_without_up_counts_once():
    handler, clock, events = make_handler()
    handler.set_button_state(MouseButton.LEFT, ButtonState.DOWN)
    handler.set_button_state(MouseButton.LEFT, ButtonState.DOWN)
    clock.now = 300
    handler.process_queued_buttons()
    assert events == [ClickEvent(MouseButton.LEFT, 1)]


def test_count_restarts_after_event():
    handler, clock, events = make_handler()
    click(handler)
    clock.now = 300
    handler.process_queued_buttons()
    click(handler)
    clock.now = 600
    handler.process_queued_buttons()
    assert events == [ClickEvent(MouseButton.LEFT, 1), ClickEvent(MouseButton.LEFT, 1)]