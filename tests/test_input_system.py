from stacker.constants import KEY_ENTER, KEY_F1, KEY_R, REPLAY_BUTTON, TUTORIAL_BUTTON
from stacker.events.bus import (
    EventBus,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_REPLAY_REQUEST,
    EVENT_STOP_TRIGGER,
    EVENT_TUTORIAL_TOGGLE,
)
from stacker.systems.input import InputSystem
from stacker.ui.layout import button_rect

from tests.helpers import DummyWindow

KEY_SPACE = 32
MOUSE_BUTTON_RIGHT = 4


def _wire(attached=True):
    bus = EventBus()
    window = DummyWindow()
    input_system = InputSystem(bus, window)
    if attached:
        input_system.attach()
    received = []
    for name in (EVENT_STOP_TRIGGER, EVENT_REPLAY_REQUEST, EVENT_TUTORIAL_TOGGLE):
        bus.subscribe(name, lambda sender, _name=name, **kwargs: received.append((_name, kwargs)))
    return bus, window, input_system, received


def _center(spec, window):
    left, bottom, width, height = button_rect(spec, window.width, window.height)
    return left + width / 2, bottom + height / 2


def test_any_key_stops_platform_while_attached():
    bus, _, _, received = _wire()
    bus.emit(EVENT_KEY_PRESS, symbol=KEY_SPACE, modifiers=0)
    assert received == [(EVENT_STOP_TRIGGER, {"source": "keyboard"})]


def test_board_click_stops_platform_while_attached():
    bus, window, _, received = _wire()
    bus.emit(EVENT_MOUSE_PRESS, x=window.width / 2, y=window.height / 3, button=1)
    assert received == [(EVENT_STOP_TRIGGER, {"source": "mouse"})]


def test_right_click_is_ignored():
    bus, window, _, received = _wire()
    bus.emit(EVENT_MOUSE_PRESS, x=window.width / 2, y=window.height / 3, button=MOUSE_BUTTON_RIGHT)
    assert received == []


def test_malformed_mouse_press_is_ignored():
    bus, _, _, received = _wire()
    bus.emit(EVENT_MOUSE_PRESS, button=1)
    bus.emit(EVENT_KEY_PRESS, modifiers=0)
    assert received == []


def test_tutorial_controls_never_stop_platform():
    bus, window, _, received = _wire()
    x, y = _center(TUTORIAL_BUTTON, window)

    bus.emit(EVENT_KEY_PRESS, symbol=KEY_F1, modifiers=0)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)

    assert [name for name, _ in received] == [EVENT_TUTORIAL_TOGGLE, EVENT_TUTORIAL_TOGGLE]


def test_detached_input_only_requests_replay():
    bus, window, _, received = _wire(attached=False)
    x, y = _center(REPLAY_BUTTON, window)

    bus.emit(EVENT_KEY_PRESS, symbol=KEY_SPACE, modifiers=0)
    bus.emit(EVENT_MOUSE_PRESS, x=window.width / 2, y=10, button=1)
    assert received == []

    bus.emit(EVENT_KEY_PRESS, symbol=KEY_R, modifiers=0)
    bus.emit(EVENT_KEY_PRESS, symbol=KEY_ENTER, modifiers=0)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert [name for name, _ in received] == [EVENT_REPLAY_REQUEST] * 3


def test_attach_and_detach_are_idempotent():
    bus, _, input_system, received = _wire(attached=False)
    input_system.attach()
    input_system.attach()
    assert input_system.attached
    input_system.detach()
    input_system.detach()
    assert not input_system.attached

    bus.emit(EVENT_KEY_PRESS, symbol=KEY_SPACE, modifiers=0)
    assert received == []
