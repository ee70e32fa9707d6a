"""Translates raw window input into gameplay and UI events."""
from __future__ import annotations

from typing import Protocol

from stacker.constants import (
    KEY_ENTER,
    KEY_F1,
    KEY_NUM_ENTER,
    KEY_R,
    MOUSE_BUTTON_LEFT,
)
from stacker.events.bus import (
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_REPLAY_REQUEST,
    EVENT_STOP_TRIGGER,
    EVENT_TUTORIAL_TOGGLE,
    EventBus,
)
from stacker.ui.layout import point_in_replay_button, point_in_tutorial_button


class InputSource(Protocol):
    def attach(self) -> None: ...

    def detach(self) -> None: ...


class InputSystem:
    """Keyboard/mouse front end; the only producer of stop triggers.

    While attached, any key or click that is not a UI control becomes a stop
    trigger. Once detached (game over) the same presses can only ask for a
    replay.
    """

    REPLAY_KEYS = (KEY_R, KEY_ENTER, KEY_NUM_ENTER)

    def __init__(self, event_bus: EventBus, window):
        self.event_bus = event_bus
        self.window = window
        self._attached = False
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    @property
    def attached(self) -> bool:
        return self._attached

    def attach(self) -> None:
        self._attached = True

    def detach(self) -> None:
        self._attached = False

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        if symbol == KEY_F1:
            self.event_bus.emit(EVENT_TUTORIAL_TOGGLE)
            return
        if self._attached:
            self.event_bus.emit(EVENT_STOP_TRIGGER, source="keyboard")
        elif symbol in self.REPLAY_KEYS:
            self.event_bus.emit(EVENT_REPLAY_REQUEST)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button != MOUSE_BUTTON_LEFT:
            return
        width, height = self.window.width, self.window.height
        if point_in_tutorial_button(x, y, width, height):
            self.event_bus.emit(EVENT_TUTORIAL_TOGGLE)
            return
        if self._attached:
            self.event_bus.emit(EVENT_STOP_TRIGGER, source="mouse")
        elif point_in_replay_button(x, y, width, height):
            self.event_bus.emit(EVENT_REPLAY_REQUEST)
