from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems nobody holds on to still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"  # payload: dt=float (seconds)


# ============================================================================
# RAW INPUT (window -> InputSystem)
# ============================================================================
EVENT_KEY_PRESS = "key_press"      # payload: symbol=int, modifiers=int
EVENT_MOUSE_PRESS = "mouse_press"  # payload: x, y, button


# ============================================================================
# GAMEPLAY
# ============================================================================
EVENT_STOP_TRIGGER = "stop_trigger"          # payload: source=str
EVENT_PLATFORM_STARTED = "platform_started"  # payload: row=int, size=int, interval_ms=int
EVENT_PLATFORM_STOPPED = "platform_stopped"  # payload: row=int, position=int
EVENT_ROW_ADVANCED = "row_advanced"          # payload: placed_row=int, row=int, cleared=list[int], kept=list[int]
EVENT_GRID_CHANGED = "grid_changed"          # payload: reason=str


# ============================================================================
# GAME FLOW
# ============================================================================
EVENT_SESSION_STARTED = "session_started"      # payload: width=int, height=int
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_WON = "game_won"                    # payload: None
EVENT_GAME_LOST = "game_lost"                  # payload: row=int
EVENT_REPLAY_REQUEST = "replay_request"        # payload: None


# ============================================================================
# UI
# ============================================================================
EVENT_TUTORIAL_TOGGLE = "tutorial_toggle"    # payload: None
EVENT_TUTORIAL_CHANGED = "tutorial_changed"  # payload: visible=bool
