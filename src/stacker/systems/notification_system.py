from esper import World

from stacker.components.notification import Notification
from stacker.constants import LOSS_TEXT, WIN_TEXT
from stacker.events.bus import EVENT_GAME_LOST, EVENT_GAME_WON, EVENT_SESSION_STARTED, EventBus


class NotificationSystem:
    """Shows the end-of-game banner and hides it for the next session."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_GAME_WON, self.on_game_won)
        self.event_bus.subscribe(EVENT_GAME_LOST, self.on_game_lost)
        self.event_bus.subscribe(EVENT_SESSION_STARTED, self.on_session_started)

    def on_game_won(self, sender, **kwargs):
        self._show(WIN_TEXT)

    def on_game_lost(self, sender, **kwargs):
        self._show(LOSS_TEXT)

    def on_session_started(self, sender, **kwargs):
        for _, notification in self.world.get_component(Notification):
            notification.visible = False
            notification.text = ""

    def _show(self, text: str) -> None:
        for _, notification in self.world.get_component(Notification):
            notification.text = text
            notification.visible = True
