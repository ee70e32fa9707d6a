from esper import World

from stacker.components.tutorial import TutorialState
from stacker.events.bus import EVENT_TUTORIAL_CHANGED, EVENT_TUTORIAL_TOGGLE, EventBus


class TutorialSystem:
    """Toggles the how-to-play panel."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TUTORIAL_TOGGLE, self.on_toggle)

    def on_toggle(self, sender, **kwargs):
        for _, tutorial in self.world.get_component(TutorialState):
            tutorial.visible = not tutorial.visible
            self.event_bus.emit(EVENT_TUTORIAL_CHANGED, visible=tutorial.visible)
            return
