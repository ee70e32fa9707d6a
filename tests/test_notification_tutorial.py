from stacker.components.tutorial import TutorialState
from stacker.constants import TUTORIAL_TEXT
from stacker.events.bus import EVENT_TUTORIAL_CHANGED, EVENT_TUTORIAL_TOGGLE, EventBus
from stacker.systems.tutorial_system import TutorialSystem
from stacker.world import create_world


def _tutorial(world) -> TutorialState:
    return next(comp for _, comp in world.get_component(TutorialState))


def test_tutorial_starts_hidden_with_instructions():
    world = create_world()
    tutorial = _tutorial(world)
    assert not tutorial.visible
    assert tutorial.text == TUTORIAL_TEXT


def test_tutorial_toggle_flips_visibility():
    bus = EventBus()
    world = create_world()
    TutorialSystem(world, bus)
    changes = []
    bus.subscribe(EVENT_TUTORIAL_CHANGED, lambda sender, **payload: changes.append(payload["visible"]))

    bus.emit(EVENT_TUTORIAL_TOGGLE)
    bus.emit(EVENT_TUTORIAL_TOGGLE)

    assert changes == [True, False]
    assert not _tutorial(world).visible
