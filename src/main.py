"""Entry point for the Stacker arcade game.

Sets up the ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color

from stacker.constants import BACKGROUND_COLOR, UPDATE_RATE, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from stacker.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from stacker.rendering.grid_renderer import GridRenderer
from stacker.systems.input import InputSystem
from stacker.systems.notification_system import NotificationSystem
from stacker.systems.platform_system import PlatformSystem
from stacker.systems.render import RenderSystem
from stacker.systems.session_system import SessionSystem
from stacker.systems.stack_system import StackSystem
from stacker.systems.tutorial_system import TutorialSystem
from stacker.world import create_world


class StackerWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(UPDATE_RATE)
        self.event_bus = EventBus()
        self.world = create_world()

        # Presentation
        self.grid_renderer = GridRenderer(self)
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.grid_renderer)
        self.notification_system = NotificationSystem(self.world, self.event_bus)
        self.tutorial_system = TutorialSystem(self.world, self.event_bus)

        # Input
        self.input_system = InputSystem(self.event_bus, self)

        # Gameplay
        self.platform_system = PlatformSystem(self.world, self.event_bus)
        self.stack_system = StackSystem(self.world, self.event_bus, self.platform_system)
        self.session_system = SessionSystem(
            self.world,
            self.event_bus,
            self.platform_system,
            input_source=self.input_system,
        )

        set_background_color(BACKGROUND_COLOR)
        self.session_system.start()

    def on_resize(self, width: int, height: int):
        # Arcade may resize before __init__ has wired the systems.
        if hasattr(self, "render_system"):
            self.render_system.notify_resize(width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    StackerWindow()
    run()


if __name__ == "__main__":
    main()
