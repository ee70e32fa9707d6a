from esper import World

from stacker.components.notification import Notification
from stacker.components.tutorial import TutorialState
from stacker.constants import PANEL_COLOR, REPLAY_BUTTON, TEXT_COLOR, TUTORIAL_BUTTON
from stacker.events.bus import EVENT_GRID_CHANGED, EventBus
from stacker.rendering.renderer import Renderer
from stacker.systems.grid_ops import get_grid
from stacker.ui.layout import button_rect


class RenderSystem:
    """Bridges grid changes to the renderer and paints the UI chrome."""

    def __init__(self, world: World, event_bus: EventBus, window, renderer: Renderer):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.renderer = renderer
        self._last_window_size = (self.window.width, self.window.height)
        self.event_bus.subscribe(EVENT_GRID_CHANGED, self.on_grid_changed)

    def on_grid_changed(self, sender, **kwargs):
        self.renderer.redraw(get_grid(self.world))

    def notify_resize(self, width: int, height: int):
        self._last_window_size = (width, height)
        self.renderer.redraw(get_grid(self.world))

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        if (self.window.width, self.window.height) != self._last_window_size:
            self.notify_resize(self.window.width, self.window.height)
        self.renderer.draw()
        self._draw_button(arcade, "Tutorial", TUTORIAL_BUTTON)
        for _, notification in self.world.get_component(Notification):
            if notification.visible:
                self._draw_notification(arcade, notification)
        for _, tutorial in self.world.get_component(TutorialState):
            if tutorial.visible:
                self._draw_tutorial(arcade, tutorial)

    def _draw_button(self, arcade, label: str, spec):
        left, bottom, width, height = button_rect(spec, self.window.width, self.window.height)
        arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, arcade.color.DARK_SLATE_BLUE)
        arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, arcade.color.WHITE, border_width=2)
        arcade.draw_text(
            label,
            left + width / 2,
            bottom + height / 2,
            TEXT_COLOR,
            16,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )

    def _draw_notification(self, arcade, notification: Notification):
        width, height = self.window.width, self.window.height
        arcade.draw_lrbt_rectangle_filled(0, width, height * 0.35, height * 0.65, PANEL_COLOR)
        arcade.draw_text(
            notification.text,
            width / 2,
            height * 0.56,
            TEXT_COLOR,
            28,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
        self._draw_button(arcade, "Replay", REPLAY_BUTTON)

    def _draw_tutorial(self, arcade, tutorial: TutorialState):
        width, height = self.window.width, self.window.height
        margin = 24
        arcade.draw_lrbt_rectangle_filled(margin, width - margin, margin, height * 0.9, PANEL_COLOR)
        arcade.draw_text(
            tutorial.text,
            margin * 2,
            height * 0.9 - margin,
            TEXT_COLOR,
            14,
            anchor_y="top",
            multiline=True,
            width=int(width - margin * 4),
        )
