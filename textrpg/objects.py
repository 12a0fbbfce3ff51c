"""Game objects and the player character."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textrpg.components import Component, ControllerComponent, RendererComponent
from textrpg.inputs import InputSystem
from textrpg.output import print_error
from textrpg.screen import SCREEN_HEIGHT, SCREEN_WIDTH, Screen

if TYPE_CHECKING:
    from textrpg.levels import Level

PLAYER_TAG = "Player"
PLAYER_SHAPE = "@"


class GameObject:
    """A tagged, positioned object made of ordered components."""

    def __init__(self, level: Level | None, tag: str) -> None:
        self.level = level
        self.tag = tag
        self.x = 0
        self.y = 0
        self.components: list[Component] = []
        if level is not None:
            level.add_object(self)
        else:
            print_error("There is no level to add the game object to.")

    def init(self) -> None:
        for component in list(self.components):
            component.init()

    def update(self) -> None:
        for component in list(self.components):
            component.update()

    def render(self, screen: Screen) -> None:
        for component in list(self.components):
            component.render(screen)

    def release(self) -> None:
        """Release every component and drop them all."""
        for component in list(self.components):
            component.release()
        self.components.clear()

    def add_component(self, component: Component) -> None:
        self.components.append(component)
        self.components.sort(key=lambda comp: comp.order)

    def remove_component(self, component: Component) -> None:
        self.components = [comp for comp in self.components if comp is not component]

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def update_level(self, level: Level | None) -> None:
        """Move the object out of its current level and into ``level``."""
        if self.level is not None and self.level is not level:
            self.level.detach_object(self)
        self.level = level
        if level is not None:
            level.add_object(self)

    def has_components(self) -> bool:
        return bool(self.components)


class Player(GameObject):
    """The keyboard-controlled character."""

    def __init__(self, input_system: InputSystem) -> None:
        super().__init__(None, PLAYER_TAG)
        self.input_system = input_system

    def init(self) -> None:
        """Centre the player and give it controls and a shape on first use."""
        self.set_position(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)
        if not self.has_components():
            ControllerComponent(self, self.input_system)
            RendererComponent(self, PLAYER_SHAPE)
        super().init()

    def update_level(self, level: Level | None) -> None:
        """Enter ``level`` once, initialising the player if it has no components."""
        if level is None or self.level is level:
            return
        if self.level is not None:
            self.level.detach_object(self)
        self.level = level
        if not self.has_components():
            self.init()
        if level.find_object(PLAYER_TAG) is None:
            level.add_object(self)