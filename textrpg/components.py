"""Behaviour components attached to game objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textrpg.enums import InputEvent, KeyCode, MoveDirection
from textrpg.inputs import InputSystem
from textrpg.screen import SCREEN_HEIGHT, SCREEN_WIDTH, Screen

if TYPE_CHECKING:
    from textrpg.objects import GameObject

DEFAULT_ORDER = 100

_MOVEMENT_BINDINGS = (
    ("MoveUp", MoveDirection.UP, KeyCode.W),
    ("MoveDown", MoveDirection.DOWN, KeyCode.S),
    ("MoveLeft", MoveDirection.LEFT, KeyCode.A),
    ("MoveRight", MoveDirection.RIGHT, KeyCode.D),
)

_STEPS = {
    MoveDirection.UP: (0, -1),
    MoveDirection.DOWN: (0, 1),
    MoveDirection.LEFT: (-1, 0),
    MoveDirection.RIGHT: (1, 0),
}


class Component:
    """A piece of behaviour owned by a game object; lower orders run first."""

    def __init__(self, owner: GameObject, order: int = DEFAULT_ORDER) -> None:
        self.owner = owner
        self.order = order
        owner.add_component(self)

    def init(self) -> None:
        """Hook run when the owner is initialised; does nothing by default."""

    def update(self) -> None:
        """Hook run once per frame; does nothing by default."""

    def render(self, screen: Screen) -> None:
        """Hook that draws onto ``screen``; draws nothing by default."""

    def release(self) -> None:
        """Hook run when the owner drops its components; does nothing by default."""


class ControllerComponent(Component):
    """Moves its owner one cell per frame with the W, A, S and D keys."""

    def __init__(
        self, owner: GameObject, input_system: InputSystem, order: int = DEFAULT_ORDER
    ) -> None:
        super().__init__(owner, order)
        self.input_system = input_system

    def init(self) -> None:
        """Create the movement actions and bind them to their keys."""
        for name, direction, key in _MOVEMENT_BINDINGS:
            action = self.input_system.create_action(name)
            action.bind_callback(
                lambda event, direction=direction: self.handle_movement(event, direction)
            )
        for name, _direction, key in _MOVEMENT_BINDINGS:
            self.input_system.bind_action(name, key)

    def update(self) -> None:
        self.owner.set_position(self.owner.x, self.owner.y)

    def handle_movement(self, event: InputEvent, direction: MoveDirection) -> None:
        """Step the owner in ``direction`` on a press or hold, staying on screen."""
        if event not in (InputEvent.PRESSED, InputEvent.HOLD):
            return
        try:
            dx, dy = _STEPS[direction]
        except KeyError:
            raise ValueError(f"invalid move direction: {direction!r}") from None
        x = min(max(self.owner.x + dx, 0), SCREEN_WIDTH - 1)
        y = min(max(self.owner.y + dy, 0), SCREEN_HEIGHT - 1)
        self.owner.set_position(x, y)


class RendererComponent(Component):
    """Draws a fixed shape at its owner's position."""

    def __init__(self, owner: GameObject, shape: str) -> None:
        super().__init__(owner)
        self.shape = shape

    def render(self, screen: Screen) -> None:
        screen.draw(self.owner.x, self.owner.y, self.shape)