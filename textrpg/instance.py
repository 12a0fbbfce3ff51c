"""State that lives for the whole game session."""

from __future__ import annotations

from textrpg.inputs import InputSystem
from textrpg.objects import Player


class GameInstance:
    """Holds the player across level changes."""

    def __init__(self, input_system: InputSystem) -> None:
        self.input_system = input_system
        self.player = Player(input_system)
        self.player_initialized = False

    def init(self) -> None:
        """Start over with a fresh player."""
        self.player = Player(self.input_system)
        self.player_initialized = False