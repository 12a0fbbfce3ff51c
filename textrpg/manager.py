"""Owns the levels and switches between them."""

from __future__ import annotations

from textrpg.instance import GameInstance
from textrpg.levels import PLAYER_TAG, Level, TestLevel, TitleLevel
from textrpg.screen import Screen


class LevelManager:
    """Keeps the named levels, runs the current one and changes level on request."""

    def __init__(self, game_instance: GameInstance) -> None:
        self.game_instance = game_instance
        self.current_level: Level | None = None
        self.next_level: Level | None = None
        self.levels: dict[str, Level] = {}

    def init(self) -> None:
        self.levels["Test"] = TestLevel("Test", self.game_instance)
        self.levels["Title"] = TitleLevel("Title", self.game_instance)
        self.current_level = self.levels["Test"]
        self.current_level.init()

    def _current(self) -> Level:
        if self.current_level is None:
            raise RuntimeError("no current level")
        return self.current_level

    def update(self) -> None:
        self._current().update()

    def render(self, screen: Screen) -> None:
        self._current().render(screen)

    def release(self) -> None:
        """Release the current level and every other level, then forget them."""
        if self.current_level is not None:
            self.current_level.release()
            self.current_level = None
        self.next_level = None
        for level in self.levels.values():
            level.release()
        self.levels.clear()

    def has_next_level(self) -> bool:
        return self.next_level is not None

    def set_next_level(self, name: str) -> None:
        """Queue the level called ``name`` to become current."""
        if self.next_level is not None:
            raise RuntimeError("a next level is already set; a new level cannot be set")
        try:
            self.next_level = self.levels[name]
        except KeyError:
            raise KeyError(f"no level named {name!r}") from None

    def change_level(self) -> None:
        """Switch to the queued level, carrying the player over."""
        if self.next_level is None:
            return
        current = self._current()
        player = self.game_instance.player
        if current.find_object(PLAYER_TAG) is player:
            current.detach_object(player)
        current.release()
        self.current_level = self.next_level
        self.current_level.init()
        player.update_level(self.current_level)
        self.next_level = None