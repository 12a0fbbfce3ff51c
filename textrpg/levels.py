"""Levels: collections of game objects that run together."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textrpg.screen import Screen

if TYPE_CHECKING:
    from textrpg.instance import GameInstance
    from textrpg.objects import GameObject

PLAYER_TAG = "Player"


class Level:
    """A tagged list of game objects that are initialised, updated and drawn together."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        self.objects: list[GameObject] = []

    def init(self) -> None:
        for obj in list(self.objects):
            obj.init()

    def update(self) -> None:
        for obj in list(self.objects):
            obj.update()

    def render(self, screen: Screen) -> None:
        for obj in list(self.objects):
            obj.render(screen)

    def release(self) -> None:
        """Release every object and empty the level."""
        for obj in list(self.objects):
            obj.release()
        self.objects.clear()

    def add_object(self, obj: GameObject) -> None:
        self.objects.append(obj)

    def detach_object(self, obj: GameObject) -> None:
        """Take ``obj`` out of the level without releasing it."""
        for index, candidate in enumerate(self.objects):
            if candidate is obj:
                del self.objects[index]
                return

    def remove_object(self, tag: str) -> None:
        """Release and remove every object with ``tag``."""
        kept = []
        for obj in self.objects:
            if obj.tag == tag:
                obj.release()
            else:
                kept.append(obj)
        self.objects = kept

    def find_object(self, tag: str) -> GameObject | None:
        return next((obj for obj in self.objects if obj.tag == tag), None)


def _enter_with_player(level: Level, game_instance: GameInstance) -> None:
    player = game_instance.player
    player.update_level(level)
    if not game_instance.player_initialized:
        game_instance.player_initialized = True
    if level.find_object(PLAYER_TAG) is None:
        level.add_object(player)


class TestLevel(Level):
    """A playground level holding the player."""

    __test__ = False

    def __init__(self, tag: str, game_instance: GameInstance) -> None:
        super().__init__(tag)
        self.game_instance = game_instance

    def init(self) -> None:
        _enter_with_player(self, self.game_instance)
        super().init()


class TitleLevel(Level):
    """The title level holding the player."""

    def __init__(self, tag: str, game_instance: GameInstance) -> None:
        super().__init__(tag)
        self.game_instance = game_instance

    def init(self) -> None:
        _enter_with_player(self, self.game_instance)
        super().init()