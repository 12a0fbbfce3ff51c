import io

import pytest

from textrpg.components import Component, ControllerComponent, RendererComponent
from textrpg.enums import KeyCode
from textrpg.inputs import InputSystem
from textrpg.levels import Level
from textrpg.objects import GameObject, Player
from textrpg.screen import SCREEN_HEIGHT, SCREEN_WIDTH, Screen


class Recorder(Component):
    def __init__(self, owner, log, name, order=100):
        super().__init__(owner, order)
        self.log = log
        self.name = name

    def init(self):
        self.log.append((self.name, "init"))

    def update(self):
        self.log.append((self.name, "update"))

    def render(self, screen):
        self.log.append((self.name, "render", screen))

    def release(self):
        self.log.append((self.name, "release"))


def test_object_registers_with_level():
    level = Level("Field")
    rock = GameObject(level, "Rock")
    assert level.find_object("Rock") is rock
    assert rock.level is level


def test_object_without_level_reports_error(capsys):
    obj = GameObject(None, "Lost")
    assert obj.level is None
    assert capsys.readouterr().err.startswith("[Error]")


def test_position_starts_at_origin_and_can_be_set():
    obj = GameObject(None, "Thing")
    assert (obj.x, obj.y) == (0, 0)
    obj.set_position(12, 34)
    assert (obj.x, obj.y) == (12, 34)


def test_lifecycle_calls_components_in_order():
    obj = GameObject(None, "Thing")
    log = []
    Recorder(obj, log, "second", order=20)
    Recorder(obj, log, "first", order=10)
    assert [c.name for c in obj.components] == ["first", "second"]
    obj.init()
    obj.update()
    assert log == [("first", "init"), ("second", "init"), ("first", "update"), ("second", "update")]


def test_render_passes_screen():
    obj = GameObject(None, "Thing")
    log = []
    Recorder(obj, log, "only")
    screen = object()
    obj.render(screen)
    assert log == [("only", "render", screen)]


def test_release_releases_and_drops_components():
    obj = GameObject(None, "Thing")
    log = []
    Recorder(obj, log, "a")
    Recorder(obj, log, "b")
    obj.release()
    assert log == [("a", "release"), ("b", "release")]
    assert not obj.has_components()


def test_remove_component():
    obj = GameObject(None, "Thing")
    keep = Component(obj)
    drop = Component(obj)
    obj.remove_component(drop)
    assert obj.components == [keep]
    assert obj.has_components()


def test_update_level_moves_object():
    first, second = Level("A"), Level("B")
    rock = GameObject(first, "Rock")
    rock.update_level(second)
    assert first.find_object("Rock") is None
    assert second.find_object("Rock") is rock
    assert rock.level is second


def test_update_level_to_none_detaches():
    level = Level("A")
    rock = GameObject(level, "Rock")
    rock.update_level(None)
    assert rock.level is None
    assert level.objects == []


def test_player_init_centres_and_adds_components():
    player = Player(InputSystem())
    player.init()
    assert player.tag == "Player"
    assert (player.x, player.y) == (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)
    assert [type(c) for c in player.components] == [ControllerComponent, RendererComponent]


def test_player_init_twice_keeps_components():
    player = Player(InputSystem())
    player.init()
    first = list(player.components)
    player.init()
    assert player.components == first


def test_player_update_level_adds_once_and_initialises():
    level = Level("Field")
    player = Player(InputSystem())
    player.update_level(level)
    player.update_level(level)
    assert level.objects == [player]
    assert player.level is level
    assert player.has_components()


def test_player_update_level_moves_between_levels():
    first, second = Level("A"), Level("B")
    player = Player(InputSystem())
    player.update_level(first)
    player.update_level(second)
    assert first.find_object("Player") is None
    assert second.find_object("Player") is player


def test_player_update_level_ignores_none():
    level = Level("A")
    player = Player(InputSystem())
    player.update_level(level)
    player.update_level(None)
    assert player.level is level
    assert level.objects == [player]


def test_player_moves_with_keys_and_renders():
    inputs = InputSystem()
    player = Player(inputs)
    player.init()
    inputs.update([KeyCode.D])
    assert player.x == SCREEN_WIDTH // 2 + 1
    screen = Screen(stream=io.StringIO())
    screen.init()
    player.render(screen)
    assert screen.frame().split("\n")[player.y][player.x] == "@"


@pytest.mark.parametrize("tag", ["Rock", "Tree"])
def test_tag_is_kept(tag):
    assert GameObject(None, tag).tag == tag