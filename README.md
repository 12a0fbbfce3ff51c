# textrpg

A small engine for text role-playing games that runs in the terminal. A
character-cell screen of 128 × 64 cells is built in memory and then
written to the terminal in one go, about 60 times a second. Inside it,
levels hold game objects, and game objects are built from components
that run in order.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Playing

```
textrpg
```

The game starts in the "Test" level with the player (`@`) in the middle
of the screen. Move with **W**, **A**, **S** and **D**. The player cannot
leave the screen. Stop the game with Ctrl+C.

Options:

- `--fps N` sets the frame rate. The default is 60.
- `--frames N` stops the game after N frames. Without it the game runs
  until it is interrupted.

On a Unix terminal, the keyboard is put into cbreak mode while the game
runs and is restored when it ends. On each frame the game reads the
letters and digits that were typed since the last frame and treats those
keys as held. Holding a key down therefore depends on the terminal's key
repeat.

## Building blocks

- `textrpg.screen.Screen` is the character buffer. `init` allocates it
  and hides the cursor. `release` shows the cursor again. The screen can
  also be used as a context manager. `draw(x, y, text)` ignores
  coordinates outside the screen. Every character of `text` is written to
  the same cell, so only the last one remains. `frame()` returns the
  buffer as lines of text, and `swap_buffer()` moves the cursor home and
  writes the frame to the stream.
- `textrpg.timer.Timer` limits ticks to a fixed rate. Call `start()`
  first. After that, `can_update()` returns true once per frame interval,
  and `delta_time()` returns the seconds of the last frame multiplied by
  `time_scale`. The clock can be replaced, for example in tests.
- `textrpg.inputs.InputSystem` takes the set of keys held on each
  `update(held_keys)` call. For every key that changed it fires
  `InputEvent.PRESSED` or `RELEASED`, and `HOLD` for keys that stay down.
  The event goes to the `InputAction` bound to that key through
  `create_action` and `bind_action`. `key_name` returns the printable
  name of a letter or digit key.
- `textrpg.enums` defines `InputEvent`, `MoveDirection` and `KeyCode`.
- `textrpg.objects.GameObject` is a positioned object with a tag. It
  keeps its components sorted by `order`. `textrpg.objects.Player` is the
  player character. The first time it is initialised it gets a
  controller and a renderer.
- `textrpg.components` provides `Component` as the base class,
  `ControllerComponent` for WASD movement that stays on the screen, and
  `RendererComponent`, which draws a fixed shape.
- `textrpg.levels.Level` is a container for game objects, with
  `add_object`, `find_object`, `remove_object`, which releases the
  object, and `detach_object`, which does not. `TestLevel` and
  `TitleLevel` bring the session's player in when they start.
- `textrpg.instance.GameInstance` holds the player so that it survives
  level changes.
- `textrpg.manager.LevelManager` owns the levels "Test" and "Title".
  `set_next_level(name)` queues a level. It raises `RuntimeError` if a
  level is already queued and `KeyError` for an unknown name.
  `change_level()` switches to the queued level and carries the player
  over.
- `textrpg.game.Game` runs the loop. `init`, `tick` runs one frame,
  `run(max_frames)` runs many, and `release` cleans up.
  `TerminalKeyReader` supplies the keys.
- `textrpg.output` has the tagged message printers `print_error`,
  `print_info`, `print_warning` and `print_system`, the separator
  `print_line`, and `clear_screen`, which runs the platform's `clear` or
  `cls` command.
- `textrpg.stats` has `Status`, which holds attack, defense and agility.
  Statuses can be added with `+`, and `calculate_damage` never returns
  less than 5. It also has `Experience`, which levels up as often as the
  points allow, and `Gold`, which is capped at 32767 and refuses to go
  below zero.
- `textrpg.leveldata.PlayerDataTable` is the per-level stat table for
  levels 1 to 100. Call `initialize_level_data()` to fill it.
  `load_level_data(level)` returns the defaults for a level outside that
  range.

## Example

```python
from textrpg.stats import Status, Gold

hero = Status(20, 10, 12)
goblin = Status(8, 4, 6)
print(goblin.calculate_damage(hero))   # 16: damage the goblin takes from the hero

purse = Gold(100)
purse.add_gold(50)
print(purse.remove_gold(500))          # False: not enough gold
print(purse.amount)                    # 150
```

## What it does not do

The game has no combat, enemies, items, story or menus yet. Walking the
player around the screen is all it does. `Status`, `Experience`, `Gold`
and `PlayerDataTable` exist as building blocks, but the running game does
not use them. The "Title" level exists, but nothing in the game switches
to it. A program has to call `LevelManager.set_next_level("Title")` to
reach it.