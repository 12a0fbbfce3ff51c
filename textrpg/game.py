"""The game loop and its command-line entry point."""

from __future__ import annotations

import argparse
import os
import select
import sys
import time
from typing import BinaryIO, Iterable, Protocol, TextIO

from textrpg.inputs import InputSystem
from textrpg.instance import GameInstance
from textrpg.manager import LevelManager
from textrpg.screen import Screen
from textrpg.timer import FPS, Timer

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - not available on Windows
    termios = None
    tty = None

try:
    import msvcrt
except ImportError:
    msvcrt = None

_IDLE_SLEEP = 0.001


class KeySource(Protocol):
    def poll(self) -> Iterable[int]: ...


def _key_code(char: str) -> int | None:
    upper = char.upper()
    if len(upper) == 1 and ("A" <= upper <= "Z" or "0" <= upper <= "9"):
        return ord(upper)
    return None


class TerminalKeyReader:
    """Reports the letter and digit keys typed since the last poll as held keys."""

    def __init__(self, stream: TextIO | BinaryIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self._saved_mode: list | None = None
        self._fd: int | None = None

    def _fileno(self) -> int | None:
        try:
            return self.stream.fileno()
        except (OSError, ValueError, AttributeError):
            return None

    def __enter__(self) -> TerminalKeyReader:
        fd = self._fileno()
        if fd is not None and termios is not None and os.isatty(fd):
            self._fd = fd
            self._saved_mode = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._saved_mode is not None and self._fd is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_mode)
            self._saved_mode = None

    def _read_available(self) -> str:
        fd = self._fileno()
        if fd is None:
            return ""
        if msvcrt is not None and os.isatty(fd):
            chars = []
            while msvcrt.kbhit():
                chars.append(msvcrt.getwch())
            return "".join(chars)
        chunks = []
        try:
            while select.select([fd], [], [], 0)[0]:
                data = os.read(fd, 1024)
                if not data:
                    break
                chunks.append(data)
        except OSError:
            return ""
        return b"".join(chunks).decode("utf-8", errors="ignore")

    def poll(self) -> set[int]:
        """Key codes of the letters and digits waiting on the stream."""
        codes = (_key_code(char) for char in self._read_available())
        return {code for code in codes if code is not None}


class Game:
    """Runs input, update and render at a fixed frame rate."""

    def __init__(
        self,
        screen: Screen | None = None,
        input_system: InputSystem | None = None,
        timer: Timer | None = None,
        key_source: KeySource | None = None,
    ) -> None:
        self.screen = screen if screen is not None else Screen()
        self.input_system = input_system if input_system is not None else InputSystem()
        self.timer = timer if timer is not None else Timer()
        self.key_source = key_source
        self.game_instance = GameInstance(self.input_system)
        self.level_manager = LevelManager(self.game_instance)
        self._initialized = False

    def init(self) -> bool:
        self.screen.init()
        self.game_instance.init()
        self.level_manager.init()
        self._initialized = True
        return True

    def tick(self) -> None:
        """Run one frame: read input, update the level, draw it."""
        held = self.key_source.poll() if self.key_source is not None else ()
        self.input_system.update(held)
        self.level_manager.update()
        self.screen.clear()
        self.level_manager.render(self.screen)
        self.screen.swap_buffer()

    def run(self, max_frames: int | None = None) -> None:
        """Loop until ``max_frames`` frames have run, or forever when it is None."""
        self.timer.start()
        if not self._initialized:
            self.init()
        frames = 0
        while max_frames is None or frames < max_frames:
            if self.level_manager.has_next_level():
                self.level_manager.change_level()
            if self.timer.can_update():
                self.tick()
                frames += 1
            else:
                time.sleep(_IDLE_SLEEP)

    def release(self) -> None:
        self.level_manager.release()
        self.screen.release()
        self._initialized = False


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Walk the player around with W, A, S and D.")
    parser.add_argument("--fps", type=int, default=FPS, help="frames per second")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)

    with TerminalKeyReader() as keys:
        game = Game(timer=Timer(fps=args.fps), key_source=keys)
        try:
            if not game.init():
                return 0
            game.run(args.frames)
        except KeyboardInterrupt:
            pass
        finally:
            game.release()
    return 0