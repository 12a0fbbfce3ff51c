"""Key state tracking and named input actions."""

from __future__ import annotations

from typing import Callable, Iterable

from textrpg.enums import InputEvent

InputActionCallback = Callable[[InputEvent], None]

_KEY_COUNT = 256


def _key_index(key: int) -> int:
    return int(key) & 0xFF


def key_name(key: int) -> str:
    """The printable name of a letter or digit key, or an empty string."""
    char = chr(int(key)) if 0 <= int(key) < 0x110000 else ""
    if "A" <= char <= "Z" or "0" <= char <= "9":
        return char
    return ""


class InputAction:
    """A named action with at most one callback."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._callback: InputActionCallback | None = None

    def bind_callback(self, callback: InputActionCallback) -> None:
        self._callback = callback

    def execute(self, event: InputEvent) -> None:
        if self._callback is not None:
            self._callback(event)


class InputSystem:
    """Tracks which keys are down and fires the actions bound to them."""

    def __init__(self) -> None:
        self._current: set[int] = set()
        self._previous: set[int] = set()
        self._actions: dict[str, InputAction] = {}
        self._key_to_action: dict[int, str] = {}

    def update(self, held_keys: Iterable[int]) -> None:
        """Take the keys now held and fire PRESSED, HOLD or RELEASED for each change."""
        self._previous = self._current
        self._current = {_key_index(k) for k in held_keys if 0 <= int(k) < _KEY_COUNT}

        for key in sorted(self._current | self._previous):
            now, before = key in self._current, key in self._previous
            if now and not before:
                event = InputEvent.PRESSED
            elif before and not now:
                event = InputEvent.RELEASED
            else:
                event = InputEvent.HOLD
            action_name = self._key_to_action.get(key)
            if action_name is None:
                continue
            action = self._actions.get(action_name)
            if action is not None:
                action.execute(event)

    def is_key_pressed(self, key: int) -> bool:
        return _key_index(key) in self._current

    def create_action(self, name: str) -> InputAction:
        """Return the action called ``name``, creating it if needed."""
        action = self._actions.get(name)
        if action is None:
            action = self._actions[name] = InputAction(name)
        return action

    def bind_action(self, name: str, key: int) -> None:
        self.clear_binding(key)
        self._key_to_action[_key_index(key)] = name

    def clear_binding(self, key: int) -> None:
        self._key_to_action.pop(_key_index(key), None)

    def clear_all_bindings(self) -> None:
        self._key_to_action.clear()
        self._actions.clear()