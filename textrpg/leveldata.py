"""Per-level player statistics table."""

from __future__ import annotations

from dataclasses import dataclass

ADDITIONAL_EXPERIENCE_PER_LEVEL = 20
ADDITIONAL_HEALTH_PER_LEVEL = 5
ADDITIONAL_ATTACK_PER_LEVEL = 1
ADDITIONAL_DEFENSE_PER_LEVEL = 1
ADDITIONAL_AGILITY_PER_LEVEL = 1
DEFAULT_ATTACK = 12
DEFAULT_DEFENSE = 12
DEFAULT_AGILITY = 12

DEFAULT_PLAYER_MAX_EXPERIENCE = 100
DEFAULT_CHARACTER_MAX_HEALTH = 100

MAX_LEVEL = 100
_GROWTH_RATE = 1.05


@dataclass(frozen=True)
class LevelProperties:
    """Statistics a player has at one level."""

    max_experience: int
    max_health: int
    attack: int
    defense: int
    agility: int


DEFAULT_LEVEL_PROPERTIES = LevelProperties(
    DEFAULT_PLAYER_MAX_EXPERIENCE,
    DEFAULT_CHARACTER_MAX_HEALTH,
    DEFAULT_ATTACK,
    DEFAULT_DEFENSE,
    DEFAULT_AGILITY,
)


class PlayerDataTable:
    """Table of LevelProperties for levels 1 to MAX_LEVEL."""

    def __init__(self) -> None:
        empty = LevelProperties(0, 0, 0, 0, 0)
        self._levels: list[LevelProperties] = [empty] * MAX_LEVEL

    def initialize_level_data(self) -> None:
        """Fill the table using the growth formulas."""
        self._levels = [
            LevelProperties(
                max_experience=DEFAULT_PLAYER_MAX_EXPERIENCE + i * ADDITIONAL_EXPERIENCE_PER_LEVEL,
                max_health=DEFAULT_CHARACTER_MAX_HEALTH + i * ADDITIONAL_HEALTH_PER_LEVEL,
                attack=int(DEFAULT_ATTACK * _GROWTH_RATE**i),
                defense=int(DEFAULT_DEFENSE * _GROWTH_RATE**i),
                agility=int(DEFAULT_AGILITY * _GROWTH_RATE**i),
            )
            for i in range(MAX_LEVEL)
        ]

    def load_level_data(self, level: int) -> LevelProperties:
        """Return the properties of ``level``; out of range yields the defaults."""
        if not 1 <= level <= MAX_LEVEL:
            print(f"Level must be between 1 and {MAX_LEVEL}.")
            return DEFAULT_LEVEL_PROPERTIES
        return self._levels[level - 1]