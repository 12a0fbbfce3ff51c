"""Combat status, experience and gold values."""

from __future__ import annotations

from dataclasses import dataclass

from textrpg.leveldata import DEFAULT_AGILITY, DEFAULT_ATTACK, DEFAULT_DEFENSE

DEFAULT_LOWEST_DAMAGE = 5
INT16_MAX = 0x7FFF


def _int16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


@dataclass(frozen=True)
class Status:
    """Attack, defense and agility of a character."""

    attack: int = DEFAULT_ATTACK
    defense: int = DEFAULT_DEFENSE
    agility: int = DEFAULT_AGILITY

    def __add__(self, other: Status) -> Status:
        if not isinstance(other, Status):
            return NotImplemented
        return Status(
            _int16(self.attack + other.attack),
            _int16(self.defense + other.defense),
            _int16(self.agility + other.agility),
        )

    def calculate_damage(self, other: Status) -> int:
        """Damage this character takes when ``other`` attacks it."""
        damage = other.attack - self.defense
        return damage if damage > 0 else DEFAULT_LOWEST_DAMAGE


@dataclass
class Experience:
    """Experience points and the level they have reached."""

    level: int = 1
    current_exp: int = 0

    def required_for_next_level(self) -> int:
        return 3 + (self.level - 1) * 5

    def add_experience(self, amount: int) -> bool:
        """Add points, levelling up as often as they allow. True if levelled."""
        self.current_exp += amount
        leveled_up = False
        while self.current_exp >= self.required_for_next_level():
            self.current_exp -= self.required_for_next_level()
            self.level += 1
            leveled_up = True
        return leveled_up


@dataclass
class Gold:
    """An amount of gold capped at the 16-bit maximum."""

    amount: int = 10000

    def add_gold(self, amount: int) -> None:
        self.amount = min(self.amount + amount, INT16_MAX)

    def remove_gold(self, amount: int) -> bool:
        """Take ``amount`` away if there is enough; report whether it was taken."""
        if self.amount < amount:
            return False
        self.amount -= amount
        return True