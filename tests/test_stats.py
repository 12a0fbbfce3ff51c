import pytest

from textrpg.leveldata import DEFAULT_ATTACK
from textrpg.stats import DEFAULT_LOWEST_DAMAGE, INT16_MAX, Experience, Gold, Status


def test_status_defaults():
    s = Status()
    assert (s.attack, s.defense, s.agility) == (DEFAULT_ATTACK, 12, 12)


@pytest.mark.parametrize(
    "a, b",
    [(Status(1, 2, 3), Status(4, 5, 6)), (Status(), Status(0, 0, 0)), (Status(-1, 7, 0), Status(1, 1, 1))],
)
def test_status_addition_is_componentwise(a, b):
    total = a + b
    assert total.attack == a.attack + b.attack
    assert total.defense == a.defense + b.defense
    assert total.agility == a.agility + b.agility
    assert a + b == b + a


def test_status_addition_wraps_at_int16():
    total = Status(INT16_MAX, 0, 0) + Status(1, 0, 0)
    assert total.attack == -32768


def test_status_is_immutable():
    s = Status()
    with pytest.raises(AttributeError):
        s.attack = 99
    assert s.attack == DEFAULT_ATTACK


def test_damage_floor_when_defense_wins():
    defender = Status(0, 20, 0)
    attacker = Status(12, 0, 0)
    assert defender.calculate_damage(attacker) == DEFAULT_LOWEST_DAMAGE


def test_damage_floor_when_equal():
    assert Status().calculate_damage(Status()) == DEFAULT_LOWEST_DAMAGE


def test_damage_is_attack_minus_defense():
    defender = Status(0, 12, 0)
    attacker = Status(30, 0, 0)
    assert defender.calculate_damage(attacker) == 18


def test_experience_first_threshold():
    exp = Experience()
    assert exp.required_for_next_level() == 3
    assert exp.add_experience(2) is False
    assert exp.level == 1
    assert exp.add_experience(1) is True
    assert exp.level == 2
    assert exp.current_exp == 0


def test_experience_threshold_rises_with_level():
    exp = Experience()
    before = exp.required_for_next_level()
    exp.add_experience(before)
    assert exp.required_for_next_level() > before


def test_experience_multiple_levels_at_once():
    exp = Experience()
    exp.add_experience(1000)
    assert exp.level > 2
    assert 0 <= exp.current_exp < exp.required_for_next_level()


def test_experience_explicit_level():
    exp = Experience(4)
    assert exp.level == 4
    assert exp.current_exp == 0


def test_gold_default_and_cap():
    gold = Gold()
    assert gold.amount == 10000
    gold.add_gold(INT16_MAX)
    assert gold.amount == INT16_MAX


def test_gold_remove_success_and_failure():
    gold = Gold(50)
    assert gold.remove_gold(60) is False
    assert gold.amount == 50
    assert gold.remove_gold(50) is True
    assert gold.amount == 0