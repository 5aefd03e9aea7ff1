import pytest

from dungeonui.battle_panel import (
    MAX_LOG_LINES,
    AttackType,
    BattlePanel,
    BattleResult,
    BattleState,
)


class Named:
    def __init__(self, name):
        self.name = name


class Inventory:
    def __init__(self):
        self.weapon = Named("Sword")
        self.spell = Named("Fireball")


class Fighter:
    def __init__(self, name, health):
        self.name = name
        self.level = 1
        self.health = health
        self.max_health = health
        self.inventory = Inventory()
        self.restored = 0

    def is_defeated(self):
        return self.health <= 0

    def restore_health_after_battle(self):
        self.restored += 1
        self.health = self.max_health


class AttackSystem:
    def __init__(self, damage):
        self.damage = damage
        self.calls = []
        self.rewards = []

    def perform_attack(self, attacker, defender, attack_type):
        self.calls.append((attacker.name, defender.name, attack_type))
        defender.health -= self.damage
        return self.damage

    def reward_experience(self, player, monster):
        self.rewards.append((player.name, monster.name))


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randint(self, a, b):
        return self.value


@pytest.fixture
def setup():
    panel = BattlePanel(rng=FixedRng(0))
    hero = Fighter("Hero", 100)
    monster = Fighter("Goblin", 30)
    attacks = AttackSystem(10)
    panel.start_battle(hero, monster, attacks)
    panel.update(1.0)
    return panel, hero, monster, attacks


def test_start_battle_state():
    panel = BattlePanel()
    panel.start_battle(Fighter("Hero", 10), Fighter("Orc", 10), AttackSystem(1))
    assert panel.state is BattleState.ANIMATING_IN
    assert panel.battle_log == ["Battle begins!"]
    assert panel.is_active()
    assert panel.result is BattleResult.ONGOING


def test_start_battle_without_monster_is_ignored():
    panel = BattlePanel()
    panel.start_battle(Fighter("Hero", 10), None, AttackSystem(1))
    assert panel.state is BattleState.HIDDEN
    assert not panel.is_active()


def test_animation_reaches_target(setup):
    panel, *_ = setup
    assert panel.state is BattleState.ACTIVE
    assert panel.bounds == panel.target_bounds


def test_weapon_attack_then_monster_turn(setup):
    panel, hero, monster, attacks = setup
    panel.weapon_attack()
    assert panel.battle_log[-1] == "Hero used Sword! It dealt 10 damage."
    assert panel.is_player_turn is False
    panel.update(0.016)
    assert attacks.calls[-1] == ("Goblin", "Hero", AttackType.WEAPON)
    assert panel.battle_log[-1] == "Goblin used Claw Attack! You lost 10 HP."
    assert panel.is_player_turn and panel.waiting_for_input


def test_spell_attack_and_fire_breath():
    panel = BattlePanel(rng=FixedRng(1))
    hero, monster, attacks = Fighter("Hero", 100), Fighter("Goblin", 30), AttackSystem(5)
    panel.start_battle(hero, monster, attacks)
    panel.update(1.0)
    panel.spell_attack()
    assert panel.battle_log[-1] == "Hero used Fireball! It dealt 5 damage."
    panel.update(0.016)
    assert "Fire Breath" in panel.battle_log[-1]


def test_attack_ignored_while_not_waiting(setup):
    panel, hero, monster, attacks = setup
    panel.weapon_attack()
    panel.weapon_attack()
    assert len(attacks.calls) == 1


def test_defeating_monster_wins_and_finishes(setup):
    panel, hero, monster, attacks = setup
    monster.health = 10
    panel.weapon_attack()
    assert panel.result is BattleResult.PLAYER_WON
    assert panel.state is BattleState.ANIMATING_OUT
    assert attacks.rewards == [("Hero", "Goblin")]
    assert hero.restored == 1
    assert "Goblin is defeated!" in panel.battle_log
    panel.update(1.0)
    assert panel.is_finished()


def test_player_loses(setup):
    panel, hero, monster, attacks = setup
    hero.health = 10
    panel.weapon_attack()
    panel.update(0.016)
    assert panel.result is BattleResult.PLAYER_LOST
    assert panel.battle_log[-1] == "Defeat! Hero was defeated!"
    assert attacks.rewards == []


def test_flee_counts_as_win(setup):
    panel, hero, *_ = setup
    panel.flee()
    assert panel.result is BattleResult.PLAYER_WON
    assert "Hero fled from battle!" in panel.battle_log


def test_log_is_capped():
    panel = BattlePanel()
    for i in range(MAX_LOG_LINES + 3):
        panel.add_log_entry(f"line {i}")
    assert len(panel.battle_log) == MAX_LOG_LINES
    assert panel.battle_log[0] == "line 3"
    panel.clear_log()
    assert panel.battle_log == []