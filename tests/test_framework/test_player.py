from gauntlet.battle.actor import CombatantKind
from gauntlet.components import StatusType
from gauntlet.player import Player

def test_create_defaults():
    player = Player.create()
    assert player.name == "Hero"
    assert player.kind == CombatantKind.WARRIOR
    assert player.current_hp == 100
    assert player.max_hp == 100
    assert player.attack_power == 15
    assert player.level == 1
    assert player.experience.to_next_level == 50
    assert list(player.inventory) == ["Health Potion", "Attack Boost"]
    assert player.mana is None

def test_blank_name_becomes_hero():
    assert Player.create("   ").name == "Hero"
    assert Player.create(" Aria ").name == "Aria"

def test_level_up_at_threshold(player):
    player.health.current = 30
    result = player.gain_experience(50)

    assert result.leveled_up
    assert result.levels_gained == 1
    assert result.new_level == 2
    assert player.level == 2
    assert player.experience.to_next_level == 70
    assert player.max_hp == 120
    assert player.current_hp == 120
    assert player.attack_power == 20
    assert result.messages == [
        "Hero gains 50 XP!",
        "Congratulations! Hero has leveled up to Level 2!",
    ]

def test_gain_without_level_up(player):
    player.health.current = 30
    result = player.gain_experience(20)

    assert not result.leveled_up
    assert result.messages == ["Hero gains 20 XP!"]
    assert player.current_hp == 30

def test_multi_level_gain(player):
    result = player.gain_experience(120)
    assert result.levels_gained == 2
    assert player.max_hp == 140
    assert player.attack_power == 25

def test_reset_keeps_name(player):
    player.name = "Aria"
    player.gain_experience(50)
    player.take_damage(60)
    player.apply_status(StatusType.POISON, 3)
    player.combat.special_cooldown = 2
    player.inventory.clear()

    player.reset()

    assert player.name == "Aria"
    assert player.current_hp == 100
    assert player.max_hp == 100
    assert player.attack_power == 15
    assert player.level == 1
    assert player.special_cooldown == 0
    assert not player.has_status(StatusType.POISON)
    assert list(player.inventory) == ["Health Potion", "Attack Boost"]
