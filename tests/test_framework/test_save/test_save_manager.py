import pytest
from gauntlet.components import StatusType
from gauntlet.player import Player
from gauntlet.save.manager import PlayerSaveData, SaveEvent, SaveManager

def write_save(path, *lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")

@pytest.fixture
def save_path(tmp_path):
    return tmp_path / "savegame.txt"

@pytest.fixture
def seasoned_player():
    player = Player.create("Sir Robin of Camelot")
    player.gain_experience(60)
    player.take_damage(30)
    player.inventory.items = ["Health Potion", "Poison Dart"]
    return player

def test_save_file_layout(save_path, seasoned_player):
    assert SaveManager(save_path).save(seasoned_player)
    assert save_path.read_text(encoding="utf-8").splitlines() == [
        "Sir Robin of Camelot",
        "90",
        "120",
        "20",
        "2",
        "10",
        "70",
        "2",
        "Health Potion",
        "Poison Dart",
    ]

def test_save_and_load(save_path, seasoned_player):
    manager = SaveManager(save_path)
    manager.save(seasoned_player)

    loaded = Player.create("Somebody Else")
    loaded.apply_status(StatusType.BURN, 2)
    loaded.combat.special_cooldown = 2
    loaded.defend()

    assert manager.load(loaded)
    assert manager.last_error is None
    assert loaded.name == "Sir Robin of Camelot"
    assert loaded.current_hp == 90
    assert loaded.max_hp == 120
    assert loaded.attack_power == 20
    assert loaded.level == 2
    assert loaded.experience.current == 10
    assert loaded.experience.to_next_level == 70
    assert list(loaded.inventory) == ["Health Potion", "Poison Dart"]
    # Battle state starts clean
    assert loaded.combat.status_effects == {}
    assert loaded.special_cooldown == 0
    assert loaded.get_defense() == 0

def test_missing_file_falls_back_to_new_player(save_path, player):
    player.gain_experience(50)
    manager = SaveManager(save_path)

    assert not save_path.exists()
    assert not manager.load(player)
    assert manager.last_error == "No save file found."
    assert player.level == 1

@pytest.mark.parametrize("lines,error", [
    (("Hero", "-5", "100", "15", "1", "0", "50", "0"), "Invalid values in save file."),
    (("Hero", "100", "0", "15", "1", "0", "50", "0"), "Invalid values in save file."),
    (("Hero", "100", "100", "15", "1", "-1", "50", "0"), "Invalid values in save file."),
    (("Hero", "100", "100", "15", "0", "0", "50", "0"), "Invalid values in save file."),
    (("", "100", "100", "15", "1", "0", "50", "0"), "Invalid values in save file."),
    (("Hero", "lots", "100", "15", "1", "0", "50", "0"), "Invalid save file format."),
    (("Hero", "100", "100"), "Invalid save file format."),
    (("Hero", "100", "100", "15", "1", "0", "50", "2", "Health Potion"), "Invalid item in save file."),
    (("Hero", "100", "100", "15", "1", "0", "50", "2", "Health Potion", "  "), "Invalid item in save file."),
    (("Hero", "100", "100", "15", "1", "0", "50", "-1"), "Invalid item in save file."),
])
def test_invalid_save_falls_back_to_reset(save_path, lines, error):
    write_save(save_path, *lines)
    player = Player.create("Keeper")
    player.gain_experience(50)
    player.inventory.clear()

    manager = SaveManager(save_path)
    assert not manager.load(player)
    assert manager.last_error == error

    assert player.name == "Keeper"
    assert player.current_hp == 100
    assert player.attack_power == 15
    assert player.level == 1
    assert list(player.inventory) == ["Health Potion", "Attack Boost"]

def test_overfull_inventory_is_truncated(save_path, player):
    write_save(save_path, "Hero", "100", "100", "15", "1", "0", "50", "6", *["Health Potion"] * 6)
    assert SaveManager(save_path).load(player)
    assert len(player.inventory) == 5

def test_unknown_items_are_kept(save_path, player, caplog):
    write_save(save_path, "Hero", "100", "100", "15", "1", "0", "50", "1", "Rusty Key")
    assert SaveManager(save_path).load(player)
    assert list(player.inventory) == ["Rusty Key"]
    assert "Unknown item" in caplog.text

def test_health_above_max_is_clamped(save_path, player):
    write_save(save_path, "Hero", "150", "100", "15", "1", "0", "50", "0")
    assert SaveManager(save_path).load(player)
    assert player.current_hp == 100

def test_save_failure_is_reported(tmp_path, player, event_bus):
    failures = []
    event_bus.subscribe(SaveEvent.SAVE_FAILED, lambda e: failures.append(e["error"]), weak=False)

    # A directory cannot be written as a file
    manager = SaveManager(tmp_path, event_bus=event_bus)
    assert not manager.save(player)
    assert manager.last_error.startswith("Unable to open save file")
    assert len(failures) == 1

def test_events(save_path, player, event_bus):
    seen = []
    for event_type in SaveEvent:
        event_bus.subscribe(event_type, lambda e: seen.append(e.type), weak=False)

    manager = SaveManager(save_path, event_bus=event_bus)
    manager.load(player)
    manager.save(player)
    manager.load(player)

    assert seen == [SaveEvent.LOAD_FAILED, SaveEvent.SAVE_COMPLETED, SaveEvent.LOAD_COMPLETED]

def test_save_data_from_lines_round_trip():
    data = PlayerSaveData(
        name="Hero",
        health=50,
        max_health=100,
        attack_power=15,
        level=1,
        experience=20,
        experience_to_next_level=50,
        items=["Attack Boost"],
    )
    assert PlayerSaveData.from_lines(data.to_lines()) == data
