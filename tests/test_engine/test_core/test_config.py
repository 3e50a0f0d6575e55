import logging
from pathlib import Path
from rpg_engine.config import GameConfig
from rpg_engine.logging_setup import configure_logging

def test_defaults():
    config = GameConfig()
    assert config.save_path == Path("savegame.txt")
    assert config.seed is None
    assert config.action_delay == 1.0
    assert config.sound_enabled
    assert config.log_level == "WARNING"
    assert config.log_file is None

def test_normalization():
    config = GameConfig(action_delay=-3, log_level="debug", log_file="game.log")
    assert config.action_delay == 0.0
    assert config.log_level == "DEBUG"
    assert config.log_file == Path("game.log")
    assert "seed=None" in repr(config)

def test_configure_logging_to_file(tmp_path):
    log_file = tmp_path / "game.log"
    configure_logging("info", log_file)

    logging.getLogger("gauntlet.test").info("hello log")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "hello log" in log_file.read_text(encoding="utf-8")
    assert logging.getLogger().level == logging.INFO

    configure_logging("WARNING")

def test_configure_logging_unknown_level_falls_back():
    configure_logging("LOUD")
    assert logging.getLogger().level == logging.WARNING
