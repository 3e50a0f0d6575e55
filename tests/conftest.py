import os
import sys
import pytest
from unittest.mock import MagicMock, patch

# Ensure game modules can be imported
sys.path.append(os.getcwd())

@pytest.fixture(autouse=True)
def mock_pygame():
    """
    Global mock for pygame to allow headless testing.
    Autoused for all tests so no audio device is ever opened.
    """
    with patch('pygame.init'), \
         patch('pygame.mixer'):

        import pygame
        pygame.mixer.get_init = MagicMock(return_value=None)

        yield

class ScriptedRandom:
    """
    Random source that replays fixed rolls.

    Raises if the code under test rolls more often than scripted.
    """

    def __init__(self, *rolls):
        self.rolls = list(rolls)
        self.calls = 0

    def random(self):
        if not self.rolls:
            raise AssertionError("Unexpected extra random roll")
        self.calls += 1
        return self.rolls.pop(0)

@pytest.fixture
def scripted_rng():
    """Factory: scripted_rng(0.9, 0.1) -> ScriptedRandom."""
    return ScriptedRandom

@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from rpg_engine.core.events import EventBus
    return EventBus()

@pytest.fixture
def player():
    """Fresh level 1 player."""
    from gauntlet.player import Player
    return Player.create("Hero")

@pytest.fixture
def make_enemy():
    """Factory for Mage enemies."""
    from gauntlet.battle.actor import EnemyData, create_combatant_from_enemy

    def _make(name="Dark Mage", hp=50, attack=10, mp=100):
        return create_combatant_from_enemy(
            EnemyData(id=name.lower().replace(" ", "_"), name=name, hp=hp, attack=attack, mp=mp)
        )
    return _make

@pytest.fixture
def enemy(make_enemy):
    return make_enemy()

@pytest.fixture
def console():
    """rich Console writing to a buffer."""
    import io
    from rich.console import Console
    return Console(file=io.StringIO(), width=100, color_system=None, force_terminal=False)

@pytest.fixture
def scripted_input():
    """Factory: scripted_input("1", "2") -> reader callable replaying lines."""
    def _make(*lines):
        remaining = list(lines)

        def reader(prompt=""):
            if not remaining:
                raise EOFError
            return remaining.pop(0)
        return reader
    return _make
