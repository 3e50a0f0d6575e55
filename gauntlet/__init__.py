"""
Gauntlet RPG

A Warrior fights a gauntlet of Mages in turn-based console battles,
earning XP, levelling up and collecting items along the way.

Quick Start:
    from rpg_engine import GameConfig
    from gauntlet.game import GameApp

    GameApp(GameConfig(seed=7)).run()
"""

__version__ = "0.1.0"
