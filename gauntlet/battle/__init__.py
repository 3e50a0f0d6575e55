"""
Battle module - turn-based combat against a gauntlet of enemies.

Provides:
- Combatants (tagged Warrior / Mage variants)
- Action execution (attack, special move, defend, item)
- Enemy decision policy
- Turn state machine, win/lose conditions and rewards
- Console controller
"""

from gauntlet.battle.actor import (
    Combatant,
    CombatantKind,
    EnemyData,
    ENEMY_ROSTER,
    create_combatant_from_enemy,
    create_enemy_roster,
)
from gauntlet.battle.actions import (
    BattleActionExecutor,
    ActionType,
    ActionResult,
    SpecialMoveData,
    SPECIAL_MOVES,
    ItemData,
    ITEMS,
    special_move_for,
)
from gauntlet.battle.ai import (
    EnemyAction,
    EnemyPolicy,
    PolicyProfile,
    PolicyView,
    POLICY_PROFILES,
    choose_action,
)
from gauntlet.battle.system import (
    BattleSystem,
    BattleState,
    BattleEvent,
    CommandType,
    PlayerCommand,
    BattleRewards,
    TurnReport,
)

__all__ = [
    # Actor
    "Combatant",
    "CombatantKind",
    "EnemyData",
    "ENEMY_ROSTER",
    "create_combatant_from_enemy",
    "create_enemy_roster",
    # Actions
    "BattleActionExecutor",
    "ActionType",
    "ActionResult",
    "SpecialMoveData",
    "SPECIAL_MOVES",
    "ItemData",
    "ITEMS",
    "special_move_for",
    # AI
    "EnemyAction",
    "EnemyPolicy",
    "PolicyProfile",
    "PolicyView",
    "POLICY_PROFILES",
    "choose_action",
    # System
    "BattleSystem",
    "BattleState",
    "BattleEvent",
    "CommandType",
    "PlayerCommand",
    "BattleRewards",
    "TurnReport",
]
