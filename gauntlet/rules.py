"""
Game balance constants.
"""

# Items
HEALTH_POTION = "Health Potion"
ATTACK_BOOST = "Attack Boost"
POISON_DART = "Poison Dart"

HEALTH_POTION_HEAL_AMOUNT = 20
ATTACK_BOOST_VALUE = 10
POISON_DART_DURATION = 3
INVENTORY_MAX_ITEMS = 5
STARTING_ITEMS = (HEALTH_POTION, ATTACK_BOOST)

# Status effects
POISON_DAMAGE_PER_TURN = 8
BURN_DAMAGE_PER_TURN = 5

# Defend
DEFENSE_BONUS_FROM_DEFEND = 15
DEFENSIVE_STANCE_BUFF_VALUE = 5

# Special moves
WARRIOR_SPECIAL_COOLDOWN = 2
MAGE_SPECIAL_COOLDOWN = 2
FIREBALL_BONUS_DAMAGE = 15
FIREBALL_BURN_DURATION = 2
MAGE_MANA_COST_FIREBALL = 30
MAGE_MANA_REGEN_PER_TURN = 15
MAX_MANA = 100

# Player progression
DEFAULT_PLAYER_NAME = "Hero"
PLAYER_INITIAL_HEALTH = 100
PLAYER_INITIAL_ATTACK_POWER = 15
PLAYER_INITIAL_XP_TO_LEVEL = 50
XP_GAIN_PER_ENEMY = 20
XP_INCREASE_PER_LEVEL = 20
HEALTH_INCREASE_PER_LEVEL = 20
ATTACK_INCREASE_PER_LEVEL = 5

# Rewards
BONUS_ITEM = POISON_DART
BONUS_ITEM_CHANCE = 0.5

# Persistence
DEFAULT_SAVE_FILE = "savegame.txt"
