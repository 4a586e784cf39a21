"""Rock Paper Paradise Game Constants."""

from typing import Final

# =============================================================================
# HEALTH
# =============================================================================
# The human player's HP carries over between battles; every opponent is
# spawned fresh with ENEMY_MAX_HEALTH.
PLAYER_MAX_HEALTH: Final[int] = 25
ENEMY_MAX_HEALTH: Final[int] = 5

# =============================================================================
# ELEMENT TABLE PAYOUTS
# =============================================================================
# Format: (damage_to_me, damage_to_enemy)
WIN_PAYOUT: Final[tuple[int, int]] = (0, 1)
LOSS_PAYOUT: Final[tuple[int, int]] = (1, 0)
DRAW_PAYOUT: Final[tuple[int, int]] = (0, 0)

# Number of elements following an element in the cycle that it loses to
LOSING_SPAN: Final[int] = 3

# =============================================================================
# BONUS ODDS
# =============================================================================
# A single roll in [0, BONUS_ROLL_RANGE) picks the bonus kind.
# Format: (exclusive upper bound, bonus key)
BONUS_ROLL_RANGE: Final[int] = 100
BONUS_ODDS: Final[list[tuple[int, str]]] = [
    (45, "attack_plus"),
    (60, "defense_plus"),
    (65, "augment_armored"),
    (70, "augment_combo"),
    (75, "augment_parry"),
    (90, "enchant"),
    (100, "double_down"),
]

# Bonus deltas, format: (damage_to_me, damage_to_enemy)
ATTACK_PLUS_DELTA: Final[tuple[int, int]] = (0, 1)
DEFENSE_PLUS_DELTA: Final[tuple[int, int]] = (-1, 0)
DOUBLE_DOWN_FACTOR: Final[int] = 2

# =============================================================================
# REWARD PHASE
# =============================================================================
BONUS_OFFERS: Final[int] = 3
EVOLUTION_OFFERS: Final[int] = 2

# =============================================================================
# LEVELS
# =============================================================================
# Opponent element pool size per level tier
LEVEL_ELEMENTS: Final[dict[str, int]] = {
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
}

STARTING_ROUND: Final[int] = 1


def get_bonus_key(roll: int) -> str:
    """
    Map a roll in [0, BONUS_ROLL_RANGE) to its bonus key.

    Args:
        roll: The uniform roll.

    Returns:
        Bonus key from BONUS_ODDS.
    """
    if roll < 0 or roll >= BONUS_ROLL_RANGE:
        raise ValueError(f"bonus roll out of range: {roll}")
    for upper, key in BONUS_ODDS:
        if roll < upper:
            return key
    return BONUS_ODDS[-1][1]
