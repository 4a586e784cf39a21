# Core game modules
from .constants import (
    PLAYER_MAX_HEALTH,
    ENEMY_MAX_HEALTH,
    BONUS_ODDS,
    BONUS_ROLL_RANGE,
    BONUS_OFFERS,
    EVOLUTION_OFFERS,
    LEVEL_ELEMENTS,
    get_bonus_key,
)

from .element import Element, Payout, ElementTable
from .loadout import Action, Aspect, Augmentation, ElementNotOwnedError, Loadout
from .player import Player
from .bonus import Bonus, BonusKind, RewardGenerator, Upgrades
from .probability import ProbabilityCalculator

__all__ = [
    # Constants
    "PLAYER_MAX_HEALTH",
    "ENEMY_MAX_HEALTH",
    "BONUS_ODDS",
    "BONUS_ROLL_RANGE",
    "BONUS_OFFERS",
    "EVOLUTION_OFFERS",
    "LEVEL_ELEMENTS",
    "get_bonus_key",
    # Element Table
    "Element",
    "Payout",
    "ElementTable",
    # Loadout
    "Action",
    "Aspect",
    "Augmentation",
    "ElementNotOwnedError",
    "Loadout",
    "Player",
    # Rewards
    "Bonus",
    "BonusKind",
    "RewardGenerator",
    "Upgrades",
    "ProbabilityCalculator",
]
