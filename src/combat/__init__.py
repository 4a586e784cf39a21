"""Battle resolution module.

This module provides the round resolution engine:
- Aspect expansion and payout summing
- Armored, Parry and Combo modifiers
- Stagger forced repeats
- Battle-over detection
"""

# Outcome resolution
from .outcome import (
    Outcome,
    PlayerOutcome,
    raw_payout,
    resolve_outcome,
)

# Battle
from .battle import Battle, BattleResult, BattleSide

__all__ = [
    "Outcome",
    "PlayerOutcome",
    "raw_payout",
    "resolve_outcome",
    "Battle",
    "BattleResult",
    "BattleSide",
]
