"""AI Bot logic for Rock Paper Paradise.

Opponents pick uniformly from the elements they own.
"""

import random
from typing import Optional

from src.combat.battle import Battle
from src.core.element import Element
from src.core.player import Player


class BotAI:
    """AI controller for an opponent player."""

    def __init__(self, player: Player, rng: Optional[random.Random] = None):
        """
        Initialize bot AI.

        Args:
            player: The player this bot controls.
            rng: Shared random source.
        """
        self.player = player
        self.rng = rng if rng is not None else random.Random()

    def choose_guess(self) -> Element:
        """Pick an owned element uniformly."""
        return Element.random_item(self.rng, self.player.loadout.elements)

    def take_turn(self, battle: Battle) -> Optional[Element]:
        """
        Submit a guess if the bot does not have one pending.

        A staggered bot already has its forced guess in place and keeps it.

        Returns:
            The guess submitted this call, or None.
        """
        side = battle.side_of(self.player)
        if battle.is_over or side.guess is not None:
            return None
        guess = self.choose_guess()
        battle.set_guess(self.player, guess)
        return guess
