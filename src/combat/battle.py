"""Battle between two players.

Holds the per-battle state of each side (pending guess, Combo and Stagger
markers), resolves rounds once both guesses are in, and detects when the
battle is over.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.combat.outcome import Outcome, resolve_outcome
from src.core.element import Element, ElementTable
from src.core.player import Player

logger = logging.getLogger(__name__)


@dataclass
class BattleSide:
    """
    Per-battle record of one participant.

    Attributes:
        player: The persistent player.
        guess: Element chosen for the pending round, if any.
        has_combo: Combo marker carried into the next round.
        is_staggered: Stagger marker; the pending guess was forced.
    """

    player: Player
    guess: Optional[Element] = None
    has_combo: bool = False
    is_staggered: bool = False


@dataclass(frozen=True)
class BattleResult:
    """Terminal result of a battle. `winner` is None on a draw."""

    winner: Optional[Player] = None

    @property
    def is_draw(self) -> bool:
        return self.winner is None


class Battle:
    """A single battle, created fresh every time the campaign enters a fight."""

    def __init__(self, player_one: Player, player_two: Player, table: ElementTable):
        """
        Initialize a battle.

        Args:
            player_one: First participant (the human in a campaign).
            player_two: Second participant.
            table: Element table shared with the campaign.
        """
        self.table = table
        self.sides = (BattleSide(player_one), BattleSide(player_two))
        self.last_outcome: Optional[Outcome] = None
        self.result: Optional[BattleResult] = None
        self.rounds_played = 0

    @property
    def player_one(self) -> Player:
        return self.sides[0].player

    @property
    def player_two(self) -> Player:
        return self.sides[1].player

    def side_of(self, player: Player) -> BattleSide:
        for side in self.sides:
            if side.player is player:
                return side
        raise ValueError(f"{player.name} is not part of this battle")

    def opponent_of(self, player: Player) -> Player:
        p1, p2 = self.sides
        return p2.player if p1.player is player else p1.player

    @property
    def is_over(self) -> bool:
        return self.result is not None

    def set_guess(self, player: Player, element: Element) -> bool:
        """
        Submit a player's guess for the pending round.

        A guess is accepted at most once per round. A staggered player
        already has their forced guess in place, so a new one is rejected.

        Returns:
            True if the guess was accepted.
        """
        if self.is_over:
            return False
        side = self.side_of(player)
        if side.guess is not None:
            return False
        if not player.loadout.owns(element):
            return False
        side.guess = element
        return True

    def is_ready(self) -> bool:
        """Check if both sides have a guess in."""
        return all(side.guess is not None for side in self.sides)

    def throw_hands(self) -> Optional[Outcome]:
        """
        Resolve the pending round.

        Returns:
            The Outcome, or None if a guess is missing or the battle is over.
        """
        if self.is_over or not self.is_ready():
            return None

        p1, p2 = self.sides
        p1_guess, p2_guess = p1.guess, p2.guess

        outcome = resolve_outcome(
            self.table,
            p1.player.loadout.action_for(p1_guess),
            p1.has_combo,
            p1.is_staggered,
            p2.player.loadout.action_for(p2_guess),
            p2.has_combo,
            p2.is_staggered,
        )

        logger.info(
            "%s vs %s =>  I'm hurt %d & enemy hurt %d",
            outcome.p1_action.guess,
            outcome.p2_action.guess,
            outcome.p1_outcome.damage,
            outcome.p2_outcome.damage,
        )

        for side, guess, player_outcome, other in (
            (p1, p1_guess, outcome.p1_outcome, p2),
            (p2, p2_guess, outcome.p2_outcome, p1),
        ):
            lost = side.player.take_damage(player_outcome.damage)
            if lost > 0:
                other.player.total_damage_dealt += lost
            side.guess = None
            side.has_combo = player_outcome.next_combo
            side.is_staggered = player_outcome.next_stagger
            if player_outcome.next_stagger:
                side.guess = guess

        self.rounds_played += 1
        self.last_outcome = outcome
        return outcome

    def detect_game_over(self) -> Optional[BattleResult]:
        """
        Check both players' health.

        Returns:
            BattleResult once either side is at 0 HP, otherwise None.
        """
        if self.result is not None:
            return self.result

        p1_alive = self.player_one.is_alive
        p2_alive = self.player_two.is_alive
        if p1_alive and p2_alive:
            return None

        if not p1_alive and not p2_alive:
            self.result = BattleResult(winner=None)
        elif not p1_alive:
            self.result = BattleResult(winner=self.player_two)
        else:
            self.result = BattleResult(winner=self.player_one)
        return self.result
