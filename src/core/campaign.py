"""Campaign for Rock Paper Paradise.

Drives a sequence of battles across increasing levels:

    IN_GAME --won, below max level--> PROVIDING_BONUS --choice--> IN_GAME
    IN_GAME --won at max level------> VICTORY
    IN_GAME --lost or draw----------> GAME_OVER

VICTORY and GAME_OVER are terminal; a retry starts a fresh campaign.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.combat.battle import Battle, BattleResult, BattleSide
from src.combat.outcome import Outcome
from src.core.bonus import RewardGenerator, Upgrades
from src.core.constants import LEVEL_ELEMENTS, STARTING_ROUND
from src.core.element import Element, ElementTable
from src.core.loadout import Loadout
from src.core.player import Player
from src.game.bot_ai import BotAI

logger = logging.getLogger(__name__)


class Level(Enum):
    """Difficulty tiers; the tier sets the opponent's element pool size."""

    THREE = "three"
    FOUR = "four"
    FIVE = "five"
    SIX = "six"
    SEVEN = "seven"

    def __str__(self) -> str:
        return self.value.capitalize()

    def num_elements(self) -> int:
        return LEVEL_ELEMENTS[self.value]

    @property
    def is_max(self) -> bool:
        return self is Level.SEVEN

    def increment(self) -> "Level":
        """Next tier; SEVEN wraps around to THREE."""
        tiers = list(Level)
        return tiers[(tiers.index(self) + 1) % len(tiers)]


class Phase(Enum):
    """Campaign phases."""

    IN_GAME = "in_game"
    PROVIDING_BONUS = "providing_bonus"
    GAME_OVER = "game_over"
    VICTORY = "victory"

    @property
    def is_terminal(self) -> bool:
        return self in (Phase.GAME_OVER, Phase.VICTORY)


@dataclass(frozen=True)
class CampaignSummary:
    """Terminal result shown on the game over screen."""

    is_victory: bool
    round: int
    level: Level

    @property
    def message(self) -> str:
        if self.is_victory:
            return f"You win! You defeated the game in {self.round} battles."
        return f"Game over. You reached round {self.round} at level {self.level}."


class Campaign:
    """Campaign state machine wrapping a sequence of battles."""

    def __init__(
        self,
        player: Optional[Player] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        table: Optional[ElementTable] = None,
    ):
        """
        Initialize a campaign and spawn its first battle.

        Args:
            player: The human player. A fresh one is created when omitted.
            seed: Random seed for reproducible results.
            rng: Shared random source; takes precedence over `seed`.
            table: Starting element table; the default table when omitted.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.player = player or Player.human()
        self.table = table or ElementTable()
        self.level = Level.THREE
        self.round = STARTING_ROUND
        self.rewards = RewardGenerator(self.rng)

        self.phase = Phase.IN_GAME
        self.battle: Optional[Battle] = None
        self.opponent: Optional[Player] = None
        self.bot: Optional[BotAI] = None
        self.upgrades: Optional[Upgrades] = None
        self.last_outcome: Optional[Outcome] = None

        self._enter_phase(Phase.IN_GAME)

    # -- Phase transitions ---------------------------------------------------

    def _enter_phase(self, phase: Phase) -> None:
        logger.info(
            "Campaign phase %s (level %s, round %d)", phase.value, self.level, self.round
        )
        self.phase = phase
        if phase is Phase.IN_GAME:
            self._spawn_battle()
        elif phase is Phase.PROVIDING_BONUS:
            self.upgrades = self.rewards.generate_upgrades(self.player.loadout)
        else:
            self.upgrades = None

    def _spawn_battle(self) -> None:
        enemy_elements = Element.random_set(self.rng, self.level.num_elements())
        self.opponent = Player.opponent(Loadout.from_set(enemy_elements))
        self.bot = BotAI(self.opponent, self.rng)
        self.battle = Battle(self.player, self.opponent, self.table)
        self.upgrades = None

    def handle_battle_over(self, result: BattleResult) -> Phase:
        """
        Move to the next phase after a battle ends.

        Args:
            result: The finished battle's result.

        Returns:
            The new phase.
        """
        if self.phase is not Phase.IN_GAME:
            return self.phase

        if result.is_draw or result.winner is not self.player:
            next_phase = Phase.GAME_OVER
        elif self.level.is_max:
            next_phase = Phase.VICTORY
        else:
            next_phase = Phase.PROVIDING_BONUS
            self.round += 1

        self.battle = None
        self._enter_phase(next_phase)
        return next_phase

    # -- Battle input ----------------------------------------------------------

    def set_guess(self, element: Element) -> bool:
        """
        Submit the human player's guess.

        Returns:
            True if accepted; False outside a battle, while a guess is pending,
            or for an unowned element.
        """
        if self.phase is not Phase.IN_GAME or self.battle is None:
            return False
        return self.battle.set_guess(self.player, element)

    def make_enemy_guesses(self) -> None:
        if self.phase is Phase.IN_GAME and self.battle is not None and self.bot is not None:
            self.bot.take_turn(self.battle)

    def tick(self) -> Optional[Outcome]:
        """
        Advance the campaign one step.

        Gives the opponent a guess, resolves the round if both guesses are
        in, and handles the end of the battle.

        Returns:
            The round's Outcome, or None if no round was resolved.
        """
        if self.phase is not Phase.IN_GAME or self.battle is None:
            return None

        self.make_enemy_guesses()
        outcome = self.battle.throw_hands()
        if outcome is None:
            return None

        self.last_outcome = outcome
        result = self.battle.detect_game_over()
        if result is not None:
            self.handle_battle_over(result)
        return outcome

    def play_round(self, element: Element) -> Optional[Outcome]:
        """Submit a guess and resolve the round."""
        self.set_guess(element)
        return self.tick()

    # -- Reward input ----------------------------------------------------------

    def select_bonus(self, index: int) -> bool:
        """
        Accept one of the offered bonuses.

        Args:
            index: Position in `upgrades.bonuses`.

        Returns:
            True if applied and the campaign returned to battle.
        """
        if self.phase is not Phase.PROVIDING_BONUS or self.upgrades is None:
            return False
        if index < 0 or index >= len(self.upgrades.bonuses):
            return False

        bonus, element = self.upgrades.bonuses[index]
        logger.info("Bonus selected: %s on %s", bonus.get_readable_name(), element)
        bonus.update_game(self.table, self.player.loadout, element)
        self._enter_phase(Phase.IN_GAME)
        return True

    def select_evolution(self, element: Element) -> bool:
        """
        Accept one of the offered evolutions and advance the level.

        Returns:
            True if applied and the campaign returned to battle.
        """
        if self.phase is not Phase.PROVIDING_BONUS or self.upgrades is None:
            return False
        if element not in self.upgrades.evolutions:
            return False

        logger.info("Evolution selected: %s", element)
        self.player.loadout.insert(element)
        self.level = self.level.increment()
        self._enter_phase(Phase.IN_GAME)
        return True

    # -- Queries -----------------------------------------------------------------

    def player_side(self) -> Optional[BattleSide]:
        """The human player's record in the current battle, if any."""
        if self.battle is None:
            return None
        return self.battle.side_of(self.player)

    @property
    def is_over(self) -> bool:
        return self.phase.is_terminal

    def summary(self) -> Optional[CampaignSummary]:
        """Terminal result, or None while the campaign is running."""
        if not self.phase.is_terminal:
            return None
        return CampaignSummary(
            is_victory=self.phase is Phase.VICTORY,
            round=self.round,
            level=self.level,
        )
