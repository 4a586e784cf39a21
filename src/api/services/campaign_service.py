"""
Campaign session service.
"""

import logging
import uuid
from typing import Dict, Optional

from src.combat.battle import BattleSide
from src.combat.outcome import Outcome, PlayerOutcome
from src.core.loadout import Action
from src.core.campaign import Campaign
from src.core.element import Element
from src.core.player import Player

from ..schemas.campaign import (
    BonusOfferSchema,
    CampaignStateSchema,
    CombatantSchema,
    ElementSchema,
    MatchupsResponse,
    OutcomeSchema,
    PayoutSchema,
    PlayerOutcomeSchema,
    RoundResultSchema,
    SummarySchema,
    UpgradesSchema,
)

logger = logging.getLogger(__name__)


class CampaignService:
    """Hosts single-player campaigns in memory, keyed by campaign id."""

    def __init__(self, max_sessions: int = 100):
        self.max_sessions = max_sessions
        self.campaigns: Dict[str, Campaign] = {}

    def create_campaign(self, seed: Optional[int] = None) -> CampaignStateSchema:
        """
        Start a new campaign.

        Args:
            seed: Random seed for reproducible campaigns.

        Returns:
            Initial campaign state.

        Raises:
            ValueError: If the session limit is reached.
        """
        if len(self.campaigns) >= self.max_sessions:
            raise ValueError("Too many active campaigns")

        campaign_id = str(uuid.uuid4())[:8]
        self.campaigns[campaign_id] = Campaign(seed=seed)
        logger.info("Created campaign %s (seed=%s)", campaign_id, seed)
        return self._to_schema(campaign_id)

    def get_campaign(self, campaign_id: str) -> Optional[CampaignStateSchema]:
        """Get campaign state."""
        if campaign_id not in self.campaigns:
            return None
        return self._to_schema(campaign_id)

    def submit_guess(self, campaign_id: str, element_key: str) -> Optional[RoundResultSchema]:
        """
        Submit the player's guess and resolve the round.

        While the player is staggered the forced repeat is thrown instead.

        Returns:
            The round result, or None if the guess was rejected.

        Raises:
            KeyError: If the campaign does not exist.
        """
        campaign = self.campaigns[campaign_id]
        side = campaign.player_side()
        # A staggered player's forced repeat stands in for the submitted guess
        forced = side is not None and side.is_staggered and side.guess is not None
        if not campaign.set_guess(Element.from_key(element_key)) and not forced:
            return None

        outcome = campaign.tick()
        return RoundResultSchema(
            resolved=outcome is not None,
            outcome=self._outcome_to_schema(outcome) if outcome else None,
            state=self._to_schema(campaign_id),
        )

    def select_bonus(self, campaign_id: str, index: int) -> Optional[CampaignStateSchema]:
        """
        Accept an offered bonus.

        Raises:
            KeyError: If the campaign does not exist.
        """
        campaign = self.campaigns[campaign_id]
        if not campaign.select_bonus(index):
            return None
        return self._to_schema(campaign_id)

    def select_evolution(
        self, campaign_id: str, element_key: str
    ) -> Optional[CampaignStateSchema]:
        """
        Accept an offered evolution.

        Raises:
            KeyError: If the campaign does not exist.
        """
        campaign = self.campaigns[campaign_id]
        if not campaign.select_evolution(Element.from_key(element_key)):
            return None
        return self._to_schema(campaign_id)

    def get_matchups(self, campaign_id: str, element_key: str) -> Optional[MatchupsResponse]:
        """
        Payouts of an element against the current opponent's elements.

        Raises:
            KeyError: If the campaign does not exist.
        """
        campaign = self.campaigns[campaign_id]
        if campaign.opponent is None:
            return None

        element = Element.from_key(element_key)
        enemy_elements = campaign.opponent.loadout.sorted_elements()
        payouts = [
            PayoutSchema(
                enemy_element=enemy.key,
                damage_to_me=campaign.table.evaluate(element, enemy).damage_to_me,
                damage_to_enemy=campaign.table.evaluate(element, enemy).damage_to_enemy,
            )
            for enemy in enemy_elements
        ]
        return MatchupsResponse(
            element=element.key,
            payouts=payouts,
            lines=campaign.table.describe_payouts(element, enemy_elements),
        )

    def delete_campaign(self, campaign_id: str) -> bool:
        """Delete campaign. Returns False if it did not exist."""
        existed = self.campaigns.pop(campaign_id, None) is not None
        if existed:
            logger.info("Deleted campaign %s", campaign_id)
        return existed

    # -- Schema conversion -----------------------------------------------------

    def _to_schema(self, campaign_id: str) -> CampaignStateSchema:
        campaign = self.campaigns[campaign_id]

        player_side = None
        enemy_side = None
        if campaign.battle is not None:
            player_side = campaign.battle.side_of(campaign.player)
            enemy_side = campaign.battle.side_of(campaign.opponent)

        upgrades = None
        if campaign.upgrades is not None:
            upgrades = UpgradesSchema(
                bonuses=[
                    BonusOfferSchema(
                        index=i,
                        kind=bonus.kind.value,
                        name=bonus.get_readable_name(),
                        element=element.key,
                        description=bonus.get_description(element),
                    )
                    for i, (bonus, element) in enumerate(campaign.upgrades.bonuses)
                ],
                evolutions=[e.key for e in campaign.upgrades.evolutions],
            )

        summary = None
        result = campaign.summary()
        if result is not None:
            summary = SummarySchema(
                is_victory=result.is_victory,
                round=result.round,
                level=result.level.value,
                message=result.message,
            )

        return CampaignStateSchema(
            campaign_id=campaign_id,
            phase=campaign.phase.value,
            level=campaign.level.value,
            round=campaign.round,
            player=self._combatant_to_schema(campaign.player, player_side),
            enemy=(
                self._combatant_to_schema(campaign.opponent, enemy_side)
                if campaign.opponent is not None
                else None
            ),
            last_outcome=(
                self._outcome_to_schema(campaign.last_outcome)
                if campaign.last_outcome is not None
                else None
            ),
            upgrades=upgrades,
            summary=summary,
        )

    @staticmethod
    def _combatant_to_schema(player: Player, side: Optional[BattleSide]) -> CombatantSchema:
        loadout = player.loadout
        elements = []
        for element in loadout.sorted_elements():
            augmentation = loadout.augmentations.get(element)
            aspect = loadout.enchantments.get(element)
            elements.append(
                ElementSchema(
                    element=element.key,
                    name=str(element),
                    augmentation=augmentation.value if augmentation else None,
                    aspect=aspect.element.key if aspect else None,
                )
            )
        return CombatantSchema(
            name=player.name,
            hp=player.health,
            elements=elements,
            has_combo=side.has_combo if side else False,
            is_staggered=side.is_staggered if side else False,
            pending_guess=side.guess.key if side and side.guess is not None else None,
        )

    @staticmethod
    def _side_to_schema(action: Action, outcome: PlayerOutcome) -> PlayerOutcomeSchema:
        return PlayerOutcomeSchema(
            guess=action.guess.key,
            aspect=action.enchantment.element.key if action.enchantment else None,
            augmentation=action.augmentation.value if action.augmentation else None,
            damage=outcome.damage,
            next_combo=outcome.next_combo,
            next_stagger=outcome.next_stagger,
        )

    def _outcome_to_schema(self, outcome: Outcome) -> OutcomeSchema:
        return OutcomeSchema(
            player=self._side_to_schema(outcome.p1_action, outcome.p1_outcome),
            enemy=self._side_to_schema(outcome.p2_action, outcome.p2_outcome),
        )
