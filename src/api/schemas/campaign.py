"""
Campaign-related API schemas.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List

from src.core.element import Element

from .common import BaseResponse


# === Request Schemas ===


class CreateCampaignRequest(BaseModel):
    """Campaign creation request."""

    seed: Optional[int] = Field(default=None, ge=0)


class ElementKeyRequest(BaseModel):
    """Request naming an element by key, such as "rock"."""

    element: str

    @field_validator("element")
    @classmethod
    def validate_element(cls, value: str) -> str:
        return Element.from_key(value).key


class GuessRequest(ElementKeyRequest):
    """Guess submission request."""


class BonusSelectionRequest(BaseModel):
    """Bonus selection request."""

    index: int = Field(ge=0)


class EvolutionSelectionRequest(ElementKeyRequest):
    """Evolution selection request."""


# === Response Schemas ===


class ElementSchema(BaseModel):
    """Owned element with its modifiers."""

    element: str
    name: str
    augmentation: Optional[str] = None
    aspect: Optional[str] = None


class CombatantSchema(BaseModel):
    """Combatant state schema."""

    name: str
    hp: int
    elements: List[ElementSchema]
    has_combo: bool = False
    is_staggered: bool = False
    pending_guess: Optional[str] = None


class PlayerOutcomeSchema(BaseModel):
    """One side of a resolved round."""

    guess: str
    aspect: Optional[str] = None
    augmentation: Optional[str] = None
    damage: int
    next_combo: bool
    next_stagger: bool


class OutcomeSchema(BaseModel):
    """Resolved round schema."""

    player: PlayerOutcomeSchema
    enemy: PlayerOutcomeSchema


class BonusOfferSchema(BaseModel):
    """Offered bonus schema."""

    index: int
    kind: str
    name: str
    element: str
    description: str


class UpgradesSchema(BaseModel):
    """Reward phase offers."""

    bonuses: List[BonusOfferSchema]
    evolutions: List[str]


class SummarySchema(BaseModel):
    """Terminal campaign result."""

    is_victory: bool
    round: int
    level: str
    message: str


class PayoutSchema(BaseModel):
    """Payout of one element against one enemy element."""

    enemy_element: str
    damage_to_me: int
    damage_to_enemy: int


class MatchupsResponse(BaseModel):
    """Payouts of an element against the current enemy's elements."""

    element: str
    payouts: List[PayoutSchema]
    lines: List[str]


class CampaignStateSchema(BaseModel):
    """Campaign state schema."""

    campaign_id: str
    phase: str
    level: str
    round: int
    player: CombatantSchema
    enemy: Optional[CombatantSchema] = None
    last_outcome: Optional[OutcomeSchema] = None
    upgrades: Optional[UpgradesSchema] = None
    summary: Optional[SummarySchema] = None


class RoundResultSchema(BaseModel):
    """Result of submitting a guess."""

    resolved: bool
    outcome: Optional[OutcomeSchema] = None
    state: CampaignStateSchema


class DeleteCampaignResponse(BaseResponse):
    """Campaign deletion acknowledgement."""

    campaign_id: str
    existed: bool
