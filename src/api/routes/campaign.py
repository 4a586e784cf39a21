"""
Campaign API routes.
"""

from fastapi import APIRouter, HTTPException, Depends

from ..schemas.campaign import (
    BonusSelectionRequest,
    CampaignStateSchema,
    CreateCampaignRequest,
    DeleteCampaignResponse,
    EvolutionSelectionRequest,
    GuessRequest,
    MatchupsResponse,
    RoundResultSchema,
)
from ..services.campaign_service import CampaignService
from ..dependencies import get_campaign_service

router = APIRouter()


def _require_campaign(service: CampaignService, campaign_id: str) -> None:
    if campaign_id not in service.campaigns:
        raise HTTPException(status_code=404, detail="Campaign not found")


@router.post("/create", response_model=CampaignStateSchema)
async def create_campaign(
    request: CreateCampaignRequest,
    service: CampaignService = Depends(get_campaign_service),
):
    """Create a new campaign."""
    try:
        return service.create_campaign(request.seed)
    except ValueError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/{campaign_id}", response_model=CampaignStateSchema)
async def get_campaign(
    campaign_id: str,
    service: CampaignService = Depends(get_campaign_service),
):
    """Get campaign state."""
    campaign = service.get_campaign(campaign_id)
    if campaign is None:
        raise HTTPException(status_code=404, detail="Campaign not found")
    return campaign


@router.post("/{campaign_id}/guess", response_model=RoundResultSchema)
async def submit_guess(
    campaign_id: str,
    request: GuessRequest,
    service: CampaignService = Depends(get_campaign_service),
):
    """Throw an element for the current round."""
    _require_campaign(service, campaign_id)
    result = service.submit_guess(campaign_id, request.element)
    if result is None:
        raise HTTPException(status_code=400, detail="Guess not accepted")
    return result


@router.post("/{campaign_id}/bonus", response_model=CampaignStateSchema)
async def select_bonus(
    campaign_id: str,
    request: BonusSelectionRequest,
    service: CampaignService = Depends(get_campaign_service),
):
    """Accept an offered bonus."""
    _require_campaign(service, campaign_id)
    state = service.select_bonus(campaign_id, request.index)
    if state is None:
        raise HTTPException(status_code=400, detail="Bonus not available")
    return state


@router.post("/{campaign_id}/evolution", response_model=CampaignStateSchema)
async def select_evolution(
    campaign_id: str,
    request: EvolutionSelectionRequest,
    service: CampaignService = Depends(get_campaign_service),
):
    """Accept an offered evolution."""
    _require_campaign(service, campaign_id)
    state = service.select_evolution(campaign_id, request.element)
    if state is None:
        raise HTTPException(status_code=400, detail="Evolution not available")
    return state


@router.get("/{campaign_id}/matchups/{element}", response_model=MatchupsResponse)
async def get_matchups(
    campaign_id: str,
    element: str,
    service: CampaignService = Depends(get_campaign_service),
):
    """Get payouts of an element against the current enemy."""
    _require_campaign(service, campaign_id)
    try:
        matchups = service.get_matchups(campaign_id, element)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if matchups is None:
        raise HTTPException(status_code=400, detail="No opponent")
    return matchups


@router.delete("/{campaign_id}", response_model=DeleteCampaignResponse)
async def delete_campaign(
    campaign_id: str,
    service: CampaignService = Depends(get_campaign_service),
):
    """Delete campaign."""
    existed = service.delete_campaign(campaign_id)
    return DeleteCampaignResponse(
        message="Campaign deleted" if existed else "Campaign not found",
        campaign_id=campaign_id,
        existed=existed,
    )
