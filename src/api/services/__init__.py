"""API services."""

from .campaign_service import CampaignService

__all__ = [
    "CampaignService",
]
