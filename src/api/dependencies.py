"""
Dependency injection for API services.
"""

from functools import lru_cache

from .config import settings
from .services.campaign_service import CampaignService


@lru_cache()
def get_campaign_service() -> CampaignService:
    """Get CampaignService singleton."""
    return CampaignService(max_sessions=settings.MAX_SESSIONS)
