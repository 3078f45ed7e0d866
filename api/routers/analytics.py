"""Analytics endpoints."""

from fastapi import APIRouter, Depends

from models.analytics import AnalyticsOverview
from services.analytics_service import fetch_mock_analytics
from core.config import GatewaySettings
from api.dependencies import get_settings

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/overview", response_model=AnalyticsOverview)
async def overview(settings: GatewaySettings = Depends(get_settings)):
    """Portfolio overview for the analytics page."""
    return await fetch_mock_analytics(settings.mock_analytics_delay)
