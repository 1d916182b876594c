"""
Health API Routes
"""
from fastapi import APIRouter, Depends, Request

from milk_subscriptions.api.dependencies import get_subscription_service
from milk_subscriptions.services.subscription_service import SubscriptionService

router = APIRouter()


@router.get("/health")
async def health_check(
    request: Request,
    service: SubscriptionService = Depends(get_subscription_service),
) -> dict:
    """Liveness plus the size of the in-memory store."""
    return {
        "status": "healthy",
        "subscriptions": len(service.store),
        "environment": request.app.state.settings.app_env,
    }
