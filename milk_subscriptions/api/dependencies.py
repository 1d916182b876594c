"""Shared API dependencies."""
from fastapi import Request

from milk_subscriptions.services.subscription_service import SubscriptionService


def get_subscription_service(request: Request) -> SubscriptionService:
    return request.app.state.subscription_service


__all__ = ["get_subscription_service"]
