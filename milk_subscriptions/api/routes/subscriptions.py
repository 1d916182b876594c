from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from milk_subscriptions.api.dependencies import get_subscription_service
from milk_subscriptions.schemas.subscription import (
    MessageResponse,
    PauseProjectionSchema,
    PauseRequest,
    SubscribeRequest,
    SubscribeResponse,
    SubscriptionSchema,
)
from milk_subscriptions.services.subscription_service import MISSING, SubscriptionService

router = APIRouter()

SUBSCRIPTION_CREATED = "Subscription created successfully."


@router.post(
    "/subscribe",
    status_code=status.HTTP_201_CREATED,
    response_model=SubscribeResponse,
    responses={400: {"model": MessageResponse}},
)
async def subscribe(
    payload: Optional[SubscribeRequest] = None,
    service: SubscriptionService = Depends(get_subscription_service),
):
    payload = payload or SubscribeRequest()
    record = service.subscribe(payload.user_id, payload.plan, payload.date)
    return SubscribeResponse(
        message=SUBSCRIPTION_CREATED,
        subscription=SubscriptionSchema.from_record(record),
    )


@router.get("/subscriptions", response_model=List[SubscriptionSchema])
async def list_subscriptions(service: SubscriptionService = Depends(get_subscription_service)):
    return [SubscriptionSchema.from_record(row) for row in service.list_subscriptions()]


@router.post(
    "/pause",
    response_model=PauseProjectionSchema,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def pause(
    payload: Optional[PauseRequest] = None,
    service: SubscriptionService = Depends(get_subscription_service),
):
    payload = payload or PauseRequest()
    pause_days = payload.pause_days if "pause_days" in payload.model_fields_set else MISSING
    projection = service.compute_pause(payload.user_id, payload.pause_date, pause_days)
    return PauseProjectionSchema.from_projection(projection)
