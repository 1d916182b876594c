from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from milk_subscriptions.core.dates import to_timestamp
from milk_subscriptions.models.subscription import PauseProjection, Plan, Subscription

UserId = Union[StrictStr, StrictInt]


class SubscribeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[UserId] = Field(default=None, alias="userId")
    plan: Any = None
    date: Any = None


class PauseRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[UserId] = Field(default=None, alias="userId")
    pause_date: Any = Field(default=None, alias="pauseDate")
    pause_days: Any = Field(default=None, alias="pauseDays")


class SubscriptionSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: UserId = Field(alias="userId")
    product: str
    plan: Plan
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    delivery_interval: int = Field(alias="deliveryInterval")

    @classmethod
    def from_record(cls, record: Subscription) -> "SubscriptionSchema":
        return cls(
            user_id=record.user_id,
            product=record.product,
            plan=record.plan,
            start_date=to_timestamp(record.start_date),
            end_date=to_timestamp(record.end_date),
            delivery_interval=record.delivery_interval,
        )


class SubscribeResponse(BaseModel):
    message: str
    subscription: SubscriptionSchema


class PauseProjectionSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: UserId = Field(alias="userId")
    plan: Plan
    pause_start_date: str = Field(alias="pauseStartDate")
    pause_end_date: str = Field(alias="pauseEndDate")
    new_end_date: str = Field(alias="newEndDate")
    next_delivery_date: str = Field(alias="nextDeliveryDate")

    @classmethod
    def from_projection(cls, projection: PauseProjection) -> "PauseProjectionSchema":
        return cls(
            user_id=projection.user_id,
            plan=projection.plan,
            pause_start_date=to_timestamp(projection.pause_start_date),
            pause_end_date=to_timestamp(projection.pause_end_date),
            new_end_date=to_timestamp(projection.new_end_date),
            next_delivery_date=to_timestamp(projection.next_delivery_date),
        )


class MessageResponse(BaseModel):
    message: str
