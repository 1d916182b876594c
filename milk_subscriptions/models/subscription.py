"""Subscription records and the fixed plan catalog."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

PRODUCT = "Milk"


class Plan(str, Enum):
    ELITE = "Elite"
    PREMIUM = "Premium"


@dataclass(frozen=True)
class PlanTerms:
    total_days: int
    delivery_interval: int


PLAN_TERMS: dict[Plan, PlanTerms] = {
    Plan.ELITE: PlanTerms(total_days=24, delivery_interval=2),
    Plan.PREMIUM: PlanTerms(total_days=48, delivery_interval=2),
}


@dataclass
class Subscription:
    user_id: Any
    plan: Plan
    start_date: datetime
    end_date: datetime
    delivery_interval: int
    product: str = PRODUCT


@dataclass
class PauseProjection:
    user_id: Any
    plan: Plan
    pause_start_date: datetime
    pause_end_date: datetime
    new_end_date: datetime
    next_delivery_date: datetime
