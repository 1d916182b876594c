from __future__ import annotations

import logging
import math
from datetime import timezone, tzinfo
from typing import Any, List, Optional

from milk_subscriptions.core.dates import add_calendar_days, add_fixed_days, parse_instant
from milk_subscriptions.core.exceptions import ConflictError, NotFoundError, ValidationError
from milk_subscriptions.models.subscription import (
    PLAN_TERMS,
    PauseProjection,
    Plan,
    Subscription,
)
from milk_subscriptions.services.subscription_store import (
    ALREADY_SUBSCRIBED,
    InMemorySubscriptionStore,
    SubscriptionStoreProtocol,
)

logger = logging.getLogger(__name__)

SUBSCRIBE_FIELDS_REQUIRED = "User ID, plan, and date are required."
INVALID_DATE = "Invalid date format."
INVALID_PLAN = "Invalid plan. Choose Elite or Premium."
PAUSE_FIELDS_REQUIRED = "User ID, pauseDate, and pauseDays are required."
SUBSCRIPTION_NOT_FOUND = "Subscription not found."
INVALID_PAUSE_DATE = "Invalid pauseDate format."
INVALID_PAUSE_DAYS = "PauseDays must be between 1 and 2 days in a week."

MIN_PAUSE_DAYS = 1
MAX_PAUSE_DAYS = 2

# Marks a request field that was not sent at all, as opposed to sent as null.
MISSING: Any = object()


def _plan_from(value: Any) -> Optional[Plan]:
    if not isinstance(value, str):
        return None
    try:
        return Plan(value)
    except ValueError:
        return None


def _pause_days_from(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value) or value < MIN_PAUSE_DAYS or value > MAX_PAUSE_DAYS:
        return None
    return value


class SubscriptionService:
    """Business rules for subscribing, listing and projecting pauses."""

    def __init__(
        self,
        store: SubscriptionStoreProtocol | None = None,
        calendar_tz: tzinfo = timezone.utc,
    ):
        self.store = store if store is not None else InMemorySubscriptionStore()
        self.calendar_tz = calendar_tz

    def subscribe(self, user_id: Any, plan: Any, date: Any) -> Subscription:
        """Create a subscription, checking fields, duplicates, date and plan in that order."""
        if not user_id or not plan or not date:
            logger.warning("Subscribe rejected: missing required fields")
            raise ValidationError(SUBSCRIBE_FIELDS_REQUIRED)

        if self.store.get(user_id) is not None:
            logger.warning(f"Subscribe rejected: user {user_id!r} already subscribed")
            raise ConflictError(ALREADY_SUBSCRIBED)

        start_date = parse_instant(date, self.calendar_tz)
        if start_date is None:
            logger.warning(f"Subscribe rejected: invalid date {date!r}")
            raise ValidationError(INVALID_DATE)

        selected = _plan_from(plan)
        if selected is None:
            logger.warning(f"Subscribe rejected: invalid plan {plan!r}")
            raise ValidationError(INVALID_PLAN)

        terms = PLAN_TERMS[selected]
        try:
            end_date = add_calendar_days(start_date, terms.total_days, self.calendar_tz)
        except OverflowError as exc:
            raise ValidationError(INVALID_DATE) from exc

        subscription = self.store.add(
            Subscription(
                user_id=user_id,
                plan=selected,
                start_date=start_date,
                end_date=end_date,
                delivery_interval=terms.delivery_interval,
            )
        )
        logger.info(f"Subscription created for user {user_id!r} on plan {selected.value}")
        return subscription

    def list_subscriptions(self) -> List[Subscription]:
        return self.store.list_all()

    def compute_pause(self, user_id: Any, pause_date: Any, pause_days: Any) -> PauseProjection:
        """
        Project how pausing shifts the schedule without touching the stored subscription.

        The pause end is a fixed-duration offset from the pause start while the
        new end date and next delivery move by whole calendar days, so a fractional
        pauseDays shifts the pause end exactly but the end date only by its whole part.
        """
        if not user_id or not pause_date or pause_days is MISSING:
            logger.warning("Pause rejected: missing required fields")
            raise ValidationError(PAUSE_FIELDS_REQUIRED)

        subscription = self.store.get(user_id)
        if subscription is None:
            logger.warning(f"Pause rejected: no subscription for user {user_id!r}")
            raise NotFoundError(SUBSCRIPTION_NOT_FOUND)

        pause_start = parse_instant(pause_date, self.calendar_tz)
        if pause_start is None:
            logger.warning(f"Pause rejected: invalid pauseDate {pause_date!r}")
            raise ValidationError(INVALID_PAUSE_DATE)

        days = _pause_days_from(pause_days)
        if days is None:
            logger.warning(f"Pause rejected: pauseDays {pause_days!r} out of range")
            raise ValidationError(INVALID_PAUSE_DAYS)

        try:
            projection = PauseProjection(
                user_id=user_id,
                plan=subscription.plan,
                pause_start_date=pause_start,
                pause_end_date=add_fixed_days(pause_start, days),
                new_end_date=add_calendar_days(
                    subscription.end_date, math.trunc(days), self.calendar_tz
                ),
                next_delivery_date=add_calendar_days(
                    pause_start, subscription.delivery_interval, self.calendar_tz
                ),
            )
        except OverflowError as exc:
            raise ValidationError(INVALID_PAUSE_DATE) from exc

        logger.info(f"Pause of {days} day(s) computed for user {user_id!r}")
        return projection
