from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional, Protocol

from milk_subscriptions.core.exceptions import ConflictError
from milk_subscriptions.models.subscription import Subscription

ALREADY_SUBSCRIBED = "User already has an active subscription."


class SubscriptionStoreProtocol(Protocol):
    def get(self, user_id: Any) -> Optional[Subscription]:
        ...

    def add(self, subscription: Subscription) -> Subscription:
        ...

    def list_all(self) -> List[Subscription]:
        ...

    def __len__(self) -> int:
        ...


class InMemorySubscriptionStore:
    """Process-local subscription storage keyed by user id, in insertion order."""

    def __init__(self) -> None:
        self._subscriptions: Dict[Any, Subscription] = {}
        self._lock = threading.Lock()

    def get(self, user_id: Any) -> Optional[Subscription]:
        with self._lock:
            return self._subscriptions.get(user_id)

    def add(self, subscription: Subscription) -> Subscription:
        """Append a subscription; the duplicate check and insert are one critical section."""
        with self._lock:
            if subscription.user_id in self._subscriptions:
                raise ConflictError(ALREADY_SUBSCRIBED)
            self._subscriptions[subscription.user_id] = subscription
        return subscription

    def list_all(self) -> List[Subscription]:
        with self._lock:
            return list(self._subscriptions.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscriptions)
