import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault('APP_ENV', 'test')
os.environ.setdefault('CALENDAR_TIMEZONE', 'UTC')

from milk_subscriptions.main import create_app  # noqa: E402
from milk_subscriptions.services.subscription_service import SubscriptionService  # noqa: E402
from milk_subscriptions.services.subscription_store import InMemorySubscriptionStore  # noqa: E402


@pytest.fixture
def store():
    return InMemorySubscriptionStore()


@pytest.fixture
def service(store):
    return SubscriptionService(store)


@pytest.fixture
def client(service):
    with TestClient(create_app(service)) as test_client:
        yield test_client
