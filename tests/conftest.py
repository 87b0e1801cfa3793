from datetime import datetime, timedelta

import pytest

from repositories.state_store import InMemoryStateStore
from services.pet_service import SavePetService

# A Wednesday, so the default Monday-based week spans 10/12..10/18.
NOW = datetime(2026, 10, 14, 12, 0)


class FakeClock:
    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return InMemoryStateStore()


@pytest.fixture
def service(store, clock):
    return SavePetService(store=store, clock=clock)
