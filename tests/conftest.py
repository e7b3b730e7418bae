"""Root conftest for all tests.

Storage-backed fixtures are parametrized so every test that uses them
runs against both the in-memory and the SQLAlchemy backend.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from fitpet.core.settings import Settings
from fitpet.domain.models import NewUser, NewWorkout, Pet, PetType, User, Workout
from fitpet.main import create_app
from fitpet.storage import MemStorage, SqlStorage, Storage
from fitpet.storage.seed import initialize_storage


@pytest.fixture
def settings() -> Settings:
    return Settings().model_copy(update={"storage_backend": "memory", "seed_sample_data": True})


@pytest.fixture(params=["memory", "sql"])
def storage(request: pytest.FixtureRequest) -> Iterator[Storage]:
    """Empty storage, once per backend."""
    if request.param == "memory":
        yield MemStorage()
        return

    sql_storage = SqlStorage("sqlite://")
    try:
        yield sql_storage
    finally:
        sql_storage.dispose()


@pytest.fixture
def default_user(storage: Storage, settings: Settings) -> User:
    """Seeded store: sample workouts 1-3, user 1 and pet 1."""
    return initialize_storage(storage, settings)


@pytest.fixture
def bare_user(storage: Storage) -> User:
    """A user without a pet."""
    return storage.create_user(NewUser(username="no-pet"))


@pytest.fixture
def cardio(storage: Storage) -> Workout:
    return storage.create_workout(
        NewWorkout(
            name="Test Cardio",
            description="Cardio for tests",
            duration=20,
            calories=120,
            difficulty="Moderate",
            type="Cardio",
        )
    )


@pytest.fixture
def morning() -> datetime:
    return datetime(2024, 1, 15, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def client(storage: Storage, settings: Settings) -> Iterator[TestClient]:
    """TestClient over a seeded app."""
    app = create_app(settings=settings, storage=storage)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_pet():
    """Factory for detached pet records with mid-range attributes."""
    epoch = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _make(**overrides) -> Pet:
        fields = {
            "id": 1,
            "user_id": 1,
            "name": "Buddy",
            "type": PetType.CAT,
            "health": 50,
            "hunger": 50,
            "happiness": 50,
            "level": 1,
            "xp": 0,
            "last_fed": epoch,
            "last_played": epoch,
            "last_groomed": epoch,
        }
        fields.update(overrides)
        return Pet(**fields)

    return _make
