"""FastAPI dependencies for injected collaborators.

The storage backend and the default identity are created in the app
lifespan and kept on ``app.state``.
"""

from __future__ import annotations

from fastapi import Depends, Request

from fitpet.pets.service import PetService
from fitpet.storage.base import Storage
from fitpet.workouts.completion import WorkoutCompletionService


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_pet_service(storage: Storage = Depends(get_storage)) -> PetService:
    return PetService(storage)


def get_completion_service(storage: Storage = Depends(get_storage)) -> WorkoutCompletionService:
    return WorkoutCompletionService(storage)


def get_current_user_id(request: Request) -> int:
    """Single hardcoded identity standing in for an authenticated session."""
    return request.app.state.default_user_id
