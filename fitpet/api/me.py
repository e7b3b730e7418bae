"""Endpoints for the current (default) user."""

from fastapi import APIRouter, Depends

from fitpet.api.dependencies import get_current_user_id, get_pet_service, get_storage
from fitpet.api.errors import to_http_exception
from fitpet.core.errors import FitPetError
from fitpet.domain.models import Pet, User
from fitpet.pets.service import PetService
from fitpet.storage.base import Storage
from fitpet.users import service as user_service

router = APIRouter(prefix="/me", tags=["me"])


@router.get("", response_model=User)
def read_me(user_id: int = Depends(get_current_user_id), storage: Storage = Depends(get_storage)):
    try:
        return user_service.get_user(storage, user_id)
    except FitPetError as e:
        raise to_http_exception(e) from e


@router.get("/pet", response_model=Pet)
def read_my_pet(user_id: int = Depends(get_current_user_id), pets: PetService = Depends(get_pet_service)):
    try:
        return pets.get_pet_for_user(user_id)
    except FitPetError as e:
        raise to_http_exception(e) from e
