"""Pet endpoints: creation, care actions, generic patch and mood."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fitpet.api.dependencies import get_pet_service
from fitpet.api.errors import to_http_exception
from fitpet.api.schemas import CreatePetRequest, MoodResponse, PetPatchRequest
from fitpet.core.errors import FitPetError
from fitpet.domain.models import Pet
from fitpet.pets.attributes import CareAction
from fitpet.pets.mood import MOTIVATIONAL_MESSAGES, WORKOUT_COMPLETE_MESSAGES
from fitpet.pets.service import PetService

router = APIRouter(prefix="/pets", tags=["pets"])


@router.post("", response_model=Pet, status_code=201)
def create_pet(body: CreatePetRequest, pets: PetService = Depends(get_pet_service)):
    try:
        return pets.create_pet(body.to_new_pet())
    except FitPetError as e:
        raise to_http_exception(e) from e


@router.get("/{pet_id}", response_model=Pet)
def read_pet(pet_id: int, pets: PetService = Depends(get_pet_service)):
    try:
        return pets.get_pet(pet_id)
    except FitPetError as e:
        raise to_http_exception(e) from e


@router.patch("/{pet_id}", response_model=Pet)
def patch_pet(pet_id: int, body: PetPatchRequest, pets: PetService = Depends(get_pet_service)):
    try:
        return pets.update_pet(pet_id, body.to_update())
    except FitPetError as e:
        raise to_http_exception(e) from e


def _care(pets: PetService, pet_id: int, action: CareAction) -> Pet:
    try:
        return pets.care(pet_id, action)
    except FitPetError as e:
        raise to_http_exception(e) from e


@router.post("/{pet_id}/feed", response_model=Pet)
def feed_pet(pet_id: int, pets: PetService = Depends(get_pet_service)):
    return _care(pets, pet_id, CareAction.FEED)


@router.post("/{pet_id}/play", response_model=Pet)
def play_with_pet(pet_id: int, pets: PetService = Depends(get_pet_service)):
    return _care(pets, pet_id, CareAction.PLAY)


@router.post("/{pet_id}/groom", response_model=Pet)
def groom_pet(pet_id: int, pets: PetService = Depends(get_pet_service)):
    return _care(pets, pet_id, CareAction.GROOM)


@router.get("/{pet_id}/mood", response_model=MoodResponse)
def read_pet_mood(pet_id: int, pets: PetService = Depends(get_pet_service)):
    try:
        reading = pets.mood(pet_id)
    except FitPetError as e:
        raise to_http_exception(e) from e

    return MoodResponse(
        mood=reading.mood.value,
        message=reading.message,
        state=reading.state.value,
        motivational_messages=MOTIVATIONAL_MESSAGES[reading.state],
        workout_complete_messages=WORKOUT_COMPLETE_MESSAGES[reading.state],
    )
