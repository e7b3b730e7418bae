"""User endpoints: accounts, stats, streak, assignments and daily progress."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Response
from loguru import logger

from fitpet.api.dependencies import get_pet_service, get_storage
from fitpet.api.errors import to_http_exception
from fitpet.api.schemas import CreateUserRequest, ScheduleWorkoutRequest, StatsUpdateRequest, StreakUpdateRequest
from fitpet.core.errors import FitPetError
from fitpet.core.time import utc_now
from fitpet.domain.models import NewUser, Pet, User, UserProgress, UserWorkout, UserWorkoutWithDetails
from fitpet.pets.service import PetService
from fitpet.storage.base import Storage, iter_user_workouts_with_details
from fitpet.users import service as user_service
from fitpet.workouts.progress import daily_progress
from fitpet.workouts.scheduling import schedule_daily_workouts, schedule_workout
from fitpet.workouts.stats import update_user_stats, update_user_streak

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=User, status_code=201)
def create_user(body: CreateUserRequest, storage: Storage = Depends(get_storage)):
    try:
        return user_service.create_user(storage, NewUser(username=body.username))
    except FitPetError as e:
        raise to_http_exception(e) from e


@router.get("/{user_id}", response_model=User)
def read_user(user_id: int, storage: Storage = Depends(get_storage)):
    try:
        return user_service.get_user(storage, user_id)
    except FitPetError as e:
        raise to_http_exception(e) from e


@router.post("/{user_id}/stats", response_model=User)
def add_user_stats(user_id: int, body: StatsUpdateRequest, storage: Storage = Depends(get_storage)):
    """Add to the user's cumulative calories, active minutes and completed workouts."""
    try:
        return update_user_stats(
            storage,
            user_id,
            body.calories_burned,
            body.active_minutes,
            body.completed_workouts,
        )
    except FitPetError as e:
        raise to_http_exception(e) from e


@router.put("/{user_id}/streak", response_model=User)
def set_user_streak(user_id: int, body: StreakUpdateRequest, storage: Storage = Depends(get_storage)):
    try:
        return update_user_streak(storage, user_id, body.streak)
    except FitPetError as e:
        raise to_http_exception(e) from e


@router.get("/{user_id}/pet", response_model=Pet)
def read_user_pet(user_id: int, pets: PetService = Depends(get_pet_service)):
    try:
        return pets.get_pet_for_user(user_id)
    except FitPetError as e:
        raise to_http_exception(e) from e


@router.get("/{user_id}/workouts", response_model=list[UserWorkoutWithDetails])
def list_user_workouts(user_id: int, storage: Storage = Depends(get_storage)):
    return list(iter_user_workouts_with_details(storage, user_id))


@router.post("/{user_id}/workouts", response_model=UserWorkout, status_code=201)
def assign_workout(
    user_id: int,
    body: ScheduleWorkoutRequest,
    response: Response,
    storage: Storage = Depends(get_storage),
):
    """Schedule a workout for a day.

    Returns 201 with the new assignment, or 200 with the existing one when
    the same workout is already scheduled for that calendar day.
    """
    try:
        result = schedule_workout(storage, user_id, body.workout_id, body.scheduled_for)
    except FitPetError as e:
        raise to_http_exception(e) from e

    if not result.created:
        response.status_code = 200
    return result.user_workout


@router.post("/{user_id}/workouts/daily", response_model=list[UserWorkout])
def assign_daily_workouts(user_id: int, day: date | None = None, storage: Storage = Depends(get_storage)):
    """Schedule every catalogue workout for the given day (today by default)."""
    target_day = day or utc_now().date()
    try:
        results = schedule_daily_workouts(storage, user_id, target_day)
    except FitPetError as e:
        raise to_http_exception(e) from e

    created = sum(1 for result in results if result.created)
    logger.info(f"Daily workouts for user_id={user_id} on {target_day}: {created} new, {len(results) - created} existing")
    return [result.user_workout for result in results]


@router.get("/{user_id}/progress", response_model=UserProgress)
def read_daily_progress(user_id: int, day: date | None = None, storage: Storage = Depends(get_storage)):
    if storage.get_user(user_id) is None:
        raise HTTPException(status_code=404, detail="User not found")
    return daily_progress(storage, user_id, day or utc_now().date())
