"""Workout catalogue and assignment completion endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from fitpet.api.dependencies import get_completion_service, get_storage
from fitpet.api.errors import to_http_exception
from fitpet.core.errors import FitPetError
from fitpet.domain.models import UserWorkoutWithDetails, Workout, WorkoutWithExercises
from fitpet.storage.base import Storage, get_workout_with_exercises
from fitpet.workouts.completion import WorkoutCompletionService

router = APIRouter(prefix="/workouts", tags=["workouts"])
user_workouts_router = APIRouter(prefix="/user-workouts", tags=["workouts"])


@router.get("", response_model=list[Workout])
def list_workouts(storage: Storage = Depends(get_storage)):
    return storage.list_workouts()


@router.get("/{workout_id}", response_model=Workout)
def read_workout(workout_id: int, storage: Storage = Depends(get_storage)):
    workout = storage.get_workout(workout_id)
    if workout is None:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@router.get("/{workout_id}/exercises", response_model=WorkoutWithExercises)
def read_workout_exercises(workout_id: int, storage: Storage = Depends(get_storage)):
    workout = get_workout_with_exercises(storage, workout_id)
    if workout is None:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@user_workouts_router.post("/{user_workout_id}/complete", response_model=UserWorkoutWithDetails)
def complete_user_workout(
    user_workout_id: int,
    completion: WorkoutCompletionService = Depends(get_completion_service),
):
    """Complete an assignment; 400 if it was already completed."""
    try:
        return completion.complete(user_workout_id)
    except FitPetError as e:
        raise to_http_exception(e) from e
