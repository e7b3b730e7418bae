"""Persistence interface used by the FitPet core.

Backends own their keyed collections and allocate ids monotonically.
Lookups return None when an entity does not exist; updates on a missing
entity return None as well. Raising is left to the services.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager
from typing import Protocol

from fitpet.domain.models import (
    Exercise,
    NewExercise,
    NewPet,
    NewUser,
    NewUserWorkout,
    NewWorkout,
    Pet,
    User,
    UserWorkout,
    UserWorkoutWithDetails,
    Workout,
    WorkoutWithExercises,
)


class Storage(Protocol):
    # Users
    def get_user(self, user_id: int) -> User | None: ...

    def get_user_by_username(self, username: str) -> User | None: ...

    def create_user(self, new_user: NewUser) -> User: ...

    def update_user_stats(
        self,
        user_id: int,
        calories_burned: int,
        active_minutes: int,
        completed_workouts: int,
    ) -> User | None: ...

    def update_user_streak(self, user_id: int, streak: int) -> User | None: ...

    # Pets
    def get_pet(self, pet_id: int) -> Pet | None: ...

    def get_pet_by_user_id(self, user_id: int) -> Pet | None: ...

    def create_pet(self, new_pet: NewPet) -> Pet: ...

    def save_pet(self, pet: Pet) -> Pet | None: ...

    # Workouts and exercises
    def get_workout(self, workout_id: int) -> Workout | None: ...

    def list_workouts(self) -> list[Workout]: ...

    def create_workout(self, new_workout: NewWorkout) -> Workout: ...

    def list_exercises(self, workout_id: int) -> list[Exercise]: ...

    def create_exercise(self, new_exercise: NewExercise) -> Exercise: ...

    # Assignments
    def get_user_workout(self, user_workout_id: int) -> UserWorkout | None: ...

    def list_user_workouts(self, user_id: int) -> list[UserWorkout]: ...

    def create_user_workout(self, new_user_workout: NewUserWorkout) -> UserWorkout: ...

    def save_user_workout(self, user_workout: UserWorkout) -> UserWorkout | None: ...

    def transaction(self) -> AbstractContextManager[None]: ...


def get_workout_with_exercises(storage: Storage, workout_id: int) -> WorkoutWithExercises | None:
    """Workout template with its exercises in ascending order."""
    workout = storage.get_workout(workout_id)
    if workout is None:
        return None
    return WorkoutWithExercises(**workout.model_dump(), exercises=storage.list_exercises(workout_id))


def get_user_workout_with_details(storage: Storage, user_workout_id: int) -> UserWorkoutWithDetails | None:
    """Assignment with its workout embedded, or None if either is missing."""
    user_workout = storage.get_user_workout(user_workout_id)
    if user_workout is None:
        return None
    workout = storage.get_workout(user_workout.workout_id)
    if workout is None:
        return None
    return UserWorkoutWithDetails(**user_workout.model_dump(), workout=workout)


def iter_user_workouts_with_details(storage: Storage, user_id: int) -> Iterator[UserWorkoutWithDetails]:
    for user_workout in storage.list_user_workouts(user_id):
        workout = storage.get_workout(user_workout.workout_id)
        if workout is None:
            continue
        yield UserWorkoutWithDetails(**user_workout.model_dump(), workout=workout)
