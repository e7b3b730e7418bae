"""In-memory storage backend.

Each entity kind lives in its own dict keyed by id, with a counter that
only moves forward. Nothing survives a restart.

One re-entrant lock guards every read and write. ``transaction()`` holds
it for the whole block, so other threads never observe or interleave
with a block that may still be rolled back.
"""

from __future__ import annotations

import itertools
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from loguru import logger

from fitpet.core.time import utc_now
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
    Workout,
)

_TABLES = ("users", "pets", "workouts", "exercises", "user_workouts")


class MemStorage:
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._pets: dict[int, Pet] = {}
        self._workouts: dict[int, Workout] = {}
        self._exercises: dict[int, Exercise] = {}
        self._user_workouts: dict[int, UserWorkout] = {}
        self._ids = {table: itertools.count(1) for table in _TABLES}
        self._lock = threading.RLock()
        self._in_transaction: ContextVar[bool] = ContextVar(f"fitpet_mem_transaction_{id(self)}", default=False)

    def _next_id(self, table: str) -> int:
        return next(self._ids[table])

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Apply all writes made inside the block together.

        Records are immutable, so a shallow copy of each map is a full
        snapshot. Nested blocks join the outermost one. Id counters are
        not rewound; ids allocated by a failed block are simply skipped.
        """
        with self._lock:
            if self._in_transaction.get():
                yield
                return

            snapshot = {table: dict(getattr(self, f"_{table}")) for table in _TABLES}
            token = self._in_transaction.set(True)
            try:
                yield
            except Exception:
                logger.warning("Storage transaction failed, restoring snapshot")
                for table, rows in snapshot.items():
                    setattr(self, f"_{table}", rows)
                raise
            finally:
                self._in_transaction.reset(token)

    # Users

    def get_user(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            return next((user for user in self._users.values() if user.username == username), None)

    def create_user(self, new_user: NewUser) -> User:
        with self._lock:
            user = User(id=self._next_id("users"), username=new_user.username, created_at=utc_now())
            self._users[user.id] = user
            return user

    def update_user_stats(
        self,
        user_id: int,
        calories_burned: int,
        active_minutes: int,
        completed_workouts: int,
    ) -> User | None:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            updated = user.model_copy(
                update={
                    "calories_burned": user.calories_burned + calories_burned,
                    "active_minutes": user.active_minutes + active_minutes,
                    "completed_workouts": user.completed_workouts + completed_workouts,
                }
            )
            self._users[user_id] = updated
            return updated

    def update_user_streak(self, user_id: int, streak: int) -> User | None:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            updated = user.model_copy(update={"streak": streak})
            self._users[user_id] = updated
            return updated

    # Pets

    def get_pet(self, pet_id: int) -> Pet | None:
        with self._lock:
            return self._pets.get(pet_id)

    def get_pet_by_user_id(self, user_id: int) -> Pet | None:
        with self._lock:
            return next((pet for pet in self._pets.values() if pet.user_id == user_id), None)

    def create_pet(self, new_pet: NewPet) -> Pet:
        now = utc_now()
        with self._lock:
            pet = Pet(
                id=self._next_id("pets"),
                user_id=new_pet.user_id,
                name=new_pet.name,
                type=new_pet.type,
                last_fed=now,
                last_played=now,
                last_groomed=now,
            )
            self._pets[pet.id] = pet
            return pet

    def save_pet(self, pet: Pet) -> Pet | None:
        with self._lock:
            if pet.id not in self._pets:
                return None
            self._pets[pet.id] = pet
            return pet

    # Workouts and exercises

    def get_workout(self, workout_id: int) -> Workout | None:
        with self._lock:
            return self._workouts.get(workout_id)

    def list_workouts(self) -> list[Workout]:
        with self._lock:
            return list(self._workouts.values())

    def create_workout(self, new_workout: NewWorkout) -> Workout:
        with self._lock:
            workout = Workout(id=self._next_id("workouts"), **new_workout.model_dump())
            self._workouts[workout.id] = workout
            return workout

    def list_exercises(self, workout_id: int) -> list[Exercise]:
        with self._lock:
            exercises = [exercise for exercise in self._exercises.values() if exercise.workout_id == workout_id]
        return sorted(exercises, key=lambda exercise: exercise.order)

    def create_exercise(self, new_exercise: NewExercise) -> Exercise:
        with self._lock:
            exercise = Exercise(id=self._next_id("exercises"), **new_exercise.model_dump())
            self._exercises[exercise.id] = exercise
            return exercise

    # Assignments

    def get_user_workout(self, user_workout_id: int) -> UserWorkout | None:
        with self._lock:
            return self._user_workouts.get(user_workout_id)

    def list_user_workouts(self, user_id: int) -> list[UserWorkout]:
        with self._lock:
            return [uw for uw in self._user_workouts.values() if uw.user_id == user_id]

    def create_user_workout(self, new_user_workout: NewUserWorkout) -> UserWorkout:
        with self._lock:
            user_workout = UserWorkout(
                id=self._next_id("user_workouts"),
                user_id=new_user_workout.user_id,
                workout_id=new_user_workout.workout_id,
                scheduled_for=new_user_workout.scheduled_for,
            )
            self._user_workouts[user_workout.id] = user_workout
            return user_workout

    def save_user_workout(self, user_workout: UserWorkout) -> UserWorkout | None:
        with self._lock:
            if user_workout.id not in self._user_workouts:
                return None
            self._user_workouts[user_workout.id] = user_workout
            return user_workout
