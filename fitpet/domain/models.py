"""Record models shared by storage backends, services and the HTTP layer.

Records are immutable; updates produce new records via ``model_copy``.
Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )


class PetType(StrEnum):
    """Pet species."""

    CAT = "cat"
    DOG = "dog"
    RABBIT = "rabbit"
    FOX = "fox"
    HAMSTER = "hamster"


class Difficulty(StrEnum):
    EASY = "Easy"
    MODERATE = "Moderate"
    HARD = "Hard"


class User(Record):
    id: int
    username: str
    streak: int = 0
    calories_burned: int = 0
    active_minutes: int = 0
    completed_workouts: int = 0
    created_at: datetime


class Pet(Record):
    """Virtual pet owned by a single user.

    Attributes:
        health: Bounded attribute in [0, 100]
        hunger: Bounded attribute in [0, 100] (100 means fully fed)
        happiness: Bounded attribute in [0, 100]
        level: Pet level, at least 1
        xp: Experience points, never negative
        last_fed: Last time the pet was fed
        last_played: Last time the pet was played with
        last_groomed: Last time the pet was groomed
    """

    id: int
    user_id: int
    name: str
    type: PetType = PetType.CAT
    health: int = 100
    hunger: int = 100
    happiness: int = 100
    level: int = 1
    xp: int = 0
    last_fed: datetime
    last_played: datetime
    last_groomed: datetime


class Workout(Record):
    """Workout template. Duration is in minutes."""

    id: int
    name: str
    description: str
    duration: int
    calories: int
    difficulty: Difficulty
    type: str


class Exercise(Record):
    """Exercise within a workout. Duration is in seconds."""

    id: int
    workout_id: int
    name: str
    description: str
    duration: int
    reps: int | None = None
    sets: int | None = None
    order: int


class UserWorkout(Record):
    """Assignment of a workout to a user for a given day."""

    id: int
    user_id: int
    workout_id: int
    completed: bool = False
    scheduled_for: datetime
    completed_at: datetime | None = None


class UserWorkoutWithDetails(UserWorkout):
    workout: Workout


class WorkoutWithExercises(Workout):
    exercises: list[Exercise] = Field(default_factory=list)


class UserProgress(Record):
    completed: int
    total: int
    percentage: int


# Insert payloads. Storage assigns ids and defaults.


class NewUser(Record):
    username: str


class NewPet(Record):
    user_id: int
    name: str
    type: PetType = PetType.CAT


class NewWorkout(Record):
    name: str
    description: str
    duration: int
    calories: int
    difficulty: Difficulty
    type: str


class NewExercise(Record):
    workout_id: int
    name: str
    description: str
    duration: int
    reps: int | None = None
    sets: int | None = None
    order: int


class NewUserWorkout(Record):
    user_id: int
    workout_id: int
    scheduled_for: datetime


class PetUpdate(Record):
    """Explicit set of fields a pet update may change.

    Every field is optional; unset fields keep their current value.
    Values are absolute, bounds are enforced after merge by the attribute engine.
    """

    health: int | None = None
    hunger: int | None = None
    happiness: int | None = None
    xp: int | None = None
    level: int | None = None
    type: PetType | None = None
    last_fed: datetime | None = None
    last_played: datetime | None = None
    last_groomed: datetime | None = None

    def changes(self) -> dict[str, object]:
        """Fields that were explicitly set, keyed by attribute name."""
        return {name: getattr(self, name) for name in self.model_fields_set if getattr(self, name) is not None}
