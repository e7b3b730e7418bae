"""Request and response bodies for the HTTP API."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel

from fitpet.domain.models import NewPet, PetType, PetUpdate

NonNegativeInt = Annotated[StrictInt, Field(ge=0)]
PositiveInt = Annotated[StrictInt, Field(gt=0)]
BoundedAttribute = Annotated[StrictInt, Field(ge=0, le=100)]


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateUserRequest(ApiModel):
    username: str = Field(min_length=1)


class StatsUpdateRequest(ApiModel):
    calories_burned: NonNegativeInt
    active_minutes: NonNegativeInt
    completed_workouts: NonNegativeInt


class StreakUpdateRequest(ApiModel):
    streak: NonNegativeInt


class ScheduleWorkoutRequest(ApiModel):
    workout_id: PositiveInt
    scheduled_for: datetime


class CreatePetRequest(ApiModel):
    user_id: PositiveInt
    name: str = Field(min_length=1)
    type: PetType = PetType.CAT

    def to_new_pet(self) -> NewPet:
        return NewPet(user_id=self.user_id, name=self.name, type=self.type)


class PetPatchRequest(ApiModel):
    health: BoundedAttribute | None = None
    hunger: BoundedAttribute | None = None
    happiness: BoundedAttribute | None = None
    xp: NonNegativeInt | None = None
    level: PositiveInt | None = None
    type: PetType | None = None
    last_fed: datetime | None = None
    last_played: datetime | None = None
    last_groomed: datetime | None = None

    def to_update(self) -> PetUpdate:
        return PetUpdate(**self.model_dump(exclude_unset=True))


class MoodResponse(ApiModel):
    mood: str
    message: str
    state: str
    motivational_messages: list[str]
    workout_complete_messages: list[str]
