from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from fitpet.core.time import ensure_utc


class UTCDateTime(TypeDecorator):
    """DateTime column that always hands back UTC-aware values.

    SQLite drops tzinfo on the way in, so values are stored as naive UTC.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect):
        normalized = ensure_utc(value)
        return normalized.replace(tzinfo=None) if normalized is not None else None

    def process_result_value(self, value: datetime | None, dialect):
        return ensure_utc(value)


class Base(DeclarativeBase):
    """Base class for all database models."""


class UserRow(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String, nullable=False, unique=True, index=True)
    streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    calories_burned: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    active_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    completed_workouts: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)


class PetRow(Base):
    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    type: Mapped[str] = mapped_column(String, nullable=False, default="cat")
    health: Mapped[int] = mapped_column(Integer, nullable=False, default=100)
    hunger: Mapped[int] = mapped_column(Integer, nullable=False, default=100)
    happiness: Mapped[int] = mapped_column(Integer, nullable=False, default=100)
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    xp: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_fed: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    last_played: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    last_groomed: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)


class WorkoutRow(Base):
    __tablename__ = "workouts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # minutes
    calories: Mapped[int] = mapped_column(Integer, nullable=False)
    difficulty: Mapped[str] = mapped_column(String, nullable=False)
    type: Mapped[str] = mapped_column(String, nullable=False)


class ExerciseRow(Base):
    __tablename__ = "exercises"
    __table_args__ = (UniqueConstraint("workout_id", "order", name="uq_exercises_workout_order"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    workout_id: Mapped[int] = mapped_column(Integer, ForeignKey("workouts.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # seconds
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sets: Mapped[int | None] = mapped_column(Integer, nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False)


class UserWorkoutRow(Base):
    __tablename__ = "user_workouts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    workout_id: Mapped[int] = mapped_column(Integer, ForeignKey("workouts.id"), nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    scheduled_for: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    completed_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
