"""SQLAlchemy storage backend.

Every call runs in its own session unless it happens inside
``transaction()``, in which case it joins the session opened there.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from loguru import logger
from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

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
from fitpet.storage.orm import Base, ExerciseRow, PetRow, UserRow, UserWorkoutRow, WorkoutRow


def build_engine(database_url: str) -> Engine:
    """Create an engine, sharing one connection for in-memory SQLite."""
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=False)

    kwargs: dict = {"connect_args": {"check_same_thread": False}, "echo": False}
    if database_url in {"sqlite://", "sqlite:///:memory:"}:
        kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


class SqlStorage:
    def __init__(self, database_url: str) -> None:
        logger.info(f"Initializing database engine: {database_url}")
        self._engine = build_engine(database_url)
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self._engine, expire_on_commit=False)
        self._active: ContextVar[Session | None] = ContextVar(f"fitpet_session_{id(self)}", default=None)
        Base.metadata.create_all(bind=self._engine)
        logger.info("Database tables verified")

    @contextmanager
    def _session(self) -> Iterator[Session]:
        active = self._active.get()
        if active is not None:
            yield active
            active.flush()
            return

        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception as e:
            logger.error(f"Database session error, rolling back: {e}")
            session.rollback()
            raise
        finally:
            session.close()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        if self._active.get() is not None:
            yield
            return

        session = self._session_factory()
        token = self._active.set(session)
        try:
            yield
            session.commit()
        except Exception as e:
            logger.warning(f"Storage transaction failed, rolling back: {e}")
            session.rollback()
            raise
        finally:
            self._active.reset(token)
            session.close()

    def dispose(self) -> None:
        self._engine.dispose()

    # Users

    def get_user(self, user_id: int) -> User | None:
        with self._session() as session:
            row = session.get(UserRow, user_id)
            return User.model_validate(row) if row is not None else None

    def get_user_by_username(self, username: str) -> User | None:
        with self._session() as session:
            row = session.execute(select(UserRow).where(UserRow.username == username)).scalar_one_or_none()
            return User.model_validate(row) if row is not None else None

    def create_user(self, new_user: NewUser) -> User:
        with self._session() as session:
            row = UserRow(
                username=new_user.username,
                streak=0,
                calories_burned=0,
                active_minutes=0,
                completed_workouts=0,
                created_at=utc_now(),
            )
            session.add(row)
            session.flush()
            return User.model_validate(row)

    def update_user_stats(
        self,
        user_id: int,
        calories_burned: int,
        active_minutes: int,
        completed_workouts: int,
    ) -> User | None:
        with self._session() as session:
            row = session.get(UserRow, user_id)
            if row is None:
                return None
            row.calories_burned += calories_burned
            row.active_minutes += active_minutes
            row.completed_workouts += completed_workouts
            session.flush()
            return User.model_validate(row)

    def update_user_streak(self, user_id: int, streak: int) -> User | None:
        with self._session() as session:
            row = session.get(UserRow, user_id)
            if row is None:
                return None
            row.streak = streak
            session.flush()
            return User.model_validate(row)

    # Pets

    def get_pet(self, pet_id: int) -> Pet | None:
        with self._session() as session:
            row = session.get(PetRow, pet_id)
            return Pet.model_validate(row) if row is not None else None

    def get_pet_by_user_id(self, user_id: int) -> Pet | None:
        with self._session() as session:
            row = session.execute(select(PetRow).where(PetRow.user_id == user_id)).scalar_one_or_none()
            return Pet.model_validate(row) if row is not None else None

    def create_pet(self, new_pet: NewPet) -> Pet:
        now = utc_now()
        with self._session() as session:
            row = PetRow(
                user_id=new_pet.user_id,
                name=new_pet.name,
                type=new_pet.type.value,
                health=100,
                hunger=100,
                happiness=100,
                level=1,
                xp=0,
                last_fed=now,
                last_played=now,
                last_groomed=now,
            )
            session.add(row)
            session.flush()
            return Pet.model_validate(row)

    def save_pet(self, pet: Pet) -> Pet | None:
        with self._session() as session:
            row = session.get(PetRow, pet.id)
            if row is None:
                return None
            for name, value in pet.model_dump(exclude={"id", "user_id"}).items():
                setattr(row, name, value)
            session.flush()
            return Pet.model_validate(row)

    # Workouts and exercises

    def get_workout(self, workout_id: int) -> Workout | None:
        with self._session() as session:
            row = session.get(WorkoutRow, workout_id)
            return Workout.model_validate(row) if row is not None else None

    def list_workouts(self) -> list[Workout]:
        with self._session() as session:
            rows = session.execute(select(WorkoutRow).order_by(WorkoutRow.id)).scalars().all()
            return [Workout.model_validate(row) for row in rows]

    def create_workout(self, new_workout: NewWorkout) -> Workout:
        with self._session() as session:
            row = WorkoutRow(**new_workout.model_dump())
            session.add(row)
            session.flush()
            return Workout.model_validate(row)

    def list_exercises(self, workout_id: int) -> list[Exercise]:
        with self._session() as session:
            rows = (
                session.execute(
                    select(ExerciseRow).where(ExerciseRow.workout_id == workout_id).order_by(ExerciseRow.order)
                )
                .scalars()
                .all()
            )
            return [Exercise.model_validate(row) for row in rows]

    def create_exercise(self, new_exercise: NewExercise) -> Exercise:
        with self._session() as session:
            row = ExerciseRow(**new_exercise.model_dump())
            session.add(row)
            session.flush()
            return Exercise.model_validate(row)

    # Assignments

    def get_user_workout(self, user_workout_id: int) -> UserWorkout | None:
        with self._session() as session:
            row = session.get(UserWorkoutRow, user_workout_id)
            return UserWorkout.model_validate(row) if row is not None else None

    def list_user_workouts(self, user_id: int) -> list[UserWorkout]:
        with self._session() as session:
            rows = (
                session.execute(
                    select(UserWorkoutRow).where(UserWorkoutRow.user_id == user_id).order_by(UserWorkoutRow.id)
                )
                .scalars()
                .all()
            )
            return [UserWorkout.model_validate(row) for row in rows]

    def create_user_workout(self, new_user_workout: NewUserWorkout) -> UserWorkout:
        with self._session() as session:
            row = UserWorkoutRow(
                user_id=new_user_workout.user_id,
                workout_id=new_user_workout.workout_id,
                scheduled_for=new_user_workout.scheduled_for,
                completed=False,
                completed_at=None,
            )
            session.add(row)
            session.flush()
            return UserWorkout.model_validate(row)

    def save_user_workout(self, user_workout: UserWorkout) -> UserWorkout | None:
        with self._session() as session:
            row = session.get(UserWorkoutRow, user_workout.id)
            if row is None:
                return None
            row.completed = user_workout.completed
            row.completed_at = user_workout.completed_at
            row.scheduled_for = user_workout.scheduled_for
            session.flush()
            return UserWorkout.model_validate(row)
