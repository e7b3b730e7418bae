"""Scheduling guard for workout assignments.

At most one assignment exists per (user, workout, calendar day). A request
that matches an existing assignment returns it instead of creating a new
one. Calendar days are compared in UTC.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, time, timezone

from loguru import logger

from fitpet.core.errors import NotFoundError
from fitpet.core.time import ensure_utc, is_same_calendar_day
from fitpet.domain.models import NewUserWorkout, UserWorkout
from fitpet.storage.base import Storage


@dataclass(frozen=True)
class ScheduleResult:
    """Outcome of a scheduling request.

    Attributes:
        user_workout: The assignment (new or pre-existing)
        created: False when an existing same-day assignment was returned
    """

    user_workout: UserWorkout
    created: bool


def _require_user(storage: Storage, user_id: int) -> None:
    if storage.get_user(user_id) is None:
        logger.warning(f"[SCHEDULE] user_id={user_id} not found")
        raise NotFoundError("user", user_id)


def find_same_day_assignment(
    existing: Iterable[UserWorkout],
    workout_id: int,
    scheduled_for: datetime,
) -> UserWorkout | None:
    """Find an assignment of the same workout on the same calendar day."""
    for user_workout in existing:
        if user_workout.workout_id == workout_id and is_same_calendar_day(user_workout.scheduled_for, scheduled_for):
            return user_workout
    return None


def schedule_workout(storage: Storage, user_id: int, workout_id: int, scheduled_for: datetime) -> ScheduleResult:
    """Assign a workout to a user for a day, idempotently.

    Args:
        storage: Storage backend
        user_id: User receiving the assignment
        workout_id: Workout template to assign
        scheduled_for: Timestamp on the target day (only the date matters)

    Returns:
        ScheduleResult with the new or existing assignment

    Raises:
        NotFoundError: If the user or the workout does not exist
    """
    _require_user(storage, user_id)
    if storage.get_workout(workout_id) is None:
        logger.warning(f"[SCHEDULE] workout_id={workout_id} not found")
        raise NotFoundError("workout", workout_id)

    scheduled_for = ensure_utc(scheduled_for)
    duplicate = find_same_day_assignment(storage.list_user_workouts(user_id), workout_id, scheduled_for)
    if duplicate is not None:
        logger.info(
            f"[SCHEDULE] user_id={user_id} workout_id={workout_id} already scheduled on "
            f"{scheduled_for.date().isoformat()} (user_workout_id={duplicate.id})"
        )
        return ScheduleResult(user_workout=duplicate, created=False)

    user_workout = storage.create_user_workout(
        NewUserWorkout(user_id=user_id, workout_id=workout_id, scheduled_for=scheduled_for)
    )
    logger.info(
        f"[SCHEDULE] Created user_workout_id={user_workout.id} for user_id={user_id} "
        f"workout_id={workout_id} on {scheduled_for.date().isoformat()}"
    )
    return ScheduleResult(user_workout=user_workout, created=True)


def schedule_daily_workouts(storage: Storage, user_id: int, day: date) -> list[ScheduleResult]:
    """Schedule every catalogue workout for a user on a given day.

    Re-running for the same day creates nothing new.

    Raises:
        NotFoundError: If the user does not exist
    """
    _require_user(storage, user_id)
    scheduled_for = datetime.combine(day, time(hour=12), tzinfo=timezone.utc)
    return [schedule_workout(storage, user_id, workout.id, scheduled_for) for workout in storage.list_workouts()]
