"""Stats reconciler: cumulative user counters.

Counters only grow: each call adds non-negative deltas to calories burned,
active minutes and completed workouts. Reachable both from workout
completion and directly from the stats endpoint.
"""

from __future__ import annotations

from loguru import logger

from fitpet.core.errors import NotFoundError, ValidationError
from fitpet.domain.models import User
from fitpet.storage.base import Storage


def _require_non_negative_int(field: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, "must be an integer")
    if value < 0:
        raise ValidationError(field, "must be non-negative")
    return value


def update_user_stats(
    storage: Storage,
    user_id: int,
    calories_burned: int,
    active_minutes: int,
    completed_workouts: int,
) -> User:
    """Add deltas to a user's cumulative counters.

    Args:
        storage: Storage backend
        user_id: User to update
        calories_burned: Calories to add
        active_minutes: Minutes to add
        completed_workouts: Completed workouts to add

    Returns:
        Updated user

    Raises:
        ValidationError: If any delta is not a non-negative integer
        NotFoundError: If the user does not exist
    """
    deltas = {
        "caloriesBurned": calories_burned,
        "activeMinutes": active_minutes,
        "completedWorkouts": completed_workouts,
    }
    for field, value in deltas.items():
        _require_non_negative_int(field, value)

    user = storage.update_user_stats(user_id, calories_burned, active_minutes, completed_workouts)
    if user is None:
        logger.warning(f"[STATS] user_id={user_id} not found")
        raise NotFoundError("user", user_id)

    logger.info(
        f"[STATS] user_id={user_id} +{calories_burned} kcal +{active_minutes} min +{completed_workouts} workouts "
        f"-> totals ({user.calories_burned}, {user.active_minutes}, {user.completed_workouts})"
    )
    return user


def update_user_streak(storage: Storage, user_id: int, streak: int) -> User:
    """Set a user's streak.

    Raises:
        ValidationError: If streak is not a non-negative integer
        NotFoundError: If the user does not exist
    """
    _require_non_negative_int("streak", streak)
    user = storage.update_user_streak(user_id, streak)
    if user is None:
        raise NotFoundError("user", user_id)
    logger.info(f"[STATS] user_id={user_id} streak={streak}")
    return user
