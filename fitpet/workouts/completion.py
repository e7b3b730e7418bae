"""Workout completion orchestrator.

Assignment lifecycle: scheduled -> completed (terminal). Completing runs,
in order:

1. Resolve the assignment with its workout (NotFoundError if absent)
2. Reject if already completed (AlreadyCompletedError)
3. Mark completed, stamp completed_at
4. Add the workout's calories and duration to the user's stats
5. Reward the user's pet, if the user has one

Steps 3-5 run inside one storage transaction: either all of them are
applied or none is.
"""

from __future__ import annotations

from loguru import logger

from fitpet.core.errors import AlreadyCompletedError, NotFoundError
from fitpet.core.time import utc_now
from fitpet.domain.models import UserWorkout, UserWorkoutWithDetails
from fitpet.pets.service import PetService
from fitpet.storage.base import Storage, get_user_workout_with_details
from fitpet.workouts.stats import update_user_stats


class WorkoutCompletionService:
    def __init__(self, storage: Storage) -> None:
        self.storage = storage
        self.pets = PetService(storage)

    def complete(self, user_workout_id: int) -> UserWorkoutWithDetails:
        """Complete an assignment and reconcile user stats and pet.

        Args:
            user_workout_id: Assignment to complete

        Returns:
            The completed assignment with its workout embedded

        Raises:
            NotFoundError: If the assignment (or its workout) does not exist
            AlreadyCompletedError: If the assignment was completed before
        """
        with self.storage.transaction():
            details = get_user_workout_with_details(self.storage, user_workout_id)
            if details is None:
                logger.warning(f"[COMPLETE] user_workout_id={user_workout_id} not found")
                raise NotFoundError("user_workout", user_workout_id)
            if details.completed:
                logger.info(f"[COMPLETE] user_workout_id={user_workout_id} already completed, ignoring")
                raise AlreadyCompletedError(user_workout_id)

            workout = details.workout
            assignment = UserWorkout.model_validate(details.model_dump(exclude={"workout"}))
            completed = self.storage.save_user_workout(
                assignment.model_copy(update={"completed": True, "completed_at": utc_now()})
            )
            if completed is None:
                raise NotFoundError("user_workout", user_workout_id)

            update_user_stats(self.storage, details.user_id, workout.calories, workout.duration, 1)
            pet = self.pets.reward_workout(details.user_id, workout.calories)

        logger.info(
            f"[COMPLETE] user_workout_id={user_workout_id} user_id={details.user_id} "
            f"workout={workout.name!r} calories={workout.calories} pet_rewarded={pet is not None}"
        )
        return UserWorkoutWithDetails(**completed.model_dump(), workout=workout)
