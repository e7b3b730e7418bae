"""Startup data for a fresh store.

Seeds the sample workout catalogue, then the default user, then that
user's pet, in that order. Safe to run more than once.
"""

from __future__ import annotations

from loguru import logger

from fitpet.core.settings import Settings
from fitpet.domain.models import NewExercise, NewPet, NewUser, NewWorkout, PetType, User
from fitpet.storage.base import Storage

SAMPLE_WORKOUTS: list[tuple[NewWorkout, list[dict]]] = [
    (
        NewWorkout(
            name="Morning Cardio",
            description="Energizing cardio to start your day",
            duration=20,
            calories=120,
            difficulty="Moderate",
            type="Cardio",
        ),
        [
            {
                "name": "Jumping Jacks",
                "description": "Start with your feet together and arms at your sides, then jump up with your feet apart and hands overhead.",
                "duration": 60,
            },
            {
                "name": "High Knees",
                "description": "Run in place, lifting your knees as high as possible with each step.",
                "duration": 45,
            },
            {
                "name": "Butt Kicks",
                "description": "Run in place, kicking your heels up toward your buttocks with each step.",
                "duration": 45,
            },
        ],
    ),
    (
        NewWorkout(
            name="Strength Training",
            description="Build muscle and increase strength",
            duration=25,
            calories=110,
            difficulty="Hard",
            type="Strength",
        ),
        [
            {
                "name": "Push-ups",
                "description": "Start in a high plank position and lower your body until your chest nearly touches the floor, then push back up.",
                "duration": 0,
                "reps": 10,
                "sets": 3,
            },
            {
                "name": "Squats",
                "description": "Stand with feet shoulder-width apart, then lower your body as if sitting in a chair, then stand back up.",
                "duration": 0,
                "reps": 15,
                "sets": 3,
            },
            {
                "name": "Planks",
                "description": "Hold a push-up position with your body in a straight line from head to heels.",
                "duration": 30,
                "sets": 3,
            },
        ],
    ),
    (
        NewWorkout(
            name="Evening Yoga",
            description="Gentle stretching to end your day",
            duration=15,
            calories=80,
            difficulty="Easy",
            type="Yoga",
        ),
        [
            {
                "name": "Downward Dog",
                "description": "Stretch your entire body, focusing on your back and shoulders.",
                "duration": 45,
                "sets": 3,
            },
            {
                "name": "Child's Pose",
                "description": "A resting pose that gently stretches your lower back and hips.",
                "duration": 30,
                "sets": 3,
            },
            {
                "name": "Cobra Pose",
                "description": "Lie on your stomach and lift your chest while keeping your hips on the ground.",
                "duration": 30,
                "sets": 3,
            },
        ],
    ),
]


def seed_workouts(storage: Storage) -> int:
    """Create the sample workouts and their exercises.

    Returns:
        Number of workouts created
    """
    for new_workout, exercises in SAMPLE_WORKOUTS:
        workout = storage.create_workout(new_workout)
        for order, exercise in enumerate(exercises, start=1):
            storage.create_exercise(NewExercise(workout_id=workout.id, order=order, **exercise))
        logger.debug(f"Seeded workout {workout.id}: {workout.name} ({len(exercises)} exercises)")
    return len(SAMPLE_WORKOUTS)


def initialize_storage(storage: Storage, settings: Settings) -> User:
    """Seed a fresh store and return the default user.

    Args:
        storage: Storage backend to populate
        settings: Application settings (default identity, seeding flag)

    Returns:
        The default user, existing or newly created
    """
    existing = storage.get_user_by_username(settings.default_username)
    if existing is not None:
        logger.info(f"Storage already initialized (user_id={existing.id})")
        return existing

    with storage.transaction():
        if settings.seed_sample_data:
            count = seed_workouts(storage)
            logger.info(f"Seeded {count} sample workouts")

        user = storage.create_user(NewUser(username=settings.default_username))
        pet = storage.create_pet(
            NewPet(user_id=user.id, name=settings.default_pet_name, type=PetType(settings.default_pet_type))
        )

    logger.info(f"Initialized default user_id={user.id} with pet_id={pet.id} ({pet.type})")
    return user
