"""Pet service: creation, care actions and generic updates.

Each operation is a read-modify-write on a single pet. Writes for the
same pet are not serialized across concurrent requests; the last write
wins.
"""

from __future__ import annotations

from datetime import datetime

from loguru import logger

from fitpet.core.errors import ConflictError, NotFoundError
from fitpet.core.time import utc_now
from fitpet.domain.models import NewPet, Pet, PetUpdate
from fitpet.pets.attributes import CareAction, apply_update, care_update, workout_update
from fitpet.pets.mood import CARE_MESSAGES, MoodReading, read_mood
from fitpet.storage.base import Storage


class PetService:
    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def create_pet(self, new_pet: NewPet) -> Pet:
        """Create a pet for a user who does not have one yet.

        Raises:
            NotFoundError: If the owning user does not exist
            ConflictError: If the user already has a pet
        """
        if self.storage.get_user(new_pet.user_id) is None:
            raise NotFoundError("user", new_pet.user_id)
        if self.storage.get_pet_by_user_id(new_pet.user_id) is not None:
            raise ConflictError("User already has a pet")

        pet = self.storage.create_pet(new_pet)
        logger.info(f"[PET] Created pet_id={pet.id} ({pet.type}) for user_id={pet.user_id}")
        return pet

    def get_pet(self, pet_id: int) -> Pet:
        pet = self.storage.get_pet(pet_id)
        if pet is None:
            logger.warning(f"[PET] pet_id={pet_id} not found")
            raise NotFoundError("pet", pet_id)
        return pet

    def get_pet_for_user(self, user_id: int) -> Pet:
        pet = self.storage.get_pet_by_user_id(user_id)
        if pet is None:
            logger.warning(f"[PET] No pet for user_id={user_id}")
            raise NotFoundError("pet", f"user {user_id}")
        return pet

    def update_pet(self, pet_id: int, update: PetUpdate) -> Pet:
        """Apply a partial update; bounds are re-applied after the merge.

        Raises:
            NotFoundError: If the pet does not exist
        """
        pet = self.get_pet(pet_id)
        return self._save(apply_update(pet, update))

    def care(self, pet_id: int, action: CareAction, now: datetime | None = None) -> Pet:
        """Run a care action (feed, play or groom) on a pet.

        Args:
            pet_id: Pet to care for
            action: Care action to apply
            now: Timestamp to stamp, defaults to the current time

        Returns:
            Updated pet

        Raises:
            NotFoundError: If the pet does not exist
        """
        pet = self.get_pet(pet_id)
        updated = self._save(apply_update(pet, care_update(pet, action, now or utc_now())))
        logger.info(
            f"[PET] {action.value} pet_id={pet_id}: "
            f"hunger={updated.hunger} happiness={updated.happiness} health={updated.health} - {CARE_MESSAGES[action.value]}"
        )
        return updated

    def feed(self, pet_id: int) -> Pet:
        return self.care(pet_id, CareAction.FEED)

    def play(self, pet_id: int) -> Pet:
        return self.care(pet_id, CareAction.PLAY)

    def groom(self, pet_id: int) -> Pet:
        return self.care(pet_id, CareAction.GROOM)

    def reward_workout(self, user_id: int, calories: int) -> Pet | None:
        """Apply the completed-workout bonus to the user's pet, if there is one."""
        pet = self.storage.get_pet_by_user_id(user_id)
        if pet is None:
            logger.info(f"[PET] user_id={user_id} has no pet, skipping workout reward")
            return None

        updated = self._save(apply_update(pet, workout_update(pet, calories)))
        logger.info(f"[PET] Workout reward for pet_id={pet.id}: xp {pet.xp} -> {updated.xp} - {CARE_MESSAGES['workout']}")
        return updated

    def mood(self, pet_id: int) -> MoodReading:
        return read_mood(self.get_pet(pet_id))

    def _save(self, pet: Pet) -> Pet:
        saved = self.storage.save_pet(pet)
        if saved is None:
            raise NotFoundError("pet", pet.id)
        return saved
