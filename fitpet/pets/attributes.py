"""Pet attribute engine.

All pet changes are expressed as a ``PetUpdate`` and merged with
``apply_update``, which enforces the bounds regardless of which fields
were supplied:

- health, hunger and happiness stay within [0, 100]
- xp never goes below 0
- level never goes below 1

Pure functions only; no storage access.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from fitpet.domain.models import Pet, PetUpdate

ATTRIBUTE_MIN = 0
ATTRIBUTE_MAX = 100
BOUNDED_ATTRIBUTES = ("health", "hunger", "happiness")

CALORIES_PER_XP = 5
WORKOUT_HAPPINESS_BONUS = 10
WORKOUT_HEALTH_BONUS = 5


class CareAction(StrEnum):
    FEED = "feed"
    PLAY = "play"
    GROOM = "groom"


@dataclass(frozen=True)
class CareEffect:
    """Attribute deltas of a care action and the timestamp it stamps."""

    hunger: int = 0
    happiness: int = 0
    health: int = 0
    stamps: str = ""


CARE_EFFECTS: dict[CareAction, CareEffect] = {
    CareAction.FEED: CareEffect(hunger=20, stamps="last_fed"),
    CareAction.PLAY: CareEffect(hunger=-5, happiness=15, stamps="last_played"),
    CareAction.GROOM: CareEffect(health=10, stamps="last_groomed"),
}


def clamp_attribute(value: int) -> int:
    return max(ATTRIBUTE_MIN, min(ATTRIBUTE_MAX, value))


def apply_update(pet: Pet, update: PetUpdate) -> Pet:
    """Merge a partial update into a pet and re-apply the bounds.

    Args:
        pet: Current pet record
        update: Fields to set (absolute values)

    Returns:
        New pet record with every bound satisfied
    """
    merged = {**pet.model_dump(), **update.changes()}
    for name in BOUNDED_ATTRIBUTES:
        merged[name] = clamp_attribute(merged[name])
    merged["xp"] = max(0, merged["xp"])
    merged["level"] = max(1, merged["level"])
    return Pet.model_validate(merged)


def care_update(pet: Pet, action: CareAction, now: datetime) -> PetUpdate:
    """Build the update for a feed/play/groom action."""
    effect = CARE_EFFECTS[action]
    fields: dict[str, object] = {}
    if effect.hunger:
        fields["hunger"] = clamp_attribute(pet.hunger + effect.hunger)
    if effect.happiness:
        fields["happiness"] = clamp_attribute(pet.happiness + effect.happiness)
    if effect.health:
        fields["health"] = clamp_attribute(pet.health + effect.health)
    fields[effect.stamps] = now
    return PetUpdate(**fields)


def xp_for_calories(calories: int) -> int:
    # calories / 5 never ends in .5 for integer calories
    return round(calories / CALORIES_PER_XP)


def workout_update(pet: Pet, calories: int) -> PetUpdate:
    """Build the update for a completed workout. Care timestamps are untouched."""
    return PetUpdate(
        xp=pet.xp + xp_for_calories(calories),
        happiness=clamp_attribute(pet.happiness + WORKOUT_HAPPINESS_BONUS),
        health=clamp_attribute(pet.health + WORKOUT_HEALTH_BONUS),
    )
