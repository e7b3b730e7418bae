"""Tests for the pet attribute engine (pure functions, no storage)."""

from __future__ import annotations

import itertools
from datetime import datetime, timedelta, timezone

import pytest

from fitpet.domain.models import Pet, PetType, PetUpdate
from fitpet.pets.attributes import (
    CareAction,
    apply_update,
    care_update,
    clamp_attribute,
    workout_update,
    xp_for_calories,
)

EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)
NOW = EPOCH + timedelta(days=3)


def make_pet(**overrides) -> Pet:
    fields = {
        "id": 1,
        "user_id": 1,
        "name": "Buddy",
        "type": PetType.CAT,
        "health": 50,
        "hunger": 50,
        "happiness": 50,
        "level": 1,
        "xp": 0,
        "last_fed": EPOCH,
        "last_played": EPOCH,
        "last_groomed": EPOCH,
    }
    fields.update(overrides)
    return Pet(**fields)


def care(pet: Pet, action: CareAction) -> Pet:
    return apply_update(pet, care_update(pet, action, NOW))


class TestCareActions:
    def test_feed_adds_twenty_hunger(self) -> None:
        pet = care(make_pet(hunger=40), CareAction.FEED)
        assert pet.hunger == 60
        assert pet.last_fed == NOW

    def test_feed_twice_from_ninety_caps_at_hundred(self) -> None:
        first = care(make_pet(hunger=90), CareAction.FEED)
        second = care(first, CareAction.FEED)
        assert first.hunger == 100
        assert second.hunger == 100

    def test_play_raises_happiness_and_costs_hunger(self) -> None:
        pet = care(make_pet(happiness=50, hunger=50), CareAction.PLAY)
        assert pet.happiness == 65
        assert pet.hunger == 45
        assert pet.last_played == NOW

    def test_play_floors_hunger_at_zero(self) -> None:
        pet = care(make_pet(hunger=3, happiness=95), CareAction.PLAY)
        assert pet.hunger == 0
        assert pet.happiness == 100

    def test_groom_adds_ten_health_capped(self) -> None:
        assert care(make_pet(health=50), CareAction.GROOM).health == 60
        assert care(make_pet(health=95), CareAction.GROOM).health == 100

    @pytest.mark.parametrize(
        ("action", "stamped"),
        [
            (CareAction.FEED, "last_fed"),
            (CareAction.PLAY, "last_played"),
            (CareAction.GROOM, "last_groomed"),
        ],
    )
    def test_care_stamps_only_its_own_timestamp(self, action: CareAction, stamped: str) -> None:
        pet = care(make_pet(), action)
        for field in ("last_fed", "last_played", "last_groomed"):
            expected = NOW if field == stamped else EPOCH
            assert getattr(pet, field) == expected

    def test_care_leaves_xp_and_level_alone(self) -> None:
        pet = care(make_pet(xp=42, level=3), CareAction.PLAY)
        assert (pet.xp, pet.level) == (42, 3)


class TestWorkoutReward:
    def test_xp_is_calories_over_five_rounded(self) -> None:
        assert xp_for_calories(120) == 24
        assert xp_for_calories(110) == 22
        assert xp_for_calories(83) == 17
        assert xp_for_calories(82) == 16
        assert xp_for_calories(0) == 0

    def test_workout_bumps_happiness_health_and_xp(self) -> None:
        pet = apply_update(make_pet(xp=10), workout_update(make_pet(xp=10), 120))
        assert pet.happiness == 60
        assert pet.health == 55
        assert pet.xp == 34

    def test_workout_caps_bounded_attributes_but_not_xp(self) -> None:
        start = make_pet(happiness=95, health=98, xp=1000)
        pet = apply_update(start, workout_update(start, 500))
        assert pet.happiness == 100
        assert pet.health == 100
        assert pet.xp == 1100

    def test_workout_does_not_touch_care_timestamps_or_hunger(self) -> None:
        start = make_pet(hunger=10)
        pet = apply_update(start, workout_update(start, 80))
        assert pet.hunger == 10
        assert (pet.last_fed, pet.last_played, pet.last_groomed) == (EPOCH, EPOCH, EPOCH)


class TestApplyUpdate:
    def test_clamps_both_bounds(self) -> None:
        pet = apply_update(make_pet(), PetUpdate(health=-20, hunger=250, happiness=101))
        assert (pet.health, pet.hunger, pet.happiness) == (0, 100, 100)

    def test_xp_and_level_floors(self) -> None:
        pet = apply_update(make_pet(xp=5, level=2), PetUpdate(xp=-1, level=0))
        assert pet.xp == 0
        assert pet.level == 1

    def test_unset_fields_keep_current_values(self) -> None:
        pet = apply_update(make_pet(health=70, hunger=20), PetUpdate(type=PetType.FOX))
        assert pet.type is PetType.FOX
        assert pet.health == 70
        assert pet.hunger == 20

    def test_out_of_range_record_is_repaired_by_empty_update(self) -> None:
        # A record that slipped out of range is brought back by any update
        pet = apply_update(make_pet().model_copy(update={"hunger": 130}), PetUpdate())
        assert pet.hunger == 100

    def test_bounds_hold_for_every_action_from_edge_values(self) -> None:
        edges = [0, 1, 29, 30, 50, 80, 81, 99, 100]
        actions = list(CareAction)
        for health, hunger, happiness in itertools.product(edges, repeat=3):
            start = make_pet(health=health, hunger=hunger, happiness=happiness)
            results = [care(start, action) for action in actions]
            results.append(apply_update(start, workout_update(start, 300)))
            for pet in results:
                for value in (pet.health, pet.hunger, pet.happiness):
                    assert 0 <= value <= 100


def test_clamp_attribute() -> None:
    assert clamp_attribute(-1) == 0
    assert clamp_attribute(0) == 0
    assert clamp_attribute(55) == 55
    assert clamp_attribute(100) == 100
    assert clamp_attribute(101) == 100
