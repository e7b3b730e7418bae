"""Tests for pet mood classification."""

from __future__ import annotations

import pytest

from fitpet.pets.attributes import CareAction
from fitpet.pets.mood import (
    CARE_MESSAGES,
    MOOD_MESSAGES,
    MOTIVATIONAL_MESSAGES,
    WORKOUT_COMPLETE_MESSAGES,
    PetMood,
    PetState,
    classify_mood,
    derive_state,
    read_mood,
)


class TestClassifyMood:
    def test_hunger_wins_over_happy_threshold(self) -> None:
        assert classify_mood(hunger=20, happiness=90, health=90) is PetMood.HUNGRY

    @pytest.mark.parametrize(
        ("hunger", "happiness", "health", "expected"),
        [
            (10, 10, 10, PetMood.HUNGRY),
            (50, 10, 10, PetMood.UNHAPPY),
            (50, 50, 10, PetMood.UNHEALTHY),
            (50, 81, 81, PetMood.HAPPY),
            (50, 80, 81, PetMood.NEUTRAL),
            (50, 81, 80, PetMood.NEUTRAL),
            (50, 50, 50, PetMood.NEUTRAL),
        ],
    )
    def test_precedence(self, hunger: int, happiness: int, health: int, expected: PetMood) -> None:
        assert classify_mood(hunger, happiness, health) is expected

    def test_low_threshold_is_strict(self) -> None:
        assert classify_mood(hunger=30, happiness=30, health=30) is PetMood.NEUTRAL
        assert classify_mood(hunger=29, happiness=30, health=30) is PetMood.HUNGRY


class TestDeriveState:
    @pytest.mark.parametrize(
        ("hunger", "happiness", "health", "expected"),
        [
            (20, 90, 90, PetState.HUNGRY),
            (50, 20, 90, PetState.SAD),
            (50, 50, 20, PetState.TIRED),
            (100, 100, 100, PetState.EXCITED),
            (90, 90, 90, PetState.HAPPY),
            (50, 60, 40, PetState.SLEEPING),
            (50, 60, 60, PetState.HAPPY),
        ],
    )
    def test_state_follows_attributes(self, hunger: int, happiness: int, health: int, expected: PetState) -> None:
        assert derive_state(hunger, happiness, health) is expected

    def test_every_state_has_copy(self) -> None:
        for state in PetState:
            assert MOTIVATIONAL_MESSAGES[state]
            assert WORKOUT_COMPLETE_MESSAGES[state]


def test_read_mood_uses_pet_attributes(make_pet) -> None:
    reading = read_mood(make_pet(hunger=20, happiness=90, health=90))
    assert reading.mood is PetMood.HUNGRY
    assert reading.message == MOOD_MESSAGES[PetMood.HUNGRY]
    assert reading.state is PetState.HUNGRY


def test_every_care_action_has_acknowledgement() -> None:
    assert {action.value for action in CareAction} | {"workout"} == set(CARE_MESSAGES)
