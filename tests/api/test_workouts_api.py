"""HTTP tests for the workout catalogue, completion and error handling."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from fitpet.core.settings import Settings
from fitpet.main import create_app
from fitpet.storage import Storage


def _schedule(client: TestClient, workout_id: int = 1) -> int:
    response = client.post("/users/1/workouts", json={"workoutId": workout_id, "scheduledFor": "2024-01-15T08:00:00Z"})
    return response.json()["id"]


class TestCatalogue:
    def test_list(self, client: TestClient) -> None:
        names = [w["name"] for w in client.get("/workouts").json()]
        assert names == ["Morning Cardio", "Strength Training", "Evening Yoga"]

    def test_read(self, client: TestClient) -> None:
        workout = client.get("/workouts/3").json()
        assert (workout["name"], workout["duration"], workout["calories"]) == ("Evening Yoga", 15, 80)

    def test_exercises_in_order(self, client: TestClient) -> None:
        body = client.get("/workouts/1/exercises").json()
        assert [e["order"] for e in body["exercises"]] == [1, 2, 3]
        assert body["exercises"][0]["workoutId"] == 1

    def test_unknown_workout(self, client: TestClient) -> None:
        assert client.get("/workouts/99").status_code == 404
        assert client.get("/workouts/99/exercises").status_code == 404


class TestCompletion:
    def test_complete_rewards_user_and_pet(self, client: TestClient) -> None:
        user_workout_id = _schedule(client)

        response = client.post(f"/user-workouts/{user_workout_id}/complete")

        assert response.status_code == 200
        body = response.json()
        assert body["completed"] is True
        assert body["completedAt"] is not None
        assert body["workout"]["name"] == "Morning Cardio"

        user = client.get("/users/1").json()
        assert (user["caloriesBurned"], user["activeMinutes"], user["completedWorkouts"]) == (120, 20, 1)
        assert client.get("/pets/1").json()["xp"] == 24

    def test_second_completion_rejected(self, client: TestClient) -> None:
        user_workout_id = _schedule(client)
        client.post(f"/user-workouts/{user_workout_id}/complete")

        response = client.post(f"/user-workouts/{user_workout_id}/complete")

        assert response.status_code == 400
        assert response.json()["detail"] == "Workout already completed"
        assert client.get("/users/1").json()["completedWorkouts"] == 1
        assert client.get("/pets/1").json()["xp"] == 24

    def test_unknown_assignment(self, client: TestClient) -> None:
        response = client.post("/user-workouts/99/complete")
        assert response.status_code == 404
        assert response.json()["detail"] == "User workout not found"


class TestErrorHandling:
    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "ok"}

    def test_unexpected_error_is_opaque(
        self, storage: Storage, settings: Settings, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def broken() -> list:
            raise RuntimeError("connection string secret")

        app = create_app(settings=settings, storage=storage)
        with TestClient(app, raise_server_exceptions=False) as client:
            monkeypatch.setattr(storage, "list_workouts", broken)
            response = client.get("/workouts")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
        assert "secret" not in response.text
