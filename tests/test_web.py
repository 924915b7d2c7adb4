"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from coach_lift.web import create_app

POWERLIFTING_FORM = {
    "objective": "Powerlifting",
    "experience": "Avancé (3+ ans)",
    "split": "Autre / Pas de préférence",
    "training_days": 4,
    "equipment": ["barre-halteres"],
    "squat_1rm": 150,
    "bench_1rm": 100,
    "deadlift_1rm": 100,
    "ohp_1rm": 100,
}


@pytest.fixture
def client(temp_db_path):
    """Test client over a temporary database (schema created on startup)."""
    with TestClient(create_app(temp_db_path)) as client:
        yield client


def _create(client, user_id="user-1", form=None) -> dict:
    response = client.post("/programs", json={"user_id": user_id, "form": form or POWERLIFTING_FORM})
    assert response.status_code == 201
    return response.json()


class TestGenerate:
    """POST /programs/generate."""

    def test_generate(self, client):
        response = client.post("/programs/generate", json=POWERLIFTING_FORM)

        assert response.status_code == 200
        program = response.json()
        assert program["is_531"] is True
        assert len(program["weeks"]) == 4
        first = program["weeks"][0]["days"][0]["exercises"][0]
        assert first["kind"] == "main-lift-set"
        assert first["training_max"] == 135

    def test_generic_program(self, client):
        response = client.post("/programs/generate", json={
            "objective": "Sèche / Perte de Gras",
            "experience": "Débutant (< 1 an)",
            "split": "Push Pull Legs",
            "training_days": 3,
            "equipment": [],
        })

        assert response.status_code == 200
        days = response.json()["weeks"][0]["days"]
        assert [len(day["exercises"]) for day in days] == [1, 0, 2]

    @pytest.mark.parametrize(
        "field,value",
        [("training_days", 9), ("training_days", "inf"), ("equipment", 5)],
    )
    def test_invalid_form(self, client, field, value):
        """Form validation errors are 422."""
        response = client.post("/programs/generate", json={**POWERLIFTING_FORM, field: value})

        assert response.status_code == 422
        assert field in response.json()["error"]

    def test_infinite_one_rep_max(self, client):
        response = client.post("/programs/generate", json={**POWERLIFTING_FORM, "squat_1rm": "inf"})

        assert response.status_code == 422
        assert response.json()["program"]["weeks"] == []

    def test_missing_one_rep_max(self, client):
        """The error sentinel is reported with its message."""
        response = client.post("/programs/generate", json={**POWERLIFTING_FORM, "ohp_1rm": None})

        assert response.status_code == 422
        body = response.json()
        assert body["program"]["weeks"] == []
        assert body["program"]["title"] == "Erreur de Génération"
        assert body["error"]


class TestPrograms:
    """Program storage routes."""

    def test_create_and_get(self, client):
        created = _create(client)

        response = client.get(f"/programs/{created['id']}")
        assert response.status_code == 200
        assert response.json()["program"] == created["program"]
        assert created["duration_weeks"] == 4
        assert created["days_per_week"] == 4

    def test_create_requires_user(self, client):
        response = client.post("/programs", json={"form": POWERLIFTING_FORM})
        assert response.status_code == 422

    def test_create_refuses_sentinel(self, client):
        response = client.post(
            "/programs", json={"user_id": "user-1", "form": {**POWERLIFTING_FORM, "squat_1rm": 0}}
        )
        assert response.status_code == 422
        assert client.get("/programs", params={"user_id": "user-1"}).json()["programs"] == []

    def test_list(self, client):
        first = _create(client)
        second = _create(client)
        _create(client, user_id="user-2")

        response = client.get("/programs", params={"user_id": "user-1"})

        assert [p["id"] for p in response.json()["programs"]] == [second["id"], first["id"]]

    def test_get_missing(self, client):
        response = client.get("/programs/nope")
        assert response.status_code == 404
        assert response.json() == {"error": "Program not found"}

    def test_delete(self, client):
        """Deleting a program removes its logs."""
        created = _create(client)
        program_id = created["id"]
        client.put(
            f"/logs/{program_id}/1/1",
            json={"user_id": "user-1", "exercises": {"Squat barre": {"sets": [{"set": 1, "weight": "87.5", "reps": "5"}]}}},
        )

        response = client.delete(f"/programs/{program_id}", params={"user_id": "user-1"})

        assert response.status_code == 200
        assert response.json() == {"deleted": program_id, "logs_deleted": 1}
        assert client.get(f"/programs/{program_id}").status_code == 404

    def test_delete_other_user(self, client):
        created = _create(client)
        response = client.delete(f"/programs/{created['id']}", params={"user_id": "user-2"})
        assert response.status_code == 404


class TestLogs:
    """Workout log routes."""

    def test_save_and_load(self, client):
        program_id = _create(client)["id"]
        exercises = {
            "Squat barre": {
                "sets": [
                    {"set": 1, "weight": "87.5", "reps": "5"},
                    {"set": 2, "weight": "", "reps": ""},
                    {"set": 3, "weight": "115", "reps": "9"},
                ],
                "notes": "RAS",
            }
        }

        response = client.put(
            f"/logs/{program_id}/1/1", json={"user_id": "user-1", "exercises": exercises}
        )
        assert response.status_code == 200
        assert response.json()["saved"] == 2

        response = client.get(
            f"/logs/{program_id}", params={"user_id": "user-1", "week": 1, "day": 1}
        )
        assert response.status_code == 200
        squat = response.json()["exercises"]["Squat barre"]
        assert squat["sets"] == [
            {"set": 1, "weight": "87.5", "reps": "5"},
            {"set": 3, "weight": "115", "reps": "9"},
        ]
        assert squat["notes"] == "RAS"

    def test_save_unknown_program(self, client):
        response = client.put("/logs/nope/1/1", json={"user_id": "user-1", "exercises": {}})
        assert response.status_code == 404

    def test_save_invalid_payload(self, client):
        program_id = _create(client)["id"]
        response = client.put(
            f"/logs/{program_id}/1/1",
            json={"user_id": "user-1", "exercises": {"Squat barre": {"sets": [{"weight": "80"}]}}},
        )
        assert response.status_code == 422

    def test_storage_error(self, temp_db_path):
        """Storage failures are 502 with an error message."""
        app = create_app(temp_db_path.parent / "missing" / "db.sqlite")
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/logs/prog-1", params={"user_id": "user-1"})

        assert response.status_code == 502
        assert "error" in response.json()


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
