"""
Integration tests for the BMI and workout plan endpoints.
"""
from datetime import datetime, timedelta, timezone

from services.history_service import append_measurement


class TestBmiCalculate:

    def test_calculate(self, client):
        response = client.post("/v1/bmi/calculate", json={"weight_kg": 90, "height_cm": 180})
        assert response.status_code == 200
        assert response.json() == {
            "bmi": 27.8,
            "category": "Overweight",
            "note": "Moderate activity and some diet adjustment will be beneficial.",
            "severity": 2,
        }

    def test_invalid_measurement(self, client):
        response = client.post("/v1/bmi/calculate", json={"weight_kg": 0, "height_cm": 180})
        assert response.status_code == 422
        assert "Weight must be a positive number." in response.json()["detail"]

    def test_non_numeric(self, client):
        response = client.post("/v1/bmi/calculate", json={"weight_kg": "heavy", "height_cm": 180})
        assert response.status_code == 422


class TestWorkoutPlan:

    def test_no_goal_uses_suggestion(self, client):
        response = client.post("/v1/workout-plan", json={"weight_kg": 90, "height_cm": 180})
        assert response.status_code == 200

        data = response.json()
        assert data["bmi"] == 27.8
        assert data["category"] == "Overweight"
        assert data["suggested_goal"] == "lose"
        assert data["goal"] == "lose"
        assert data["plan"]["target_weight_kg"] == 77.8
        assert data["plan"]["delta_kg"] == -12.2
        assert data["plan"]["estimated_weeks"] == 25
        assert data["plan"]["gym_plan"] == {
            "strength_sessions_per_week": 3,
            "strength_minutes_per_session": 45,
            "cardio_sessions_per_week": 3,
            "cardio_minutes_per_session": 35,
            "steps_per_day": 8000,
        }
        assert len(data["plan"]["notes"]) == 2

    def test_explicit_fit_is_kept(self, client):
        response = client.post(
            "/v1/workout-plan",
            json={"weight_kg": 90, "height_cm": 180, "goal": "fit"},
        )
        data = response.json()
        assert data["suggested_goal"] == "lose"
        assert data["goal"] == "fit"
        assert len(data["plan"]["notes"]) == 1

    def test_explicit_gain(self, client):
        response = client.post(
            "/v1/workout-plan",
            json={"weight_kg": 55, "height_cm": 170, "goal": "gain"},
        )
        plan = response.json()["plan"]
        assert plan["target_weight_kg"] == 57.8
        assert plan["estimated_weeks"] == 8

    def test_supplied_bmi_is_used(self, client):
        response = client.post(
            "/v1/workout-plan",
            json={"weight_kg": 70, "height_cm": 175, "bmi": 22.86, "goal": "fit"},
        )
        assert response.json()["plan"]["estimated_weeks"] == 10

    def test_display_rounded_bmi_is_accepted(self, client):
        response = client.post(
            "/v1/workout-plan",
            json={"weight_kg": 70, "height_cm": 175, "bmi": 22.9, "goal": "fit"},
        )
        assert response.status_code == 200
        assert response.json()["bmi"] == 22.9

    def test_nan_bmi_rejected(self, client):
        # json= refuses NaN, so send the body by hand
        response = client.post(
            "/v1/workout-plan",
            content='{"weight_kg": 70, "height_cm": 175, "bmi": NaN, "goal": "fit"}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422
        assert response.json()["detail"] == ["BMI must be a finite number."]

    def test_huge_bmi_rejected(self, client):
        response = client.post(
            "/v1/workout-plan",
            json={"weight_kg": 70, "height_cm": 175, "bmi": 1e308, "goal": "fit"},
        )
        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_bmi_disagreeing_with_measurement_rejected(self, client):
        response = client.post(
            "/v1/workout-plan",
            json={"weight_kg": 70, "height_cm": 175, "bmi": 30.0},
        )
        assert response.status_code == 422
        assert response.json()["detail"] == ["BMI does not match the given weight and height."]

    def test_unknown_goal(self, client):
        response = client.post(
            "/v1/workout-plan",
            json={"weight_kg": 70, "height_cm": 175, "goal": "bulk"},
        )
        assert response.status_code == 422


class TestCurrentWorkoutPlan:

    def test_requires_auth(self, client):
        assert client.get("/v1/workout-plan/current").status_code == 401

    def test_empty_history(self, client, make_user, auth_headers):
        user = make_user()
        response = client.get("/v1/workout-plan/current", headers=auth_headers(user))
        assert response.status_code == 404
        assert response.json() == {
            "detail": "No measurements recorded yet",
            "error_code": "NOT_FOUND",
        }

    def test_uses_latest_measurement(self, client, make_user, auth_headers, db_session):
        user = make_user()
        base = datetime(2026, 3, 1, tzinfo=timezone.utc)
        append_measurement(db_session, user.id, 50, 170, at=base)
        append_measurement(db_session, user.id, 90, 180, at=base + timedelta(days=30))
        db_session.commit()

        response = client.get("/v1/workout-plan/current", headers=auth_headers(user))
        assert response.status_code == 200
        data = response.json()
        assert data["goal"] == "lose"
        assert data["plan"]["current_weight_kg"] == 90
        assert data["plan"]["estimated_weeks"] == 25

    def test_explicit_goal_query(self, client, make_user, auth_headers, db_session):
        user = make_user()
        append_measurement(db_session, user.id, 90, 180)
        db_session.commit()

        response = client.get("/v1/workout-plan/current?goal=gain", headers=auth_headers(user))
        data = response.json()
        assert data["suggested_goal"] == "lose"
        assert data["goal"] == "gain"
        assert data["plan"]["estimated_weeks"] == 0
