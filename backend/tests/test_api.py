"""
Tests for the HTTP routes.

Tests cover:
- Login and role gating
- Coach roster, client creation, diet and goals
- Workouts
- Food logging, search fallback and photo analysis
- Weights, measurements and the client home summary
"""

import pytest

from titanfit.exceptions import AIResponseError
from titanfit.schemas import AiDietResult, AiWorkoutResult, Exercise, FoodAnalysisResult, Macros


NEW_CLIENT = {
    "name": "Priya Patel",
    "username": "priya_p",
    "passportCode": "PP-2025-Q1",
    "dob": "1998-03-10",
    "heightCm": 160,
    "startWeightKg": 62.5,
    "goal": "Tone up",
    "subscriptionEndDate": "2030-01-01",
}


def _analysis(confidence, grams=200):
    return FoodAnalysisResult(
        food_name="Paneer Tikka",
        grams=grams,
        macros=Macros(calories=500, protein=30, carbs=10, fats=36, fiber=2),
        confidence=confidence,
    )


# ============================================================================
# Auth
# ============================================================================

class TestAuth:

    def test_coach_login(self, client):
        response = client.post("/api/auth/login", json={"role": "COACH", "identifier": "rushi", "secret": "rushi9001"})
        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["user"]["role"] == "COACH"

    @pytest.mark.parametrize("payload", [
        {"role": "COACH", "identifier": "rushi", "secret": "wrong"},
        {"role": "COACH", "identifier": "ghost", "secret": "rushi9001"},
        {"role": "CLIENT", "identifier": "janedoe_fit", "secret": "JS-8821-B2A"},
    ])
    def test_bad_credentials_are_indistinguishable(self, client, payload):
        response = client.post("/api/auth/login", json=payload)
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    def test_me(self, client, client_headers):
        response = client.get("/api/auth/me", headers=client_headers)
        assert response.status_code == 200
        assert response.json()["id"] == "c1"

    def test_missing_token(self, client):
        assert client.get("/api/auth/me").status_code == 401

    def test_garbage_token(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    def test_client_cannot_use_coach_routes(self, client, client_headers):
        assert client.get("/api/clients", headers=client_headers).status_code == 403

    def test_coach_cannot_use_client_routes(self, client, coach_headers):
        assert client.get("/api/food", headers=coach_headers).status_code == 403


# ============================================================================
# Coach: clients
# ============================================================================

class TestClients:

    def test_roster(self, client, coach_headers):
        response = client.get("/api/clients", headers=coach_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["stats"]["total"] == 2
        assert data["stats"]["flagged"] == 1
        assert {c["id"] for c in data["clients"]} == {"c1", "c2"}

    def test_roster_filters(self, client, coach_headers):
        flagged = client.get("/api/clients", params={"filter": "flagged"}, headers=coach_headers).json()
        assert [c["id"] for c in flagged["clients"]] == ["c2"]

        search = client.get("/api/clients", params={"search": "JANE"}, headers=coach_headers).json()
        assert [c["id"] for c in search["clients"]] == ["c1"]

    def test_create_client_with_defaults(self, client, coach_headers, store):
        response = client.post("/api/clients", json=NEW_CLIENT, headers=coach_headers)
        assert response.status_code == 201
        data = response.json()
        assert data["coachId"] == "coach_rushi"
        assert data["currentWeightKg"] == 62.5
        assert data["status"] == "active"
        assert data["stepGoal"] == 10000
        assert data["weeklyStepGoal"] == 70000
        assert data["dailyMacroTargets"] == {"calories": 2000, "protein": 150, "carbs": 200, "fats": 65, "fiber": 30}
        assert list(data["mealPlan"]) == ["breakfast", "lunch", "dinner", "snack"]
        assert data["occupation"] == "Not Set"
        assert data["age"] >= 26
        assert store.get_client(data["id"]).username == "priya_p"

        login = client.post("/api/auth/login", json={"role": "CLIENT", "identifier": "priya_p", "secret": "PP-2025-Q1"})
        assert login.status_code == 200

    def test_create_client_stores_iso_dates(self, client, coach_headers, store):
        data = client.post("/api/clients", json=NEW_CLIENT, headers=coach_headers).json()
        stored = store.get_client(data["id"])
        assert stored.dob == "1998-03-10"
        assert stored.subscription_end_date == "2030-01-01"

    @pytest.mark.parametrize("field,value", [
        ("subscriptionEndDate", "31/12/2025"),
        ("subscriptionEndDate", "soon"),
        ("dob", "10-03-1998"),
    ])
    def test_create_client_rejects_malformed_dates(self, client, coach_headers, store, field, value):
        response = client.post("/api/clients", json={**NEW_CLIENT, field: value}, headers=coach_headers)
        assert response.status_code == 422
        assert len(store.get_clients()) == 2
        # roster stays readable
        assert client.get("/api/clients", headers=coach_headers).status_code == 200

    def test_create_duplicate_username(self, client, coach_headers):
        payload = {**NEW_CLIENT, "username": "janedoe_fit"}
        assert client.post("/api/clients", json=payload, headers=coach_headers).status_code == 400

    def test_client_detail(self, client, coach_headers):
        response = client.get("/api/clients/c1", headers=coach_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["client"]["name"] == "Jane Doe"
        assert [w["id"] for w in data["weightLogs"]] == ["w1", "w2", "w3", "w4", "w5"]
        assert data["trend"]["status"] == "on_track"
        assert len(data["measurements"]) == 3
        assert {w["id"] for w in data["workouts"]} == {"wk1", "wk2"}

    def test_client_detail_insufficient_trend(self, client, coach_headers):
        data = client.get("/api/clients/c2", headers=coach_headers).json()
        assert data["trend"]["status"] == "insufficient_data"

    def test_unknown_client(self, client, coach_headers):
        assert client.get("/api/clients/nope", headers=coach_headers).status_code == 404

    def test_update_diet(self, client, coach_headers, store):
        payload = {
            "dailyMacroTargets": {"calories": 1800, "protein": 130, "carbs": 180, "fats": 55, "fiber": 28},
            "mealPlan": {"breakfast": "Eggs", "dinner": "Fish"},
        }
        response = client.put("/api/clients/c1/diet", json=payload, headers=coach_headers)
        assert response.status_code == 200
        jane = store.get_client("c1")
        assert jane.daily_macro_targets.calories == 1800
        assert jane.meal_plan == {"breakfast": "Eggs", "dinner": "Fish"}

    def test_update_goals_syncs_weekly(self, client, coach_headers, store):
        response = client.put("/api/clients/c1/goals", json={"stepGoal": 9000}, headers=coach_headers)
        assert response.status_code == 200
        assert response.json()["weeklyStepGoal"] == 63000
        assert store.get_client("c1").step_goal == 9000

    def test_update_goals_habits(self, client, coach_headers, store):
        habits = [{"id": "h9", "name": "Walk after dinner", "frequency": "Daily", "completed": False}]
        client.put("/api/clients/c2/goals", json={"habits": habits}, headers=coach_headers)
        c2 = store.get_client("c2")
        assert [h.name for h in c2.habits] == ["Walk after dinner"]
        assert c2.step_goal == 10000

    def test_add_meal_slot(self, client, coach_headers):
        response = client.post("/api/clients/c1/meal-slots", json={"name": "Pre-Workout"}, headers=coach_headers)
        assert response.status_code == 200
        assert response.json()["mealPlan"]["pre-workout"] == ""

    def test_add_food_to_meal_slot(self, client, coach_headers):
        payload = {"slot": "snack", "foodId": "ns2", "grams": 20, "autoUpdateMacros": True}
        response = client.post("/api/clients/c1/meal-slots/food", json=payload, headers=coach_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["mealPlan"]["snack"] == "30g Almonds, 20g Walnuts"
        assert data["dailyMacroTargets"]["calories"] == 2100 + round(654 * 0.2)

    def test_add_unknown_food_to_meal_slot(self, client, coach_headers):
        payload = {"slot": "snack", "foodId": "nope"}
        response = client.post("/api/clients/c1/meal-slots/food", json=payload, headers=coach_headers)
        assert response.status_code == 404

    def test_generate_diet_is_not_saved(self, client, coach_headers, ai_service, store):
        ai_service.generate_diet.return_value = AiDietResult(
            macros=Macros(calories=2500, protein=180, carbs=250, fats=80, fiber=35),
            meal_plan={"breakfast": "A", "lunch": "B", "dinner": "C", "snack": "D"},
        )
        response = client.post("/api/clients/c2/diet/generate", json={"gender": "Male"}, headers=coach_headers)
        assert response.status_code == 200
        assert response.json()["macros"]["calories"] == 2500
        ai_service.generate_diet.assert_called_once_with(age=33, weight=91.2, goal="Hypertrophy", gender="Male")
        assert store.get_client("c2").daily_macro_targets.calories == 2800

    def test_generate_diet_failure(self, client, coach_headers, ai_service):
        ai_service.generate_diet.side_effect = AIResponseError("No response from AI")
        response = client.post("/api/clients/c1/diet/generate", headers=coach_headers)
        assert response.status_code == 502
        assert response.json()["detail"] == "Failed to generate diet plan. Please try again."


# ============================================================================
# Workouts
# ============================================================================

class TestWorkouts:

    def test_assign_workout(self, client, coach_headers, store):
        payload = {
            "clientId": "c2",
            "dayOfWeek": "Wednesday",
            "title": "Pull Day",
            "exercises": [{"id": "x1", "name": "Deadlift", "sets": 3, "reps": "5"}],
        }
        response = client.post("/api/workouts", json=payload, headers=coach_headers)
        assert response.status_code == 201
        data = response.json()
        assert data["completed"] is False
        assert store.get_workout(data["id"]).title == "Pull Day"

    def test_assign_to_unknown_client(self, client, coach_headers):
        payload = {"clientId": "nope", "dayOfWeek": "Monday", "title": "X"}
        assert client.post("/api/workouts", json=payload, headers=coach_headers).status_code == 404

    def test_update_recomputes_completed(self, client, coach_headers):
        payload = {
            "clientId": "c1",
            "dayOfWeek": "Tuesday",
            "title": "Upper Body Push",
            "exercises": [{"id": "ex4", "name": "Bench Press", "sets": 4, "reps": "6-8", "completed": True}],
        }
        response = client.put("/api/workouts/wk2", json=payload, headers=coach_headers)
        assert response.status_code == 200
        assert response.json()["completed"] is True

    def test_update_unknown_workout(self, client, coach_headers):
        payload = {"clientId": "c1", "dayOfWeek": "Monday", "title": "X"}
        assert client.put("/api/workouts/nope", json=payload, headers=coach_headers).status_code == 404

    def test_generate_workout(self, client, coach_headers, ai_service):
        ai_service.generate_workout.return_value = AiWorkoutResult(
            title="Leg Day",
            exercises=[Exercise(id="ai-abc123xyz", name="Squat", sets=4, reps="8")],
        )
        payload = {"clientId": "c1", "dayOfWeek": "Friday", "focus": "Legs"}
        response = client.post("/api/workouts/generate", json=payload, headers=coach_headers)
        assert response.status_code == 200
        assert response.json()["title"] == "Leg Day"
        ai_service.generate_workout.assert_called_once_with("Loose 5kg & Build Muscle", "Friday", "Legs")

    def test_generate_workout_failure(self, client, coach_headers, ai_service):
        ai_service.generate_workout.side_effect = ValueError("bad json")
        payload = {"clientId": "c1", "dayOfWeek": "Friday"}
        assert client.post("/api/workouts/generate", json=payload, headers=coach_headers).status_code == 502

    def test_client_lists_own_workouts(self, client, client_headers):
        response = client.get("/api/workouts", headers=client_headers)
        assert {w["id"] for w in response.json()} == {"wk1", "wk2"}

    def test_toggle_all_exercises_completes_workout(self, client, client_headers, store):
        for exercise_id in ("ex4", "ex5"):
            response = client.post(f"/api/workouts/wk2/exercises/{exercise_id}/toggle", headers=client_headers)
            assert response.json()["completed"] is False
        response = client.post("/api/workouts/wk2/exercises/ex6/toggle", headers=client_headers)
        assert response.json()["completed"] is True
        assert store.get_workout("wk2").completed is True

    def test_toggle_unknown_exercise(self, client, client_headers):
        response = client.post("/api/workouts/wk2/exercises/nope/toggle", headers=client_headers)
        assert response.status_code == 404

    def test_cannot_toggle_someone_elses_workout(self, client):
        login = client.post("/api/auth/login", json={"role": "CLIENT", "identifier": "johns_gains", "secret": "JS-8821-B2A"})
        headers = {"Authorization": f"Bearer {login.json()['access_token']}"}
        assert client.post("/api/workouts/wk2/exercises/ex4/toggle", headers=headers).status_code == 404


# ============================================================================
# Food
# ============================================================================

class TestFood:

    def test_daily_totals(self, client, client_headers):
        response = client.get("/api/food/daily", headers=client_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["consumed"]["calories"] == 950
        assert data["targets"]["calories"] == 2100
        assert len(data["logs"]) == 2

    def test_log_catalog_food(self, client, client_headers, store):
        response = client.post("/api/food", json={"foodId": "c1", "grams": 150, "mealType": "Lunch"}, headers=client_headers)
        assert response.status_code == 201
        data = response.json()
        assert data["foodName"] == "White Rice (Cooked)"
        assert data["macros"]["calories"] == 195
        assert data["isVerified"] is True
        assert store.get_food_logs()[0].id == data["id"]

    def test_log_requires_food(self, client, client_headers):
        assert client.post("/api/food", json={"grams": 100}, headers=client_headers).status_code == 400

    def test_log_unknown_food(self, client, client_headers):
        assert client.post("/api/food", json={"foodId": "zzz"}, headers=client_headers).status_code == 404

    def test_delete_log(self, client, client_headers, store):
        response = client.delete("/api/food/f1", headers=client_headers)
        assert response.status_code == 204
        assert [log.id for log in store.get_food_logs()] == ["f2"]

    def test_delete_unknown_log(self, client, client_headers):
        assert client.delete("/api/food/nope", headers=client_headers).status_code == 404

    def test_search_catalog_hit_skips_ai(self, client, client_headers, ai_service):
        response = client.get("/api/food/search", params={"q": "almond"}, headers=client_headers)
        assert [f["id"] for f in response.json()] == ["ns1"]
        ai_service.search_food.assert_not_called()

    def test_search_short_miss_skips_ai(self, client, client_headers, ai_service):
        response = client.get("/api/food/search", params={"q": "xyz"}, headers=client_headers)
        assert response.json() == []
        ai_service.search_food.assert_not_called()

    def test_search_falls_back_to_ai(self, client, client_headers, ai_service):
        ai_service.search_food.return_value = FoodAnalysisResult(
            food_name="Pav Bhaji",
            grams=100,
            macros=Macros(calories=150, protein=4, carbs=20, fats=6, fiber=3),
            confidence=1,
        )
        response = client.get("/api/food/search", params={"q": "pav bhaji"}, headers=client_headers)
        results = response.json()
        assert len(results) == 1
        assert results[0]["name"] == "Pav Bhaji"
        assert results[0]["id"].startswith("ai-")
        assert results[0]["fiberPer100g"] == 3

    def test_search_ai_failure_is_empty(self, client, client_headers, ai_service):
        ai_service.search_food.side_effect = AIResponseError("No response from AI")
        response = client.get("/api/food/search", params={"q": "pav bhaji"}, headers=client_headers)
        assert response.status_code == 200
        assert response.json() == []

    def test_confident_photo_is_logged(self, client, client_headers, ai_service, store):
        ai_service.analyze_food_image.return_value = _analysis(0.9)
        payload = {"imageBase64": "aGVsbG8=", "mealType": "Dinner"}
        response = client.post("/api/food/photo", json=payload, headers=client_headers)
        data = response.json()
        assert data["accepted"] is True
        assert data["log"]["aiConfidence"] == 0.9
        assert data["log"]["isVerified"] is True
        assert store.get_food_logs()[0].food_name == "Paneer Tikka"

    def test_threshold_confidence_needs_review(self, client, client_headers, ai_service, store):
        ai_service.analyze_food_image.return_value = _analysis(0.75)
        response = client.post("/api/food/photo", json={"imageBase64": "aGVsbG8="}, headers=client_headers)
        data = response.json()
        assert data["accepted"] is False
        assert data["message"] == "Low confidence detection. Please review details."
        assert data["candidate"]["name"] == "Paneer Tikka"
        assert data["candidate"]["caloriesPer100g"] == 250
        assert data["suggestedGrams"] == 200
        assert len(store.get_food_logs()) == 2

    def test_very_low_confidence_is_marked(self, client, client_headers, ai_service):
        ai_service.analyze_food_image.return_value = _analysis(0.3)
        data = client.post("/api/food/photo", json={"imageBase64": "aGVsbG8="}, headers=client_headers).json()
        assert data["candidate"]["name"] == "Paneer Tikka (?)"

    def test_photo_failure(self, client, client_headers, ai_service):
        ai_service.analyze_food_image.side_effect = AIResponseError("No response from AI")
        response = client.post("/api/food/photo", json={"imageBase64": "aGVsbG8="}, headers=client_headers)
        assert response.status_code == 502
        assert response.json()["detail"] == "AI Analysis failed. Please enter manually."

    def test_quick_log_matches_catalog(self, client, client_headers, ai_service):
        data = client.get("/api/food/quick-log", params={"slot": "snack"}, headers=client_headers).json()
        assert data["grams"] == 30
        assert data["food"]["id"] == "ns1"
        ai_service.search_food.assert_not_called()

    def test_quick_log_without_grams_searches(self, client, client_headers):
        data = client.get("/api/food/quick-log", params={"slot": "breakfast"}, headers=client_headers).json()
        assert data["grams"] == 100
        assert data["query"] == "Oatmeal"

    def test_quick_log_falls_back_to_ai(self, client, client_headers, ai_service, store):
        jane = store.get_client("c1")
        store.update_client(jane.model_copy(update={"meal_plan": {"dinner": "250g Pav Bhaji"}}))
        ai_service.search_food.return_value = FoodAnalysisResult(
            food_name="Pav Bhaji",
            grams=100,
            macros=Macros(calories=150, protein=4, carbs=20, fats=6, fiber=3),
            confidence=1,
        )

        data = client.get("/api/food/quick-log", params={"slot": "dinner"}, headers=client_headers).json()

        assert data["grams"] == 250
        assert data["query"] == "Pav Bhaji"
        assert data.get("food") is None
        assert [f["name"] for f in data["results"]] == ["Pav Bhaji"]
        assert data["results"][0]["id"].startswith("ai-")
        ai_service.search_food.assert_called_once_with("Pav Bhaji")

    def test_quick_log_unknown_slot(self, client, client_headers):
        assert client.get("/api/food/quick-log", params={"slot": "brunch"}, headers=client_headers).status_code == 404


# ============================================================================
# Weights, measurements, progress, library
# ============================================================================

class TestWeights:

    def test_add_weight_updates_profile_and_stamps_trend(self, client, client_headers, store):
        response = client.post("/api/weights", json={"weightKg": 66.0}, headers=client_headers)
        assert response.status_code == 201
        data = response.json()
        assert data["trendStatus"] == "green"
        assert data["trendMessage"] == "On Track"
        assert store.get_client("c1").current_weight_kg == 66.0

    def test_rejects_non_positive_weight(self, client, client_headers):
        assert client.post("/api/weights", json={"weightKg": 0}, headers=client_headers).status_code == 400

    def test_list_and_filter(self, client, client_headers):
        logs = client.get("/api/weights", headers=client_headers).json()
        assert [w["id"] for w in logs] == ["w1", "w2", "w3", "w4", "w5"]

        filtered = client.get(
            "/api/weights",
            params={"start_date": "2024-05-22", "end_date": "2024-05-23"},
            headers=client_headers,
        ).json()
        assert [w["id"] for w in filtered] == ["w3", "w4"]

    def test_trend(self, client, client_headers):
        data = client.get("/api/weights/trend", headers=client_headers).json()
        assert data["status"] == "on_track"
        assert data["color"] == "green"


class TestMeasurements:

    def test_add_measurement(self, client, client_headers, store):
        response = client.post("/api/measurements", json={"waist": 71.5, "hips": 96.5}, headers=client_headers)
        assert response.status_code == 201
        assert response.json()["waist"] == 71.5
        assert len(store.get_measurements()) == 4

    def test_requires_chest_or_waist(self, client, client_headers):
        response = client.post("/api/measurements", json={"hips": 96}, headers=client_headers)
        assert response.status_code == 400

    def test_progress_photo(self, client, client_headers):
        response = client.post("/api/measurements/photo", json={"photoUrl": "data:image/jpeg;base64,AAAA"}, headers=client_headers)
        assert response.status_code == 201
        assert response.json()["notes"] == "Weekly Check-in Photo"

    def test_changes(self, client, client_headers):
        data = client.get("/api/measurements/changes", headers=client_headers).json()
        assert data["chest"] == -0.5
        assert data["waist"] == -1.5


class TestProgress:

    def test_summary(self, client, client_headers):
        response = client.get("/api/progress/summary", params={"hour": 8, "steps": 4000}, headers=client_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["greeting"] == "Good Morning"
        assert data["mealContext"] == "Breakfast Time"
        assert data["consumed"]["calories"] == 950
        assert data["trend"]["status"] == "on_track"
        assert data["steps"]["weeklyTotal"] == 24000
        assert data["steps"]["weeklyTarget"] == 56000
        assert data["measurementChanges"]["arms"] == 0.3

    def test_steps(self, client, client_headers):
        data = client.get("/api/progress/steps", params={"steps": 10000}, headers=client_headers).json()
        assert data["weeklyTotal"] == 60000
        assert data["remaining"] == 0
        assert data["dailyPercentage"] == 100


class TestLibrary:

    def test_foods(self, client, client_headers):
        foods = client.get("/api/library/foods", headers=client_headers).json()
        assert len(foods) > 50
        assert "caloriesPer100g" in foods[0]

    def test_exercises_by_muscle_group(self, client, coach_headers):
        exercises = client.get("/api/library/exercises", params={"muscleGroup": "chest"}, headers=coach_headers).json()
        assert exercises
        assert all(ex["muscleGroup"] == "Chest" for ex in exercises)


class TestMeta:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_version(self, client):
        assert client.get("/api/version").json()["app_name"] == "TitanFit API"
