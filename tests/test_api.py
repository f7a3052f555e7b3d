"""End-to-end tests for the HTTP endpoints."""

from datetime import date, datetime

from services.plan_service import local_weekday_key


def test_health_endpoint(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "connected"}


def test_health_metrics_reference_profile(client):
    body = {"profile": {"weight": 70, "height": 170, "age": 25, "gender": "male", "activity_level": "moderate"}, "goal": "maintenance"}
    response = client.post("/api/health/metrics", json=body)
    assert response.status_code == 200
    data = response.json()
    assert data["metrics"]["bmr"] == 1643
    assert data["metrics"]["tdee"] == 2547
    assert data["metrics"]["daily_calorie_goal"] == 2547
    assert data["bmi_category_label"] == "Normal"
    assert data["water_intake_ml"] == 2450
    assert data["ideal_weight_range"] == {"min": 53, "max": 72}


def test_health_metrics_empty_profile_uses_defaults(client):
    response = client.post("/api/health/metrics", json={})
    assert response.status_code == 200
    assert response.json()["metrics"]["bmr"] == 1643


def test_generate_meal_plan_offline(client):
    response = client.post("/api/meal-plans/generate", json={"goal": "weight_loss", "duration": 2, "allergies": ["yumurta"]})
    assert response.status_code == 200
    data = response.json()
    assert list(data["weekly_plan"]) == ["monday", "tuesday"]
    assert data["daily_calories"] == 1243
    breakfast_names = [d["breakfast"][0]["name"] for d in data["weekly_plan"].values()]
    assert "Menemen" not in breakfast_names


def test_generate_meal_plan_rejects_long_duration(client):
    response = client.post("/api/meal-plans/generate", json={"duration": 14})
    assert response.status_code == 422
    assert response.json()["error"]["message"] == "Validation error"


def test_personalized_plan_flow(client):
    response = client.post("/api/plans/personalized/u1", json={"goal": "weight_loss", "allergies": ["fındık"]})
    assert response.status_code == 201
    plan = response.json()
    assert plan["is_active"] is True
    assert "pazartesi" in plan["weekly_plan"]

    active = client.get("/api/plans/active/u1").json()
    assert active["id"] == plan["id"]

    today = client.get(f"/api/plans/{plan['id']}/today")
    assert today.status_code == 200
    assert today.json() == plan["weekly_plan"][local_weekday_key(date.today())]


def test_active_plan_missing_is_404(client):
    response = client.get("/api/plans/active/nobody")
    assert response.status_code == 404
    assert response.json()["error"]["status_code"] == 404


def test_food_analysis_returns_meal_when_user_given(client):
    response = client.post("/api/food-analysis", json={"image_url": "file://x.jpg", "user_id": "u1"})
    assert response.status_code == 200
    data = response.json()
    assert data["analysis"]["analysis_type"] == "mock"
    assert data["meal"]["user_id"] == "u1"

    without_user = client.post("/api/food-analysis", json={"image_url": "file://x.jpg"}).json()
    assert without_user["meal"] is None


def test_food_analysis_requires_image_url(client):
    assert client.post("/api/food-analysis", json={"image_url": ""}).status_code == 422


def test_meal_log_flow(client):
    now = datetime.now().replace(microsecond=0).isoformat()
    body = {"user_id": "u1", "name": "Menemen", "total_calories": 500, "total_protein": 25,
            "total_carbs": 20, "total_fat": 30, "meal_type": "breakfast", "created_at": now}
    created = client.post("/api/meals", json=body)
    assert created.status_code == 201
    meal_id = created.json()["id"]

    today = client.get("/api/meals/u1/today", params={"target_calories": 2000}).json()
    assert today["totals"]["total_calories"] == 500
    assert today["progress"]["calories"] == 25
    assert today["meals"][0]["id"] == meal_id

    week = client.get("/api/meals/u1/week").json()
    assert week[-1]["total_calories"] == 500

    assert client.delete(f"/api/meals/{meal_id}").status_code == 204
    assert client.delete(f"/api/meals/{meal_id}").status_code == 404
    assert client.get("/api/meals/u1/today").json()["meals"] == []


def test_meal_log_rejects_negative_calories(client):
    body = {"user_id": "u1", "name": "x", "total_calories": -5, "meal_type": "snack"}
    response = client.post("/api/meals", json=body)
    assert response.status_code == 422
    fields = [e["field"] for e in response.json()["error"]["details"]["validation_errors"]]
    assert "body.total_calories" in fields


def test_health_metrics_huge_weight_is_not_a_server_error(client):
    response = client.post("/api/health/metrics", json={"profile": {"weight": 1e308}})
    assert response.status_code == 200
    assert response.json()["water_intake_ml"] == 0


def test_meal_completion_flow(client):
    plan = client.post("/api/plans/personalized/u1", json={"goal": "maintenance"}).json()
    day_key = local_weekday_key(date.today())
    entry = plan["weekly_plan"][day_key]["breakfast"][0]
    body = {"user_id": "u1", "day_of_week": day_key, "meal_type": "breakfast", "meal_id": entry["id"]}

    checked = client.post(f"/api/plans/{plan['id']}/completions", json=body)
    assert checked.status_code == 200
    assert checked.json()["completed"] is True

    day = client.get(f"/api/plans/{plan['id']}/completions/u1").json()
    assert day["day_of_week"] == day_key
    assert day["total_meals"] == 4
    assert day["percentage"] == 25

    week = client.get(f"/api/plans/{plan['id']}/completions/u1/week").json()
    assert week == {date.today().isoformat(): 1}

    unchecked = client.post(f"/api/plans/{plan['id']}/completions", json=body).json()
    assert unchecked["completed"] is False
    assert client.get(f"/api/plans/{plan['id']}/completions/u1").json()["completions"] == []


def test_meal_completion_rejects_unknown_entry_and_day(client):
    plan = client.post("/api/plans/personalized/u1", json={}).json()
    body = {"user_id": "u1", "day_of_week": "pazartesi", "meal_type": "lunch", "meal_id": "missing"}
    assert client.post(f"/api/plans/{plan['id']}/completions", json=body).status_code == 404
    body["day_of_week"] = "monday"
    assert client.post(f"/api/plans/{plan['id']}/completions", json=body).status_code == 422
    assert client.post("/api/plans/999/completions", json={**body, "day_of_week": "cuma"}).status_code == 404


def test_health_data_flow(client):
    assert client.get("/api/health-data/u1/today").json()["data"] is None

    client.post("/api/health-data/u1/water", json={"amount_ml": 500})
    water = client.post("/api/health-data/u1/water", json={"amount_ml": 500}).json()
    assert water["water_intake"] == 1000
    assert client.post("/api/health-data/u1/steps", json={"steps": 12000}).json()["steps"] == 12000
    assert client.post("/api/health-data/u1/sleep", json={"hours": 6}).json()["sleep_hours"] == 6
    assert client.post("/api/health-data/u1/weight", json={"weight": 71.5}).json()["weight"] == 71.5

    today = client.get("/api/health-data/u1/today").json()
    assert today["progress"] == {"water": 50, "steps": 100, "sleep": 75, "calories": 0}

    week = client.get("/api/health-data/u1/week", params={"chart_field": "steps"}).json()
    assert week["averages"]["steps"] == 12000
    assert week["chart"][-1]["value"] == 12000
    assert len(week["chart"]) == 7


def test_health_data_validation(client):
    assert client.post("/api/health-data/u1/water", json={"amount_ml": 0}).status_code == 422
    assert client.post("/api/health-data/u1/sleep", json={"hours": 25}).status_code == 422
    assert client.get("/api/health-data/u1/week", params={"chart_field": "mood"}).status_code == 422
    assert client.get("/api/health-data/goals").json()["steps"] == 10000
