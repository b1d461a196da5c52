from datetime import datetime, timedelta


def _medication(user_id, **overrides):
    return {
        "user_id": user_id,
        "name": "Vitamin D",
        "dosage": "1 pill",
        "frequency": "daily",
        "time": '["08:00"]',
        "start_date": "2024-03-01T00:00:00",
        **overrides,
    }


def test_medication_crud(client, user):
    created = client.post("/api/medications", json=_medication(user.id))
    assert created.status_code == 201
    med_id = created.json()["id"]
    client.post("/api/medications", json=_medication(user.id, name="Iron", active=False))

    assert len(client.get(f"/api/medications/{user.id}").json()) == 2
    active = client.get(f"/api/medications/{user.id}", params={"active": "true"}).json()
    assert [m["name"] for m in active] == ["Vitamin D"]

    updated = client.put(f"/api/medications/{med_id}", json={"dosage": "2 pills"})
    assert updated.json()["dosage"] == "2 pills"
    assert updated.json()["name"] == "Vitamin D"
    assert client.get(f"/api/medications/detail/{med_id}").json()["dosage"] == "2 pills"

    assert client.delete(f"/api/medications/{med_id}").json() == {"success": True}
    assert client.get(f"/api/medications/detail/{med_id}").status_code == 404
    assert client.delete(f"/api/medications/{med_id}").status_code == 404
    assert client.put(f"/api/medications/{med_id}", json={"dosage": "x"}).status_code == 404


def test_medication_logs(client, user):
    med_id = client.post("/api/medications", json=_medication(user.id)).json()["id"]
    log = {
        "medication_id": med_id,
        "user_id": user.id,
        "taken": False,
        "scheduled_time": "2024-03-10T08:00:00",
    }
    created = client.post("/api/medication-logs", json=log)
    assert created.status_code == 201
    log_id = created.json()["id"]
    assert client.post("/api/medication-logs", json={**log, "medication_id": 999}).status_code == 404

    listed = client.get(f"/api/medication-logs/{user.id}", params={"medication_id": med_id})
    assert [l["id"] for l in listed.json()] == [log_id]
    assert client.get(f"/api/medication-logs/{user.id}", params={"medication_id": 999}).json() == []

    before = datetime.now() - timedelta(seconds=1)
    taken = client.put(f"/api/medication-logs/{log_id}", json={"taken": True}).json()
    assert taken["taken"] is True
    assert datetime.fromisoformat(taken["taken_time"]) >= before

    undone = client.put(f"/api/medication-logs/{log_id}", json={"taken": False}).json()
    assert undone["taken"] is False
    assert undone["taken_time"] is None
    assert client.put("/api/medication-logs/999", json={"taken": True}).status_code == 404


def test_meals_filtered_by_day(client, user):
    for when in ("2024-03-09T19:00:00", "2024-03-10T08:00:00", "2024-03-10T23:59:00"):
        meal = {
            "user_id": user.id,
            "name": "Meal",
            "type": "dinner",
            "calories": 500,
            "date": when,
            "foods": ["Rice", "Beans"],
        }
        assert client.post("/api/meals", json=meal).status_code == 201

    day = client.get(f"/api/meals/{user.id}", params={"date": "2024-03-10"}).json()
    assert [m["date"] for m in day] == ["2024-03-10T08:00:00", "2024-03-10T23:59:00"]
    assert day[0]["foods"] == ["Rice", "Beans"]
    assert len(client.get(f"/api/meals/{user.id}").json()) == 3
    assert client.get(f"/api/meals/{user.id}", params={"date": "10-03-2024"}).status_code == 400

    meal_id = day[0]["id"]
    assert client.put(f"/api/meals/{meal_id}", json={"type": "brunch"}).status_code == 422
    assert client.put(f"/api/meals/{meal_id}", json={"calories": 650}).json()["calories"] == 650
    assert client.delete(f"/api/meals/{meal_id}").json() == {"success": True}
    assert client.get(f"/api/meals/detail/{meal_id}").status_code == 404


def test_goal_progress_is_computed_by_server(client, user):
    goal = {
        "user_id": user.id,
        "title": "Lose weight",
        "category": "weight",
        "target": "60",
        "current_value": "70",
        "initial_value": "70",
        "start_date": "2024-03-01T00:00:00",
    }
    created = client.post("/api/goals", json=goal).json()
    assert created["progress"] == 0
    assert created["icon"] == "monitor_weight"

    goal_id = created["id"]
    assert client.put(f"/api/goals/{goal_id}", json={"current_value": "65"}).json()["progress"] == 50
    assert client.put(f"/api/goals/{goal_id}", json={"completed": True}).json()["progress"] == 100
    assert client.get(f"/api/goals/detail/{goal_id}").json()["completed"] is True
    assert [g["id"] for g in client.get(f"/api/goals/{user.id}").json()] == [goal_id]

    assert client.delete(f"/api/goals/{goal_id}").json() == {"success": True}
    assert client.put(f"/api/goals/{goal_id}", json={"title": "x"}).status_code == 404


def test_updates_reject_null_for_required_fields(client, user):
    goal = {
        "user_id": user.id,
        "title": "Walk more",
        "category": "exercise",
        "target": "10000",
        "current_value": "5000",
        "start_date": "2024-03-01T00:00:00",
    }
    goal_id = client.post("/api/goals", json=goal).json()["id"]
    assert client.put(f"/api/goals/{goal_id}", json={"title": None}).status_code == 422
    assert client.put(f"/api/goals/{goal_id}", json={"completed": None}).status_code == 422
    assert client.get(f"/api/goals/detail/{goal_id}").json()["title"] == "Walk more"

    # nullable columns can still be cleared
    cleared = client.put(f"/api/goals/{goal_id}", json={"target_date": None, "icon": None})
    assert cleared.status_code == 200

    med_id = client.post("/api/medications", json=_medication(user.id)).json()["id"]
    assert client.put(f"/api/medications/{med_id}", json={"active": None}).status_code == 422
    assert client.put(f"/api/medications/{med_id}", json={"end_date": None}).status_code == 200


def test_exercise_logs_newest_first(client, user):
    for day in (1, 5, 3):
        log = {
            "user_id": user.id,
            "type": "running",
            "duration": 30,
            "date": f"2024-03-0{day}T07:00:00",
        }
        assert client.post("/api/exercise-logs", json=log).status_code == 201

    logs = client.get(f"/api/exercise-logs/{user.id}").json()
    assert [l["date"][:10] for l in logs] == ["2024-03-05", "2024-03-03", "2024-03-01"]

    params = {"start_date": "2024-03-01", "end_date": "2024-03-03"}
    ranged = client.get(f"/api/exercise-logs/{user.id}", params=params).json()
    assert [l["date"][:10] for l in ranged] == ["2024-03-03", "2024-03-01"]
    assert client.get(f"/api/exercise-logs/{user.id}", params={"start_date": "2024-03-01"}).status_code == 400

    log_id = logs[0]["id"]
    assert client.put(f"/api/exercise-logs/{log_id}", json={"duration": -5}).status_code == 422
    assert client.put(f"/api/exercise-logs/{log_id}", json={"duration": 45}).json()["duration"] == 45
    assert client.delete(f"/api/exercise-logs/{log_id}").json() == {"success": True}
    assert client.get(f"/api/exercise-logs/detail/{log_id}").status_code == 404


def test_appointments(client, user):
    now = datetime.now().replace(microsecond=0)
    for title, when in (("Past", now - timedelta(days=3)), ("Soon", now + timedelta(days=2))):
        appointment = {
            "user_id": user.id,
            "title": title,
            "date": when.isoformat(),
            "duration": 30,
        }
        assert client.post("/api/appointments", json=appointment).status_code == 201

    listed = client.get(f"/api/appointments/{user.id}").json()
    assert [a["title"] for a in listed] == ["Past", "Soon"]
    assert listed[0]["status"] == "scheduled"
    upcoming = client.get(f"/api/appointments/{user.id}/upcoming").json()
    assert [a["title"] for a in upcoming] == ["Soon"]
    grouped = client.get(f"/api/appointments/{user.id}/grouped").json()
    assert [a["title"] for a in grouped["past"]] == ["Past"]
    assert [a["title"] for a in grouped["upcoming"]] == ["Soon"]

    apt_id = listed[1]["id"]
    updated = client.put(f"/api/appointments/{apt_id}", json={"status": "confirmed"})
    assert updated.json()["status"] == "confirmed"
    assert client.put(f"/api/appointments/{apt_id}", json={"status": "maybe"}).status_code == 422
    assert client.get(f"/api/appointments/detail/{apt_id}").json()["title"] == "Soon"
    assert client.delete(f"/api/appointments/{apt_id}").json() == {"success": True}
    assert client.delete(f"/api/appointments/{apt_id}").status_code == 404


def test_medication_adherence(client, user):
    med_id = client.post("/api/medications", json=_medication(user.id)).json()["id"]
    for day, taken in ((8, True), (9, True), (10, False), (20, True)):
        log = {
            "medication_id": med_id,
            "user_id": user.id,
            "taken": taken,
            "scheduled_time": f"2024-03-{day:02d}T08:00:00",
        }
        client.post("/api/medication-logs", json=log)

    url = f"/api/medication-logs/{user.id}/adherence"
    assert client.get(url).json() == {"scheduled": 4, "taken": 3, "percentage": 75}
    params = {"start_date": "2024-03-08", "end_date": "2024-03-10"}
    assert client.get(url, params=params).json() == {"scheduled": 3, "taken": 2, "percentage": 67}
    assert client.get(url, params={"end_date": "2024-03-10"}).status_code == 400
