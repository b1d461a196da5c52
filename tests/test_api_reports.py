from datetime import datetime, timedelta

import pytest

from core.mock_data import seed_demo_data

SECTIONS = [
    "weight",
    "blood-pressure",
    "heart-rate",
    "sleep",
    "nutrition",
    "exercise",
    "health-score",
    "summary",
]


@pytest.fixture
def demo_user(db):
    return seed_demo_data(db)


def test_overview_covers_every_domain(client, demo_user):
    response = client.get(f"/api/reports/{demo_user.id}", params={"range": "year"})
    assert response.status_code == 200
    report = response.json()
    today = datetime.now().date()
    assert report["end_date"] == today.isoformat()
    assert report["weight"]["latest"] == 65.4
    assert report["blood_pressure"]["latest_systolic"] == 120
    assert report["heart_rate"]["status"] == "normal"
    assert report["sleep"]["last_night"] == 7.5
    assert report["sleep"]["target"] == 8
    assert report["nutrition"]["today"]["calories"] == 970
    assert 0 <= report["health_score"]["score"] <= 100


def test_default_range_is_month(client, demo_user):
    report = client.get(f"/api/reports/{demo_user.id}").json()
    start = datetime.now().date() - timedelta(days=30)
    assert report["start_date"] == start.isoformat()


@pytest.mark.parametrize("section", SECTIONS)
def test_sections_accept_presets(client, demo_user, section):
    response = client.get(
        f"/api/reports/{demo_user.id}/{section}", params={"range": "week"}
    )
    assert response.status_code == 200


def test_explicit_dates_override_preset(client, user):
    params = {"range": "week", "start_date": "2024-01-01", "end_date": "2024-01-31"}
    report = client.get(f"/api/reports/{user.id}", params=params).json()
    assert (report["start_date"], report["end_date"]) == ("2024-01-01", "2024-01-31")


@pytest.mark.parametrize(
    "params",
    [
        {"range": "decade"},
        {"start_date": "2024-01-01"},
        {"start_date": "2024-02-01", "end_date": "2024-01-01"},
        {"start_date": "Jan 1", "end_date": "2024-01-31"},
    ],
)
def test_bad_ranges_are_rejected(client, user, params):
    assert client.get(f"/api/reports/{user.id}", params=params).status_code == 400


def test_unknown_user_has_no_report(client):
    assert client.get("/api/reports/999").status_code == 404


def test_empty_history_gives_well_typed_empty_report(client, user):
    report = client.get(f"/api/reports/{user.id}/health-score").json()
    assert report["score"] == 0
    sleep = client.get(f"/api/reports/{user.id}/sleep").json()
    assert sleep["nights"] == []
    assert sleep["weekly_average_display"] == "No data"


def test_summary_without_llm_is_deterministic(client, demo_user):
    url = f"/api/reports/{demo_user.id}/summary"
    first = client.get(url, params={"range": "month"}).json()
    second = client.get(url, params={"range": "month"}).json()
    assert first == second
    assert first["text"].startswith(f"Your health score is {first['score']} out of 100.")
    assert first["weakest_component"] in {"weight", "activity", "sleep", "nutrition"}
    assert first["signals_used"]["health_score"] == first["score"]
