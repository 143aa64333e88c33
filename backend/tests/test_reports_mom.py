from datetime import datetime, timedelta

from sitepulse.models.report import HourlyReport

T0 = datetime(2024, 6, 3, 9, 0, 0)


def test_daily_report_is_attributed_to_caller(client, register, headers):
    alice = register("alice")

    response = client.post(
        "/api/reports/daily",
        headers=headers(alice),
        json={"report_date": "2024-06-03", "location_type": " Site ", "project_no": "P-7", "in_time": "09:00"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["user_id"] == alice["id"]
    assert body["incharge"] == "alice"
    assert body["location_type"] == "site"

    feed = client.get("/api/employee-activity/activities", headers=headers(alice)).json()["activities"]
    assert feed[0]["projectNo"] == "P-7"


def test_reports_require_date_and_activity(client, register, headers):
    alice = register("alice")
    assert client.post("/api/reports/daily", headers=headers(alice), json={}).status_code == 400

    missing_activity = client.post("/api/reports/hourly", headers=headers(alice), json={"report_date": "2024-06-03"})
    assert missing_activity.status_code == 400
    assert missing_activity.json()["message"] == "Hourly activity is required"

    ok = client.post(
        "/api/reports/hourly",
        headers=headers(alice),
        json={"report_date": "2024-06-03", "time_period": "9-10", "hourly_activity": "loop check"},
    )
    assert ok.status_code == 201
    assert ok.json()["time_period"] == "9-10"


def test_mom_prefill_uses_three_latest_hourly_reports(client, db, register, headers):
    alice = register("alice")
    for minute in range(4):
        db.add(HourlyReport(
            user_id=alice["id"],
            report_date=T0.date(),
            project_name=f"P{minute}",
            daily_target=f"target {minute}" if minute != 3 else None,
            problem_faced_by_engineer_hourly="relay fault" if minute == 3 else None,
            created_at=T0 + timedelta(minutes=minute),
        ))
    db.commit()

    body = client.get("/api/mom/prefill", headers=headers(alice)).json()

    observations = body["observation"].split("\n")
    solutions = body["solution"].split("\n")
    assert len(observations) == len(solutions) == 3
    assert observations[0] == "1. [2024-06-03] Project: P3 | By: alice | Activity: - | Problem: relay fault"
    assert solutions[0] == "1. [2024-06-03] Action: relay fault (P3)"
    assert solutions[1] == "2. [2024-06-03] Work: target 2 (P2)"


def test_mom_prefill_is_blank_without_hourly_reports(client, register, headers):
    body = client.get("/api/mom/prefill", headers=headers(register("alice"))).json()
    assert body == {"observation": "", "solution": ""}


def test_mom_is_saved_with_location(client, register, headers):
    alice = register("alice")
    payload = {
        "customerName": "Acme",
        "momDate": "2024-06-03",
        "enggName": "alice",
        "observation": "panel ok",
        "conclusion": " ",
        "latitude": 18.52,
        "longitude": 73.85,
    }

    created = client.post("/api/mom", headers=headers(alice), json=payload)

    assert created.status_code == 201
    body = created.json()
    assert body["customer_name"] == "Acme"
    assert body["conclusion"] is None
    assert body["latitude"] == 18.52

    listed = client.get("/api/mom", headers=headers(alice)).json()
    assert [m["id"] for m in listed] == [body["id"]]


def test_mom_rejects_impossible_coordinates(client, register, headers):
    response = client.post("/api/mom", headers=headers(register("alice")), json={"latitude": 123})
    assert response.status_code == 400
    assert "latitude" in response.json()["message"]
