from datetime import date, datetime, timedelta

from sitepulse.models.report import DailyTargetReport, HourlyReport

T0 = datetime(2024, 6, 3, 9, 0, 0)


def _daily(db, user_id, minutes, **fields):
    report = DailyTargetReport(
        user_id=user_id,
        report_date=fields.pop("report_date", date(2024, 6, 3)),
        location_type=fields.pop("location_type", "office"),
        created_at=T0 + timedelta(minutes=minutes),
        **fields,
    )
    db.add(report)
    db.commit()
    return report


def _hourly(db, user_id, minutes, **fields):
    report = HourlyReport(
        user_id=user_id,
        report_date=fields.pop("report_date", date(2024, 6, 3)),
        created_at=T0 + timedelta(minutes=minutes),
        **fields,
    )
    db.add(report)
    db.commit()
    return report


def _feed(client, account, headers, **params):
    response = client.get("/api/employee-activity/activities", headers=headers(account), params=params)
    assert response.status_code == 200
    return response.json()


def test_new_employee_has_empty_feed(client, register, headers):
    body = _feed(client, register("alice"), headers)
    assert body == {"success": True, "activities": [], "pagination": {"page": 1, "limit": 20, "total": 0}}


def test_employee_sees_own_and_legacy_rows_only(client, db, register, headers):
    alice = register("alice")
    bob = register("bob")
    _daily(db, alice["id"], 1, project_no="P-1")
    _daily(db, None, 2, incharge="alice", project_no="LEGACY")
    _daily(db, bob["id"], 3, project_no="P-BOB")
    _hourly(db, alice["id"], 4, project_name="P-1", hourly_activity="cabling")
    _hourly(db, bob["id"], 5, project_name="P-BOB", hourly_activity="testing")

    activities = _feed(client, alice, headers)["activities"]

    assert [(a["reportType"], a["projectNo"]) for a in activities] == [
        ("hourly", "P-1"),
        ("daily", "LEGACY"),
        ("daily", "P-1"),
    ]
    legacy = activities[1]
    assert legacy["username"] == "alice"
    assert legacy["userId"] is None
    assert legacy["employeeId"] == "N/A"


def test_rows_share_one_shape(client, db, register, headers):
    alice = register("alice")
    _daily(db, alice["id"], 1, site_location="Pune", daily_target_achieved="panel wired")
    _hourly(db, alice["id"], 2, hourly_activity="commissioning", daily_target="panel", problem_faced_by_engineer_hourly="no power")

    hourly, daily = _feed(client, alice, headers)["activities"]

    assert set(hourly) == set(daily)
    assert hourly["hourlyActivity"] == "commissioning"
    assert hourly["dailyTargetAchieved"] == "panel"
    assert hourly["problemFaced"] == "no power"
    assert hourly["siteLocation"] is None and hourly["locationType"] is None
    assert daily["siteLocation"] == "Pune"
    assert daily["hourlyActivity"] is None
    assert daily["employeeId"] == alice["employeeId"]


def test_supervisors_see_everyone(client, db, register, headers):
    alice = register("alice")
    bob = register("bob")
    lead = register("gina", role="Group Leader")
    _daily(db, alice["id"], 1)
    _daily(db, bob["id"], 2)
    _hourly(db, bob["id"], 3, hourly_activity="x")
    _daily(db, None, 4, incharge="someone-else")

    body = _feed(client, lead, headers)
    assert body["pagination"]["total"] == 4
    assert {a["username"] for a in body["activities"]} == {"alice", "bob", "someone-else"}


def test_pagination_slices_merged_feed(client, db, register, headers):
    alice = register("alice")
    for minute in range(5):
        _daily(db, alice["id"], minute, project_no=f"D{minute}")
        _hourly(db, alice["id"], minute, project_name=f"H{minute}", hourly_activity="x")

    body = _feed(client, alice, headers, page=2, limit=3)

    assert body["pagination"] == {"page": 2, "limit": 3, "total": 10}
    assert len(body["activities"]) == 3
    created = [a["createdAt"] for a in body["activities"]]
    assert created == sorted(created, reverse=True)


def test_bad_paging_values_fall_back_to_defaults(client, register, headers):
    body = _feed(client, register("alice"), headers, page="abc", limit="0")
    assert body["pagination"]["page"] == 1
    assert body["pagination"]["limit"] == 20


def test_summary_depends_on_role(client, db, register, headers):
    alice = register("alice")
    manager = register("mona", role="Manager")
    _daily(db, alice["id"], 1, incharge="alice")
    _daily(db, alice["id"], 2, incharge="alice")
    _daily(db, None, 3, incharge="legacy-user")

    own = client.get("/api/employee-activity/summary", headers=headers(alice)).json()
    assert own == {"summary": {"totalActivities": 2}}

    everyone = client.get("/api/employee-activity/summary", headers=headers(manager)).json()
    assert everyone == {"summary": {"totalActivities": 3, "activeEmployees": 2}}


def test_absentees(client, db, register, headers):
    alice = register("alice")
    bob = register("bob")
    manager = register("mona", role="Manager")
    _daily(db, alice["id"], 1, report_date=date(2024, 6, 3))

    url = "/api/employee-activity/absentees"
    listing = client.get(url, headers=headers(manager), params={"date": "2024-06-03"}).json()
    assert listing["date"] == "2024-06-03"
    assert [u["username"] for u in listing["absentees"]] == ["bob", "mona"]

    mine = client.get(url, headers=headers(alice), params={"date": "2024-06-03"}).json()
    assert mine == {"date": "2024-06-03", "hasSubmitted": True, "absent": False}

    theirs = client.get(url, headers=headers(bob), params={"date": "2024-06-03"}).json()
    assert theirs["absent"] is True

    bad = client.get(url, headers=headers(bob), params={"date": "June 3rd"})
    assert bad.status_code == 400
