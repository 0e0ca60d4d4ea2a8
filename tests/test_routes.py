from __future__ import annotations

import io

from PIL import Image


def test_anonymous_is_redirected_to_login(client):
    for path in ("/", "/dashboard", "/students", "/personal-details", "/reports/students.csv"):
        resp = client.get(path)
        assert resp.status_code == 302, path
        assert resp.location.endswith("/login")


def test_student_is_redirected_from_admin_routes(student_client):
    for path in ("/dashboard", "/rooms", "/fees", "/attendance", "/reports", "/personal-details/S002"):
        resp = student_client.get(path)
        assert resp.status_code == 302, path
        assert resp.location.endswith("/personal-details")


def test_student_sees_own_profile(student_client):
    resp = student_client.get("/personal-details")

    assert resp.status_code == 200
    assert resp.get_json()["student"]["id"] == "S001"


def test_admin_views_any_profile(admin_client):
    assert admin_client.get("/personal-details/S003").get_json()["student"]["name"] == "Charlie Brown"
    assert admin_client.get("/personal-details/S999").status_code == 404
    # admin identity has no linked student record
    assert admin_client.get("/personal-details").status_code == 404


def test_login_with_unknown_student_fails(client):
    resp = client.post("/login", json={"email": "ghost@example.com", "role": "student"})

    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "message": "User not found"}


def test_login_page_redirects_when_authenticated(admin_client):
    resp = admin_client.get("/login")

    assert resp.status_code == 302


def test_logout_returns_to_anonymous(student_client):
    assert student_client.post("/logout").status_code == 200

    assert student_client.get("/api/nav").status_code == 302


def test_nav_is_filtered_by_role(student_client):
    items = student_client.get("/api/nav").get_json()["items"]

    assert items == [{"path": "/personal-details", "label": "My Profile"}]


def test_admin_nav_lists_every_screen(admin_client):
    items = admin_client.get("/api/nav").get_json()["items"]

    assert len(items) == 7


def test_malformed_session_falls_back_to_anonymous(client):
    with client.session_transaction() as sess:
        sess["hms_user"] = {"role": "admin"}

    resp = client.get("/dashboard")

    assert resp.status_code == 302
    assert resp.location.endswith("/login")
    with client.session_transaction() as sess:
        assert "hms_user" not in sess


def test_dashboard_stats(admin_client):
    stats = admin_client.get("/dashboard").get_json()["stats"]

    assert stats["total_students"] == 5
    assert stats["total_rooms"] == 5


def test_allocate_and_deallocate_over_http(admin_client):
    resp = admin_client.post("/rooms/R201/allocate", json={"student_id": "S005"})
    body = resp.get_json()
    assert resp.status_code == 200
    assert body["data"]["room"]["occupants"] == ["S005"]
    assert body["data"]["student"]["room_id"] == "R201"

    resp = admin_client.post("/rooms/R101/allocate", json={"student_id": "S003"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Room is full or does not exist."

    resp = admin_client.post("/students/S001/deallocate")
    assert resp.status_code == 200
    rooms = {r["id"]: r for r in admin_client.get("/rooms").get_json()["rooms"]}
    assert rooms["R101"]["occupants"] == ["S002"]


def test_student_crud_over_http(admin_client):
    resp = admin_client.post(
        "/students",
        json={"name": "Fiona", "email": "fiona@example.com", "phone": "1", "address": "2", "course": "Law"},
    )
    assert resp.status_code == 201
    new_id = resp.get_json()["data"]["id"]

    resp = admin_client.put(f"/students/{new_id}", json={"course": "Medicine"})
    assert resp.get_json()["data"]["course"] == "Medicine"

    assert admin_client.delete(f"/students/{new_id}").status_code == 200
    assert admin_client.delete(f"/students/{new_id}").status_code == 404

    resp = admin_client.post("/students", json={"name": "No Email"})
    assert resp.status_code == 400


def test_fee_update_changes_due_report(admin_client):
    before = admin_client.get("/reports/fees-due.csv")
    assert before.headers["Content-Disposition"] == "attachment; filename=fee_due_report.csv"
    assert b"S002" in before.data

    resp = admin_client.post("/fees/F02/status", json={"status": "Paid"})
    assert resp.status_code == 200

    after = admin_client.get("/reports/fees-due.csv")
    assert b"S002" not in after.data

    paid = admin_client.get("/fees?status=Paid").get_json()["fees"]
    assert "F02" in [f["id"] for f in paid]


def test_fee_update_errors(admin_client):
    assert admin_client.post("/fees/F99/status", json={"status": "Paid"}).status_code == 404
    assert admin_client.post("/fees/F01/status", json={"status": "Lost"}).status_code == 400


def test_report_downloads(admin_client):
    names = [r["name"] for r in admin_client.get("/reports").get_json()["reports"]]
    assert names == ["students", "fees-due", "room-occupancy"]

    resp = admin_client.get("/reports/students.csv")
    assert resp.mimetype == "text/csv"
    assert "hostel_students.csv" in resp.headers["Content-Disposition"]

    resp = admin_client.get("/reports/room-occupancy.csv")
    assert "room_occupancy_report.csv" in resp.headers["Content-Disposition"]

    assert admin_client.get("/reports/unknown.csv").status_code == 404


def test_attendance_marking_and_history(admin_client):
    resp = admin_client.post(
        "/attendance",
        json={"date": "2030-05-01", "records": [{"student_id": "S004", "present": True}, {"student_id": "S005", "present": False}]},
    )
    assert resp.status_code == 200

    rows = {r["student_id"]: r for r in admin_client.get("/attendance?date=2030-05-01").get_json()["rows"]}
    assert rows["S004"]["present"] is True
    assert rows["S001"]["recorded"] is False

    history = admin_client.get("/attendance/history?student_id=S004&start_date=2030-05-01&end_date=2030-05-31")
    records = history.get_json()["records"]
    assert [r["date"] for r in records] == ["2030-05-01"]
    assert records[0]["status"] == "Present"


def test_attendance_history_defaults_end_to_today(admin_client):
    admin_client.post("/attendance", json={"date": "2099-01-01", "records": [{"student_id": "S001", "present": True}]})

    default = admin_client.get("/attendance/history").get_json()["records"]
    unbounded = admin_client.get("/attendance/history?end_date=").get_json()["records"]

    assert "2099-01-01" not in [r["date"] for r in default]
    assert "2099-01-01" in [r["date"] for r in unbounded]


def test_attendance_rejects_bad_input(admin_client):
    assert admin_client.post("/attendance", json={"date": "yesterday", "records": []}).status_code == 400
    assert admin_client.post("/attendance", json={"date": "2030-05-01", "records": [{"student_id": "S999"}]}).status_code == 400
    assert admin_client.get("/attendance?date=31-12-2030").status_code == 400


def test_student_uploads_own_picture(student_client):
    buf = io.BytesIO()
    Image.new("RGB", (2, 2)).save(buf, "PNG")
    buf.seek(0)

    resp = student_client.post(
        "/personal-details/picture",
        data={"picture": (buf, "me.png")},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 200
    assert resp.get_json()["data"]["profile_picture_url"].startswith("data:image/png;base64,")


def test_picture_upload_rejects_other_extensions(admin_client):
    resp = admin_client.post(
        "/personal-details/S002/picture",
        data={"picture": (io.BytesIO(b"GIF89a"), "me.gif")},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 400


def test_unknown_path_is_json_404(client):
    resp = client.get("/no/such/page")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_create_student_rejects_null_fields(admin_client):
    resp = admin_client.post(
        "/students",
        json={"name": None, "email": "n@example.com", "phone": None, "address": None, "course": None},
    )

    assert resp.status_code == 400
    assert "n@example.com" not in [s["email"] for s in admin_client.get("/students").get_json()["students"]]


def test_update_student_rejects_null_field(admin_client):
    resp = admin_client.put("/students/S003", json={"course": None})

    assert resp.status_code == 400
    assert admin_client.get("/personal-details/S003").get_json()["student"]["course"] == "Physics"
