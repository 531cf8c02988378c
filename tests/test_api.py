# /tests/test_api.py

import json
from datetime import date, timedelta

import pytest

from app.core.exceptions import AIUnavailableError
from app.services.database_service import DatabaseService

STUDENT = {
    "name": "Asha Verma",
    "email": "asha@example.edu",
    "password": "s3cret-pass",
    "rollNumber": "CS-2024-017",
    "department": "Computer Science",
    "semester": 4,
}

METRICS = {"attendance": 80, "assignmentScore": 70, "internalMarks": 60, "projectMarks": 75, "finalExamMarks": 65}


@pytest.fixture
def registered(client):
    """Registers the default student and returns (student, auth headers)."""
    response = client.post("/api/students/register", json=STUDENT)
    assert response.status_code == 201
    login = client.post("/api/students/login", json={"email": STUDENT["email"], "password": STUDENT["password"]})
    assert login.status_code == 200
    return response.json(), {"Authorization": f"Bearer {login.json()['token']}"}


# --- Health ---

def test_root_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "running" in response.json()["status"]


# --- Students ---

def test_register_hides_password(client):
    response = client.post("/api/students/register", json=STUDENT)
    body = response.json()
    assert response.status_code == 201
    assert body["email"] == STUDENT["email"]
    assert body["id"].startswith("stu_")
    assert "password" not in body and "password_hash" not in body


def test_register_rejects_duplicates(client, registered):
    same_roll = {**STUDENT, "email": "other@example.edu"}
    response = client.post("/api/students/register", json=same_roll)
    assert response.status_code == 400
    assert "already exists" in response.json()["detail"]


def test_register_race_on_unique_index_is_400(client, registered, mocker):
    # Another registration claimed the email between the conflict check and the insert.
    mocker.patch.object(DatabaseService, "find_conflicting_student", return_value=None)

    response = client.post("/api/students/register", json={**STUDENT, "rollNumber": "CS-2024-999"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Student already exists with this email or roll number"
    assert client.post("/api/students/login", json={"email": STUDENT["email"], "password": STUDENT["password"]}).status_code == 200


def test_login_and_profile(client, registered):
    student, headers = registered
    response = client.get("/api/students/profile", headers=headers)
    assert response.status_code == 200
    assert response.json()["id"] == student["id"]


def test_login_with_wrong_password(client, registered):
    response = client.post("/api/students/login", json={"email": STUDENT["email"], "password": "nope"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid email or password"


def test_profile_requires_token(client):
    assert client.get("/api/students/profile").status_code == 401
    bad = client.get("/api/students/profile", headers={"Authorization": "Bearer not-a-token"})
    assert bad.status_code == 401


# --- Performance ---

def test_add_performance_derives_grade(client, registered):
    student, headers = registered
    payload = {**METRICS, "subject": "Math", "predictedGrade": "A"}

    response = client.post("/api/performance/add", json=payload, headers=headers)

    assert response.status_code == 201
    performance = response.json()["performance"]
    assert performance["studentId"] == student["id"]
    # The client-supplied grade is ignored; 68.5 weighted is a C.
    assert performance["predictedGrade"] == "C"


def test_add_performance_requires_token(client):
    response = client.post("/api/performance/add", json={**METRICS, "subject": "Math"})
    assert response.status_code == 401


def test_add_performance_rejects_out_of_range(client, registered):
    _, headers = registered
    response = client.post("/api/performance/add", json={**METRICS, "attendance": 120, "subject": "Math"}, headers=headers)
    assert response.status_code == 422


def test_performance_listings_are_newest_first(client, registered):
    student, headers = registered
    for subject in ("Math", "Physics", "Chemistry"):
        client.post("/api/performance/add", json={**METRICS, "subject": subject}, headers=headers)

    mine = client.get(f"/api/performance/{student['id']}", headers=headers)
    everything = client.get("/api/performance/", headers=headers)

    assert [r["subject"] for r in mine.json()] == ["Chemistry", "Physics", "Math"]
    assert mine.json()[0]["student"]["rollNumber"] == STUDENT["rollNumber"]
    assert len(everything.json()) == 3


# --- Prediction ---

def test_predict_falls_back_when_ai_is_unavailable(client):
    response = client.post("/api/prediction/predict", json=METRICS)

    assert response.status_code == 200
    body = response.json()
    assert body["predictedGrade"] == "C"
    assert body["confidence"] == 85
    assert body["predictedValue"] == pytest.approx(68.5)
    assert body["suggestions"] == ["Keep up the good work! Aim for consistency."]
    assert set(body) == {"predictedGrade", "confidence", "predictedValue", "suggestions", "message"}
    assert response.headers["X-Prediction-Source"] == "fallback"


def test_predict_uses_ai_answer(client, stub_generator):
    stub_generator.error = None
    stub_generator.text = json.dumps({
        "predictedGrade": "B", "confidence": 90, "predictedValue": 71, "suggestions": ["a", "b", "c"],
    })
    response = client.post("/api/prediction/predict", json=METRICS)
    assert response.json()["predictedGrade"] == "B"
    assert response.headers["X-Prediction-Source"] == "ai"


def test_predict_missing_field_is_400(client, registered):
    student, headers = registered
    payload = {k: v for k, v in METRICS.items() if k != "internalMarks"}

    response = client.post("/api/prediction/predict", json={**payload, "studentId": student["id"]})

    assert response.status_code == 400
    assert response.json()["detail"] == "All performance fields are required"
    assert client.get(f"/api/performance/{student['id']}", headers=headers).json() == []


def test_predict_with_student_saves_general_record(client, registered):
    student, headers = registered
    client.post("/api/prediction/predict", json={**METRICS, "studentId": student["id"]})

    records = client.get(f"/api/performance/{student['id']}", headers=headers).json()
    assert len(records) == 1
    assert records[0]["subject"] == "General Performance"
    assert records[0]["predictedGrade"] == "C"


# --- Study Goals ---

def test_goal_crud(client):
    soon = (date.today() + timedelta(days=2)).isoformat() + "T00:00:00Z"
    later = (date.today() + timedelta(days=9)).isoformat() + "T00:00:00Z"
    client.post("/api/study-goals/add", json={"studentId": "stu_x", "subject": "Math", "topic": "Limits", "deadline": later})
    created = client.post(
        "/api/study-goals/add",
        json={"studentId": "stu_x", "subject": "Physics", "topic": "Optics", "deadline": soon, "priority": "high"},
    )
    assert created.status_code == 201
    goal = created.json()
    assert goal["status"] == "pending"

    listed = client.get("/api/study-goals/stu_x").json()
    assert [g["topic"] for g in listed] == ["Optics", "Limits"]

    # Any status may follow any other.
    done = client.put(f"/api/study-goals/update/{goal['id']}", json={"status": "completed"})
    assert done.json()["status"] == "completed"
    reopened = client.put(f"/api/study-goals/update/{goal['id']}", json={"status": "pending"})
    assert reopened.json()["status"] == "pending"
    assert reopened.json()["topic"] == "Optics"

    deleted = client.delete(f"/api/study-goals/delete/{goal['id']}")
    assert deleted.json() == {"message": "Goal deleted successfully"}
    assert len(client.get("/api/study-goals/stu_x").json()) == 1


def test_goal_deadlines_with_offsets_are_stored_as_utc(client):
    client.post(
        "/api/study-goals/add",
        json={"studentId": "stu_tz", "subject": "Math", "topic": "late", "deadline": "2026-11-01T07:00:00Z"},
    )
    client.post(
        "/api/study-goals/add",
        json={"studentId": "stu_tz", "subject": "Math", "topic": "early", "deadline": "2026-11-01T10:00:00+05:00"},
    )

    listed = client.get("/api/study-goals/stu_tz").json()

    assert [g["topic"] for g in listed] == ["early", "late"]
    assert listed[0]["deadline"].startswith("2026-11-01T05:00:00")
    assert listed[1]["deadline"].startswith("2026-11-01T07:00:00")

    moved = client.put(f"/api/study-goals/update/{listed[1]['id']}", json={"deadline": "2026-11-01T08:00:00+04:00"})
    assert moved.json()["deadline"].startswith("2026-11-01T04:00:00")
    assert [g["topic"] for g in client.get("/api/study-goals/stu_tz").json()] == ["late", "early"]


def test_goal_update_and_delete_unknown_id(client):
    assert client.put("/api/study-goals/update/goal_missing", json={"status": "completed"}).status_code == 404
    assert client.delete("/api/study-goals/delete/goal_missing").status_code == 404


def test_generate_without_history_is_400(client):
    response = client.post("/api/study-goals/generate", json={"studentId": "stu_empty"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Not enough performance data to generate a plan."


def test_generate_falls_back_on_rate_limit(client, make_performance, stub_generator):
    stub_generator.error = AIUnavailableError("429 quota")
    make_performance("stu_plan", "Math", 30)
    make_performance("stu_plan", "Physics", 50)

    response = client.post("/api/study-goals/generate", json={"studentId": "stu_plan"})

    assert response.status_code == 201
    goals = response.json()
    assert [(g["subject"], g["priority"]) for g in goals] == [("Math", "medium"), ("Physics", "medium"), ("Math", "high")]


def test_generate_with_garbled_ai_answer_is_500(client, make_performance, stub_generator):
    stub_generator.error = None
    stub_generator.text = "not json at all"
    make_performance("stu_plan", "Math", 30)

    response = client.post("/api/study-goals/generate", json={"studentId": "stu_plan"})

    assert response.status_code == 500
    assert "parse" in response.json()["detail"]
    assert client.get("/api/study-goals/stu_plan").json() == []
