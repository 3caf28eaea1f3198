"""Tests for the HTTP routes, their status codes and error bodies."""

import inspect
import logging


def test_list_students_returns_seeded(client):
    res = client.get("/students")
    assert res.status_code == 200
    assert res.json()["total"] == 3
    assert res.json()["students"][0]["name"] == "Alice"


def test_list_students_filters_and_paginates(client):
    res = client.get("/students", params={"email": "example.com", "page": 2, "limit": 2})
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 3
    assert [s["name"] for s in body["students"]] == ["Carol"]

    res = client.get("/students", params={"name": "Bo"})
    assert [s["name"] for s in res.json()["students"]] == ["Bob"]


def test_list_students_clamps_out_of_range_paging(client):
    res = client.get("/students", params={"page": 0})
    assert res.status_code == 200
    assert [s["name"] for s in res.json()["students"]] == ["Alice", "Bob", "Carol"]

    res = client.get("/students", params={"limit": 500})
    assert res.status_code == 200
    assert len(res.json()["students"]) == 3

    res = client.get("/courses", params={"page": -1, "limit": 0})
    assert res.status_code == 200
    assert [c["title"] for c in res.json()["courses"]] == ["Math"]


def test_list_students_non_numeric_page(client):
    res = client.get("/students", params={"page": "abc"})
    assert res.status_code == 400
    assert res.json()["error"].startswith("Invalid page")


def test_non_numeric_ids_are_not_found(client):
    res = client.get("/students/abc")
    assert res.status_code == 404
    assert res.json() == {"error": "Student not found"}

    res = client.get("/courses/abc")
    assert res.status_code == 404
    assert res.json() == {"error": "Course not found"}

    res = client.put("/students/abc", json={"name": "Ghost"})
    assert res.status_code == 404
    assert res.json() == {"error": "Student not found"}

    res = client.delete("/courses/abc")
    assert res.status_code == 404
    assert res.json() == {"error": "Course not found"}


def test_non_numeric_ids_on_enrolment_routes(client):
    res = client.post("/courses/1/students/abc")
    assert res.status_code == 404
    assert res.json() == {"error": "Student not found"}

    res = client.post("/courses/abc/students/1")
    assert res.status_code == 404
    assert res.json() == {"error": "Course not found"}

    res = client.delete("/courses/abc/students/1")
    assert res.status_code == 404
    assert res.json() == {"error": "Enrollment not found"}


def test_wrongly_typed_body_field(client):
    res = client.post("/students", json={"name": 1, "email": "one@example.com"})
    assert res.status_code == 400
    assert res.json()["error"].startswith("Invalid name")

    res = client.put("/courses/1", json={"teacher": ["Mr. Smith"]})
    assert res.status_code == 400
    assert res.json()["error"].startswith("Invalid teacher")


def test_create_student(client):
    res = client.post("/students", json={"name": "David", "email": "david@example.com"})
    assert res.status_code == 201
    assert res.json() == {"id": 4, "name": "David", "email": "david@example.com"}


def test_create_student_requires_name_and_email(client):
    res = client.post("/students", json={"name": "David"})
    assert res.status_code == 400
    assert res.json() == {"error": "name and email required"}


def test_create_student_duplicate_email(client):
    res = client.post("/students", json={"name": "Eve", "email": "alice@example.com"})
    assert res.status_code == 400
    assert res.json() == {"error": "Email must be unique"}


def test_get_student_with_courses(client, store):
    store.enroll(1, 2)
    res = client.get("/students/1")
    assert res.status_code == 200
    body = res.json()
    assert body["student"]["id"] == 1
    assert [c["title"] for c in body["courses"]] == ["Physics"]


def test_get_unknown_student(client):
    res = client.get("/students/999")
    assert res.status_code == 404
    assert res.json() == {"error": "Student not found"}


def test_update_student(client):
    res = client.put(
        "/students/1", json={"name": "Alice Updated", "email": "alice_updated@example.com"}
    )
    assert res.status_code == 200
    assert res.json()["name"] == "Alice Updated"
    assert res.json()["email"] == "alice_updated@example.com"


def test_update_student_duplicate_email(client):
    res = client.put("/students/2", json={"email": "alice@example.com"})
    assert res.status_code == 400
    assert res.json() == {"error": "Email must be unique"}


def test_update_unknown_student(client):
    res = client.put("/students/999", json={"name": "Ghost"})
    assert res.status_code == 404
    assert res.json() == {"error": "Student not found"}


def test_delete_student(client):
    res = client.delete("/students/2")
    assert res.status_code == 204
    assert res.content == b""


def test_delete_unknown_student(client):
    res = client.delete("/students/999")
    assert res.status_code == 404
    assert res.json() == {"error": "Student not found"}


def test_delete_enrolled_student(client, store):
    store.enroll(1, 1)
    res = client.delete("/students/1")
    assert res.status_code == 400
    assert res.json() == {"error": "Cannot delete student: enrolled in a course"}


def test_list_courses(client):
    res = client.get("/courses", params={"teacher": "Mr."})
    assert res.status_code == 200
    assert [c["title"] for c in res.json()["courses"]] == ["Math", "History"]
    assert res.json()["total"] == 2


def test_get_course_with_students(client, store):
    store.enroll(2, 1)
    res = client.get("/courses/1")
    assert res.status_code == 200
    body = res.json()
    assert body["course"]["id"] == 1
    assert body["course"]["capacity"] == 3
    assert [s["name"] for s in body["students"]] == ["Bob"]


def test_get_unknown_course(client):
    res = client.get("/courses/999")
    assert res.status_code == 404
    assert res.json() == {"error": "Course not found"}


def test_create_course(client):
    res = client.post("/courses", json={"title": "New Course", "teacher": "Dr. Who"})
    assert res.status_code == 201
    assert res.json()["title"] == "New Course"
    assert res.json()["teacher"] == "Dr. Who"


def test_create_course_requires_title_and_teacher(client):
    res = client.post("/courses", json={"title": ""})
    assert res.status_code == 400
    assert res.json() == {"error": "title and teacher required"}


def test_update_course(client):
    res = client.put("/courses/1", json={"title": "Updated Course", "teacher": "Prof. Xavier"})
    assert res.status_code == 200
    assert res.json()["title"] == "Updated Course"
    assert res.json()["teacher"] == "Prof. Xavier"


def test_update_course_duplicate_title(client):
    res = client.put("/courses/2", json={"title": "Math"})
    assert res.status_code == 400
    assert res.json() == {"error": "Course title must be unique"}


def test_update_unknown_course(client):
    res = client.put("/courses/999", json={"title": "Nonexistent"})
    assert res.status_code == 404
    assert res.json() == {"error": "Course not found"}


def test_delete_course_with_students_is_blocked(client):
    assert client.post("/courses/1/students/1").status_code == 204
    res = client.delete("/courses/1")
    assert res.status_code == 400
    assert res.json() == {"error": "Cannot delete course: students are enrolled"}


def test_delete_course(client):
    assert client.delete("/courses/2").status_code == 204
    assert client.get("/courses/2").status_code == 404


def test_enroll_and_unenroll(client, store):
    res = client.post("/courses/1/students/1")
    assert res.status_code == 204
    assert [c["id"] for c in store.get_student_courses(1)] == [1]

    res = client.delete("/courses/1/students/1")
    assert res.status_code == 204
    assert res.text == ""


def test_enroll_unknown_student_or_course(client):
    res = client.post("/courses/1/students/999")
    assert res.status_code == 404
    assert res.json() == {"error": "Student not found"}

    res = client.post("/courses/999/students/1")
    assert res.status_code == 404
    assert res.json() == {"error": "Course not found"}


def test_enroll_twice(client):
    client.post("/courses/1/students/1")
    res = client.post("/courses/1/students/1")
    assert res.status_code == 400
    assert res.json() == {"error": "Student already enrolled in this course"}


def test_enroll_into_full_course(client):
    client.post("/students", json={"name": "Extra", "email": "extra@example.com"})
    for student_id in (1, 2, 3):
        assert client.post(f"/courses/1/students/{student_id}").status_code == 204
    res = client.post("/courses/1/students/4")
    assert res.status_code == 400
    assert res.json() == {"error": "Course is full"}


def test_unenroll_not_enrolled(client):
    res = client.delete("/courses/1/students/2")
    assert res.status_code == 404
    assert res.json() == {"error": "Enrollment not found"}


def test_unenroll_unknown_course(client):
    res = client.delete("/courses/999/students/1")
    assert res.status_code == 404
    assert res.json() == {"error": "Enrollment not found"}


def test_unknown_route(client):
    res = client.get("/non-existent-route")
    assert res.status_code == 404
    assert res.json() == {"error": "Not Found"}


def test_routes_run_on_the_event_loop():
    from fastapi.routing import APIRoute
    from main import app

    endpoints = [r.endpoint for r in app.routes if isinstance(r, APIRoute)]
    assert endpoints
    assert all(inspect.iscoroutinefunction(endpoint) for endpoint in endpoints)


def test_request_errors_are_logged_lazily(client, caplog):
    with caplog.at_level(logging.INFO, logger="handler"):
        client.get("/students/999")
    record = next(r for r in caplog.records if r.name == "handler")
    assert record.msg == "%s %s -> %s: %s"
    assert record.args == ("GET", "/students/999", 404, "Student not found")
