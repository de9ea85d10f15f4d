from datetime import date, timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient

from schoolboard.core.enums import AttendanceStatus


@pytest.mark.asyncio
async def test_create_attendance(client: AsyncClient, auth_headers: dict, make_student) -> None:
    student = await make_student()
    response = await client.post(
        "/api/attendance",
        json={"studentId": str(student.id), "date": "2026-03-02", "status": "late", "time": "08:20"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    data = response.json()
    assert data["studentId"] == str(student.id)
    assert data["date"] == "2026-03-02"
    assert data["status"] == "late"
    assert data["time"] == "08:20"


@pytest.mark.asyncio
async def test_create_attendance_for_unknown_student_fails(client: AsyncClient, auth_headers: dict) -> None:
    response = await client.post(
        "/api/attendance",
        json={"studentId": str(uuid4()), "date": "2026-03-02", "status": "present"},
        headers=auth_headers,
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_invalid_status_is_400(client: AsyncClient, auth_headers: dict, make_student) -> None:
    student = await make_student()
    response = await client.post(
        "/api/attendance",
        json={"studentId": str(student.id), "date": "2026-03-02", "status": "sick"},
        headers=auth_headers,
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_several_marks_per_day_are_allowed(client: AsyncClient, auth_headers: dict, make_student) -> None:
    student = await make_student()
    body = {"studentId": str(student.id), "date": "2026-03-02", "status": "present"}
    assert (await client.post("/api/attendance", json=body, headers=auth_headers)).status_code == 201
    assert (await client.post("/api/attendance", json=body, headers=auth_headers)).status_code == 201


@pytest.mark.asyncio
async def test_filters_are_conjunctive_and_ordered(
    client: AsyncClient, auth_headers: dict, make_student, make_attendance
) -> None:
    d1, d2, d3 = date(2026, 3, 2), date(2026, 3, 3), date(2026, 3, 4)
    grade5 = [await make_student(first_name=n, grade="5") for n in ("Pablo", "Andres")]
    grade6 = [await make_student(first_name=n, grade="6") for n in ("Bea", "Carla")]
    for day in (d1, d2, d3):
        for student in grade5 + grade6:
            await make_attendance(student, day)

    response = await client.get(
        "/api/attendance", params={"date": d2.isoformat(), "grade": "5"}, headers=auth_headers
    )
    assert response.status_code == 200
    rows = response.json()
    assert [(r["date"], r["student"]["firstName"]) for r in rows] == [
        (d2.isoformat(), "Andres"),
        (d2.isoformat(), "Pablo"),
    ]

    by_grade = (await client.get("/api/attendance", params={"grade": "6"}, headers=auth_headers)).json()
    assert [(r["date"], r["student"]["firstName"]) for r in by_grade] == [
        (d3.isoformat(), "Bea"),
        (d3.isoformat(), "Carla"),
        (d2.isoformat(), "Bea"),
        (d2.isoformat(), "Carla"),
        (d1.isoformat(), "Bea"),
        (d1.isoformat(), "Carla"),
    ]

    everything = (await client.get("/api/attendance", headers=auth_headers)).json()
    assert len(everything) == 12


@pytest.mark.asyncio
async def test_section_filter(client: AsyncClient, auth_headers: dict, make_student, make_attendance) -> None:
    today = date.today()
    a = await make_student(section="A")
    b = await make_student(section="B")
    await make_attendance(a, today)
    await make_attendance(b, today, AttendanceStatus.absent)

    rows = (await client.get("/api/attendance", params={"section": "B"}, headers=auth_headers)).json()
    assert len(rows) == 1
    assert rows[0]["studentId"] == str(b.id)
    assert rows[0]["status"] == "absent"
    assert rows[0]["student"]["section"] == "B"


@pytest.mark.asyncio
async def test_update_attendance(client: AsyncClient, auth_headers: dict, make_student, make_attendance) -> None:
    student = await make_student()
    record = await make_attendance(student, date.today() - timedelta(days=1))
    response = await client.put(
        f"/api/attendance/{record.id}",
        json={"status": "absent", "notes": "Called in sick"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "absent"
    assert data["notes"] == "Called in sick"


@pytest.mark.asyncio
async def test_update_attendance_to_unknown_student_fails(
    client: AsyncClient, auth_headers: dict, make_student, make_attendance
) -> None:
    record = await make_attendance(await make_student(), date.today())
    response = await client.put(
        f"/api/attendance/{record.id}", json={"studentId": str(uuid4())}, headers=auth_headers
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_missing_attendance_returns_404(client: AsyncClient, auth_headers: dict) -> None:
    response = await client.put(f"/api/attendance/{uuid4()}", json={"status": "late"}, headers=auth_headers)
    assert response.status_code == 404
