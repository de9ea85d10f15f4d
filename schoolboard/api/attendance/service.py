"""Attendance marks. Filters on the list are conjunctive."""

import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from schoolboard.api.students.schemas import StudentResponse
from schoolboard.core.exceptions import NotFoundError
from schoolboard.core.models import Attendance, Student
from schoolboard.core.services import apply_changes, commit_or_raise

from .schemas import AttendanceCreate, AttendanceResponse, AttendanceUpdate, AttendanceWithStudent

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("student_id", "date", "status")


async def list_attendance(
    db: AsyncSession,
    att_date: Optional[date] = None,
    grade: Optional[str] = None,
    section: Optional[str] = None,
) -> List[AttendanceWithStudent]:
    stmt = (
        select(Attendance, Student)
        .join(Student, Attendance.student_id == Student.id)
        .order_by(Attendance.date.desc(), Student.first_name)
    )
    if att_date is not None:
        stmt = stmt.where(Attendance.date == att_date)
    if grade:
        stmt = stmt.where(Student.grade == grade)
    if section:
        stmt = stmt.where(Student.section == section)

    result = await db.execute(stmt)
    return [
        AttendanceWithStudent(
            **AttendanceResponse.model_validate(record).model_dump(),
            student=StudentResponse.model_validate(student),
        )
        for record, student in result.all()
    ]


async def create_attendance(db: AsyncSession, payload: AttendanceCreate) -> AttendanceResponse:
    # student_id is checked by the FK; an unknown student fails the commit.
    record = Attendance(**payload.model_dump())
    db.add(record)
    await commit_or_raise(db, record, "Could not save attendance record")
    logger.info("Recorded attendance %s for student %s", record.id, record.student_id)
    return AttendanceResponse.model_validate(record)


async def update_attendance(
    db: AsyncSession,
    attendance_id: UUID,
    payload: AttendanceUpdate,
) -> AttendanceResponse:
    record = await db.get(Attendance, attendance_id)
    if not record:
        raise NotFoundError("Attendance record not found")
    apply_changes(record, payload.model_dump(exclude_unset=True), REQUIRED_FIELDS)
    await commit_or_raise(db, record, "Could not save attendance record")
    return AttendanceResponse.model_validate(record)
