import datetime as dt
from typing import Optional
from uuid import UUID

from pydantic import Field

from schoolboard.api.students.schemas import StudentResponse
from schoolboard.core.enums import AttendanceStatus
from schoolboard.core.schemas import CamelModel


class AttendanceCreate(CamelModel):
    student_id: UUID
    date: dt.date
    status: AttendanceStatus
    time: Optional[str] = Field(None, max_length=20)
    notes: Optional[str] = None


class AttendanceUpdate(CamelModel):
    student_id: Optional[UUID] = None
    date: Optional[dt.date] = None
    status: Optional[AttendanceStatus] = None
    time: Optional[str] = Field(None, max_length=20)
    notes: Optional[str] = None


class AttendanceResponse(CamelModel):
    id: UUID
    student_id: UUID
    date: dt.date
    status: AttendanceStatus
    time: Optional[str] = None
    notes: Optional[str] = None
    created_at: dt.datetime


class AttendanceWithStudent(AttendanceResponse):
    student: StudentResponse
