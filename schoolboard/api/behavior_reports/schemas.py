import datetime as dt
from uuid import UUID

from pydantic import Field

from schoolboard.api.students.schemas import StudentResponse
from schoolboard.core.enums import BehaviorType
from schoolboard.core.schemas import CamelModel


class BehaviorReportCreate(CamelModel):
    student_id: UUID
    teacher_name: str = Field(..., min_length=1, max_length=255)
    type: BehaviorType
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    date: dt.date


class BehaviorReportResponse(CamelModel):
    id: UUID
    student_id: UUID
    teacher_name: str
    type: BehaviorType
    title: str
    description: str
    date: dt.date
    created_at: dt.datetime


class BehaviorReportWithStudent(BehaviorReportResponse):
    student: StudentResponse


class BehaviorSummary(CamelModel):
    """pending_reports counts negative reports older than 24 hours."""

    positive_reports: int
    negative_reports: int
    pending_reports: int
