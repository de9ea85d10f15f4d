from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field

from schoolboard.core.enums import StudentStatus
from schoolboard.core.schemas import CamelModel


class StudentCreate(CamelModel):
    student_code: str = Field(..., alias="studentId", min_length=1, max_length=50)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    grade: str = Field(..., min_length=1, max_length=20)
    section: str = Field(..., min_length=1, max_length=20)
    status: StudentStatus = StudentStatus.active
    parent_name: str = Field(..., min_length=1, max_length=255)
    parent_email: EmailStr
    parent_phone: Optional[str] = Field(None, max_length=50)


class StudentUpdate(CamelModel):
    student_code: Optional[str] = Field(None, alias="studentId", min_length=1, max_length=50)
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    grade: Optional[str] = Field(None, min_length=1, max_length=20)
    section: Optional[str] = Field(None, min_length=1, max_length=20)
    status: Optional[StudentStatus] = None
    parent_name: Optional[str] = Field(None, min_length=1, max_length=255)
    parent_email: Optional[EmailStr] = None
    parent_phone: Optional[str] = Field(None, max_length=50)


class StudentResponse(CamelModel):
    id: UUID
    student_code: str = Field(..., alias="studentId")
    first_name: str
    last_name: str
    grade: str
    section: str
    status: StudentStatus
    parent_name: str
    parent_email: str
    parent_phone: Optional[str] = None
    created_at: datetime
