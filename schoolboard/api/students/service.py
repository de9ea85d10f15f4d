import logging
from typing import List
from uuid import UUID

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from schoolboard.core.exceptions import NotFoundError, StorageError
from schoolboard.core.models import Attendance, BehaviorReport, Student
from schoolboard.core.services import apply_changes, commit_or_raise

from .schemas import StudentCreate, StudentResponse, StudentUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "student_code",
    "first_name",
    "last_name",
    "grade",
    "section",
    "status",
    "parent_name",
    "parent_email",
)


async def list_students(db: AsyncSession) -> List[StudentResponse]:
    result = await db.execute(select(Student).order_by(Student.first_name, Student.last_name))
    return [StudentResponse.model_validate(s) for s in result.scalars().all()]


async def get_student(db: AsyncSession, student_id: UUID) -> StudentResponse:
    student = await db.get(Student, student_id)
    if not student:
        raise NotFoundError("Student not found")
    return StudentResponse.model_validate(student)


async def create_student(db: AsyncSession, payload: StudentCreate) -> StudentResponse:
    student = Student(**payload.model_dump())
    db.add(student)
    await commit_or_raise(db, student, "Could not save student")
    logger.info("Created student %s", student.id)
    return StudentResponse.model_validate(student)


async def update_student(db: AsyncSession, student_id: UUID, payload: StudentUpdate) -> StudentResponse:
    student = await db.get(Student, student_id)
    if not student:
        raise NotFoundError("Student not found")
    apply_changes(student, payload.model_dump(exclude_unset=True), REQUIRED_FIELDS)
    await commit_or_raise(db, student, "Could not save student")
    return StudentResponse.model_validate(student)


async def delete_student(db: AsyncSession, student_id: UUID) -> None:
    """Hard delete. Students with attendance or behavior rows are kept (restrict policy)."""
    student = await db.get(Student, student_id)
    if not student:
        raise NotFoundError("Student not found")

    referenced = await db.execute(
        select(
            exists().where(Attendance.student_id == student_id)
            | exists().where(BehaviorReport.student_id == student_id)
        )
    )
    if referenced.scalar():
        raise StorageError("Cannot delete student with attendance or behavior records")

    try:
        await db.execute(delete(Student).where(Student.id == student_id))
        await db.commit()
    except IntegrityError as e:
        # A dependent row was written between the check and the delete.
        await db.rollback()
        raise StorageError("Cannot delete student with attendance or behavior records") from e
    logger.info("Deleted student %s", student_id)
