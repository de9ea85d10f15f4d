import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from schoolboard.api.students.schemas import StudentResponse
from schoolboard.core.enums import BehaviorType
from schoolboard.core.models import BehaviorReport, Student
from schoolboard.core.services import commit_or_raise

from .schemas import (
    BehaviorReportCreate,
    BehaviorReportResponse,
    BehaviorReportWithStudent,
    BehaviorSummary,
)

logger = logging.getLogger(__name__)

STALE_AFTER = timedelta(hours=24)


async def list_behavior_reports(db: AsyncSession) -> List[BehaviorReportWithStudent]:
    stmt = (
        select(BehaviorReport, Student)
        .join(Student, BehaviorReport.student_id == Student.id)
        .order_by(BehaviorReport.created_at.desc())
    )
    result = await db.execute(stmt)
    return [
        BehaviorReportWithStudent(
            **BehaviorReportResponse.model_validate(report).model_dump(),
            student=StudentResponse.model_validate(student),
        )
        for report, student in result.all()
    ]


async def create_behavior_report(db: AsyncSession, payload: BehaviorReportCreate) -> BehaviorReportResponse:
    report = BehaviorReport(**payload.model_dump())
    db.add(report)
    await commit_or_raise(db, report, "Could not save behavior report")
    logger.info("Filed %s behavior report %s", report.type.value, report.id)
    return BehaviorReportResponse.model_validate(report)


async def count_reports(db: AsyncSession, report_type: BehaviorType) -> int:
    result = await db.execute(
        select(func.count()).select_from(BehaviorReport).where(BehaviorReport.type == report_type)
    )
    return result.scalar_one()


async def negative_report_count(db: AsyncSession) -> int:
    """Every negative report, regardless of age. This is the dashboard's "pending" figure."""
    return await count_reports(db, BehaviorType.negative)


async def stale_negative_report_count(db: AsyncSession, now: Optional[datetime] = None) -> int:
    """Negative reports filed more than 24 hours ago. This is the behavior page's "pending" figure."""
    now = now or datetime.now(timezone.utc)
    result = await db.execute(
        select(func.count())
        .select_from(BehaviorReport)
        .where(
            BehaviorReport.type == BehaviorType.negative,
            BehaviorReport.created_at < now - STALE_AFTER,
        )
    )
    return result.scalar_one()


async def behavior_summary(db: AsyncSession, now: Optional[datetime] = None) -> BehaviorSummary:
    return BehaviorSummary(
        positive_reports=await count_reports(db, BehaviorType.positive),
        negative_reports=await negative_report_count(db),
        pending_reports=await stale_negative_report_count(db, now),
    )
