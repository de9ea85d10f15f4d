"""Aggregate figures for the dashboard.

The five stats queries run concurrently on separate sessions with no shared
transaction, so under concurrent writes the figures may be mutually off by a
few rows.
"""

import asyncio
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from schoolboard.core.enums import AttendanceStatus, BehaviorType, NotificationStatus, StudentStatus
from schoolboard.core.models import Attendance, BehaviorReport, Notification, Student, Survey
from schoolboard.db.types import utc_today

from .schemas import DashboardStats, GradeBehavior, WeeklyAttendanceDay

WEEK_DAYS = 7


def attendance_rate(present: int, total: int) -> int:
    """Percentage of present marks, rounded half up; 0 when nothing was recorded."""
    if total <= 0:
        return 0
    # int(x + 0.5) rounds .5 up like Math.round; round() would use banker's rounding.
    return int(100 * present / total + 0.5)


async def _active_students(session_factory: async_sessionmaker) -> int:
    async with session_factory() as db:
        result = await db.execute(
            select(func.count()).select_from(Student).where(Student.status == StudentStatus.active)
        )
        return result.scalar_one()


async def _attendance_for(session_factory: async_sessionmaker, day: date) -> Tuple[int, int]:
    async with session_factory() as db:
        result = await db.execute(
            select(
                func.count(),
                func.count(case((Attendance.status == AttendanceStatus.present, 1))),
            )
            .select_from(Attendance)
            .where(Attendance.date == day)
        )
        total, present = result.one()
        return total or 0, present or 0


async def _behavior_counts(session_factory: async_sessionmaker) -> Tuple[int, int]:
    async with session_factory() as db:
        result = await db.execute(
            select(
                func.count(case((BehaviorReport.type == BehaviorType.positive, 1))),
                func.count(case((BehaviorReport.type == BehaviorType.negative, 1))),
            ).select_from(BehaviorReport)
        )
        positive, negative = result.one()
        return positive or 0, negative or 0


async def _sent_notifications(session_factory: async_sessionmaker) -> int:
    async with session_factory() as db:
        result = await db.execute(
            select(func.count())
            .select_from(Notification)
            .where(Notification.status == NotificationStatus.sent)
        )
        return result.scalar_one()


async def _survey_counts(session_factory: async_sessionmaker) -> Tuple[int, int]:
    async with session_factory() as db:
        result = await db.execute(
            select(
                func.count(case((Survey.is_active.is_(True), 1))),
                func.coalesce(func.sum(Survey.response_count), 0),
            ).select_from(Survey)
        )
        active, responses = result.one()
        return active or 0, int(responses or 0)


async def get_dashboard_stats(
    session_factory: async_sessionmaker,
    today: Optional[date] = None,
) -> DashboardStats:
    """Headline figures. "Today" defaults to the UTC calendar date."""
    today = today or utc_today()
    (
        total_students,
        (attendance_total, attendance_present),
        (positive, negative),
        notifications_sent,
        (active_surveys, survey_responses),
    ) = await asyncio.gather(
        _active_students(session_factory),
        _attendance_for(session_factory, today),
        _behavior_counts(session_factory),
        _sent_notifications(session_factory),
        _survey_counts(session_factory),
    )

    return DashboardStats(
        total_students=total_students,
        attendance_today=attendance_rate(attendance_present, attendance_total),
        # All negative reports; the behavior page's "pending" (older than 24h) is a separate figure.
        pending_reports=negative,
        notifications_sent=notifications_sent,
        positive_reports=positive,
        negative_reports=negative,
        active_surveys=active_surveys,
        survey_responses=survey_responses,
    )


async def get_weekly_attendance(db: AsyncSession, today: Optional[date] = None) -> List[WeeklyAttendanceDay]:
    """One entry per day for the last seven days (today included), oldest first."""
    today = today or utc_today()
    start = today - timedelta(days=WEEK_DAYS - 1)
    result = await db.execute(
        select(Attendance.date, Attendance.status, func.count())
        .where(Attendance.date >= start, Attendance.date <= today)
        .group_by(Attendance.date, Attendance.status)
    )

    counts: Dict[date, Dict[AttendanceStatus, int]] = {}
    for day, att_status, count in result.all():
        counts.setdefault(day, {})[att_status] = count

    days: List[WeeklyAttendanceDay] = []
    for offset in range(WEEK_DAYS):
        day = start + timedelta(days=offset)
        by_status = counts.get(day, {})
        present = by_status.get(AttendanceStatus.present, 0)
        absent = by_status.get(AttendanceStatus.absent, 0)
        late = by_status.get(AttendanceStatus.late, 0)
        days.append(
            WeeklyAttendanceDay(
                date=day,
                present=present,
                absent=absent,
                late=late,
                rate=attendance_rate(present, present + absent + late),
            )
        )
    return days


async def get_behavior_by_grade(db: AsyncSession) -> List[GradeBehavior]:
    result = await db.execute(
        select(
            Student.grade,
            func.count(case((BehaviorReport.type == BehaviorType.positive, 1))),
            func.count(case((BehaviorReport.type == BehaviorType.negative, 1))),
        )
        .join(Student, BehaviorReport.student_id == Student.id)
        .group_by(Student.grade)
        .order_by(Student.grade)
    )
    return [
        GradeBehavior(grade=grade, positive=positive, negative=negative)
        for grade, positive, negative in result.all()
    ]
