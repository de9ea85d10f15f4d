from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from schoolboard.auth.dependencies import get_current_user
from schoolboard.db.session import get_db, get_session_factory

from . import service
from .schemas import DashboardStats, GradeBehavior, WeeklyAttendanceDay

router = APIRouter(
    prefix="/api/dashboard",
    tags=["dashboard"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> DashboardStats:
    return await service.get_dashboard_stats(session_factory)


@router.get("/weekly-attendance", response_model=List[WeeklyAttendanceDay])
async def weekly_attendance(db: AsyncSession = Depends(get_db)) -> List[WeeklyAttendanceDay]:
    return await service.get_weekly_attendance(db)


@router.get("/behavior-by-grade", response_model=List[GradeBehavior])
async def behavior_by_grade(db: AsyncSession = Depends(get_db)) -> List[GradeBehavior]:
    return await service.get_behavior_by_grade(db)
