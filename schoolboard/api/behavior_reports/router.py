from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolboard.auth.dependencies import get_current_user
from schoolboard.core.exceptions import ServiceError
from schoolboard.db.session import get_db

from . import service
from .schemas import (
    BehaviorReportCreate,
    BehaviorReportResponse,
    BehaviorReportWithStudent,
    BehaviorSummary,
)

router = APIRouter(
    prefix="/api/behavior-reports",
    tags=["behavior-reports"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=List[BehaviorReportWithStudent])
async def list_behavior_reports(db: AsyncSession = Depends(get_db)) -> List[BehaviorReportWithStudent]:
    return await service.list_behavior_reports(db)


@router.get("/summary", response_model=BehaviorSummary)
async def behavior_summary(db: AsyncSession = Depends(get_db)) -> BehaviorSummary:
    return await service.behavior_summary(db)


@router.post("", response_model=BehaviorReportResponse, status_code=status.HTTP_201_CREATED)
async def create_behavior_report(
    payload: BehaviorReportCreate,
    db: AsyncSession = Depends(get_db),
) -> BehaviorReportResponse:
    try:
        return await service.create_behavior_report(db, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
