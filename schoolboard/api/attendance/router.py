"""Attendance API router."""

from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolboard.auth.dependencies import get_current_user
from schoolboard.core.exceptions import ServiceError
from schoolboard.db.session import get_db

from . import service
from .schemas import AttendanceCreate, AttendanceResponse, AttendanceUpdate, AttendanceWithStudent

router = APIRouter(
    prefix="/api/attendance",
    tags=["attendance"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=List[AttendanceWithStudent])
async def list_attendance(
    att_date: Optional[date] = Query(None, alias="date", description="Attendance date"),
    grade: Optional[str] = Query(None),
    section: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> List[AttendanceWithStudent]:
    """Attendance with the student embedded. Newest date first, then by first name."""
    return await service.list_attendance(db, att_date, grade, section)


@router.post("", response_model=AttendanceResponse, status_code=status.HTTP_201_CREATED)
async def create_attendance(
    payload: AttendanceCreate,
    db: AsyncSession = Depends(get_db),
) -> AttendanceResponse:
    try:
        return await service.create_attendance(db, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("/{attendance_id}", response_model=AttendanceResponse)
async def update_attendance(
    attendance_id: UUID,
    payload: AttendanceUpdate,
    db: AsyncSession = Depends(get_db),
) -> AttendanceResponse:
    try:
        return await service.update_attendance(db, attendance_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
