from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolboard.auth.dependencies import get_current_user
from schoolboard.core.exceptions import ServiceError
from schoolboard.db.session import get_db

from . import service
from .schemas import SurveyCreate, SurveyResponse, SurveyUpdate

router = APIRouter(
    prefix="/api/surveys",
    tags=["surveys"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=List[SurveyResponse])
async def list_surveys(db: AsyncSession = Depends(get_db)) -> List[SurveyResponse]:
    return await service.list_surveys(db)


@router.post("", response_model=SurveyResponse, status_code=status.HTTP_201_CREATED)
async def create_survey(
    payload: SurveyCreate,
    db: AsyncSession = Depends(get_db),
) -> SurveyResponse:
    try:
        return await service.create_survey(db, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("/{survey_id}", response_model=SurveyResponse)
async def update_survey(
    survey_id: UUID,
    payload: SurveyUpdate,
    db: AsyncSession = Depends(get_db),
) -> SurveyResponse:
    try:
        return await service.update_survey(db, survey_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
