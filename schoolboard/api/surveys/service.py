import logging
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from schoolboard.core.exceptions import NotFoundError
from schoolboard.core.models import Survey
from schoolboard.core.services import apply_changes, commit_or_raise

from .schemas import SurveyCreate, SurveyResponse, SurveyUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "target", "questions", "is_active")


async def list_surveys(db: AsyncSession) -> List[SurveyResponse]:
    result = await db.execute(select(Survey).order_by(Survey.created_at.desc()))
    return [SurveyResponse.model_validate(s) for s in result.scalars().all()]


async def create_survey(db: AsyncSession, payload: SurveyCreate) -> SurveyResponse:
    survey = Survey(**payload.model_dump(), response_count=0)
    db.add(survey)
    await commit_or_raise(db, survey, "Could not save survey")
    logger.info("Created survey %s", survey.id)
    return SurveyResponse.model_validate(survey)


async def update_survey(db: AsyncSession, survey_id: UUID, payload: SurveyUpdate) -> SurveyResponse:
    survey = await db.get(Survey, survey_id)
    if not survey:
        raise NotFoundError("Survey not found")
    apply_changes(survey, payload.model_dump(exclude_unset=True), REQUIRED_FIELDS)
    await commit_or_raise(db, survey, "Could not save survey")
    return SurveyResponse.model_validate(survey)
