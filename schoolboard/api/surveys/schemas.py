from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from schoolboard.core.enums import SurveyTarget
from schoolboard.core.schemas import CamelModel


def _clean_questions(value: List[str]) -> List[str]:
    questions = [q.strip() for q in value if q and q.strip()]
    if not questions:
        raise ValueError("At least one question is required")
    return questions


class SurveyCreate(CamelModel):
    """response_count is not accepted here; it always starts at zero."""

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    target: SurveyTarget
    questions: List[str]
    is_active: bool = True
    end_date: Optional[date] = None

    @field_validator("questions")
    @classmethod
    def validate_questions(cls, value: List[str]) -> List[str]:
        return _clean_questions(value)


class SurveyUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    target: Optional[SurveyTarget] = None
    questions: Optional[List[str]] = None
    is_active: Optional[bool] = None
    end_date: Optional[date] = None

    @field_validator("questions")
    @classmethod
    def validate_questions(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is None:
            return value
        return _clean_questions(value)


class SurveyResponse(CamelModel):
    id: UUID
    title: str
    description: Optional[str] = None
    target: SurveyTarget
    questions: List[str]
    is_active: bool
    end_date: Optional[date] = None
    response_count: int
    created_at: datetime
