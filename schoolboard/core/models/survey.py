import uuid

from sqlalchemy import JSON, Boolean, Column, Date, DateTime, Integer, String, Text, Uuid

from schoolboard.core.enums import SurveyTarget
from schoolboard.db.session import Base
from schoolboard.db.types import utcnow, value_enum


class Survey(Base):
    __tablename__ = "surveys"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    target = Column(value_enum(SurveyTarget, "survey_target"), nullable=False)
    questions = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)
    end_date = Column(Date, nullable=True)
    # Maintained server-side; never taken from a client payload.
    response_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
