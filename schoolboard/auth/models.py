import uuid

from sqlalchemy import Column, DateTime, String, Text, Uuid

from schoolboard.db.session import Base
from schoolboard.db.types import utcnow


class User(Base):
    """Administrator account. Created by the provisioning script only."""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(Text, nullable=False)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
