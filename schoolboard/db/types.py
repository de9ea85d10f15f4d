from datetime import date, datetime, timezone
from enum import Enum as PyEnum
from typing import Type

from sqlalchemy import Enum


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def utc_today() -> date:
    """Calendar date in UTC; attendance days are keyed by it."""
    return utcnow().date()


def value_enum(enum_cls: Type[PyEnum], name: str) -> Enum:
    """Enum column that stores member values ("active") instead of member names."""
    return Enum(
        enum_cls,
        name=name,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )
