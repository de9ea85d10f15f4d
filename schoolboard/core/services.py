"""Helpers shared by the feature services."""

import logging
from typing import Any, Dict, Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from schoolboard.core.exceptions import StorageError

logger = logging.getLogger(__name__)


def apply_changes(
    obj: Any,
    changes: Dict[str, Any],
    required: Iterable[str] = (),
) -> None:
    """Copy a partial update onto an ORM object; explicit nulls on required columns are rejected."""
    required = set(required)
    for field, value in changes.items():
        if value is None and field in required:
            raise StorageError(f"{field} cannot be null")
        setattr(obj, field, value)


async def commit_or_raise(db: AsyncSession, obj: Any, failure_message: str) -> None:
    """Commit pending changes and refresh ``obj``; constraint violations become StorageError."""
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning("%s: %s", failure_message, e.orig)
        raise StorageError(failure_message) from e
    await db.refresh(obj)
