"""
Provision the database and the administrator account.

Run once per environment with env set:
  ADMIN_EMAIL=admin@school.example
  ADMIN_PASSWORD=YourSecurePassword
  ADMIN_NAME="School Administrator"   (optional)

Creates:
- all tables (if they do not exist)
- users: one administrator (created, or password/name reset if the email exists)
"""
import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

# Import models so every table is registered on Base.metadata.
import schoolboard.core.models  # noqa: F401
from schoolboard.auth.models import User
from schoolboard.auth.security import hash_password
from schoolboard.auth.services import create_user, get_user_by_email
from schoolboard.core.config import settings
from schoolboard.core.logging_config import setup_logging
from schoolboard.db.session import AsyncSessionLocal, Base, engine

logger = logging.getLogger(__name__)


async def create_tables() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables ready.")


async def seed_admin(db: AsyncSession, email: str, password: str, name: str) -> User:
    user = await get_user_by_email(db, email)
    if not user:
        user = await create_user(db, email, password, name)
        logger.info("Created administrator %s", user.email)
        return user

    user.password_hash = hash_password(password)
    user.name = name
    await db.commit()
    logger.info("Updated existing administrator %s", user.email)
    return user


async def main() -> None:
    setup_logging(settings.log_level, settings.log_file)
    await create_tables()

    if not settings.admin_email or not settings.admin_password:
        logger.warning("ADMIN_EMAIL / ADMIN_PASSWORD not set; skipping administrator.")
        return

    async with AsyncSessionLocal() as db:
        try:
            await seed_admin(db, settings.admin_email, settings.admin_password, settings.admin_name)
        except Exception:
            await db.rollback()
            logger.exception("Administrator seed failed")
            raise


if __name__ == "__main__":
    asyncio.run(main())
