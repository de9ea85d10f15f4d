from datetime import date
from typing import AsyncGenerator, Awaitable, Callable, Dict

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from schoolboard.auth.models import User
from schoolboard.auth.schemas import TokenIdentity
from schoolboard.auth.security import create_access_token
from schoolboard.auth.services import create_user
from schoolboard.core.enums import AttendanceStatus, BehaviorType, StudentStatus
from schoolboard.core.models import Attendance, BehaviorReport, Student
from schoolboard.db.session import Base, build_engine, get_db, get_session_factory
from schoolboard.main import app

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "StrongPass123"


@pytest.fixture()
async def session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker, None]:
    """Fresh file-backed SQLite database per test, with foreign keys enforced."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture()
async def db_session(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture()
async def client(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the FastAPI app, using the test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture()
async def admin(db_session: AsyncSession) -> User:
    return await create_user(db_session, ADMIN_EMAIL, ADMIN_PASSWORD, "Ada Admin")


@pytest.fixture()
def auth_headers(admin: User) -> Dict[str, str]:
    token = create_access_token(TokenIdentity(id=admin.id, email=admin.email))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def make_student(db_session: AsyncSession) -> Callable[..., Awaitable[Student]]:
    counter = {"n": 0}

    async def _make(**overrides) -> Student:
        counter["n"] += 1
        fields = {
            "student_code": f"STU-{counter['n']:04d}",
            "first_name": f"Student{counter['n']}",
            "last_name": "Test",
            "grade": "5",
            "section": "A",
            "status": StudentStatus.active,
            "parent_name": "Parent Test",
            "parent_email": "parent@example.com",
        }
        fields.update(overrides)
        student = Student(**fields)
        db_session.add(student)
        await db_session.commit()
        await db_session.refresh(student)
        return student

    return _make


@pytest.fixture()
def make_attendance(db_session: AsyncSession) -> Callable[..., Awaitable[Attendance]]:
    async def _make(student: Student, day: date, status: AttendanceStatus = AttendanceStatus.present) -> Attendance:
        record = Attendance(student_id=student.id, date=day, status=status)
        db_session.add(record)
        await db_session.commit()
        await db_session.refresh(record)
        return record

    return _make


@pytest.fixture()
def make_report(db_session: AsyncSession) -> Callable[..., Awaitable[BehaviorReport]]:
    async def _make(student: Student, report_type: BehaviorType, **overrides) -> BehaviorReport:
        fields = {
            "student_id": student.id,
            "teacher_name": "Ms. Rivera",
            "type": report_type,
            "title": "Report",
            "description": "Details",
            "date": date.today(),
        }
        fields.update(overrides)
        report = BehaviorReport(**fields)
        db_session.add(report)
        await db_session.commit()
        await db_session.refresh(report)
        return report

    return _make
