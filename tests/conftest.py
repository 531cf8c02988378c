# /tests/conftest.py

import pytest
from datetime import datetime, timedelta, timezone
from typing import List, Optional
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from app.db.base import Base
from app.db.database import get_db
from app.core.deps import get_text_generator
from app.core.exceptions import AIUnavailableError
from app.services.database_service import DatabaseService


class StubTextGenerator:
    """
    A deterministic stand-in for the Gemini client. It either returns `text`
    or raises `error`, and records every prompt it receives.
    """

    def __init__(self, text: Optional[str] = None, error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.prompts: List[str] = []

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def db_session():
    """A fresh in-memory SQLite database for EACH test function."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db_service(db_session):
    return DatabaseService(db_session=db_session)


@pytest.fixture
def stub_generator():
    """Unavailable by default; tests set `.text` or `.error` to change that."""
    return StubTextGenerator(error=AIUnavailableError("429 Resource has been exhausted (e.g. check quota)."))


@pytest.fixture
def client(db_session, stub_generator):
    """A TestClient wired to the in-memory database and the stub generator."""
    from app.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_text_generator] = lambda: stub_generator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_performance(db_service):
    """Factory that stores a performance record directly through the DatabaseService."""
    counter = {"n": 0}

    def _make(student_id: str, subject: str, final_exam: float, **overrides):
        counter["n"] += 1
        record = {
            "id": f"perf_test_{counter['n']}",
            "studentId": student_id,
            "subject": subject,
            "attendance": 80,
            "assignmentScore": 80,
            "internalMarks": 80,
            "projectMarks": 80,
            "finalExamMarks": final_exam,
            "predictedGrade": "B",
            "createdAt": datetime(2026, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=counter["n"]),
        }
        record.update(overrides)
        return db_service.add_performance_record(record)

    return _make
