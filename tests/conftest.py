"""
Shared fixtures: in-memory database, API client and users for every role.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from edusystem.core.security import create_access_token, get_password_hash
from edusystem.db.base import build_engine, get_db
from edusystem.main import app
from edusystem.models import Base, Content, ContentCategory, Material, User, UserRole, UserStatus
from edusystem.schemas.test import QuestionCreate

TEST_PASSWORD = "password123"
# bcrypt is slow; hash once for every fixture user
_PASSWORD_HASH = get_password_hash(TEST_PASSWORD)


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_user(db_session):
    """Factory inserting a user with TEST_PASSWORD."""

    def _create_user(email, role=UserRole.STUDENT, status=UserStatus.ACTIVE, **extra):
        user = User(
            name=email.split("@")[0].title(),
            email=email,
            hashed_password=_PASSWORD_HASH,
            role=role.value,
            status=status.value,
            **extra,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _create_user


@pytest.fixture
def student(create_user):
    return create_user("student@example.com")


@pytest.fixture
def tutor(create_user):
    return create_user("tutor@example.com", UserRole.TUTOR, experience=5, specialty="Physics")


@pytest.fixture
def admin(create_user):
    return create_user("admin@example.com", UserRole.ADMIN, access_key="root-key")


def auth_headers_for(user):
    token = create_access_token(subject=user.id, role=user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def student_headers(student):
    return auth_headers_for(student)


@pytest.fixture
def tutor_headers(tutor):
    return auth_headers_for(tutor)


@pytest.fixture
def admin_headers(admin):
    return auth_headers_for(admin)


@pytest.fixture
def create_material(db_session):
    """Factory inserting a material authored by the given user."""

    def _create_material(author, text="Newton's laws of motion", category=ContentCategory.SCIENCE):
        material = Material(
            user_id=author.id,
            category=category.value,
            creation_date=datetime.now(timezone.utc),
            content=Content(text=text, media_files=["https://example.com/video.mp4"]),
        )
        db_session.add(material)
        db_session.commit()
        db_session.refresh(material)
        return material

    return _create_material


@pytest.fixture
def material(create_material, tutor):
    return create_material(tutor)


def make_questions(count, answer="correctanswer", options=None):
    return [
        QuestionCreate(
            question_text=f"Question {number}",
            options=list(options or []),
            answer_text=answer,
        )
        for number in range(1, count + 1)
    ]
