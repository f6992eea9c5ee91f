import pytest
import os
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy_utils import database_exists, create_database, drop_database
from dotenv import load_dotenv

# Load environment variables from .env.test
load_dotenv(".env.test")

from roster.database import build_engine, get_db
from roster.main import app
from roster.models import Base
from roster.schemas.participant import ParticipantCreate
from roster.schemas.program import ProgramCreate
from roster.services.storage import RosterRepository

TEST_DATABASE_URL = os.environ.get(
    "TEST_DATABASE_URL",
    "sqlite:///./test_roster.db"
)


@pytest.fixture(scope="session")
def test_engine():
    """Create a test database and return the engine."""
    if not database_exists(TEST_DATABASE_URL):
        create_database(TEST_DATABASE_URL)

    engine = build_engine(TEST_DATABASE_URL)

    # Create all tables
    Base.metadata.create_all(bind=engine)

    yield engine

    engine.dispose()
    drop_database(TEST_DATABASE_URL)


@pytest.fixture(scope="function")
def test_db(test_engine):
    """Create a fresh session for each test."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.rollback()
        db.close()

        # Clear all tables for isolation between tests
        with test_engine.begin() as connection:
            for table in reversed(Base.metadata.sorted_tables):
                connection.execute(table.delete())


@pytest.fixture
def repo(test_db):
    return RosterRepository(test_db)


@pytest.fixture
def client(test_db):
    """API client bound to the per-test session."""
    def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def monday_soccer(repo):
    return repo.create_program(ProgramCreate(name="Monday Soccer", attendance_weeks=10))


@pytest.fixture
def junior_league(repo):
    return repo.create_program(ProgramCreate(name="Saturday Junior League", attendance_weeks=8))


@pytest.fixture
def alex(repo, monday_soccer):
    return repo.create_participant(ParticipantCreate(
        full_name="Alex Smith",
        parent_email="parent@example.com",
        phone_number="0412 345 678",
        age=9,
        program_ids=[monday_soccer.id]
    ))
