"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Session cookies for authenticated requests
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from solosphere.core.config import settings
from solosphere.core.database import Base, get_db, init_db
from solosphere.core.security import create_access_token
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test and drop it afterwards.
    """
    init_db(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def login():
    """
    Returns a helper that puts a signed session cookie for `email` on a client.
    """
    def _login(test_client, email):
        token = create_access_token({"email": email})
        test_client.cookies.set(settings.COOKIE_NAME, token)
        return test_client

    return _login


@pytest.fixture
def owner_email():
    return "own@x.com"


@pytest.fixture
def bidder_email():
    return "bid@x.com"


@pytest.fixture
def sample_job_data(owner_email):
    """Sample job data for testing"""
    return {
        "title": "Build logo",
        "category": "design",
        "description": "Need a clean logo for a bakery brand.",
        "deadline": "2024-01-01",
        "min_price": 50,
        "max_price": 150,
        "buyer": {"email": owner_email, "name": "Owner", "photo": None},
    }


@pytest.fixture
def sample_bid_data(owner_email, bidder_email):
    """Sample bid data; jobId must be filled in by the test"""
    return {
        "email": bidder_email,
        "buyer": owner_email,
        "title": "Build logo",
        "category": "design",
        "price": 120,
        "comment": "Can deliver in a week.",
        "deadline": "2023-12-20",
    }
