"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- Sample records for each table
"""

import pytest
from datetime import date
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base
from app.models import CompanyTable, ComputerTable, RealEstateTable  # noqa: F401  Register tables
from app.schemas.records import Company, Computer, RealEstate


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
    Create a fresh database session for each test.
    Tables are created before and dropped after the test.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory(db_session):
    """Session factory bound to the test database, for session_scope()"""
    return TestingSessionLocal


@pytest.fixture
def sample_company():
    """Sample company for testing"""
    return Company(name="Apple Inc.")


@pytest.fixture
def sample_computer():
    """Sample computer (no company) for testing"""
    return Computer(
        name="MacBook Pro",
        introduced=date(2006, 1, 10),
        discontinued=None,
    )


@pytest.fixture
def sample_real_estate():
    """Sample real estate listing for testing"""
    return RealEstate(
        id=1001,
        name="Harbor View Lofts",
        street="12 Wharf Street",
        city="Portland",
        state="ME",
        country="USA",
        zip="04101",
    )
