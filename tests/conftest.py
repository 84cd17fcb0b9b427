"""
Shared fixtures for the hive management API tests.

Two kinds of clients are provided:
- ``contract_client``: routes wired to fake services (AsyncMock) so tests
  can assert exactly which collaborator calls a request produces.
- ``integration_client``: routes wired to the real services on top of an
  in-memory SQLite database.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config.database import get_db
from app.main import create_app
from app.modules.hives.dependencies import get_hive_service
from app.modules.hives.interfaces import IHiveService
from app.modules.hive_sections.dependencies import get_hive_section_service
from app.modules.hive_sections.interfaces import IHiveSectionService
from app.shared.database.models import Base


# ============================================================================
# CONTRACT FIXTURES (fake services)
# ============================================================================


@pytest.fixture
def hive_service():
    """Fake hive service recording every awaited call"""
    return AsyncMock(spec=IHiveService)


@pytest.fixture
def hive_section_service():
    """Fake hive section service recording every awaited call"""
    return AsyncMock(spec=IHiveSectionService)


@pytest.fixture
def contract_client(hive_service, hive_section_service):
    app = create_app()
    app.dependency_overrides[get_hive_service] = lambda: hive_service
    app.dependency_overrides[get_hive_section_service] = lambda: hive_section_service

    client = TestClient(app, raise_server_exceptions=False)
    yield client
    app.dependency_overrides.clear()


# ============================================================================
# INTEGRATION FIXTURES (in-memory SQLite)
# ============================================================================


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def integration_client(db_engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app = create_app()
    app.dependency_overrides[get_db] = override_get_db

    client = TestClient(app, raise_server_exceptions=False)
    yield client
    app.dependency_overrides.clear()
