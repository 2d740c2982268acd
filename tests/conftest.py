# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import os
import sys
import pytest
from datetime import datetime
from fastapi.testclient import TestClient
from unittest.mock import Mock
from typing import Generator

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import create_app
from core.auto_reply import auto_reply_settings
from core.session_resolver import resolve
from dependencies.auth import get_current_session
from models.organization_request import OrganizationRequest
from models.profile import ExternalPrincipal, UserProfile


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application instance."""
    return create_app()


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def principal():
    return ExternalPrincipal(id="uid-123", email="user@example.com", email_verified=True)


def make_profile(**overrides) -> UserProfile:
    data = {
        "id": "uid-123",
        "email": "user@example.com",
        "name": "Test User",
        "role": "ORG_MEMBER",
        "org_id": "org-1",
        "active": True,
        "is_super_admin": False,
    }
    data.update(overrides)
    return UserProfile(**data)


@pytest.fixture
def profile_factory():
    return make_profile


@pytest.fixture
def super_admin_session(principal):
    return resolve(principal, make_profile(role="SUPER_ADMIN", org_id=None))


@pytest.fixture
def org_member_session(principal):
    return resolve(principal, make_profile())


@pytest.fixture
def as_session(app):
    """Override the resolved session for route tests."""

    def _apply(session):
        app.dependency_overrides[get_current_session] = lambda: session

    yield _apply
    app.dependency_overrides = {}


@pytest.fixture
def acme_request():
    return OrganizationRequest(
        id="req-1",
        organization_name="Acme",
        contact_email="a@acme.com",
        contact_name="Acme",
        business_type="Tech",
        country="Not specified",
        created_at=datetime(2024, 1, 1),
    )


@pytest.fixture
def mock_supabase_client():
    """Create a mock Supabase client."""
    mock_client = Mock()
    mock_table = Mock()
    mock_client.table.return_value = mock_table
    return mock_client


@pytest.fixture(autouse=True)
def reset_auto_reply():
    """Restore the default auto-reply config around each test."""
    auto_reply_settings.reset()
    yield
    auto_reply_settings.reset()
