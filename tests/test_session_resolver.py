# tests/test_session_resolver.py

"""
Tests for the session resolver and the profile-lookup wrapper.
"""

import pytest
from fastapi import HTTPException
from unittest.mock import patch

from core.errors import ConfigError
from core.redirect_policy import classify
from core.session_resolver import resolve
from dependencies.auth import load_session
from models.enums import SessionState


def test_no_principal_is_unauthenticated(profile_factory):
    session = resolve(None, profile_factory())

    assert session.unauthenticated is True
    assert session.principal_id is None
    assert session.profile is None
    assert session.role is None


def test_principal_without_profile_is_provisioning(principal):
    session = resolve(principal, None)

    assert session.provisioning is True
    assert session.unauthenticated is False
    assert session.principal_id == "uid-123"
    assert session.email == "user@example.com"
    assert session.role is None


def test_profile_fields_are_copied(principal, profile_factory):
    profile = profile_factory(role="ORG_FINANCE", org_id="org-9", active=False, is_super_admin=True)
    session = resolve(principal, profile)

    assert session.profile == profile
    assert session.role == "ORG_FINANCE"
    assert session.org_id == "org-9"
    assert session.active is False
    assert session.is_super_admin_flag is True
    assert session.provisioning is False


def test_load_session_treats_store_failure_as_provisioning(principal):
    with patch("dependencies.auth.get_user_profile", side_effect=HTTPException(500, "Failed to fetch from user_profiles")):
        session = load_session(principal)

    assert session.provisioning is True
    assert session.profile is None


def test_load_session_without_principal_skips_lookup():
    with patch("dependencies.auth.get_user_profile") as mock_lookup:
        session = load_session(None)

    assert session.unauthenticated is True
    mock_lookup.assert_not_called()


def test_load_session_without_configured_store_is_provisioning(principal):
    with patch("core.supabase_helpers.require_supabase_client", side_effect=ConfigError("SUPABASE_URL missing")):
        session = load_session(principal)

    assert classify(session) == SessionState.PROVISIONING


@pytest.mark.parametrize(
    "row, expected",
    [
        ({"id": "uid-123", "email": None, "role": None, "active": False, "is_super_admin": None}, SessionState.PENDING_ACTIVATION),
        ({"id": "uid-123", "email": "user@example.com", "role": "ORG_MEMBER", "active": None, "is_super_admin": None}, SessionState.PENDING_ACTIVATION),
        ({"id": "uid-123", "email": "user@example.com", "role": None, "active": True, "is_super_admin": None}, SessionState.UNKNOWN_ROLE),
        ({"id": "uid-123", "role": "AUDITOR", "active": True}, SessionState.UNKNOWN_ROLE),
        ({"id": "uid-123", "role": None, "active": True, "is_super_admin": True}, SessionState.ACTIVE_SUPER_ADMIN),
    ],
)
def test_load_session_tolerates_null_profile_columns(principal, row, expected):
    with patch("core.profiles.safe_select", return_value=row):
        session = load_session(principal)

    assert session.profile is not None
    assert session.provisioning is False
    assert classify(session) == expected


def test_load_session_lets_unexpected_errors_propagate(principal):
    with patch("dependencies.auth.get_user_profile", side_effect=RuntimeError("bug")):
        with pytest.raises(RuntimeError):
            load_session(principal)
