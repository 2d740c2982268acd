# core/auth_provider.py

"""
Thin wrapper around Supabase Auth (GoTrue).

Provider failures surface as AuthError with a normalized code so routers
can translate them with core.auth_errors.get_auth_error_message().
"""

from typing import Optional

from core.auth_errors import to_auth_error
from core.errors import AuthError
from core.logging_config import logger
from core.supabase_client import get_supabase_client, require_supabase_client
from models.profile import ExternalPrincipal


def _principal_from_user(user) -> ExternalPrincipal:
    return ExternalPrincipal(
        id=str(user.id),
        email=getattr(user, "email", None),
        email_verified=bool(getattr(user, "email_confirmed_at", None)),
    )


# ============================================================
# TOKEN → PRINCIPAL
# ============================================================
def get_principal(token: Optional[str]) -> Optional[ExternalPrincipal]:
    """
    Validate an access token. Missing, invalid or expired tokens (and an
    unconfigured client) all mean "no principal".
    """
    if not token:
        return None

    client = get_supabase_client()
    if client is None:
        return None

    try:
        auth_resp = client.auth.get_user(token)
    except Exception as e:
        logger.info(f"Token rejected by auth provider: {type(e).__name__}")
        return None

    if not auth_resp or not auth_resp.user:
        return None
    return _principal_from_user(auth_resp.user)


# ============================================================
# PASSWORD LOGIN
# ============================================================
def sign_in(email: str, password: str) -> str:
    """Returns the access token; raises AuthError on failure."""
    client = require_supabase_client()

    try:
        response = client.auth.sign_in_with_password({"email": email, "password": password})
    except Exception as e:
        logger.warning(f"Login attempt failed for {email}: {type(e).__name__}")
        raise to_auth_error(e)

    if not response.session or not response.session.access_token:
        raise AuthError(code="auth/wrong-password")

    return response.session.access_token


# ============================================================
# PASSWORD RESET FLOW
# ============================================================
def send_password_reset(email: str, redirect_to: str):
    client = require_supabase_client()

    try:
        client.auth.reset_password_for_email(email, {"redirect_to": redirect_to})
    except Exception as e:
        logger.warning(f"Password reset email failed for {email}: {type(e).__name__}")
        raise to_auth_error(e)

    logger.info(f"Password reset email sent: email={email}")


def verify_password_reset_code(code: str) -> tuple[str, str]:
    """
    Exchange the one-time recovery code from the email link.
    Returns (email, reset_token); the reset token authorizes
    confirm_password_reset() since the code itself is single-use.
    """
    if not code:
        raise AuthError(code="auth/missing-action-code")

    client = require_supabase_client()

    try:
        response = client.auth.verify_otp({"token_hash": code, "type": "recovery"})
    except Exception as e:
        raise to_auth_error(e)

    if not response.user or not response.session:
        raise AuthError(code="auth/invalid-action-code")

    return response.user.email, response.session.access_token


def confirm_password_reset(reset_token: str, new_password: str):
    if not reset_token:
        raise AuthError(code="auth/missing-action-code")

    principal = get_principal(reset_token)
    if principal is None:
        raise AuthError(code="auth/expired-action-code")

    client = require_supabase_client()

    try:
        client.auth.admin.update_user_by_id(principal.id, {"password": new_password})
    except Exception as e:
        raise to_auth_error(e)

    logger.info(f"Password reset completed for {principal.email}")


# ============================================================
# ADMIN: ACCOUNT FOR AN APPROVED ORGANIZATION
# ============================================================
def create_auth_user(email: str, metadata: Optional[dict] = None) -> str:
    """Create a passwordless auth user (invite flow); returns its id."""
    client = require_supabase_client()

    try:
        result = client.auth.admin.create_user(
            {
                "email": email,
                "email_confirm": False,
                "user_metadata": metadata or {},
            }
        )
    except Exception as e:
        raise to_auth_error(e)

    return str(result.user.id)


def delete_auth_user(user_id: str):
    client = require_supabase_client()

    try:
        client.auth.admin.delete_user(user_id)
    except Exception as e:
        raise to_auth_error(e)

    logger.info(f"Auth user {user_id} deleted")
