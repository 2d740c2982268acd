# core/auth_errors.py

"""
Auth error code → user-facing message translation.

Every auth failure that reaches a user goes through get_auth_error_message().
The function is total: any input (an exception, a dict shaped like
{"code": ..., "message": ...}, or None) yields a non-empty string.
"""

from typing import Any, Optional

from core.errors import AuthError


GENERIC_AUTH_MESSAGE = "An unexpected error occurred. Please try again."


# ============================================================
# CODE → MESSAGE TABLE
# ============================================================
AUTH_ERROR_MESSAGES = {
    "auth/user-not-found": "No account found with this email address.",
    "auth/wrong-password": "Incorrect password. Please try again.",
    "auth/invalid-email": "Invalid email address format.",
    "auth/user-disabled": "This account has been disabled. Please contact support.",
    "auth/too-many-requests": "Too many failed attempts. Please try again later.",
    "auth/network-request-failed": "Network error. Please check your connection and try again.",
    "auth/popup-closed-by-user": "Login cancelled by user.",
    "auth/popup-blocked": "Popup blocked by browser. Please allow popups and try again.",
    "auth/cancelled-popup-request": "Login cancelled.",
    "auth/configuration-not-found": "Authentication configuration error. Please contact support.",
    "auth/invalid-api-key": "Invalid API key. Please contact support.",
    "auth/app-not-authorized": "App not authorized for this project. Please contact support.",
    "auth/weak-password": "Password is too weak. Please choose a stronger password.",
    "auth/email-already-in-use": "An account with this email already exists.",
    "auth/operation-not-allowed": "This operation is not allowed. Please contact support.",
    "auth/expired-action-code": "Reset link has expired. Please request a new one.",
    "auth/invalid-action-code": "Invalid or expired reset link. Please request a new one.",
    "auth/missing-action-code": "Missing reset code. Please use the link from your email.",
    "auth/user-token-expired": "Your session has expired. Please sign in again.",
    "auth/requires-recent-login": "Please sign in again to complete this action.",
    "unavailable": "Service temporarily unavailable. Please try again.",
}


# Messages raised by our own flows (not provider codes), matched by substring.
CUSTOM_MESSAGE_MATCHES = [
    (
        "Account not found in system",
        "Account not found in system. Please contact your administrator to create your account first.",
    ),
    (
        "account is inactive",
        "Your account is inactive. Please contact your administrator.",
    ),
    (
        "not properly configured",
        "Authentication service is being configured. Please try again in a few minutes.",
    ),
]


# ============================================================
# SUPABASE (GoTrue) CODES → CANONICAL CODES
# ============================================================
SUPABASE_CODE_ALIASES = {
    "user_not_found": "auth/user-not-found",
    "invalid_credentials": "auth/wrong-password",
    "email_address_invalid": "auth/invalid-email",
    "validation_failed": "auth/invalid-email",
    "user_banned": "auth/user-disabled",
    "over_request_rate_limit": "auth/too-many-requests",
    "over_email_send_rate_limit": "auth/too-many-requests",
    "weak_password": "auth/weak-password",
    "email_exists": "auth/email-already-in-use",
    "user_already_exists": "auth/email-already-in-use",
    "signup_disabled": "auth/operation-not-allowed",
    "email_provider_disabled": "auth/operation-not-allowed",
    "otp_expired": "auth/expired-action-code",
    "bad_code_verifier": "auth/invalid-action-code",
    "flow_state_not_found": "auth/invalid-action-code",
    "flow_state_expired": "auth/expired-action-code",
    "session_expired": "auth/user-token-expired",
    "session_not_found": "auth/user-token-expired",
    "reauthentication_needed": "auth/requires-recent-login",
    "request_timeout": "unavailable",
}


def normalize_auth_code(code: Optional[str]) -> Optional[str]:
    """Map a provider-specific code onto the canonical table (unknown codes pass through)."""
    if not code:
        return None
    return SUPABASE_CODE_ALIASES.get(code, code)


def _read_field(error: Any, name: str) -> str:
    if error is None:
        return ""
    if isinstance(error, dict):
        value = error.get(name)
    else:
        value = getattr(error, name, None)
    return str(value) if value else ""


def get_auth_error_message(error: Any) -> str:
    code = normalize_auth_code(_read_field(error, "code")) or ""
    message = _read_field(error, "message")

    # Plain exceptions carry their text in args, not .message
    if not message and isinstance(error, Exception) and error.args:
        message = str(error.args[0] or "")

    if code in AUTH_ERROR_MESSAGES:
        return AUTH_ERROR_MESSAGES[code]

    for needle, friendly in CUSTOM_MESSAGE_MATCHES:
        if needle in message:
            return friendly

    return message.strip() or GENERIC_AUTH_MESSAGE


def to_auth_error(error: Exception) -> AuthError:
    """Wrap a raw provider exception as an AuthError with a normalized code."""
    if isinstance(error, AuthError):
        return error
    code = normalize_auth_code(getattr(error, "code", None))
    message = getattr(error, "message", None) or (str(error.args[0]) if error.args else None)
    return AuthError(code=code, message=message)
