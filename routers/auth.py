from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from core import auth_provider
from core.auth_errors import get_auth_error_message
from core.config import settings
from core.errors import AuthError
from core.logging_config import logger
from core.redirect_policy import classify, navigation_for, route_for, status_info
from dependencies.auth import get_current_session
from models.enums import SessionState, role_label as describe_role
from models.session import ResolvedSession


router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


# ============================================================
# MODELS
# ============================================================
class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class SessionResponse(BaseModel):
    session: ResolvedSession
    state: SessionState
    route: str
    role_label: str
    status: dict


class RedirectDecision(BaseModel):
    state: SessionState
    route: str
    navigate_to: Optional[str] = None


class ForgotPasswordRequest(BaseModel):
    email: str


class VerifyResetCodeRequest(BaseModel):
    code: str


class VerifyResetCodeResponse(BaseModel):
    email: str
    reset_token: str


class ConfirmResetRequest(BaseModel):
    reset_token: str
    new_password: str


def validate_new_password(password: str) -> Optional[str]:
    if len(password) < 6:
        return "Password must be at least 6 characters long"
    if len(password) > 128:
        return "Password must be less than 128 characters"
    return None


# ============================================================
# LOGIN (SUPABASE AUTH)
# ============================================================
@router.post("/login", response_model=TokenResponse, summary="Authenticate user")
def login(payload: LoginRequest):
    email = payload.email.strip().lower()

    try:
        token = auth_provider.sign_in(email, payload.password)
    except AuthError as e:
        raise HTTPException(status_code=401, detail=get_auth_error_message(e))

    return TokenResponse(access_token=token)


# ============================================================
# SESSION + REDIRECT POLICY
# ============================================================
@router.get("/session", response_model=SessionResponse, summary="Resolved session and its state")
def read_session(session: ResolvedSession = Depends(get_current_session)):
    """
    Safe to poll: an unauthenticated or not-yet-provisioned caller gets a
    state back, never an error.
    """
    state = classify(session)
    return SessionResponse(
        session=session,
        state=state,
        route=route_for(state),
        role_label=describe_role(session.role),
        status=status_info(state),
    )


@router.get("/redirect", response_model=RedirectDecision, summary="Where a guarded page must navigate")
def read_redirect(
    current_path: str = Query("/", description="Path of the page asking"),
    session: ResolvedSession = Depends(get_current_session),
):
    state = classify(session)
    return RedirectDecision(
        state=state,
        route=route_for(state),
        navigate_to=navigation_for(session, current_path),
    )


# ============================================================
# PASSWORD RESET
# ============================================================
@router.post("/forgot-password", summary="Send a password reset email")
def forgot_password(payload: ForgotPasswordRequest):
    email = payload.email.strip().lower()
    redirect_to = f"{settings.FRONTEND_URL.rstrip('/')}/reset-password"

    try:
        auth_provider.send_password_reset(email, redirect_to)
    except AuthError as e:
        raise HTTPException(status_code=400, detail=get_auth_error_message(e))

    return {
        "success": True,
        "message": "Password reset email sent. Please check your inbox.",
    }


@router.post("/verify-reset-code", response_model=VerifyResetCodeResponse, summary="Verify a reset link code")
def verify_reset_code(payload: VerifyResetCodeRequest):
    try:
        email, reset_token = auth_provider.verify_password_reset_code(payload.code)
    except AuthError as e:
        raise HTTPException(status_code=400, detail=get_auth_error_message(e))

    return VerifyResetCodeResponse(email=email, reset_token=reset_token)


@router.post("/confirm-reset", summary="Set a new password")
def confirm_reset(payload: ConfirmResetRequest):
    problem = validate_new_password(payload.new_password)
    if problem:
        raise HTTPException(status_code=400, detail=problem)

    try:
        auth_provider.confirm_password_reset(payload.reset_token, payload.new_password)
    except AuthError as e:
        logger.warning(f"Password reset failed: {e.code}")
        raise HTTPException(status_code=400, detail=get_auth_error_message(e))

    return {"success": True, "message": "Password reset successfully!"}
