from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from core.auth_provider import get_principal
from core.errors import ConfigError
from core.logging_config import logger
from core.profiles import get_user_profile
from core.redirect_policy import classify
from core.session_resolver import resolve
from models.enums import SessionState
from models.profile import ExternalPrincipal
from models.session import ResolvedSession


# Missing tokens are a state (UNAUTHENTICATED), not a 403
bearer_scheme = HTTPBearer(auto_error=False)


# ============================================================
# AUTH DECODING (Supabase: validates JWT)
# ============================================================
def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[ExternalPrincipal]:
    if not credentials:
        return None
    return get_principal(credentials.credentials)


# ============================================================
# PRINCIPAL + PROFILE → RESOLVED SESSION
# ============================================================
def load_session(principal: Optional[ExternalPrincipal]) -> ResolvedSession:
    """
    Look up the profile and resolve the session. A failing profile store
    (query error or unconfigured client) is treated as "not provisioned
    yet" so callers can keep polling. Rows with NULL columns still resolve.
    """
    if principal is None:
        return resolve(None, None)

    try:
        profile = get_user_profile(principal.id)
    except (HTTPException, ConfigError) as e:
        logger.warning(f"Profile lookup failed for {principal.id}: {e}")
        profile = None

    return resolve(principal, profile)


def get_current_session(
    principal: Optional[ExternalPrincipal] = Depends(get_current_principal),
) -> ResolvedSession:
    return load_session(principal)


# ============================================================
# STATE GUARD
# ============================================================
def requires_state(*allowed_states: SessionState):
    """
    Usage:
        @router.get("/", dependencies=[Depends(requires_state(SessionState.ACTIVE_SUPER_ADMIN))])
    """

    def checker(session: ResolvedSession = Depends(get_current_session)) -> ResolvedSession:
        state = classify(session)
        if state in allowed_states:
            return session

        if state == SessionState.UNAUTHENTICATED:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired authentication token",
                headers={"WWW-Authenticate": "Bearer"},
            )

        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Requires one of: {[s.value for s in allowed_states]}",
        )

    return checker


require_super_admin = requires_state(SessionState.ACTIVE_SUPER_ADMIN)
