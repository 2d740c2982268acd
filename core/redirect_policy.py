# core/redirect_policy.py

"""
Session state machine shared by every guarded page.

classify() maps a ResolvedSession to exactly one SessionState; each state
has one canonical route. Pages call navigation_for() on every render/poll
and navigate only when it returns a route.
"""

from typing import Optional

from models.enums import ORG_ROLE_PREFIX, Role, SessionState
from models.session import ResolvedSession


LOGIN_ROUTE = "/"
SETUP_STATUS_ROUTE = "/setup-status"
SUPER_ADMIN_DASHBOARD_ROUTE = "/super-admin/dashboard"
ORG_DASHBOARD_ROUTE = "/org/dashboard"


STATE_ROUTES = {
    SessionState.UNAUTHENTICATED: LOGIN_ROUTE,
    SessionState.PROVISIONING: SETUP_STATUS_ROUTE,
    SessionState.PENDING_ACTIVATION: SETUP_STATUS_ROUTE,
    SessionState.ACTIVE_SUPER_ADMIN: SUPER_ADMIN_DASHBOARD_ROUTE,
    SessionState.ACTIVE_ORG: ORG_DASHBOARD_ROUTE,
    SessionState.UNKNOWN_ROLE: SETUP_STATUS_ROUTE,
}

# Dashboard states own a whole section of pages, not just their landing route
STATE_SECTIONS = {
    SessionState.ACTIVE_SUPER_ADMIN: "/super-admin/",
    SessionState.ACTIVE_ORG: "/org/",
}


STATUS_INFO = {
    SessionState.UNAUTHENTICATED: {
        "status": "error",
        "title": "Authentication Required",
        "description": "Please log in to access the system.",
    },
    SessionState.PROVISIONING: {
        "status": "pending",
        "title": "Account Setup in Progress",
        "description": "Your account is being created. Please wait a moment and refresh the page.",
    },
    SessionState.PENDING_ACTIVATION: {
        "status": "inactive",
        "title": "Account Pending Activation",
        "description": "Your account has been created but needs to be activated by an administrator.",
    },
    SessionState.UNKNOWN_ROLE: {
        "status": "inactive",
        "title": "Unrecognized Role",
        "description": "Your account role is not recognized. Please contact your administrator.",
    },
    SessionState.ACTIVE_SUPER_ADMIN: {
        "status": "active",
        "title": "Account Active",
        "description": "Your account is active and ready to use.",
    },
    SessionState.ACTIVE_ORG: {
        "status": "active",
        "title": "Account Active",
        "description": "Your account is active and ready to use.",
    },
}


def is_super_admin(session: ResolvedSession) -> bool:
    # Either signal grants super-admin; the legacy flag wins over an org role.
    return session.role == Role.SUPER_ADMIN.value or session.is_super_admin_flag


def is_org_role(role: Optional[str]) -> bool:
    # Prefix match: ORG_ roles added to the store later still reach the org area.
    return bool(role) and role.startswith(ORG_ROLE_PREFIX)


def classify(session: Optional[ResolvedSession]) -> SessionState:
    """
    Map a session to its state. ACTIVE_ORG is parameterized by session.role.
    Order matters: the super-admin check runs before the org-role check.
    """
    if session is None or session.unauthenticated or not session.principal_id:
        return SessionState.UNAUTHENTICATED

    if session.profile is None:
        return SessionState.PROVISIONING

    if not session.active:
        return SessionState.PENDING_ACTIVATION

    if is_super_admin(session):
        return SessionState.ACTIVE_SUPER_ADMIN

    if is_org_role(session.role):
        return SessionState.ACTIVE_ORG

    return SessionState.UNKNOWN_ROLE


def route_for(state: SessionState) -> str:
    return STATE_ROUTES[state]


def page_belongs_to(state: SessionState, current_path: str) -> bool:
    path = current_path.split("?", 1)[0] or LOGIN_ROUTE
    if path != LOGIN_ROUTE:
        path = path.rstrip("/")

    if path == route_for(state):
        return True

    section = STATE_SECTIONS.get(state)
    return section is not None and path.startswith(section)


def navigation_for(session: Optional[ResolvedSession], current_path: str) -> Optional[str]:
    """
    Route the caller must navigate to, or None to stay on the current page.
    Same session and path always give the same answer, and the answer is
    None once the caller is on the target route.
    """
    state = classify(session)
    if page_belongs_to(state, current_path):
        return None
    return route_for(state)


def status_info(state: SessionState) -> dict:
    return dict(STATUS_INFO[state])
