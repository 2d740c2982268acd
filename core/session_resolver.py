# core/session_resolver.py

from typing import Optional

from models.profile import ExternalPrincipal, UserProfile
from models.session import ResolvedSession


def resolve(
    principal: Optional[ExternalPrincipal],
    profile: Optional[UserProfile],
) -> ResolvedSession:
    """
    Combine the auth principal and the profile row into a ResolvedSession.

    Pure mapping, never raises: the frontend re-polls this while a profile
    is still being provisioned, so "no principal" and "no profile" are
    represented as flags on the result.
    """
    if principal is None:
        return ResolvedSession(unauthenticated=True)

    if profile is None:
        return ResolvedSession(
            principal_id=principal.id,
            email=principal.email,
            provisioning=True,
        )

    return ResolvedSession(
        principal_id=principal.id,
        email=principal.email or profile.email,
        profile=profile,
        role=profile.role,
        is_super_admin_flag=bool(profile.is_super_admin),
        active=bool(profile.active),
        org_id=profile.org_id,
    )
