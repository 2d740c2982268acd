# routers/organization_requests.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from core import auth_provider
from core import organization_requests as store
from core.auto_reply import AutoReplySettings, get_auto_reply_settings, schedule
from core.config import settings
from core.errors import AuthError
from core.logging_config import logger
from core.profiles import create_user_profile, delete_user_profile
from core.scheduler import enqueue_notification
from dependencies.auth import require_super_admin
from models.enums import RequestStatus, Role
from models.organization_request import (
    OrganizationRequest,
    OrganizationRequestApproved,
    OrganizationRequestCreate,
    OrganizationRequestSubmitted,
)
from models.profile import UserProfile
from models.session import ResolvedSession


router = APIRouter(
    prefix="/organization-requests",
    tags=["Organization Requests"],
)


# -----------------------------------------------------
# 1️⃣ PUBLIC - Submit organization request
# -----------------------------------------------------
@router.post("", response_model=OrganizationRequestSubmitted, summary="Public: Request a new organization")
def submit_request(
    payload: OrganizationRequestCreate,
    auto_reply: AutoReplySettings = Depends(get_auto_reply_settings),
):
    req = store.create_organization_request(payload)

    # A failed auto-reply never fails the submission
    scheduled = False
    try:
        notification = schedule(req, auto_reply.get())
        if notification is not None:
            scheduled = enqueue_notification(notification) is not None
    except Exception as e:
        logger.error(f"Failed to schedule auto-reply for request {req.id}: {e}")

    return OrganizationRequestSubmitted(request_id=req.id, auto_reply_scheduled=scheduled)


# -----------------------------------------------------
# 2️⃣ SUPER ADMIN - List requests (newest first)
# -----------------------------------------------------
@router.get("", response_model=List[OrganizationRequest], summary="Super admin: List organization requests")
def list_requests(
    status: Optional[RequestStatus] = Query(None, description="Filter by status"),
    _: ResolvedSession = Depends(require_super_admin),
):
    return store.list_organization_requests(status)


@router.get("/{request_id}", response_model=OrganizationRequest, summary="Super admin: Get one request")
def get_request(request_id: str, _: ResolvedSession = Depends(require_super_admin)):
    return store.get_organization_request(request_id)


# -----------------------------------------------------
# 3️⃣ SUPER ADMIN - Approve: organization + ORG_ADMIN account
# -----------------------------------------------------
def _discard_partial_approval(org_id: str, admin_user_id: Optional[str]):
    """Undo what a failed approval already wrote so a retry starts clean."""
    if admin_user_id:
        try:
            delete_user_profile(admin_user_id)
        except Exception as e:
            logger.error(f"Cleanup failed for profile {admin_user_id}: {e}")
        try:
            auth_provider.delete_auth_user(admin_user_id)
        except Exception as e:
            logger.error(f"Cleanup failed for auth user {admin_user_id}: {e}")

    try:
        store.delete_organization(org_id)
    except Exception as e:
        logger.error(f"Cleanup failed for organization {org_id}: {e}")


@router.post(
    "/{request_id}/approve",
    response_model=OrganizationRequestApproved,
    summary="Super admin: Approve organization request",
)
def approve_request(request_id: str, session: ResolvedSession = Depends(require_super_admin)):
    req = store.get_pending_request(request_id)
    admin_name = req.contact_name or req.organization_name

    org_id = store.create_organization_from_request(req, created_by=session.principal_id)

    # All-or-nothing: on any failure the org (and account) are removed and
    # the request stays PENDING.
    admin_user_id = None
    try:
        admin_user_id = auth_provider.create_auth_user(
            req.contact_email,
            metadata={"name": admin_name, "org_id": org_id},
        )

        create_user_profile(
            UserProfile(
                id=admin_user_id,
                email=req.contact_email,
                name=admin_name,
                role=Role.ORG_ADMIN.value,
                org_id=org_id,
                active=True,
                created_by=session.principal_id,
            )
        )

        store.set_request_status(request_id, RequestStatus.APPROVED, processed_by=session.principal_id)
    except Exception:
        logger.warning(f"Approval of request {request_id} failed; discarding organization {org_id}")
        _discard_partial_approval(org_id, admin_user_id)
        raise

    # The new admin sets a password through the normal reset flow
    try:
        auth_provider.send_password_reset(
            req.contact_email,
            f"{settings.FRONTEND_URL.rstrip('/')}/reset-password",
        )
    except AuthError as e:
        logger.warning(f"Password setup email failed for {req.contact_email}: {e.code}")

    return OrganizationRequestApproved(
        request_id=request_id,
        organization_id=org_id,
        admin_user_id=admin_user_id,
        admin_email=req.contact_email,
    )


# -----------------------------------------------------
# 4️⃣ SUPER ADMIN - Reject
# -----------------------------------------------------
@router.post("/{request_id}/reject", response_model=OrganizationRequest, summary="Super admin: Reject organization request")
def reject_request(request_id: str, session: ResolvedSession = Depends(require_super_admin)):
    store.get_pending_request(request_id)
    return store.set_request_status(request_id, RequestStatus.REJECTED, processed_by=session.principal_id)
