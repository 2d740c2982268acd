# core/organization_requests.py

"""
Organization-request store (table: organization_requests) plus the
review transitions. Requests are never deleted here.
"""

from typing import List, Optional
from datetime import datetime

from fastapi import HTTPException

from core.logging_config import logger
from core.supabase_helpers import safe_delete, safe_insert, safe_select, safe_update
from models.enums import OrganizationStatus, RequestStatus
from models.organization_request import OrganizationRequest, OrganizationRequestCreate


REQUESTS_TABLE = "organization_requests"
ORGANIZATIONS_TABLE = "organizations"


def create_organization_request(payload: OrganizationRequestCreate) -> OrganizationRequest:
    request_data = {
        **payload.model_dump(),
        "contact_name": payload.contact_name or payload.organization_name,
        "status": RequestStatus.PENDING.value,
        "created_at": datetime.utcnow().isoformat(),
    }

    row = safe_insert(REQUESTS_TABLE, request_data)
    if not row:
        raise HTTPException(500, "Failed to create organization request")

    logger.info(f"Organization request {row['id']} created for {payload.organization_name}")
    return OrganizationRequest(**row)


def list_organization_requests(status: Optional[RequestStatus] = None) -> List[OrganizationRequest]:
    filters = {"status": status.value} if status else None
    rows = safe_select(REQUESTS_TABLE, filters, order_by="created_at", desc=True)
    return [OrganizationRequest(**row) for row in rows]


def get_organization_request(request_id: str) -> OrganizationRequest:
    row = safe_select(REQUESTS_TABLE, {"id": request_id}, single=True)
    if not row:
        raise HTTPException(404, "Organization request not found")
    return OrganizationRequest(**row)


def get_pending_request(request_id: str) -> OrganizationRequest:
    req = get_organization_request(request_id)
    if req.status != RequestStatus.PENDING:
        raise HTTPException(400, "Request already processed")
    return req


def set_request_status(request_id: str, status: RequestStatus, processed_by: str) -> OrganizationRequest:
    """
    Move a PENDING request to APPROVED or REJECTED. The update only matches
    a row that is still PENDING, so a concurrent review gets a 409.
    """
    row = safe_update(
        REQUESTS_TABLE,
        {"id": request_id, "status": RequestStatus.PENDING.value},
        {
            "status": status.value,
            "processed_by": processed_by,
            "processed_at": datetime.utcnow().isoformat(),
        },
    )
    if not row:
        raise HTTPException(409, "Request already processed")

    logger.info(f"Organization request {request_id} marked {status.value} by {processed_by}")
    return OrganizationRequest(**row)


def create_organization_from_request(req: OrganizationRequest, created_by: str) -> str:
    """Create the DRAFT organization for an approved request; returns its id."""
    row = safe_insert(
        ORGANIZATIONS_TABLE,
        {
            "name": req.organization_name,
            "business_type": req.business_type,
            "country": req.country,
            "currency": "USD",
            "timezone": "UTC",
            "created_by": created_by,
            "status": OrganizationStatus.DRAFT.value,
            "contact_email": req.contact_email,
            "contact_phone": req.contact_phone,
            "created_at": datetime.utcnow().isoformat(),
        },
    )
    if not row:
        raise HTTPException(500, "Failed to create organization")
    return row["id"]


def delete_organization(org_id: str):
    safe_delete(ORGANIZATIONS_TABLE, {"id": org_id})
    logger.info(f"Organization {org_id} deleted")
