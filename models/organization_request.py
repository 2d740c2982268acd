# models/organization_request.py

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field

from models.enums import RequestStatus


# --------------------------------------------------------------------
# PUBLIC REQUEST BODY - What the request-organization form sends
# --------------------------------------------------------------------
class OrganizationRequestCreate(BaseModel):
    organization_name: str = Field(..., min_length=1)
    contact_email: EmailStr
    contact_name: Optional[str] = None
    contact_phone: Optional[str] = None
    business_type: Optional[str] = None
    country: str = "Not specified"
    message: Optional[str] = None


# --------------------------------------------------------------------
# SUPABASE ROW → API RESPONSE (table: organization_requests)
# --------------------------------------------------------------------
class OrganizationRequest(BaseModel):
    id: str

    organization_name: str
    contact_email: str
    contact_name: Optional[str] = None
    contact_phone: Optional[str] = None
    business_type: Optional[str] = None
    country: str = "Not specified"
    message: Optional[str] = None

    # System populated
    status: RequestStatus = RequestStatus.PENDING
    created_at: datetime
    processed_by: Optional[str] = None
    processed_at: Optional[datetime] = None


class OrganizationRequestSubmitted(BaseModel):
    status: str = "success"
    request_id: str
    auto_reply_scheduled: bool = False


class OrganizationRequestApproved(BaseModel):
    status: RequestStatus = RequestStatus.APPROVED
    request_id: str
    organization_id: str
    admin_user_id: str
    admin_email: str
