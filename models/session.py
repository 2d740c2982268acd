# models/session.py

from typing import Optional
from pydantic import BaseModel, ConfigDict

from models.profile import UserProfile


class ResolvedSession(BaseModel):
    """
    Derived view of "who is asking": auth principal plus profile binding.
    Never persisted. Absence is explicit (None / flags), never an exception.
    """

    model_config = ConfigDict(frozen=True)

    principal_id: Optional[str] = None
    email: Optional[str] = None
    profile: Optional[UserProfile] = None

    # Copied from the profile (None / defaults when absent)
    role: Optional[str] = None
    is_super_admin_flag: bool = False
    active: bool = False
    org_id: Optional[str] = None

    unauthenticated: bool = False
    provisioning: bool = False
