# models/profile.py

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, field_validator


# -----------------------------------------------------
# AUTH PROVIDER IDENTITY
# -----------------------------------------------------
class ExternalPrincipal(BaseModel):
    """Identity asserted by the auth provider (Supabase Auth user)."""

    id: str
    email: Optional[str] = None
    email_verified: bool = False


# -----------------------------------------------------
# PROFILE STORE ROW (table: user_profiles)
# -----------------------------------------------------
class UserProfile(BaseModel):
    id: str                               # same as the principal id
    email: Optional[str] = None
    name: Optional[str] = None

    # Stored as text; values outside Role (or NULL) are kept so they can
    # be classified as an unknown role rather than rejected.
    role: Optional[str] = None

    org_id: Optional[str] = None
    department: Optional[str] = None
    active: bool = False

    # Legacy flag that grants super-admin access independent of role
    is_super_admin: bool = False

    created_at: Optional[datetime] = None
    created_by: Optional[str] = None

    @field_validator("active", "is_super_admin", mode="before")
    def null_flag_is_false(cls, v):
        # Nullable bool columns: NULL means not set
        return False if v is None else v
