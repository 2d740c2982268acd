# core/profiles.py

from typing import Optional

from core.supabase_helpers import safe_delete, safe_insert, safe_select
from models.profile import UserProfile


PROFILES_TABLE = "user_profiles"


def get_user_profile(principal_id: str) -> Optional[UserProfile]:
    """Profile row for an auth principal, or None if not provisioned yet."""
    row = safe_select(PROFILES_TABLE, {"id": principal_id}, single=True)
    if not row:
        return None
    return UserProfile(**row)


def create_user_profile(profile: UserProfile) -> UserProfile:
    data = profile.model_dump(mode="json")
    row = safe_insert(PROFILES_TABLE, data)
    return UserProfile(**row) if row else profile


def delete_user_profile(principal_id: str):
    safe_delete(PROFILES_TABLE, {"id": principal_id})
