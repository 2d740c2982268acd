# core/supabase_helpers.py

from typing import Optional

from core.errors import handle_supabase_error
from core.supabase_client import require_supabase_client


def clean_payload(data: dict) -> dict:
    """
    Drop None values and strip strings before writing a row;
    empty strings are dropped as well.
    """
    clean = {}
    for key, value in data.items():
        if isinstance(value, str):
            value = value.strip()
            if value == "":
                continue
        if value is None:
            continue
        clean[key] = value
    return clean


# =================================================================
#  SAFE SELECT / INSERT / UPDATE for the application tables
#  (user_profiles, organization_requests, organizations)
# =================================================================

def safe_select(table: str, filters: Optional[dict] = None, *, single=False, order_by: Optional[str] = None, desc=False):
    client = require_supabase_client()

    try:
        query = client.table(table).select("*")
        for key, val in (filters or {}).items():
            query = query.eq(key, val)
        if order_by:
            query = query.order(order_by, desc=desc)

        result = query.maybe_single().execute() if single else query.execute()
    except Exception as e:
        raise handle_supabase_error(e, f"Failed to fetch from {table}")

    # maybe_single() returns None (not a response) on no rows in recent clients
    if result is None:
        return None if single else []
    return result.data if single else (result.data or [])


def safe_insert(table: str, data: dict) -> Optional[dict]:
    client = require_supabase_client()

    try:
        result = (
            client.table(table)
            .insert(clean_payload(data), returning="representation")
            .execute()
        )
    except Exception as e:
        raise handle_supabase_error(e, f"Failed to insert into {table}")

    return result.data[0] if result.data else None


def safe_update(table: str, filters: dict, data: dict) -> Optional[dict]:
    client = require_supabase_client()

    try:
        query = client.table(table).update(clean_payload(data), returning="representation")
        for key, val in filters.items():
            query = query.eq(key, val)
        result = query.execute()
    except Exception as e:
        raise handle_supabase_error(e, f"Failed to update {table}")

    return result.data[0] if result.data else None


def safe_delete(table: str, filters: dict):
    client = require_supabase_client()

    try:
        query = client.table(table).delete()
        for key, val in filters.items():
            query = query.eq(key, val)
        query.execute()
    except Exception as e:
        raise handle_supabase_error(e, f"Failed to delete from {table}")
