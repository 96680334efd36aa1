"""Supabase client singleton"""
from typing import Optional

from supabase import Client, create_client  # type: ignore

from logidesk.config import Settings, get_settings

_supabase_client: Optional[Client] = None


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """Get or create Supabase client singleton"""
    global _supabase_client

    if _supabase_client is None:
        settings = settings or get_settings()
        url = settings.supabase_url
        key = settings.supabase_service_role_key

        if not url or not key:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")

        _supabase_client = create_client(url, key)

    return _supabase_client


def reset_supabase_client():
    """Reset the Supabase client singleton (useful for testing)"""
    global _supabase_client
    _supabase_client = None
