"""Supabase adapters (GoTrue admin API and PostgREST) over httpx."""

from horizons.infrastructure.supabase.auth_admin_client import SupabaseAuthAdminClient
from horizons.infrastructure.supabase.profile_repository import SupabaseProfileRepository

__all__ = ["SupabaseAuthAdminClient", "SupabaseProfileRepository"]
