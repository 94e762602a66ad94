"""
Core dependencies: stores built on the process-wide Supabase client
"""

from fastapi import Depends
from supabase import Client

from app.config import settings
from app.database.supabase_client import get_supabase
from app.modules.accounts.store import AccountStore
from app.modules.profiles.store import ProfileStore


def get_account_store(supabase: Client = Depends(get_supabase)) -> AccountStore:
    return AccountStore(supabase, settings.accounts_table)


def get_profile_store(supabase: Client = Depends(get_supabase)) -> ProfileStore:
    return ProfileStore(supabase, settings.profile_table)
