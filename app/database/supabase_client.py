import re
from typing import Optional

from fastapi import Request
from postgrest.exceptions import APIError
from supabase import create_client, Client, ClientOptions
from app.config import Settings


def create_supabase(settings: Settings) -> Client:
    """Build the process-wide client. Called once at startup."""
    return create_client(
        settings.database_url,
        settings.supabase_key,
        options=ClientOptions(schema=settings.db_schema),
    )


def get_supabase(request: Request) -> Client:
    return request.app.state.supabase


UNIQUE_VIOLATION = "23505"


def unique_violation_column(exc: Exception) -> Optional[str]:
    """Return the column named by a Postgres unique violation, or None.

    PostgREST reports e.g. ``Key (username)=(alice) already exists.`` in details.
    """
    if not isinstance(exc, APIError) or exc.code != UNIQUE_VIOLATION:
        return None
    match = re.search(r"Key \((\w+)\)", " ".join(filter(None, [exc.details, exc.message])))
    return match.group(1) if match else ""
