import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from app.core.exceptions import ConflictError, StoreError
from app.database.supabase_client import unique_violation_column
from app.modules.profiles.schemas import Profile

logger = logging.getLogger(__name__)


class ProfileStore:
    """Owns the profile collection, keyed by the same email as the account."""

    def __init__(self, supabase: Client, table: str = "profile"):
        self.supabase = supabase
        self.table = table

    def _query(self):
        return self.supabase.table(self.table)

    def exists(self, email: str) -> bool:
        try:
            result = self._query()\
                .select("email")\
                .eq("email", email)\
                .limit(1)\
                .execute()
        except Exception as e:
            logger.error(f"Profile lookup failed for {email}: {e}")
            raise StoreError("Database error while checking profile") from e
        return bool(result.data)

    def insert(self, profile: Profile) -> None:
        try:
            result = self._query().insert(profile.model_dump()).execute()
        except Exception as e:
            if unique_violation_column(e) is not None:
                raise ConflictError("profile exists") from e
            logger.error(f"Profile insert failed for {profile.email}: {e}")
            raise StoreError("Failed to create profile") from e
        if not result.data:
            raise StoreError("Failed to create profile")

    def find_by_email(self, email: str) -> Optional[Profile]:
        try:
            result = self._query()\
                .select("*")\
                .eq("email", email)\
                .limit(1)\
                .execute()
        except Exception as e:
            logger.error(f"Profile fetch failed for {email}: {e}")
            raise StoreError("Database error while fetching profile") from e
        if not result.data:
            return None
        return Profile(**result.data[0])

    def update_fields(self, email: str, fields: Dict[str, Any]) -> Optional[Profile]:
        """Overwrite only the given fields. Returns None when no profile matched."""
        try:
            result = self._query()\
                .update(fields)\
                .eq("email", email)\
                .execute()
        except Exception as e:
            logger.error(f"Profile update failed for {email}: {e}")
            raise StoreError("Failed to update profile") from e
        if not result.data:
            return None
        return Profile(**result.data[0])

    def delete_by_email(self, email: str) -> int:
        try:
            result = self._query()\
                .delete()\
                .eq("email", email)\
                .execute()
        except Exception as e:
            logger.error(f"Profile delete failed for {email}: {e}")
            raise StoreError("Failed to delete profile") from e
        return len(result.data or [])

    def count_by_email(self, email: str) -> int:
        try:
            result = self._query()\
                .select("email", count="exact")\
                .eq("email", email)\
                .execute()
        except Exception as e:
            raise StoreError("Database error while counting profiles") from e
        if result.count is not None:
            return result.count
        return len(result.data or [])

    def list_all(self) -> List[Profile]:
        try:
            result = self._query().select("*").execute()
        except Exception as e:
            logger.error(f"Profile listing failed: {e}")
            raise StoreError("Failed to list profiles") from e
        return [Profile(**row) for row in result.data or []]
