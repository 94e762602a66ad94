import logging
from datetime import datetime
from typing import List, Optional

from supabase import Client

from app.core.exceptions import ConflictError, StoreError
from app.database.supabase_client import unique_violation_column
from app.modules.accounts.models import ACCOUNT_LIST_COLUMNS
from app.modules.accounts.schemas import Account, AccountSummary

logger = logging.getLogger(__name__)


class AccountStore:
    """Owns the accounts collection. Every lookup is an exact match on email."""

    def __init__(self, supabase: Client, table: str = "accounts"):
        self.supabase = supabase
        self.table = table

    def _query(self):
        return self.supabase.table(self.table)

    def _exists(self, column: str, value: str) -> bool:
        try:
            result = self._query()\
                .select("email")\
                .eq(column, value)\
                .limit(1)\
                .execute()
        except Exception as e:
            logger.error(f"Account lookup by {column} failed: {e}")
            raise StoreError("Database error while checking account") from e
        return bool(result.data)

    def exists(self, email: str) -> bool:
        return self._exists("email", email)

    def exists_by_username(self, username: str) -> bool:
        return self._exists("username", username)

    def insert(self, account: Account) -> None:
        try:
            result = self._query().insert(account.model_dump(mode="json")).execute()
        except Exception as e:
            column = unique_violation_column(e)
            if column is not None:
                raise ConflictError("username exists" if column == "username" else "email exists") from e
            logger.error(f"Account insert failed for {account.email}: {e}")
            raise StoreError("Failed to create account") from e
        if not result.data:
            raise StoreError("Failed to create account")

    def find_by_email(self, email: str) -> Optional[Account]:
        try:
            result = self._query()\
                .select("*")\
                .eq("email", email)\
                .limit(1)\
                .execute()
        except Exception as e:
            logger.error(f"Account fetch failed for {email}: {e}")
            raise StoreError("Database error while fetching account") from e
        if not result.data:
            return None
        return Account(**result.data[0])

    def update_last_login(self, email: str, timestamp: datetime) -> None:
        try:
            self._query()\
                .update({"last_login_at": timestamp.isoformat()})\
                .eq("email", email)\
                .execute()
        except Exception as e:
            raise StoreError("Failed to update last login") from e

    def update_picture(self, email: str, picture_url: str) -> int:
        try:
            result = self._query()\
                .update({"picture": picture_url})\
                .eq("email", email)\
                .execute()
        except Exception as e:
            logger.error(f"Account picture update failed for {email}: {e}")
            raise StoreError("Failed to update account picture") from e
        return len(result.data or [])

    def delete_by_email(self, email: str) -> int:
        try:
            result = self._query()\
                .delete()\
                .eq("email", email)\
                .execute()
        except Exception as e:
            logger.error(f"Account delete failed for {email}: {e}")
            raise StoreError("Failed to delete account") from e
        return len(result.data or [])

    def count_by_email(self, email: str) -> int:
        try:
            result = self._query()\
                .select("email", count="exact")\
                .eq("email", email)\
                .execute()
        except Exception as e:
            raise StoreError("Database error while counting accounts") from e
        if result.count is not None:
            return result.count
        return len(result.data or [])

    def list_all(self) -> List[AccountSummary]:
        try:
            result = self._query()\
                .select(ACCOUNT_LIST_COLUMNS)\
                .order("created_at", desc=True)\
                .execute()
        except Exception as e:
            logger.error(f"Account listing failed: {e}")
            raise StoreError("Failed to list accounts") from e
        return [AccountSummary.from_row(row) for row in result.data or []]
