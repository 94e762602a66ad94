from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime


class Account(BaseModel):
    email: str
    username: str
    password_hash: str
    created_at: datetime
    last_login_at: Optional[datetime] = None
    auth_method: str = "local"
    google_id: Optional[str] = None
    picture: Optional[str] = None
    email_verified: bool = False


class AccountSummary(BaseModel):
    email: str
    username: str
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_row(cls, row: dict) -> "AccountSummary":
        return cls(
            email=row["email"],
            username=row["username"],
            created_at=row.get("created_at"),
            last_login=row.get("last_login_at"),
        )
