import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, Optional

from app.core.exceptions import AppError, AuthenticationError, StoreError, ValidationError, ConflictError
from app.core.security import hash_password, verify_password
from app.modules.accounts.schemas import Account
from app.modules.accounts.store import AccountStore
from app.modules.pictures.provider import ProfilePictureProvider
from app.modules.profiles.schemas import Profile
from app.modules.profiles.store import ProfileStore

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
INVALID_CREDENTIALS = "Invalid email or password"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RegistrationOutcome(str, Enum):
    SUCCESS = "success"
    PARTIAL_FAILURE_ROLLED_BACK = "partial_failure_rolled_back"
    PARTIAL_FAILURE_ROLLBACK_FAILED = "partial_failure_rollback_failed"


@dataclass
class RegistrationResult:
    outcome: RegistrationOutcome
    message: str
    data: Optional[Dict[str, Any]] = None

    @property
    def success(self) -> bool:
        return self.outcome is RegistrationOutcome.SUCCESS


class RegistrationService:
    """Signup as a two-step write: account first, then profile.

    There is no transaction. If the profile insert fails the account is deleted
    again; a failed delete is logged and left in place, never retried.
    """

    def __init__(
        self,
        accounts: AccountStore,
        profiles: ProfileStore,
        pictures: ProfilePictureProvider,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.accounts = accounts
        self.profiles = profiles
        self.pictures = pictures
        self.clock = clock

    @staticmethod
    def validate(email: str, username: str, password: str) -> None:
        if not email or not username or not password:
            raise ValidationError("Email, username and password are required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    def register(self, email: str, username: str, password: str) -> RegistrationResult:
        self.validate(email, username, password)

        # check-then-insert: a concurrent signup can slip between these and the
        # insert; the unique constraints on the table turn that into a conflict
        if self.accounts.exists(email):
            raise ConflictError("email exists")
        if self.accounts.exists_by_username(username):
            raise ConflictError("username exists")

        choice = self.pictures.fetch_profile_picture()
        account = Account(
            email=email,
            username=username,
            password_hash=hash_password(password),
            created_at=self.clock(),
            last_login_at=None,
            auth_method="local",
            picture=choice.url,
            email_verified=False,
        )
        self.accounts.insert(account)

        profile = Profile(email=email, username=username, picture=choice.url)
        try:
            self.profiles.insert(profile)
        except AppError as e:
            logger.error(f"Profile insert failed for {email}, rolling back account: {e.message}")
            return self._roll_back(email)

        logger.info(f"Registered {email} (fallback picture: {choice.used_fallback})")
        return RegistrationResult(
            outcome=RegistrationOutcome.SUCCESS,
            message="User registered successfully",
            data={
                "email": email,
                "username": username,
                "authMethod": account.auth_method,
                "picture": choice.url,
            },
        )

    def _roll_back(self, email: str) -> RegistrationResult:
        try:
            deleted = self.accounts.delete_by_email(email)
        except StoreError as e:
            logger.error(f"Rollback failed, account {email} left without profile: {e.message}")
            deleted = None
        if not deleted:
            if deleted == 0:
                logger.error(f"Rollback found no account {email} to delete")
            return RegistrationResult(
                outcome=RegistrationOutcome.PARTIAL_FAILURE_ROLLBACK_FAILED,
                message="Failed to create user profile; account cleanup failed",
            )
        logger.info(f"Rolled back account {email}")
        return RegistrationResult(
            outcome=RegistrationOutcome.PARTIAL_FAILURE_ROLLED_BACK,
            message="Failed to create user profile",
        )


class AuthService:
    def __init__(
        self,
        accounts: AccountStore,
        profiles: ProfileStore,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.accounts = accounts
        self.profiles = profiles
        self.clock = clock

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Check credentials and return the account joined with its profile.

        Unknown email and wrong password raise the same AuthenticationError.
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        account = self.accounts.find_by_email(email)
        if account is None or not verify_password(password, account.password_hash):
            logger.info(f"Failed login for {email}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        now = self.clock()
        try:
            self.accounts.update_last_login(email, now)
        except StoreError as e:
            logger.warning(f"Could not record login time for {email}: {e.message}")

        try:
            profile = self.profiles.find_by_email(email)
        except StoreError as e:
            logger.warning(f"Profile lookup failed during login for {email}: {e.message}")
            profile = None

        logger.info(f"Login for {email}")
        return {
            "email": account.email,
            "username": account.username,
            "lastLogin": now.isoformat(),
            "profile": profile.model_dump(by_alias=True) if profile else {},
        }
