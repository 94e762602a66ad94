import logging
from typing import Any, Dict, Optional

from app.core.exceptions import NotFoundError, StoreError, ValidationError
from app.modules.accounts.store import AccountStore
from app.modules.profiles.models import UPDATABLE_PROFILE_FIELDS
from app.modules.profiles.schemas import Profile, ProfileUpdate
from app.modules.profiles.store import ProfileStore

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, accounts: AccountStore, profiles: ProfileStore):
        self.accounts = accounts
        self.profiles = profiles

    def get_profile(self, email: str) -> Profile:
        profile = self.profiles.find_by_email(email)
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile

    def update_profile_picture(
        self, email: str, picture_url: str, image_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """Set the picture on both the account and the profile.

        The two writes are independent: if the profile write fails after the
        account write, the account keeps the new picture and the error is raised.
        """
        if not email or not picture_url:
            raise ValidationError("Email and pictureUrl are required")

        account_updated = self.accounts.update_picture(email, picture_url)
        try:
            profile = self.profiles.update_fields(email, {"picture": picture_url})
        except StoreError:
            logger.error(
                f"Profile picture update failed for {email}; "
                f"account picture already updated: {bool(account_updated)}"
            )
            raise
        if not account_updated and profile is None:
            raise NotFoundError("User not found")
        if not account_updated or profile is None:
            logger.warning(
                f"Picture for {email} updated on one side only "
                f"(account: {bool(account_updated)}, profile: {profile is not None})"
            )

        return {
            "email": email,
            "picture": picture_url,
            "unsplashImageId": image_id,
            "accountUpdated": bool(account_updated),
            "profileUpdated": profile is not None,
        }

    def update_profile(self, update: ProfileUpdate) -> Profile:
        """Partial update: fields left out (or sent as null) are not touched"""
        if not update.email:
            raise ValidationError("Email is required")
        fields = {
            name: value
            for name, value in update.model_dump(include=set(UPDATABLE_PROFILE_FIELDS)).items()
            if value is not None
        }
        if not fields:
            raise ValidationError("No profile fields to update")

        profile = self.profiles.update_fields(update.email, fields)
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile
