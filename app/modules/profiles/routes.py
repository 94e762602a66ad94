from fastapi import APIRouter, Depends
from app.core.dependencies import get_account_store, get_profile_store
from app.core.schemas import ApiResponse, ok
from app.modules.accounts.store import AccountStore
from app.modules.profiles.schemas import ProfilePictureUpdate, ProfileUpdate
from app.modules.profiles.service import ProfileService
from app.modules.profiles.store import ProfileStore
from app.core.exceptions import NotFoundError

router = APIRouter(tags=["profiles"])


def get_profile_service(
    accounts: AccountStore = Depends(get_account_store),
    profiles: ProfileStore = Depends(get_profile_store),
) -> ProfileService:
    return ProfileService(accounts, profiles)


@router.put("/updateProfilePicture", response_model=ApiResponse)
def update_profile_picture(
    picture_data: ProfilePictureUpdate,
    service: ProfileService = Depends(get_profile_service)
):
    """Update the picture on both the account and the profile"""
    data = service.update_profile_picture(
        picture_data.email, picture_data.picture_url, picture_data.unsplash_image_id
    )
    return ok("Profile picture updated", data)


@router.get("/userProfile/{email}", response_model=ApiResponse)
def get_user_profile(email: str, service: ProfileService = Depends(get_profile_service)):
    profile = service.get_profile(email)
    return ok("Profile retrieved", {"profile": profile.model_dump(by_alias=True)})


@router.put("/updateUserProfile", response_model=ApiResponse)
def update_user_profile(
    profile_data: ProfileUpdate,
    service: ProfileService = Depends(get_profile_service)
):
    """Partial profile update"""
    profile = service.update_profile(profile_data)
    return ok("Profile updated", {"profile": profile.model_dump(by_alias=True)})


@router.get("/allUserData", response_model=ApiResponse)
def list_profiles(store: ProfileStore = Depends(get_profile_store)):
    profiles = [profile.model_dump(by_alias=True) for profile in store.list_all()]
    return ok("Profiles retrieved", {"profiles": profiles, "count": len(profiles)})


@router.delete("/userProfile/{email}", response_model=ApiResponse)
def delete_user_profile(email: str, store: ProfileStore = Depends(get_profile_store)):
    """Delete the profile only; the account is left as is"""
    deleted = store.delete_by_email(email)
    if not deleted:
        raise NotFoundError("Profile not found")
    return ok("Profile deleted", {"email": email, "deletedCount": deleted})


@router.get("/checkUserProfile/{email}", response_model=ApiResponse)
def check_user_profile(email: str, store: ProfileStore = Depends(get_profile_store)):
    count = store.count_by_email(email)
    return ok("Profile exists" if count else "Profile not found", {"exists": count > 0, "count": count})
