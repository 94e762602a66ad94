from fastapi import APIRouter, Depends
from app.modules.pictures.provider import ProfilePictureProvider, get_picture_provider, MAX_OPTIONS
from typing import Dict, Any

router = APIRouter(tags=["pictures"])


@router.get("/randomProfilePicture")
def random_profile_picture(
    provider: ProfilePictureProvider = Depends(get_picture_provider)
) -> Dict[str, Any]:
    """One placeholder picture URL (raw JSON, no envelope)"""
    seed = provider.new_seed()
    return {"url": provider.placeholder_url(seed), "seed": seed}


@router.get("/profilePictureOptions/{count}")
def profile_picture_options(
    count: int,
    provider: ProfilePictureProvider = Depends(get_picture_provider)
) -> Dict[str, Any]:
    """Placeholder picture sets to choose from (raw JSON, no envelope)"""
    options = provider.picture_options(count)
    return {"count": len(options), "max": MAX_OPTIONS, "options": options}
