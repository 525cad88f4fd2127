"""User profile API."""

from fastapi import APIRouter, Depends

from quicksos.core.deps import get_user_profile
from quicksos.schemas.profile import ProfileResponse, ProfileUpdate
from quicksos.services.contact_store import UserProfile

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileResponse)
def get_profile(profile: UserProfile = Depends(get_user_profile)):
    """Get the sender name used in the message."""
    return ProfileResponse(name=profile.name)


@router.put("", response_model=ProfileResponse)
def update_profile(data: ProfileUpdate, profile: UserProfile = Depends(get_user_profile)):
    """Set the sender name. Stored as typed."""
    profile.name = data.name
    return ProfileResponse(name=profile.name)
