"""User profile and account endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.models.user import User
from app.schemas.user import MessageResponse, ProfileUpdate, UserEnvelope, UserResponse
from app.services import users as user_service

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/profile", response_model=UserEnvelope)
def get_profile(current_user: User = Depends(get_current_user)):
    """Get the current user's profile."""
    return UserEnvelope(user=UserResponse.model_validate(current_user))


@router.put("/profile", response_model=UserEnvelope)
def update_profile(
    profile_data: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Update name, health profile and/or preferences."""
    user = user_service.update_profile(db, current_user, profile_data)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.delete("/account", response_model=MessageResponse)
def delete_account(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Permanently delete the current user's account."""
    user_service.delete_account(db, current_user)
    return MessageResponse(message="Account deleted")
