"""Authentication API endpoints."""
from fastapi import APIRouter, Depends, status

from app.api.deps import get_auth_service, get_current_user
from app.models.user import User
from app.schemas.auth import AuthResponse, UserLogin, UserSignup
from app.schemas.user import UserEnvelope, UserResponse
from app.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    user_data: UserSignup,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Register a new user and return a token for it."""
    user, token = auth_service.signup(user_data)
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse)
def login(
    user_data: UserLogin,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Login and get a token."""
    user, token = auth_service.login(user_data.email, user_data.password)
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.get("/me", response_model=UserEnvelope)
def me(current_user: User = Depends(get_current_user)):
    """Get the user the bearer token belongs to."""
    return UserEnvelope(user=UserResponse.model_validate(current_user))
