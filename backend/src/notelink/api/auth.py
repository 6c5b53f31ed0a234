"""Authentication API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from ..core.schemas.auth import LoginRequest, LoginResponse, SignupRequest, UserResponse
from ..core.services import AuthService
from ..middleware.auth import get_current_user_id
from ..middleware.rate_limit import enforce_rate_limit
from .dependencies import get_auth_service

router = APIRouter(
    prefix="/auth", tags=["authentication"], dependencies=[Depends(enforce_rate_limit)]
)


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def signup(request: SignupRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Register a new user."""
    return await auth_service.signup(request.username, request.password)


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Login user and get a bearer token."""
    return await auth_service.login(request.username, request.password)


@router.get("/me", response_model=UserResponse)
async def get_current_user(
    current_user_id: UUID = Depends(get_current_user_id),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Get current user profile."""
    return await auth_service.get_user(current_user_id)
