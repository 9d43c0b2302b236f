"""
Authentication Routes

POST /auth/register - Register new user (plus empty role profile)
POST /auth/login - Login with email + password
GET /auth/me - Get the user behind a bearer token
"""

import logging

from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.exc import IntegrityError

from vahub.api.deps import get_repositories, get_app_settings
from vahub.core.auth import get_current_user, token_for_user
from vahub.core.config import Settings
from vahub.core.logging_config import sanitize_log_data
from vahub.db.repositories import Repositories
from vahub.schemas.schemas import (
    RegisterRequest, LoginRequest, AuthResponse, UserResponse, UserRole
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    repos: Repositories = Depends(get_repositories, scope="function"),
    settings: Settings = Depends(get_app_settings)
):
    """
    Register a new user account.

    VA and employer accounts get an empty profile row. New accounts start
    in 'pending' status until an admin approves them.
    """
    logger.info("Registration attempt for: %s as %s", request.email, request.role)
    logger.debug("Registration payload: %s", sanitize_log_data(request.model_dump()))

    # Admin accounts come from the seed or scripts/seed_admin.py only
    if request.role == UserRole.admin.value:
        logger.warning("Registration failed for %s: admin role requested", request.email)
        raise HTTPException(status_code=400, detail="Registration failed")

    if repos.users.get_by_email(request.email):
        logger.warning("Registration failed for %s: email already exists", request.email)
        raise HTTPException(status_code=400, detail="Email already exists")

    try:
        user_id = repos.users.create(request.name, request.email, request.password, request.role)
        if request.role == UserRole.va.value:
            repos.va_profiles.create(user_id)
        elif request.role == UserRole.employer.value:
            repos.employer_profiles.create(user_id)
        repos.db.flush()
    except IntegrityError as e:
        logger.warning("Registration error for %s: %s", request.email, e.orig)
        detail = "Email already exists" if "UNIQUE" in str(e.orig).upper() else "Registration failed"
        raise HTTPException(status_code=400, detail=detail)

    user = repos.users.get(user_id)
    logger.info("Registration successful for: %s", request.email)
    return AuthResponse(user=UserResponse(**user), access_token=token_for_user(user, settings))


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    repos: Repositories = Depends(get_repositories, scope="function"),
    settings: Settings = Depends(get_app_settings)
):
    """
    Login with the locally stored password.

    Include the returned token on admin requests: Authorization: Bearer <token>
    """
    logger.info("Login attempt for: %s", request.email)
    user = repos.users.authenticate(request.email, request.password)
    if not user:
        logger.info("Login failed for: %s - Invalid credentials", request.email)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    logger.info("Login successful for: %s", request.email)
    return AuthResponse(user=UserResponse(**user), access_token=token_for_user(user, settings))


@router.get("/me", response_model=UserResponse)
async def get_me(user: dict = Depends(get_current_user)):
    """Get current authenticated user's info."""
    return UserResponse(**user)
