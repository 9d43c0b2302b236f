"""
Authentication Utility - JWT handling.

Provides:
- JWT token creation/verification
- FastAPI dependencies for protected routes

Passwords are compared as stored (see login); only privileged routes
require a token, and the caller's role is always read from the database.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from vahub.core.config import Settings
from vahub.api.deps import get_repositories, get_app_settings
from vahub.db.repositories import Repositories
from vahub.schemas.schemas import UserRole, UserStatus

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, settings: Settings, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Settings) -> Optional[dict]:
    """Decode and verify JWT token."""
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def token_for_user(user: dict, settings: Settings) -> str:
    return create_access_token({"sub": user["id"], "role": user["role"]}, settings)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    repos: Repositories = Depends(get_repositories, scope="function"),
    settings: Settings = Depends(get_app_settings)
) -> dict:
    """
    FastAPI dependency - Get current authenticated user.

    Usage:
        @router.get("/protected")
        async def route(user: dict = Depends(get_current_user)):
            return user
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    payload = decode_token(credentials.credentials, settings)
    if not payload or not payload.get("sub"):
        raise credentials_exception

    # Verify user still exists
    user = repos.users.get(payload["sub"])
    if not user:
        raise credentials_exception

    return user


async def get_current_admin(user: dict = Depends(get_current_user)) -> dict:
    """Dependency - Require an approved admin account."""
    if user["role"] != UserRole.admin.value:
        raise HTTPException(status_code=403, detail="Admins only")
    if user["status"] == UserStatus.suspended.value:
        raise HTTPException(status_code=403, detail="Account suspended")
    if user["status"] != UserStatus.approved.value:
        raise HTTPException(status_code=403, detail="Account not approved")
    return user
