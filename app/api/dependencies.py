from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from loguru import logger

from app.core.security.auth import verify_token
from app.enums.user_role import UserRole
from app.models.user import User

# auto_error=False: a missing header must answer 401, not 403
jwt_bearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(jwt_bearer)
) -> User:
    """Resolve the user behind the bearer token"""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return await verify_token(credentials.credentials)


async def staff_required(user: User = Depends(get_current_user)) -> User:
    """Any dealership role (admin or agent)"""
    if not await user.has_role(UserRole.admin.value, UserRole.agent.value):
        logger.warning(f"Staff access denied for user: {user.email}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied"
        )
    return user


async def admin_required(user: User = Depends(get_current_user)) -> User:
    """Admin role only"""
    if not await user.has_role(UserRole.admin.value):
        logger.warning(f"Admin access denied for user: {user.email}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required"
        )
    return user
