# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ..application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ..application.dto.user_dto import UserResponse
from ..domain.exceptions import AuthenticationError
from ..di.container import get_container


# Missing header yields None instead of a 403
security_scheme = HTTPBearer(auto_error=False)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> Optional[UserResponse]:
    """
    FastAPI dependency resolving the acting user when a bearer token is sent

    Args:
        credentials: HTTP Bearer token credentials, if any

    Returns:
        UserResponse for a valid token, None when no token was sent

    Raises:
        HTTPException: If a token was sent but is invalid or its user is gone
    """
    if credentials is None:
        return None

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    try:
        return await get_current_user_use_case.execute(credentials.credentials)
    except AuthenticationError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exception.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
