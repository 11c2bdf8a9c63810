# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_registry import UserRegistry
from ....domain.exceptions import AuthenticationError
from ....core.security import decode_jwt_token
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user from JWT token"""

    def __init__(self, user_registry: UserRegistry) -> None:
        self.user_registry = user_registry

    async def execute(self, token: str) -> UserResponse:
        """
        Get current user from JWT token

        Args:
            token: JWT access token

        Returns:
            UserResponse with user information

        Raises:
            AuthenticationError: If token is invalid or user not found
        """
        try:
            payload = decode_jwt_token(token)
        except ValueError as exception:
            raise AuthenticationError(f"Invalid or expired token: {str(exception)}")

        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise AuthenticationError("Invalid authentication payload: missing user ID")

        user = await self.user_registry.find_by_id(user_id)
        if user is None:
            raise AuthenticationError("User not found")

        return UserResponse(
            id=user.id or "",
            username=user.username,
            name=user.name,
        )
