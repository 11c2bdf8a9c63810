# Standard library imports
from typing import Any, Mapping, Union

# Local application imports
from ....domain.repositories.user_registry import UserRegistry
from ...dto.user_dto import UserRegistrationRequest, UserResponse


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_registry: UserRegistry) -> None:
        self.user_registry = user_registry

    async def execute(self, request: Union[UserRegistrationRequest, Mapping[str, Any]]) -> UserResponse:
        """
        Register a new user

        Args:
            request: Registration request with username, optional name and password

        Returns:
            UserResponse with created user information

        Raises:
            ValidationError: If username or password is too short, or the username is taken
        """
        if isinstance(request, UserRegistrationRequest):
            data = request.model_dump()
        else:
            data = dict(request)

        user = await self.user_registry.register(
            username=data.get("username"),
            password=data.get("password"),
            name=data.get("name"),
        )
        return UserResponse.from_user(user)
