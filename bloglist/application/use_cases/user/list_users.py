# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_registry import UserRegistry
from ...dto.user_dto import UserResponse


class ListUsersUseCase:
    """Use case for listing users together with the blogs they own"""

    def __init__(self, user_registry: UserRegistry) -> None:
        self.user_registry = user_registry

    async def execute(self) -> List[UserResponse]:
        users = await self.user_registry.list()
        return [UserResponse.from_user(user) for user in users]
