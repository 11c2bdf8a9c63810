from typing import TYPE_CHECKING
from ...domain.repositories.user_registry import UserRegistry
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.register_user import RegisterUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers listing and registration"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(
                user_registry=container.get(UserRegistry)
            )
        )

        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_registry=container.get(UserRegistry)
            )
        )
