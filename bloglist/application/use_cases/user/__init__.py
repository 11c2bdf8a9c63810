from .list_users import ListUsersUseCase
from .register_user import RegisterUserUseCase

__all__ = ["ListUsersUseCase", "RegisterUserUseCase"]
