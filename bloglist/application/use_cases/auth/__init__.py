from .login_user import LoginUserUseCase
from .get_current_user import GetCurrentUserUseCase

__all__ = ["LoginUserUseCase", "GetCurrentUserUseCase"]
