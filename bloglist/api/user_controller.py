# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, HTTPException, status

# Local application imports
from ..application.dto.user_dto import UserRegistrationRequest, UserResponse
from ..application.use_cases.user.list_users import ListUsersUseCase
from ..application.use_cases.user.register_user import RegisterUserUseCase
from ..domain.exceptions import ValidationError
from ..di.container import get_container


router = APIRouter(tags=["users"])


@router.get("", response_model=List[UserResponse])
async def list_users() -> List[UserResponse]:
    """List all users with the blogs they own"""
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)

    return await list_users_use_case.execute()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> UserResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        UserResponse with created user information
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        return await register_use_case.execute(request)
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.message
        )
