# External package imports
from fastapi import APIRouter, HTTPException, status

# Local application imports
from ..application.dto.auth_dto import UserLoginRequest, TokenResponse
from ..application.use_cases.auth.login_user import LoginUserUseCase
from ..di.container import get_container


router = APIRouter(tags=["authentication"])


@router.post("", response_model=TokenResponse)
async def login_user(request: UserLoginRequest) -> TokenResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        TokenResponse with access token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    token_response = await login_use_case.execute(request)
    if token_response is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password"
        )
    return token_response
