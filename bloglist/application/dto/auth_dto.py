from typing import Optional

from pydantic import BaseModel


class UserLoginRequest(BaseModel):
    """DTO for login request"""
    username: str
    password: str


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    token: str
    username: str
    name: Optional[str] = None
