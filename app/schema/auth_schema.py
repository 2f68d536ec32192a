from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class Token(BaseModel):
    """Bearer Access Token"""

    access_token: str
    token_type: str


class TokenPayload(BaseModel):
    """Payload for Bearer Access Token"""
    sub: str  # user id
    email: Optional[EmailStr] = None
    name: str
    role: str
    exp: int
    iat: int


class UserRegister(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=8)


class LoginRequest(BaseModel):
    email: str
    password: str
