from uuid import UUID

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    # Not EmailStr: provisioned addresses may use special-use domains such as .local.
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserInfo(BaseModel):
    id: UUID
    email: str
    name: str


class LoginResponse(BaseModel):
    token: str
    user: UserInfo


class TokenIdentity(BaseModel):
    """Claims asserted by a bearer token."""

    id: UUID
    email: str


class CurrentUser(BaseModel):
    """Authenticated identity attached to the request."""

    id: UUID
    email: str
    name: str
