from uuid import UUID
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class UserRef(BaseModel):
    id: UUID
    email: str

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("id")
    def serialize_id(self, v: UUID, _info):
        return str(v)


class UserResponse(UserRef):
    is_active: bool
    roles: list[str]


class TokenResponse(BaseModel):
    access_token: str = Field(..., description="JWT access token")
    token_type: Literal["bearer"] = Field(..., description="Type of the token")
    user_id: str = Field(..., description="ID of the authenticated user")


class TokenPayload(BaseModel):
    """Claims of an access token"""
    sub: UUID
    email: str
    roles: list[str] = []
    iat: int
    exp: int
